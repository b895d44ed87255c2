"""
Groups API Endpoints.

REST API endpoints for managing the folders that hold notes.
"""

from fastapi import APIRouter

from notefolio.backend.core.dependencies import CurrentUserId, DbSession
from notefolio.backend.schemas.base import ApiResponse, MessageResponse
from notefolio.backend.schemas.group import (
    GroupCreate,
    GroupDetailResponse,
    GroupResponse,
    GroupUpdate,
)
from notefolio.backend.services.group import GroupService

router = APIRouter()


@router.post(
    "",
    response_model=ApiResponse[GroupResponse],
    status_code=201,
    summary="Create a group",
)
async def create_group(
    data: GroupCreate,
    db: DbSession,
    user_id: CurrentUserId,
) -> ApiResponse[GroupResponse]:
    """Create a new group."""
    service = GroupService(db)
    group = await service.create(user_id, data)
    return ApiResponse(data=GroupResponse.model_validate(group))


@router.get(
    "",
    response_model=ApiResponse[list[GroupResponse]],
    summary="List groups",
    description="List your groups, newest first, each with its note count.",
)
async def list_groups(
    db: DbSession,
    user_id: CurrentUserId,
) -> ApiResponse[list[GroupResponse]]:
    """List groups, newest first."""
    service = GroupService(db)
    groups = await service.find_all(user_id)
    return ApiResponse(data=[GroupResponse.model_validate(g) for g in groups])


@router.get(
    "/{group_id}",
    response_model=ApiResponse[GroupDetailResponse],
    summary="Get a group",
    description="Get a group with its notes, newest first.",
)
async def get_group(
    group_id: str,
    db: DbSession,
    user_id: CurrentUserId,
) -> ApiResponse[GroupDetailResponse]:
    """Get a group with its notes."""
    service = GroupService(db)
    group = await service.find_one(group_id, user_id)
    return ApiResponse(data=GroupDetailResponse.model_validate(group))


@router.patch(
    "/{group_id}",
    response_model=ApiResponse[GroupResponse],
    summary="Update a group",
)
async def update_group(
    group_id: str,
    data: GroupUpdate,
    db: DbSession,
    user_id: CurrentUserId,
) -> ApiResponse[GroupResponse]:
    """Update a group."""
    service = GroupService(db)
    group = await service.update(group_id, user_id, data)
    return ApiResponse(data=GroupResponse.model_validate(group))


@router.delete(
    "/{group_id}",
    response_model=ApiResponse[MessageResponse],
    summary="Delete a group",
    description="Permanently delete a group and every note in it.",
)
async def delete_group(
    group_id: str,
    db: DbSession,
    user_id: CurrentUserId,
) -> ApiResponse[MessageResponse]:
    """Delete a group and its notes."""
    service = GroupService(db)
    return ApiResponse(data=await service.remove(group_id, user_id))
