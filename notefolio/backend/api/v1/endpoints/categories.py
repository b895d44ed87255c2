"""
Categories API Endpoints.

REST API endpoints for managing the tags attached to notes.
"""

from fastapi import APIRouter

from notefolio.backend.core.dependencies import CurrentUserId, DbSession
from notefolio.backend.schemas.base import ApiResponse, MessageResponse
from notefolio.backend.schemas.category import (
    CategoryCreate,
    CategoryDetailResponse,
    CategoryResponse,
    CategoryUpdate,
)
from notefolio.backend.services.category import CategoryService

router = APIRouter()


@router.post(
    "",
    response_model=ApiResponse[CategoryResponse],
    status_code=201,
    summary="Create a category",
    description="Create a category. Names are unique per user.",
)
async def create_category(
    data: CategoryCreate,
    db: DbSession,
    user_id: CurrentUserId,
) -> ApiResponse[CategoryResponse]:
    """Create a new category."""
    service = CategoryService(db)
    category = await service.create(user_id, data)
    return ApiResponse(data=CategoryResponse.model_validate(category))


@router.get(
    "",
    response_model=ApiResponse[list[CategoryResponse]],
    summary="List categories",
    description="List your categories ordered by name, each with its note count.",
)
async def list_categories(
    db: DbSession,
    user_id: CurrentUserId,
) -> ApiResponse[list[CategoryResponse]]:
    """List categories ordered by name."""
    service = CategoryService(db)
    categories = await service.find_all(user_id)
    return ApiResponse(data=[CategoryResponse.model_validate(c) for c in categories])


@router.get(
    "/{category_id}",
    response_model=ApiResponse[CategoryDetailResponse],
    summary="Get a category",
    description="Get a category with the notes it tags.",
)
async def get_category(
    category_id: str,
    db: DbSession,
    user_id: CurrentUserId,
) -> ApiResponse[CategoryDetailResponse]:
    """Get a category with its notes."""
    service = CategoryService(db)
    category = await service.find_one(category_id, user_id)
    return ApiResponse(data=CategoryDetailResponse.model_validate(category))


@router.patch(
    "/{category_id}",
    response_model=ApiResponse[CategoryResponse],
    summary="Update a category",
)
async def update_category(
    category_id: str,
    data: CategoryUpdate,
    db: DbSession,
    user_id: CurrentUserId,
) -> ApiResponse[CategoryResponse]:
    """Update a category."""
    service = CategoryService(db)
    category = await service.update(category_id, user_id, data)
    return ApiResponse(data=CategoryResponse.model_validate(category))


@router.delete(
    "/{category_id}",
    response_model=ApiResponse[MessageResponse],
    summary="Delete a category",
    description="Delete a category and detach it from all notes.",
)
async def delete_category(
    category_id: str,
    db: DbSession,
    user_id: CurrentUserId,
) -> ApiResponse[MessageResponse]:
    """Delete a category."""
    service = CategoryService(db)
    return ApiResponse(data=await service.remove(category_id, user_id))
