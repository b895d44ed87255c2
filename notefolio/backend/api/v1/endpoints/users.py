"""
Users API Endpoints.
"""

from fastapi import APIRouter

from notefolio.backend.core.dependencies import CurrentUserId, DbSession
from notefolio.backend.schemas.auth import UserResponse
from notefolio.backend.schemas.base import ApiResponse
from notefolio.backend.services.auth import AuthService

router = APIRouter()


@router.get(
    "/me",
    response_model=ApiResponse[UserResponse],
    summary="Current user",
    description="Get the account behind the access token.",
)
async def get_me(
    db: DbSession,
    user_id: CurrentUserId,
) -> ApiResponse[UserResponse]:
    """Get the authenticated user."""
    service = AuthService(db)
    user = await service.get_user(user_id)
    return ApiResponse(data=UserResponse.model_validate(user))
