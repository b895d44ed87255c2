"""
Auth API Endpoints.

Account registration and login. Both return a bearer access token.
"""

from fastapi import APIRouter

from notefolio.backend.core.dependencies import DbSession
from notefolio.backend.schemas.auth import LoginRequest, RegisterRequest, TokenResponse
from notefolio.backend.schemas.base import ApiResponse
from notefolio.backend.services.auth import AuthService

router = APIRouter()


@router.post(
    "/register",
    response_model=ApiResponse[TokenResponse],
    status_code=201,
    summary="Register",
    description="Create an account and receive an access token.",
)
async def register(
    data: RegisterRequest,
    db: DbSession,
) -> ApiResponse[TokenResponse]:
    """Register a new user account."""
    service = AuthService(db)
    return ApiResponse(data=await service.register(data))


@router.post(
    "/login",
    response_model=ApiResponse[TokenResponse],
    summary="Log in",
    description="Exchange email and password for an access token.",
)
async def login(
    data: LoginRequest,
    db: DbSession,
) -> ApiResponse[TokenResponse]:
    """Log in with email and password."""
    service = AuthService(db)
    return ApiResponse(data=await service.login(data))
