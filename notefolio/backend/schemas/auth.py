"""
Auth Schemas.

Registration, login, and current-user payloads.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"


class RegisterRequest(BaseModel):
    """Schema for registering a new user."""

    email: str = Field(
        ...,
        max_length=255,
        pattern=EMAIL_PATTERN,
        examples=["ada@example.com"],
    )
    password: str = Field(..., min_length=6, max_length=128)
    name: str | None = Field(default=None, max_length=100)


class LoginRequest(BaseModel):
    """Schema for logging in."""

    email: str = Field(..., max_length=255)
    password: str = Field(..., min_length=1, max_length=128)


class TokenResponse(BaseModel):
    """Access token issued on register/login."""

    access_token: str
    token_type: str = "bearer"


class UserResponse(BaseModel):
    """Schema for user in API responses."""

    id: str
    email: str
    name: str | None = None
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)
