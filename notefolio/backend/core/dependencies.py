"""
FastAPI Dependencies.

Shared dependencies for request handling.
"""

from typing import Annotated

import structlog
from fastapi import Depends, Header, Request
from sqlalchemy.ext.asyncio import AsyncSession

from notefolio.backend.core.config import get_app_config
from notefolio.backend.core.database import get_db_session
from notefolio.backend.core.exceptions import AuthenticationError
from notefolio.backend.core.logging import get_logger
from notefolio.backend.core.security import decode_token
from notefolio.backend.repositories.user import UserRepository

logger = get_logger(__name__)

DbSession = Annotated[AsyncSession, Depends(get_db_session)]


def _extract_token(request: Request, authorization: str | None) -> str | None:
    """Prefer a bearer header; fall back to the auth cookie."""
    if authorization:
        scheme, _, token = authorization.partition(" ")
        if scheme.lower() == "bearer" and token:
            return token.strip()
        return None

    app_config = get_app_config()
    if app_config.features.auth_cookie_enabled:
        return request.cookies.get(app_config.application.auth.cookie_name) or None

    return None


async def get_current_user_id(
    request: Request,
    db: DbSession,
    authorization: str | None = Header(None),
) -> str:
    """
    Resolve the authenticated user id from the access token.

    The token comes from the Authorization header, or from the
    access_token cookie that the web frontend holds as httpOnly.

    Raises:
        AuthenticationError: If no valid token is present, or its user
            has since been deleted
    """
    token = _extract_token(request, authorization)
    if token is None:
        raise AuthenticationError("Not authenticated")

    payload = decode_token(token)
    user_id = str(payload["sub"])
    if await UserRepository(db).get_by_id_or_none(user_id) is None:
        logger.warning("Token subject no longer exists", extra={"user_id": user_id})
        raise AuthenticationError("Invalid or expired token")

    structlog.contextvars.bind_contextvars(user_id=user_id)
    return user_id


CurrentUserId = Annotated[str, Depends(get_current_user_id)]
