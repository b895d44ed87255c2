"""
Auth Service.

Registration, login, and current-user lookup.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from notefolio.backend.core.config import get_app_config
from notefolio.backend.core.exceptions import AuthenticationError, ConflictError
from notefolio.backend.core.security import (
    create_access_token,
    hash_password,
    verify_password,
)
from notefolio.backend.models.user import User
from notefolio.backend.repositories.user import UserRepository
from notefolio.backend.schemas.auth import LoginRequest, RegisterRequest, TokenResponse
from notefolio.backend.services.base import BaseService

EMAIL_TAKEN_MESSAGE = "Email already registered"


class AuthService(BaseService):
    """Service for user accounts and access tokens."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session)
        self.user_repo = UserRepository(session)

    @staticmethod
    def _issue_token(user: User) -> TokenResponse:
        return TokenResponse(access_token=create_access_token({"sub": user.id}))

    async def register(self, data: RegisterRequest) -> TokenResponse:
        """
        Create a user account and return an access token for it.

        Raises:
            ConflictError: If the email is already registered
            ValidationError: If the password violates the configured policy
        """
        email = data.email.strip().lower()
        self._log_operation("Registering user", email=email)

        policy = get_app_config().security.passwords
        self._validate_string_length(
            data.password,
            "password",
            min_length=policy.min_length,
            max_length=policy.max_length,
        )

        if await self.user_repo.exists_by_email(email):
            raise ConflictError(EMAIL_TAKEN_MESSAGE)

        user = await self._execute_db_operation(
            "register_user",
            self.user_repo.create(
                email=email,
                name=data.name,
                hashed_password=hash_password(data.password),
            ),
            conflict_message=EMAIL_TAKEN_MESSAGE,
        )

        self._log_debug("User registered", user_id=user.id)
        return self._issue_token(user)

    async def login(self, data: LoginRequest) -> TokenResponse:
        """
        Exchange email and password for an access token.

        Raises:
            AuthenticationError: On unknown email or wrong password
        """
        email = data.email.strip().lower()
        user = await self.user_repo.get_by_email(email)

        if user is None or not verify_password(data.password, user.hashed_password):
            self._logger.warning("Login failed", extra={"email": email})
            raise AuthenticationError("Invalid credentials")

        self._log_operation("User logged in", user_id=user.id)
        return self._issue_token(user)

    async def get_user(self, user_id: str) -> User:
        """
        Get the account behind an authenticated request.

        Raises:
            NotFoundError: If the user no longer exists
        """
        return await self.user_repo.get_by_id(user_id)
