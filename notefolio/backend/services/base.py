"""
Base Service.

Base class for all services providing common patterns for business logic.
Services orchestrate repositories, enforce ownership, and translate
persistence failures into application errors.

Usage:
    from notefolio.backend.services.base import BaseService

    class GroupService(BaseService):
        def __init__(self, session: AsyncSession) -> None:
            super().__init__(session)
            self.repo = GroupRepository(session)

        async def find_one(self, group_id: str, user_id: str) -> Group:
            group = await self.repo.get_by_id(group_id)
            self._ensure_owner(group.user_id, user_id)
            return group
"""

from typing import Any, TypeVar

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from notefolio.backend.core.exceptions import (
    AuthorizationError,
    ConflictError,
    DatabaseError,
    ValidationError,
)
from notefolio.backend.core.logging import get_logger

logger = get_logger(__name__)

T = TypeVar("T")


class BaseService:
    """
    Base class for all services.

    Provides:
    - Database session access
    - Owner gate for user-scoped resources
    - Error wrapping for database operations
    - Logging helpers

    Subclasses should call super().__init__(session) and build their
    repositories in __init__.
    """

    def __init__(self, session: AsyncSession) -> None:
        """
        Initialize the service with a database session.

        Args:
            session: SQLAlchemy async session for database operations
        """
        self._session = session
        self._logger = get_logger(self.__class__.__module__)

    @property
    def session(self) -> AsyncSession:
        """Get the database session."""
        return self._session

    async def _execute_db_operation(
        self,
        operation: str,
        coro: Any,
        conflict_message: str = "Resource already exists",
    ) -> T:
        """
        Execute a database operation with error handling.

        Wraps database operations to convert SQLAlchemy exceptions
        to application-specific exceptions.

        Args:
            operation: Description of the operation for logging
            coro: Coroutine to execute
            conflict_message: Message used when a unique constraint fires

        Returns:
            Result of the coroutine

        Raises:
            ConflictError: For unique constraint violations
            DatabaseError: For other database errors
        """
        try:
            return await coro
        except IntegrityError as e:
            self._logger.warning(
                "Database integrity error",
                extra={"operation": operation, "error": str(e)},
            )
            error_str = str(e).lower()
            if "unique" in error_str or "duplicate" in error_str:
                raise ConflictError(conflict_message) from e
            raise DatabaseError(f"Database constraint violation: {operation}") from e
        except SQLAlchemyError as e:
            self._logger.error(
                "Database error",
                extra={"operation": operation, "error": str(e)},
            )
            raise DatabaseError(f"Database operation failed: {operation}") from e

    def _ensure_owner(self, owner_id: str, user_id: str) -> None:
        """
        Reject access to a resource owned by someone else.

        Raises:
            AuthorizationError: If owner_id does not match user_id
        """
        if owner_id != user_id:
            self._logger.warning(
                "Ownership check failed",
                extra={"service": self.__class__.__name__, "user_id": user_id},
            )
            raise AuthorizationError("Access denied")

    def _validate_string_length(
        self,
        value: str,
        field_name: str,
        min_length: int | None = None,
        max_length: int | None = None,
    ) -> None:
        """
        Validate string length constraints.

        Raises:
            ValidationError: If string length is out of bounds
        """
        if min_length is not None and len(value) < min_length:
            raise ValidationError(
                f"{field_name} too short",
                details={field_name: f"Minimum length is {min_length}"},
            )
        if max_length is not None and len(value) > max_length:
            raise ValidationError(
                f"{field_name} too long",
                details={field_name: f"Maximum length is {max_length}"},
            )

    def _log_operation(
        self,
        operation: str,
        **context: Any,
    ) -> None:
        """Log a service operation with context."""
        self._logger.info(
            operation,
            extra={"service": self.__class__.__name__, **context},
        )

    def _log_debug(
        self,
        message: str,
        **context: Any,
    ) -> None:
        self._logger.debug(
            message,
            extra={"service": self.__class__.__name__, **context},
        )
