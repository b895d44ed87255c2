"""
User Repository.

Data access layer for users.
"""

from sqlalchemy import select

from notefolio.backend.models.user import User
from notefolio.backend.repositories.base import BaseRepository


class UserRepository(BaseRepository[User]):
    """Repository for User model."""

    model = User

    async def get_by_email(self, email: str) -> User | None:
        """Get a user by email (exact match, emails are stored lowercased)."""
        result = await self.session.execute(
            select(User).where(User.email == email)
        )
        return result.scalar_one_or_none()

    async def exists_by_email(self, email: str) -> bool:
        return await self.get_by_email(email) is not None
