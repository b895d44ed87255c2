"""
Category Repository.

Data access layer for categories. Handles all database operations
for the Category model.
"""

from sqlalchemy import select
from sqlalchemy.orm import selectinload

from notefolio.backend.models.category import Category
from notefolio.backend.models.note import Note, NoteCategory
from notefolio.backend.repositories.base import BaseRepository


class CategoryRepository(BaseRepository[Category]):
    """
    Repository for Category model.

    Inherits standard CRUD operations from BaseRepository
    and adds owner-scoped queries.
    """

    model = Category

    async def list_for_user(self, user_id: str) -> list[Category]:
        """
        Get all categories owned by a user, ordered by name.

        Args:
            user_id: Owner id

        Returns:
            Categories with note_count populated
        """
        result = await self.session.execute(
            select(Category)
            .where(Category.user_id == user_id)
            .order_by(Category.name.asc())
            .execution_options(populate_existing=True)
        )
        return list(result.scalars().all())

    async def get_by_user_and_name(self, user_id: str, name: str) -> Category | None:
        """Look up a category by its per-user unique name."""
        result = await self.session.execute(
            select(Category).where(
                Category.user_id == user_id,
                Category.name == name,
            )
        )
        return result.scalar_one_or_none()

    async def get_with_notes(self, id: str) -> Category | None:
        """Get a category with its tagged notes and each note's group."""
        result = await self.session.execute(
            select(Category)
            .where(Category.id == id)
            .options(
                selectinload(Category.note_links)
                .selectinload(NoteCategory.note)
                .selectinload(Note.group),
            )
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()

    async def list_owned_by_ids(self, ids: list[str], user_id: str) -> list[Category]:
        """
        Get the categories among `ids` that belong to `user_id`.

        Unknown ids and ids owned by someone else are simply absent
        from the result.
        """
        if not ids:
            return []

        result = await self.session.execute(
            select(Category).where(
                Category.id.in_(ids),
                Category.user_id == user_id,
            )
        )
        return list(result.scalars().all())
