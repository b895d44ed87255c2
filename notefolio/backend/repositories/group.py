"""
Group Repository.

Data access layer for groups. Handles all database operations
for the Group model.
"""

from sqlalchemy import select
from sqlalchemy.orm import selectinload

from notefolio.backend.models.group import Group
from notefolio.backend.models.note import Note, NoteCategory
from notefolio.backend.repositories.base import BaseRepository


class GroupRepository(BaseRepository[Group]):
    """
    Repository for Group model.

    Inherits standard CRUD operations from BaseRepository
    and adds owner-scoped queries.
    """

    model = Group

    async def list_for_user(self, user_id: str) -> list[Group]:
        """
        Get all groups owned by a user, newest first.

        Args:
            user_id: Owner id

        Returns:
            Groups with note_count populated
        """
        result = await self.session.execute(
            select(Group)
            .where(Group.user_id == user_id)
            .order_by(Group.created_at.desc())
            .execution_options(populate_existing=True)
        )
        return list(result.scalars().all())

    async def get_with_notes(self, id: str) -> Group | None:
        """
        Get a group with its notes and each note's categories.

        Notes come back newest first (relationship order_by).
        """
        result = await self.session.execute(
            select(Group)
            .where(Group.id == id)
            .options(
                selectinload(Group.notes)
                .selectinload(Note.category_links)
                .selectinload(NoteCategory.category),
            )
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()
