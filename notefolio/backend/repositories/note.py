"""
Note Repository.

Data access layer for notes. Handles all database operations
for the Note model and its category join rows.
"""

from sqlalchemy import select
from sqlalchemy.orm import selectinload
from sqlalchemy.sql import Select

from notefolio.backend.core.utils import utc_now
from notefolio.backend.models.group import Group
from notefolio.backend.models.note import Note, NoteCategory, NoteStatus
from notefolio.backend.repositories.base import BaseRepository
from notefolio.backend.schemas.note import NoteFilter


class NoteRepository(BaseRepository[Note]):
    """
    Repository for Note model.

    Every read loads the note's categories and group, which is what
    every note response renders.
    """

    model = Note

    @staticmethod
    def _with_relations(stmt: Select, include_owner: bool = False) -> Select:
        group_loader = selectinload(Note.group)
        if include_owner:
            group_loader = group_loader.selectinload(Group.user)

        return stmt.options(
            selectinload(Note.category_links).selectinload(NoteCategory.category),
            group_loader,
        ).execution_options(populate_existing=True)

    async def get_with_relations(self, id: str) -> Note | None:
        """
        Get a note with categories, group, and the group's owner.

        Args:
            id: Note ID

        Returns:
            The note, or None if it does not exist
        """
        result = await self.session.execute(
            self._with_relations(select(Note).where(Note.id == id), include_owner=True)
        )
        return result.scalar_one_or_none()

    async def list_for_user(
        self,
        user_id: str,
        filters: NoteFilter | None = None,
    ) -> list[Note]:
        """
        Get notes whose group belongs to `user_id`, most recently updated first.

        Args:
            user_id: Owner id, matched through the note's group
            filters: Optional status / group / category filters (AND-ed)

        Returns:
            List of notes with categories and group loaded
        """
        stmt = select(Note).join(Note.group).where(Group.user_id == user_id)

        if filters is not None:
            if filters.status is not None:
                stmt = stmt.where(Note.status == filters.status)
            if filters.group_id is not None:
                stmt = stmt.where(Note.group_id == filters.group_id)
            if filters.category_id is not None:
                stmt = stmt.where(
                    Note.category_links.any(NoteCategory.category_id == filters.category_id)
                )

        result = await self.session.execute(
            self._with_relations(stmt.order_by(Note.updated_at.desc()))
        )
        return list(result.scalars().all())

    async def create_with_categories(
        self,
        title: str,
        content: str,
        group_id: str,
        category_ids: list[str] | None = None,
    ) -> Note:
        """
        Insert a note together with its join rows in one flush.

        Returns:
            The created note (relations not loaded)
        """
        note = Note(
            title=title,
            content=content,
            group_id=group_id,
            status=NoteStatus.ACTIVE,
            category_links=[
                NoteCategory(category_id=category_id)
                for category_id in category_ids or []
            ],
        )
        self.session.add(note)
        await self.session.flush()
        return note

    async def replace_categories(self, note: Note, category_ids: list[str]) -> None:
        """
        Replace the note's full category set with `category_ids`.

        Applied as a diff in a single flush: links no longer wanted are
        deleted as orphans, missing ones are inserted, the rest stay.
        `note.category_links` must already be loaded.
        """
        wanted = list(dict.fromkeys(category_ids))
        current = note.category_ids

        kept = [link for link in note.category_links if link.category_id in wanted]
        added = [
            NoteCategory(category_id=category_id)
            for category_id in wanted
            if category_id not in current
        ]

        note.category_links = kept + added
        note.updated_at = utc_now()
        await self.session.flush()

    async def set_status(self, note: Note, status: NoteStatus) -> None:
        """Set the note's status, always issuing a write."""
        note.status = status
        # Bump explicitly: an unchanged status would otherwise skip the UPDATE
        note.updated_at = utc_now()
        await self.session.flush()
