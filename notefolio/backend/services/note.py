"""
Note Service.

Business logic layer for notes. Orchestrates repositories,
enforces cross-entity ownership, and implements the status
transitions.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from notefolio.backend.core.exceptions import AuthorizationError, NotFoundError
from notefolio.backend.models.note import Note, NoteStatus
from notefolio.backend.repositories.category import CategoryRepository
from notefolio.backend.repositories.group import GroupRepository
from notefolio.backend.repositories.note import NoteRepository
from notefolio.backend.schemas.base import MessageResponse
from notefolio.backend.schemas.note import NoteCreate, NoteFilter, NoteUpdate
from notefolio.backend.services.base import BaseService


class NoteService(BaseService):
    """
    Service for note business logic.

    A note has no owner column of its own; its owner is always the
    owner of its group, looked up on every operation.
    """

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session)
        self.repo = NoteRepository(session)
        self.group_repo = GroupRepository(session)
        self.category_repo = CategoryRepository(session)

    async def _validate_categories(self, category_ids: list[str], user_id: str) -> None:
        """
        Check that every requested category exists and belongs to the user.

        Raises:
            AuthorizationError: If any id is unknown, foreign or repeated
        """
        owned = await self.category_repo.list_owned_by_ids(category_ids, user_id)
        if len(owned) < len(category_ids):
            raise AuthorizationError("Invalid category IDs")

    async def _reload(self, note_id: str) -> Note:
        note = await self.repo.get_with_relations(note_id)
        if note is None:
            raise NotFoundError("Note not found")
        return note

    async def create(self, user_id: str, data: NoteCreate) -> Note:
        """
        Create a note in one of the user's groups.

        Args:
            user_id: Acting user
            data: Note creation data

        Returns:
            Created note with categories and group

        Raises:
            AuthorizationError: If the group is missing or foreign, or if
                any category id is invalid
        """
        self._log_operation("Creating note", user_id=user_id, group_id=data.group_id)

        group = await self.group_repo.get_by_id_or_none(data.group_id)
        # Missing and foreign groups are reported the same way here
        if group is None or group.user_id != user_id:
            raise AuthorizationError("Access denied")

        if data.category_ids:
            await self._validate_categories(data.category_ids, user_id)

        note = await self._execute_db_operation(
            "create_note",
            self.repo.create_with_categories(
                title=data.title,
                content=data.content,
                group_id=group.id,
                category_ids=data.category_ids,
            ),
        )

        self._log_debug("Note created", note_id=note.id)
        return await self._reload(note.id)

    async def find_all(self, user_id: str, filters: NoteFilter | None = None) -> list[Note]:
        """
        List the user's notes, most recently updated first.

        Args:
            user_id: Acting user
            filters: Optional status, group_id and category_id filters

        Returns:
            Notes with categories and group
        """
        return await self.repo.list_for_user(user_id, filters)

    async def find_one(self, note_id: str, user_id: str) -> Note:
        """
        Get a note by ID.

        Raises:
            NotFoundError: If the note does not exist
            AuthorizationError: If the note's group belongs to another user
        """
        note = await self.repo.get_with_relations(note_id)
        if note is None:
            raise NotFoundError("Note not found")

        self._ensure_owner(note.group.user_id, user_id)
        return note

    async def update(self, note_id: str, user_id: str, data: NoteUpdate) -> Note:
        """
        Apply a partial update to an owned note.

        When category_ids is provided the note's category set is replaced
        entirely (an empty list clears it); when omitted it is untouched.

        Raises:
            NotFoundError: If the note does not exist
            AuthorizationError: If the note is foreign or a category id is invalid
        """
        note = await self.find_one(note_id, user_id)

        update_data = data.model_dump(exclude_unset=True, exclude_none=True)
        category_ids = update_data.pop("category_ids", None)

        if category_ids:
            await self._validate_categories(category_ids, user_id)

        self._log_operation(
            "Updating note",
            note_id=note_id,
            fields=list(update_data.keys()),
            replace_categories=category_ids is not None,
        )

        if category_ids is not None:
            await self._execute_db_operation(
                "replace_note_categories",
                self.repo.replace_categories(note, category_ids),
            )

        if update_data:
            await self._execute_db_operation(
                "update_note",
                self.repo.update(note, **update_data),
            )

        return await self._reload(note_id)

    async def _set_status(self, note_id: str, user_id: str, status: NoteStatus) -> Note:
        note = await self.find_one(note_id, user_id)

        self._log_operation("Setting note status", note_id=note_id, status=status.value)
        await self._execute_db_operation(
            "set_note_status",
            self.repo.set_status(note, status),
        )

        return await self._reload(note_id)

    async def archive(self, note_id: str, user_id: str) -> Note:
        """Mark an owned note ARCHIVED. Archiving twice is harmless."""
        return await self._set_status(note_id, user_id, NoteStatus.ARCHIVED)

    async def unarchive(self, note_id: str, user_id: str) -> Note:
        """Mark an owned note ACTIVE again."""
        return await self._set_status(note_id, user_id, NoteStatus.ACTIVE)

    async def remove(self, note_id: str, user_id: str) -> MessageResponse:
        """
        Permanently delete an owned note and its category links.

        Raises:
            NotFoundError: If the note does not exist
            AuthorizationError: If the note's group belongs to another user
        """
        note = await self.find_one(note_id, user_id)

        self._log_operation("Deleting note", note_id=note_id)
        await self._execute_db_operation("delete_note", self.repo.delete(note))

        return MessageResponse(message="Note deleted successfully")
