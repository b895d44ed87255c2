"""
Group Service.

Business logic for groups: per-user containers of notes.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from notefolio.backend.core.exceptions import NotFoundError
from notefolio.backend.models.group import Group
from notefolio.backend.repositories.group import GroupRepository
from notefolio.backend.schemas.base import MessageResponse
from notefolio.backend.schemas.group import GroupCreate, GroupUpdate
from notefolio.backend.services.base import BaseService


class GroupService(BaseService):
    """
    Service for group business logic.

    Group names are not unique; any number of groups may share a name.
    """

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session)
        self.repo = GroupRepository(session)

    async def create(self, user_id: str, data: GroupCreate) -> Group:
        """
        Create a group owned by `user_id`.

        Returns:
            The created group, note_count 0
        """
        self._log_operation("Creating group", user_id=user_id)

        group = await self._execute_db_operation(
            "create_group",
            self.repo.create(name=data.name, user_id=user_id),
        )

        self._log_debug("Group created", group_id=group.id)
        return group

    async def find_all(self, user_id: str) -> list[Group]:
        """List the user's groups, newest first."""
        return await self.repo.list_for_user(user_id)

    async def find_one(self, group_id: str, user_id: str) -> Group:
        """
        Get a group with its notes (and their categories).

        Raises:
            NotFoundError: If the group does not exist
            AuthorizationError: If the group belongs to another user
        """
        group = await self.repo.get_with_notes(group_id)
        if group is None:
            raise NotFoundError("Group not found")

        self._ensure_owner(group.user_id, user_id)
        return group

    async def update(self, group_id: str, user_id: str, data: GroupUpdate) -> Group:
        """
        Apply a partial update to an owned group.

        Raises:
            NotFoundError: If the group does not exist
            AuthorizationError: If the group belongs to another user
        """
        group = await self.repo.get_by_id(group_id)
        self._ensure_owner(group.user_id, user_id)

        update_data = data.model_dump(exclude_unset=True, exclude_none=True)
        self._log_operation(
            "Updating group",
            group_id=group_id,
            fields=list(update_data.keys()),
        )

        return await self._execute_db_operation(
            "update_group",
            self.repo.update(group, **update_data),
        )

    async def remove(self, group_id: str, user_id: str) -> MessageResponse:
        """
        Delete an owned group together with all of its notes.

        Raises:
            NotFoundError: If the group does not exist
            AuthorizationError: If the group belongs to another user
        """
        group = await self.repo.get_by_id(group_id)
        self._ensure_owner(group.user_id, user_id)

        self._log_operation("Deleting group", group_id=group_id)
        await self._execute_db_operation("delete_group", self.repo.delete(group))

        return MessageResponse(message="Group deleted successfully")
