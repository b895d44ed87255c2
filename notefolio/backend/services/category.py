"""
Category Service.

Business logic for categories: per-user tags whose names are unique
within the owner's scope.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from notefolio.backend.core.exceptions import ConflictError, NotFoundError
from notefolio.backend.models.category import Category
from notefolio.backend.repositories.category import CategoryRepository
from notefolio.backend.schemas.base import MessageResponse
from notefolio.backend.schemas.category import CategoryCreate, CategoryUpdate
from notefolio.backend.services.base import BaseService

DUPLICATE_NAME_MESSAGE = "Category with this name already exists"


class CategoryService(BaseService):
    """
    Service for category business logic.

    Name uniqueness is checked before writing; the composite unique
    constraint on (user_id, name) catches concurrent inserts.
    """

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session)
        self.repo = CategoryRepository(session)

    async def _ensure_name_available(self, user_id: str, name: str) -> None:
        if await self.repo.get_by_user_and_name(user_id, name) is not None:
            raise ConflictError(DUPLICATE_NAME_MESSAGE)

    async def create(self, user_id: str, data: CategoryCreate) -> Category:
        """
        Create a category owned by `user_id`.

        Raises:
            ConflictError: If the user already has a category with this name
        """
        self._log_operation("Creating category", user_id=user_id, name=data.name)

        await self._ensure_name_available(user_id, data.name)

        category = await self._execute_db_operation(
            "create_category",
            self.repo.create(name=data.name, color=data.color, user_id=user_id),
            conflict_message=DUPLICATE_NAME_MESSAGE,
        )

        self._log_debug("Category created", category_id=category.id)
        return category

    async def find_all(self, user_id: str) -> list[Category]:
        """List the user's categories ordered by name."""
        return await self.repo.list_for_user(user_id)

    async def find_one(self, category_id: str, user_id: str) -> Category:
        """
        Get a category with the notes it tags (each with its group).

        Raises:
            NotFoundError: If the category does not exist
            AuthorizationError: If the category belongs to another user
        """
        category = await self.repo.get_with_notes(category_id)
        if category is None:
            raise NotFoundError("Category not found")

        self._ensure_owner(category.user_id, user_id)
        return category

    async def update(
        self,
        category_id: str,
        user_id: str,
        data: CategoryUpdate,
    ) -> Category:
        """
        Apply a partial update to an owned category.

        Raises:
            NotFoundError: If the category does not exist
            AuthorizationError: If the category belongs to another user
            ConflictError: If renaming onto a name the user already uses
        """
        category = await self.repo.get_by_id(category_id)
        self._ensure_owner(category.user_id, user_id)

        update_data = data.model_dump(exclude_unset=True, exclude_none=True)

        new_name = update_data.get("name")
        if new_name is not None and new_name != category.name:
            await self._ensure_name_available(user_id, new_name)

        self._log_operation(
            "Updating category",
            category_id=category_id,
            fields=list(update_data.keys()),
        )

        return await self._execute_db_operation(
            "update_category",
            self.repo.update(category, **update_data),
            conflict_message=DUPLICATE_NAME_MESSAGE,
        )

    async def remove(self, category_id: str, user_id: str) -> MessageResponse:
        """
        Delete an owned category and detach it from every note.

        Raises:
            NotFoundError: If the category does not exist
            AuthorizationError: If the category belongs to another user
        """
        category = await self.repo.get_by_id(category_id)
        self._ensure_owner(category.user_id, user_id)

        self._log_operation("Deleting category", category_id=category_id)
        await self._execute_db_operation("delete_category", self.repo.delete(category))

        return MessageResponse(message="Category deleted successfully")
