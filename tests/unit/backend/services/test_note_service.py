"""
Unit Tests for Note Service.

Tests the NoteService business logic with mocked repositories.
"""

import pytest
from unittest.mock import AsyncMock, patch

from notefolio.backend.core.exceptions import AuthorizationError, NotFoundError
from notefolio.backend.models.note import NoteStatus
from notefolio.backend.schemas.note import NoteCreate, NoteFilter, NoteUpdate
from notefolio.backend.services.note import NoteService


@pytest.fixture
def service():
    """Create NoteService with mocked session."""
    return NoteService(AsyncMock())


class TestNoteServiceCreate:
    """Tests for note creation."""

    @pytest.mark.asyncio
    async def test_create_note_success(self, service, make_group, make_note, make_category):
        """Should insert the note with its categories and return it reloaded."""
        note = make_note()
        data = NoteCreate(title="Title", content="Body", group_id="group-1", category_ids=["cat-1"])

        with patch.object(service.group_repo, "get_by_id_or_none", return_value=make_group()), \
             patch.object(service.category_repo, "list_owned_by_ids", return_value=[make_category()]), \
             patch.object(service.repo, "create_with_categories", return_value=note) as mock_create, \
             patch.object(service.repo, "get_with_relations", return_value=note):
            result = await service.create("user-1", data)

        mock_create.assert_called_once_with(
            title="Title",
            content="Body",
            group_id="group-1",
            category_ids=["cat-1"],
        )
        assert result is note

    @pytest.mark.asyncio
    async def test_missing_group_is_forbidden(self, service):
        """A missing group is reported as Forbidden, not NotFound."""
        data = NoteCreate(title="T", content="B", group_id="nope")

        with patch.object(service.group_repo, "get_by_id_or_none", return_value=None), \
             patch.object(service.repo, "create_with_categories") as mock_create:
            with pytest.raises(AuthorizationError) as exc_info:
                await service.create("user-1", data)

        assert exc_info.value.message == "Access denied"
        mock_create.assert_not_called()

    @pytest.mark.asyncio
    async def test_foreign_group_is_forbidden(self, service, make_group):
        data = NoteCreate(title="T", content="B", group_id="group-1")

        with patch.object(service.group_repo, "get_by_id_or_none",
                          return_value=make_group(user_id="someone-else")):
            with pytest.raises(AuthorizationError):
                await service.create("user-1", data)

    @pytest.mark.asyncio
    async def test_invalid_category_ids_rejected(self, service, make_group, make_category):
        """Should reject when fewer owned categories match than were requested."""
        data = NoteCreate(
            title="T", content="B", group_id="group-1", category_ids=["cat-1", "foreign"],
        )

        with patch.object(service.group_repo, "get_by_id_or_none", return_value=make_group()), \
             patch.object(service.category_repo, "list_owned_by_ids",
                          return_value=[make_category()]), \
             patch.object(service.repo, "create_with_categories") as mock_create:
            with pytest.raises(AuthorizationError) as exc_info:
                await service.create("user-1", data)

        assert exc_info.value.message == "Invalid category IDs"
        mock_create.assert_not_called()

    @pytest.mark.asyncio
    async def test_duplicate_category_ids_rejected(self, service, make_group, make_category):
        data = NoteCreate(
            title="T", content="B", group_id="group-1", category_ids=["cat-1", "cat-1"],
        )

        with patch.object(service.group_repo, "get_by_id_or_none", return_value=make_group()), \
             patch.object(service.category_repo, "list_owned_by_ids",
                          return_value=[make_category()]):
            with pytest.raises(AuthorizationError):
                await service.create("user-1", data)

    @pytest.mark.asyncio
    async def test_empty_category_ids_skip_validation(self, service, make_group, make_note):
        data = NoteCreate(title="T", content="B", group_id="group-1", category_ids=[])

        with patch.object(service.group_repo, "get_by_id_or_none", return_value=make_group()), \
             patch.object(service.category_repo, "list_owned_by_ids") as mock_lookup, \
             patch.object(service.repo, "create_with_categories", return_value=make_note()), \
             patch.object(service.repo, "get_with_relations", return_value=make_note()):
            await service.create("user-1", data)

        mock_lookup.assert_not_called()


class TestNoteServiceFind:
    """Tests for reading notes."""

    @pytest.mark.asyncio
    async def test_find_one_not_found(self, service):
        with patch.object(service.repo, "get_with_relations", return_value=None):
            with pytest.raises(NotFoundError) as exc_info:
                await service.find_one("missing", "user-1")

        assert exc_info.value.message == "Note not found"

    @pytest.mark.asyncio
    async def test_find_one_foreign_note(self, service, make_note):
        with patch.object(service.repo, "get_with_relations",
                          return_value=make_note(user_id="someone-else")):
            with pytest.raises(AuthorizationError):
                await service.find_one("note-1", "user-1")

    @pytest.mark.asyncio
    async def test_find_all_passes_filters(self, service):
        filters = NoteFilter(status=NoteStatus.ARCHIVED, category_id="cat-1")

        with patch.object(service.repo, "list_for_user", return_value=[]) as mock_list:
            result = await service.find_all("user-1", filters)

        mock_list.assert_called_once_with("user-1", filters)
        assert result == []


class TestNoteServiceUpdate:
    """Tests for partial updates and category replacement."""

    @pytest.mark.asyncio
    async def test_omitted_category_ids_leave_set_untouched(self, service, make_note):
        note = make_note()

        with patch.object(service.repo, "get_with_relations", return_value=note), \
             patch.object(service.repo, "replace_categories") as mock_replace, \
             patch.object(service.repo, "update", return_value=note) as mock_update:
            await service.update("note-1", "user-1", NoteUpdate(title="New"))

        mock_replace.assert_not_called()
        mock_update.assert_called_once_with(note, title="New")

    @pytest.mark.asyncio
    async def test_empty_category_ids_clear_set(self, service, make_note):
        note = make_note()

        with patch.object(service.repo, "get_with_relations", return_value=note), \
             patch.object(service.category_repo, "list_owned_by_ids") as mock_lookup, \
             patch.object(service.repo, "replace_categories") as mock_replace, \
             patch.object(service.repo, "update") as mock_update:
            await service.update("note-1", "user-1", NoteUpdate(category_ids=[]))

        mock_lookup.assert_not_called()
        mock_replace.assert_called_once_with(note, [])
        mock_update.assert_not_called()

    @pytest.mark.asyncio
    async def test_foreign_category_ids_rejected(self, service, make_note):
        with patch.object(service.repo, "get_with_relations", return_value=make_note()), \
             patch.object(service.category_repo, "list_owned_by_ids", return_value=[]), \
             patch.object(service.repo, "replace_categories") as mock_replace:
            with pytest.raises(AuthorizationError) as exc_info:
                await service.update("note-1", "user-1", NoteUpdate(category_ids=["x"]))

        assert exc_info.value.message == "Invalid category IDs"
        mock_replace.assert_not_called()

    @pytest.mark.asyncio
    async def test_explicit_null_treated_as_omitted(self, service, make_note):
        note = make_note()

        with patch.object(service.repo, "get_with_relations", return_value=note), \
             patch.object(service.repo, "replace_categories") as mock_replace, \
             patch.object(service.repo, "update") as mock_update:
            await service.update(
                "note-1", "user-1", NoteUpdate(title=None, category_ids=None),
            )

        mock_replace.assert_not_called()
        mock_update.assert_not_called()

    @pytest.mark.asyncio
    async def test_update_foreign_note_forbidden(self, service, make_note):
        with patch.object(service.repo, "get_with_relations",
                          return_value=make_note(user_id="someone-else")), \
             patch.object(service.repo, "update") as mock_update:
            with pytest.raises(AuthorizationError):
                await service.update("note-1", "user-1", NoteUpdate(title="x"))

        mock_update.assert_not_called()


class TestNoteServiceStatus:
    """Tests for archive/unarchive."""

    @pytest.mark.asyncio
    async def test_archive_sets_archived(self, service, make_note):
        note = make_note()

        with patch.object(service.repo, "get_with_relations", return_value=note), \
             patch.object(service.repo, "set_status") as mock_set:
            await service.archive("note-1", "user-1")

        mock_set.assert_called_once_with(note, NoteStatus.ARCHIVED)

    @pytest.mark.asyncio
    async def test_unarchive_sets_active(self, service, make_note):
        note = make_note()

        with patch.object(service.repo, "get_with_relations", return_value=note), \
             patch.object(service.repo, "set_status") as mock_set:
            await service.unarchive("note-1", "user-1")

        mock_set.assert_called_once_with(note, NoteStatus.ACTIVE)

    @pytest.mark.asyncio
    async def test_archive_missing_note(self, service):
        with patch.object(service.repo, "get_with_relations", return_value=None):
            with pytest.raises(NotFoundError):
                await service.archive("missing", "user-1")


class TestNoteServiceRemove:

    @pytest.mark.asyncio
    async def test_remove_returns_message(self, service, make_note):
        note = make_note()

        with patch.object(service.repo, "get_with_relations", return_value=note), \
             patch.object(service.repo, "delete") as mock_delete:
            result = await service.remove("note-1", "user-1")

        mock_delete.assert_called_once_with(note)
        assert result.message == "Note deleted successfully"
