"""
Unit Test Fixtures.

Fixtures for unit tests - all external dependencies are mocked.
Unit tests should be fast and isolated, never touching real databases.
"""

from datetime import datetime
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest

from notefolio.backend.models.note import NoteStatus


# =============================================================================
# Database Mock Fixtures
# =============================================================================


@pytest.fixture
def mock_db_session() -> AsyncMock:
    """
    Mock database session for unit tests.

    Usage:
        def test_service(mock_db_session: AsyncMock):
            service = GroupService(mock_db_session)
    """
    session = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.flush = AsyncMock()
    session.refresh = AsyncMock()
    session.execute = AsyncMock()
    session.add = MagicMock()
    session.delete = AsyncMock()
    return session


@pytest.fixture
def mock_db_result() -> MagicMock:
    """
    Mock database query result.

    Usage:
        def test_query(mock_db_session, mock_db_result):
            mock_db_result.scalar_one_or_none.return_value = group
            mock_db_session.execute.return_value = mock_db_result
    """
    result = MagicMock()
    result.scalar_one_or_none = MagicMock(return_value=None)
    result.scalars = MagicMock()
    result.scalars.return_value.all = MagicMock(return_value=[])
    return result


# =============================================================================
# Domain Object Factories
# =============================================================================


@pytest.fixture
def make_group():
    """Build a lightweight group stand-in owned by `user_id`."""

    def _make(group_id: str = "group-1", user_id: str = "user-1", name: str = "Inbox"):
        return SimpleNamespace(
            id=group_id,
            user_id=user_id,
            name=name,
            note_count=0,
            created_at=datetime(2025, 1, 1),
            updated_at=datetime(2025, 1, 1),
        )

    return _make


@pytest.fixture
def make_note(make_group):
    """Build a lightweight note stand-in whose group is owned by `user_id`."""

    def _make(note_id: str = "note-1", user_id: str = "user-1", group_id: str = "group-1"):
        return SimpleNamespace(
            id=note_id,
            title="Title",
            content="Body",
            status=NoteStatus.ACTIVE,
            group_id=group_id,
            group=make_group(group_id=group_id, user_id=user_id),
            categories=[],
            category_links=[],
        )

    return _make


@pytest.fixture
def make_category():
    def _make(category_id: str = "cat-1", user_id: str = "user-1", name: str = "Work"):
        return SimpleNamespace(id=category_id, user_id=user_id, name=name, color=None)

    return _make
