"""
Integration Test Fixtures.

Fixtures for integration tests - uses a real database and the real app.
These fixtures build on the root conftest.py database fixtures.
"""

from collections.abc import AsyncGenerator, Awaitable, Callable
from typing import Any

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from notefolio.backend.core.database import get_db_session

API = "/api/v1"
DEFAULT_PASSWORD = "correct-horse"


# =============================================================================
# API Client Fixtures
# =============================================================================


@pytest.fixture
async def client(
    db_session: AsyncSession,
) -> AsyncGenerator[AsyncClient, None]:
    """
    Create a test client with database session override.

    Every request in a test shares the test session, which is rolled
    back afterwards.

    Usage:
        async def test_list_groups(client: AsyncClient, auth_headers):
            response = await client.get("/api/v1/groups", headers=auth_headers)
            assert response.status_code == 200
    """
    async def override_get_db_session() -> AsyncGenerator[AsyncSession, None]:
        yield db_session

    from notefolio.backend.main import create_app

    app = create_app()
    app.dependency_overrides[get_db_session] = override_get_db_session

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as test_client:
        yield test_client

    app.dependency_overrides.clear()


# =============================================================================
# API Response Assertion Helpers
# =============================================================================


class ApiAssertions:
    """Helper class for API response assertions."""

    @staticmethod
    def assert_success(response: Any, expected_status: int = 200) -> Any:
        """
        Assert API response is successful.

        Returns:
            The envelope's `data` payload
        """
        assert response.status_code == expected_status, (
            f"Expected status {expected_status}, got {response.status_code}: "
            f"{response.text}"
        )
        body = response.json()
        assert body.get("success") is True, f"Response not successful: {body}"
        return body["data"]

    @staticmethod
    def assert_error(
        response: Any,
        expected_status: int,
        expected_code: str | None = None,
    ) -> dict[str, Any]:
        """
        Assert API response is an error.

        Returns:
            The envelope's `error` object
        """
        assert response.status_code == expected_status, (
            f"Expected status {expected_status}, got {response.status_code}: "
            f"{response.text}"
        )
        body = response.json()
        assert body.get("success") is False, f"Response should be error: {body}"
        assert body.get("error") is not None, f"Missing error details: {body}"

        if expected_code:
            actual_code = body["error"].get("code")
            assert actual_code == expected_code, (
                f"Expected error code {expected_code}, got {actual_code}"
            )

        return body["error"]

    @staticmethod
    def assert_validation_error(response: Any, field: str | None = None) -> dict[str, Any]:
        """Assert API response is a request validation error (422)."""
        error = ApiAssertions.assert_error(response, 422, "VAL_REQUEST_INVALID")

        if field:
            fields = [e.get("field", "") for e in error["details"]["validation_errors"]]
            assert any(field in f for f in fields), (
                f"Expected validation error for field '{field}', got errors for: {fields}"
            )

        return error


@pytest.fixture
def api() -> ApiAssertions:
    """Provide API assertion helpers."""
    return ApiAssertions()


# =============================================================================
# Authentication Fixtures
# =============================================================================


@pytest.fixture
def register(client: AsyncClient) -> Callable[..., Awaitable[dict[str, str]]]:
    """
    Register a user through the API and return bearer headers for it.

    Usage:
        headers = await register("ada@example.com")
    """
    async def _register(email: str, password: str = DEFAULT_PASSWORD) -> dict[str, str]:
        response = await client.post(
            f"{API}/auth/register",
            json={"email": email, "password": password, "name": email.split("@")[0]},
        )
        assert response.status_code == 201, response.text
        token = response.json()["data"]["access_token"]
        return {"Authorization": f"Bearer {token}"}

    return _register


@pytest.fixture
async def auth_headers(register) -> dict[str, str]:
    """Bearer headers for the primary test user."""
    return await register("owner@example.com")


@pytest.fixture
async def other_headers(register) -> dict[str, str]:
    """Bearer headers for a second, unrelated user."""
    return await register("intruder@example.com")


# =============================================================================
# Resource Helpers
# =============================================================================


class Factory:
    """Creates groups, categories and notes through the API."""

    def __init__(self, client: AsyncClient) -> None:
        self.client = client

    async def group(self, headers: dict[str, str], name: str = "Inbox") -> dict[str, Any]:
        response = await self.client.post(f"{API}/groups", json={"name": name}, headers=headers)
        assert response.status_code == 201, response.text
        return response.json()["data"]

    async def category(
        self,
        headers: dict[str, str],
        name: str = "Work",
        color: str | None = None,
    ) -> dict[str, Any]:
        payload: dict[str, Any] = {"name": name}
        if color is not None:
            payload["color"] = color
        response = await self.client.post(f"{API}/categories", json=payload, headers=headers)
        assert response.status_code == 201, response.text
        return response.json()["data"]

    async def note(
        self,
        headers: dict[str, str],
        group_id: str,
        title: str = "Groceries",
        content: str = "Milk, eggs",
        category_ids: list[str] | None = None,
    ) -> dict[str, Any]:
        payload: dict[str, Any] = {"title": title, "content": content, "group_id": group_id}
        if category_ids is not None:
            payload["category_ids"] = category_ids
        response = await self.client.post(f"{API}/notes", json=payload, headers=headers)
        assert response.status_code == 201, response.text
        return response.json()["data"]


@pytest.fixture
def factory(client: AsyncClient) -> Factory:
    return Factory(client)
