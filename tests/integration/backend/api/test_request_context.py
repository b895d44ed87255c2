"""
Integration Tests for Request Context Middleware.

Tests that request context is propagated through the API.
"""

import pytest
from httpx import AsyncClient


class TestRequestIdHeader:
    """Tests for X-Request-ID header handling."""

    @pytest.mark.asyncio
    async def test_generates_request_id(self, client: AsyncClient):
        response = await client.get("/health")

        assert response.status_code == 200
        # UUID format: 8-4-4-4-12 = 36 characters
        assert len(response.headers["X-Request-ID"]) == 36

    @pytest.mark.asyncio
    async def test_propagates_provided_request_id(self, client: AsyncClient):
        custom_id = "my-custom-request-id-12345"

        response = await client.get("/health", headers={"X-Request-ID": custom_id})

        assert response.headers["X-Request-ID"] == custom_id

    @pytest.mark.asyncio
    async def test_error_envelope_carries_request_id(self, client: AsyncClient, api):
        """Errors raised before the endpoint runs still report the request id."""
        response = await client.get(
            "/api/v1/notes",
            headers={"X-Request-ID": "trace-me"},
        )

        api.assert_error(response, 401, "AUTH_UNAUTHORIZED")
        assert response.headers["X-Request-ID"] == "trace-me"
        assert response.json()["metadata"]["request_id"] == "trace-me"


class TestResponseTimeHeader:

    @pytest.mark.asyncio
    async def test_includes_response_time(self, client: AsyncClient):
        response = await client.get("/health")

        assert response.headers["X-Response-Time"].endswith("ms")


class TestLiveness:

    @pytest.mark.asyncio
    async def test_liveness_always_healthy(self, client: AsyncClient):
        response = await client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "healthy"}
