"""pytest configuration and shared fixtures.

Provides an async HTTP client bound to the FastAPI app through the ASGI
transport, and a fixture that resets the cached domain typo table.
"""

from collections.abc import AsyncGenerator, Iterator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from mailcheck.main import app
from mailcheck.validation.typos import get_domain_typos


@pytest.fixture
def reset_domain_typos() -> Iterator[None]:
    """Clear the cached typo table before and after a test."""
    get_domain_typos.cache_clear()
    yield
    get_domain_typos.cache_clear()


@pytest_asyncio.fixture
async def async_client() -> AsyncGenerator[AsyncClient]:
    """Async HTTP client for testing API endpoints.

    Uses ASGI transport to test the FastAPI app without running a server.

    Example:
        async def test_validate(async_client):
            response = await async_client.post(
                "/api/v1/emails/validate", json={"email": "a@example.com"}
            )
            assert response.status_code == 200
    """
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as client:
        yield client
