"""Email validation API tests."""

import json
import logging
from collections.abc import Iterator
from pathlib import Path

import pytest
from httpx import AsyncClient

from mailcheck.core.config import settings

VALIDATE_URL = "/api/v1/emails/validate"
BATCH_URL = "/api/v1/emails/validate/batch"


@pytest.fixture
def debug_logging() -> Iterator[None]:
    """Run the root logger at DEBUG for the duration of a test."""
    root = logging.getLogger()
    saved_level = root.level
    root.setLevel(logging.DEBUG)
    yield
    root.setLevel(saved_level)


class TestValidateEndpoint:
    """Test POST /emails/validate."""

    @pytest.mark.asyncio
    async def test_valid_email(self, async_client: AsyncClient) -> None:
        """Test that a valid address returns isValid true."""
        response = await async_client.post(VALIDATE_URL, json={"email": "user@example.com"})

        assert response.status_code == 200
        data = response.json()
        assert data["email"] == "user@example.com"
        assert data["isValid"] is True
        assert data["errors"] == []
        assert data["warnings"] == []
        assert data["suggestions"] is None
        assert data["details"]["localPart"] == "user"
        assert data["details"]["hasValidDomain"] is True

    @pytest.mark.asyncio
    async def test_invalid_email_is_not_an_http_error(
        self, async_client: AsyncClient
    ) -> None:
        """Test that an invalid address is a normal 200 response."""
        response = await async_client.post(VALIDATE_URL, json={"email": ""})

        assert response.status_code == 200
        data = response.json()
        assert data["isValid"] is False
        assert data["errors"] == [
            "Email cannot be empty",
            "Missing local part (before @)",
            "Missing domain (after @)",
            "Email must contain an @ symbol",
        ]

    @pytest.mark.asyncio
    async def test_whitespace_reaches_validator(self, async_client: AsyncClient) -> None:
        """Test that surrounding whitespace is reported, not silently stripped."""
        response = await async_client.post(
            VALIDATE_URL, json={"email": " user@gmial.com "}
        )

        data = response.json()
        assert data["email"] == "user@gmial.com"
        assert data["suggestions"] == "user@gmail.com"
        assert data["warnings"] == [
            "Email has leading or trailing whitespace",
            'Did you mean "gmail.com"?',
        ]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("body", [{}, {"email": None}, {"email": 5}, {"address": "a@b.c"}])
    async def test_malformed_body(self, async_client: AsyncClient, body: dict) -> None:
        """Test that a body without a string email is rejected with 422."""
        response = await async_client.post(VALIDATE_URL, json=body)

        assert response.status_code == 422

    @pytest.mark.asyncio
    @pytest.mark.usefixtures("reset_domain_typos")
    async def test_configured_typos_file(
        self,
        async_client: AsyncClient,
        tmp_path: Path,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        """Test that entries from DOMAIN_TYPOS_FILE drive suggestions."""
        path = tmp_path / "typos.json"
        path.write_text(json.dumps({"acme.cmo": "acme.com"}), encoding="utf-8")
        monkeypatch.setattr(settings, "DOMAIN_TYPOS_FILE", str(path))

        response = await async_client.post(VALIDATE_URL, json={"email": "ops@acme.cmo"})

        assert response.json()["suggestions"] == "ops@acme.com"


class TestBatchEndpoint:
    """Test POST /emails/validate/batch."""

    @pytest.mark.asyncio
    async def test_batch_results_in_order(self, async_client: AsyncClient) -> None:
        """Test that results keep request order and counters add up."""
        emails = ["user@example.com", "a..b@example.com", "test@-example.com"]

        response = await async_client.post(BATCH_URL, json={"emails": emails})

        assert response.status_code == 200
        data = response.json()
        assert data["total"] == 3
        assert data["valid"] == 1
        assert data["invalid"] == 2
        assert [r["email"] for r in data["results"]] == emails
        assert data["results"][2]["errors"] == [
            "Domain labels cannot start or end with hyphens"
        ]

    @pytest.mark.asyncio
    async def test_empty_batch(self, async_client: AsyncClient) -> None:
        """Test that an empty batch is rejected."""
        response = await async_client.post(BATCH_URL, json={"emails": []})

        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_oversized_batch(self, async_client: AsyncClient) -> None:
        """Test that more than 100 addresses are rejected."""
        response = await async_client.post(
            BATCH_URL, json={"emails": ["a@example.com"] * 101}
        )

        assert response.status_code == 422

    @pytest.mark.asyncio
    @pytest.mark.usefixtures("debug_logging")
    async def test_batch_with_debug_logging(
        self, async_client: AsyncClient, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Test that the batch endpoint works with DEBUG logging enabled."""
        caplog.set_level(logging.DEBUG, logger="mailcheck")

        response = await async_client.post(
            BATCH_URL, json={"emails": ["user@example.com", "bad"]}
        )

        assert response.status_code == 200
        assert response.json()["valid"] == 1
        validated = [r for r in caplog.records if r.getMessage() == "Email validated"]
        assert len(validated) == 2

    @pytest.mark.asyncio
    @pytest.mark.usefixtures("debug_logging")
    async def test_single_with_debug_logging(self, async_client: AsyncClient) -> None:
        """Test that the single endpoint works with DEBUG logging enabled."""
        response = await async_client.post(VALIDATE_URL, json={"email": "user@gmial.com"})

        assert response.status_code == 200
        assert response.json()["suggestions"] == "user@gmail.com"
