"""Domain typo table tests.

Covers the built-in table, loading extra entries from JSON, and the cached
effective table driven by settings.
"""

import json
from pathlib import Path

import pytest

from mailcheck.core.config import settings
from mailcheck.core.exceptions import AppError, DomainTyposLoadError
from mailcheck.validation.typos import (
    DOMAIN_TYPOS,
    get_domain_typos,
    load_domain_typos,
)


class TestBuiltinTable:
    """Test the built-in typo table."""

    def test_keys_are_lowercase(self) -> None:
        """Test that every key can match a lowercased domain."""
        assert all(key == key.lower() for key in DOMAIN_TYPOS)

    def test_corrections_are_not_typos(self) -> None:
        """Test that no correction is itself listed as a typo."""
        assert not set(DOMAIN_TYPOS.values()) & set(DOMAIN_TYPOS)

    def test_table_is_read_only(self) -> None:
        """Test that the table cannot be modified."""
        with pytest.raises(TypeError):
            DOMAIN_TYPOS["example.cm"] = "example.com"  # type: ignore[index]


class TestLoadDomainTypos:
    """Test loading typo tables from JSON files."""

    def test_load_valid_file(self, tmp_path: Path) -> None:
        """Test that entries are normalized to lowercase."""
        path = tmp_path / "typos.json"
        path.write_text(json.dumps({" Exmaple.COM ": "Example.com"}), encoding="utf-8")

        table = load_domain_typos(path)

        assert dict(table) == {"exmaple.com": "example.com"}

    def test_blank_entries_are_skipped(self, tmp_path: Path) -> None:
        """Test that entries with a blank key or value are dropped."""
        path = tmp_path / "typos.json"
        path.write_text(json.dumps({"": "a.com", "b.cm": " "}), encoding="utf-8")

        assert dict(load_domain_typos(path)) == {}

    def test_missing_file(self, tmp_path: Path) -> None:
        """Test that a missing file raises DomainTyposLoadError."""
        path = tmp_path / "missing.json"

        with pytest.raises(DomainTyposLoadError) as exc_info:
            load_domain_typos(path)

        assert exc_info.value.path == str(path)
        assert "cannot read file" in exc_info.value.reason

    def test_invalid_json(self, tmp_path: Path) -> None:
        """Test that malformed JSON raises DomainTyposLoadError."""
        path = tmp_path / "typos.json"
        path.write_text("{not json", encoding="utf-8")

        with pytest.raises(DomainTyposLoadError, match="invalid JSON"):
            load_domain_typos(path)

    @pytest.mark.parametrize(
        "payload",
        [["gmial.com", "gmail.com"], {"gmial.com": 1}, "gmail.com"],
    )
    def test_wrong_shape(self, tmp_path: Path, payload: object) -> None:
        """Test that anything but a string-to-string object is rejected."""
        path = tmp_path / "typos.json"
        path.write_text(json.dumps(payload), encoding="utf-8")

        with pytest.raises(DomainTyposLoadError, match="string to string"):
            load_domain_typos(path)

    def test_error_is_app_error(self) -> None:
        """Test the exception hierarchy."""
        error = DomainTyposLoadError("typos.json", "expected a JSON object")

        assert isinstance(error, AppError)
        assert str(error) == (
            "Failed to load domain typos from 'typos.json': expected a JSON object"
        )


@pytest.mark.usefixtures("reset_domain_typos")
class TestGetDomainTypos:
    """Test the cached effective table."""

    def test_defaults_to_builtin(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that without a file the built-in table is used."""
        monkeypatch.setattr(settings, "DOMAIN_TYPOS_FILE", None)

        assert get_domain_typos() is DOMAIN_TYPOS

    def test_file_entries_extend_and_override(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Test that configured entries are merged over the built-in ones."""
        path = tmp_path / "typos.json"
        path.write_text(
            json.dumps({"gmial.com": "googlemail.com", "exmaple.org": "example.org"}),
            encoding="utf-8",
        )
        monkeypatch.setattr(settings, "DOMAIN_TYPOS_FILE", str(path))

        table = get_domain_typos()

        assert table["gmial.com"] == "googlemail.com"
        assert table["exmaple.org"] == "example.org"
        assert table["yahooo.com"] == "yahoo.com"

    def test_result_is_cached(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that repeated calls return the same table."""
        monkeypatch.setattr(settings, "DOMAIN_TYPOS_FILE", None)

        assert get_domain_typos() is get_domain_typos()

    def test_bad_file_raises(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Test that a misconfigured file surfaces as DomainTyposLoadError."""
        monkeypatch.setattr(settings, "DOMAIN_TYPOS_FILE", str(tmp_path / "nope.json"))

        with pytest.raises(DomainTyposLoadError):
            get_domain_typos()
