"""Common email domain misspellings and their corrections.

The built-in table is read-only. Deployments can extend it with a JSON
object file (``DOMAIN_TYPOS_FILE``) whose entries override built-in ones.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Final

from pydantic import TypeAdapter, ValidationError

from mailcheck.core.config import settings
from mailcheck.core.exceptions import DomainTyposLoadError
from mailcheck.core.logging import get_logger

logger = get_logger(__name__)

_TYPOS_ADAPTER: Final[TypeAdapter[dict[str, str]]] = TypeAdapter(dict[str, str])

DOMAIN_TYPOS: Final[Mapping[str, str]] = MappingProxyType(
    {
        # Gmail
        "gmial.com": "gmail.com",
        "gmai.com": "gmail.com",
        "gmil.com": "gmail.com",
        "gmaill.com": "gmail.com",
        "gmali.com": "gmail.com",
        "gmal.com": "gmail.com",
        "gnail.com": "gmail.com",
        "gamil.com": "gmail.com",
        "gmail.co": "gmail.com",
        "gmail.con": "gmail.com",
        "gmail.cmo": "gmail.com",
        "gmail.ocm": "gmail.com",
        "gmail.comm": "gmail.com",
        "gmailcom": "gmail.com",
        # Yahoo
        "yahooo.com": "yahoo.com",
        "yaho.com": "yahoo.com",
        "yhaoo.com": "yahoo.com",
        "yhoo.com": "yahoo.com",
        "yahoo.co": "yahoo.com",
        "yahoo.con": "yahoo.com",
        "yahoo.cmo": "yahoo.com",
        "yahoocom": "yahoo.com",
        # Hotmail
        "hotmial.com": "hotmail.com",
        "hotmai.com": "hotmail.com",
        "hotmal.com": "hotmail.com",
        "hotmil.com": "hotmail.com",
        "hotmaill.com": "hotmail.com",
        "hotamil.com": "hotmail.com",
        "homail.com": "hotmail.com",
        "hotmail.co": "hotmail.com",
        "hotmail.con": "hotmail.com",
        "hotmailcom": "hotmail.com",
        # Outlook
        "outlok.com": "outlook.com",
        "outloo.com": "outlook.com",
        "outlookk.com": "outlook.com",
        "outllok.com": "outlook.com",
        "otlook.com": "outlook.com",
        "outlook.co": "outlook.com",
        "outlook.con": "outlook.com",
        # iCloud
        "iclod.com": "icloud.com",
        "icoud.com": "icloud.com",
        "icloud.co": "icloud.com",
        "icloud.con": "icloud.com",
        # AOL
        "aol.co": "aol.com",
        "aol.con": "aol.com",
        "aoll.com": "aol.com",
        # Live
        "live.co": "live.com",
        "live.con": "live.com",
        "liv.com": "live.com",
        # Proton
        "protonmial.com": "protonmail.com",
        "protonmal.com": "protonmail.com",
        "protonmail.co": "protonmail.com",
    }
)


def load_domain_typos(path: str | Path) -> Mapping[str, str]:
    """Load a domain typo table from a JSON file.

    The file must contain a single JSON object mapping misspelled domains
    to their corrections. Keys and values are stripped and lowercased.

    Args:
        path: Path to the JSON file

    Returns:
        Read-only mapping of misspelled domain to corrected domain

    Raises:
        DomainTyposLoadError: If the file is missing, not valid JSON, or not
            a string-to-string object
    """
    file_path = Path(path)

    try:
        raw = json.loads(file_path.read_text(encoding="utf-8"))
    except OSError as e:
        raise DomainTyposLoadError(str(file_path), f"cannot read file ({e})") from e
    except json.JSONDecodeError as e:
        raise DomainTyposLoadError(str(file_path), f"invalid JSON ({e.msg})") from e

    try:
        entries = _TYPOS_ADAPTER.validate_python(raw, strict=True)
    except ValidationError as e:
        raise DomainTyposLoadError(
            str(file_path), "expected a JSON object of string to string"
        ) from e

    table = {
        typo.strip().lower(): correction.strip().lower()
        for typo, correction in entries.items()
        if typo.strip() and correction.strip()
    }

    logger.info(
        f"Loaded {len(table)} domain typos from {file_path}",
        extra={"context": {"action": "load_domain_typos", "entries": len(table)}},
    )

    return MappingProxyType(table)


@lru_cache
def get_domain_typos() -> Mapping[str, str]:
    """Get the effective typo table: built-in entries plus the configured file.

    Cached after the first call. Raises DomainTyposLoadError when the
    configured file is unusable.
    """
    if not settings.DOMAIN_TYPOS_FILE:
        return DOMAIN_TYPOS

    extra = load_domain_typos(settings.DOMAIN_TYPOS_FILE)
    return MappingProxyType({**DOMAIN_TYPOS, **extra})


__all__ = [
    "DOMAIN_TYPOS",
    "get_domain_typos",
    "load_domain_typos",
]
