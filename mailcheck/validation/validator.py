"""Structural email address validation.

Every check runs on every input and appends its own message, so a single
call reports all problems at once instead of stopping at the first one.
Invalid input is never an exception: it is data in the returned
ValidationResult.

Checks, in order:
- surrounding whitespace (warning)
- overall local@domain pattern
- total length (1-320)
- local part: presence, length (64), leading/trailing and consecutive periods
- domain: presence, length (255), known misspellings (warning + suggestion),
  leading/trailing hyphens and periods, consecutive periods, missing TLD
  (warning), spaces
- multiple @ symbols, missing @ symbol
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Final

from mailcheck.core.logging import get_logger
from mailcheck.schemas.validation import ValidationDetails, ValidationResult
from mailcheck.validation.typos import DOMAIN_TYPOS

logger = get_logger(__name__)

# local@domain, ASCII only. Local part: RFC 5322 atext plus periods.
# Domain: one or more alphanumeric/hyphen labels separated by periods.
# Quoted local parts and IP literals are not accepted.
EMAIL_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"[A-Za-z0-9!#$%&'*+/=?^_`{|}~.-]+@[A-Za-z0-9-]+(?:\.[A-Za-z0-9-]+)*"
)

# Whitespace and line terminators removed from both ends of the input:
# tab, VT, FF, space, NBSP, ZWNBSP (BOM), the Zs category, LF, CR, LS, PS.
# Information separators (\x1c-\x1f) and NEL (\x85) are kept.
TRIM_CHARACTERS: Final[str] = (
    "\t\x0b\x0c \xa0\ufeff"
    "\u1680\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u202f\u205f\u3000"
    "\n\r\u2028\u2029"
)

MAX_EMAIL_LENGTH: Final[int] = 320
MAX_LOCAL_PART_LENGTH: Final[int] = 64
MAX_DOMAIN_LENGTH: Final[int] = 255


def is_valid_email_format(email: str | None) -> bool:
    """Check whether the whole string matches EMAIL_PATTERN.

    Examples:
        >>> is_valid_email_format("user+tag@example.co.uk")
        True
        >>> is_valid_email_format("invalid-email")
        False
    """
    if not email:
        return False

    return EMAIL_PATTERN.fullmatch(email) is not None


def split_email(email: str) -> tuple[str, str]:
    """Split an address on its last @.

    Returns ("", "") when there is no @ or the @ is the first character.

    Examples:
        >>> split_email("a@b@example.com")
        ('a@b', 'example.com')
        >>> split_email("@example.com")
        ('', '')
    """
    at_index = email.rfind("@")
    if at_index <= 0:
        return "", ""
    return email[:at_index], email[at_index + 1 :]


def _check_local_part(local_part: str, errors: list[str]) -> bool:
    if not local_part:
        errors.append("Missing local part (before @)")
        return False
    if len(local_part) > MAX_LOCAL_PART_LENGTH:
        errors.append(f"Local part exceeds {MAX_LOCAL_PART_LENGTH} characters")
        return False

    valid = True
    if local_part.startswith(".") or local_part.endswith("."):
        errors.append("Local part cannot start or end with a period")
        valid = False
    if ".." in local_part:
        errors.append("Local part cannot contain consecutive periods")
        valid = False
    return valid


def _check_domain(
    domain: str,
    errors: list[str],
    warnings: list[str],
    domain_typos: Mapping[str, str],
) -> tuple[bool, str | None]:
    """Run the domain checks. Returns (valid, corrected domain or None)."""
    if not domain:
        errors.append("Missing domain (after @)")
        return False, None
    if len(domain) > MAX_DOMAIN_LENGTH:
        errors.append(f"Domain exceeds {MAX_DOMAIN_LENGTH} characters")
        return False, None

    valid = True

    corrected = domain_typos.get(domain.lower())
    if corrected:
        warnings.append(f'Did you mean "{corrected}"?')

    if domain.startswith("-") or domain.endswith("-"):
        errors.append("Domain labels cannot start or end with hyphens")
        valid = False
    if domain.startswith(".") or domain.endswith("."):
        errors.append("Domain cannot start or end with a period")
        valid = False
    if ".." in domain:
        errors.append("Domain cannot contain consecutive periods")
        valid = False
    if "." not in domain:
        warnings.append("Domain should typically include a TLD (e.g., .com, .org)")
    if " " in domain:
        errors.append("Domain cannot contain spaces")
        valid = False

    return valid, corrected or None


def validate_email(
    email: str,
    domain_typos: Mapping[str, str] = DOMAIN_TYPOS,
) -> ValidationResult:
    """Validate an email address and report every problem found.

    Args:
        email: Raw address, possibly with surrounding whitespace
        domain_typos: Lowercased misspelled domain -> corrected domain.
            Defaults to the built-in table

    Returns:
        Immutable ValidationResult. ``is_valid`` is True only when the
        format, length, local part and domain checks all pass and no error
        was recorded.

    Examples:
        >>> result = validate_email("user@gmial.com")
        >>> result.is_valid, result.suggestions
        (True, 'user@gmail.com')
        >>> validate_email("a..b@example.com").errors
        ('Local part cannot contain consecutive periods',)
    """
    errors: list[str] = []
    warnings: list[str] = []

    trimmed = email.strip(TRIM_CHARACTERS)
    if trimmed != email:
        warnings.append("Email has leading or trailing whitespace")

    local_part, domain = split_email(trimmed)

    has_valid_format = is_valid_email_format(trimmed)

    has_valid_length = 0 < len(trimmed) <= MAX_EMAIL_LENGTH
    if not trimmed:
        errors.append("Email cannot be empty")
    elif len(trimmed) > MAX_EMAIL_LENGTH:
        errors.append(f"Email exceeds maximum length of {MAX_EMAIL_LENGTH} characters")

    has_valid_local_part = _check_local_part(local_part, errors)
    has_valid_domain, corrected = _check_domain(domain, errors, warnings, domain_typos)
    suggestion = f"{local_part}@{corrected}" if corrected else None

    at_count = trimmed.count("@")
    if at_count > 1:
        errors.append("Email cannot contain multiple @ symbols")
    if at_count == 0:
        errors.append("Email must contain an @ symbol")

    is_valid = (
        has_valid_format
        and has_valid_length
        and has_valid_local_part
        and has_valid_domain
        and not errors
    )

    logger.debug(
        "Email validated",
        extra={
            "context": {
                "is_valid": is_valid,
                "error_count": len(errors),
                "warning_count": len(warnings),
                "has_suggestion": suggestion is not None,
            }
        },
    )

    return ValidationResult(
        email=trimmed,
        is_valid=is_valid,
        errors=tuple(errors),
        warnings=tuple(warnings),
        suggestions=suggestion,
        details=ValidationDetails(
            local_part=local_part,
            domain=domain,
            has_valid_format=has_valid_format,
            has_valid_length=has_valid_length,
            has_valid_local_part=has_valid_local_part,
            has_valid_domain=has_valid_domain,
        ),
    )


__all__ = [
    "EMAIL_PATTERN",
    "MAX_DOMAIN_LENGTH",
    "MAX_EMAIL_LENGTH",
    "MAX_LOCAL_PART_LENGTH",
    "TRIM_CHARACTERS",
    "is_valid_email_format",
    "split_email",
    "validate_email",
]
