"""Email validation: the validator and its domain typo table."""

from mailcheck.validation.typos import DOMAIN_TYPOS, get_domain_typos, load_domain_typos
from mailcheck.validation.validator import (
    EMAIL_PATTERN,
    TRIM_CHARACTERS,
    is_valid_email_format,
    split_email,
    validate_email,
)

__all__ = [
    "DOMAIN_TYPOS",
    "EMAIL_PATTERN",
    "TRIM_CHARACTERS",
    "get_domain_typos",
    "is_valid_email_format",
    "load_domain_typos",
    "split_email",
    "validate_email",
]
