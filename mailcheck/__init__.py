"""Mailcheck.

Structural email address validation with typo suggestions.
"""

__version__ = "0.1.0"

from mailcheck.schemas.validation import ValidationDetails, ValidationResult  # noqa: E402
from mailcheck.validation import DOMAIN_TYPOS, EMAIL_PATTERN, validate_email  # noqa: E402

__all__ = [
    "DOMAIN_TYPOS",
    "EMAIL_PATTERN",
    "ValidationDetails",
    "ValidationResult",
    "__version__",
    "validate_email",
]
