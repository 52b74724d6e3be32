"""Application exception classes.

Validation outcomes are never exceptions; these cover configuration
problems detected while the service starts up.
"""

from __future__ import annotations


class AppError(Exception):
    """Base application exception."""


class DomainTyposLoadError(AppError):
    """Raised when the domain typo table file cannot be loaded.

    Attributes:
        path: Path of the file that failed to load
        reason: Short description of what went wrong

    Example:
        >>> raise DomainTyposLoadError(
        ...     path="typos.json",
        ...     reason="expected a JSON object",
        ... )
    """

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load domain typos from '{path}': {reason}")
