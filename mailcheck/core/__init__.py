"""Core application configuration and utilities.

This package contains core functionality including:
- Configuration management (config.py)
- Logging setup (logging.py)
- Application exceptions (exceptions.py)
"""

from mailcheck.core.config import settings
from mailcheck.core.exceptions import AppError, DomainTyposLoadError

__all__ = [
    "AppError",
    "DomainTyposLoadError",
    "settings",
]
