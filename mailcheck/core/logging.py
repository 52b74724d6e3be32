"""Structured logging configuration for the Mailcheck service.

This module provides the logging system with:
- JSON structured logging for production environments
- Colored console output for development
- Optional rotating file handler
- Email address redaction, since validated input is personal data
- Scoped context on log records

Context is attached through ``extra={"context": {...}}`` or ``LogContext``.
Scoped context lives in a ContextVar and is merged into records by
``LogContextFilter`` at handler time, so both can be used together.
"""

from __future__ import annotations

import copy
import json
import logging
import re
import sys
from contextvars import ContextVar, Token
from datetime import UTC, datetime
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, ClassVar

from mailcheck import __version__
from mailcheck.core.config import settings

_log_context: ContextVar[dict[str, Any]] = ContextVar("log_context", default={})


class EmailRedactionFilter(logging.Filter):
    """Filter that masks email addresses in log records.

    Keeps the first character of the local part and the whole domain.
    Matches any non-space local part, including non-ASCII ones and ones
    starting with a period.

    Examples:
        >>> logger = logging.getLogger("mailcheck")
        >>> logger.addFilter(EmailRedactionFilter())
        >>> logger.info("Checked jane.doe@example.com")
        # Logs: "Checked j***@example.com"
    """

    EMAIL_RE: ClassVar[re.Pattern[str]] = re.compile(
        r"(?P<first>[^\s@<>()\[\],;:\"])[^\s@<>()\[\],;:\"]*"
        r"@(?P<domain>[^\s@<>()\[\],;:\"']+)"
    )

    def filter(self, record: logging.LogRecord) -> bool:
        """Redact email addresses from the message and its string args.

        Args:
            record: Log record to filter

        Returns:
            True (always allows the record, but redacts addresses)
        """
        record.msg = self.redact(str(record.msg))

        if record.args and isinstance(record.args, tuple):
            record.args = tuple(
                self.redact(arg) if isinstance(arg, str) else arg for arg in record.args
            )

        return True

    @classmethod
    def redact(cls, text: str) -> str:
        """Replace each email address in text with its masked form."""
        return cls.EMAIL_RE.sub(r"\g<first>***@\g<domain>", text)


class LogContextFilter(logging.Filter):
    """Merge the active LogContext into each record.

    Runs at handler time, after the record exists, so per-call
    ``extra={"context": ...}`` never collides with scoped context.
    Per-call keys win over scoped ones.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        scoped = _log_context.get()
        if scoped:
            record.context = {**scoped, **getattr(record, "context", {})}
        return True


class JSONFormatter(logging.Formatter):
    """JSON formatter for structured logging.

    Format:
        {
            "timestamp": "2026-01-12T10:30:45.123Z",
            "level": "INFO",
            "logger": "mailcheck.api.v1.emails",
            "message": "Email validated",
            "service": "Mailcheck API",
            "version": "0.1.0",
            "context": {"is_valid": true, "error_count": 0}
        }
    """

    def __init__(
        self,
        service_name: str = "Mailcheck API",
        service_version: str = __version__,
    ) -> None:
        super().__init__()
        self.service_name = service_name
        self.service_version = service_version

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON.

        Args:
            record: Log record to format

        Returns:
            JSON-formatted log string
        """
        log_entry: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=UTC)
            .isoformat()
            .replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "service": self.service_name,
            "version": self.service_version,
        }

        if hasattr(record, "context"):
            log_entry["context"] = record.context

        if record.exc_info:
            log_entry["exception"] = {
                "type": record.exc_info[0].__name__ if record.exc_info[0] else None,
                "message": str(record.exc_info[1]) if record.exc_info[1] else None,
                "traceback": self.formatException(record.exc_info),
            }

        # Source location for ERROR and above
        if record.levelno >= logging.ERROR:
            log_entry["source"] = {
                "function": record.funcName,
                "line": record.lineno,
                "file": record.pathname,
                "process": record.process,
                "thread": record.thread,
            }

        return json.dumps(log_entry, default=str, ensure_ascii=False)


class ColoredConsoleFormatter(logging.Formatter):
    """Colored console formatter for development environments."""

    # ANSI color codes
    COLORS: ClassVar[dict[str, str]] = {
        "DEBUG": "\033[36m",  # Cyan
        "INFO": "\033[32m",  # Green
        "WARNING": "\033[33m",  # Yellow
        "ERROR": "\033[31m",  # Red
        "CRITICAL": "\033[41m",  # Red background
    }
    RESET: ClassVar[str] = "\033[0m"

    def __init__(self) -> None:
        super().__init__(
            fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    def format(self, record: logging.LogRecord) -> str:
        # Other handlers share the record; decorate a copy.
        record = copy.copy(record)
        log_color = self.COLORS.get(record.levelname, self.RESET)
        record.levelname = f"{log_color}{record.levelname}{self.RESET}"

        if hasattr(record, "context") and record.context:
            record.msg = f"{record.msg} | Context: {json.dumps(record.context, default=str)}"

        return super().format(record)


def setup_logging(
    log_level: str | None = None,
    log_file: str | None = None,
    service_name: str = "Mailcheck API",
    enable_json: bool = True,
    enable_console: bool = True,
    redact_emails: bool = True,
) -> logging.Logger:
    """Configure application logging with structured handlers.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
                   Defaults to settings.LOG_LEVEL
        log_file: Path to a rotating log file. No file handler when None
        service_name: Name of the service for log metadata
        enable_json: Enable JSON formatting for the file handler
        enable_console: Enable console output handler
        redact_emails: Attach EmailRedactionFilter to every handler.
            LogContextFilter is always attached

    Returns:
        Configured root logger instance

    Examples:
        >>> logger = setup_logging(log_level="INFO")
        >>> logger.info("Service started", extra={"context": {"port": 8000}})
    """
    if log_level is None:
        log_level = settings.LOG_LEVEL
    level = getattr(logging, log_level.upper(), logging.INFO)

    logger = logging.getLogger()
    logger.setLevel(level)

    # Remove existing handlers to avoid duplicates
    logger.handlers.clear()

    context_filter = LogContextFilter()
    redaction_filter = EmailRedactionFilter() if redact_emails else None

    if log_file is not None:
        log_file_path = Path(log_file)
        log_file_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = RotatingFileHandler(
            filename=str(log_file_path),
            maxBytes=10 * 1024 * 1024,  # 10MB
            backupCount=5,
            encoding="utf-8",
        )
        file_handler.setLevel(logging.DEBUG)

        if enable_json:
            file_handler.setFormatter(JSONFormatter(service_name=service_name))
        else:
            file_handler.setFormatter(
                logging.Formatter(
                    "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                    datefmt="%Y-%m-%d %H:%M:%S",
                )
            )

        file_handler.addFilter(context_filter)
        if redaction_filter is not None:
            file_handler.addFilter(redaction_filter)
        logger.addHandler(file_handler)

    if enable_console:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(level)

        # Colored output in development, JSON in production
        if settings.DEBUG:
            console_handler.setFormatter(ColoredConsoleFormatter())
        else:
            console_handler.setFormatter(JSONFormatter(service_name=service_name))

        console_handler.addFilter(context_filter)
        if redaction_filter is not None:
            console_handler.addFilter(redaction_filter)
        logger.addHandler(console_handler)

    logger.info(
        f"Logging initialized - Level: {log_level}, File: {log_file}",
        extra={
            "context": {
                "log_level": log_level,
                "log_file": log_file,
                "service": service_name,
            }
        },
    )

    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance with the specified name.

    Examples:
        >>> from mailcheck.core.logging import get_logger
        >>> logger = get_logger(__name__)
        >>> logger.info("Validating batch")
    """
    return logging.getLogger(name)


class LogContext:
    """Context helper for adding structured context to log records.

    The context is scoped to the current thread or asyncio task and is
    merged into records by LogContextFilter, which setup_logging attaches
    to every handler. Contexts nest; inner keys win.

    Examples:
        >>> logger = get_logger(__name__)
        >>> with LogContext(logger, action="validate_batch", size=3):
        ...     logger.info("Validating batch")
        # Logs: "Validating batch" with context {action: ..., size: 3}
    """

    def __init__(self, logger: logging.Logger, **context: Any) -> None:
        self.logger = logger
        self.context = context
        self._token: Token[dict[str, Any]] | None = None

    def __enter__(self) -> None:
        """Enter context and activate the scoped context."""
        self._token = _log_context.set({**_log_context.get(), **self.context})

    def __exit__(self, *args: Any) -> None:
        """Exit context and restore the enclosing context."""
        if self._token is not None:
            _log_context.reset(self._token)
            self._token = None


__all__ = [
    "ColoredConsoleFormatter",
    "EmailRedactionFilter",
    "JSONFormatter",
    "LogContext",
    "LogContextFilter",
    "get_logger",
    "setup_logging",
]
