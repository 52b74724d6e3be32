"""Pydantic schemas for validation results and API payloads."""

from mailcheck.schemas.base import BaseSchema
from mailcheck.schemas.validation import (
    BatchValidationRequest,
    BatchValidationResponse,
    EmailValidationRequest,
    ValidationDetails,
    ValidationResult,
)

__all__ = [
    "BaseSchema",
    "BatchValidationRequest",
    "BatchValidationResponse",
    "EmailValidationRequest",
    "ValidationDetails",
    "ValidationResult",
]
