"""Pydantic schemas for email validation.

ValidationResult is the value returned by ``validate_email`` and the
response body of the validation endpoints. Results are frozen; message
sequences are tuples so nothing can be appended after the fact.
"""

from __future__ import annotations

from pydantic import ConfigDict, Field

from mailcheck.schemas.base import BaseSchema

# Upper bound for a single batch request
MAX_BATCH_SIZE = 100


# =============================================================================
# Result Schemas
# =============================================================================


class ValidationDetails(BaseSchema):
    """Parsed parts of the address and the outcome of each check group."""

    model_config = ConfigDict(frozen=True)

    local_part: str = Field(
        ...,
        description="Substring before the last @ (empty when not splittable)",
        examples=["jane.doe"],
    )
    domain: str = Field(
        ...,
        description="Substring after the last @ (empty when not splittable)",
        examples=["example.com"],
    )
    has_valid_format: bool = Field(
        ...,
        description="Whole address matches the local@domain pattern",
    )
    has_valid_length: bool = Field(
        ...,
        description="Trimmed address length is between 1 and 320",
    )
    has_valid_local_part: bool = Field(
        ...,
        description="Local part passed all local part checks",
    )
    has_valid_domain: bool = Field(
        ...,
        description="Domain passed all domain checks",
    )


class ValidationResult(BaseSchema):
    """Diagnostic report for a single email address.

    Errors and warnings are ordered by the check that produced them.
    """

    model_config = ConfigDict(frozen=True)

    email: str = Field(
        ...,
        description="Input with leading and trailing whitespace removed",
        examples=["jane.doe@example.com"],
    )
    is_valid: bool = Field(
        ...,
        description="True when every check passed and no error was recorded",
    )
    errors: tuple[str, ...] = Field(
        default=(),
        description="Blocking problems, in check order",
    )
    warnings: tuple[str, ...] = Field(
        default=(),
        description="Non-blocking remarks, in check order",
    )
    suggestions: str | None = Field(
        default=None,
        description="Corrected address when the domain is a known misspelling",
        examples=["jane.doe@gmail.com"],
    )
    details: ValidationDetails


# =============================================================================
# Request/Response Schemas
# =============================================================================


class EmailValidationRequest(BaseSchema):
    """Request body for validating one address."""

    email: str = Field(
        ...,
        description="Raw address as entered by the user",
        examples=["jane.doe@gmial.com"],
    )


class BatchValidationRequest(BaseSchema):
    """Request body for validating several addresses at once."""

    emails: list[str] = Field(
        ...,
        min_length=1,
        max_length=MAX_BATCH_SIZE,
        description=f"Raw addresses (1-{MAX_BATCH_SIZE})",
    )


class BatchValidationResponse(BaseSchema):
    """Results for a batch request, in request order."""

    results: list[ValidationResult] = Field(
        ...,
        description="One result per submitted address",
    )
    total: int = Field(..., ge=0, description="Number of addresses checked")
    valid: int = Field(..., ge=0, description="Number of valid addresses")
    invalid: int = Field(..., ge=0, description="Number of invalid addresses")

    @classmethod
    def from_results(cls, results: list[ValidationResult]) -> BatchValidationResponse:
        """Build the response and its counters from a list of results."""
        valid = sum(1 for result in results if result.is_valid)
        return cls(
            results=results,
            total=len(results),
            valid=valid,
            invalid=len(results) - valid,
        )
