"""Email validation API router.

Exposes the structural validator over HTTP for form-validation clients.
Invalid addresses are a normal 200 response with ``isValid: false``;
only malformed request bodies produce 422.
"""

from __future__ import annotations

from fastapi import APIRouter

from mailcheck.api.deps import DomainTypos
from mailcheck.core.logging import LogContext, get_logger
from mailcheck.schemas.validation import (
    BatchValidationRequest,
    BatchValidationResponse,
    EmailValidationRequest,
    ValidationResult,
)
from mailcheck.validation import validate_email

router = APIRouter()

logger = get_logger(__name__)


@router.post(
    "/validate",
    response_model=ValidationResult,
    summary="Validate Email",
    description="Run every structural check on one address and report all findings.",
    responses={
        200: {"description": "Validation completed (valid or not)"},
        422: {"description": "Request body is not {\"email\": <string>}"},
    },
)
async def validate_single(
    payload: EmailValidationRequest,
    domain_typos: DomainTypos,
) -> ValidationResult:
    """Validate a single email address.

    Args:
        payload: Body carrying the raw address.
        domain_typos: Effective typo table (injected).

    Returns:
        ValidationResult for the address.
    """
    return validate_email(payload.email, domain_typos)


@router.post(
    "/validate/batch",
    response_model=BatchValidationResponse,
    summary="Validate Emails in Batch",
    description="Validate up to 100 addresses; results keep request order.",
    responses={
        200: {"description": "Validation completed"},
        422: {"description": "Empty, oversized or malformed batch"},
    },
)
async def validate_batch(
    payload: BatchValidationRequest,
    domain_typos: DomainTypos,
) -> BatchValidationResponse:
    """Validate several email addresses."""
    with LogContext(logger, action="validate_batch", size=len(payload.emails)):
        results = [validate_email(email, domain_typos) for email in payload.emails]
        response = BatchValidationResponse.from_results(results)
        logger.info(
            f"Validated batch of {response.total}: {response.valid} valid, "
            f"{response.invalid} invalid"
        )

    return response
