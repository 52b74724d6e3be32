"""API v1 routing configuration.

This module defines all v1 API routes.
"""

from fastapi import APIRouter

from mailcheck.api.v1 import emails

router = APIRouter()

router.include_router(emails.router, prefix="/emails", tags=["Emails"])


@router.get("/status", tags=["Status"])
async def api_status() -> dict[str, str]:
    """API v1 status check."""
    return {"status": "ok", "version": "v1"}
