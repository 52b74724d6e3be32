"""API routing configuration."""

from mailcheck.api.v1 import router

__all__ = ["router"]
