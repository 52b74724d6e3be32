"""FastAPI application entry point.

This module defines the FastAPI application with CORS middleware,
lifespan management, and API routing configuration.

Logging:
    Initializes structured logging on import.
    The domain typo table is loaded during startup so a bad
    DOMAIN_TYPOS_FILE stops the service before it accepts requests.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from mailcheck import __version__
from mailcheck.api import router as api_router
from mailcheck.core.config import settings
from mailcheck.core.logging import get_logger, setup_logging
from mailcheck.validation.typos import get_domain_typos

setup_logging(
    log_level=settings.LOG_LEVEL,
    log_file=settings.LOG_FILE,
    service_name=settings.PROJECT_NAME,
    enable_json=settings.LOG_JSON_FORMAT,
    redact_emails=settings.LOG_REDACT_EMAILS,
)

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:  # noqa: ARG001 - Required by FastAPI lifespan interface
    """Application lifespan context manager.

    Loads the domain typo table on startup and logs startup/shutdown.
    """
    logger.info(
        f"Starting {settings.PROJECT_NAME}",
        extra={
            "context": {
                "action": "application_startup",
                "version": __version__,
                "debug": settings.DEBUG,
                "log_level": settings.LOG_LEVEL,
            }
        },
    )

    domain_typos = get_domain_typos()

    logger.info(
        "Application startup completed",
        extra={
            "context": {
                "action": "application_startup",
                "status": "success",
                "domain_typos": len(domain_typos),
            }
        },
    )

    yield

    logger.info(
        f"Shutting down {settings.PROJECT_NAME}",
        extra={"context": {"action": "application_shutdown"}},
    )


app = FastAPI(
    title=settings.PROJECT_NAME,
    description="Structural email address validation with typo suggestions",
    version=__version__,
    openapi_url=f"{settings.API_V1_PREFIX}/openapi.json",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(api_router, prefix=settings.API_V1_PREFIX)


@app.get("/health", tags=["Health"])
async def health_check() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "healthy"}


@app.get("/", tags=["Root"])
async def root() -> dict[str, str]:
    """Root endpoint.

    Returns basic API information.
    """
    return {
        "name": settings.PROJECT_NAME,
        "version": __version__,
        "docs": "/docs",
    }
