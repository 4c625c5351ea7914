"""FastAPI application entry point for mediacheck."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI

from mediacheck import __version__
from mediacheck.api.routes import router
from mediacheck.config import get_settings
from mediacheck.services.extractor import MEDIA_ATTRIBUTES
from mediacheck.utils.logging import get_logger, setup_logging


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Set up logging from settings for the lifetime of the service."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    get_logger(__name__).info(
        "mediacheck service ready",
        version=__version__,
        timeout_ms=settings.timeout_ms,
        follow_redirects=settings.follow_redirects,
    )
    yield


app = FastAPI(
    title="mediacheck",
    description="Checks that every media resource referenced by a page is reachable",
    version=__version__,
    lifespan=lifespan,
)

app.include_router(router)


@app.get("/")
async def root() -> dict[str, Any]:
    """Describe what the service checks and how to call it."""
    return {
        "name": "mediacheck",
        "version": __version__,
        "check": "POST /api/v1/check",
        "health": "GET /api/v1/health",
        "default_timeout_ms": get_settings().timeout_ms,
        "checked_elements": MEDIA_ATTRIBUTES,
    }
