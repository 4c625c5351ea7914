"""API routes for mediacheck."""

from fastapi import APIRouter, HTTPException, status

from mediacheck import __version__
from mediacheck.api.models import CheckRequest, CheckResponse, FailureModel, HealthResponse
from mediacheck.clients.fetcher import MediaFetcher
from mediacheck.config import get_settings
from mediacheck.errors import MediaCheckError, PageFetchError
from mediacheck.services.orchestrator import ValidationRun
from mediacheck.utils.logging import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/api/v1", tags=["api"])


def _error_status(error: MediaCheckError) -> int:
    """Map a fatal run error to an HTTP status code."""
    if isinstance(error, PageFetchError):
        return status.HTTP_502_BAD_GATEWAY
    return 422


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    """Health check endpoint."""
    return HealthResponse(status="healthy", version=__version__)


@router.post("/check", response_model=CheckResponse)
async def check(request: CheckRequest) -> CheckResponse:
    """Validate every media resource referenced by a page.

    Returns:
        CheckResponse listing every media URL that failed.
    """
    logger.info("Check endpoint called", url=request.url, timeout_ms=request.timeout_ms)

    settings = get_settings()
    timeout_ms = request.timeout_ms or settings.timeout_ms

    try:
        async with MediaFetcher(follow_redirects=settings.follow_redirects) as fetcher:
            report = await ValidationRun(fetcher).run(request.url, timeout_ms)
    except MediaCheckError as e:
        logger.warning("Validation aborted", url=request.url, error_kind=e.kind.value, reason=e.reason)
        raise HTTPException(
            status_code=_error_status(e),
            detail={"error": e.kind.value, "reason": e.reason},
        ) from e

    return CheckResponse(
        status="ok" if report.ok else "failed",
        page_url=str(report.page_url),
        media_checked=report.media_checked,
        failures=[
            FailureModel(
                url=str(f.url),
                error=f.kind.value,
                detail=f.detail,
                status_code=f.status_code,
            )
            for f in report.failures
        ],
    )
