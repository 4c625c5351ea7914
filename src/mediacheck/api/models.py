"""Pydantic models for API requests and responses."""

from pydantic import BaseModel, Field


class CheckRequest(BaseModel):
    """Request model for the check endpoint."""

    url: str = Field(description="Absolute URL of the page to check")
    timeout_ms: int | None = Field(
        default=None, gt=0, description="Time budget in milliseconds (defaults to settings)"
    )


class FailureModel(BaseModel):
    """A media URL that failed its check."""

    url: str = Field(description="Resolved URL of the media resource")
    error: str = Field(description="Error kind, e.g. BadStatus or Timeout")
    detail: str = Field(description="Human-readable error detail")
    status_code: int | None = Field(default=None, description="HTTP status, for BadStatus")


class CheckResponse(BaseModel):
    """Response model for the check endpoint."""

    status: str = Field(description="'ok' if every media resource loaded, else 'failed'")
    page_url: str = Field(description="The page that was checked")
    media_checked: int = Field(description="Number of media URLs checked")
    failures: list[FailureModel] = Field(default_factory=list, description="Failed media URLs")


class HealthResponse(BaseModel):
    """Response model for health check endpoint."""

    status: str = Field(description="Health status")
    version: str = Field(description="Application version")
