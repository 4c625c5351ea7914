"""Shared data models for mediacheck."""

from dataclasses import dataclass, field
from enum import Enum

import httpx


class ErrorKind(str, Enum):
    """Classification of everything that can go wrong during a run."""

    INVALID_URL = "InvalidURL"
    MIXED_CONTENT = "MixedContent"
    PAGE_FETCH_FAILURE = "PageFetchFailure"
    PARSE_ERROR = "ParseError"
    NETWORK_ERROR = "NetworkError"
    TIMEOUT = "Timeout"
    BAD_STATUS = "BadStatus"


@dataclass(frozen=True)
class AbsoluteURL:
    """A fully-qualified URL.

    Only ever built by parsing an absolute string or by joining a reference
    onto another AbsoluteURL, so the scheme is never empty.
    """

    url: httpx.URL

    @property
    def scheme(self) -> str:
        return self.url.scheme

    @property
    def host(self) -> str:
        return self.url.host

    @property
    def path(self) -> str:
        return self.url.path

    @property
    def query(self) -> str:
        return self.url.query.decode("ascii")

    @property
    def is_secure(self) -> bool:
        return self.url.scheme == "https"

    def join(self, reference: str) -> "AbsoluteURL":
        """Resolve a possibly-relative reference against this URL."""
        return AbsoluteURL(self.url.join(reference))

    def __str__(self) -> str:
        return str(self.url)


@dataclass
class FetchOutcome:
    """A response received before the deadline, whatever its status."""

    status_code: int
    body: bytes
    reason_phrase: str = ""

    @property
    def is_success(self) -> bool:
        """Only an exact 200 counts as success."""
        return self.status_code == 200


@dataclass
class Failure:
    """A single media URL that could not be validated."""

    url: AbsoluteURL
    kind: ErrorKind
    detail: str
    status_code: int | None = None


@dataclass
class ValidationReport:
    """Verdict of a completed validation run."""

    page_url: AbsoluteURL
    media_urls: list[AbsoluteURL] = field(default_factory=list)
    failures: list[Failure] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failures

    @property
    def media_checked(self) -> int:
        return len(self.media_urls)
