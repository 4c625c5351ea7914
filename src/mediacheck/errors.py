"""Errors that terminate a validation run."""

from mediacheck.models import ErrorKind


class MediaCheckError(Exception):
    """Base class for failures that compromise the whole run."""

    kind: ErrorKind

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(reason)


class InvalidURLError(MediaCheckError):
    """Raised when the page URL is malformed or not absolute."""

    kind = ErrorKind.INVALID_URL

    def __init__(self, raw: str, reason: str) -> None:
        self.raw = raw
        super().__init__(f"{reason}: {raw!r}")


class MixedContentError(MediaCheckError):
    """Raised when a secure page references a resource over an insecure scheme."""

    kind = ErrorKind.MIXED_CONTENT

    def __init__(self, url: str) -> None:
        self.url = url
        super().__init__(f"HTTP/S mixed content: {url}")


class PageFetchError(MediaCheckError):
    """Raised when the page itself cannot be fetched or is not a 200."""

    kind = ErrorKind.PAGE_FETCH_FAILURE


class HTMLParseError(MediaCheckError):
    """Raised when the page body cannot be parsed as HTML at all."""

    kind = ErrorKind.PARSE_ERROR
