"""URL parsing and reference resolution for mediacheck."""

import httpx

from mediacheck.errors import InvalidURLError, MixedContentError
from mediacheck.models import AbsoluteURL
from mediacheck.utils.logging import get_logger

logger = get_logger(__name__)


def parse_absolute(raw: str) -> AbsoluteURL:
    """Parse a user-supplied string into an absolute URL.

    Args:
        raw: The URL as given on the command line or in a request.

    Returns:
        The parsed AbsoluteURL.

    Raises:
        InvalidURLError: If the string is not a URL, or has no scheme or host.
    """
    raw = raw.strip()
    if not raw:
        raise InvalidURLError(raw, "must specify a URL")

    try:
        url = httpx.URL(raw)
    except httpx.InvalidURL as e:
        raise InvalidURLError(raw, f"malformed URL ({e})") from e

    if not url.is_absolute_url or not url.host:
        raise InvalidURLError(raw, "must be an absolute URL")

    return AbsoluteURL(url)


def resolve_reference(base: AbsoluteURL, reference: str) -> AbsoluteURL:
    """Resolve a media reference against the page URL.

    Args:
        base: The URL of the page the reference was found on.
        reference: The attribute value as written in the markup.

    Returns:
        The absolute URL of the referenced resource.

    Raises:
        MixedContentError: If a secure page references a non-secure resource.
        InvalidURLError: If the resolved URL has no host.
    """
    resolved = base.join(reference)
    if base.is_secure and not resolved.is_secure:
        logger.error("HTTP/S mixed content error", url=str(resolved), page=str(base))
        raise MixedContentError(str(resolved))
    if not resolved.host:
        raise InvalidURLError(reference, "reference resolves to a URL without a host")
    return resolved
