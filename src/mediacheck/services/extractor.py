"""Extraction of media references from HTML markup."""

from collections.abc import Iterator

import httpx
from bs4 import BeautifulSoup, ParserRejectedMarkup, Tag

from mediacheck.errors import HTMLParseError
from mediacheck.utils.logging import get_logger

logger = get_logger(__name__)

# Each qualifying element contributes at most one reference, read from one attribute.
MEDIA_ATTRIBUTES = {
    "img": "src",
    "script": "src",
    "link": "href",
    "video": "src",
    "source": "src",
    "track": "src",
    "iframe": "src",
}


def extract_media_urls(html: bytes) -> Iterator[str]:
    """Parse a page and return its media references in document order.

    The markup is parsed up front, so unparsable input fails here rather than
    on first iteration. Calling again with the same bytes yields the same
    sequence.

    Args:
        html: The raw page body.

    Returns:
        An iterator of attribute values as written in the markup.

    Raises:
        HTMLParseError: If the bytes cannot be parsed as HTML at all.
    """
    try:
        soup = BeautifulSoup(html, "lxml")
    except ParserRejectedMarkup as e:
        raise HTMLParseError(f"parse failed: {e}") from e
    return _iter_references(soup)


def _iter_references(soup: BeautifulSoup) -> Iterator[str]:
    # find_all walks descendants depth-first, pre-order.
    for element in soup.find_all(list(MEDIA_ATTRIBUTES)):
        reference = _get_reference(element)
        if reference is not None:
            yield reference


def _get_reference(element: Tag) -> str | None:
    """Return the element's usable reference, or None to skip it."""
    value = element.get(MEDIA_ATTRIBUTES[element.name])
    if not isinstance(value, str):
        return None

    # HTML trims ASCII whitespace only.
    value = value.strip(" \t\n\f\r")
    if not value:
        return None

    try:
        httpx.URL(value)
    except httpx.InvalidURL:
        logger.info("Skipping unparsable reference", element=element.name, value=value)
        return None
    return value
