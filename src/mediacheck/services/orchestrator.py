"""Top-level workflow for a single validation run."""

import asyncio

from mediacheck.clients.fetcher import FetchError, MediaFetcher
from mediacheck.errors import InvalidURLError, PageFetchError
from mediacheck.models import AbsoluteURL, ValidationReport
from mediacheck.services.checker import ConcurrentChecker
from mediacheck.services.extractor import extract_media_urls
from mediacheck.services.report import aggregate
from mediacheck.services.resolver import parse_absolute, resolve_reference
from mediacheck.utils.logging import get_logger

logger = get_logger(__name__)


class ValidationRun:
    """Fetches one page and checks every media resource it references."""

    def __init__(self, fetcher: MediaFetcher) -> None:
        self._fetcher = fetcher
        self._checker = ConcurrentChecker(fetcher)

    async def run(self, page_url: str, timeout_ms: int) -> ValidationReport:
        """Run the complete validation.

        A single deadline, set when the run starts, bounds the page fetch and
        every media check.

        Args:
            page_url: Absolute URL of the page to validate.
            timeout_ms: Time budget for the whole run, in milliseconds.

        Returns:
            ValidationReport with every media failure found.

        Raises:
            InvalidURLError: If page_url is not an absolute URL.
            PageFetchError: If the page cannot be fetched or is not a 200.
            HTMLParseError: If the page cannot be parsed as HTML.
            MixedContentError: If a secure page references an insecure resource.
        """
        url = parse_absolute(page_url)
        deadline = asyncio.get_running_loop().time() + timeout_ms / 1000

        logger.info(
            "Fetching page",
            url=str(url),
            scheme=url.scheme,
            host=url.host,
            path=url.path,
            timeout_ms=timeout_ms,
        )
        body = await self._fetch_page(url, deadline)
        logger.info("Retrieved page", url=str(url), size=len(body))

        references = list(extract_media_urls(body))
        logger.info("Extracted media URLs", number=len(references))

        # Every reference is resolved before any check starts, so a policy
        # violation aborts the run with nothing in flight.
        media_urls: list[AbsoluteURL] = []
        for reference in references:
            try:
                media_urls.append(resolve_reference(url, reference))
            except InvalidURLError as e:
                logger.warning("Skipping unresolvable reference", reference=reference, reason=e.reason)

        failures = await self._checker.check_all(media_urls, deadline)
        return aggregate(url, media_urls, failures)

    async def _fetch_page(self, url: AbsoluteURL, deadline: float) -> bytes:
        """Fetch the page body, requiring a 200 response."""
        try:
            outcome = await self._fetcher.fetch(url, deadline)
        except FetchError as e:
            logger.error("Failed to fetch page", url=str(url), error=e.reason)
            raise PageFetchError(e.reason) from e

        if not outcome.is_success:
            status = f"{outcome.status_code} {outcome.reason_phrase}".strip()
            logger.error("Bad response status", url=str(url), status=status)
            raise PageFetchError(f"bad response status: {status}")

        return outcome.body
