"""Concurrent reachability checks for resolved media URLs."""

import asyncio
from collections.abc import Iterable

from mediacheck.clients.fetcher import FetchError, MediaFetcher
from mediacheck.models import AbsoluteURL, ErrorKind, Failure
from mediacheck.utils.logging import get_logger

logger = get_logger(__name__)


class ConcurrentChecker:
    """Checks many media URLs at once under a single shared deadline."""

    def __init__(self, fetcher: MediaFetcher) -> None:
        self._fetcher = fetcher

    async def check_all(
        self, media_urls: Iterable[AbsoluteURL], deadline: float
    ) -> list[Failure]:
        """Check every URL concurrently and collect the ones that fail.

        Every check runs to completion (success, failure or deadline) before
        this returns; a failing check never cancels its siblings.

        Args:
            media_urls: Absolute URLs to check.
            deadline: Loop time shared by all checks.

        Returns:
            Failures in the order they were discovered.
        """
        urls = list(media_urls)
        failures: list[Failure] = []

        # Each check handles its own errors, so gather only returns once all are done.
        await asyncio.gather(*[self._check(url, deadline, failures) for url in urls])

        logger.info("Media checks complete", checked=len(urls), failed=len(failures))
        return failures

    async def _check(
        self, url: AbsoluteURL, deadline: float, failures: list[Failure]
    ) -> None:
        """Check one URL, appending a Failure if it is not a 200."""
        logger.info("Checking media URL", url=str(url))

        # No await between deciding the outcome and appending, so each
        # completion is the only writer to the list while it runs.
        try:
            outcome = await self._fetcher.fetch(url, deadline, read_body=False)
        except FetchError as e:
            logger.warning("Error fetching media", url=str(url), error=e.reason)
            failures.append(Failure(url=url, kind=e.kind, detail=e.reason))
            return
        except Exception as e:
            logger.error("Media check crashed", url=str(url), error=str(e))
            failures.append(Failure(url=url, kind=ErrorKind.NETWORK_ERROR, detail=str(e)))
            return

        if not outcome.is_success:
            status = f"{outcome.status_code} {outcome.reason_phrase}".strip()
            logger.warning("Not a 200", url=str(url), status=status)
            failures.append(
                Failure(
                    url=url,
                    kind=ErrorKind.BAD_STATUS,
                    detail=f"bad status: {status}",
                    status_code=outcome.status_code,
                )
            )
