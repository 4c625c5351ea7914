"""Deadline-bounded HTTP fetcher for pages and media resources."""

import asyncio

import httpx

from mediacheck.models import AbsoluteURL, ErrorKind, FetchOutcome
from mediacheck.utils.logging import get_logger

logger = get_logger(__name__)


class FetchError(Exception):
    """Raised when a request produced no response before the deadline."""

    def __init__(self, kind: ErrorKind, reason: str) -> None:
        self.kind = kind
        self.reason = reason
        super().__init__(reason)


class MediaFetcher:
    """Issues single GET requests that are aborted when a deadline passes.

    Deadlines are absolute instants on the running event loop's clock
    (``asyncio.get_running_loop().time()``), so one deadline can be shared by
    any number of concurrent fetches.
    """

    def __init__(
        self,
        follow_redirects: bool = True,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        # The deadline bounds every request, so httpx's own timeouts are off.
        self._client = httpx.AsyncClient(
            timeout=None,
            follow_redirects=follow_redirects,
            transport=transport,
        )

    async def close(self) -> None:
        """Close the HTTP client."""
        await self._client.aclose()

    async def __aenter__(self) -> "MediaFetcher":
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.close()

    async def fetch(
        self,
        url: AbsoluteURL,
        deadline: float,
        read_body: bool = True,
    ) -> FetchOutcome:
        """GET a URL, giving up at the deadline.

        Any status code is returned as-is; deciding whether it counts as a
        success is up to the caller.

        Args:
            url: The URL to request.
            deadline: Loop time at which the request is aborted.
            read_body: If False, the response body is discarded unread.

        Returns:
            A FetchOutcome with the status code and body bytes.

        Raises:
            FetchError: With kind TIMEOUT if the deadline passed first, or
                NETWORK_ERROR if the request failed.
        """
        try:
            async with asyncio.timeout_at(deadline):
                async with self._client.stream("GET", str(url)) as response:
                    body = await response.aread() if read_body else b""
                    return FetchOutcome(
                        status_code=response.status_code,
                        body=body,
                        reason_phrase=response.reason_phrase,
                    )
        except TimeoutError as e:
            logger.info("Deadline reached, request cancelled", url=str(url))
            raise FetchError(ErrorKind.TIMEOUT, "deadline exceeded") from e
        except httpx.TimeoutException as e:
            logger.info("Timeout fetching URL", url=str(url))
            raise FetchError(ErrorKind.TIMEOUT, f"timeout: {e}") from e
        except httpx.RequestError as e:
            logger.info("Request error fetching URL", url=str(url), error=str(e))
            raise FetchError(ErrorKind.NETWORK_ERROR, f"request error: {e}") from e
        except httpx.InvalidURL as e:
            logger.info("Invalid URL", url=str(url), error=str(e))
            raise FetchError(ErrorKind.NETWORK_ERROR, f"invalid URL: {e}") from e
