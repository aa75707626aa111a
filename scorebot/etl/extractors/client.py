"""Async HTTP page fetcher shared by all score extractors.

Wraps an ``httpx.AsyncClient`` configured with a browser-like
User-Agent, since some sites reject default HTTP clients.
"""

import logging
from types import TracebackType

import httpx

from scorebot.settings import settings

logger = logging.getLogger(__name__)


class PageFetcherError(Exception):
    """Raised when the fetcher is used outside its context manager."""

    pass


class PageFetcher:
    """Fetches HTML pages over HTTP.

    Use as an async context manager; one instance is shared by
    every extractor during an aggregation run.

    Attributes:
        timeout: Per-request timeout in seconds.
        user_agent: User-Agent header sent with each request.
    """

    def __init__(
        self,
        timeout: float | None = None,
        user_agent: str | None = None,
    ) -> None:
        """Initialize fetcher with settings defaults.

        Args:
            timeout: Request timeout override (seconds).
            user_agent: User-Agent override.
        """
        self._timeout = timeout or settings.scraping.timeout
        self._user_agent = user_agent or settings.scraping.user_agent
        self._client: httpx.AsyncClient | None = None

    # -------------------------------------------------------------------------
    # Context Manager
    # -------------------------------------------------------------------------

    async def __aenter__(self) -> "PageFetcher":
        """Enter context and create HTTP client."""
        self._client = httpx.AsyncClient(
            timeout=self._timeout,
            follow_redirects=True,
            headers={
                "User-Agent": self._user_agent,
                "Accept-Language": "en-US,en;q=0.9",
            },
        )
        return self

    async def __aexit__(
        self,
        _exc_type: type[BaseException] | None,
        _exc_val: BaseException | None,
        _exc_tb: TracebackType | None,
    ) -> None:
        """Exit context and close HTTP client."""
        if self._client:
            await self._client.aclose()
            self._client = None

    # -------------------------------------------------------------------------
    # HTTP Methods
    # -------------------------------------------------------------------------

    async def get_html(self, url: str) -> str:
        """Fetch a page and return its body as text.

        Args:
            url: Absolute page URL.

        Returns:
            Decoded response body.

        Raises:
            PageFetcherError: If called outside the context manager.
            httpx.HTTPError: On network errors, timeouts, or non-2xx status.
        """
        if self._client is None:
            msg = "Fetcher not initialized. Use async context manager."
            raise PageFetcherError(msg)

        logger.debug(f"GET {url}")
        response = await self._client.get(url)
        response.raise_for_status()
        return response.text
