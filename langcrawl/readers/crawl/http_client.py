"""Rate-limited HTTP client for fetching site pages."""

from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import Callable

import httpx

from langcrawl.readers.crawl.models import FetchResult

logger = logging.getLogger(__name__)

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (compatible; LanguageCrawler/1.0; +https://example.com/bot)"
)
DEFAULT_ACCEPT = "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8"


class FetchError(Exception):
    """Raised when a page cannot be fetched.

    Args:
        url: URL that failed
        message: Description of the failure
        status_code: HTTP status code, if a response was received
    """

    def __init__(self, url: str, message: str, status_code: int | None = None) -> None:
        super().__init__(f"{url}: {message}")
        self.url = url
        self.status_code = status_code


class FetcherInitError(Exception):
    """Raised when the HTTP client cannot be created."""


class RateLimiter:
    """Enforces a minimum delay between consecutive requests.

    A single instance holds the time of the last request, so every caller
    sharing it is paced together.

    Args:
        delay_seconds: Minimum seconds between requests
        clock: Monotonic clock returning seconds
    """

    def __init__(
        self,
        delay_seconds: float,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.delay_seconds = delay_seconds
        self._clock = clock
        self._last_request: float | None = None

    async def wait(self) -> None:
        """Sleep until the delay since the last request has passed."""
        if self._last_request is not None:
            elapsed = self._clock() - self._last_request
            if elapsed < self.delay_seconds:
                remaining = self.delay_seconds - elapsed
                logger.debug("Rate limiting: waiting %.0fms", remaining * 1000)
                await asyncio.sleep(remaining)
        self._last_request = self._clock()


def build_headers(user_agent: str, primary_language: str) -> dict[str, str]:
    """Browser-like request headers preferring the site's primary locale."""
    return {
        "User-Agent": user_agent,
        "Accept": DEFAULT_ACCEPT,
        "Accept-Language": f"{primary_language},en;q=0.5",
        "Accept-Encoding": "gzip, deflate",
        "Upgrade-Insecure-Requests": "1",
    }


class HttpFetcher:
    """Fetches pages over HTTP with shared rate limiting.

    One fetcher is shared by discovery and analysis so that every request
    in a run goes through the same rate limiter.

    Args:
        user_agent: User-Agent header value
        primary_language: Language code used for the Accept-Language header
        request_delay: Minimum seconds between requests
        timeout: Request timeout in seconds
        rate_limiter: Optional pre-built rate limiter (overrides request_delay)

    Raises:
        FetcherInitError: If the underlying HTTP client cannot be created
    """

    def __init__(
        self,
        user_agent: str = DEFAULT_USER_AGENT,
        primary_language: str = "en",
        request_delay: float = 1.0,
        timeout: float = 30.0,
        rate_limiter: RateLimiter | None = None,
    ) -> None:
        self.rate_limiter = rate_limiter or RateLimiter(request_delay)
        try:
            self._client = httpx.AsyncClient(
                timeout=timeout,
                headers=build_headers(user_agent, primary_language),
                follow_redirects=True,
            )
        except Exception as exc:
            raise FetcherInitError(f"Failed to create HTTP client: {exc}") from exc

    async def fetch(self, url: str) -> FetchResult:
        """Fetch a URL after honoring the rate limit.

        Args:
            url: Absolute URL to fetch

        Returns:
            FetchResult with the decoded body

        Raises:
            FetchError: On network errors, timeouts, or non-2xx responses
        """
        await self.rate_limiter.wait()

        logger.info("Fetching: %s", url)
        try:
            response = await self._client.get(url)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            status_code = exc.response.status_code
            logger.warning("Failed to fetch: %s - HTTP %d", url, status_code)
            raise FetchError(url, f"HTTP {status_code}", status_code) from exc
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            logger.warning("Failed to fetch: %s - %s", url, exc)
            raise FetchError(url, str(exc) or type(exc).__name__) from exc

        logger.info("Successfully fetched: %s (%d)", url, response.status_code)
        return FetchResult(
            url=url,
            body=response.text,
            status_code=response.status_code,
            final_url=str(response.url),
        )

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        await self._client.aclose()

    async def __aenter__(self) -> HttpFetcher:
        """Enter async context manager."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Exit async context manager and cleanup resources."""
        await self.close()
