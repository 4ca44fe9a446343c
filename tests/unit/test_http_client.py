"""Unit tests for the rate-limited HTTP fetcher."""

from unittest.mock import AsyncMock

import httpx
import pytest
import respx

from langcrawl.readers.crawl.http_client import (
    FetcherInitError,
    FetchError,
    HttpFetcher,
    RateLimiter,
    build_headers,
)

URL = "https://www.xrite.com/pl-pl"


@respx.mock
@pytest.mark.asyncio
async def test_fetch_returns_body_and_status() -> None:
    respx.get(URL).mock(return_value=httpx.Response(200, text="<html>ok</html>"))

    async with HttpFetcher(request_delay=0) as fetcher:
        result = await fetcher.fetch(URL)

    assert result.url == URL
    assert result.body == "<html>ok</html>"
    assert result.status_code == 200


@respx.mock
@pytest.mark.asyncio
async def test_fetch_sends_identifying_headers() -> None:
    route = respx.get(URL).mock(return_value=httpx.Response(200, text=""))

    async with HttpFetcher(
        user_agent="TestAgent/1.0", primary_language="pl", request_delay=0
    ) as fetcher:
        await fetcher.fetch(URL)

    request = route.calls.last.request
    assert request.headers["User-Agent"] == "TestAgent/1.0"
    assert request.headers["Accept-Language"] == "pl,en;q=0.5"
    assert "text/html" in request.headers["Accept"]


@respx.mock
@pytest.mark.asyncio
async def test_fetch_raises_fetch_error_on_http_error_status() -> None:
    respx.get(URL).mock(return_value=httpx.Response(404))

    async with HttpFetcher(request_delay=0) as fetcher:
        with pytest.raises(FetchError) as exc_info:
            await fetcher.fetch(URL)

    assert exc_info.value.status_code == 404
    assert exc_info.value.url == URL


@respx.mock
@pytest.mark.asyncio
async def test_fetch_raises_fetch_error_on_timeout() -> None:
    respx.get(URL).mock(side_effect=httpx.TimeoutException("Connection timeout"))

    async with HttpFetcher(request_delay=0) as fetcher:
        with pytest.raises(FetchError) as exc_info:
            await fetcher.fetch(URL)

    assert exc_info.value.status_code is None


@respx.mock
@pytest.mark.asyncio
async def test_fetch_raises_fetch_error_on_connection_error() -> None:
    respx.get(URL).mock(side_effect=httpx.ConnectError("refused"))

    async with HttpFetcher(request_delay=0) as fetcher:
        with pytest.raises(FetchError):
            await fetcher.fetch(URL)


@respx.mock
@pytest.mark.asyncio
async def test_fetch_follows_redirects() -> None:
    respx.get(URL).mock(
        return_value=httpx.Response(301, headers={"Location": f"{URL}/home"})
    )
    respx.get(f"{URL}/home").mock(return_value=httpx.Response(200, text="home"))

    async with HttpFetcher(request_delay=0) as fetcher:
        result = await fetcher.fetch(URL)

    assert result.body == "home"
    assert result.final_url == f"{URL}/home"


def test_fetcher_init_failure_is_wrapped(monkeypatch) -> None:
    def _broken_client(*args, **kwargs):
        raise RuntimeError("no transport")

    monkeypatch.setattr(
        "langcrawl.readers.crawl.http_client.httpx.AsyncClient", _broken_client
    )

    with pytest.raises(FetcherInitError):
        HttpFetcher()


def test_build_headers_prefers_primary_language() -> None:
    headers = build_headers("Agent", "it")

    assert headers["User-Agent"] == "Agent"
    assert headers["Accept-Language"] == "it,en;q=0.5"


# Rate limiting tests
class FakeClock:
    def __init__(self, *times: float) -> None:
        self.times = list(times)

    def __call__(self) -> float:
        return self.times.pop(0)


@pytest.mark.asyncio
async def test_rate_limiter_does_not_wait_for_first_request(monkeypatch) -> None:
    sleep = AsyncMock()
    monkeypatch.setattr("langcrawl.readers.crawl.http_client.asyncio.sleep", sleep)
    limiter = RateLimiter(1.0, clock=FakeClock(0.0))

    await limiter.wait()

    sleep.assert_not_awaited()


@pytest.mark.asyncio
async def test_rate_limiter_waits_for_remaining_delay(monkeypatch) -> None:
    sleep = AsyncMock()
    monkeypatch.setattr("langcrawl.readers.crawl.http_client.asyncio.sleep", sleep)
    limiter = RateLimiter(1.0, clock=FakeClock(0.0, 0.25, 1.0))

    await limiter.wait()
    await limiter.wait()

    sleep.assert_awaited_once()
    assert sleep.await_args.args[0] == pytest.approx(0.75)


@pytest.mark.asyncio
async def test_rate_limiter_skips_wait_when_delay_elapsed(monkeypatch) -> None:
    sleep = AsyncMock()
    monkeypatch.setattr("langcrawl.readers.crawl.http_client.asyncio.sleep", sleep)
    limiter = RateLimiter(1.0, clock=FakeClock(0.0, 2.5, 2.5))

    await limiter.wait()
    await limiter.wait()

    sleep.assert_not_awaited()


@respx.mock
@pytest.mark.asyncio
async def test_fetches_share_one_rate_limiter(monkeypatch) -> None:
    """Every fetch goes through the fetcher's limiter, failures included."""
    respx.get(URL).mock(return_value=httpx.Response(200, text=""))
    respx.get(f"{URL}/missing").mock(return_value=httpx.Response(500))
    limiter = RateLimiter(0)
    wait = AsyncMock()
    monkeypatch.setattr(limiter, "wait", wait)

    async with HttpFetcher(rate_limiter=limiter) as fetcher:
        await fetcher.fetch(URL)
        with pytest.raises(FetchError):
            await fetcher.fetch(f"{URL}/missing")

    assert wait.await_count == 2
