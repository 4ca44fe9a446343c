"""Discover command for URL discovery only.

Crawls from a start URL within the configured scope and prints the
discovered URLs, or writes them one per line to a file.
"""

from __future__ import annotations

import asyncio
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from langcrawl.cli.options import load_settings
from langcrawl.core.config import Settings
from langcrawl.readers.crawl.http_client import FetcherInitError, HttpFetcher
from langcrawl.services.discovery import UrlDiscoveryService

console = Console()


def discover_command(
    url: str = typer.Argument(..., help="Start URL"),
    path_filter: str | None = typer.Option(
        None, "--path-filter", help="Substring required in every URL path"
    ),
    max_urls: int | None = typer.Option(None, "-n", "--max-urls", help="Max URLs to discover"),
    delay_ms: int | None = typer.Option(
        None, "--delay-ms", help="Minimum milliseconds between requests"
    ),
    output: Path | None = typer.Option(None, "-o", "--output"),
) -> None:
    """Discover in-scope URLs from a start page.

    Args:
        url: URL to start crawling from.
        path_filter: Substring every discovered path must contain; defaults
            to the start URL's path.
        max_urls: Maximum number of URLs to discover.
        delay_ms: Minimum delay between requests.
        output: Optional output file for URLs.
    """
    settings = load_settings(
        console,
        start_url=url,
        path_filter=path_filter,
        max_urls=max_urls,
        request_delay_ms=delay_ms,
    )

    try:
        urls = asyncio.run(_discover(settings))
    except FetcherInitError as exc:
        console.print(f"[red]Failed: {escape(str(exc))}[/red]")
        raise typer.Exit(code=1) from exc

    if output is None:
        for link in urls:
            console.print(link)
        console.print(f"Unique URLs: {len(urls)}")
    else:
        output.write_text("\n".join(urls) + "\n" if urls else "")
        console.print(f"Wrote {len(urls)} URLs to {output}")


async def _discover(settings: Settings) -> list[str]:
    async with HttpFetcher(
        user_agent=settings.user_agent,
        primary_language=settings.primary_language,
        request_delay=settings.request_delay,
        timeout=settings.request_timeout,
    ) as fetcher:
        service = UrlDiscoveryService(fetcher, settings.crawl_target())
        with console.status("Discovering URLs..."):
            return await service.discover_urls()
