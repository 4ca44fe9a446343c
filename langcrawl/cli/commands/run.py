"""Run command for a full language audit."""

from __future__ import annotations

import asyncio
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from langcrawl.cli.options import load_settings
from langcrawl.core.config import Settings
from langcrawl.processing.languages import get_language_name
from langcrawl.readers.crawl.http_client import FetcherInitError
from langcrawl.services.crawler import LanguageCrawler
from langcrawl.services.models import CrawlRunResult, CrawlSummary

console = Console()


def run_command(
    preset: str | None = typer.Option(
        None, "-p", "--preset", help="Locale preset (pl-pl, it-it, fr-fr)"
    ),
    start_url: str | None = typer.Option(None, "--start-url", help="Crawl root URL"),
    path_filter: str | None = typer.Option(
        None, "--path-filter", help="Substring required in every URL path"
    ),
    max_urls: int | None = typer.Option(None, "-n", "--max-urls", help="Max URLs to discover"),
    delay_ms: int | None = typer.Option(
        None, "--delay-ms", help="Minimum milliseconds between requests"
    ),
    primary_language: str | None = typer.Option(
        None, "-l", "--primary-language", help="ISO 639-1 code of the target locale"
    ),
    output: Path | None = typer.Option(None, "-o", "--output", help="Analysis report path"),
    english_output: Path | None = typer.Option(
        None, "--english-output", help="English content report path"
    ),
) -> None:
    """Crawl a site section, classify every page, and write the reports."""
    settings = load_settings(
        console,
        preset,
        start_url=start_url,
        path_filter=path_filter,
        max_urls=max_urls,
        request_delay_ms=delay_ms,
        primary_language=primary_language,
        output_file=output,
        english_content_file=english_output,
    )

    try:
        crawler = LanguageCrawler(settings)
    except FetcherInitError as exc:
        console.print(f"[red]Crawler failed: {escape(str(exc))}[/red]")
        raise typer.Exit(code=1) from exc

    try:
        result = asyncio.run(crawler.run())
    except OSError as exc:
        console.print(
            f"[red]Crawler failed: could not save results: {escape(str(exc))}[/red]"
        )
        raise typer.Exit(code=1) from exc

    _print_result(settings, result)


def _print_result(settings: Settings, result: CrawlRunResult) -> None:
    if result.summary is None:
        console.print("[yellow]No URLs found to analyze.[/yellow]")
        return

    _print_summary(settings, result.summary)
    console.print(
        f"[green]Crawl completed in {round(result.duration_seconds)} seconds, "
        f"analyzed {len(result.results)}/{len(result.urls)} pages[/green]"
    )


def _print_summary(settings: Settings, summary: CrawlSummary) -> None:
    language_name = get_language_name(settings.primary_language)
    panel = Panel(
        f"Total pages analyzed: {summary.total_pages}\n"
        f"Average {language_name} content: {summary.average_primary_percentage}%\n"
        f"Average English content: {summary.average_english_percentage}%\n"
        f"Pages with English content: "
        f"{summary.pages_with_english_content}/{summary.total_pages}",
        title="Crawl Summary",
    )
    console.print(panel)

    high_english = summary.pages_with_high_english_content
    console.print(
        f"Pages with >{settings.high_english_threshold:g}% English content "
        f"({len(high_english)}):"
    )
    for page in high_english:
        console.print(f"   - {page.english_percentage}%: {page.url}")

    console.print(
        f"Pages with no {language_name} content ({len(summary.pages_without_primary)}):"
    )
    for url in summary.pages_without_primary:
        console.print(f"   - {url}")

    console.print(f"Full results saved to: {settings.output_file}")
    console.print(f"Detailed English content saved to: {settings.english_content_file}")
