"""Analyze command for a single page."""

from __future__ import annotations

import asyncio
import json

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from langcrawl.cli.options import load_settings
from langcrawl.core.config import Settings
from langcrawl.processing.classifier import LanguageClassifier
from langcrawl.processing.languages import get_language_name
from langcrawl.readers.crawl.http_client import FetcherInitError, HttpFetcher
from langcrawl.services.analyzer import PageAnalyzer
from langcrawl.services.models import PageAnalysis

console = Console()


def analyze_command(
    url: str = typer.Argument(..., help="Page URL to analyze"),
    primary_language: str | None = typer.Option(
        None, "-l", "--primary-language", help="ISO 639-1 code of the target locale"
    ),
    as_json: bool = typer.Option(False, "--json", help="Print the raw analysis as JSON"),
) -> None:
    """Classify the text of one page by language."""
    settings = load_settings(console, start_url=url, primary_language=primary_language)

    try:
        analysis = asyncio.run(_analyze(settings, url))
    except FetcherInitError as exc:
        console.print(f"[red]Failed: {escape(str(exc))}[/red]")
        raise typer.Exit(code=1) from exc

    if analysis is None:
        console.print(f"[red]No analysis produced for {url}[/red]")
        raise typer.Exit(code=1)

    if as_json:
        console.print_json(json.dumps(analysis.to_dict(), ensure_ascii=False))
        return

    _print_analysis(settings, analysis)


async def _analyze(settings: Settings, url: str) -> PageAnalysis | None:
    async with HttpFetcher(
        user_agent=settings.user_agent,
        primary_language=settings.primary_language,
        request_delay=settings.request_delay,
        timeout=settings.request_timeout,
    ) as fetcher:
        analyzer = PageAnalyzer(
            fetcher, LanguageClassifier(primary_language=settings.primary_language)
        )
        return await analyzer.analyze_page(url)


def _print_analysis(settings: Settings, analysis: PageAnalysis) -> None:
    percentages = analysis.percentages

    table = Table(title=analysis.url)
    table.add_column("Language")
    table.add_column("Share", justify="right")
    table.add_row(get_language_name(settings.primary_language), f"{percentages.primary}%")
    table.add_row("English", f"{percentages.english}%")
    for share in percentages.others:
        table.add_row(share.language, f"{share.percentage:.2f}%")
    console.print(table)

    console.print(f"Dominant language: {analysis.dominant_language}")
    console.print(f"Total words: {analysis.total_words}")
    if analysis.english_content is not None:
        console.print(f"English words: {analysis.english_content.word_count}")
        for sentence in analysis.english_content.sentences[:5]:
            console.print(f"   - {sentence}")
