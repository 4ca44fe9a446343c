"""Service-layer data models for discovery, analysis and reporting."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any

from langcrawl.processing.models import (
    EnglishContent,
    LanguageShare,
    PercentageBreakdown,
)


@dataclass(frozen=True)
class CrawlTarget:
    """Immutable configuration for one discovery run.

    Args:
        start_url: URL the crawl starts from
        host: Hostname every discovered URL must match
        path_filter: Substring every discovered URL path must contain
        max_urls: Hard cap on the number of discovered URLs
    """

    start_url: str
    host: str
    path_filter: str
    max_urls: int


@dataclass(frozen=True)
class PageAnalysis:
    """Language analysis of a single page.

    Args:
        url: Page URL
        dominant_language: Primary language code, "en", or "mixed"
        percentages: Language distribution of the page
        total_words: Words across all classified sentences
        english_content: English text on the page, or None when the page
            has no English words
    """

    url: str
    dominant_language: str
    percentages: PercentageBreakdown
    total_words: int
    english_content: EnglishContent | None = None

    def to_dict(self) -> dict[str, Any]:
        """Serialize for the JSON report, omitting absent English content.

        Minor-language shares are rounded to two decimals here; the model keeps
        the exact values the cutoff was applied to.
        """
        data = asdict(self)
        for share in data["percentages"]["others"]:
            share["percentage"] = round(share["percentage"], 2)
        if self.english_content is None:
            del data["english_content"]
        return data


@dataclass(frozen=True)
class PageEnglishShare:
    """A page URL with its English percentage."""

    url: str
    english_percentage: float


@dataclass(frozen=True)
class CrawlSummary:
    """Aggregate view over all analyzed pages.

    Args:
        total_pages: Number of analyzed pages
        average_primary_percentage: Mean primary-language share (2 decimals)
        average_english_percentage: Mean English share (2 decimals)
        pages_with_high_english_content: Pages above the English threshold,
            largest share first
        pages_without_primary: URLs with no primary-language words
        pages_with_english_content: Number of pages carrying any English text
    """

    total_pages: int
    average_primary_percentage: float
    average_english_percentage: float
    pages_with_high_english_content: list[PageEnglishShare] = field(
        default_factory=list
    )
    pages_without_primary: list[str] = field(default_factory=list)
    pages_with_english_content: int = 0


@dataclass(frozen=True)
class EnglishContentReport:
    """Per-page entry of the English content report.

    Args:
        url: Page URL
        english_percentage: English share of the page
        english_sentences: Every English sentence on the page
        english_words: Distinct English words, sorted
        total_english_words: English word count including repeats
        sample_sentences: First five English sentences
    """

    url: str
    english_percentage: float
    english_sentences: list[str]
    english_words: list[str]
    total_english_words: int
    sample_sentences: list[str]


@dataclass(frozen=True)
class CrawlRunResult:
    """Outcome of a complete crawl run.

    Args:
        urls: URLs produced by discovery
        results: Analyses for pages that produced one
        summary: Aggregate summary, None when discovery found nothing
        duration_seconds: Wall-clock duration of the run
    """

    urls: list[str]
    results: list[PageAnalysis]
    summary: CrawlSummary | None
    duration_seconds: float


__all__ = [
    "CrawlRunResult",
    "CrawlSummary",
    "CrawlTarget",
    "EnglishContent",
    "EnglishContentReport",
    "LanguageShare",
    "PageAnalysis",
    "PageEnglishShare",
    "PercentageBreakdown",
]
