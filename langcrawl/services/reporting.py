"""JSON reports and crawl summary for analyzed pages.

Two files are written per run:

* the full list of page analyses, and
* an English content report restricted to pages with English text, sorted
  by English share, with distinct words and sample sentences per page.

Write failures are not caught here. A crawl whose results cannot be saved
is a failed crawl, so the error reaches the caller.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Sequence
from dataclasses import asdict
from pathlib import Path
from typing import Any

from langcrawl.services.models import (
    CrawlSummary,
    EnglishContentReport,
    PageAnalysis,
    PageEnglishShare,
)

logger = logging.getLogger(__name__)

# Pages above this English share are flagged in the summary
HIGH_ENGLISH_THRESHOLD = 30.0
SAMPLE_SENTENCE_COUNT = 5


def build_english_report(results: Sequence[PageAnalysis]) -> list[EnglishContentReport]:
    """Build the English content report, highest English share first."""
    report = [
        EnglishContentReport(
            url=page.url,
            english_percentage=page.percentages.english,
            english_sentences=list(page.english_content.sentences),
            english_words=sorted(set(page.english_content.words)),
            total_english_words=page.english_content.word_count,
            sample_sentences=page.english_content.sentences[:SAMPLE_SENTENCE_COUNT],
        )
        for page in results
        if page.english_content is not None and page.english_content.word_count > 0
    ]
    report.sort(key=lambda entry: entry.english_percentage, reverse=True)
    return report


def generate_summary(
    results: Sequence[PageAnalysis],
    high_english_threshold: float = HIGH_ENGLISH_THRESHOLD,
) -> CrawlSummary:
    """Aggregate page analyses into a crawl summary.

    Args:
        results: Page analyses from one run.
        high_english_threshold: English percentage above which a page is
            flagged.

    Returns:
        CrawlSummary with averages rounded to two decimals.
    """
    total_pages = len(results)
    if total_pages == 0:
        return CrawlSummary(
            total_pages=0,
            average_primary_percentage=0.0,
            average_english_percentage=0.0,
        )

    total_primary = sum(page.percentages.primary for page in results)
    total_english = sum(page.percentages.english for page in results)

    high_english = [
        PageEnglishShare(url=page.url, english_percentage=page.percentages.english)
        for page in results
        if page.percentages.english > high_english_threshold
    ]
    high_english.sort(key=lambda share: share.english_percentage, reverse=True)

    return CrawlSummary(
        total_pages=total_pages,
        average_primary_percentage=round(total_primary / total_pages, 2),
        average_english_percentage=round(total_english / total_pages, 2),
        pages_with_high_english_content=high_english,
        pages_without_primary=[
            page.url for page in results if page.percentages.primary == 0
        ],
        pages_with_english_content=sum(
            1 for page in results if page.english_content is not None
        ),
    )


class ReportWriter:
    """Writes analysis results and the English content report as JSON.

    Args:
        output_file: Destination for the full list of page analyses
        english_content_file: Destination for the English content report
    """

    def __init__(self, output_file: Path, english_content_file: Path) -> None:
        self.output_file = Path(output_file)
        self.english_content_file = Path(english_content_file)

    def save_results(self, results: Sequence[PageAnalysis]) -> None:
        """Write the full results, then the English content report.

        Raises:
            OSError: If either file cannot be written.
        """
        self._write_json(self.output_file, [page.to_dict() for page in results])
        logger.info("Results saved to %s", self.output_file)

        self.save_english_content_report(results)

    def save_english_content_report(self, results: Sequence[PageAnalysis]) -> None:
        """Write the English content report.

        Raises:
            OSError: If the file cannot be written.
        """
        report = build_english_report(results)
        self._write_json(self.english_content_file, [asdict(entry) for entry in report])
        logger.info("English content report saved to %s", self.english_content_file)
        logger.info("Found English content on %d pages", len(report))

    @staticmethod
    def _write_json(path: Path, data: Any) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8")
