"""Per-page language analysis."""

from __future__ import annotations

import logging

from langcrawl.processing.classifier import LanguageClassifier
from langcrawl.readers.crawl.content_extractor import ContentExtractor
from langcrawl.readers.crawl.http_client import HttpFetcher
from langcrawl.services.models import PageAnalysis

logger = logging.getLogger(__name__)

# Pages with less visible text than this are not analyzed
MIN_TEXT_LENGTH = 50


class PageAnalyzer:
    """Fetches a page, extracts its text and classifies it by language.

    Args:
        fetcher: Shared rate-limited HTTP fetcher
        classifier: Language classifier, reused across pages
        extractor: HTML text extractor
        min_text_length: Minimum visible text length for analysis
    """

    def __init__(
        self,
        fetcher: HttpFetcher,
        classifier: LanguageClassifier,
        extractor: ContentExtractor | None = None,
        min_text_length: int = MIN_TEXT_LENGTH,
    ) -> None:
        self._fetcher = fetcher
        self._extractor = extractor or ContentExtractor()
        self.classifier = classifier
        self.min_text_length = min_text_length

    async def analyze_page(self, url: str) -> PageAnalysis | None:
        """Analyze the language distribution of one page.

        Args:
            url: Page URL

        Returns:
            PageAnalysis, or None when the page has too little text or any
            step fails. Failures are logged and never raised.
        """
        try:
            logger.info("Analyzing: %s", url)

            response = await self._fetcher.fetch(url)
            visible_text = self._extractor.extract_visible_text(response.body)

            if len(visible_text) < self.min_text_length:
                logger.info("Skipping %s: insufficient text content", url)
                return None

            return self.analyze_text(url, visible_text)
        except Exception as exc:  # noqa: BLE001
            logger.warning("Failed to analyze %s: %s", url, exc)
            return None

    def analyze_text(self, url: str, text: str) -> PageAnalysis:
        """Classify already-extracted page text."""
        classifier = self.classifier
        stats = classifier.detect_language_stats(text)
        percentages = classifier.calculate_percentages(stats)
        dominant_language = classifier.get_dominant_language(percentages)
        total_words = sum(stats.values())
        english_content = classifier.get_english_content()

        analysis = PageAnalysis(
            url=url,
            dominant_language=dominant_language,
            percentages=percentages,
            total_words=total_words,
            english_content=english_content if english_content.word_count > 0 else None,
        )

        logger.info(
            "Analysis complete for %s: dominant=%s, %s=%s%%, en=%s%%, words=%d",
            url,
            dominant_language,
            classifier.primary_language,
            percentages.primary,
            percentages.english,
            total_words,
        )
        return analysis
