"""End-to-end crawl run: discovery, page analysis, and reporting.

Main orchestration flow:
1. Create the shared rate-limited fetcher
2. Discover in-scope URLs from the start URL
3. Analyze each discovered page sequentially
4. Save the JSON reports and build the summary

Pages are processed one at a time; every request of the run goes through
the same fetcher, so the configured delay applies across both phases.
"""

from __future__ import annotations

import logging
import time

from langcrawl.core.config import Settings
from langcrawl.processing.classifier import LanguageClassifier
from langcrawl.readers.crawl.http_client import HttpFetcher
from langcrawl.services.analyzer import PageAnalyzer
from langcrawl.services.discovery import UrlDiscoveryService
from langcrawl.services.models import CrawlRunResult, PageAnalysis
from langcrawl.services.reporting import ReportWriter, generate_summary

logger = logging.getLogger(__name__)

PROGRESS_INTERVAL = 10


class LanguageCrawler:
    """Runs a complete language audit of one site section.

    Args:
        settings: Crawl configuration
        fetcher: Optional pre-built fetcher; one is created from settings
            otherwise. A fetcher created here is closed when the run ends.
        classifier: Optional classifier; built from settings otherwise

    Raises:
        FetcherInitError: If the HTTP client cannot be created
    """

    def __init__(
        self,
        settings: Settings,
        fetcher: HttpFetcher | None = None,
        classifier: LanguageClassifier | None = None,
    ) -> None:
        self.settings = settings
        self._owns_fetcher = fetcher is None
        self._fetcher = fetcher or HttpFetcher(
            user_agent=settings.user_agent,
            primary_language=settings.primary_language,
            request_delay=settings.request_delay,
            timeout=settings.request_timeout,
        )
        self.discovery = UrlDiscoveryService(self._fetcher, settings.crawl_target())
        self.analyzer = PageAnalyzer(
            self._fetcher,
            classifier or LanguageClassifier(primary_language=settings.primary_language),
        )
        self.report_writer = ReportWriter(
            settings.output_file, settings.english_content_file
        )

    async def run(self) -> CrawlRunResult:
        """Execute the crawl and write the reports.

        Returns:
            CrawlRunResult. When discovery finds nothing, no reports are
            written and the summary is None.

        Raises:
            OSError: If a report cannot be written
        """
        settings = self.settings
        logger.info("Starting Website Language Crawler")
        logger.info("Target: %s", settings.start_url)
        logger.info("Max URLs: %d", settings.max_urls)
        logger.info("Output: %s", settings.output_file)

        start_time = time.monotonic()
        try:
            logger.info("Phase 1: URL Discovery")
            urls = await self.discovery.discover_urls()
            if not urls:
                logger.warning("No URLs found to analyze")
                return CrawlRunResult(
                    urls=[],
                    results=[],
                    summary=None,
                    duration_seconds=time.monotonic() - start_time,
                )

            logger.info("Phase 2: Analyzing %d pages", len(urls))
            results = await self.analyze_urls(urls)

            logger.info("Phase 3: Generating Report")
            self.report_writer.save_results(results)
            summary = generate_summary(results, settings.high_english_threshold)
        finally:
            if self._owns_fetcher:
                await self._fetcher.close()

        duration = time.monotonic() - start_time
        logger.info("Crawl completed in %d seconds", round(duration))
        logger.info("Successfully analyzed %d/%d pages", len(results), len(urls))

        return CrawlRunResult(
            urls=urls,
            results=results,
            summary=summary,
            duration_seconds=duration,
        )

    async def analyze_urls(self, urls: list[str]) -> list[PageAnalysis]:
        """Analyze pages in order, keeping those that produce a record."""
        results: list[PageAnalysis] = []
        for processed, url in enumerate(urls, start=1):
            logger.info("[%d/%d] Processing %s", processed, len(urls), url)

            analysis = await self.analyzer.analyze_page(url)
            if analysis is not None:
                results.append(analysis)

            if processed % PROGRESS_INTERVAL == 0:
                percentage = round(processed / len(urls) * 100)
                logger.info("Progress: %d/%d (%d%%)", processed, len(urls), percentage)

        return results
