"""URL discovery service for bounded same-site crawls.

This module walks a site's internal link graph from a start URL and collects
the URLs that fall inside the crawl scope (same host, path filter, no binary
documents). Traversal follows link-discovery order: each page's links are
explored in document order before moving on to the page's next sibling, and
only the first few in-scope links of every page are followed.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

from langcrawl.core.url_validation import is_valid_url, resolve_url
from langcrawl.readers.crawl.content_extractor import ContentExtractor
from langcrawl.readers.crawl.http_client import HttpFetcher
from langcrawl.services.models import CrawlTarget

logger = logging.getLogger(__name__)

# Links followed per page, to bound the crawl's branching factor
MAX_LINKS_PER_PAGE = 10


class UrlDiscoveryService:
    """Discovers in-scope URLs by crawling from a start URL.

    Each call to ``discover_urls`` is an independent run with its own
    visited and discovered sets.

    Attributes:
        target: Crawl scope and URL cap.
        max_links_per_page: Number of in-scope links followed per page.

    Example:
        >>> async with HttpFetcher(primary_language="pl") as fetcher:
        ...     service = UrlDiscoveryService(fetcher, target)
        ...     urls = await service.discover_urls()
    """

    def __init__(
        self,
        fetcher: HttpFetcher,
        target: CrawlTarget,
        extractor: ContentExtractor | None = None,
        max_links_per_page: int = MAX_LINKS_PER_PAGE,
    ) -> None:
        self._fetcher = fetcher
        self._extractor = extractor or ContentExtractor()
        self.target = target
        self.max_links_per_page = max_links_per_page

    def is_valid_url(self, url: str) -> bool:
        """Check a URL against this service's crawl scope."""
        return is_valid_url(url, self.target.host, self.target.path_filter)

    async def discover_urls(self) -> list[str]:
        """Crawl from the start URL and return in-scope URLs.

        Pages that fail to fetch or parse are logged and skipped; their
        links are never explored. The crawl stops as soon as ``max_urls``
        URLs have been discovered.

        Returns:
            Discovered URLs in discovery order, at most ``max_urls`` long.
        """
        target = self.target
        logger.info("Starting URL discovery from: %s", target.start_url)
        logger.info(
            "Target: %d URLs under path: %s", target.max_urls, target.path_filter
        )

        visited: set[str] = set()
        # dict preserves insertion order
        discovered: dict[str, None] = {}

        # Each frame iterates over the links still to explore from one page
        stack: list[Iterator[str]] = [iter([target.start_url])]

        while stack:
            if len(discovered) >= target.max_urls:
                break

            url = next(stack[-1], None)
            if url is None:
                stack.pop()
                continue

            if url in visited:
                continue
            visited.add(url)

            try:
                result = await self._fetcher.fetch(url)
                if self.is_valid_url(url):
                    discovered[url] = None
                links = self._collect_links(result.body, url, visited)
            except Exception as exc:  # noqa: BLE001
                logger.warning("Failed to crawl %s: %s", url, exc)
                continue

            logger.info("Found %d potential links on %s", len(links), url)

            stack.append(iter(links[: self.max_links_per_page]))

        urls = list(discovered)[: target.max_urls]
        logger.info("URL discovery complete! Found %d URLs to analyze.", len(urls))
        return urls

    def _collect_links(self, html: str, page_url: str, visited: set[str]) -> list[str]:
        """Resolve a page's links and keep unvisited in-scope ones, in order."""
        links = []
        for href in self._extractor.extract_links(html):
            absolute_url = resolve_url(href, page_url)
            if self.is_valid_url(absolute_url) and absolute_url not in visited:
                links.append(absolute_url)
        return links
