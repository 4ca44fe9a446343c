"""Service layer for discovery, analysis and reporting."""

from langcrawl.services.analyzer import PageAnalyzer
from langcrawl.services.discovery import UrlDiscoveryService
from langcrawl.services.models import (
    CrawlRunResult,
    CrawlSummary,
    CrawlTarget,
    EnglishContentReport,
    PageAnalysis,
    PageEnglishShare,
)
from langcrawl.services.reporting import (
    ReportWriter,
    build_english_report,
    generate_summary,
)

__all__ = [
    "build_english_report",
    "CrawlRunResult",
    "CrawlSummary",
    "CrawlTarget",
    "EnglishContentReport",
    "generate_summary",
    "PageAnalysis",
    "PageAnalyzer",
    "PageEnglishShare",
    "ReportWriter",
    "UrlDiscoveryService",
]
