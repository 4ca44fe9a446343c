"""Page fetching, text extraction and language identification."""

from langcrawl.readers.crawl.content_extractor import ContentExtractor
from langcrawl.readers.crawl.http_client import (
    FetcherInitError,
    FetchError,
    HttpFetcher,
    RateLimiter,
)
from langcrawl.readers.crawl.language_detector import LanguageDetector, LanguageResult
from langcrawl.readers.crawl.models import FetchResult

__all__ = [
    "ContentExtractor",
    "FetcherInitError",
    "FetchError",
    "FetchResult",
    "HttpFetcher",
    "LanguageDetector",
    "LanguageResult",
    "RateLimiter",
]
