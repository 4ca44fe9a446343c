"""Configuration module for the language crawler.

Provides Pydantic-based configuration management with environment variable support
and field validation. Every field can be set through a ``LANGCRAWL_``-prefixed
environment variable or a ``.env`` file.

Example:
    >>> from langcrawl.core.config import Settings
    >>> settings = Settings.from_preset("it-it", max_urls=25)
    >>> settings.path_filter
    '/it-it'
    >>> settings.crawl_target().host
    'www.xrite.com'
"""

from pathlib import Path
from typing import Any
from urllib.parse import urlparse

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from langcrawl.processing.languages import is_known_language
from langcrawl.readers.crawl.http_client import DEFAULT_USER_AGENT
from langcrawl.services.models import CrawlTarget

# Known locale sections of the audited site
LOCALE_PRESETS: dict[str, dict[str, str]] = {
    "pl-pl": {
        "start_url": "https://www.xrite.com/pl-pl",
        "path_filter": "/pl-pl",
        "primary_language": "pl",
        "output_file": "language-analysis-results-poland.json",
        "english_content_file": "english-content-report-poland.json",
    },
    "it-it": {
        "start_url": "https://www.xrite.com/it-it",
        "path_filter": "/it-it",
        "primary_language": "it",
        "output_file": "language-analysis-results-italy.json",
        "english_content_file": "english-content-report-italy.json",
    },
    "fr-fr": {
        "start_url": "https://www.xrite.com/fr-fr",
        "path_filter": "/fr-fr",
        "primary_language": "fr",
        "output_file": "language-analysis-results-france.json",
        "english_content_file": "english-content-report-france.json",
    },
}

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """Language crawler configuration.

    Attributes:
        start_url: URL the crawl starts from
        max_urls: Hard cap on the number of discovered URLs
        request_delay_ms: Minimum milliseconds between requests
        request_timeout: HTTP timeout in seconds
        path_filter: Substring every crawled URL path must contain
            (defaults to the start URL's path)
        primary_language: ISO 639-1 code of the site's target locale
        user_agent: User-Agent header sent with every request
        output_file: Destination of the full analysis report
            (defaults to language-analysis-results-<lang>.json)
        english_content_file: Destination of the English content report
            (defaults to english-content-report-<lang>.json)
        high_english_threshold: English percentage flagged in the summary
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Path to the rotating log file

    Raises:
        ValidationError: If values are invalid
    """

    start_url: str = "https://www.xrite.com/pl-pl"
    max_urls: int = 10
    request_delay_ms: int = 1000
    request_timeout: float = 30.0
    path_filter: str = ""
    primary_language: str = "pl"
    user_agent: str = DEFAULT_USER_AGENT

    # Reports
    output_file: Path | None = None
    english_content_file: Path | None = None
    high_english_threshold: float = 30.0

    # Logging
    log_level: str = "INFO"
    log_file: Path = Path(".cache/langcrawl.log")

    model_config = SettingsConfigDict(
        env_prefix="LANGCRAWL_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        validate_default=True,
        extra="ignore",
    )

    @classmethod
    def from_preset(cls, name: str, **overrides: Any) -> "Settings":
        """Build settings for a known locale section.

        Args:
            name: Preset name such as "pl-pl"
            **overrides: Field values that take precedence over the preset

        Raises:
            KeyError: If the preset is unknown
        """
        try:
            preset = LOCALE_PRESETS[name.lower()]
        except KeyError:
            known = ", ".join(sorted(LOCALE_PRESETS))
            raise KeyError(f"Unknown preset '{name}' (known: {known})") from None
        values: dict[str, Any] = {**preset}
        values.update({key: value for key, value in overrides.items() if value is not None})
        return cls(**values)

    @model_validator(mode="after")
    def set_derived_defaults(self) -> "Settings":
        """Fill path filter and report paths from the other fields when unset."""
        if not self.path_filter:
            self.path_filter = urlparse(self.start_url).path.rstrip("/")

        if self.output_file is None:
            self.output_file = Path(
                f"language-analysis-results-{self.primary_language}.json"
            )

        if self.english_content_file is None:
            self.english_content_file = Path(
                f"english-content-report-{self.primary_language}.json"
            )

        return self

    @property
    def request_delay(self) -> float:
        """Minimum delay between requests, in seconds."""
        return self.request_delay_ms / 1000

    def crawl_target(self) -> CrawlTarget:
        """Build the discovery scope for this configuration."""
        return CrawlTarget(
            start_url=self.start_url,
            host=urlparse(self.start_url).hostname or "",
            path_filter=self.path_filter,
            max_urls=self.max_urls,
        )

    @field_validator("start_url")
    @classmethod
    def validate_start_url(cls: type["Settings"], v: str) -> str:
        """Validate start_url is an absolute http(s) URL with a host.

        Raises:
            ValueError: If the URL has another scheme or no hostname
        """
        parsed = urlparse(v)
        if parsed.scheme not in ("http", "https") or not parsed.hostname:
            raise ValueError("start_url must be an absolute http(s) URL")
        return v

    @field_validator("max_urls")
    @classmethod
    def validate_max_urls(cls: type["Settings"], v: int) -> int:
        """Validate max_urls is positive."""
        if v <= 0:
            raise ValueError("max_urls must be positive")
        return v

    @field_validator("request_delay_ms")
    @classmethod
    def validate_request_delay(cls: type["Settings"], v: int) -> int:
        """Validate request_delay_ms is not negative."""
        if v < 0:
            raise ValueError("request_delay_ms must not be negative")
        return v

    @field_validator("primary_language")
    @classmethod
    def validate_primary_language(cls: type["Settings"], v: str) -> str:
        """Validate primary_language is a recognized ISO 639-1 code.

        Raises:
            ValueError: If the code is not a two-letter ISO 639-1 code
        """
        code = v.strip().lower()
        if not is_known_language(code):
            raise ValueError(f"primary_language must be an ISO 639-1 code, got '{v}'")
        return code

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls: type["Settings"], v: str) -> str:
        """Validate log_level names a standard logging level."""
        level = v.upper()
        if level not in VALID_LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(VALID_LOG_LEVELS)}")
        return level
