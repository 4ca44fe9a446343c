"""Data models for page fetching."""

from dataclasses import dataclass


@dataclass(frozen=True)
class FetchResult:
    """Response for a single fetched URL.

    Attributes:
        url: URL that was requested
        body: Decoded response body
        status_code: HTTP status code
        final_url: URL after redirects
    """

    url: str
    body: str
    status_code: int
    final_url: str | None = None
