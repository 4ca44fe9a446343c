"""URL resolution and scope filtering for site discovery.

A candidate URL is in scope for a crawl when it lives on the target host, its
path contains the configured path filter, and it does not point at a binary
document or image. Parse failures are never raised to callers: an unparseable
URL is simply out of scope.
"""

from __future__ import annotations

from urllib.parse import urldefrag, urljoin, urlparse

# Binary documents and images are never analyzed
EXCLUDED_EXTENSIONS = (
    ".pdf",
    ".jpg",
    ".jpeg",
    ".png",
    ".gif",
    ".zip",
    ".doc",
    ".docx",
    ".xls",
    ".xlsx",
)


def resolve_url(href: str, base_url: str) -> str:
    """Resolve a link against the page it was found on.

    The fragment is dropped so that ``/page#a`` and ``/page#b`` collapse to
    the same URL. The query string is preserved.

    Args:
        href: Raw ``href`` attribute value.
        base_url: Absolute URL of the page containing the link.

    Returns:
        Absolute URL without fragment, or an empty string if the link
        cannot be parsed.

    Examples:
        >>> resolve_url("/pl-pl/page?x=1#section", "https://www.xrite.com/pl-pl/")
        'https://www.xrite.com/pl-pl/page?x=1'
    """
    try:
        absolute_url = urljoin(base_url, href.strip())
        url, _fragment = urldefrag(absolute_url)
    except ValueError:
        return ""
    return url


def is_valid_url(url: str, host: str, path_filter: str) -> bool:
    """Check whether a URL belongs to the crawl's scope.

    Args:
        url: Absolute URL to check.
        host: Hostname the URL must match exactly (case-insensitive, as
            hostnames are normalized to lowercase by the parser).
        path_filter: Substring the URL path must contain.

    Returns:
        True if the URL is on the target host, under the path filter, and
        not an excluded file type.
    """
    if not url:
        return False

    try:
        parsed = urlparse(url)
        hostname = parsed.hostname
    except ValueError:
        return False

    if hostname is None or hostname != host.lower():
        return False

    path = parsed.path
    if path_filter not in path:
        return False

    return not path.lower().endswith(EXCLUDED_EXTENSIONS)
