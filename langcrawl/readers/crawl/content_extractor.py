"""Visible text and link extraction from HTML pages."""

from __future__ import annotations

import re

from bs4 import BeautifulSoup

# Elements that never contribute visible text
NON_CONTENT_TAGS = ["script", "style", "noscript", "svg", "canvas"]

WHITESPACE = re.compile(r"\s+")
# Keep word characters, Latin-1 and Latin Extended-A letters, and sentence punctuation
DISALLOWED_CHARS = re.compile(r"[^\w\s\u00C0-\u017F.,!?;:()\-\"']")


class ContentExtractor:
    """Extracts page text and outbound links with BeautifulSoup."""

    def __init__(self, parser: str = "html.parser") -> None:
        self.parser = parser

    def extract_visible_text(self, html: str) -> str:
        """Return the normalized visible text of an HTML document.

        Script, style and other non-content elements are removed, the text of
        ``<body>`` (or the whole document when there is no body) is collected,
        whitespace is collapsed and stray symbols are stripped.
        """
        if not html:
            return ""

        soup = BeautifulSoup(html, self.parser)
        for tag in soup(NON_CONTENT_TAGS):
            tag.decompose()

        root = soup.body or soup
        # Text nodes are joined as-is so inline markup does not split words
        return self.clean_text(root.get_text())

    def extract_links(self, html: str) -> list[str]:
        """Return every ``<a href>`` value in document order."""
        if not html:
            return []

        soup = BeautifulSoup(html, self.parser)
        links = []
        for anchor in soup.find_all("a", href=True):
            href = anchor["href"]
            if isinstance(href, list):
                href = " ".join(href)
            if href:
                links.append(href)
        return links

    @staticmethod
    def clean_text(text: str) -> str:
        """Collapse whitespace and drop characters outside the allowed set."""
        text = WHITESPACE.sub(" ", text)
        text = DISALLOWED_CHARS.sub("", text)
        return text.strip()
