"""Data models produced by language classification."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class LanguageShare:
    """Share of a page's words in one minor language.

    Args:
        language: Display name of the language (or raw code if unnamed)
        percentage: Share of the page's words, 0-100
    """

    language: str
    percentage: float


@dataclass(frozen=True)
class PercentageBreakdown:
    """Language distribution of one page.

    Args:
        primary: Percentage of words in the primary language (2 decimals)
        english: Percentage of words in English (2 decimals)
        others: Remaining languages above the minor-language cutoff,
            largest first
    """

    primary: float = 0.0
    english: float = 0.0
    others: list[LanguageShare] = field(default_factory=list)


@dataclass(frozen=True)
class EnglishContent:
    """English text found on one page.

    Args:
        sentences: English sentences in page order
        words: Lowercase ASCII words from those sentences, in page order
        word_count: Number of entries in ``words``
    """

    sentences: list[str]
    words: list[str]
    word_count: int
