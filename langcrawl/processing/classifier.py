"""Sentence-level language classification of page text.

The classifier runs the language detector over every sentence of a page,
accumulates word counts per language, and turns those counts into the
percentage breakdown and dominant-language verdict used in the reports.
English sentences are also collected verbatim for the English content report.

Example:
    >>> classifier = LanguageClassifier(primary_language="pl")
    >>> stats = classifier.detect_language_stats(page_text)
    >>> percentages = classifier.calculate_percentages(stats)
    >>> classifier.get_dominant_language(percentages)
    'pl'
"""

from __future__ import annotations

from collections.abc import Mapping

from langcrawl.processing.languages import (
    ENGLISH,
    get_language_name,
    normalize_language_code,
)
from langcrawl.processing.models import EnglishContent, LanguageShare, PercentageBreakdown
from langcrawl.processing.text import (
    MIN_SENTENCE_LENGTH,
    count_words,
    extract_words,
    split_sentences,
)
from langcrawl.readers.crawl.language_detector import LanguageDetector

MIXED = "mixed"
# A language must exceed this share to dominate a page
DOMINANCE_THRESHOLD = 60.0
# Minor languages at or below this share are left out of the breakdown
MINOR_LANGUAGE_CUTOFF = 0.5


class LanguageClassifier:
    """Classifies page text by language, one sentence at a time.

    One instance is reused across all pages of a run. The English
    accumulators are reset at the start of every ``detect_language_stats``
    call, so results never leak from one page into the next.

    Attributes:
        primary_language: ISO 639-1 code of the site's target locale
        detector: Language identification primitive
        min_sentence_length: Shortest sentence passed to the detector
    """

    def __init__(
        self,
        primary_language: str = "pl",
        detector: LanguageDetector | None = None,
        min_sentence_length: int = MIN_SENTENCE_LENGTH,
    ) -> None:
        self.primary_language = primary_language
        self.min_sentence_length = min_sentence_length
        self.detector = detector or LanguageDetector(min_text_length=min_sentence_length)
        self._english_sentences: list[str] = []
        self._english_words: list[str] = []

    def detect_language_stats(self, text: str) -> dict[str, int]:
        """Count words per detected language.

        Args:
            text: Visible text of one page.

        Returns:
            Mapping of language code (or "unknown") to word count, in the
            order languages were first encountered.
        """
        self._english_sentences = []
        self._english_words = []

        word_counts: dict[str, int] = {}
        for sentence in split_sentences(text, self.min_sentence_length):
            if len(sentence) < self.min_sentence_length:
                continue

            result = self.detector.detect(sentence)
            language = normalize_language_code(result.language)

            if language == ENGLISH:
                self._english_sentences.append(sentence)
                self._english_words.extend(extract_words(sentence))

            word_counts[language] = word_counts.get(language, 0) + count_words(sentence)

        return word_counts

    def get_english_content(self) -> EnglishContent:
        """Return the English text collected by the last classification."""
        return EnglishContent(
            sentences=list(self._english_sentences),
            words=list(self._english_words),
            word_count=len(self._english_words),
        )

    def calculate_percentages(self, stats: Mapping[str, int]) -> PercentageBreakdown:
        """Convert word counts into a percentage breakdown.

        Primary and English shares are rounded to two decimals. Other
        languages are named, filtered to those above the minor-language
        cutoff and sorted largest first; ties keep encounter order.

        Args:
            stats: Word counts from ``detect_language_stats``.

        Returns:
            PercentageBreakdown, all zeros when ``stats`` holds no words.
        """
        total_words = sum(stats.values())
        if total_words == 0:
            return PercentageBreakdown(primary=0.0, english=0.0, others=[])

        primary = 100 * stats.get(self.primary_language, 0) / total_words
        english = 100 * stats.get(ENGLISH, 0) / total_words

        others = [
            LanguageShare(
                language=get_language_name(language),
                percentage=100 * count / total_words,
            )
            for language, count in stats.items()
            if language not in (self.primary_language, ENGLISH)
        ]
        others = [share for share in others if share.percentage > MINOR_LANGUAGE_CUTOFF]
        others.sort(key=lambda share: share.percentage, reverse=True)

        return PercentageBreakdown(
            primary=round(primary, 2),
            english=round(english, 2),
            others=others,
        )

    def get_dominant_language(self, percentages: PercentageBreakdown) -> str:
        """Label a page as the primary language, "en", or "mixed"."""
        if percentages.primary > DOMINANCE_THRESHOLD:
            return self.primary_language
        if percentages.english > DOMINANCE_THRESHOLD:
            return ENGLISH
        return MIXED
