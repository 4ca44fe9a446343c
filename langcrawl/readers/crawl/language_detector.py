"""Language detection component using fast-langdetect.

This module wraps the fast-langdetect library behind a small, fail-open
interface. It is the language identification primitive the classifier calls
once per sentence.

The LanguageDetector class skips detection for text that is too short to be
reliable and returns "unknown" on errors rather than crashing the crawl.

Examples:
    >>> from langcrawl.readers.crawl.language_detector import LanguageDetector
    >>> detector = LanguageDetector(min_text_length=5)
    >>> result = detector.detect("Ten produkt jest dostępny w Polsce")
    >>> result.language
    'pl'
"""

import logging
from dataclasses import dataclass

from fast_langdetect import detect


@dataclass(frozen=True)
class LanguageResult:
    """Result of language detection.

    Attributes:
        language: Language code reported by the detector or "unknown"
        confidence: Confidence score 0.0-1.0, where 0.0 = unknown/error
    """

    language: str
    confidence: float


UNKNOWN_RESULT = LanguageResult(language="unknown", confidence=0.0)


class LanguageDetector:
    """Fast language detection using fast-langdetect library.

    Fail-open on errors (returns unknown), skips short text.

    Attributes:
        min_text_length: Minimum text length for detection (default: 5 chars)
    """

    def __init__(self, min_text_length: int = 5) -> None:
        """Initialize detector with minimum text length.

        Args:
            min_text_length: Skip detection for text shorter than this (default: 5)
        """
        self.min_text_length = min_text_length
        self._logger = logging.getLogger(__name__)

    def detect(self, text: str) -> LanguageResult:
        """Detect the language of a piece of text.

        Args:
            text: Text to analyze, typically one sentence.

        Returns:
            LanguageResult with the detector's best guess, or "unknown" with
            0.0 confidence for empty, short, or undetectable text.

        Edge Cases:
            - Empty or whitespace-only text: unknown
            - Short text (< min_text_length): unknown
            - Detection error: unknown (logs warning with error details)
        """
        if not text or not text.strip():
            return UNKNOWN_RESULT

        if len(text) < self.min_text_length:
            return UNKNOWN_RESULT

        try:
            # fast-langdetect rejects newlines in its input
            result = detect(text.replace("\n", " "))
            # Older releases return a single dict, newer ones a ranked list
            if isinstance(result, dict):
                result = [result]
            if not result:
                return UNKNOWN_RESULT

            primary = result[0]
            return LanguageResult(
                language=primary["lang"],
                confidence=float(primary["score"]),
            )
        except Exception as e:
            self._logger.warning(
                f"Language detection failed: {type(e).__name__}: {e}",
                extra={
                    "error": str(e),
                    "error_type": type(e).__name__,
                    "fallback": "unknown",
                    "text_length": len(text),
                },
            )
            return UNKNOWN_RESULT
