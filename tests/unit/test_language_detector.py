"""Tests for langcrawl.readers.crawl.language_detector module.

The fast-langdetect call is patched so these tests do not depend on the
identification model being available.
"""

import unittest.mock as mock

from langcrawl.readers.crawl.language_detector import LanguageDetector, LanguageResult

DETECT = "langcrawl.readers.crawl.language_detector.detect"


def test_detect_returns_primary_result_from_list() -> None:
    detector = LanguageDetector()

    with mock.patch(DETECT) as mock_detect:
        mock_detect.return_value = [
            {"lang": "pl", "score": 0.93},
            {"lang": "cs", "score": 0.04},
        ]
        result = detector.detect("Ten produkt jest dostępny w Polsce")

    assert result == LanguageResult(language="pl", confidence=0.93)


def test_detect_accepts_single_dict_result() -> None:
    detector = LanguageDetector()

    with mock.patch(DETECT) as mock_detect:
        mock_detect.return_value = {"lang": "en", "score": 0.99}
        result = detector.detect("This is English text")

    assert result.language == "en"
    assert result.confidence == 0.99


def test_detect_replaces_newlines_before_detection() -> None:
    detector = LanguageDetector()

    with mock.patch(DETECT) as mock_detect:
        mock_detect.return_value = [{"lang": "en", "score": 0.9}]
        detector.detect("First line\nsecond line")

    mock_detect.assert_called_once_with("First line second line")


def test_detect_empty_text() -> None:
    detector = LanguageDetector()

    with mock.patch(DETECT) as mock_detect:
        result = detector.detect("")

    mock_detect.assert_not_called()
    assert result.language == "unknown"
    assert result.confidence == 0.0


def test_detect_whitespace_only() -> None:
    detector = LanguageDetector()

    with mock.patch(DETECT) as mock_detect:
        result = detector.detect("   \n\t  ")

    mock_detect.assert_not_called()
    assert result.language == "unknown"


def test_detect_short_text() -> None:
    detector = LanguageDetector(min_text_length=10)

    with mock.patch(DETECT) as mock_detect:
        result = detector.detect("Short")

    mock_detect.assert_not_called()
    assert result.language == "unknown"


def test_detect_empty_result_list() -> None:
    detector = LanguageDetector()

    with mock.patch(DETECT, return_value=[]):
        result = detector.detect("Some undetectable text")

    assert result.language == "unknown"
    assert result.confidence == 0.0


def test_detect_library_error() -> None:
    """Detection library errors fail open to unknown."""
    detector = LanguageDetector()

    with mock.patch(DETECT) as mock_detect:
        mock_detect.side_effect = RuntimeError("Simulated detection error")
        result = detector.detect("This should fail gracefully")

    assert result.language == "unknown"
    assert result.confidence == 0.0
