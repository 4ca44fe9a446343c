"""Unit tests for report generation and persistence."""

import json
from pathlib import Path

import pytest

from langcrawl.services.models import (
    EnglishContent,
    LanguageShare,
    PageAnalysis,
    PercentageBreakdown,
)
from langcrawl.services.reporting import (
    ReportWriter,
    build_english_report,
    generate_summary,
)


def _analysis(
    url: str,
    primary: float,
    english: float,
    sentences: list[str] | None = None,
    words: list[str] | None = None,
) -> PageAnalysis:
    content = None
    if words:
        content = EnglishContent(
            sentences=sentences or [], words=words, word_count=len(words)
        )
    return PageAnalysis(
        url=url,
        dominant_language="mixed",
        percentages=PercentageBreakdown(
            primary=primary,
            english=english,
            others=[LanguageShare(language="German", percentage=100 - primary - english)],
        ),
        total_words=100,
        english_content=content,
    )


RESULTS = [
    _analysis("https://site/pl-pl/a", primary=80.0, english=20.0, words=["hello"], sentences=["Hello there"]),
    _analysis("https://site/pl-pl/b", primary=0.0, english=90.0, words=["only", "english", "only"], sentences=["Only English only"]),
    _analysis("https://site/pl-pl/c", primary=40.0, english=35.0, words=["some", "text"], sentences=["Some text"]),
    _analysis("https://site/pl-pl/d", primary=100.0, english=0.0),
]


# Summary
def test_generate_summary_averages_and_flags() -> None:
    summary = generate_summary(RESULTS)

    assert summary.total_pages == 4
    assert summary.average_primary_percentage == 55.0
    assert summary.average_english_percentage == 36.25
    assert [p.url for p in summary.pages_with_high_english_content] == [
        "https://site/pl-pl/b",
        "https://site/pl-pl/c",
    ]
    assert summary.pages_without_primary == ["https://site/pl-pl/b"]
    assert summary.pages_with_english_content == 3


def test_generate_summary_rounds_averages() -> None:
    results = [
        _analysis("https://site/a", primary=10.0, english=0.0),
        _analysis("https://site/b", primary=10.0, english=0.0),
        _analysis("https://site/c", primary=0.0, english=0.0),
    ]

    assert generate_summary(results).average_primary_percentage == 6.67


def test_generate_summary_uses_custom_threshold() -> None:
    summary = generate_summary(RESULTS, high_english_threshold=10.0)

    assert len(summary.pages_with_high_english_content) == 3


def test_generate_summary_empty() -> None:
    summary = generate_summary([])

    assert summary.total_pages == 0
    assert summary.average_primary_percentage == 0.0
    assert summary.average_english_percentage == 0.0
    assert summary.pages_with_high_english_content == []
    assert summary.pages_without_primary == []


# English report
def test_build_english_report_sorted_with_distinct_words() -> None:
    report = build_english_report(RESULTS)

    assert [entry.url for entry in report] == [
        "https://site/pl-pl/b",
        "https://site/pl-pl/c",
        "https://site/pl-pl/a",
    ]
    assert report[0].english_words == ["english", "only"]
    assert report[0].total_english_words == 3


def test_build_english_report_limits_sample_sentences() -> None:
    sentences = [f"Sentence number {i}" for i in range(8)]
    page = _analysis("https://site/x", primary=0.0, english=100.0, sentences=sentences, words=["sentence"])

    entry = build_english_report([page])[0]

    assert entry.sample_sentences == sentences[:5]
    assert entry.english_sentences == sentences


# Persistence
def test_save_results_writes_both_files(tmp_path: Path) -> None:
    output = tmp_path / "reports" / "results.json"
    english = tmp_path / "reports" / "english.json"

    ReportWriter(output, english).save_results(RESULTS)

    results = json.loads(output.read_text(encoding="utf-8"))
    assert [page["url"] for page in results] == [r.url for r in RESULTS]
    assert results[0]["percentages"]["others"] == [
        {"language": "German", "percentage": 0.0}
    ]
    assert "english_content" not in results[3]
    assert results[0]["english_content"]["word_count"] == 1

    report = json.loads(english.read_text(encoding="utf-8"))
    assert [entry["url"] for entry in report] == [
        "https://site/pl-pl/b",
        "https://site/pl-pl/c",
        "https://site/pl-pl/a",
    ]
    assert set(report[0]) == {
        "url",
        "english_percentage",
        "english_sentences",
        "english_words",
        "total_english_words",
        "sample_sentences",
    }


def test_save_results_keeps_non_ascii_text(tmp_path: Path) -> None:
    page = _analysis("https://site/pl-pl/zażółć", primary=100.0, english=0.0)
    output = tmp_path / "results.json"

    ReportWriter(output, tmp_path / "english.json").save_results([page])

    assert "zażółć" in output.read_text(encoding="utf-8")


def test_save_results_with_no_english_writes_empty_report(tmp_path: Path) -> None:
    english = tmp_path / "english.json"

    ReportWriter(tmp_path / "results.json", english).save_results(RESULTS[3:])

    assert json.loads(english.read_text(encoding="utf-8")) == []


def test_save_results_propagates_write_errors(tmp_path: Path) -> None:
    """A directory in place of the output file is a write failure."""
    output = tmp_path / "results.json"
    output.mkdir()

    with pytest.raises(OSError):
        ReportWriter(output, tmp_path / "english.json").save_results(RESULTS)


def test_english_report_write_errors_propagate(tmp_path: Path) -> None:
    english = tmp_path / "english.json"
    english.mkdir()

    with pytest.raises(OSError):
        ReportWriter(tmp_path / "results.json", english).save_results(RESULTS)


def test_saved_minor_language_shares_are_rounded(tmp_path: Path) -> None:
    """Stored shares stay exact; the written report shows two decimals."""
    page = PageAnalysis(
        url="https://site/pl-pl/mixed",
        dominant_language="pl",
        percentages=PercentageBreakdown(
            primary=93.33,
            english=0.0,
            others=[LanguageShare(language="German", percentage=100 / 15)],
        ),
        total_words=15,
    )
    output = tmp_path / "results.json"

    ReportWriter(output, tmp_path / "english.json").save_results([page])

    saved = json.loads(output.read_text(encoding="utf-8"))
    assert saved[0]["percentages"]["others"] == [
        {"language": "German", "percentage": 6.67}
    ]
    assert page.percentages.others[0].percentage == 100 / 15
