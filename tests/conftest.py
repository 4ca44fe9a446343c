"""Shared pytest fixtures for langcrawl tests."""

from __future__ import annotations

import pytest

from tests.fixtures.fakes import KeywordDetector


@pytest.fixture
def keyword_detector() -> KeywordDetector:
    """Detector recognizing Polish, English and German marker words."""
    return KeywordDetector(
        {
            "Polska": "pol",
            "kota": "pl",
            "English": "eng",
            "quick": "en",
            "deutscher": "deu",
        },
        default="unknown",
    )


@pytest.fixture(autouse=True)
def isolated_log_file(tmp_path, monkeypatch) -> None:
    """Keep CLI log files out of the working directory."""
    monkeypatch.setenv("LANGCRAWL_LOG_FILE", str(tmp_path / "langcrawl.log"))
