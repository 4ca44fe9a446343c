"""Sentence segmentation and word tokenization for page text."""

from __future__ import annotations

import re

# Runs of terminal punctuation followed by whitespace end a sentence
SENTENCE_BOUNDARY = re.compile(r"[.!?]+\s+")
NON_WORD = re.compile(r"[^\w\s]")
ASCII_WORD = re.compile(r"^[a-z]+$")

# Fragments this short are not worth classifying
MIN_SENTENCE_LENGTH = 5


def split_sentences(text: str, min_length: int = MIN_SENTENCE_LENGTH) -> list[str]:
    """Split text into trimmed sentences longer than ``min_length`` characters."""
    sentences = (sentence.strip() for sentence in SENTENCE_BOUNDARY.split(text))
    return [sentence for sentence in sentences if len(sentence) > min_length]


def count_words(text: str) -> int:
    """Count whitespace-delimited tokens."""
    return len(text.split())


def extract_words(text: str) -> list[str]:
    """Extract lowercase ASCII words longer than two letters.

    Punctuation becomes a separator, and tokens containing digits, underscores
    or non-Latin letters are dropped, so the result is always pure ``a-z``.

    Examples:
        >>> extract_words("Buy the X-Rite i1Pro, now!")
        ['buy', 'the', 'rite', 'now']
    """
    tokens = NON_WORD.sub(" ", text.lower()).split()
    return [token for token in tokens if len(token) > 2 and ASCII_WORD.match(token)]
