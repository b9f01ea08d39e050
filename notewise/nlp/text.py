"""Sentence segmentation and word tokenization shared by every NLP component."""

from __future__ import annotations

import re
from collections import Counter

SENTENCE_SPLIT_RE = re.compile(r"(?<=[.!?])\s+")
_NON_WORD_RE = re.compile(r"[^\w\s]")

MIN_SENTENCE_CHARS = 10
MIN_TOKEN_CHARS = 2

STOP_WORDS: frozenset[str] = frozenset(
    {
        "the", "a", "an", "and", "or", "but", "in", "on", "at", "to",
        "for", "of", "with", "by", "from", "is", "it", "its", "this", "that",
        "was", "are", "were", "be", "been", "being", "have", "has", "had", "do",
        "does", "did", "will", "would", "could", "should", "may", "might", "shall", "can",
        "not", "no", "nor", "so", "if", "then", "than", "too", "very", "just",
        "about", "above", "after", "again", "all", "also", "am", "any", "because", "before",
        "between", "both", "each", "few", "get", "got", "here", "how", "into", "more",
        "most", "much", "must", "my", "new", "now", "only", "other", "our", "out",
        "own", "same", "she", "some", "such", "there", "these", "they", "those", "through",
        "under", "until", "what", "when", "where", "which", "while", "who", "whom", "why",
        "you", "your", "we", "he", "her", "him", "his", "me", "them", "us",
    }
)


def split_sentences(text: str) -> list[str]:
    """Split *text* on ``.``, ``!`` or ``?`` followed by whitespace.

    Fragments of ``MIN_SENTENCE_CHARS`` characters or fewer are dropped as noise.
    """
    if not text:
        return []
    pieces = (piece.strip() for piece in SENTENCE_SPLIT_RE.split(text))
    return [piece for piece in pieces if len(piece) > MIN_SENTENCE_CHARS]


def tokenize(text: str) -> list[str]:
    """Lowercase, strip punctuation and drop short tokens and stop words."""
    cleaned = _NON_WORD_RE.sub("", text.lower())
    return [
        word
        for word in cleaned.split()
        if len(word) > MIN_TOKEN_CHARS and word not in STOP_WORDS
    ]


def word_frequency(tokens: list[str]) -> Counter[str]:
    """Count token occurrences."""
    return Counter(tokens)
