"""Sentence-boundary chunking for transcripts too long for one request."""

from __future__ import annotations

from notewise.nlp.text import SENTENCE_SPLIT_RE


def chunk_text(text: str, max_chars: int = 4000) -> list[str]:
    """Split *text* into chunks of at most *max_chars*, breaking between sentences.

    A single sentence longer than *max_chars* is kept whole in its own chunk.
    Text that already fits is returned unchanged as the only chunk.

    Args:
        text: The text to split.
        max_chars: Target maximum chunk length in characters.

    Returns:
        Chunks in order; joining them with spaces reproduces every sentence.
    """
    if len(text) <= max_chars:
        return [text]

    chunks: list[str] = []
    current = ""
    for sentence in SENTENCE_SPLIT_RE.split(text):
        if current and len(current) + len(sentence) + 1 > max_chars:
            chunks.append(current.strip())
            current = ""
        current = f"{current} {sentence}" if current else sentence

    if current.strip():
        chunks.append(current.strip())
    return chunks
