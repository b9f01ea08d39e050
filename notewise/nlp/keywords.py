"""Frequency-ranked keyword extraction."""

from __future__ import annotations

from notewise.nlp.text import tokenize, word_frequency


def extract_keywords(text: str, top_n: int = 15) -> list[str]:
    """Return the *top_n* most frequent salient words in *text*.

    Ties keep the order in which words were first encountered. ``Counter``
    preserves insertion order and ``sorted`` is stable, so sorting on the count
    alone is enough.
    """
    if top_n <= 0:
        return []
    freq = word_frequency(tokenize(text))
    ranked = sorted(freq.items(), key=lambda item: item[1], reverse=True)
    return [word for word, _ in ranked[:top_n]]
