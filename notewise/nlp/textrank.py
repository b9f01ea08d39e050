"""TextRank: PageRank over a cosine-similarity graph of sentences."""

from __future__ import annotations

import logging
import math
from collections import Counter

from notewise.nlp.text import tokenize, word_frequency

logger = logging.getLogger(__name__)

DAMPING = 0.85
MAX_ITERATIONS = 50
CONVERGENCE_THRESHOLD = 0.0001


def cosine_similarity(a: Counter[str], b: Counter[str]) -> float:
    """Cosine similarity of two term-frequency vectors (0.0 if either is empty)."""
    mag_a = math.sqrt(sum(v * v for v in a.values()))
    mag_b = math.sqrt(sum(v * v for v in b.values()))
    if mag_a == 0 or mag_b == 0:
        return 0.0
    dot = sum(count * b[term] for term, count in a.items() if term in b)
    return dot / (mag_a * mag_b)


def similarity_matrix(sentences: list[str]) -> list[list[float]]:
    """Build the symmetric sentence-similarity matrix with a zero diagonal."""
    freqs = [word_frequency(tokenize(sentence)) for sentence in sentences]
    n = len(freqs)
    matrix = [[0.0] * n for _ in range(n)]
    for i in range(n):
        for j in range(i + 1, n):
            sim = cosine_similarity(freqs[i], freqs[j])
            matrix[i][j] = sim
            matrix[j][i] = sim
    return matrix


def _page_rank(matrix: list[list[float]]) -> list[float]:
    n = len(matrix)
    out_degree = [sum(row) for row in matrix]
    scores = [1.0 / n] * n

    for iteration in range(MAX_ITERATIONS):
        new_scores = [0.0] * n
        delta = 0.0
        for i in range(n):
            incoming = 0.0
            for j in range(n):
                if i == j or out_degree[j] <= 0:
                    continue
                incoming += (matrix[j][i] / out_degree[j]) * scores[j]
            new_scores[i] = (1 - DAMPING) / n + DAMPING * incoming
            delta += abs(new_scores[i] - scores[i])
        scores = new_scores
        if delta < CONVERGENCE_THRESHOLD:
            logger.debug("TextRank converged after %d iterations", iteration + 1)
            break

    return scores


def text_rank(sentences: list[str], top_n: int = 5) -> list[int]:
    """Rank *sentences* and return the indices of the *top_n* best, best first.

    When there are no more sentences than *top_n*, every index is returned in
    reading order. Equal scores are ordered by sentence position.
    """
    n = len(sentences)
    if n == 0 or top_n <= 0:
        return []
    if n <= top_n:
        return list(range(n))

    scores = _page_rank(similarity_matrix(sentences))
    ranked = sorted(range(n), key=lambda index: (-scores[index], index))
    return ranked[:top_n]


def rank_in_reading_order(sentences: list[str], top_n: int) -> list[str]:
    """Return the *top_n* ranked sentences re-sorted into source order."""
    return [sentences[index] for index in sorted(text_rank(sentences, top_n))]
