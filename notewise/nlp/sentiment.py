"""Lexicon-based sentiment scoring with single-word negation lookahead.

Scores range from -1.0 (entirely negative) to +1.0 (entirely positive) and are
the mean polarity of the sentiment words found. A negation word flips only the
sentiment word that immediately follows it; any other word in between clears
the negation.
"""

from __future__ import annotations

import re

_SENTIMENT_STRIP_RE = re.compile(r"[^\w\s']")

POSITIVE_WORDS: frozenset[str] = frozenset(
    {
        "good", "great", "excellent", "amazing", "wonderful", "fantastic", "awesome",
        "love", "happy", "glad", "pleased", "delighted", "perfect", "beautiful",
        "brilliant", "outstanding", "superb", "terrific", "positive", "success",
        "successful", "agree", "agreed", "approval", "approve", "best", "better",
        "celebrate", "accomplished", "achieve", "benefit", "comfortable", "confident",
        "creative", "efficient", "enjoy", "excited", "exciting", "favorable", "fine",
        "fortunate", "helpful", "impressive", "improved", "incredible", "inspired",
        "interesting", "joyful", "nice", "optimistic", "promising", "remarkable",
        "satisfied", "smooth", "strong", "valuable", "welcome", "win", "won", "worth",
        "worthy", "ready", "progress", "resolved", "appreciate", "clear", "easy",
        "effective", "productive", "solid", "thanks", "useful",
    }
)

NEGATIVE_WORDS: frozenset[str] = frozenset(
    {
        "bad", "terrible", "awful", "horrible", "poor", "worst", "hate", "angry", "sad",
        "disappointed", "frustrated", "annoyed", "upset", "fail", "failed", "failure",
        "wrong", "problem", "issue", "concern", "worried", "worry", "difficult", "hard",
        "painful", "unfortunately", "sadly", "regret", "unhappy", "disagree", "rejected",
        "reject", "block", "blocked", "blocker", "broken", "bug", "confusing",
        "complicated", "critical", "danger", "dangerous", "delay", "delayed", "deny",
        "deprecated", "destroy", "disaster", "error", "expensive", "impossible",
        "inadequate", "incomplete", "insecure", "invalid", "lacking", "lost", "missing",
        "negative", "nightmare", "obsolete", "overdue", "overwhelm", "risk", "risky",
        "severe", "slow", "stuck", "threat", "trouble", "unable", "unclear", "unfair",
        "unfortunate", "unstable", "urgent", "vulnerable", "weak",
    }
)

NEGATION_WORDS: frozenset[str] = frozenset(
    {
        "not", "n't", "no", "never", "neither", "nor", "hardly", "barely", "scarcely",
        "rarely", "don't", "doesn't", "didn't", "won't", "wouldn't", "couldn't",
        "shouldn't", "isn't", "aren't", "wasn't",
    }
)


def _sentiment_tokens(text: str) -> list[str]:
    normalized = text.lower().replace("’", "'")
    return _SENTIMENT_STRIP_RE.sub("", normalized).split()


def analyze_sentiment(text: str) -> float:
    """Score *text* in ``[-1.0, 1.0]``; 0.0 when no sentiment words are present."""
    score = 0
    count = 0
    negated = False

    for word in _sentiment_tokens(text):
        if word in NEGATION_WORDS:
            negated = True
            continue
        if word in POSITIVE_WORDS:
            score += -1 if negated else 1
            count += 1
        elif word in NEGATIVE_WORDS:
            score += 1 if negated else -1
            count += 1
        negated = False

    if count == 0:
        return 0.0
    return max(-1.0, min(1.0, score / count))


def analyze_sentiment_batch(texts: list[str]) -> list[float]:
    """Score each text independently, preserving order."""
    return [analyze_sentiment(text) for text in texts]
