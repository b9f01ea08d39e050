"""Rule-based extraction of decisions, action items, questions and topics."""

from __future__ import annotations

import random

from notewise.extraction.cues import (
    ACTION_CUES,
    DECISION_CUES,
    DUE_DATE_CUES,
    OWNERLESS_SUBJECTS,
    QUESTION_STARTERS,
    SUBJECT_CUE,
)
from notewise.extraction.models import ActionItem
from notewise.nlp.keywords import extract_keywords
from notewise.nlp.textrank import rank_in_reading_order

MIN_TASK_CHARS = 5
MIN_TOPIC_CHARS = 3


def extract_decisions(sentences: list[str], limit: int = 10) -> list[str]:
    """Return sentences containing any decision cue, in encounter order."""
    decisions = [s.strip() for s in sentences if any(cue.search(s) for cue in DECISION_CUES)]
    return decisions[:limit]


def detect_owner(sentence: str, default_owner: str) -> str:
    """Return the explicit subject of *sentence*, or *default_owner*.

    Only a leading ``<Subject> will|need(s)|should`` counts. Pronouns such as
    "I", "we" or "it" and other ``OWNERLESS_SUBJECTS`` keep the default.
    """
    subject = SUBJECT_CUE.capture(sentence.strip())
    if subject and subject.lower() not in OWNERLESS_SUBJECTS:
        return subject
    return default_owner


def detect_due_date(sentence: str) -> str | None:
    """Return the first due-date cue found in *sentence*, if any."""
    for cue in DUE_DATE_CUES:
        due = cue.capture(sentence)
        if due:
            return due
    return None


def extract_action_items(sentences: list[str], user_name: str) -> list[ActionItem]:
    """Extract at most one action item per sentence.

    The first matching cue wins. Tasks shorter than ``MIN_TASK_CHARS`` are
    ignored and tasks are de-duplicated case-insensitively.
    """
    items: list[ActionItem] = []
    seen: set[str] = set()

    for sentence in sentences:
        for cue in ACTION_CUES:
            captured = cue.capture(sentence)
            if captured is None:
                continue
            task = captured.strip().rstrip(".!?").strip() or sentence.strip()
            key = task.lower()
            if len(task) >= MIN_TASK_CHARS and key not in seen:
                seen.add(key)
                items.append(
                    ActionItem(
                        owner=detect_owner(sentence, user_name),
                        task=task,
                        due=detect_due_date(sentence),
                    )
                )
            break

    return items


def extract_open_questions(sentences: list[str], limit: int = 10) -> list[str]:
    """Return sentences ending with a question mark."""
    return [s for s in sentences if s.strip().endswith("?")][:limit]


def extract_topics(text: str, limit: int = 10, candidates: int = 20) -> list[str]:
    """Return the most frequent keywords longer than three characters, capitalized."""
    keywords = [kw for kw in extract_keywords(text, candidates) if len(kw) > MIN_TOPIC_CHARS]
    return [kw[:1].upper() + kw[1:] for kw in keywords[:limit]]


def generate_follow_ups(
    topics: list[str],
    limit: int = 5,
    rng: random.Random | None = None,
) -> list[str]:
    """Build follow-up questions by pairing topics with question starters.

    Starters are used round-robin so none repeats before all have been used.
    Passing *rng* only randomizes the starting starter.
    """
    offset = rng.randrange(len(QUESTION_STARTERS)) if rng is not None else 0
    follow_ups: list[str] = []
    for position, topic in enumerate(topics[:limit]):
        starter = QUESTION_STARTERS[(offset + position) % len(QUESTION_STARTERS)]
        follow_ups.append(f"{starter} {topic}?")
    return follow_ups


def extract_highlights(sentences: list[str], limit: int = 10, min_chars: int = 20) -> list[str]:
    """Return top-ranked sentences in reading order, skipping short ones."""
    if not sentences:
        return []
    ranked = rank_in_reading_order(sentences, min(limit, len(sentences)))
    return [s for s in ranked if len(s) >= min_chars]
