"""SM-2 spaced-repetition scheduling.

Ratings run from 0 (forgot) to 5 (easy). A rating below 3 restarts the card;
otherwise the interval grows 1 day, 6 days, then by the easiness factor.
Every function here is pure: callers persist the returned state.
"""

from __future__ import annotations

import dataclasses
import math
from dataclasses import dataclass
from datetime import datetime, timedelta

from notewise.flashcards.models import Flashcard, as_utc, utc_now

MIN_EASINESS = 1.3
MIN_RATING = 0
MAX_RATING = 5
PASSING_RATING = 3


class InvalidRatingError(ValueError):
    """Raised when a review rating is not an integer between 0 and 5."""


@dataclass(frozen=True)
class SRSUpdate:
    """Review state to persist for one card after a rating."""

    id: str
    difficulty: int
    interval: int
    repetitions: int
    easiness: float
    next_review_at: datetime
    updated_at: datetime


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def validate_rating(rating: int) -> int:
    if isinstance(rating, bool) or not isinstance(rating, int):
        raise InvalidRatingError(f"Rating must be an integer, got {rating!r}")
    if not MIN_RATING <= rating <= MAX_RATING:
        raise InvalidRatingError(f"Rating must be between {MIN_RATING} and {MAX_RATING}, got {rating}")
    return rating


def compute_srs(card: Flashcard, rating: int, now: datetime | None = None) -> SRSUpdate:
    """Compute the next review state of *card* after it was rated *rating*.

    Raises:
        InvalidRatingError: If *rating* is outside ``0..5``.
    """
    validate_rating(rating)
    reviewed_at = as_utc(now) if now is not None else utc_now()

    miss = 5 - rating
    easiness = max(MIN_EASINESS, card.easiness + (0.1 - miss * (0.08 + miss * 0.02)))

    if rating < PASSING_RATING:
        repetitions = 0
        interval = 0
    else:
        repetitions = card.repetitions + 1
        if repetitions == 1:
            interval = 1
        elif repetitions == 2:
            interval = 6
        else:
            interval = _round_half_up(card.interval * easiness)

    return SRSUpdate(
        id=card.id,
        difficulty=max(1, min(5, 5 - rating + 1)),
        interval=interval,
        repetitions=repetitions,
        easiness=_round_half_up(easiness * 100) / 100,
        next_review_at=reviewed_at + timedelta(days=interval),
        updated_at=reviewed_at,
    )


def apply_review(card: Flashcard, rating: int, now: datetime | None = None) -> Flashcard:
    """Return a copy of *card* carrying the state computed by :func:`compute_srs`."""
    update = compute_srs(card, rating, now=now)
    return dataclasses.replace(
        card,
        difficulty=update.difficulty,
        interval=update.interval,
        repetitions=update.repetitions,
        easiness=update.easiness,
        next_review_at=update.next_review_at,
        updated_at=update.updated_at,
    )


def filter_due_cards(cards: list[Flashcard], now: datetime | None = None) -> list[Flashcard]:
    """Return the cards due at or before *now*.

    Naive datetimes, on the cards or in *now*, are taken to be UTC.
    """
    cutoff = as_utc(now) if now is not None else utc_now()
    return [card for card in cards if as_utc(card.next_review_at) <= cutoff]
