"""Tests for SM-2 review scheduling."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from notewise.flashcards.models import Flashcard, FlashcardType
from notewise.srs.scheduler import (
    MIN_EASINESS,
    InvalidRatingError,
    apply_review,
    compute_srs,
    filter_due_cards,
)

NOW = datetime(2025, 3, 1, 9, 0, tzinfo=timezone.utc)


def _card(**overrides) -> Flashcard:
    fields = {
        "type": FlashcardType.QA,
        "front": "What was decided?",
        "back": "Ship on Monday",
        "next_review_at": NOW,
        "created_at": NOW,
        "updated_at": NOW,
    }
    fields.update(overrides)
    return Flashcard(**fields)


class TestComputeSRS:
    def test_first_successful_review(self) -> None:
        update = compute_srs(_card(), 4, now=NOW)
        assert update.repetitions == 1
        assert update.interval == 1
        assert update.easiness == pytest.approx(2.5)
        assert update.next_review_at == NOW + timedelta(days=1)
        assert update.updated_at == NOW

    def test_second_successful_review(self) -> None:
        update = compute_srs(_card(repetitions=1, interval=1), 4, now=NOW)
        assert update.repetitions == 2
        assert update.interval == 6

    def test_third_review_multiplies_interval(self) -> None:
        update = compute_srs(_card(repetitions=2, interval=6), 4, now=NOW)
        assert update.repetitions == 3
        assert update.interval == 15
        assert update.next_review_at == NOW + timedelta(days=15)

    def test_hesitant_recall_lowers_easiness(self) -> None:
        update = compute_srs(_card(repetitions=2, interval=6), 3, now=NOW)
        assert update.easiness == pytest.approx(2.36)
        assert update.interval == 14

    def test_perfect_recall_raises_easiness(self) -> None:
        assert compute_srs(_card(), 5, now=NOW).easiness == pytest.approx(2.6)

    @pytest.mark.parametrize("rating", [0, 1, 2])
    def test_failed_review_resets(self, rating: int) -> None:
        update = compute_srs(_card(repetitions=4, interval=30), rating, now=NOW)
        assert update.repetitions == 0
        assert update.interval == 0
        assert update.next_review_at == NOW

    def test_blackout_easiness(self) -> None:
        assert compute_srs(_card(), 0, now=NOW).easiness == pytest.approx(1.7)

    def test_easiness_floor(self) -> None:
        update = compute_srs(_card(easiness=1.35), 0, now=NOW)
        assert update.easiness == MIN_EASINESS

    @pytest.mark.parametrize(
        ("rating", "difficulty"),
        [(0, 5), (1, 5), (2, 4), (3, 3), (4, 2), (5, 1)],
    )
    def test_difficulty_from_rating(self, rating: int, difficulty: int) -> None:
        assert compute_srs(_card(), rating, now=NOW).difficulty == difficulty

    def test_easiness_rounded_to_two_places(self) -> None:
        update = compute_srs(_card(easiness=2.123456), 5, now=NOW)
        assert update.easiness == 2.22

    def test_naive_now_is_utc(self) -> None:
        update = compute_srs(_card(), 4, now=datetime(2025, 3, 1, 9, 0))
        assert update.next_review_at == NOW + timedelta(days=1)
        assert update.next_review_at.tzinfo is not None
        assert update.updated_at == NOW

    def test_keeps_card_id(self) -> None:
        card = _card()
        assert compute_srs(card, 3, now=NOW).id == card.id

    @pytest.mark.parametrize("rating", [-1, 6, 2.5, True, "4"])
    def test_invalid_rating(self, rating) -> None:
        with pytest.raises(InvalidRatingError):
            compute_srs(_card(), rating, now=NOW)

    def test_invalid_rating_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            compute_srs(_card(), 9, now=NOW)


class TestApplyReview:
    def test_returns_updated_copy(self) -> None:
        card = _card()
        reviewed = apply_review(card, 5, now=NOW)
        assert reviewed is not card
        assert reviewed.repetitions == 1
        assert reviewed.front == card.front
        assert reviewed.created_at == card.created_at
        assert card.repetitions == 0

    def test_review_sequence(self) -> None:
        card = _card()
        for days in (1, 6, 15):
            card = apply_review(card, 4, now=NOW)
            assert card.interval == days
        assert card.repetitions == 3


class TestFilterDueCards:
    def test_due_boundary_is_inclusive(self) -> None:
        due_now = _card(next_review_at=NOW)
        overdue = _card(next_review_at=NOW - timedelta(days=2))
        later = _card(next_review_at=NOW + timedelta(seconds=1))
        assert filter_due_cards([due_now, overdue, later], now=NOW) == [due_now, overdue]

    def test_empty(self) -> None:
        assert filter_due_cards([], now=NOW) == []

    def test_naive_now_is_utc(self) -> None:
        due_now = _card(next_review_at=NOW)
        later = _card(next_review_at=NOW + timedelta(hours=1))
        assert filter_due_cards([due_now, later], now=datetime(2025, 3, 1, 9, 0)) == [due_now]

    def test_naive_card_time_is_utc(self) -> None:
        naive = _card(next_review_at=datetime(2025, 3, 1, 8, 0))
        assert filter_due_cards([naive], now=NOW) == [naive]

    def test_without_now_uses_current_time(self) -> None:
        overdue = _card(next_review_at=datetime(2000, 1, 1, tzinfo=timezone.utc))
        assert filter_due_cards([overdue]) == [overdue]
