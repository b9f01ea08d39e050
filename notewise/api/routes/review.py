"""Spaced-repetition endpoints: rate a card, list due cards."""

from __future__ import annotations

from fastapi import APIRouter

from notewise.api.models import (
    DueCardsRequest,
    DueCardsResponse,
    FlashcardModel,
    ReviewRequest,
    ReviewResponse,
    SRSUpdateModel,
)
from notewise.srs.scheduler import apply_review, filter_due_cards

router = APIRouter()


@router.post("/api/flashcards/review", response_model=ReviewResponse)
async def review_flashcard(request: ReviewRequest) -> ReviewResponse:
    """Apply one review rating (0 = again .. 5 = easy) and return the new schedule."""
    reviewed = apply_review(request.card.to_card(), request.rating)
    return ReviewResponse(
        update=SRSUpdateModel(
            id=reviewed.id,
            difficulty=reviewed.difficulty,
            interval=reviewed.interval,
            repetitions=reviewed.repetitions,
            easiness=reviewed.easiness,
            next_review_at=reviewed.next_review_at,
            updated_at=reviewed.updated_at,
        ),
        card=FlashcardModel.from_card(reviewed),
    )


@router.post("/api/flashcards/due", response_model=DueCardsResponse)
async def due_flashcards(request: DueCardsRequest) -> DueCardsResponse:
    """Return the submitted cards that are due for review."""
    due = filter_due_cards([model.to_card() for model in request.cards], now=request.now)
    return DueCardsResponse(cards=[FlashcardModel.from_card(card) for card in due])
