"""Pydantic request/response schemas for the Notewise API."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field, field_validator

from notewise.extraction.models import ActionItem, Summary
from notewise.flashcards.models import Flashcard, FlashcardType, as_utc


class ActionItemModel(BaseModel):
    """A single action item in API payloads."""

    owner: str
    task: str
    due: str | None = None


class SummaryModel(BaseModel):
    """Structured summary; every list is present even when empty."""

    tldr: list[str] = []
    key_points: list[str] = []
    decisions: list[str] = []
    action_items: list[ActionItemModel] = []
    open_questions: list[str] = []
    topics: list[str] = []
    highlights: list[str] = []
    follow_ups: list[str] = []
    sentiment_by_segment: list[float] = []

    @classmethod
    def from_summary(cls, summary: Summary) -> SummaryModel:
        return cls.model_validate(summary.to_dict())

    def to_summary(self) -> Summary:
        return Summary(
            tldr=list(self.tldr),
            key_points=list(self.key_points),
            decisions=list(self.decisions),
            action_items=[ActionItem(owner=i.owner, task=i.task, due=i.due) for i in self.action_items],
            open_questions=list(self.open_questions),
            topics=list(self.topics),
            highlights=list(self.highlights),
            follow_ups=list(self.follow_ups),
            sentiment_by_segment=list(self.sentiment_by_segment),
        )


class FlashcardModel(BaseModel):
    """A flashcard with its spaced-repetition state."""

    id: str
    note_id: str | None = None
    type: FlashcardType
    front: str
    back: str
    tags: list[str] = []
    difficulty: int = Field(default=3, ge=1, le=5)
    interval: int = Field(default=0, ge=0)
    repetitions: int = Field(default=0, ge=0)
    easiness: float = Field(default=2.5, ge=1.3)
    next_review_at: datetime
    created_at: datetime
    updated_at: datetime

    @field_validator("next_review_at", "created_at", "updated_at")
    @classmethod
    def _assume_utc(cls, value: datetime) -> datetime:
        return as_utc(value)

    @classmethod
    def from_card(cls, card: Flashcard) -> FlashcardModel:
        return cls(
            id=card.id,
            note_id=card.note_id,
            type=card.type,
            front=card.front,
            back=card.back,
            tags=list(card.tags),
            difficulty=card.difficulty,
            interval=card.interval,
            repetitions=card.repetitions,
            easiness=card.easiness,
            next_review_at=card.next_review_at,
            created_at=card.created_at,
            updated_at=card.updated_at,
        )

    def to_card(self) -> Flashcard:
        return Flashcard(
            id=self.id,
            note_id=self.note_id,
            type=self.type,
            front=self.front,
            back=self.back,
            tags=list(self.tags),
            difficulty=self.difficulty,
            interval=self.interval,
            repetitions=self.repetitions,
            easiness=self.easiness,
            next_review_at=self.next_review_at,
            created_at=self.created_at,
            updated_at=self.updated_at,
        )


class SummarizeRequest(BaseModel):
    """Request body for the /api/summarize endpoint."""

    transcript: str
    user_name: str | None = None


class SummarizeResponse(BaseModel):
    """Response body for the /api/summarize endpoint."""

    provider: str
    summary: SummaryModel


class FlashcardsRequest(BaseModel):
    """Request body for the /api/flashcards endpoint."""

    transcript: str
    summary: SummaryModel | None = None
    note_id: str | None = None


class FlashcardsResponse(BaseModel):
    """Response body for the /api/flashcards endpoint."""

    provider: str
    cards: list[FlashcardModel]


class TitleRequest(BaseModel):
    """Request body for the /api/title endpoint."""

    transcript: str


class TitleResponse(BaseModel):
    """Response body for the /api/title endpoint ("" when no title was produced)."""

    provider: str
    title: str


class ReviewRequest(BaseModel):
    """Request body for the /api/flashcards/review endpoint."""

    card: FlashcardModel
    rating: int = Field(ge=0, le=5)


class SRSUpdateModel(BaseModel):
    """Review state the caller should persist for one card."""

    id: str
    difficulty: int
    interval: int
    repetitions: int
    easiness: float
    next_review_at: datetime
    updated_at: datetime


class ReviewResponse(BaseModel):
    """Response body for the /api/flashcards/review endpoint."""

    update: SRSUpdateModel
    card: FlashcardModel


class DueCardsRequest(BaseModel):
    """Request body for the /api/flashcards/due endpoint."""

    cards: list[FlashcardModel]
    now: datetime | None = None


class DueCardsResponse(BaseModel):
    """Response body for the /api/flashcards/due endpoint."""

    cards: list[FlashcardModel]
