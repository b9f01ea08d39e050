"""Flashcard value objects and their default spaced-repetition state."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any

DEFAULT_DIFFICULTY = 3
DEFAULT_EASINESS = 2.5


class FlashcardType(str, Enum):
    """How a card's front relates to its back."""

    QA = "qa"
    CLOZE = "cloze"
    TERM_DEF = "term-def"
    DEF_TERM = "def-term"


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def as_utc(value: datetime) -> datetime:
    """Treat naive datetimes as UTC so they compare with stored review times."""
    return value if value.tzinfo is not None else value.replace(tzinfo=timezone.utc)


@dataclass(frozen=True)
class FlashcardDraft:
    """A generated card before it is given identity and review state."""

    type: FlashcardType
    front: str
    back: str
    tags: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.type.value, "front": self.front, "back": self.back, "tags": list(self.tags)}


@dataclass(frozen=True)
class Flashcard:
    """A reviewable card together with its SM-2 scheduling state."""

    type: FlashcardType
    front: str
    back: str
    tags: list[str] = field(default_factory=list)
    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    note_id: str | None = None
    difficulty: int = DEFAULT_DIFFICULTY  # 1 (easy) .. 5 (hard)
    interval: int = 0  # days
    repetitions: int = 0
    easiness: float = DEFAULT_EASINESS
    next_review_at: datetime = field(default_factory=utc_now)
    created_at: datetime = field(default_factory=utc_now)
    updated_at: datetime = field(default_factory=utc_now)

    @classmethod
    def from_draft(
        cls,
        draft: FlashcardDraft,
        note_id: str | None = None,
        now: datetime | None = None,
    ) -> Flashcard:
        """Create a new card that is due immediately."""
        created = now or utc_now()
        return cls(
            type=draft.type,
            front=draft.front,
            back=draft.back,
            tags=list(draft.tags),
            note_id=note_id,
            next_review_at=created,
            created_at=created,
            updated_at=created,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "note_id": self.note_id,
            "type": self.type.value,
            "front": self.front,
            "back": self.back,
            "tags": list(self.tags),
            "difficulty": self.difficulty,
            "interval": self.interval,
            "repetitions": self.repetitions,
            "easiness": self.easiness,
            "next_review_at": self.next_review_at.isoformat(),
            "created_at": self.created_at.isoformat(),
            "updated_at": self.updated_at.isoformat(),
        }
