"""Data models for structured extraction results."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any


@dataclass(frozen=True)
class ActionItem:
    """A task someone committed to, with an optional free-form due date."""

    owner: str
    task: str
    due: str | None = None  # e.g. "Friday", "next week", "3/14"

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass
class Summary:
    """Structured digest of one transcript.

    Every list is always present (possibly empty). Ranked sentences are kept in
    their original reading order.
    """

    tldr: list[str] = field(default_factory=list)
    key_points: list[str] = field(default_factory=list)
    decisions: list[str] = field(default_factory=list)
    action_items: list[ActionItem] = field(default_factory=list)
    open_questions: list[str] = field(default_factory=list)
    topics: list[str] = field(default_factory=list)
    highlights: list[str] = field(default_factory=list)
    follow_ups: list[str] = field(default_factory=list)
    sentiment_by_segment: list[float] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Summary:
        """Build a Summary from loosely-typed data, dropping malformed entries."""

        def strings(key: str) -> list[str]:
            return [str(value) for value in data.get(key) or [] if value is not None]

        action_items: list[ActionItem] = []
        for raw in data.get("action_items") or []:
            if not isinstance(raw, dict) or not raw.get("task"):
                continue
            action_items.append(
                ActionItem(
                    owner=str(raw.get("owner") or ""),
                    task=str(raw["task"]),
                    due=str(raw["due"]) if raw.get("due") else None,
                )
            )

        sentiment: list[float] = []
        for value in data.get("sentiment_by_segment") or []:
            try:
                sentiment.append(max(-1.0, min(1.0, float(value))))
            except (TypeError, ValueError):
                continue

        return cls(
            tldr=strings("tldr"),
            key_points=strings("key_points"),
            decisions=strings("decisions"),
            action_items=action_items,
            open_questions=strings("open_questions"),
            topics=strings("topics"),
            highlights=strings("highlights"),
            follow_ups=strings("follow_ups"),
            sentiment_by_segment=sentiment,
        )
