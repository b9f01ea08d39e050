"""Pipeline configuration: provider enum and the offline pipeline's limits."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ProviderKind(str, Enum):
    """Available summarization/flashcard providers."""

    OFFLINE = "offline"
    ANTHROPIC = "anthropic"


@dataclass(frozen=True)
class PipelineConfig:
    """Immutable size limits for the offline summarizer and flashcard generator.

    Defaults give a five-sentence TL;DR, ten key points and highlights, and
    ten cards per cloze/term strategy.
    """

    tldr_size: int = 5
    key_points_size: int = 10
    highlight_size: int = 10
    highlight_min_chars: int = 20
    max_decisions: int = 10
    max_questions: int = 10
    max_topics: int = 10
    topic_candidates: int = 20
    max_follow_ups: int = 5
    max_cloze_cards: int = 10
    max_term_cards: int = 10
    max_card_tags: int = 3
