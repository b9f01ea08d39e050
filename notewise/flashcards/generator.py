"""Flashcard synthesis from a transcript summary.

Four independent strategies feed one de-duplicated deck:

1. Q&A: one question per key point, plus one per action item
2. Cloze: mask the most salient keyword of a highlight or key point
3. Term -> definition: a topic and the first key point that mentions it
4. Definition -> term: the mirror of (3)
"""

from __future__ import annotations

import logging
import re
from datetime import datetime

from notewise.extraction.models import ActionItem, Summary
from notewise.flashcards.models import Flashcard, FlashcardDraft, FlashcardType
from notewise.nlp.keywords import extract_keywords
from notewise.pipeline_config import PipelineConfig

logger = logging.getLogger(__name__)

CLOZE_PLACEHOLDER = "[___]"
ACTION_ITEM_TAG = "action-item"
QA_PREVIEW_TOKENS = 5

_WHITESPACE_RE = re.compile(r"\s+")


def qa_cards(key_points: list[str], tags: list[str]) -> list[FlashcardDraft]:
    cards: list[FlashcardDraft] = []
    for point in key_points:
        tokens = point.split()
        if len(tokens) > 3:
            preview = " ".join(tokens[:QA_PREVIEW_TOKENS])
            front = f'What is the key point about: "{preview}..."?'
        else:
            front = f"Explain: {point}"
        cards.append(FlashcardDraft(FlashcardType.QA, front, point, list(tags)))
    return cards


def cloze_cards(sentences: list[str], tags: list[str], limit: int = 10) -> list[FlashcardDraft]:
    """Mask the top keyword of each sentence; sentences without one are skipped."""
    cards: list[FlashcardDraft] = []
    for sentence in sentences:
        if len(cards) >= limit:
            break
        keywords = extract_keywords(sentence, 3)
        if not keywords:
            continue
        keyword = keywords[0]
        pattern = re.compile(rf"\b{re.escape(keyword)}\b", re.IGNORECASE)
        if not pattern.search(sentence):
            continue
        front = pattern.sub(CLOZE_PLACEHOLDER, sentence)
        cards.append(FlashcardDraft(FlashcardType.CLOZE, front, keyword, list(tags)))
    return cards


def term_definition_cards(
    topics: list[str], key_points: list[str], limit: int = 10
) -> list[FlashcardDraft]:
    """Pair each topic with the first key point mentioning it, in both directions."""
    cards: list[FlashcardDraft] = []
    for topic in topics:
        needle = topic.lower()
        related = next((kp for kp in key_points if needle in kp.lower()), None)
        if related is None:
            continue
        cards.append(FlashcardDraft(FlashcardType.TERM_DEF, f"Define: {topic}", related, [topic]))
        cards.append(FlashcardDraft(FlashcardType.DEF_TERM, related, topic, [topic]))
    return cards[:limit]


def action_item_cards(action_items: list[ActionItem]) -> list[FlashcardDraft]:
    cards: list[FlashcardDraft] = []
    for item in action_items:
        back = item.task + (f" (due: {item.due})" if item.due else "")
        cards.append(
            FlashcardDraft(
                FlashcardType.QA,
                f"What action item was assigned to {item.owner}?",
                back,
                [ACTION_ITEM_TAG],
            )
        )
    return cards


def normalize_front(front: str) -> str:
    return _WHITESPACE_RE.sub(" ", front).strip().lower()


def dedupe_cards(cards: list[FlashcardDraft]) -> list[FlashcardDraft]:
    """Drop cards whose normalized front was already seen (first one wins)."""
    seen: set[str] = set()
    unique: list[FlashcardDraft] = []
    for card in cards:
        key = normalize_front(card.front)
        if key in seen:
            continue
        seen.add(key)
        unique.append(card)
    return unique


def generate_flashcard_drafts(
    summary: Summary,
    config: PipelineConfig | None = None,
) -> list[FlashcardDraft]:
    """Run every strategy over *summary* and return a de-duplicated deck."""
    cfg = config or PipelineConfig()
    tags = summary.topics[: cfg.max_card_tags]

    cards: list[FlashcardDraft] = []
    cards.extend(qa_cards(summary.key_points, tags))
    cards.extend(cloze_cards(summary.highlights + summary.key_points, tags, limit=cfg.max_cloze_cards))
    cards.extend(term_definition_cards(summary.topics, summary.key_points, limit=cfg.max_term_cards))
    cards.extend(action_item_cards(summary.action_items))

    unique = dedupe_cards(cards)
    logger.debug("Generated %d flashcards (%d before de-duplication)", len(unique), len(cards))
    return unique


def generate_flashcards(
    summary: Summary,
    note_id: str | None = None,
    now: datetime | None = None,
    config: PipelineConfig | None = None,
) -> list[Flashcard]:
    """Generate reviewable cards with default SRS state, due at *now*."""
    return [
        Flashcard.from_draft(draft, note_id=note_id, now=now)
        for draft in generate_flashcard_drafts(summary, config=config)
    ]
