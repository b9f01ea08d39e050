"""Claude-powered summaries, flashcards and titles via forced tool use."""

from __future__ import annotations

import json
import logging
from typing import Any

from anthropic import AsyncAnthropic

from notewise.extraction.models import Summary
from notewise.flashcards.generator import dedupe_cards
from notewise.flashcards.models import FlashcardDraft, FlashcardType
from notewise.ingestion.chunking import chunk_text
from notewise.nlp.sentiment import analyze_sentiment_batch
from notewise.providers.base import AiProvider
from notewise.summarizer import naive_segments

logger = logging.getLogger(__name__)

FLASHCARD_TRANSCRIPT_CHARS = 12_000
TITLE_MAX_CHARS = 60

_STRING_LIST: dict[str, Any] = {"type": "array", "items": {"type": "string"}}

SUMMARY_TOOL: dict[str, Any] = {
    "name": "store_summary",
    "description": (
        "Store the structured summary of a meeting or lecture transcript. "
        "Call this once with every field filled (use empty arrays when nothing applies)."
    ),
    "input_schema": {
        "type": "object",
        "properties": {
            "tldr": {**_STRING_LIST, "description": "Up to 5 sentences capturing the gist."},
            "key_points": {**_STRING_LIST, "description": "Up to 10 key points."},
            "decisions": {**_STRING_LIST, "description": "Decisions that were made."},
            "action_items": {
                "type": "array",
                "description": "Tasks someone committed to.",
                "items": {
                    "type": "object",
                    "properties": {
                        "owner": {
                            "type": "string",
                            "description": "Person responsible (the user name when unstated).",
                        },
                        "task": {"type": "string", "description": "What must be done."},
                        "due": {
                            "type": "string",
                            "description": "Deadline if mentioned (free-form text, e.g. 'Friday').",
                        },
                    },
                    "required": ["owner", "task"],
                },
            },
            "open_questions": {**_STRING_LIST, "description": "Questions left unanswered."},
            "topics": {**_STRING_LIST, "description": "Main subjects, one or two words each."},
            "highlights": {**_STRING_LIST, "description": "Notable verbatim sentences."},
            "follow_ups": {**_STRING_LIST, "description": "Useful follow-up questions."},
        },
        "required": [
            "tldr",
            "key_points",
            "decisions",
            "action_items",
            "open_questions",
            "topics",
            "highlights",
            "follow_ups",
        ],
    },
}

FLASHCARD_TOOL: dict[str, Any] = {
    "name": "store_flashcards",
    "description": "Store study flashcards generated from a transcript. Call this once with 10-20 cards.",
    "input_schema": {
        "type": "object",
        "properties": {
            "cards": {
                "type": "array",
                "items": {
                    "type": "object",
                    "properties": {
                        "type": {"type": "string", "enum": [kind.value for kind in FlashcardType]},
                        "front": {"type": "string"},
                        "back": {"type": "string"},
                        "tags": _STRING_LIST,
                    },
                    "required": ["type", "front", "back"],
                },
            },
        },
        "required": ["cards"],
    },
}

SUMMARY_SYSTEM_PROMPT = (
    "You are a meeting-notes assistant. Summarize the transcript provided and "
    "use the store_summary tool to return your results. Attribute action items "
    "with no clear owner to the user name provided. Only include items clearly "
    "supported by the transcript."
)

FLASHCARD_SYSTEM_PROMPT = (
    "You are an educational flashcard generator. Given a transcript and an "
    "optional summary, create flashcards of type qa, cloze, term-def or def-term "
    "and return them with the store_flashcards tool."
)

TITLE_SYSTEM_PROMPT = (
    "Write a concise, specific title (at most 8 words) for the transcript. "
    "Reply with the title only, no quotes or punctuation at the end."
)


def _tool_input(response: Any, tool_name: str) -> dict[str, Any] | None:
    """Return the input of the first *tool_name* tool_use block, if any."""
    for block in response.content:
        if block.type != "tool_use" or block.name != tool_name:
            continue
        data = block.input
        if isinstance(data, str):
            try:
                data = json.loads(data)
            except json.JSONDecodeError:
                logger.warning("Discarding malformed %s payload", tool_name)
                return None
        return data if isinstance(data, dict) else None
    return None


def _unique(values: list[str]) -> list[str]:
    return list(dict.fromkeys(values))


def merge_summaries(parts: list[Summary]) -> Summary:
    """Concatenate partial summaries, de-duplicating string lists."""
    merged = Summary()
    for part in parts:
        merged.tldr.extend(part.tldr)
        merged.key_points.extend(part.key_points)
        merged.decisions.extend(part.decisions)
        merged.action_items.extend(part.action_items)
        merged.open_questions.extend(part.open_questions)
        merged.topics.extend(part.topics)
        merged.highlights.extend(part.highlights)
        merged.follow_ups.extend(part.follow_ups)
    merged.tldr = _unique(merged.tldr)
    merged.key_points = _unique(merged.key_points)
    merged.decisions = _unique(merged.decisions)
    merged.open_questions = _unique(merged.open_questions)
    merged.topics = _unique(merged.topics)
    merged.highlights = _unique(merged.highlights)
    merged.follow_ups = _unique(merged.follow_ups)
    return merged


def parse_flashcard_drafts(data: dict[str, Any] | None) -> list[FlashcardDraft]:
    """Convert tool output into drafts, skipping cards with unknown types or empty sides."""
    if not data:
        return []
    drafts: list[FlashcardDraft] = []
    for raw in data.get("cards") or []:
        if not isinstance(raw, dict):
            continue
        try:
            card_type = FlashcardType(raw.get("type"))
        except ValueError:
            continue
        front = str(raw.get("front") or "").strip()
        back = str(raw.get("back") or "").strip()
        if not front or not back:
            continue
        tags = [str(tag) for tag in raw.get("tags") or []]
        drafts.append(FlashcardDraft(card_type, front, back, tags))
    return dedupe_cards(drafts)


class AnthropicProvider(AiProvider):
    """Remote provider backed by the Anthropic Messages API."""

    label = "Claude (cloud)"

    def __init__(
        self,
        api_key: str,
        model: str = "claude-sonnet-4-20250514",
        chunk_chars: int = 12_000,
        client: AsyncAnthropic | None = None,
    ) -> None:
        self.model = model
        self.chunk_chars = chunk_chars
        self.client = client or AsyncAnthropic(api_key=api_key)

    async def _summarize_chunk(self, chunk: str, user_name: str, partial: bool) -> Summary:
        label = "Transcript (part)" if partial else "Transcript"
        response = await self.client.messages.create(
            model=self.model,
            max_tokens=4096,
            system=SUMMARY_SYSTEM_PROMPT,
            tools=[SUMMARY_TOOL],
            tool_choice={"type": "tool", "name": SUMMARY_TOOL["name"]},
            messages=[{"role": "user", "content": f"User name: {user_name}\n\n{label}:\n{chunk}"}],
        )
        data = _tool_input(response, SUMMARY_TOOL["name"])
        if data is None:
            logger.warning("Claude returned no %s tool call", SUMMARY_TOOL["name"])
            return Summary()
        return Summary.from_dict(data)

    async def summarize(self, transcript: str, user_name: str) -> Summary:
        """Summarize with Claude, chunking long transcripts and merging the parts.

        Sentiment is always scored locally. API errors propagate to the caller.
        """
        chunks = chunk_text(transcript, self.chunk_chars)
        partial = len(chunks) > 1
        parts = [await self._summarize_chunk(chunk, user_name, partial) for chunk in chunks]
        summary = parts[0] if len(parts) == 1 else merge_summaries(parts)
        summary.sentiment_by_segment = analyze_sentiment_batch(naive_segments(transcript))
        logger.info("Summarized transcript in %d request(s) with %s", len(chunks), self.model)
        return summary

    async def generate_flashcards(
        self,
        transcript: str,
        summary: Summary | None,
    ) -> list[FlashcardDraft]:
        excerpt = transcript[:FLASHCARD_TRANSCRIPT_CHARS]
        if summary is not None:
            prompt = f"Summary:\n{json.dumps(summary.to_dict())}\n\nTranscript:\n{excerpt}"
        else:
            prompt = f"Transcript:\n{excerpt}"

        response = await self.client.messages.create(
            model=self.model,
            max_tokens=4096,
            system=FLASHCARD_SYSTEM_PROMPT,
            tools=[FLASHCARD_TOOL],
            tool_choice={"type": "tool", "name": FLASHCARD_TOOL["name"]},
            messages=[{"role": "user", "content": prompt}],
        )
        return parse_flashcard_drafts(_tool_input(response, FLASHCARD_TOOL["name"]))

    async def generate_title(self, transcript: str) -> str:
        try:
            response = await self.client.messages.create(
                model=self.model,
                max_tokens=64,
                system=TITLE_SYSTEM_PROMPT,
                messages=[{"role": "user", "content": transcript[:FLASHCARD_TRANSCRIPT_CHARS]}],
            )
            text = next((block.text for block in response.content if block.type == "text"), "")
        except Exception:
            # Titles are best-effort; callers fall back to their own naming.
            logger.warning("Title generation failed", exc_info=True)
            return ""
        return text.strip().strip("\"'").strip()[:TITLE_MAX_CHARS]
