"""Offline provider: the local NLP pipeline behind the provider interface."""

from __future__ import annotations

from notewise.extraction.extractor import extract_topics
from notewise.extraction.models import Summary
from notewise.flashcards.generator import generate_flashcard_drafts
from notewise.flashcards.models import FlashcardDraft
from notewise.nlp.keywords import extract_keywords
from notewise.pipeline_config import PipelineConfig
from notewise.providers.base import AiProvider
from notewise.summarizer import summarize

TITLE_SOURCE_CHARS = 2_000
TITLE_MAX_WORDS = 4


class OfflineProvider(AiProvider):
    """Runs entirely in-process; never needs the network."""

    label = "Offline (on-device)"

    def __init__(self, config: PipelineConfig | None = None) -> None:
        self.config = config or PipelineConfig()

    async def summarize(self, transcript: str, user_name: str) -> Summary:
        return summarize(transcript, user_name, config=self.config)

    async def generate_flashcards(
        self,
        transcript: str,
        summary: Summary | None,
    ) -> list[FlashcardDraft]:
        if summary is None:
            # Without a summary only topic-driven strategies have input.
            summary = Summary(
                topics=extract_topics(
                    transcript,
                    limit=self.config.max_topics,
                    candidates=self.config.topic_candidates,
                )
            )
        return generate_flashcard_drafts(summary, config=self.config)

    async def generate_title(self, transcript: str) -> str:
        keywords = extract_keywords(transcript[:TITLE_SOURCE_CHARS], 5)
        if not keywords:
            return ""
        meaningful = [kw for kw in keywords if len(kw) > 3][:TITLE_MAX_WORDS]
        words = meaningful or keywords[:3]
        return " ".join(word[:1].upper() + word[1:] for word in words)
