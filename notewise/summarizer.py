"""Offline summary assembly: ranking, rule-based extraction and sentiment in one pass."""

from __future__ import annotations

import logging
import random
import re

from notewise.extraction.extractor import (
    extract_action_items,
    extract_decisions,
    extract_highlights,
    extract_open_questions,
    extract_topics,
    generate_follow_ups,
)
from notewise.extraction.models import Summary
from notewise.ingestion.models import TranscriptSegment
from notewise.nlp.sentiment import analyze_sentiment_batch
from notewise.nlp.text import split_sentences
from notewise.nlp.textrank import rank_in_reading_order
from notewise.pipeline_config import PipelineConfig

logger = logging.getLogger(__name__)

_PERIOD_SPLIT_RE = re.compile(r"\.\s+")
_TERMINAL_PUNCTUATION = (".", "!", "?")


def naive_segments(transcript: str) -> list[str]:
    """Split a transcript into rough segments at periods (for sentiment only)."""
    return [part for part in _PERIOD_SPLIT_RE.split(transcript) if part.strip()]


def join_segments(segments: list[TranscriptSegment]) -> str:
    """Join segment texts into one transcript, terminating each as a sentence."""
    parts: list[str] = []
    for segment in segments:
        text = segment.text.strip()
        if not text:
            continue
        parts.append(text if text.endswith(_TERMINAL_PUNCTUATION) else f"{text}.")
    return " ".join(parts)


def summarize(
    transcript: str,
    user_name: str,
    segment_texts: list[str] | None = None,
    config: PipelineConfig | None = None,
    rng: random.Random | None = None,
) -> Summary:
    """Build a :class:`Summary` from a plain-text transcript.

    Args:
        transcript: The full transcript text.
        user_name: Owner assigned to action items with no explicit subject.
        segment_texts: Logical segments to score sentiment on. When omitted the
            transcript is split at periods instead.
        config: Size limits; defaults to :class:`PipelineConfig`.
        rng: Optional seeded generator for follow-up question variety.

    Returns:
        A fully populated Summary. Empty input yields empty lists.
    """
    cfg = config or PipelineConfig()
    sentences = split_sentences(transcript)
    logger.debug("Summarizing %d sentences (%d chars)", len(sentences), len(transcript))

    topics = extract_topics(transcript, limit=cfg.max_topics, candidates=cfg.topic_candidates)
    segments = segment_texts if segment_texts is not None else naive_segments(transcript)

    return Summary(
        tldr=rank_in_reading_order(sentences, cfg.tldr_size),
        key_points=rank_in_reading_order(sentences, cfg.key_points_size),
        decisions=extract_decisions(sentences, limit=cfg.max_decisions),
        action_items=extract_action_items(sentences, user_name),
        open_questions=extract_open_questions(sentences, limit=cfg.max_questions),
        topics=topics,
        highlights=extract_highlights(
            sentences, limit=cfg.highlight_size, min_chars=cfg.highlight_min_chars
        ),
        follow_ups=generate_follow_ups(topics, limit=cfg.max_follow_ups, rng=rng),
        sentiment_by_segment=analyze_sentiment_batch(segments),
    )


def summarize_segments(
    segments: list[TranscriptSegment],
    user_name: str,
    config: PipelineConfig | None = None,
    rng: random.Random | None = None,
) -> Summary:
    """Summarize parsed transcript segments, scoring sentiment per segment."""
    return summarize(
        join_segments(segments),
        user_name,
        segment_texts=[segment.text for segment in segments],
        config=config,
        rng=rng,
    )
