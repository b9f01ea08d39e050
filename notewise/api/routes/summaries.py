"""Summary, title and flashcard generation endpoints."""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from typing import TypeVar

from anthropic import APIError
from fastapi import APIRouter

from notewise.api.models import (
    FlashcardModel,
    FlashcardsRequest,
    FlashcardsResponse,
    SummarizeRequest,
    SummarizeResponse,
    SummaryModel,
    TitleRequest,
    TitleResponse,
)
from notewise.config import settings
from notewise.flashcards.models import Flashcard
from notewise.providers.base import AiProvider
from notewise.providers.factory import provider_from_settings
from notewise.providers.offline import OfflineProvider

logger = logging.getLogger(__name__)

router = APIRouter()

T = TypeVar("T")


async def _with_offline_fallback(
    action: str,
    call: Callable[[AiProvider], Awaitable[T]],
) -> tuple[AiProvider, T]:
    """Run *call* on the configured provider, retrying offline if a remote call fails."""
    provider = provider_from_settings()
    try:
        return provider, await call(provider)
    except APIError:
        if isinstance(provider, OfflineProvider):
            raise
        logger.exception("%s failed with %s; falling back to offline provider", action, provider.label)
        offline = OfflineProvider()
        return offline, await call(offline)


@router.post("/api/summarize", response_model=SummarizeResponse)
async def summarize_transcript(request: SummarizeRequest) -> SummarizeResponse:
    """Summarize a transcript into TL;DR, key points, decisions, action items and more."""
    user_name = request.user_name or settings.default_user_name
    provider, summary = await _with_offline_fallback(
        "Summarization", lambda p: p.summarize(request.transcript, user_name)
    )
    return SummarizeResponse(provider=provider.label, summary=SummaryModel.from_summary(summary))


@router.post("/api/flashcards", response_model=FlashcardsResponse)
async def create_flashcards(request: FlashcardsRequest) -> FlashcardsResponse:
    """Generate flashcards, due immediately, from a transcript and optional summary."""
    summary = request.summary.to_summary() if request.summary is not None else None
    provider, drafts = await _with_offline_fallback(
        "Flashcard generation", lambda p: p.generate_flashcards(request.transcript, summary)
    )
    cards = [Flashcard.from_draft(draft, note_id=request.note_id) for draft in drafts]
    return FlashcardsResponse(
        provider=provider.label,
        cards=[FlashcardModel.from_card(card) for card in cards],
    )


@router.post("/api/title", response_model=TitleResponse)
async def create_title(request: TitleRequest) -> TitleResponse:
    """Suggest a short title; an empty title means none could be produced."""
    provider = provider_from_settings()
    title = await provider.generate_title(request.transcript)
    return TitleResponse(provider=provider.label, title=title)
