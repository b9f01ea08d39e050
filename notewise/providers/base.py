from __future__ import annotations

from abc import ABC, abstractmethod

from notewise.extraction.models import Summary
from notewise.flashcards.models import FlashcardDraft


class AiProvider(ABC):
    """Provider boundary shared by the offline pipeline and remote models.

    Empty strings and empty lists are valid results, not errors. Choosing a
    fallback when a remote provider fails is the caller's job.
    """

    label: str = ""

    @abstractmethod
    async def summarize(self, transcript: str, user_name: str) -> Summary:
        raise NotImplementedError

    @abstractmethod
    async def generate_flashcards(
        self,
        transcript: str,
        summary: Summary | None,
    ) -> list[FlashcardDraft]:
        raise NotImplementedError

    @abstractmethod
    async def generate_title(self, transcript: str) -> str:
        """Return a short title, or "" when none could be produced. Never raises."""
        raise NotImplementedError
