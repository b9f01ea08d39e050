"""Provider selection from explicit configuration."""

from __future__ import annotations

import logging

from notewise.config import settings
from notewise.pipeline_config import ProviderKind
from notewise.providers.anthropic_provider import AnthropicProvider
from notewise.providers.base import AiProvider
from notewise.providers.offline import OfflineProvider

logger = logging.getLogger(__name__)


def make_provider(
    kind: str | ProviderKind,
    api_key: str | None = None,
    model: str | None = None,
) -> AiProvider:
    """Create the provider named by *kind*.

    A remote provider without an API key degrades to the offline provider.

    Raises:
        ValueError: If *kind* is not a known provider.
    """
    if isinstance(kind, str):
        kind = ProviderKind(kind)

    if kind is ProviderKind.ANTHROPIC:
        if not api_key:
            logger.warning("Anthropic provider selected but no API key configured; using offline provider")
            return OfflineProvider()
        return AnthropicProvider(
            api_key=api_key,
            model=model or settings.llm_model,
            chunk_chars=settings.remote_chunk_chars,
        )
    return OfflineProvider()


def provider_from_settings() -> AiProvider:
    """Create the provider configured in the application settings."""
    return make_provider(settings.ai_provider, settings.anthropic_api_key, settings.llm_model)
