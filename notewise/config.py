from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings

from notewise.pipeline_config import ProviderKind


class Settings(BaseSettings):
    """Runtime settings for the Notewise API and scripts.

    Read from environment variables (case-insensitive) and an optional .env file.
    """

    # Provider selection
    ai_provider: ProviderKind = ProviderKind.OFFLINE
    anthropic_api_key: str = ""  # Optional; without it the offline provider is used
    llm_model: str = "claude-sonnet-4-20250514"

    # App config
    default_user_name: str = "Me"
    remote_chunk_chars: int = 12_000
    log_level: str = "INFO"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Build the settings once per process.

    An unreadable .env file is ignored and only the environment is used.
    """
    try:
        return Settings()
    except Exception:
        return Settings(_env_file=None)  # type: ignore[call-arg]


settings = get_settings()
