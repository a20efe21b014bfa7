"""Centralized settings via pydantic-settings.

Loads configuration from environment variables with the M3U8_ prefix.
"""

from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Settings loaded from environment variables.

    Examples:
        Accept larger manifests::

            M3U8_MAX_MANIFEST_SIZE=4194304

        Verbose logging::

            M3U8_LOG_LEVEL=DEBUG
    """

    # Largest manifest (in characters) the playlist service will parse
    max_manifest_size: int = 1_048_576  # 1 MiB of text

    # Logging
    log_level: str = "INFO"
    log_format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    model_config = {"env_prefix": "M3U8_"}


@lru_cache
def get_settings() -> Settings:
    """Get cached settings singleton."""
    return Settings()
