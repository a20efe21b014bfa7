"""Logging setup for applications embedding the playlist parser."""

import logging

from src.m3u8.config import Settings, get_settings


def configure_logging(settings: Settings | None = None) -> None:
    """Configure root logging from settings.

    The parser itself never logs; messages come from the service layer
    under the ``src.m3u8.services`` logger.
    """
    if settings is None:
        settings = get_settings()

    logging.basicConfig(
        level=settings.log_level.upper(),
        format=settings.log_format,
    )
