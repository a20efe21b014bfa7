# Services package (business logic layer)

from src.m3u8.services.playlist_service import (
    PlaylistService,
    PlaylistValidationError,
)

__all__ = [
    "PlaylistService",
    "PlaylistValidationError",
]
