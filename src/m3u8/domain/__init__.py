# Domain models package (Pydantic models)

from src.m3u8.domain.playlist import Playlist, PlaylistSummary
from src.m3u8.domain.track import Track

__all__ = [
    "Playlist",
    "PlaylistSummary",
    "Track",
]
