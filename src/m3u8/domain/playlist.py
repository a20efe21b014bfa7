"""Pydantic model for a parsed m3u8 playlist and its read-only queries."""

from collections.abc import Mapping
from types import MappingProxyType

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    computed_field,
    field_serializer,
    field_validator,
)

from src.m3u8.domain.track import Track


class Playlist(BaseModel):
    """A fully parsed and validated m3u8 playlist.

    Holds the playlist-level directives (``tags``) and the media segments
    (``tracks``) in document order. Instances are only produced by a
    successful parse and are frozen; every method is a pure query.

    Tag keys are uppercase directive names without the ``#EXT-X-`` prefix,
    e.g. ``VERSION`` and ``TARGETDURATION``.
    """

    model_config = ConfigDict(frozen=True)

    tags: Mapping[str, int] = Field(
        default_factory=dict,
        validate_default=True,
        description="Playlist directives keyed by uppercase name (read-only)",
    )
    tracks: tuple[Track, ...] = Field(
        default=(),
        description="Media segments in document order",
    )

    @field_validator("tags", mode="after")
    @classmethod
    def tags_read_only(cls, v: Mapping[str, int]) -> Mapping[str, int]:
        """Wrap a private copy of the tags in a read-only view."""
        return MappingProxyType(dict(v))

    @field_serializer("tags")
    def serialize_tags(self, v: Mapping[str, int]) -> dict[str, int]:
        return dict(v)

    @classmethod
    def create(cls, content: str | None) -> "Playlist":
        """Parse manifest content into a Playlist.

        Raises:
            ManifestParseError: If the content is missing or invalid.
        """
        from src.m3u8.utils.manifest_parser import parse

        return parse(content)

    @computed_field
    @property
    def total_duration(self) -> float:
        """Sum of all track durations in seconds."""
        return sum((track.duration for track in self.tracks), 0.0)

    def tag(self, name: str) -> int | None:
        """Return the value of a directive, or None if it was not present.

        Lookup is case-insensitive: ``tag("version")`` and ``tag("VERSION")``
        are equivalent.
        """
        return self.tags.get(name.upper())

    def track_count(self) -> int:
        """Number of tracks in the playlist."""
        return len(self.tracks)

    def track_at(self, index: int) -> Track | None:
        """Return the track at ``index``, or None if out of range.

        Negative indices are out of range; they do not count from the end.
        """
        if 0 <= index < len(self.tracks):
            return self.tracks[index]
        return None

    def track_at_time(self, seconds: float) -> int:
        """Return the index of the track playing at a time offset.

        The active track is the first one whose cumulative duration (its
        own plus all preceding tracks) exceeds ``seconds``.

        Returns:
            Track index, or -1 if ``seconds`` is negative or at/after the
            end of the playlist.
        """
        if seconds < 0:
            return -1

        total = 0.0
        for index, track in enumerate(self.tracks):
            total += track.duration
            if total > seconds:
                return index

        return -1


class PlaylistSummary(BaseModel):
    """Overview of a parsed playlist for display or reporting."""

    source: str | None = Field(
        default=None,
        description="Caller-supplied label for where the manifest came from",
    )
    track_count: int = Field(
        ge=0,
        description="Number of tracks",
    )
    total_duration: float = Field(
        description="Sum of track durations in seconds",
    )
    version: int | None = Field(
        default=None,
        description="EXT-X-VERSION value, if present",
    )
    target_duration: int | None = Field(
        default=None,
        description="EXT-X-TARGETDURATION value, if present",
    )
    discontinuity_count: int = Field(
        default=0,
        ge=0,
        description="Number of tracks preceded by EXT-X-DISCONTINUITY",
    )
