"""Pydantic model for a single media segment of an m3u8 playlist."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class Track(BaseModel):
    """One media segment ("track") of a parsed playlist.

    Built by the parser only after both the ``#EXTINF`` header and the
    file line following it have been read, and never modified afterwards.

    Manifest form:
        #EXTINF:<duration>[,<name>]
        [#EXT-X-PROGRAM-DATE-TIME:<time>]
        <file>
    """

    model_config = ConfigDict(frozen=True)

    duration: float = Field(
        description="Segment duration in seconds",
    )
    name: str | None = Field(
        default=None,
        description="Optional display title from the #EXTINF line",
    )
    discontinuous: bool = Field(
        default=False,
        description="True if this track directly follows an EXT-X-DISCONTINUITY marker",
    )
    time: datetime | None = Field(
        default=None,
        description="Absolute start time from EXT-X-PROGRAM-DATE-TIME, timezone-aware",
    )
    file: str = Field(
        description="Media resource reference (path or URL)",
        min_length=1,
    )
