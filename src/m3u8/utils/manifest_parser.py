"""Parser for m3u8 (extended M3U / HLS) manifests.

The parser is a two-state machine driven over the significant lines of a
manifest (blank and comment lines are skipped):

- ``EXPECT_HEADER``: reads playlist directives and ``#EXTINF`` track
  headers. A track header moves the parser to ``EXPECT_FILE``.
- ``EXPECT_FILE``: reads the file line completing the pending track
  (optionally preceded by ``#EXT-X-PROGRAM-DATE-TIME``) and moves back to
  ``EXPECT_HEADER``.

Validation is fail-fast: the first violation raises ManifestParseError
and nothing parsed so far is returned.
"""

import re
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

from src.m3u8.domain.playlist import Playlist
from src.m3u8.domain.track import Track
from src.m3u8.utils.line_classifier import (
    EXTENSION_HEADER,
    is_skippable,
    split_lines,
)
from src.m3u8.utils.manifest_grammar import (
    is_track_header,
    match_directive,
    match_track_header,
)
from src.m3u8.utils.parse_errors import ManifestParseError, require

# Minimum EXT-X-VERSION allowing non-integer EXTINF durations
FLOAT_DURATION_MIN_VERSION = 3

_INTEGER_PATTERN = re.compile(r"-?[0-9]+")


class ParserState(str, Enum):
    """What the parser expects from the next significant line."""

    EXPECT_HEADER = "expect_header"
    EXPECT_FILE = "expect_file"


@dataclass
class PendingTrack:
    """Header fields of a track whose file line has not been read yet."""

    header_line: str
    duration: float
    name: str | None
    discontinuous: bool
    time: datetime | None = None


@dataclass
class PlaylistBuilder:
    """Mutable accumulator owned by a single parse.

    Only ``build()`` exposes its contents, as a frozen Playlist.
    """

    tags: dict[str, int] = field(default_factory=dict)
    tracks: list[Track] = field(default_factory=list)
    discontinuous: bool = False
    pending: PendingTrack | None = None

    def set_tag(self, name: str, value: int) -> None:
        """Store a directive value under its uppercase name."""
        self.tags[name.upper()] = value

    def require_pending(self) -> PendingTrack:
        """Return the pending track.

        Raises:
            ValueError: If no track header is waiting for its file, which
                means the caller drove the parser out of EXPECT_FILE order.
        """
        if self.pending is None:
            raise ValueError("No pending track: EXPECT_FILE requires a preceding #EXTINF")
        return self.pending

    def finish_track(self, file: str) -> None:
        """Complete the pending track with its file and append it."""
        pending = self.require_pending()

        self.tracks.append(
            Track(
                duration=pending.duration,
                name=pending.name,
                discontinuous=pending.discontinuous,
                time=pending.time,
                file=file,
            )
        )
        self.pending = None

    def build(self) -> Playlist:
        """Freeze the accumulated tags and tracks into a Playlist."""
        return Playlist(tags=dict(self.tags), tracks=tuple(self.tracks))


def _parse_integer(value: str | None) -> int | None:
    """Parse a base-10 integer directive value, None if it is not one."""
    if value is None or _INTEGER_PATTERN.fullmatch(value) is None:
        return None
    return int(value)


def _parse_date_time(value: str | None) -> datetime | None:
    """Parse an ISO 8601 date-time with a UTC offset, None if invalid."""
    if value is None:
        return None
    try:
        parsed = datetime.fromisoformat(value)
    except ValueError:
        return None
    if parsed.tzinfo is None:
        return None
    return parsed


def _read_track_header(line: str, builder: PlaylistBuilder) -> ParserState:
    header = match_track_header(line)
    duration = header.duration

    if duration % 1 != 0:
        version = builder.tags.get("VERSION")
        require(
            version is not None and version >= FLOAT_DURATION_MIN_VERSION,
            f"Version must be {FLOAT_DURATION_MIN_VERSION} or higher "
            "to support floating point durations.",
        )

    # An unset TARGETDURATION fails this check as well.
    target = builder.tags.get("TARGETDURATION")
    require(
        target is not None and duration < target,
        "Segment duration must be less than the TARGETDURATION",
    )

    builder.pending = PendingTrack(
        header_line=line,
        duration=duration,
        name=header.name,
        discontinuous=builder.discontinuous,
    )
    builder.discontinuous = False
    return ParserState.EXPECT_FILE


def _read_header_line(line: str, builder: PlaylistBuilder) -> ParserState:
    if is_track_header(line):
        return _read_track_header(line, builder)

    directive = match_directive(line)

    if directive.name == "VERSION":
        require("VERSION" not in builder.tags, "Version may only be defined once")
        version = _parse_integer(directive.value)
        require(version is not None, f"Invalid version tag value {directive.value}")
        builder.set_tag("VERSION", version)
    elif directive.name == "TARGETDURATION":
        target = _parse_integer(directive.value)
        require(
            target is not None,
            f"Invalid target duration tag value {directive.value}",
        )
        builder.set_tag("TARGETDURATION", target)
    elif directive.name == "DISCONTINUITY":
        builder.discontinuous = True
    # Other directives are accepted and ignored.

    return ParserState.EXPECT_HEADER


def _read_file_line(line: str, builder: PlaylistBuilder) -> ParserState:
    if line.startswith("#"):
        directive = match_directive(line)
        require(
            directive.name == "PROGRAM-DATE-TIME",
            f"Invalid tag {directive.name}, expecting media segment.",
        )
        time = _parse_date_time(directive.value)
        require(time is not None, f"Invalid date {directive.value}")
        builder.require_pending().time = time
        return ParserState.EXPECT_FILE

    builder.finish_track(line)
    return ParserState.EXPECT_HEADER


def advance(state: ParserState, line: str, builder: PlaylistBuilder) -> ParserState:
    """Apply one significant manifest line to the parse.

    Blank and comment lines must be filtered out by the caller; they never
    reach the state machine.

    Args:
        state: Current parser state.
        line: A non-blank, non-comment line.
        builder: Accumulator for the parse in progress.

    Returns:
        The state to use for the next significant line.

    Raises:
        ManifestParseError: If the line is invalid in the current state.
        ValueError: If ``state`` is EXPECT_FILE but no track is pending.
    """
    if state is ParserState.EXPECT_HEADER:
        return _read_header_line(line, builder)
    if state is ParserState.EXPECT_FILE:
        return _read_file_line(line, builder)
    raise ValueError(f"Unknown parser state: {state!r}")


def parse(content: str | None) -> Playlist:
    """Parse m3u8 manifest content into a Playlist.

    Args:
        content: Full text of the manifest. ``\\n`` and ``\\r\\n`` line
            endings are both accepted, also mixed.

    Returns:
        A frozen Playlist with the manifest's tags and tracks.

    Raises:
        ManifestParseError: If the content is empty or missing, does not
            start with ``#EXTM3U``, or violates the grammar or any
            validation rule.

    Examples:
        >>> playlist = parse("#EXTM3U\\n#EXT-X-TARGETDURATION:6\\n#EXTINF:5,\\na.ts\\n")
        >>> playlist.track_count()
        1
    """
    if not content:
        raise ManifestParseError(f"cannot parse {content!r}")

    lines = split_lines(content)
    if lines[0] != EXTENSION_HEADER:
        raise ManifestParseError(
            f"the {EXTENSION_HEADER} must be the first line in the file.",
            line_number=1,
        )

    builder = PlaylistBuilder()
    state = ParserState.EXPECT_HEADER

    for line_number, line in enumerate(lines[1:], start=2):
        if is_skippable(line):
            continue
        try:
            state = advance(state, line, builder)
        except ManifestParseError as e:
            e.line_number = line_number
            raise

    if state is ParserState.EXPECT_FILE:
        pending = builder.require_pending()
        raise ManifestParseError(f'Track "{pending.header_line}" has no media segment.')

    return builder.build()
