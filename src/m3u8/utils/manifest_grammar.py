"""Line grammars for m3u8 track headers and directives.

Two grammars are recognized:

1. **Track header**: ``#EXTINF:<duration>[,[<name>]]``
   ```
   #EXTINF:5.040000,
   #EXTINF:5, Second Track
   ```

2. **Generic directive**: ``#EXT-X-<NAME>[:<value>]``
   ```
   #EXT-X-VERSION:3
   #EXT-X-DISCONTINUITY
   #EXT-X-PROGRAM-DATE-TIME:2010-02-19T14:54:23.031+08:00
   ```

A line that starts like one of these but does not match it is a grammar
error.
"""

import re
from dataclasses import dataclass

from src.m3u8.utils.parse_errors import ManifestParseError

TRACK_PREFIX = "#EXTINF"

# Format: #EXTINF:duration[,name]
# Spaces after the colon and after the comma are not part of the values.
TRACK_HEADER_PATTERN = re.compile(
    r"#EXTINF: *(?P<duration>[0-9.]+)(?:, *(?P<name>.+?)?)?"
)

# Format: #EXT-X-NAME[:value], value taken verbatim
DIRECTIVE_PATTERN = re.compile(r"#EXT-X-(?P<name>[A-Z-]+)(?::(?P<value>.+))?")


@dataclass(frozen=True, slots=True)
class TrackHeader:
    """Fields extracted from an ``#EXTINF`` line."""

    duration: float
    name: str | None


@dataclass(frozen=True, slots=True)
class Directive:
    """Fields extracted from an ``#EXT-X-`` line."""

    name: str
    value: str | None


def is_track_header(line: str) -> bool:
    """Return True if the line must be read with the track header grammar."""
    return line.startswith(TRACK_PREFIX)


def match_track_header(line: str) -> TrackHeader:
    """Parse an ``#EXTINF`` line.

    Args:
        line: A single manifest line starting with ``#EXTINF``.

    Returns:
        TrackHeader with the duration in seconds and the optional name.
        A trailing comma with nothing after it gives ``name=None``.

    Raises:
        ManifestParseError: If the line does not match the grammar or the
            duration is not a number.

    Examples:
        >>> match_track_header("#EXTINF:5.04,")
        TrackHeader(duration=5.04, name=None)
        >>> match_track_header("#EXTINF:5, Second Track")
        TrackHeader(duration=5.0, name='Second Track')
    """
    match = TRACK_HEADER_PATTERN.fullmatch(line)
    if match is None:
        raise ManifestParseError(f'Line format invalid for track "{line}"')

    raw_duration = match.group("duration")
    try:
        duration = float(raw_duration)
    except ValueError as e:
        raise ManifestParseError(f"Invalid track duration {raw_duration}") from e

    return TrackHeader(duration=duration, name=match.group("name"))


def match_directive(line: str) -> Directive:
    """Parse an ``#EXT-X-`` directive line.

    Args:
        line: A single manifest line.

    Returns:
        Directive with the name and the verbatim value (None when the
        directive has no ``:value`` part).

    Raises:
        ManifestParseError: If the line does not match the grammar.

    Examples:
        >>> match_directive("#EXT-X-TARGETDURATION:6")
        Directive(name='TARGETDURATION', value='6')
        >>> match_directive("#EXT-X-DISCONTINUITY")
        Directive(name='DISCONTINUITY', value=None)
    """
    match = DIRECTIVE_PATTERN.fullmatch(line)
    if match is None:
        raise ManifestParseError(f'Line format invalid for tag "{line}"')

    return Directive(name=match.group("name"), value=match.group("value"))
