# Utils package (manifest line classification, grammars, parser)

from src.m3u8.utils.line_classifier import (
    LineKind,
    classify_line,
    is_skippable,
    split_lines,
)
from src.m3u8.utils.manifest_grammar import (
    Directive,
    TrackHeader,
    match_directive,
    match_track_header,
)
from src.m3u8.utils.manifest_parser import (
    ParserState,
    PlaylistBuilder,
    advance,
    parse,
)
from src.m3u8.utils.parse_errors import ManifestParseError

__all__ = [
    "Directive",
    "LineKind",
    "ManifestParseError",
    "ParserState",
    "PlaylistBuilder",
    "TrackHeader",
    "advance",
    "classify_line",
    "is_skippable",
    "match_directive",
    "match_track_header",
    "parse",
    "split_lines",
]
