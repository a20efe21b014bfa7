"""Line splitting and classification for m3u8 manifests.

Every line of a manifest is one of:

- **blank**: the empty string
- **comment**: starts with ``#`` but not with the ``#EXT`` tag prefix
- **directive**: starts with ``#EXT``
- **content**: anything else (a media file reference)

Blank and comment lines carry no meaning and are skipped by the parser
in every state.
"""

import re
from enum import Enum

# "Lines are terminated by either a single LF character or a CR
# character followed by an LF character." (RFC 8216, section 4.1)
LINE_DELIMITER_PATTERN = re.compile(r"\r?\n")

TAG_PREFIX = "#EXT"
EXTENSION_HEADER = "#EXTM3U"


class LineKind(str, Enum):
    """Classification of a single manifest line."""

    BLANK = "blank"
    COMMENT = "comment"
    DIRECTIVE = "directive"
    CONTENT = "content"


def split_lines(content: str) -> list[str]:
    """Split manifest content into lines.

    Each delimiter is matched independently, so ``\\n`` and ``\\r\\n``
    endings may be mixed within one document. A trailing newline
    produces a final empty line.

    Examples:
        >>> split_lines("#EXTM3U\\r\\na.ts\\n")
        ['#EXTM3U', 'a.ts', '']
    """
    return LINE_DELIMITER_PATTERN.split(content)


def classify_line(line: str) -> LineKind:
    """Classify one already-split manifest line.

    Lines are not stripped: a line holding only spaces is content.

    Examples:
        >>> classify_line("")
        <LineKind.BLANK: 'blank'>
        >>> classify_line("# generated by encoder")
        <LineKind.COMMENT: 'comment'>
        >>> classify_line("#EXT-X-VERSION:3")
        <LineKind.DIRECTIVE: 'directive'>
        >>> classify_line("segment0.ts")
        <LineKind.CONTENT: 'content'>
    """
    if not line:
        return LineKind.BLANK
    if line.startswith(TAG_PREFIX):
        return LineKind.DIRECTIVE
    if line.startswith("#"):
        return LineKind.COMMENT
    return LineKind.CONTENT


def is_skippable(line: str) -> bool:
    """Return True for lines the parser ignores (blank and comment lines)."""
    return classify_line(line) in (LineKind.BLANK, LineKind.COMMENT)
