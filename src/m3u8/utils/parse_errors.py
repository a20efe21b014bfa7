"""Error type raised for any invalid m3u8 manifest."""


class ManifestParseError(Exception):
    """Raised when manifest content is missing or invalid.

    There is a single error type for every failure (missing input, bad
    structure, grammar and semantic violations); they differ only in
    their message. ``line_number`` is the 1-based line the failure was
    detected on, or None when the failure is not tied to a line.
    """

    def __init__(self, message: str, line_number: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.line_number = line_number

    def __str__(self) -> str:
        if self.line_number is None:
            return self.message
        return f"Line {self.line_number}: {self.message}"


def require(condition: bool, message: str) -> None:
    """Raise ManifestParseError with ``message`` unless ``condition`` holds."""
    if not condition:
        raise ManifestParseError(message)
