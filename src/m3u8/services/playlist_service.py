"""Service layer for parsing playlist manifests.

Wraps the manifest parser with a size guard, logging and service-level
errors. Stateless: nothing is persisted.
"""

import logging

from src.m3u8.config import Settings, get_settings
from src.m3u8.domain.playlist import Playlist, PlaylistSummary
from src.m3u8.utils.manifest_parser import parse
from src.m3u8.utils.parse_errors import ManifestParseError

logger = logging.getLogger(__name__)


class PlaylistValidationError(Exception):
    """Raised when manifest content is rejected."""


class PlaylistService:
    """Business logic for playlist manifest operations.

    Args:
        settings: Settings to use. Defaults to the cached environment
            settings.
    """

    def __init__(self, settings: Settings | None = None) -> None:
        self.settings = settings or get_settings()

    def parse_content(self, content: str | None, source: str | None = None) -> Playlist:
        """Parse manifest content into a Playlist.

        Args:
            content: Full manifest text, as obtained by the caller.
            source: Optional label (file name, URL) used in log messages.

        Returns:
            The parsed Playlist.

        Raises:
            PlaylistValidationError: If the content is too large or is not
                a valid manifest.
        """
        label = source or "<content>"
        max_size = self.settings.max_manifest_size

        if content is not None and len(content) > max_size:
            logger.warning(
                "Rejected playlist '%s': %d characters exceeds limit of %d",
                label,
                len(content),
                max_size,
            )
            raise PlaylistValidationError(
                f"Manifest too large ({len(content)} characters). "
                f"Maximum size is {max_size} characters."
            )

        try:
            playlist = parse(content)
        except ManifestParseError as e:
            logger.warning("Failed to parse playlist '%s': %s", label, e)
            raise PlaylistValidationError(str(e)) from e

        logger.info(
            "Parsed playlist '%s': %d tracks, %.3fs total",
            label,
            playlist.track_count(),
            playlist.total_duration,
        )
        return playlist

    def summarize(self, playlist: Playlist, source: str | None = None) -> PlaylistSummary:
        """Build a PlaylistSummary for an already parsed playlist."""
        return PlaylistSummary(
            source=source,
            track_count=playlist.track_count(),
            total_duration=playlist.total_duration,
            version=playlist.tag("VERSION"),
            target_duration=playlist.tag("TARGETDURATION"),
            discontinuity_count=sum(1 for track in playlist.tracks if track.discontinuous),
        )
