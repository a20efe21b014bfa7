"""Tests for the Playlist and Track domain models."""

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from src.m3u8.domain.playlist import Playlist
from src.m3u8.domain.track import Track
from src.m3u8.utils.parse_errors import ManifestParseError


def _playlist(*durations: float, **tags: int) -> Playlist:
    """Build a playlist with one track per duration."""
    tracks = tuple(
        Track(duration=duration, file=f"{index:08d}.ts")
        for index, duration in enumerate(durations)
    )
    return Playlist(tags=tags, tracks=tracks)


class TestTrack:
    """Tests for the Track model."""

    def test_defaults(self) -> None:
        """Only duration and file are required."""
        track = Track(duration=4.0, file="a.ts")
        assert track.name is None
        assert track.discontinuous is False
        assert track.time is None

    def test_all_fields(self) -> None:
        """All fields are stored as given."""
        when = datetime(2020, 1, 1, tzinfo=timezone.utc)
        track = Track(duration=4.0, name="Intro", discontinuous=True, time=when, file="a.ts")
        assert track.name == "Intro"
        assert track.discontinuous is True
        assert track.time == when

    def test_file_required(self) -> None:
        """A track always has a file."""
        with pytest.raises(ValidationError):
            Track(duration=4.0)  # type: ignore[call-arg]

    def test_empty_file_rejected(self) -> None:
        """The file reference cannot be empty."""
        with pytest.raises(ValidationError):
            Track(duration=4.0, file="")

    def test_frozen(self) -> None:
        """Tracks cannot be modified after construction."""
        track = Track(duration=4.0, file="a.ts")
        with pytest.raises(ValidationError):
            track.file = "b.ts"  # type: ignore[misc]



class TestPlaylistQueries:
    """Tests for the read-only Playlist queries."""

    def test_total_duration(self) -> None:
        """Total duration sums all tracks."""
        assert _playlist(2.0, 3.5, 4.0).total_duration == pytest.approx(9.5)

    def test_total_duration_empty(self) -> None:
        """An empty playlist lasts zero seconds."""
        assert _playlist().total_duration == 0.0

    def test_total_duration_serialized(self) -> None:
        """total_duration is part of the dumped model."""
        assert _playlist(2.0, 3.0).model_dump()["total_duration"] == 5.0

    def test_tag_lookup_case_insensitive(self) -> None:
        """Tags are found regardless of the case of the name."""
        playlist = _playlist(VERSION=3)
        assert playlist.tag("VERSION") == 3
        assert playlist.tag("version") == 3
        assert playlist.tag("Version") == 3

    def test_tag_absent(self) -> None:
        """Unset tags return None."""
        assert _playlist().tag("TARGETDURATION") is None

    def test_track_count(self) -> None:
        """track_count is the number of tracks."""
        assert _playlist(1.0, 2.0).track_count() == 2
        assert _playlist().track_count() == 0

    def test_track_at(self) -> None:
        """Indexed access returns tracks in order."""
        playlist = _playlist(1.0, 2.0)
        assert playlist.track_at(0).file == "00000000.ts"
        assert playlist.track_at(1).file == "00000001.ts"

    @pytest.mark.parametrize("index", [-1, 2, 100])
    def test_track_at_out_of_range(self, index: int) -> None:
        """Out of range indices return None, negative ones included."""
        assert _playlist(1.0, 2.0).track_at(index) is None

    @pytest.mark.parametrize(
        ("seconds", "expected"),
        [
            (-0.5, -1),
            (0, 0),
            (1.99, 0),
            (2, 1),
            (4.5, 1),
            (5, 2),
            (8.999, 2),
            (9, -1),
            (100, -1),
        ],
    )
    def test_track_at_time(self, seconds: float, expected: int) -> None:
        """The active track is the first whose cumulative duration exceeds t."""
        assert _playlist(2.0, 3.0, 4.0).track_at_time(seconds) == expected

    def test_track_at_time_skips_zero_length_tracks(self) -> None:
        """Zero-length tracks never contain a time offset."""
        assert _playlist(0.0, 3.0).track_at_time(0) == 1

    def test_track_at_time_empty(self) -> None:
        """No track is active in an empty playlist."""
        assert _playlist().track_at_time(0) == -1

    def test_frozen(self) -> None:
        """Playlists cannot be reassigned after construction."""
        playlist = _playlist(1.0)
        with pytest.raises(ValidationError):
            playlist.tracks = ()  # type: ignore[misc]

    def test_tags_read_only(self) -> None:
        """The tag mapping cannot be modified in place."""
        playlist = _playlist(VERSION=3)
        with pytest.raises(TypeError):
            playlist.tags["VERSION"] = 99  # type: ignore[index]
        assert playlist.tag("VERSION") == 3

    def test_tags_detached_from_input(self) -> None:
        """Changing the dict passed in does not change the playlist."""
        tags = {"VERSION": 3}
        playlist = Playlist(tags=tags)
        tags["VERSION"] = 99
        assert playlist.tag("VERSION") == 3

    def test_default_tags_read_only(self) -> None:
        """An empty default tag mapping is read-only too."""
        with pytest.raises(TypeError):
            Playlist().tags["VERSION"] = 1  # type: ignore[index]

    def test_tags_serialized_as_dict(self) -> None:
        """Dumped tags are a plain dict."""
        assert _playlist(VERSION=3).model_dump()["tags"] == {"VERSION": 3}


class TestPlaylistCreate:
    """Tests for the Playlist.create factory."""

    def test_create_parses_content(self) -> None:
        """create() runs the parser."""
        playlist = Playlist.create("#EXTM3U\n#EXT-X-TARGETDURATION:6\n#EXTINF:5,\na.ts\n")
        assert playlist.track_count() == 1

    def test_create_raises_parse_error(self) -> None:
        """create() surfaces parse errors unchanged."""
        with pytest.raises(ManifestParseError, match="cannot parse"):
            Playlist.create(None)
