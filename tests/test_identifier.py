"""
test_identifier.py — Tests for resolving URLs and bare IDs to a video ID.

All tests are pure string handling; no network.
"""

from __future__ import annotations

import pytest

from youtube_timedtext.errors import ErrorKind, InvalidIdentifierError
from youtube_timedtext.identifier import resolve_video_id


class TestResolveVideoId:
    """Tests for resolve_video_id covering every URL shape + bare IDs."""

    def test_bare_id(self) -> None:
        """A raw 11-character ID is returned unchanged."""
        assert resolve_video_id("dQw4w9WgXcQ") == "dQw4w9WgXcQ"

    @pytest.mark.parametrize("value", ["hello world", "???????????", "Ab_Cd-Ef_12"])
    def test_any_eleven_characters_pass_through(self, value: str) -> None:
        """Any 11-character input is treated as an ID, without alphabet checks."""
        assert resolve_video_id(value) == value

    @pytest.mark.parametrize(
        "url",
        [
            "https://www.youtube.com/watch?v=dQw4w9WgXcQ",
            "https://www.youtube.com/watch?feature=share&v=dQw4w9WgXcQ",
            "https://www.youtube.com/watch?v=dQw4w9WgXcQ&list=PLx&t=42",
            "http://youtube.com/watch?v=dQw4w9WgXcQ",
            "https://youtu.be/dQw4w9WgXcQ",
            "https://youtu.be/dQw4w9WgXcQ?t=10",
            "https://www.youtube.com/embed/dQw4w9WgXcQ",
            "https://www.youtube.com/v/dQw4w9WgXcQ",
            "https://www.youtube.com/e/dQw4w9WgXcQ",
            "https://www.youtube.com/user/SomeChannel/dQw4w9WgXcQ",
            "youtube.com/watch?v=dQw4w9WgXcQ",
        ],
    )
    def test_known_url_shapes(self, url: str) -> None:
        """Every supported URL shape yields the embedded ID."""
        assert resolve_video_id(url) == "dQw4w9WgXcQ"

    def test_case_insensitive_host(self) -> None:
        """The host and path prefix match regardless of case."""
        assert resolve_video_id("HTTPS://WWW.YOUTUBE.COM/EMBED/dQw4w9WgXcQ") == "dQw4w9WgXcQ"

    def test_takes_first_eleven_characters(self) -> None:
        """Only the first 11 characters after the prefix form the ID."""
        assert resolve_video_id("https://youtu.be/dQw4w9WgXcQextra") == "dQw4w9WgXcQ"

    def test_not_a_url_raises(self) -> None:
        """An unrelated string raises InvalidIdentifierError."""
        with pytest.raises(InvalidIdentifierError) as excinfo:
            resolve_video_id("not a url")
        assert excinfo.value.kind is ErrorKind.INVALID_IDENTIFIER
        assert excinfo.value.value == "not a url"

    def test_empty_string_raises(self) -> None:
        """Empty input raises InvalidIdentifierError."""
        with pytest.raises(InvalidIdentifierError):
            resolve_video_id("")

    def test_short_id_in_url_raises(self) -> None:
        """A URL whose ID is too short doesn't match."""
        with pytest.raises(InvalidIdentifierError):
            resolve_video_id("https://youtu.be/abc")
