"""
test_errors.py — Tests for the error taxonomy and message formatting.
"""

from __future__ import annotations

import pytest

from youtube_timedtext.errors import (
    MESSAGE_PREFIX,
    CaptionsDisabledError,
    ErrorKind,
    InvalidIdentifierError,
    LanguageNotAvailableError,
    NoCaptionsError,
    TooManyRequestsError,
    TranscriptError,
    VideoUnavailableError,
    format_message,
)


class TestErrorKinds:
    """Every error carries its kind and shares the common base/prefix."""

    @pytest.mark.parametrize(
        ("error", "kind"),
        [
            (TooManyRequestsError(), ErrorKind.TOO_MANY_REQUESTS),
            (VideoUnavailableError("abc"), ErrorKind.VIDEO_UNAVAILABLE),
            (CaptionsDisabledError("abc"), ErrorKind.CAPTIONS_DISABLED),
            (NoCaptionsError("abc"), ErrorKind.NO_CAPTIONS),
            (LanguageNotAvailableError("de", ["en"], "abc"), ErrorKind.LANGUAGE_NOT_AVAILABLE),
            (InvalidIdentifierError("nope"), ErrorKind.INVALID_IDENTIFIER),
        ],
    )
    def test_kind_and_prefix(self, error: TranscriptError, kind: ErrorKind) -> None:
        """Kind discriminant is set and the message carries the prefix."""
        assert isinstance(error, TranscriptError)
        assert error.kind is kind
        assert error.message.startswith(MESSAGE_PREFIX + " ")
        assert str(error) == error.message

    def test_video_id_payload(self) -> None:
        """Video-scoped errors expose the ID and mention it in the message."""
        error = NoCaptionsError("dQw4w9WgXcQ")
        assert error.video_id == "dQw4w9WgXcQ"
        assert "(dQw4w9WgXcQ)" in error.message

    def test_language_payload(self) -> None:
        """LanguageNotAvailableError keeps the requested and available codes."""
        error = LanguageNotAvailableError("de", ["en", "fr"], "abc")
        assert error.lang == "de"
        assert error.available == ["en", "fr"]
        assert error.video_id == "abc"
        assert error.message == (
            "[youtube-timedtext] No transcripts are available in de for this "
            "video (abc). Available languages: en, fr"
        )

    def test_invalid_identifier_has_no_video_id(self) -> None:
        """An unresolvable input has no video ID to report."""
        assert InvalidIdentifierError("x").video_id is None


class TestFormatMessage:
    """Tests for the shared message formatter."""

    def test_joins_lists(self) -> None:
        """List payloads are rendered comma-separated."""
        message = format_message(
            ErrorKind.LANGUAGE_NOT_AVAILABLE, lang="xx", available=["a", "b", "c"], video_id="v",
        )
        assert message.endswith("Available languages: a, b, c")

    def test_no_payload(self) -> None:
        """Kinds without payload format without arguments."""
        assert "captcha" in format_message(ErrorKind.TOO_MANY_REQUESTS)
