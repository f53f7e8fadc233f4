"""
errors.py — Exception hierarchy for youtube-timedtext.

Every exception carries a `kind` discriminant (an ErrorKind member) plus the
payload specific to that kind, so callers can branch on `exc.kind` instead of
on the concrete class.  All messages are built by a single format_message()
function and share the same "[youtube-timedtext]" prefix.

Hierarchy:
    TranscriptError (base)
    ├── TooManyRequestsError       CAPTCHA challenge on the watch page.
    ├── VideoUnavailableError      Video doesn't exist or is private.
    ├── CaptionsDisabledError      Captions are turned off for the video.
    ├── NoCaptionsError            No usable track, or every fetch path failed.
    ├── LanguageNotAvailableError  Requested language isn't in the catalog.
    └── InvalidIdentifierError     Input can't be resolved to a video ID.
"""

from __future__ import annotations

from enum import Enum

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

MESSAGE_PREFIX = "[youtube-timedtext]"


class ErrorKind(str, Enum):
    """Discriminant identifying which failure a TranscriptError represents."""

    TOO_MANY_REQUESTS = "too_many_requests"
    VIDEO_UNAVAILABLE = "video_unavailable"
    CAPTIONS_DISABLED = "captions_disabled"
    NO_CAPTIONS = "no_captions"
    LANGUAGE_NOT_AVAILABLE = "language_not_available"
    INVALID_IDENTIFIER = "invalid_identifier"
    UNKNOWN = "unknown"


_TEMPLATES: dict[ErrorKind, str] = {
    ErrorKind.TOO_MANY_REQUESTS: (
        "YouTube is receiving too many requests from this IP and now requires "
        "solving a captcha to continue"
    ),
    ErrorKind.VIDEO_UNAVAILABLE: "The video is no longer available ({video_id})",
    ErrorKind.CAPTIONS_DISABLED: "Transcript is disabled on this video ({video_id})",
    ErrorKind.NO_CAPTIONS: "No transcripts are available for this video ({video_id})",
    ErrorKind.LANGUAGE_NOT_AVAILABLE: (
        "No transcripts are available in {lang} for this video ({video_id}). "
        "Available languages: {available}"
    ),
    ErrorKind.INVALID_IDENTIFIER: "Impossible to retrieve Youtube video ID from {value!r}",
}


def format_message(kind: ErrorKind, **payload: object) -> str:
    """
    Render the human-readable message for an error kind.

    List payloads (e.g. the available languages) are joined with ", ".

    Args:
        kind:    Which failure to describe.
        payload: The fields referenced by that kind's template.

    Returns:
        The prefixed message, e.g.
        "[youtube-timedtext] Transcript is disabled on this video (abc)".
    """
    fields = {
        key: ", ".join(value) if isinstance(value, (list, tuple)) else value
        for key, value in payload.items()
    }
    return f"{MESSAGE_PREFIX} {_TEMPLATES[kind].format(**fields)}"


# ---------------------------------------------------------------------------
# Base exception
# ---------------------------------------------------------------------------

class TranscriptError(Exception):
    """
    Root exception for all transcript-related errors.

    Attributes:
        kind:     ErrorKind discriminant.
        message:  Human-readable description of what went wrong.
        video_id: The resolved video identifier, when one is known.
    """

    kind: ErrorKind = ErrorKind.UNKNOWN

    def __init__(self, message: str, video_id: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.video_id = video_id


# ---------------------------------------------------------------------------
# Specific error cases
# ---------------------------------------------------------------------------

class TooManyRequestsError(TranscriptError):
    """
    Raised when the watch page serves a CAPTCHA challenge instead of the video.

    YouTube does this once an IP has made too many requests in a short time.
    """

    kind = ErrorKind.TOO_MANY_REQUESTS

    def __init__(self, video_id: str | None = None) -> None:
        super().__init__(format_message(self.kind), video_id=video_id)


class VideoUnavailableError(TranscriptError):
    """Raised when the watch page has no playability status (deleted/private video)."""

    kind = ErrorKind.VIDEO_UNAVAILABLE

    def __init__(self, video_id: str) -> None:
        super().__init__(format_message(self.kind, video_id=video_id), video_id=video_id)


class CaptionsDisabledError(TranscriptError):
    """
    Raised when the video exists but carries no caption metadata at all.

    Also the outcome when the watch page couldn't be fetched or its captions
    JSON couldn't be parsed.
    """

    kind = ErrorKind.CAPTIONS_DISABLED

    def __init__(self, video_id: str) -> None:
        super().__init__(format_message(self.kind, video_id=video_id), video_id=video_id)


class NoCaptionsError(TranscriptError):
    """
    Raised when captions are enabled but no track could be retrieved.

    Covers an empty track list, a failed track download, and the exhaustion
    of the player-API fallback.
    """

    kind = ErrorKind.NO_CAPTIONS

    def __init__(self, video_id: str) -> None:
        super().__init__(format_message(self.kind, video_id=video_id), video_id=video_id)


class LanguageNotAvailableError(TranscriptError):
    """
    Raised when the video has tracks, but none in the requested language.

    Matching is exact: asking for "en" does not fall back to "en-GB".
    """

    kind = ErrorKind.LANGUAGE_NOT_AVAILABLE

    def __init__(self, lang: str, available: list[str], video_id: str) -> None:
        super().__init__(
            format_message(self.kind, lang=lang, available=available, video_id=video_id),
            video_id=video_id,
        )
        self.lang = lang
        self.available = list(available)


class InvalidIdentifierError(TranscriptError):
    """Raised when the input is neither an 11-character ID nor a known YouTube URL."""

    kind = ErrorKind.INVALID_IDENTIFIER

    def __init__(self, value: str) -> None:
        super().__init__(format_message(self.kind, value=value))
        self.value = value
