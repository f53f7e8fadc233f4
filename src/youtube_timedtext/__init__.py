"""
youtube_timedtext — Fetch timed YouTube transcripts.

Public API:
    fetch_transcript()   Async: URL or video ID → list of TranscriptSegment.
    get_transcript()     Blocking wrapper around fetch_transcript().
    resolve_video_id()   Parse a YouTube URL or pass through a bare video ID.
    TranscriptConfig     Per-call options (language filter).
    TranscriptSegment    One caption cue: text, offset, duration, lang.
    CaptionTrack         One language variant of a video's captions.
    CaptionCatalog       Ordered tracks for a video (first = default).

Exception hierarchy (all importable from this package):
    TranscriptError                Base exception; `.kind` is an ErrorKind.
    ├── TooManyRequestsError       CAPTCHA challenge detected.
    ├── VideoUnavailableError      Video doesn't exist or is private.
    ├── CaptionsDisabledError      Captions are turned off.
    ├── NoCaptionsError            No track could be retrieved.
    ├── LanguageNotAvailableError  Requested language not available.
    └── InvalidIdentifierError     Input isn't a YouTube URL or ID.

Usage:
    import asyncio
    from youtube_timedtext import TranscriptConfig, fetch_transcript

    segments = asyncio.run(
        fetch_transcript("https://youtu.be/dQw4w9WgXcQ", TranscriptConfig(lang="en"))
    )
"""

import logging

from youtube_timedtext.config import TranscriptConfig
from youtube_timedtext.errors import (
    CaptionsDisabledError,
    ErrorKind,
    InvalidIdentifierError,
    LanguageNotAvailableError,
    NoCaptionsError,
    TooManyRequestsError,
    TranscriptError,
    VideoUnavailableError,
)
from youtube_timedtext.extractor import fetch_transcript, get_transcript
from youtube_timedtext.identifier import resolve_video_id
from youtube_timedtext.models import CaptionCatalog, CaptionTrack, TranscriptSegment

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "fetch_transcript",
    "get_transcript",
    "resolve_video_id",
    "TranscriptConfig",
    "TranscriptSegment",
    "CaptionTrack",
    "CaptionCatalog",
    "ErrorKind",
    "TranscriptError",
    "TooManyRequestsError",
    "VideoUnavailableError",
    "CaptionsDisabledError",
    "NoCaptionsError",
    "LanguageNotAvailableError",
    "InvalidIdentifierError",
]
