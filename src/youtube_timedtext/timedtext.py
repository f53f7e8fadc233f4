"""
timedtext.py — Download and parse a caption track's timed-text document.

The timed-text document is XML-like:

    <transcript>
      <text start="1.0" dur="2.5">Hello</text>
      ...
    </transcript>

We scan it with a regex rather than an XML parser.  YouTube doesn't promise
well-formed XML here, and the cue text is returned exactly as it appears
(entities are left encoded).
"""

from __future__ import annotations

import logging
import math
import re

import httpx

from youtube_timedtext.config import REQUEST_ERRORS, TranscriptConfig, browser_headers
from youtube_timedtext.errors import NoCaptionsError
from youtube_timedtext.models import CaptionTrack, TranscriptSegment

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

_CUE = re.compile(r'<text start="([^"]*)" dur="([^"]*)">([^<]*)</text>')

# Leading decimal literal, as accepted by JavaScript's parseFloat().
_LEADING_FLOAT = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


# ---------------------------------------------------------------------------
# Fetching
# ---------------------------------------------------------------------------

async def fetch_timed_text(
    client: httpx.AsyncClient,
    track: CaptionTrack,
    config: TranscriptConfig,
    video_id: str,
    referer: str | None = None,
) -> str:
    """
    Download the raw timed-text document for a track.

    Args:
        client:   HTTP client used for the request.
        track:    The selected caption track.
        config:   Per-call options (the language sets Accept-Language).
        video_id: Used only for error messages.
        referer:  Optional Referer header (sent by the player-API path).

    Returns:
        The response body.  May be empty: YouTube answers 200 with no content
        when the track URL came from a stale watch page.

    Raises:
        NoCaptionsError: The request failed or returned a non-2xx status.
    """
    try:
        response = await client.get(track.base_url, headers=browser_headers(config, referer))
    except REQUEST_ERRORS as exc:
        raise NoCaptionsError(video_id) from exc

    if not response.is_success:
        logger.debug(
            "Timed-text request for %s returned HTTP %d", video_id, response.status_code,
        )
        raise NoCaptionsError(video_id)

    return response.text


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------

def parse_seconds(value: str) -> float:
    """
    Convert a start/dur attribute to seconds the way parseFloat() would.

    Trailing garbage is ignored ("1.5s" → 1.5); a value with no numeric
    prefix yields NaN rather than raising.
    """
    match = _LEADING_FLOAT.match(value)
    if match is None:
        return math.nan
    return float(match.group(1))


def parse_timed_text(raw: str, lang: str | None) -> list[TranscriptSegment]:
    """
    Parse a timed-text document into segments, in document order.

    Segments are not sorted or validated; offsets are monotonic only because
    YouTube emits them that way.

    Args:
        raw:  The timed-text document.
        lang: Language recorded on every segment.

    Returns:
        One TranscriptSegment per `<text start=".." dur="..">` element, or an
        empty list if there are none.
    """
    segments = [
        TranscriptSegment(
            text=text,
            offset=parse_seconds(start),
            duration=parse_seconds(dur),
            lang=lang,
        )
        for start, dur, text in _CUE.findall(raw)
    ]
    logger.debug("Parsed %d segment(s)", len(segments))
    return segments
