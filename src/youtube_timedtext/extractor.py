"""
extractor.py — The transcript resolution pipeline.

This is the heart of youtube-timedtext.  fetch_transcript() chains the stages:

    1. Resolve the video ID          → resolve_video_id()
    2. Locate the caption catalog    → locate_captions()
    3. Select a track                → select_track()
    4. Download its timed text       → fetch_timed_text()
    5. Parse it into segments        → parse_timed_text()

Steps run strictly in sequence with no retries.  The one exception is an
empty timed-text body at step 4.  That means the watch-page catalog was
stale, and the whole lookup is redone through the player API
(fetch_via_player_api()), whose result is returned directly.

Only single-video extraction is supported.
"""

from __future__ import annotations

import asyncio
import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

import httpx

from youtube_timedtext.captions import locate_captions
from youtube_timedtext.config import HTTP_TIMEOUT, TranscriptConfig
from youtube_timedtext.identifier import resolve_video_id
from youtube_timedtext.models import TranscriptSegment
from youtube_timedtext.player_api import fetch_via_player_api
from youtube_timedtext.timedtext import fetch_timed_text, parse_timed_text
from youtube_timedtext.tracks import select_track

logger = logging.getLogger(__name__)


@asynccontextmanager
async def _http_client(client: httpx.AsyncClient | None) -> AsyncIterator[httpx.AsyncClient]:
    """Yield the injected client untouched, or a fresh one closed on exit."""
    if client is not None:
        yield client
        return
    async with httpx.AsyncClient(timeout=HTTP_TIMEOUT, follow_redirects=True) as owned:
        yield owned


async def fetch_transcript(
    video_id_or_url: str,
    config: TranscriptConfig | None = None,
    *,
    client: httpx.AsyncClient | None = None,
) -> list[TranscriptSegment]:
    """
    Fetch the timed transcript of a YouTube video.

    Args:
        video_id_or_url: A YouTube URL or an 11-character video ID.
        config:          Optional per-call options; `lang` selects the track
                         by exact language code.
        client:          Optional httpx.AsyncClient to send requests with.
                         It is not closed.  When omitted, a client is created
                         for this call and closed afterwards.

    Returns:
        The transcript segments in document order.

    Raises:
        InvalidIdentifierError:     The input isn't a recognisable video.
        TooManyRequestsError:       YouTube served a CAPTCHA.
        VideoUnavailableError:      The video doesn't exist or is private.
        CaptionsDisabledError:      The video has no caption metadata.
        NoCaptionsError:            No track could be retrieved.
        LanguageNotAvailableError:  config.lang isn't among the tracks.
    """
    config = config or TranscriptConfig()
    video_id = resolve_video_id(video_id_or_url)

    async with _http_client(client) as http:
        catalog = await locate_captions(http, video_id, config)
        track = select_track(catalog, config, video_id)
        body = await fetch_timed_text(http, track, config, video_id)

        if not body:
            logger.warning(
                "Empty timed-text body for %s; retrying through the player API", video_id,
            )
            return await fetch_via_player_api(http, video_id, config)

    lang = config.lang if config.lang is not None else catalog.default_track.language_code
    return parse_timed_text(body, lang)


def get_transcript(
    video_id_or_url: str,
    config: TranscriptConfig | None = None,
) -> list[TranscriptSegment]:
    """
    Blocking wrapper around fetch_transcript() for code without an event loop.

    Must not be called from inside a running event loop; await
    fetch_transcript() there instead.
    """
    return asyncio.run(fetch_transcript(video_id_or_url, config))
