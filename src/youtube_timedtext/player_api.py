"""
player_api.py — Fallback pipeline through YouTube's internal player API.

Used only when the track URL taken from the watch page returns an empty body,
which happens when YouTube changes what it embeds in the page.  The player
API returns the same tracklist renderer as JSON; from there we select a track
and fetch its timed text exactly as the primary path does.

Whatever goes wrong in here, the caller sees NoCaptionsError.  The underlying
cause is chained on the exception and logged at debug level.
"""

from __future__ import annotations

import logging

import httpx

from youtube_timedtext.captions import build_catalog
from youtube_timedtext.config import (
    PLAYER_API_URL,
    REQUEST_ERRORS,
    WATCH_URL,
    TranscriptConfig,
    player_api_headers,
    player_api_payload,
)
from youtube_timedtext.errors import NoCaptionsError, TranscriptError
from youtube_timedtext.models import CaptionCatalog, TranscriptSegment
from youtube_timedtext.timedtext import fetch_timed_text, parse_timed_text
from youtube_timedtext.tracks import select_track

logger = logging.getLogger(__name__)


async def fetch_player_catalog(client: httpx.AsyncClient, video_id: str) -> CaptionCatalog:
    """
    POST to the player API and build a catalog from its captions block.

    Raises:
        NoCaptionsError:        Non-2xx status or no caption tracks.
        CaptionsDisabledError:  The response has no tracklist renderer.
        httpx.HTTPError:        Transport failure.
        httpx.InvalidURL:       Malformed request URL.
        ValueError:             The body isn't JSON.
    """
    response = await client.post(
        PLAYER_API_URL,
        headers=player_api_headers(video_id),
        json=player_api_payload(video_id),
    )
    if not response.is_success:
        raise NoCaptionsError(video_id)

    data = response.json()
    captions = data.get("captions") if isinstance(data, dict) else None
    renderer = captions.get("playerCaptionsTracklistRenderer") if isinstance(captions, dict) else None
    if not isinstance(renderer, dict):
        renderer = None
    return build_catalog(renderer, video_id, source="player_api")


async def _run(
    client: httpx.AsyncClient,
    video_id: str,
    config: TranscriptConfig,
) -> list[TranscriptSegment]:
    catalog = await fetch_player_catalog(client, video_id)
    track = select_track(catalog, config, video_id)
    body = await fetch_timed_text(
        client, track, config, video_id, referer=WATCH_URL.format(video_id=video_id),
    )
    if not body:
        raise NoCaptionsError(video_id)
    lang = config.lang if config.lang is not None else catalog.default_track.language_code
    return parse_timed_text(body, lang)


async def fetch_via_player_api(
    client: httpx.AsyncClient,
    video_id: str,
    config: TranscriptConfig,
) -> list[TranscriptSegment]:
    """
    Resolve catalog, track and content through the player API in one step.

    Args:
        client:   HTTP client used for every request in the pipeline.
        video_id: The 11-character video ID.
        config:   Per-call options.

    Returns:
        The parsed segments.  Each segment's lang is config.lang, or else the
        first player-API track's code.

    Raises:
        NoCaptionsError: On any failure in the pipeline, including an
            unavailable requested language.
    """
    try:
        return await _run(client, video_id, config)
    except REQUEST_ERRORS + (ValueError, TranscriptError) as exc:
        logger.debug("Player API fallback failed for %s: %r", video_id, exc)
        raise NoCaptionsError(video_id) from exc
