"""
captions.py — Locate the caption-track catalog on a video's watch page.

The watch page embeds the player response as JSON inside the HTML.  We don't
parse the HTML; we split the body on the `"captions":` key and decode the
object that follows it.  When that key is missing, the page itself tells us
why: a CAPTCHA form means we're rate-limited, a missing playability status
means the video is gone, and otherwise the video simply has no captions.

Failures are split into two groups:
    - Page classification errors (TooManyRequests, VideoUnavailable,
      CaptionsDisabled) propagate as-is.
    - Transport and JSON errors are logged and downgraded to "no renderer",
      which build_catalog() turns into CaptionsDisabledError.
"""

from __future__ import annotations

import json
import logging
import re

import httpx

from youtube_timedtext.config import (
    CAPTIONS_MARKER,
    PLAYABILITY_MARKER,
    RECAPTCHA_MARKER,
    REQUEST_ERRORS,
    VIDEO_DETAILS_MARKER,
    WATCH_URL,
    TranscriptConfig,
    browser_headers,
)
from youtube_timedtext.errors import (
    CaptionsDisabledError,
    NoCaptionsError,
    TooManyRequestsError,
    VideoUnavailableError,
)
from youtube_timedtext.models import CaptionCatalog, CaptionTrack

logger = logging.getLogger(__name__)

# Last-resort pattern used when the marker-delimited slice isn't valid JSON.
# Only matches a flat (brace-free) object.
_CAPTIONS_OBJECT = re.compile(r'"captions":\s*({[^}]+})')

_RENDERER_KEY = "playerCaptionsTracklistRenderer"


# ---------------------------------------------------------------------------
# Page parsing
# ---------------------------------------------------------------------------

def _decode_captions(page: str, after_marker: str) -> object | None:
    """Decode the captions object, falling back to the permissive pattern."""
    candidate = after_marker.split(VIDEO_DETAILS_MARKER)[0].replace("\n", "")
    try:
        return json.loads(candidate)
    except ValueError:
        pass

    match = _CAPTIONS_OBJECT.search(page)
    if match is None:
        return None
    try:
        return json.loads(match.group(1))
    except ValueError:
        return None


def read_tracklist_renderer(page: str, video_id: str) -> dict | None:
    """
    Extract the `playerCaptionsTracklistRenderer` object from a watch page.

    Args:
        page:     The watch-page HTML.
        video_id: Used only for error messages.

    Returns:
        The renderer dict, or None if the captions JSON couldn't be decoded
        or doesn't contain a renderer.

    Raises:
        TooManyRequestsError:   The page is a CAPTCHA challenge.
        VideoUnavailableError:  The page has no playability status.
        CaptionsDisabledError:  The page has no captions key at all.
    """
    parts = page.split(CAPTIONS_MARKER)
    if len(parts) <= 1:
        if RECAPTCHA_MARKER in page:
            raise TooManyRequestsError(video_id)
        if PLAYABILITY_MARKER not in page:
            raise VideoUnavailableError(video_id)
        raise CaptionsDisabledError(video_id)

    captions = _decode_captions(page, parts[1])
    if not isinstance(captions, dict):
        logger.warning("Could not decode captions JSON on watch page for %s", video_id)
        return None

    renderer = captions.get(_RENDERER_KEY)
    return renderer if isinstance(renderer, dict) else None


# ---------------------------------------------------------------------------
# Catalog construction
# ---------------------------------------------------------------------------

def build_catalog(renderer: dict | None, video_id: str, source: str) -> CaptionCatalog:
    """
    Turn a tracklist renderer into an ordered CaptionCatalog.

    Entries that aren't objects with a string `baseUrl` are skipped.

    Raises:
        CaptionsDisabledError: renderer is None.
        NoCaptionsError:       The renderer has no usable caption tracks.
    """
    if renderer is None:
        raise CaptionsDisabledError(video_id)

    raw_tracks = renderer.get("captionTracks")
    if not isinstance(raw_tracks, list):
        raise NoCaptionsError(video_id)

    tracks = tuple(
        CaptionTrack(
            language_code=entry.get("languageCode") or "",
            base_url=entry["baseUrl"],
        )
        for entry in raw_tracks
        if isinstance(entry, dict) and isinstance(entry.get("baseUrl"), str)
    )
    if not tracks:
        raise NoCaptionsError(video_id)

    return CaptionCatalog(tracks=tracks, source=source)


async def locate_captions(
    client: httpx.AsyncClient,
    video_id: str,
    config: TranscriptConfig,
) -> CaptionCatalog:
    """
    Fetch the watch page and build the caption catalog from it.

    Args:
        client:   HTTP client used for the page request.
        video_id: The 11-character video ID.
        config:   Per-call options (the language sets Accept-Language).

    Returns:
        The catalog, with source="watch_page".

    Raises:
        TooManyRequestsError, VideoUnavailableError, CaptionsDisabledError,
        NoCaptionsError: see read_tracklist_renderer() and build_catalog().
    """
    url = WATCH_URL.format(video_id=video_id)
    renderer: dict | None
    try:
        response = await client.get(url, headers=browser_headers(config))
    except REQUEST_ERRORS as exc:
        logger.warning("Watch page request failed for %s: %s", video_id, exc)
        renderer = None
    else:
        renderer = read_tracklist_renderer(response.text, video_id)

    catalog = build_catalog(renderer, video_id, source="watch_page")
    logger.debug(
        "Found %d caption track(s) for %s: %s",
        len(catalog.tracks), video_id, ", ".join(catalog.language_codes),
    )
    return catalog
