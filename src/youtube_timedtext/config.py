"""
config.py — Request configuration and fixed network constants.

YouTube varies the shape of its responses by client, so the User-Agent and
the player-API client name/version below are part of the wire contract, not
tuning knobs.  Tests override network behaviour by injecting an
httpx.AsyncClient with a mock transport rather than by patching these.
"""

from __future__ import annotations

from dataclasses import dataclass

import httpx

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

USER_AGENT = (
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_4) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/85.0.4183.83 Safari/537.36,gzip(gfe)"
)

SITE_ORIGIN = "https://www.youtube.com"
WATCH_URL = SITE_ORIGIN + "/watch?v={video_id}"
PLAYER_API_URL = SITE_ORIGIN + "/youtubei/v1/player"

# Client identity sent to the internal player API.
CLIENT_NAME = "WEB"
CLIENT_VERSION = "2.20241211.01.00"

# Markers searched for in the watch-page HTML.
CAPTIONS_MARKER = '"captions":'
VIDEO_DETAILS_MARKER = ',"videoDetails'
RECAPTCHA_MARKER = 'class="g-recaptcha"'
PLAYABILITY_MARKER = '"playabilityStatus":'

# No built-in timeout; callers wanting bounded latency inject their own client.
HTTP_TIMEOUT = None

# Failures raised by httpx while building or sending a request.  InvalidURL
# (e.g. a control character in a URL) is not an HTTPError subclass.
REQUEST_ERRORS = (httpx.HTTPError, httpx.InvalidURL)


# ---------------------------------------------------------------------------
# Per-call configuration
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class TranscriptConfig:
    """
    Options for a single fetch_transcript() call.

    Attributes:
        lang: Optional language code (e.g. "fr").  Selects the caption track
              by exact match, is echoed into every segment's `lang` field,
              and is sent as the Accept-Language header.
    """
    lang: str | None = None


# ---------------------------------------------------------------------------
# Header builders
# ---------------------------------------------------------------------------

def browser_headers(config: TranscriptConfig, referer: str | None = None) -> dict[str, str]:
    """Headers for GET requests that impersonate a desktop browser."""
    headers = {"User-Agent": USER_AGENT}
    if config.lang:
        headers["Accept-Language"] = config.lang
    if referer:
        headers["Referer"] = referer
    return headers


def player_api_headers(video_id: str) -> dict[str, str]:
    """Headers for the POST to the internal player API."""
    return {
        "Content-Type": "application/json",
        "User-Agent": USER_AGENT,
        "Referer": WATCH_URL.format(video_id=video_id),
        "Origin": SITE_ORIGIN,
    }


def player_api_payload(video_id: str) -> dict:
    """JSON body naming the web client and the requested video."""
    return {
        "context": {
            "client": {
                "clientName": CLIENT_NAME,
                "clientVersion": CLIENT_VERSION,
            },
        },
        "videoId": video_id,
    }
