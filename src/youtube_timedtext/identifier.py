"""
identifier.py — Resolve a URL or bare ID into a canonical YouTube video ID.
"""

from __future__ import annotations

import logging
import re

from youtube_timedtext.errors import InvalidIdentifierError

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

VIDEO_ID_LENGTH = 11

# Covers the known YouTube URL shapes:
#   - https://www.youtube.com/watch?v=VIDEO_ID   (v= anywhere in the query)
#   - https://www.youtube.com/embed/VIDEO_ID
#   - https://www.youtube.com/v/VIDEO_ID
#   - https://www.youtube.com/e/VIDEO_ID
#   - https://youtu.be/VIDEO_ID
#   - https://www.youtube.com/<segment>/<anything>/VIDEO_ID
# Group 1 is the 11-character ID; it may not contain " & ? / or whitespace.
_YOUTUBE_URL = re.compile(
    r"(?:youtube\.com/(?:[^/]+/.+/|(?:v|e(?:mbed)?)/|.*[?&]v=)|youtu\.be/)"
    r"([^\"&?/\s]{11})",
    re.IGNORECASE,
)


def resolve_video_id(value: str) -> str:
    """
    Return the 11-character video ID for a URL or bare ID.

    An input that is exactly 11 characters long is taken to be an ID already
    and returned unchanged; its characters are not validated.

    Args:
        value: A YouTube URL or a raw video ID.

    Returns:
        The 11-character video ID.

    Raises:
        InvalidIdentifierError: If no ID can be derived from the input.
    """
    if len(value) == VIDEO_ID_LENGTH:
        return value

    match = _YOUTUBE_URL.search(value)
    if match:
        logger.debug("Resolved video ID %s from %r", match.group(1), value)
        return match.group(1)

    raise InvalidIdentifierError(value)
