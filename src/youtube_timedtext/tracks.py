"""
tracks.py — Choose one caption track from a catalog.
"""

from __future__ import annotations

import logging

from youtube_timedtext.config import TranscriptConfig
from youtube_timedtext.errors import LanguageNotAvailableError
from youtube_timedtext.models import CaptionCatalog, CaptionTrack

logger = logging.getLogger(__name__)


def select_track(
    catalog: CaptionCatalog,
    config: TranscriptConfig,
    video_id: str,
) -> CaptionTrack:
    """
    Pick the track matching config.lang, or the catalog's first track.

    Language matching is exact and case-sensitive; there is no fallback from
    a regional code ("en-US") to its base language ("en").

    Raises:
        LanguageNotAvailableError: config.lang is set and no track has it.
    """
    if not config.lang:
        return catalog.default_track

    track = catalog.find(config.lang)
    if track is None:
        raise LanguageNotAvailableError(config.lang, catalog.language_codes, video_id)

    logger.debug("Selected %s track for %s", track.language_code, video_id)
    return track
