"""
models.py — Data structures passed between the pipeline stages.

All dataclasses are frozen: a catalog or segment is created once per call and
never mutated afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CaptionTrack:
    """
    One language variant of a video's captions.

    Attributes:
        language_code: The track's language code as YouTube reports it
                       (e.g. "en", "pt-BR").
        base_url:      Opaque URL serving the track's timed-text document.
    """
    language_code: str
    base_url: str


@dataclass(frozen=True)
class CaptionCatalog:
    """
    Ordered list of caption tracks for one video.

    Order matters: the first track is the default when no language is
    requested.  `source` names the discovery path that produced the catalog
    ("watch_page" or "player_api"); catalogs from different paths are never
    merged.
    """
    tracks: tuple[CaptionTrack, ...]
    source: str

    @property
    def language_codes(self) -> list[str]:
        return [track.language_code for track in self.tracks]

    @property
    def default_track(self) -> CaptionTrack:
        return self.tracks[0]

    def find(self, language_code: str) -> CaptionTrack | None:
        """Return the first track whose code equals language_code exactly."""
        for track in self.tracks:
            if track.language_code == language_code:
                return track
        return None


@dataclass(frozen=True)
class TranscriptSegment:
    """
    A single caption cue.

    Attributes:
        text:     Cue text exactly as it appears in the document (entities
                  are not decoded).
        offset:   Start time in seconds.
        duration: Length in seconds.
        lang:     Requested language, or the code of the track actually used.
    """
    text: str
    offset: float
    duration: float
    lang: str | None = None

    def to_dict(self) -> dict:
        """Plain JSON-serialisable mapping of this segment."""
        return {
            "text": self.text,
            "offset": self.offset,
            "duration": self.duration,
            "lang": self.lang,
        }
