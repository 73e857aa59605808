"""
Metadata record built from a single cmus status response.
"""

from dataclasses import dataclass
from typing import Optional

from .playback_status import PlaybackStatus, parse_playback_status

# Largest values the protocol fields may carry
MAX_TRACK_NUMBER = 0xFF
MAX_SECONDS = 0xFFFFFFFF


@dataclass(frozen=True)
class Metadata:
    """Immutable snapshot of what cmus reports as currently loaded.

    Empty strings and zeros mean the player did not report the field.
    """

    file: str = ""
    artist: str = ""
    album: str = ""
    title: str = ""
    tracknumber: int = 0
    discnumber: int = 0
    date: str = ""
    duration: int = 0
    position: int = 0
    status: str = ""

    def __post_init__(self):
        for name, limit in (
            ("tracknumber", MAX_TRACK_NUMBER),
            ("discnumber", MAX_TRACK_NUMBER),
            ("duration", MAX_SECONDS),
            ("position", MAX_SECONDS),
        ):
            value = getattr(self, name)
            if not 0 <= value <= limit:
                raise ValueError(f"{name} must be between 0 and {limit}, got {value}")

    @property
    def has_track(self) -> bool:
        return bool(self.file)

    @property
    def playback_status(self) -> Optional[PlaybackStatus]:
        return parse_playback_status(self.status)
