"""
Playback status values reported by the cmus ``status`` record.
"""

from enum import Enum
from typing import Optional

from .module_registry import module_registry

log = module_registry.register_module(
    name="status",
    description="Playback status interpretation",
    logger_name="playback_status",
    debug_flag="--debug-status",
)


class PlaybackStatus(Enum):
    """Statuses cmus is known to report."""

    PLAYING = "playing"
    PAUSED = "paused"
    STOPPED = "stopped"


def parse_playback_status(status_str: str) -> Optional[PlaybackStatus]:
    """
    Parse a status string into a PlaybackStatus enum.

    Args:
        status_str: Value of the ``status`` record

    Returns:
        PlaybackStatus enum or None for empty or player-defined values
    """
    try:
        return PlaybackStatus(status_str)
    except ValueError:
        if status_str:
            log.debug("Unknown playback status: %s", status_str)
        return None
