"""
Notification text derived from a Metadata record.
"""

from typing import NamedTuple, Optional

from .metadata import Metadata
from .playback_status import PlaybackStatus

FALLBACK_TITLE = "C* Music Player"

_STATUS_SUFFIXES = {
    PlaybackStatus.PLAYING: "",
    PlaybackStatus.PAUSED: " [Paused]",
    PlaybackStatus.STOPPED: " [Stopped]",
}


class Notification(NamedTuple):
    """Summary and body handed to a notifier."""

    title: str
    message: str


def format_time(seconds: int) -> str:
    """Render seconds as MM:SS, or HH:MM:SS from one hour upwards."""
    if seconds < 0:
        raise ValueError(f"seconds must be non-negative, got {seconds}")

    minutes, seconds = divmod(seconds, 60)
    hours = 0
    if minutes >= 60:
        hours, minutes = divmod(minutes, 60)

    if hours:
        return f"{hours:02d}:{minutes:02d}:{seconds:02d}"
    return f"{minutes:02d}:{seconds:02d}"


def get_title(metadata: Metadata, app_name: str = FALLBACK_TITLE) -> str:
    """Return "artist - title", or the application name when either tag is missing."""
    if metadata.artist and metadata.title:
        return f"{metadata.artist} - {metadata.title}"
    return app_name


def get_status_suffix(metadata: Metadata) -> str:
    status = metadata.playback_status
    if status is None:
        return ""
    return _STATUS_SUFFIXES[status]


def get_track_label(metadata: Metadata) -> str:
    if metadata.tracknumber == 0:
        return ""
    if metadata.discnumber > 0:
        return f"disc {metadata.discnumber}, track {metadata.tracknumber}"
    return f"track {metadata.tracknumber}"


def get_duration_label(metadata: Metadata) -> Optional[str]:
    """
    Return "position / duration", just the duration, or None.

    A zero duration means cmus has no length for the track, so no label is
    produced whatever the position is.
    """
    if metadata.duration == 0:
        return None

    if metadata.position > 0:
        return f"{format_time(metadata.position)} / {format_time(metadata.duration)}"
    return format_time(metadata.duration)


def get_message(metadata: Metadata) -> str:
    body = f"{metadata.album}{get_status_suffix(metadata)}\n{get_track_label(metadata)}"

    duration = get_duration_label(metadata)
    if duration is not None:
        body += f", {duration}"

    return body


def format_notification(metadata: Metadata, app_name: str = FALLBACK_TITLE) -> Notification:
    """Build the title and message shown for the given metadata."""
    return Notification(title=get_title(metadata, app_name), message=get_message(metadata))
