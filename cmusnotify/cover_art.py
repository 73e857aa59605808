"""
Cover art lookup next to the playing track.
"""

from pathlib import Path
from typing import Optional, Sequence

from .metadata import Metadata
from .module_registry import module_registry

COVER_NAMES = ("cover.jpg", "cover.png")

log = module_registry.register_module(
    name="cover_art",
    description="Cover art discovery beside the current track",
    logger_name="cover_art",
    debug_flag="--debug-cover",
)


def resolve_cover(metadata: Metadata, names: Sequence[str] = COVER_NAMES) -> Optional[Path]:
    """
    Find a cover image in the directory of the current track.

    Names are tried in order and matched exactly; the first regular file wins.

    Args:
        metadata: Parsed status of the player
        names: File names to look for

    Returns:
        Path of the cover image, or None if there is no track or no cover
    """
    if not metadata.file:
        return None

    track = Path(metadata.file)
    directory = track.parent
    # Path("song.flac").parent is Path("."), not a real parent directory
    if directory == track or str(directory) == ".":
        log.debug("Track path has no parent directory: %s", metadata.file)
        return None

    for name in names:
        cover = directory / name
        if cover.is_file():
            log.debug("Found cover art: %s", cover)
            return cover

    log.debug("No cover art in %s", directory)
    return None
