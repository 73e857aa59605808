"""
Configuration for the cmus notifier.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from .cover_art import COVER_NAMES
from .formatter import FALLBACK_TITLE
from .notifiers import DEFAULT_ICON
from .protocol import DEFAULT_BUFSIZE


@dataclass
class NotifierConfig:
    """Settings for a single notify run."""

    # Connection
    socket_path: Optional[str] = None
    recv_bufsize: int = DEFAULT_BUFSIZE

    # Presentation
    app_name: str = FALLBACK_TITLE
    not_running_message: str = "Not running"
    cover_names: Tuple[str, ...] = COVER_NAMES

    # Notification back end, None picks the platform default
    notifier: Optional[str] = None
    default_icon: str = DEFAULT_ICON

    # Global settings
    debug: bool = False
    log_level: str = "WARNING"

    @classmethod
    def create_default(cls) -> "NotifierConfig":
        """Create a default configuration instance."""
        return cls()

    @classmethod
    def create_for_testing(cls) -> "NotifierConfig":
        """Create a configuration suitable for testing."""
        config = cls()
        config.notifier = "stdout"
        config.debug = True
        config.log_level = "DEBUG"
        return config
