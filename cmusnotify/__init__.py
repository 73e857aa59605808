"""cmus-notify: desktop notifications for the track cmus is playing."""

from .formatter import Notification, format_notification
from .metadata import Metadata
from .metadata_parser import MetadataParsingError, parse

__version__ = "0.1.0"

__all__ = ["Metadata", "MetadataParsingError", "Notification", "format_notification", "parse"]
