"""
Location of the cmus remote-control socket.
"""

import os
import sys
from pathlib import Path
from typing import Mapping, Optional

LINUX_SOCKET_NAME = "cmus-socket"
MACOS_SOCKET_PATH = Path(".config") / "cmus" / "socket"


def resolve_socket_path(
    platform: str = sys.platform,
    environ: Optional[Mapping[str, str]] = None,
    home: Optional[Path] = None,
) -> Optional[Path]:
    """
    Return the socket cmus listens on for this platform.

    On macOS cmus keeps the socket under the user's config directory. Elsewhere
    it lives in the XDG runtime directory, and there is no socket to find when
    that directory is not set.
    """
    if environ is None:
        environ = os.environ

    if platform == "darwin":
        return (home or Path.home()) / MACOS_SOCKET_PATH

    runtime_dir = environ.get("XDG_RUNTIME_DIR")
    if not runtime_dir:
        return None
    return Path(runtime_dir) / LINUX_SOCKET_NAME
