"""
Desktop notification back ends.
"""

import subprocess
import sys
from pathlib import Path
from typing import List, Optional, TextIO

from .module_registry import module_registry

DEFAULT_ICON = "applications-multimedia"

log = module_registry.register_module(
    name="notify",
    description="Notification delivery",
    logger_name="notify",
    debug_flag="--debug-notify",
)


class Notifier:
    """Base class for anything that can show a title, message and icon."""

    name = "base"

    def notify(self, title: str, message: str, icon: Optional[Path] = None) -> bool:
        """Show a notification. Returns False if it could not be handed off."""
        raise NotImplementedError


class CommandNotifier(Notifier):
    """Notifier that spawns an external program and does not wait for it."""

    program = ""

    def build_command(self, title: str, message: str, icon: Optional[Path]) -> List[str]:
        raise NotImplementedError

    def notify(self, title: str, message: str, icon: Optional[Path] = None) -> bool:
        command = self.build_command(title, message, icon)
        log.debug("Running: %s", command)
        try:
            subprocess.Popen(command, stdout=subprocess.DEVNULL, stderr=subprocess.DEVNULL)
        except OSError as e:
            log.error("Failed to run %s: %s", self.program, e)
            return False
        return True


class NotifySendNotifier(CommandNotifier):
    """libnotify's notify-send, shown as a transient notification."""

    name = "notify-send"
    program = "notify-send"

    def __init__(self, default_icon: str = DEFAULT_ICON):
        self.default_icon = default_icon

    def build_command(self, title: str, message: str, icon: Optional[Path]) -> List[str]:
        return [
            self.program,
            "--hint=int:transient:1",
            "--icon",
            str(icon) if icon is not None else self.default_icon,
            title,
            message,
        ]


class TerminalNotifier(CommandNotifier):
    """terminal-notifier on macOS, grouped so a new track replaces the last one."""

    name = "terminal-notifier"
    program = "terminal-notifier"

    def build_command(self, title: str, message: str, icon: Optional[Path]) -> List[str]:
        command = [self.program, "-group", "cmus", "-title", title, "-message", message]
        if icon is not None:
            command.extend(["-appIcon", str(icon)])
        return command


class StdoutNotifier(Notifier):
    """Print notifications instead of showing them."""

    name = "stdout"

    def __init__(self, stream: Optional[TextIO] = None):
        self._stream = stream

    def notify(self, title: str, message: str, icon: Optional[Path] = None) -> bool:
        stream = self._stream or sys.stdout
        print(title, file=stream)
        print(message, file=stream)
        if icon is not None:
            print(f"icon: {icon}", file=stream)
        return True


def get_notifier(
    name: Optional[str] = None,
    platform: str = sys.platform,
    default_icon: str = DEFAULT_ICON,
) -> Notifier:
    """
    Create a notifier by name, or the platform default when name is None.

    Raises:
        ValueError: If the name is not a known notifier
    """
    if name is None:
        name = TerminalNotifier.name if platform == "darwin" else NotifySendNotifier.name

    if name == NotifySendNotifier.name:
        return NotifySendNotifier(default_icon)
    if name == TerminalNotifier.name:
        return TerminalNotifier()
    if name == StdoutNotifier.name:
        return StdoutNotifier()
    raise ValueError(f"Unknown notifier: {name}")
