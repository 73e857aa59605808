#!/usr/bin/env python3
"""Command-line entry point for cmus-notify."""

import argparse
import logging
import sys
from typing import List, Optional, Set

from .app import run
from .config_loader import ConfigError, load_config
from .metadata_parser import MetadataParsingError
from .module_registry import module_registry
from .notifiers import get_notifier
from .protocol import ProtocolError

LOG_FORMAT = "%(asctime)s [%(levelname)s] [%(name)s] %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
HANDLER_NAME = "cmus-notify"

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_CONFIG = 2

log = module_registry.register_module(
    name="cli",
    description="Command line handling and configuration loading",
    logger_name="cli",
    debug_flag="--debug-cli",
)


class DebugLogFilter(logging.Filter):
    """Custom filter for controlling debug message visibility by subsystem."""

    def __init__(self, logger_names: Optional[Set[str]] = None):
        """Initialize filter with allowed loggers.

        Args:
            logger_names: Logger names to show debug messages for.
                          If None, show all debug messages.
        """
        super().__init__()
        self.logger_names = logger_names

    def filter(self, record):
        """Filter log records based on subsystem and level."""
        # Always allow non-debug messages
        if record.levelno != logging.DEBUG:
            return True

        if self.logger_names is None:
            return True

        return record.name in self.logger_names


def setup_logging(level: str = "WARNING", debug_subsystems: Optional[Set[str]] = None, debug: bool = False) -> None:
    """
    Send log output to stderr.

    Args:
        level: Level name used when no debug output is requested
        debug_subsystems: Registry names whose DEBUG records should be shown
        debug: Show DEBUG records from every subsystem
    """
    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT))

    root_logger = logging.getLogger()
    for existing in list(root_logger.handlers):
        if existing.get_name() == HANDLER_NAME:
            root_logger.removeHandler(existing)

    if debug or debug_subsystems:
        root_logger.setLevel(logging.DEBUG)
        if not debug:
            handler.addFilter(DebugLogFilter(module_registry.get_logger_names(debug_subsystems)))
    else:
        root_logger.setLevel(getattr(logging, level.upper(), logging.WARNING))

    root_logger.addHandler(handler)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cmus-notify",
        description="Show a desktop notification for the track cmus is playing",
    )
    parser.add_argument("--socket", help="Path to the cmus socket (default: platform location)")
    parser.add_argument("--config", help="YAML config file (default: $XDG_CONFIG_HOME/cmus-notify/config.yaml)")
    parser.add_argument(
        "--notifier",
        choices=["notify-send", "terminal-notifier", "stdout"],
        help="Notification back end (default: platform default)",
    )
    parser.add_argument("--print", action="store_true", help="Print the notification instead of showing it")
    parser.add_argument("--debug", action="store_true", help="Show debug output from every subsystem")

    for flag, name in sorted(module_registry.get_debug_flags().items()):
        info = module_registry.get_module_info(name)
        parser.add_argument(
            flag,
            dest=f"debug_subsystem_{name}",
            action="store_true",
            help=f"Show debug output for: {info['description']}",
        )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Provide the main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    debug_subsystems = {
        name for name in module_registry.get_debug_flags().values() if getattr(args, f"debug_subsystem_{name}", False)
    }

    try:
        config = load_config(args.config)
    except ConfigError as e:
        setup_logging(debug=args.debug)
        log.error("%s", e)
        return EXIT_CONFIG

    if args.socket:
        config.socket_path = args.socket
    if args.print:
        config.notifier = "stdout"
    elif args.notifier:
        config.notifier = args.notifier

    setup_logging(config.log_level, debug_subsystems, debug=args.debug or config.debug)

    try:
        notifier = get_notifier(config.notifier, default_icon=config.default_icon)
    except ValueError as e:
        log.error("%s", e)
        return EXIT_CONFIG

    try:
        result = run(config, notifier)
    except ProtocolError as e:
        log.error("Error talking to cmus: %s", e)
        return EXIT_FAILURE
    except MetadataParsingError as e:
        log.error("Malformed status response from cmus: %s", e)
        return EXIT_FAILURE

    log.debug("Run finished: %s", result.value)
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
