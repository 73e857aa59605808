"""
Registry of notifier subsystems and their debug loggers.

Each subsystem registers a logger name and a ``--debug-*`` flag so the
command line can narrow DEBUG output to the parts of a run being inspected.
"""

import logging
from typing import Dict, Set


class ModuleRegistry:
    """Registry mapping subsystem names to loggers and debug flags."""

    def __init__(self):
        """Initialize an empty registry."""
        self._modules: Dict[str, dict] = {}

    def register_module(
        self,
        name: str,
        description: str,
        logger_name: str,
        debug_flag: str,
    ) -> logging.Logger:
        """Register a subsystem and return its logger.

        Registering the same name twice replaces the earlier entry.
        """
        logger = logging.getLogger(logger_name)
        self._modules[name] = {
            "description": description,
            "logger_name": logger_name,
            "debug_flag": debug_flag,
            "logger": logger,
        }
        return logger

    def get_module_info(self, name: str) -> dict:
        """Get information about a specific subsystem."""
        return self._modules.get(name, {})

    def get_debug_flags(self) -> Dict[str, str]:
        """Get mapping of debug CLI flags to subsystem names."""
        return {info["debug_flag"]: name for name, info in self._modules.items()}

    def get_logger_names(self, names: Set[str]) -> Set[str]:
        """Resolve subsystem names to the logger names they log under."""
        return {self._modules[name]["logger_name"] for name in names if name in self._modules}


# Global registry instance
module_registry = ModuleRegistry()
