"""
Configuration loader for the cmus notifier.

Supports loading configuration from a YAML file with environment variable overrides.
"""

import os
from pathlib import Path
from typing import Mapping, Optional

import yaml

from .config import NotifierConfig

CONFIG_DIR_NAME = "cmus-notify"
CONFIG_FILE_NAME = "config.yaml"

_STRING_KEYS = ("socket_path", "app_name", "not_running_message", "notifier", "default_icon", "log_level")


class ConfigError(Exception):
    """The configuration file or an override is invalid."""

    pass


def default_config_path(environ: Optional[Mapping[str, str]] = None) -> Path:
    """Return $XDG_CONFIG_HOME/cmus-notify/config.yaml, falling back to ~/.config."""
    if environ is None:
        environ = os.environ
    base = environ.get("XDG_CONFIG_HOME") or str(Path.home() / ".config")
    return Path(base) / CONFIG_DIR_NAME / CONFIG_FILE_NAME


def load_config(config_path: Optional[str] = None, environ: Optional[Mapping[str, str]] = None) -> NotifierConfig:
    """
    Load configuration from file with environment variable overrides.

    Args:
        config_path: Path to YAML config file. Defaults to the XDG config location,
            which is skipped silently when it does not exist
        environ: Environment to read overrides from, defaults to os.environ

    Returns:
        NotifierConfig instance with loaded settings

    Raises:
        ConfigError: If an explicit file is missing or any file is invalid
    """
    if environ is None:
        environ = os.environ

    config = NotifierConfig.create_default()

    if config_path is not None:
        path = Path(config_path)
        if not path.exists():
            raise ConfigError(f"Config file not found: {path}")
    else:
        path = default_config_path(environ)

    if path.exists():
        apply_file(config, path)

    apply_env_overrides(config, environ)
    return config


def apply_file(config: NotifierConfig, path: Path) -> None:
    """Apply settings from a YAML file to the configuration."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            config_data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"Could not load config from {path}: {e}") from e

    if config_data is None:
        return
    if not isinstance(config_data, dict):
        raise ConfigError(f"Config file {path} must contain a mapping")

    for key in _STRING_KEYS:
        if key in config_data:
            value = config_data[key]
            if value is not None and not isinstance(value, str):
                raise ConfigError(f"{key} must be a string")
            setattr(config, key, value)

    if "recv_bufsize" in config_data:
        bufsize = config_data["recv_bufsize"]
        if not isinstance(bufsize, int) or isinstance(bufsize, bool) or bufsize <= 0:
            raise ConfigError("recv_bufsize must be a positive integer")
        config.recv_bufsize = bufsize

    if "cover_names" in config_data:
        names = config_data["cover_names"]
        if not isinstance(names, list) or not all(isinstance(n, str) and n for n in names):
            raise ConfigError("cover_names must be a list of file names")
        config.cover_names = tuple(names)

    if "debug" in config_data:
        config.debug = bool(config_data["debug"])

    if config.log_level:
        config.log_level = config.log_level.upper()


def apply_env_overrides(config: NotifierConfig, environ: Optional[Mapping[str, str]] = None) -> None:
    """Apply environment variable overrides to configuration."""
    if environ is None:
        environ = os.environ

    if environ.get("CMUS_NOTIFY_SOCKET"):
        config.socket_path = environ["CMUS_NOTIFY_SOCKET"]

    if environ.get("CMUS_NOTIFY_APP_NAME"):
        config.app_name = environ["CMUS_NOTIFY_APP_NAME"]

    if environ.get("CMUS_NOTIFY_NOTIFIER"):
        config.notifier = environ["CMUS_NOTIFY_NOTIFIER"]

    # Global settings
    if environ.get("DEBUG"):
        config.debug = environ["DEBUG"].lower() in ("true", "1", "yes")

    if environ.get("LOG_LEVEL"):
        config.log_level = environ["LOG_LEVEL"].upper()
