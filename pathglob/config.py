"""Configuration module for pathglob.

This module provides access to user configuration stored in one of these locations:
1. $PATHGLOB_CONFIG_DIR/pathglobrc if $PATHGLOB_CONFIG_DIR is defined
2. $XDG_CONFIG_HOME/pathglob/pathglobrc if $XDG_CONFIG_HOME is defined
3. $HOME/.pathglobrc

The configuration is stored in TOML format, for example::

    [logger]
    verbosity = "DEBUG"

    [match]
    case_sensitive = false
"""

import copy
import logging
import os
from pathlib import Path
from typing import Any

import tomli

from .options import Options

__all__ = [
    "get_config_path",
    "load_config",
    "get_logger_verbosity",
    "get_logger_path",
    "get_default_options",
]

# Default configuration values
DEFAULT_CONFIG: dict[str, Any] = {
    "logger": {
        "verbosity": "INFO",
        "path": None,  # $HOME/.pathglob when unset
    },
    "match": {
        "case_sensitive": True,
        "require_literal_separator": True,
        "require_literal_leading_dot": False,
    },
}


def get_config_path() -> Path:
    """Return the path to the user's config file.

    Checks the following locations in order:
    1. $PATHGLOB_CONFIG_DIR/pathglobrc if $PATHGLOB_CONFIG_DIR is defined
    2. $XDG_CONFIG_HOME/pathglob/pathglobrc if $XDG_CONFIG_HOME is defined
    3. Fallback to $HOME/.pathglobrc

    Returns:
        Path to the config file
    """
    if "PATHGLOB_CONFIG_DIR" in os.environ:
        path = Path(os.environ["PATHGLOB_CONFIG_DIR"]) / "pathglobrc"
        if path.exists():
            return path

    if "XDG_CONFIG_HOME" in os.environ:
        path = Path(os.environ["XDG_CONFIG_HOME"]) / "pathglob" / "pathglobrc"
        if path.exists():
            return path

    return Path.home() / ".pathglobrc"


def load_config() -> dict[str, Any]:
    """Load configuration from the config file.

    Returns:
        Dict containing the merged configuration (defaults + user config).
    """
    config = copy.deepcopy(DEFAULT_CONFIG)
    config_path = get_config_path()

    if config_path.exists():
        try:
            with open(config_path, "rb") as f:
                user_config = tomli.load(f)

            _merge_configs(config, user_config)
        except (OSError, tomli.TOMLDecodeError) as e:
            logging.warning(f"Error loading config from {config_path}: {e}")

    return config


def _merge_configs(base: dict[str, Any], override: dict[str, Any]) -> None:
    """Recursively merge override dict into base dict."""
    for key, value in override.items():
        if key in base and isinstance(base[key], dict) and isinstance(value, dict):
            nested_value: dict[str, Any] = value
            _merge_configs(base[key], nested_value)
        else:
            base[key] = value


def get_logger_verbosity() -> str:
    """Get the configured logger verbosity level.

    Returns:
        String representing the logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
    """
    return str(load_config()["logger"]["verbosity"])


def get_logger_path() -> str:
    """Get the directory log files are written to."""
    path = load_config()["logger"]["path"]
    if not path:
        return str(Path.home() / ".pathglob")
    return str(Path(path).expanduser())


def get_default_options() -> Options:
    """Build matching options from the ``[match]`` table.

    Returns:
        Options with the user's defaults applied
    """
    match = load_config()["match"]
    return Options(
        case_sensitive=bool(match["case_sensitive"]),
        require_literal_separator=bool(match["require_literal_separator"]),
        require_literal_leading_dot=bool(match["require_literal_leading_dot"]),
    )
