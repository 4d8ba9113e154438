"""XDG Base Directory utilities for the workspace and cache directories."""

import os
from pathlib import Path

APP_NAME = "workspacectl"


def get_xdg_config_dir() -> Path:
    """Get the directory holding workspace definitions and config.json.

    Uses XDG Base Directory specification for config:
    - $XDG_CONFIG_HOME/workspacectl (if XDG_CONFIG_HOME is set)
    - ~/.config/workspacectl (XDG default)

    Returns:
        Path to config directory
    """
    xdg_config = os.environ.get("XDG_CONFIG_HOME") or str(Path.home() / ".config")
    return Path(xdg_config) / APP_NAME


def get_xdg_cache_dir() -> Path:
    """Get XDG-compliant cache directory path.

    Uses XDG Base Directory specification for cache:
    - $XDG_CACHE_HOME/workspacectl (if XDG_CACHE_HOME is set)
    - ~/.cache/workspacectl (XDG default)

    Returns:
        Path to cache directory
    """
    xdg_cache = os.environ.get("XDG_CACHE_HOME") or str(Path.home() / ".cache")
    return Path(xdg_cache) / APP_NAME
