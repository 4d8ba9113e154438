"""Global defaults for workspace definitions."""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, ValidationError

from .atomic import atomic_write
from .workspace.models import Editor, Shell, Workspace
from .xdg import get_xdg_config_dir

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "config.json"


class Config(BaseModel):
    """workspacectl configuration."""

    model_config = ConfigDict(
        extra="allow",
        str_strip_whitespace=True,
    )

    terminal: str = "kitty"
    editor: Optional[Editor] = None
    shell: Optional[Shell] = None


def get_config_path() -> Path:
    return get_xdg_config_dir() / CONFIG_FILENAME


def load_config(path: Optional[Path] = None) -> Config:
    """Load configuration from JSON file.

    Args:
        path: Path to config.json file. If None, uses default path

    Returns:
        Config object with loaded settings. Returns default config if the file
        doesn't exist or cannot be loaded.
    """
    if path is None:
        path = get_config_path()

    if not path.exists():
        return Config()

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
        return Config.model_validate(data)
    except json.JSONDecodeError as e:
        logger.warning("Failed to parse config at %s: %s", path, e)
        return Config()
    except (OSError, UnicodeDecodeError, ValidationError) as e:
        logger.warning("Failed to load config from %s: %s", path, e)
        return Config()


def save_config(config: Config, path: Optional[Path] = None) -> None:
    """Save configuration to JSON file.

    Args:
        config: Config object to save
        path: Path to config.json file. If None, uses default path

    Raises:
        OSError: If file cannot be written
    """
    if path is None:
        path = get_config_path()

    path.parent.mkdir(parents=True, exist_ok=True)
    config_data = config.model_dump(exclude_none=True, mode="json")
    atomic_write(path, (json.dumps(config_data, indent=2) + "\n").encode("utf-8"), overwrite=True)


def _fill_defaults_value(value: Dict[str, Any], defaults: Dict[str, Any]) -> None:
    # Only mappings get merged, for anything else the value is left intact.
    for key, default in defaults.items():
        if key not in value:
            value[key] = default
        elif isinstance(value[key], dict) and isinstance(default, dict):
            _fill_defaults_value(value[key], default)


def fill_defaults(workspace: Workspace, config: Optional[Config] = None) -> Workspace:
    """Fill settings missing from a workspace with the global defaults.

    Args:
        workspace: Workspace definition
        config: Global config. If None, loads it from the default path

    Returns:
        New workspace with defaults applied and the same name
    """
    if config is None:
        config = load_config()

    defaults = config.model_dump(include={"editor", "shell"}, exclude_none=True, mode="json")
    data = workspace.to_body()
    _fill_defaults_value(data, defaults)

    merged = Workspace.model_validate(data)
    merged.name = workspace.name
    return merged
