"""XDG Base Directory utilities for config file management."""

import os
from pathlib import Path

APP_DIR_NAME = "wsexport"


def get_xdg_config_path(filename: str) -> Path:
    """Get XDG-compliant config file path.

    Checks locations in order of precedence:
    1. $XDG_CONFIG_HOME/wsexport/{filename} (if XDG_CONFIG_HOME is set)
    2. ~/.config/wsexport/{filename} (XDG default)

    Returns the first existing file, or the preferred location for new files.

    Args:
        filename: Name of the config file (e.g., "config.json")

    Returns:
        Path to config file
    """
    xdg_config = os.environ.get("XDG_CONFIG_HOME")
    if xdg_config:
        xdg_path = Path(xdg_config) / APP_DIR_NAME / filename
        if xdg_path.exists():
            return xdg_path

    default_path = Path.home() / ".config" / APP_DIR_NAME / filename
    if default_path.exists():
        return default_path

    if xdg_config:
        return Path(xdg_config) / APP_DIR_NAME / filename
    return default_path
