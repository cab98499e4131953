"""wsexport configuration management."""

import json
import logging
from pathlib import Path
from typing import Callable, List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .archive import DEFAULT_COMPRESSION_LEVEL
from .walker import DEFAULT_EXCLUDE_DIRS
from .xdg import get_xdg_config_path

logger = logging.getLogger(__name__)

DEFAULT_ARCHIVE_NAME = "project.zip"


class ExportConfig(BaseModel):
    """Export settings."""

    model_config = ConfigDict(
        extra="allow",
        str_strip_whitespace=True,
        validate_assignment=True,
    )

    exclude_dirs: List[str] = Field(default_factory=lambda: list(DEFAULT_EXCLUDE_DIRS))
    compression_level: int = Field(default=DEFAULT_COMPRESSION_LEVEL, ge=0, le=9)
    archive_name: str = DEFAULT_ARCHIVE_NAME


def get_config_path() -> Path:
    return get_xdg_config_path("config.json")


def load_config(path: Optional[Path] = None) -> ExportConfig:
    """Load export configuration from a JSON file.

    Args:
        path: Path to config.json file. If None, uses default path

    Returns:
        ExportConfig with loaded settings. Returns defaults if the file doesn't
        exist or can't be parsed.
    """
    if path is None:
        path = get_config_path()

    if not path.exists():
        return ExportConfig()

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
        return ExportConfig.model_validate(data)

    except json.JSONDecodeError as e:
        logger.warning("Failed to parse config at %s: %s", path, e)
        return ExportConfig()
    except (OSError, ValidationError) as e:
        logger.warning("Failed to load config from %s: %s", path, e)
        return ExportConfig()


def save_config(config: ExportConfig, path: Optional[Path] = None) -> None:
    """Save export configuration to a JSON file.

    Args:
        config: ExportConfig to save
        path: Path to config.json file. If None, uses default path

    Raises:
        IOError: If file cannot be written
    """
    if path is None:
        path = get_config_path()

    path.parent.mkdir(parents=True, exist_ok=True)

    with open(path, "w", encoding="utf-8") as f:
        json.dump(config.model_dump(mode="json"), f, indent=2)


def update_config(path: Optional[Path], mutator: Callable[[ExportConfig], None]) -> ExportConfig:
    """Load config, apply ``mutator`` to it, and save it back.

    Returns:
        The updated config
    """
    config = load_config(path)
    mutator(config)
    save_config(config, path)
    return config
