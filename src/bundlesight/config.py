"""
Global Configuration and Defaults.

Centralizes the viewer defaults and loads an optional YAML config file so
teams can check in their usual filters next to the build.
"""

import logging
from pathlib import Path
from typing import List, Tuple

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from .core.exceptions import ConfigError

logger = logging.getLogger(__name__)

# --- Viewer Defaults ---
# Assets smaller than this are hidden from listings
DEFAULT_MIN_SIZE_KB = 1.0

# Decimal places used when formatting byte sizes
DEFAULT_DECIMALS = 2

# Rows shown in summaries
DEFAULT_TOP = 10

DEFAULT_EXPORT_FILENAME = "bundlesight-report.json"

# Looked up in the working directory when no --config is given
CONFIG_FILENAMES: Tuple[str, ...] = (".bundlesight.yaml", "bundlesight.yaml")


class ViewerConfig(BaseModel):
    """User-tunable display settings."""
    min_size_kb: float = Field(default=DEFAULT_MIN_SIZE_KB, ge=0)
    exclude_patterns: List[str] = Field(default_factory=list)
    decimals: int = Field(default=DEFAULT_DECIMALS, ge=0)
    top: int = Field(default=DEFAULT_TOP, ge=1)

    @field_validator("exclude_patterns", mode="before")
    @classmethod
    def _split_patterns(cls, value):
        if value is None:
            return []
        if isinstance(value, str):
            return [p.strip() for p in value.split(",") if p.strip()]
        return value

    @property
    def min_size_bytes(self) -> float:
        return self.min_size_kb * 1024

    @property
    def exclude_string(self) -> str:
        return ",".join(self.exclude_patterns)


def find_config_file(root: Path) -> Path | None:
    for name in CONFIG_FILENAMES:
        candidate = root / name
        if candidate.is_file():
            return candidate
    return None


def load_config(path: Path | str | None = None, root: Path | None = None) -> ViewerConfig:
    """
    Load viewer settings.

    Args:
        path: Explicit config file. Must exist if given.
        root: Directory searched for a default config file when ``path`` is None.

    Raises:
        ConfigError: If the file is missing (explicit path), unparsable or invalid.
    """
    if path is not None:
        config_path = Path(path)
        if not config_path.is_file():
            raise ConfigError(f"Config file not found: {config_path}")
    else:
        config_path = find_config_file(root or Path.cwd())
        if config_path is None:
            return ViewerConfig()

    logger.debug(f"Loading config from {config_path}")
    try:
        data = yaml.safe_load(config_path.read_text()) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {config_path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"{config_path} must contain a mapping")

    try:
        return ViewerConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid settings in {config_path}: {e}") from e
