"""Configuration loader for the task list.

A single optional YAML file (colortasks.yaml) controls the palette offered
to the user, the color a new draft starts with, the hue slider geometry and
whether the list is shown sorted by time.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, field_validator

from .colors import DEFAULT_COLOR, DEFAULT_PALETTE, normalize_hex

CONFIG_FILENAME = "colortasks.yaml"
DEFAULT_SLIDER_MAX = 300

# Set once by the CLI --config option
_selected_path: Path | None = None


class TaskListConfig(BaseModel):
    """Settings for one task list session."""

    palette: list[str] = Field(default_factory=lambda: list(DEFAULT_PALETTE))
    default_color: str = DEFAULT_COLOR
    slider_max: float = DEFAULT_SLIDER_MAX  # Width of the hue slider track
    sort_by_time: bool = False  # Show tasks by time of day instead of insertion order

    @field_validator("palette")
    @classmethod
    def _check_palette(cls, value: list[str]) -> list[str]:
        if not value:
            raise ValueError("palette must contain at least one color")
        return [normalize_hex(c) for c in value]

    @field_validator("default_color")
    @classmethod
    def _check_default_color(cls, value: str) -> str:
        return normalize_hex(value)

    @field_validator("slider_max")
    @classmethod
    def _check_slider_max(cls, value: float) -> float:
        if value <= 0:
            raise ValueError(f"slider_max must be positive, got {value}")
        return value


def load_config(config_path: Path | str) -> TaskListConfig:
    """Load configuration from a YAML file.

    Args:
        config_path: Path to colortasks.yaml

    Returns:
        Validated TaskListConfig

    Raises:
        FileNotFoundError: If config file doesn't exist
        ValueError: If config is empty, not a mapping, or invalid
    """
    config_path = Path(config_path)

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with config_path.open() as f:
        data: Any = yaml.safe_load(f)

    if not data:
        raise ValueError("Empty configuration file")
    if not isinstance(data, dict):
        raise ValueError("Config must be a mapping of settings")

    return TaskListConfig.model_validate(data)


def discover_config(config_path: Path | None = None) -> TaskListConfig:
    """Find and load configuration, falling back to defaults.

    Search order:
    1. Explicit config_path argument
    2. Path chosen with select_config_path() (the CLI --config option)
    3. Current directory / colortasks.yaml
    """
    if config_path is not None:
        return load_config(config_path)

    if _selected_path is not None:
        return load_config(_selected_path)

    cwd_config = Path(CONFIG_FILENAME)
    if cwd_config.exists():
        return load_config(cwd_config)

    return TaskListConfig()


def select_config_path(path: Path | None) -> None:
    """Make ``discover_config`` load ``path`` when no explicit path is given."""
    global _selected_path
    _selected_path = path
