"""Unified configuration loader.

A single ``construction_config.yaml`` file holds the scheduler and report
settings::

    scheduler:
      strategy: topological
    report:
      time_unit: days
      bar_char: "#"
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field
from pydantic import ValidationError as PydanticValidationError

from . import context
from .report import ReportConfig
from .scheduler import SchedulingConfig

CONFIG_FILENAME = "construction_config.yaml"


class UnifiedConfig(BaseModel):
    """Unified configuration for scheduling and reporting."""

    scheduler: SchedulingConfig = Field(default_factory=SchedulingConfig)
    report: ReportConfig = Field(default_factory=ReportConfig)


def load_unified_config(config_path: Path | str) -> UnifiedConfig:
    """Load unified configuration from a YAML file.

    Raises:
        FileNotFoundError: If the config file doesn't exist
        ValueError: If the config is empty or invalid
    """
    config_path = Path(config_path)

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with config_path.open(encoding="utf-8") as f:
        try:
            data: Any = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Failed to parse config {config_path}: {e}") from e

    if not data:
        raise ValueError("Empty configuration file")
    if not isinstance(data, dict):
        raise ValueError("Config must contain a mapping at the root level")

    unknown = set(data) - set(UnifiedConfig.model_fields)
    if unknown:
        raise ValueError(f"Unknown config sections: {', '.join(sorted(unknown))}")

    try:
        return UnifiedConfig.model_validate(data)
    except PydanticValidationError as e:
        raise ValueError(f"Invalid config {config_path}: {e}") from e


def discover_config(
    task_file: Path | None = None,
    config_path: Path | None = None,
) -> UnifiedConfig:
    """Find and load the unified config, falling back to defaults.

    Search order:
    1. Explicit config_path argument
    2. Global context (set via CLI --config)
    3. task file directory / construction_config.yaml
    4. Current directory / construction_config.yaml
    """
    explicit = config_path or context.get_config_path()
    if explicit:
        # An explicitly requested file must exist
        return load_unified_config(explicit)

    candidates: list[Path] = []
    if task_file is not None:
        candidates.append(Path(task_file).parent / CONFIG_FILENAME)
    candidates.append(Path(CONFIG_FILENAME))

    for candidate in candidates:
        if candidate.exists():
            return load_unified_config(candidate)

    return UnifiedConfig()
