"""State set by the global CLI options and read by config discovery."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass
class CliState:
    config_path: Path | None = None


_state = CliState()


def get_config_path() -> Path | None:
    """Config file given with ``--config``, if any."""
    return _state.config_path


def set_config_path(path: Path | None) -> None:
    _state.config_path = path
