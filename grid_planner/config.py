"""Simple configuration loader for grid_planner."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import yaml


CONFIG_PATH = Path(__file__).resolve().parents[1] / "config.yaml"


@dataclass
class GridConfig:
    """Configuration values for the demo grid."""

    size: int = 21
    seed: Optional[int] = None
    obstacle_probability: Optional[float] = None


@dataclass
class SearchConfig:
    """Configuration for the planner itself."""

    max_expansions: Optional[int] = None


@dataclass
class LoggingConfig:
    """Log levels applied by :mod:`grid_planner.main`."""

    global_level: str = "INFO"
    module_levels: Dict[str, str] = field(default_factory=dict)


@dataclass
class Config:
    """Top level configuration dataclass."""

    grid: GridConfig
    search: SearchConfig
    logging: LoggingConfig


def _optional(value: Any, cast: Any) -> Any:
    return None if value is None else cast(value)


def _parse_config(data: dict[str, Any]) -> Config:
    """Convert raw ``data`` into :class:`Config`."""

    grid_data = data.get("grid", {}) or {}
    grid = GridConfig(
        size=int(grid_data.get("size", 21)),
        seed=_optional(grid_data.get("seed"), int),
        obstacle_probability=_optional(grid_data.get("obstacle_probability"), float),
    )

    search_data = data.get("search", {}) or {}
    search = SearchConfig(
        max_expansions=_optional(search_data.get("max_expansions"), int),
    )

    logging_data = data.get("logging", {}) or {}
    logging_cfg = LoggingConfig(
        global_level=str(logging_data.get("global_level", "INFO")).upper(),
        module_levels=dict(logging_data.get("module_levels") or {}),
    )

    return Config(grid=grid, search=search, logging=logging_cfg)


def load_config(path: Path = CONFIG_PATH) -> Config:
    """Load configuration from ``path`` and return a :class:`Config`."""

    path = Path(path)
    if path.is_file():
        raw = yaml.safe_load(path.read_text()) or {}
    else:
        raw = {}
    return _parse_config(raw)


# Load configuration at module import time.
CONFIG = load_config()


__all__ = [
    "CONFIG",
    "Config",
    "GridConfig",
    "LoggingConfig",
    "SearchConfig",
    "load_config",
]
