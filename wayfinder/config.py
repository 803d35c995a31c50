"""Simple configuration loader for wayfinder."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict

import yaml

from .pathfinding.heuristics import HEURISTICS


CONFIG_PATH = Path(__file__).resolve().parents[1] / "config.yaml"

# Pick an admissible heuristic from the move set (grids) or fall back to zero.
AUTO_HEURISTIC = "auto"


@dataclass
class PathfindingConfig:
    """Defaults used when building grid graphs and choosing heuristics."""

    heuristic: str = AUTO_HEURISTIC
    diagonal: bool = False
    straight_cost: float = 1.0
    diagonal_cost: float = math.sqrt(2)


@dataclass
class LoggingConfig:
    """Log levels for the command-line entry point."""

    global_level: str = "INFO"
    module_levels: Dict[str, str] = field(default_factory=dict)


@dataclass
class Config:
    """Top level configuration dataclass."""

    pathfinding: PathfindingConfig
    logging: LoggingConfig


def _parse_config(data: dict[str, Any]) -> Config:
    """Convert raw ``data`` into :class:`Config`."""

    pf_data = data.get("pathfinding") or {}
    pathfinding = PathfindingConfig(
        heuristic=str(pf_data.get("heuristic", AUTO_HEURISTIC)).lower(),
        diagonal=bool(pf_data.get("diagonal", False)),
        straight_cost=float(pf_data.get("straight_cost", 1.0)),
        diagonal_cost=float(pf_data.get("diagonal_cost", math.sqrt(2))),
    )
    if pathfinding.heuristic != AUTO_HEURISTIC and pathfinding.heuristic not in HEURISTICS:
        choices = ", ".join(sorted([AUTO_HEURISTIC, *HEURISTICS]))
        raise ValueError(
            f"unknown heuristic '{pathfinding.heuristic}' in config (choose from: {choices})"
        )
    if pathfinding.straight_cost < 0 or pathfinding.diagonal_cost < 0:
        raise ValueError("pathfinding costs must be non-negative")

    log_data = data.get("logging") or {}
    logging_cfg = LoggingConfig(
        global_level=str(log_data.get("global_level", "INFO")).upper(),
        module_levels={str(k): str(v) for k, v in (log_data.get("module_levels") or {}).items()},
    )

    return Config(pathfinding=pathfinding, logging=logging_cfg)


def load_config(path: Path = CONFIG_PATH, *, required: bool = False) -> Config:
    """Load configuration from ``path`` and return a :class:`Config`.

    A missing file yields the defaults unless ``required`` is set, in which
    case :class:`FileNotFoundError` is raised.
    """

    path = Path(path)
    if required and not path.is_file():
        raise FileNotFoundError(f"config file not found: {path}")
    if path.is_file():
        raw = yaml.safe_load(path.read_text()) or {}
    else:
        raw = {}
    return _parse_config(raw)


# Load configuration at module import time.
CONFIG = load_config()


__all__ = [
    "CONFIG",
    "AUTO_HEURISTIC",
    "Config",
    "PathfindingConfig",
    "LoggingConfig",
    "load_config",
]
