import math
from pathlib import Path

import pytest

from wayfinder.config import CONFIG, load_config


def test_missing_file_gives_defaults(tmp_path: Path):
    cfg = load_config(tmp_path / "missing.yaml")
    assert cfg.pathfinding.heuristic == "auto"
    assert cfg.pathfinding.diagonal is False
    assert cfg.pathfinding.straight_cost == 1.0
    assert cfg.pathfinding.diagonal_cost == pytest.approx(math.sqrt(2))
    assert cfg.logging.global_level == "INFO"
    assert cfg.logging.module_levels == {}


def test_load_values(tmp_path: Path):
    path = tmp_path / "config.yaml"
    path.write_text(
        "pathfinding:\n"
        "  heuristic: Chebyshev\n"
        "  diagonal: true\n"
        "  diagonal_cost: 1\n"
        "logging:\n"
        "  global_level: debug\n"
        "  module_levels:\n"
        "    wayfinder.persistence: ERROR\n"
    )
    cfg = load_config(path)
    assert cfg.pathfinding.heuristic == "chebyshev"
    assert cfg.pathfinding.diagonal is True
    assert cfg.pathfinding.diagonal_cost == 1.0
    assert cfg.logging.global_level == "DEBUG"
    assert cfg.logging.module_levels == {"wayfinder.persistence": "ERROR"}


def test_empty_file(tmp_path: Path):
    path = tmp_path / "config.yaml"
    path.write_text("")
    assert load_config(path).pathfinding.heuristic == "auto"


def test_unknown_heuristic_rejected(tmp_path: Path):
    path = tmp_path / "config.yaml"
    path.write_text("pathfinding:\n  heuristic: octile\n")
    with pytest.raises(ValueError):
        load_config(path)


def test_negative_cost_rejected(tmp_path: Path):
    path = tmp_path / "config.yaml"
    path.write_text("pathfinding:\n  straight_cost: -2\n")
    with pytest.raises(ValueError):
        load_config(path)


def test_repository_config_loaded():
    assert CONFIG.pathfinding.heuristic in {"auto", "manhattan", "chebyshev", "euclidean", "zero"}


def test_required_config_must_exist(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "missing.yaml", required=True)
