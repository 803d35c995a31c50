"""Command-line entry point for running path searches on map files."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

import yaml

from .config import AUTO_HEURISTIC, CONFIG, Config, load_config
from .pathfinding.astar import AStar
from .pathfinding.errors import GraphLookupError, PathfindingError
from .pathfinding.graph import GridNode, grid_graph, path_cost
from .pathfinding.heuristics import Heuristic, get_heuristic, grid_heuristic, zero_heuristic
from .persistence.graph_io import load_graph, load_tile_map, render_tile_map

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_NO_PATH = 2


def configure_logging(cfg: Config) -> None:
    """Apply the global and per-module log levels from ``cfg``."""

    numeric_level = getattr(logging, cfg.logging.global_level, logging.INFO)
    logging.basicConfig(
        level=numeric_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        force=True,
    )
    for module_name, level_str in cfg.logging.module_levels.items():
        module_numeric_level = getattr(logging, level_str.upper(), None)
        if isinstance(module_numeric_level, int):
            logging.getLogger(module_name).setLevel(module_numeric_level)
        else:
            logger.warning("Invalid log level '%s' for module '%s' in config.", level_str, module_name)


def _grid_point(text: str) -> GridNode:
    try:
        x, y = (int(part) for part in text.split(","))
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected X,Y but got '{text}'") from None
    return GridNode(x, y)


def get_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="wayfinder", description="Find shortest paths with A*.")
    parser.add_argument("--config", type=Path, default=None, help="YAML config file to use.")
    sub = parser.add_subparsers(dest="command", required=True)

    grid = sub.add_parser("grid", help="Search an ASCII tile map ('#' marks walls).")
    grid.add_argument("map_file", type=Path)
    grid.add_argument("--start", type=_grid_point, required=True, help="Start cell as X,Y.")
    grid.add_argument("--goal", type=_grid_point, required=True, help="Goal cell as X,Y.")
    grid.add_argument(
        "--diagonal",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Allow diagonal moves (defaults to the config value).",
    )
    grid.add_argument("--heuristic", default=None, help="auto, manhattan, chebyshev, euclidean or zero.")
    grid.add_argument("--draw", action="store_true", help="Print the map with the path marked.")

    graph = sub.add_parser("graph", help="Search a YAML graph file.")
    graph.add_argument("graph_file", type=Path)
    graph.add_argument("--start", required=True, help="Start node id.")
    graph.add_argument("--goal", required=True, help="Goal node id.")
    graph.add_argument("--heuristic", default=None, help="Needs node coordinates unless 'zero' or 'auto'.")
    return parser


def _grid_search_heuristic(name: str, diagonal: bool, cfg: Config) -> Heuristic:
    """Resolve ``name`` for a grid search, warning when it can overestimate."""

    straight = cfg.pathfinding.straight_cost
    diag = cfg.pathfinding.diagonal_cost
    if name.lower() == AUTO_HEURISTIC:
        return grid_heuristic(diagonal, straight, diag)
    heuristic = get_heuristic(name)
    origin = GridNode(0, 0)
    overestimates = heuristic(origin, GridNode(1, 0)) > straight or (
        diagonal and heuristic(origin, GridNode(1, 1)) > diag
    )
    if overestimates:
        logger.warning(
            "Heuristic '%s' overestimates a single move on this grid; the path may not be the shortest.",
            name,
        )
    return heuristic


def _run_grid(args: argparse.Namespace, cfg: Config) -> int:
    walkable = load_tile_map(args.map_file)
    diagonal = cfg.pathfinding.diagonal if args.diagonal is None else args.diagonal
    graph = grid_graph(
        walkable,
        diagonal=diagonal,
        straight_cost=cfg.pathfinding.straight_cost,
        diagonal_cost=cfg.pathfinding.diagonal_cost,
    )
    heuristic = _grid_search_heuristic(args.heuristic or cfg.pathfinding.heuristic, diagonal, cfg)
    path = AStar(graph, heuristic).find_path(args.start, args.goal)
    if not path:
        print("no path")
        return EXIT_NO_PATH
    for node in path:
        print(f"{node.x},{node.y}")
    print(f"cost: {path_cost(graph, path):g}")
    if args.draw:
        print(render_tile_map(walkable, path))
    return EXIT_OK


def _run_graph(args: argparse.Namespace, cfg: Config) -> int:
    loaded = load_graph(args.graph_file)
    start = loaded.node(args.start)
    goal = loaded.node(args.goal)
    heuristic_name = args.heuristic or cfg.pathfinding.heuristic
    if heuristic_name.lower() == AUTO_HEURISTIC:
        heuristic = zero_heuristic
    else:
        heuristic = get_heuristic(heuristic_name)
        if heuristic is not zero_heuristic and not all(
            isinstance(node, GridNode) for node in loaded.graph
        ):
            raise ValueError(
                f"heuristic '{heuristic_name}' needs node coordinates; "
                "declare them under 'nodes' or use 'zero'"
            )
    path = AStar(loaded.graph, heuristic).find_path(start, goal)
    if not path:
        print("no path")
        return EXIT_NO_PATH
    by_node = {node: name for name, node in loaded.names.items()}
    for node in path:
        print(by_node.get(node, node))
    print(f"cost: {path_cost(loaded.graph, path):g}")
    return EXIT_OK


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = get_parser().parse_args(argv)
    try:
        cfg = load_config(args.config, required=True) if args.config else CONFIG
    except (ValueError, OSError, yaml.YAMLError) as exc:
        logger.error("Could not load config %s: %s", args.config, exc)
        return EXIT_ERROR
    configure_logging(cfg)

    try:
        if args.command == "grid":
            return _run_grid(args, cfg)
        return _run_graph(args, cfg)
    except GraphLookupError as exc:
        logger.error("Node lookup failed: %s", exc)
        return EXIT_ERROR
    except (PathfindingError, ValueError, OSError) as exc:
        logger.error("%s", exc)
        return EXIT_ERROR


if __name__ == "__main__":
    sys.exit(main())
