"""A* pathfinding over weighted directed graphs."""

from .astar import AStar, find_path
from .errors import EmptyQueueError, GraphFormatError, GraphLookupError, PathfindingError
from .graph import Edge, Graph, GridNode, grid_graph, path_cost
from .heuristics import (
    HEURISTICS,
    chebyshev_distance,
    euclidean_distance,
    get_heuristic,
    grid_heuristic,
    manhattan_distance,
    zero_heuristic,
)
from .priority_queue import PriorityQueue

__all__ = [
    "AStar",
    "find_path",
    "PriorityQueue",
    "Edge",
    "Graph",
    "GridNode",
    "grid_graph",
    "path_cost",
    "HEURISTICS",
    "get_heuristic",
    "grid_heuristic",
    "manhattan_distance",
    "chebyshev_distance",
    "euclidean_distance",
    "zero_heuristic",
    "PathfindingError",
    "GraphLookupError",
    "EmptyQueueError",
    "GraphFormatError",
]
