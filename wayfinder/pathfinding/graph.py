"""Graph representation and grid graph construction.

A graph is a mapping from node to an ordered sequence of outgoing edges.
Edges are directed; a two-way connection needs one edge in each direction.
Nodes can be any hashable value, usually :class:`GridNode` coordinates.

Example::

    a, b, c = GridNode(0, 0), GridNode(1, 0), GridNode(0, 1)
    graph = {
        a: [Edge(b, 1), Edge(c, 1)],
        b: [Edge(a, 1), Edge(c, 1.5)],
        c: [Edge(a, 1), Edge(b, 1.5)],
    }
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Dict, Hashable, List, Mapping, NamedTuple, Sequence

from .errors import GraphLookupError


class Edge(NamedTuple):
    """Directed edge to ``to`` with a non-negative traversal ``cost``."""

    to: Hashable
    cost: float


@dataclass(frozen=True)
class GridNode:
    """A cell coordinate on a 2D grid."""

    x: int
    y: int


Graph = Mapping[Any, Sequence[Edge]]


# Offsets in edge order: right, left, down, up.
_STRAIGHT = ((1, 0), (-1, 0), (0, 1), (0, -1))
_DIAGONAL = ((1, 1), (-1, 1), (1, -1), (-1, -1))


def grid_graph(
    walkable: Sequence[Sequence[bool]],
    *,
    diagonal: bool = False,
    straight_cost: float = 1.0,
    diagonal_cost: float = math.sqrt(2),
) -> Dict[GridNode, List[Edge]]:
    """Build a graph over the walkable cells of ``walkable``.

    ``walkable[y][x]`` tells whether the cell at ``(x, y)`` can be entered.
    Every walkable cell becomes a key, even one with no exits. Diagonal moves
    are only added when both orthogonal neighbours are walkable so paths do
    not cut corners.
    """

    if straight_cost < 0 or diagonal_cost < 0:
        raise ValueError("edge costs must be non-negative")

    def is_open(x: int, y: int) -> bool:
        return 0 <= y < len(walkable) and 0 <= x < len(walkable[y]) and bool(walkable[y][x])

    graph: Dict[GridNode, List[Edge]] = {}
    for y, row in enumerate(walkable):
        for x, cell in enumerate(row):
            if not cell:
                continue
            edges: List[Edge] = []
            for dx, dy in _STRAIGHT:
                if is_open(x + dx, y + dy):
                    edges.append(Edge(GridNode(x + dx, y + dy), straight_cost))
            if diagonal:
                for dx, dy in _DIAGONAL:
                    if is_open(x + dx, y + dy) and is_open(x + dx, y) and is_open(x, y + dy):
                        edges.append(Edge(GridNode(x + dx, y + dy), diagonal_cost))
            graph[GridNode(x, y)] = edges
    return graph


def path_cost(graph: Graph, path: Sequence[Hashable]) -> float:
    """Return the summed edge cost along ``path``.

    Raises :class:`GraphLookupError` if a node is missing from ``graph`` or
    two consecutive nodes are not joined by an edge.
    """

    total: float = 0
    if len(path) > 1:
        for node in path:
            if node not in graph:
                raise GraphLookupError(node)
    for current, nxt in zip(path, path[1:]):
        costs = [cost for to, cost in graph[current] if to == nxt]
        if not costs:
            raise GraphLookupError(nxt, f"no edge from {current!r} to {nxt!r}")
        total += min(costs)
    return total


__all__ = ["Edge", "GridNode", "Graph", "grid_graph", "path_cost"]
