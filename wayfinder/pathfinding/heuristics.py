"""Standard distance heuristics for grid-based graphs.

Each heuristic takes two nodes exposing numeric ``x`` and ``y`` attributes
and returns a non-negative estimate of the cost between them.
"""

from __future__ import annotations

import math
from types import MappingProxyType
from typing import Any, Callable, Mapping


Heuristic = Callable[[Any, Any], float]


def manhattan_distance(a: Any, b: Any) -> float:
    """Return the taxicab distance; admissible on 4-neighbour grids."""

    return abs(a.x - b.x) + abs(a.y - b.y)


def chebyshev_distance(a: Any, b: Any) -> float:
    """Return the chessboard distance; admissible when diagonals cost 1."""

    return max(abs(a.x - b.x), abs(a.y - b.y))


def euclidean_distance(a: Any, b: Any) -> float:
    """Return the straight-line distance between ``a`` and ``b``."""

    return math.sqrt((a.x - b.x) ** 2 + (a.y - b.y) ** 2)


def zero_heuristic(a: Any, b: Any) -> float:
    """Always ``0``; turns A* into Dijkstra's algorithm."""

    return 0


HEURISTICS: Mapping[str, Heuristic] = MappingProxyType(
    {
        "manhattan": manhattan_distance,
        "chebyshev": chebyshev_distance,
        "euclidean": euclidean_distance,
        "zero": zero_heuristic,
    }
)


def get_heuristic(name: str) -> Heuristic:
    """Look up a heuristic by ``name`` in :data:`HEURISTICS`."""

    try:
        return HEURISTICS[name.lower()]
    except KeyError:
        choices = ", ".join(sorted(HEURISTICS))
        raise ValueError(f"unknown heuristic '{name}' (choose from: {choices})") from None


def grid_heuristic(
    diagonal: bool = False,
    straight_cost: float = 1.0,
    diagonal_cost: float = math.sqrt(2),
) -> Heuristic:
    """Return an admissible distance for a grid with the given move costs.

    Without diagonals this is Manhattan distance scaled by ``straight_cost``.
    With diagonals it is the octile distance: as many diagonal steps as the
    shorter axis allows, then straight steps. It reduces to Chebyshev
    distance when both move costs are equal, and to scaled Chebyshev distance
    when a diagonal step is no dearer than a straight one.
    """

    if not diagonal or diagonal_cost >= 2 * straight_cost:
        def scaled_manhattan(a: Any, b: Any) -> float:
            return straight_cost * (abs(a.x - b.x) + abs(a.y - b.y))

        return scaled_manhattan

    if diagonal_cost <= straight_cost:
        def scaled_chebyshev(a: Any, b: Any) -> float:
            return diagonal_cost * max(abs(a.x - b.x), abs(a.y - b.y))

        return scaled_chebyshev

    def octile(a: Any, b: Any) -> float:
        dx = abs(a.x - b.x)
        dy = abs(a.y - b.y)
        return straight_cost * (dx + dy) + (diagonal_cost - 2 * straight_cost) * min(dx, dy)

    return octile


__all__ = [
    "Heuristic",
    "manhattan_distance",
    "chebyshev_distance",
    "euclidean_distance",
    "zero_heuristic",
    "HEURISTICS",
    "get_heuristic",
    "grid_heuristic",
]
