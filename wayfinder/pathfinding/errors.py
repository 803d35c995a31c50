"""Exceptions raised by the pathfinding package."""

from __future__ import annotations

from typing import Any


class PathfindingError(Exception):
    """Base error for pathfinding failures."""


class GraphLookupError(PathfindingError, KeyError):
    """Raised when a node has no entry in the graph mapping."""

    def __init__(self, node: Any, message: str | None = None) -> None:
        self.node = node
        super().__init__(message or f"node {node!r} is not in the graph")

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the plain message.
        return str(self.args[0])


class EmptyQueueError(PathfindingError, IndexError):
    """Raised when popping from an empty priority queue."""


class GraphFormatError(PathfindingError, ValueError):
    """Raised when a graph or tile map file cannot be parsed."""


__all__ = [
    "PathfindingError",
    "GraphLookupError",
    "EmptyQueueError",
    "GraphFormatError",
]
