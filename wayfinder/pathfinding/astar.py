"""A* shortest-path search over caller-supplied weighted graphs."""

from __future__ import annotations

import logging
from typing import Callable, Dict, Generic, Hashable, List, Mapping, Optional, Sequence, TypeVar

from .errors import GraphLookupError
from .graph import Edge
from .heuristics import zero_heuristic
from .priority_queue import PriorityQueue


logger = logging.getLogger(__name__)

Node = TypeVar("Node", bound=Hashable)


class AStar(Generic[Node]):
    """Pathfinder using the A* algorithm.

    Parameters
    ----------
    graph:
        Mapping from node to its outgoing edges. It is read, never modified,
        so one graph may back many pathfinders.
    heuristic:
        Pure function ``(node, goal) -> float`` estimating the remaining cost.
        Paths are optimal only when it never overestimates. See
        :mod:`wayfinder.pathfinding.heuristics` for the usual choices.

    The instance keeps no per-search state besides :attr:`last_expanded`, so
    it can be reused for any number of sequential :meth:`find_path` calls.
    Searches running in several threads at once get correct paths from a
    shared instance, but :attr:`last_expanded` then holds whichever search
    finished last; give each thread its own ``AStar`` when that count matters.
    """

    def __init__(
        self,
        graph: Mapping[Node, Sequence[Edge]],
        heuristic: Callable[[Node, Node], float] = zero_heuristic,
    ) -> None:
        self._graph = graph
        self._heuristic = heuristic
        self.last_expanded: int = 0

    @property
    def graph(self) -> Mapping[Node, Sequence[Edge]]:
        return self._graph

    @property
    def heuristic(self) -> Callable[[Node, Node], float]:
        return self._heuristic

    def _edges(self, node: Node) -> Sequence[Edge]:
        try:
            return self._graph[node]
        except KeyError:
            raise GraphLookupError(node) from None

    def find_path(self, start: Node, goal: Node) -> List[Node]:
        """Return the cheapest path from ``start`` to ``goal`` inclusive.

        Returns ``[start]`` when both are the same node and ``[]`` when
        ``goal`` cannot be reached. Raises :class:`GraphLookupError` if
        ``start``, ``goal`` or any expanded node is not a graph key.
        """

        for node in (start, goal):
            if node not in self._graph:
                raise GraphLookupError(node)

        frontier: PriorityQueue[Node] = PriorityQueue()
        came_from: Dict[Node, Optional[Node]] = {start: None}
        cost_so_far: Dict[Node, float] = {start: 0}
        frontier.insert(start, 0)
        expanded = 0

        while not frontier.empty():
            current = frontier.pop()
            expanded += 1
            if current == goal:
                break

            # Stale duplicates of ``current`` fall through here; none of their
            # edges can beat the costs already recorded.
            current_cost = cost_so_far[current]
            for neighbor, cost in self._edges(current):
                new_cost = current_cost + cost
                if neighbor in cost_so_far and cost_so_far[neighbor] <= new_cost:
                    continue
                cost_so_far[neighbor] = new_cost
                came_from[neighbor] = current
                frontier.insert(neighbor, new_cost + self._heuristic(neighbor, goal))

        self.last_expanded = expanded
        path = self._reconstruct(came_from, start, goal)
        logger.debug(
            "A* %r -> %r: expanded %d nodes, path length %d",
            start,
            goal,
            expanded,
            len(path),
        )
        return path

    @staticmethod
    def _reconstruct(
        came_from: Dict[Node, Optional[Node]], start: Node, goal: Node
    ) -> List[Node]:
        if goal not in came_from:
            return []
        # ``None`` may itself be a node; stop at ``start`` instead.
        path: List[Node] = [goal]
        current = goal
        while current != start:
            current = came_from[current]
            path.append(current)
        path.reverse()
        return path


def find_path(
    graph: Mapping[Node, Sequence[Edge]],
    start: Node,
    goal: Node,
    heuristic: Callable[[Node, Node], float] = zero_heuristic,
) -> List[Node]:
    """Run a one-off A* search; see :meth:`AStar.find_path`."""

    return AStar(graph, heuristic).find_path(start, goal)


__all__ = ["AStar", "find_path"]
