"""Load graphs and tile maps from disk."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Hashable, Iterable, List, Sequence

import yaml

from ..pathfinding.errors import GraphFormatError
from ..pathfinding.graph import Edge, GridNode

logger = logging.getLogger(__name__)

WALL = "#"
PATH_MARK = "*"


@dataclass
class LoadedGraph:
    """Result of :func:`load_graph`."""

    graph: Dict[Hashable, List[Edge]]
    # node id as written in the file -> node value used in ``graph``
    names: Dict[Any, Hashable] = field(default_factory=dict)

    def node(self, name: Any) -> Hashable:
        """Return the node for ``name``, accepting ids given as strings."""
        if name in self.names:
            return self.names[name]
        for key, value in self.names.items():
            if str(key) == str(name):
                return value
        raise GraphFormatError(f"unknown node id '{name}'")


def _parse_nodes(raw: Any) -> Dict[Any, Hashable]:
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise GraphFormatError("'nodes' must be a mapping of id -> [x, y]")
    names: Dict[Any, Hashable] = {}
    seen: Dict[GridNode, Any] = {}
    for name, coords in raw.items():
        if not isinstance(coords, (list, tuple)) or len(coords) != 2:
            raise GraphFormatError(f"node '{name}' needs [x, y] coordinates")
        x, y = coords
        if not all(isinstance(v, (int, float)) and not isinstance(v, bool) for v in (x, y)):
            raise GraphFormatError(f"node '{name}' coordinates must be numbers, got {coords!r}")
        node = GridNode(x, y)
        if node in seen:
            raise GraphFormatError(
                f"nodes '{seen[node]}' and '{name}' share coordinates [{x}, {y}]"
            )
        seen[node] = name
        names[name] = node
    return names


def graph_from_dict(data: Dict[str, Any]) -> LoadedGraph:
    """Build a :class:`LoadedGraph` from parsed YAML ``data``."""

    if not isinstance(data, dict):
        raise GraphFormatError("graph document must be a mapping")

    names = _parse_nodes(data.get("nodes"))
    use_coords = bool(names)
    graph: Dict[Hashable, List[Edge]] = {node: [] for node in names.values()}

    def resolve(name: Any) -> Hashable:
        if isinstance(name, (list, dict)):
            raise GraphFormatError(f"node id must be a scalar, got {name!r}")
        if use_coords:
            if name not in names:
                raise GraphFormatError(f"edge references undeclared node '{name}'")
            return names[name]
        names.setdefault(name, name)
        graph.setdefault(name, [])
        return name

    edges = data.get("edges") or []
    if not isinstance(edges, list):
        raise GraphFormatError("'edges' must be a list")
    for entry in edges:
        if not isinstance(entry, dict) or "from" not in entry or "to" not in entry:
            raise GraphFormatError(f"edge needs 'from' and 'to': {entry!r}")
        src = resolve(entry["from"])
        dst = resolve(entry["to"])
        try:
            cost = float(entry.get("cost", 1))
        except (TypeError, ValueError):
            raise GraphFormatError(f"edge cost must be a number: {entry!r}") from None
        if cost < 0:
            raise GraphFormatError(f"edge cost must be non-negative: {entry!r}")
        graph[src].append(Edge(dst, cost))
        if entry.get("bidirectional", False):
            graph[dst].append(Edge(src, cost))

    return LoadedGraph(graph=graph, names=names)


def load_graph(path: str | Path) -> LoadedGraph:
    """Read a YAML graph file from ``path``."""

    path = Path(path)
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise GraphFormatError(f"invalid YAML in {path}: {exc}") from exc
    loaded = graph_from_dict(data)
    logger.debug("Loaded graph with %d nodes from %s", len(loaded.graph), path)
    return loaded


def parse_tile_map(text: str) -> List[List[bool]]:
    """Return rows of walkable flags for an ASCII map (``#`` is a wall)."""

    lines = [line.rstrip("\r") for line in text.splitlines()]
    while lines and not lines[-1].strip():
        lines.pop()
    if not lines:
        raise GraphFormatError("tile map is empty")
    width = max(len(line) for line in lines)
    return [
        [ch != WALL for ch in line] + [False] * (width - len(line))
        for line in lines
    ]


def load_tile_map(path: str | Path) -> List[List[bool]]:
    """Read an ASCII tile map from ``path``."""

    rows = parse_tile_map(Path(path).read_text(encoding="utf-8"))
    logger.debug("Loaded %dx%d tile map from %s", len(rows[0]), len(rows), path)
    return rows


def render_tile_map(walkable: Sequence[Sequence[bool]], path: Iterable[GridNode] = ()) -> str:
    """Draw ``walkable`` as text with ``path`` cells marked by ``*``."""

    on_path = {(node.x, node.y) for node in path}
    lines = []
    for y, row in enumerate(walkable):
        chars = []
        for x, cell in enumerate(row):
            if (x, y) in on_path:
                chars.append(PATH_MARK)
            else:
                chars.append("." if cell else WALL)
        lines.append("".join(chars))
    return "\n".join(lines)


__all__ = [
    "LoadedGraph",
    "graph_from_dict",
    "load_graph",
    "parse_tile_map",
    "load_tile_map",
    "render_tile_map",
]
