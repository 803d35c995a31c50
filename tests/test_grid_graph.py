import math

import pytest

from wayfinder.pathfinding.errors import GraphLookupError
from wayfinder.pathfinding.graph import Edge, GridNode, grid_graph, path_cost


def test_walls_are_not_nodes():
    graph = grid_graph([[True, True, True], [True, False, True], [True, True, True]])
    assert GridNode(1, 1) not in graph
    assert len(graph) == 8


def test_straight_edge_order():
    graph = grid_graph([[True, True], [True, True]])
    assert graph[GridNode(0, 0)] == [Edge(GridNode(1, 0), 1.0), Edge(GridNode(0, 1), 1.0)]
    assert graph[GridNode(1, 1)] == [Edge(GridNode(0, 1), 1.0), Edge(GridNode(1, 0), 1.0)]


def test_diagonal_edges():
    graph = grid_graph([[True, True], [True, True]], diagonal=True)
    edges = graph[GridNode(0, 0)]
    assert edges[-1] == Edge(GridNode(1, 1), pytest.approx(math.sqrt(2)))
    assert len(edges) == 3


def test_diagonal_does_not_cut_corners():
    graph = grid_graph([[True, True], [False, True]], diagonal=True)
    targets = [edge.to for edge in graph[GridNode(0, 0)]]
    assert GridNode(1, 1) not in targets


def test_isolated_cell_has_no_edges():
    graph = grid_graph([[True, False, True]])
    assert graph[GridNode(0, 0)] == []
    assert graph[GridNode(2, 0)] == []


def test_custom_costs():
    graph = grid_graph([[True, True]], straight_cost=2.5)
    assert graph[GridNode(0, 0)] == [Edge(GridNode(1, 0), 2.5)]
    with pytest.raises(ValueError):
        grid_graph([[True]], straight_cost=-1)


def test_path_cost():
    a, b, c = GridNode(0, 0), GridNode(1, 0), GridNode(0, 1)
    graph = {a: [Edge(b, 1), Edge(c, 1)], b: [Edge(c, 1.5)], c: []}
    assert path_cost(graph, []) == 0
    assert path_cost(graph, [a]) == 0
    assert path_cost(graph, [a, b, c]) == pytest.approx(2.5)


def test_path_cost_uses_cheapest_parallel_edge():
    graph = {"a": [Edge("b", 4), Edge("b", 2)], "b": []}
    assert path_cost(graph, ["a", "b"]) == 2


def test_path_cost_rejects_invalid_paths():
    graph = {"a": [Edge("b", 1)], "b": []}
    with pytest.raises(GraphLookupError):
        path_cost(graph, ["b", "a"])
    with pytest.raises(GraphLookupError):
        path_cost(graph, ["a", "z"])
