import math

import pytest

from graaf.algorithm.bellman_ford import bellman_ford_shortest_paths
from graaf.algorithm.common import GraphPath
from graaf.algorithm.dijkstra_shortest_path import dijkstra_shortest_path
from graaf.algorithm.floyd_warshall import floyd_warshall_shortest_paths
from graaf.graph import DirectedGraph


def _complex_graph():
    graph = DirectedGraph()
    ids = [graph.add_vertex(value) for value in (10, 20, 30, 40, 50)]
    graph.add_edge(ids[0], ids[1], 1)
    graph.add_edge(ids[1], ids[2], 2)
    graph.add_edge(ids[0], ids[2], 3)
    graph.add_edge(ids[2], ids[3], 4)
    graph.add_edge(ids[3], ids[4], 5)
    graph.add_edge(ids[2], ids[4], 6)
    return graph, ids


def test_single_vertex():
    graph = DirectedGraph()
    vertex = graph.add_vertex(10)
    assert bellman_ford_shortest_paths(graph, vertex) == {vertex: GraphPath([vertex], 0)}


def test_weights_agree_with_dijkstra():
    graph, ids = _complex_graph()
    paths = bellman_ford_shortest_paths(graph, ids[0])
    for target in ids:
        expected = dijkstra_shortest_path(graph, ids[0], target)
        assert paths[target].total_weight == expected.total_weight


def test_paths_run_from_start_to_target():
    graph, ids = _complex_graph()
    paths = bellman_ford_shortest_paths(graph, ids[0])
    for target, path in paths.items():
        assert path.vertices[0] == ids[0]
        assert path.vertices[-1] == target
        for lhs, rhs in zip(path.vertices, path.vertices[1:]):
            assert graph.has_edge(lhs, rhs)


def test_unreachable_vertex_has_infinite_weight():
    graph = DirectedGraph()
    vertex_1 = graph.add_vertex(10)
    vertex_2 = graph.add_vertex(20)
    graph.add_edge(vertex_2, vertex_1, 3)
    paths = bellman_ford_shortest_paths(graph, vertex_1)
    assert paths[vertex_2] == GraphPath([vertex_2], math.inf)
    assert paths[vertex_1] == GraphPath([vertex_1], 0)


def test_negative_weights_agree_with_floyd_warshall():
    graph = DirectedGraph()
    ids = [graph.add_vertex(value) for value in (10, 20, 30, 40, 50, 60)]
    graph.add_edge(ids[0], ids[1], 100)
    graph.add_edge(ids[1], ids[2], 50)
    graph.add_edge(ids[1], ids[3], -20)
    graph.add_edge(ids[2], ids[5], -3)
    graph.add_edge(ids[3], ids[5], 100)
    graph.add_edge(ids[4], ids[1], -75)
    matrix = floyd_warshall_shortest_paths(graph)
    for start in ids:
        paths = bellman_ford_shortest_paths(graph, start)
        assert [paths[target].total_weight for target in ids] == matrix[start]


def test_negative_cycle_raises():
    graph = DirectedGraph()
    vertex_1 = graph.add_vertex(10)
    vertex_2 = graph.add_vertex(20)
    vertex_3 = graph.add_vertex(30)
    graph.add_edge(vertex_1, vertex_2, 1)
    graph.add_edge(vertex_2, vertex_3, -2)
    graph.add_edge(vertex_3, vertex_1, -2)
    with pytest.raises(ValueError, match="Negative cycle detected in the graph."):
        bellman_ford_shortest_paths(graph, vertex_1)