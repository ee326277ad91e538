import pytest

from graaf.algorithm.common import GraphPath
from graaf.algorithm.dijkstra_shortest_path import dijkstra_shortest_path
from graaf.edge import WeightedEdge
from graaf.graph import DirectedGraph, UndirectedGraph


class MyWeightedEdge(WeightedEdge):
    def __init__(self, weight):
        self._weight = weight

    def get_weight(self):
        return self._weight


GRAPH_TYPES = [DirectedGraph, UndirectedGraph]
EDGE_FACTORIES = [
    int,
    float,
    lambda w: MyWeightedEdge(int(w)),
    lambda w: MyWeightedEdge(float(w)),
]
SIGNED_EDGE_FACTORIES = [int, lambda w: MyWeightedEdge(int(w))]


@pytest.fixture(params=GRAPH_TYPES)
def graph(request):
    return request.param()


@pytest.fixture(params=EDGE_FACTORIES)
def make_edge(request):
    return request.param


def test_minimal_shortest_path(graph):
    vertex_1 = graph.add_vertex(10)
    assert dijkstra_shortest_path(graph, vertex_1, vertex_1) == GraphPath([vertex_1], 0)


def test_no_available_path(graph):
    vertex_1 = graph.add_vertex(10)
    vertex_2 = graph.add_vertex(20)
    assert dijkstra_shortest_path(graph, vertex_1, vertex_2) is None


def test_simple_shortest_path(graph, make_edge):
    vertex_1 = graph.add_vertex(10)
    vertex_2 = graph.add_vertex(20)
    graph.add_edge(vertex_1, vertex_2, make_edge(3))
    assert dijkstra_shortest_path(graph, vertex_1, vertex_2) == GraphPath(
        [vertex_1, vertex_2], 3
    )


def test_more_complex_shortest_path(graph, make_edge):
    v1, v2, v3, v4, v5 = (graph.add_vertex(value) for value in (10, 20, 30, 40, 50))
    graph.add_edge(v1, v2, make_edge(1))
    graph.add_edge(v2, v3, make_edge(2))
    graph.add_edge(v1, v3, make_edge(3))
    graph.add_edge(v3, v4, make_edge(4))
    graph.add_edge(v4, v5, make_edge(5))
    graph.add_edge(v3, v5, make_edge(6))
    path = dijkstra_shortest_path(graph, v1, v5)
    assert path.total_weight == 9
    assert path.vertices in ([v1, v3, v5], [v1, v2, v3, v5])


def test_cyclic_shortest_path(graph, make_edge):
    v1, v2, v3, v4, v5 = (graph.add_vertex(value) for value in (10, 20, 30, 40, 50))
    graph.add_edge(v1, v2, make_edge(1))
    graph.add_edge(v2, v3, make_edge(2))
    graph.add_edge(v3, v4, make_edge(3))
    graph.add_edge(v4, v2, make_edge(4))
    graph.add_edge(v3, v5, make_edge(5))
    assert dijkstra_shortest_path(graph, v1, v5) == GraphPath([v1, v2, v3, v5], 8)


@pytest.mark.parametrize("make_signed_edge", SIGNED_EDGE_FACTORIES)
def test_negative_weight(graph, make_signed_edge):
    vertex_1 = graph.add_vertex(10)
    vertex_2 = graph.add_vertex(20)
    graph.add_edge(vertex_1, vertex_2, make_signed_edge(-1))
    with pytest.raises(ValueError) as excinfo:
        dijkstra_shortest_path(graph, vertex_1, vertex_2)
    assert str(excinfo.value) == (
        f"Negative edge weight [-1] between vertices [{vertex_1}] -> [{vertex_2}]."
    )


def test_unweighted_edges_count_as_one(graph):
    v1, v2, v3 = (graph.add_vertex(value) for value in (10, 20, 30))
    graph.add_edge(v1, v2, "a")
    graph.add_edge(v2, v3, "b")
    assert dijkstra_shortest_path(graph, v1, v3) == GraphPath([v1, v2, v3], 2)