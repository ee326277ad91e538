"""Graph utilities."""

from __future__ import annotations

from graaf.graph import DirectedGraph, Graph

__all__ = ["get_transposed_graph"]


def get_transposed_graph(graph: Graph) -> DirectedGraph:
    """Return a directed graph with every edge of ``graph`` reversed.

    Vertex ids are preserved; only vertices touched by an edge are carried over.
    """
    if not graph.is_directed():
        raise ValueError("Only directed graphs can be transposed.")
    transposed = DirectedGraph()
    for (lhs, rhs), edge in graph.get_edges().items():
        for vertex_id in (lhs, rhs):
            if not transposed.has_vertex(vertex_id):
                transposed.add_vertex(graph.get_vertex(vertex_id), vertex_id)
        transposed.add_edge(rhs, lhs, edge)
    return transposed