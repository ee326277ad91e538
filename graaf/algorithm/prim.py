"""Minimum spanning tree with Prim's algorithm."""

from __future__ import annotations

from graaf.edge import get_weight
from graaf.graph import EdgeId, Graph

__all__ = ["prim_minimum_spanning_tree"]


def _candidate_edges(graph: Graph, fringe: set[int]) -> list[EdgeId]:
    return [
        (fringe_vertex, neighbor)
        for fringe_vertex in fringe
        for neighbor in graph.get_neighbors(fringe_vertex)
        if neighbor not in fringe
    ]


def prim_minimum_spanning_tree(graph: Graph, start_vertex: int) -> list[EdgeId] | None:
    """Return the edges of a minimum spanning tree grown from ``start_vertex``.

    Each edge is given as (vertex in the tree, newly added vertex). Returns
    None when the graph is not connected.
    """
    if not graph.is_undirected():
        raise ValueError("Prim's algorithm requires an undirected graph.")

    edges_in_mst: list[EdgeId] = []
    fringe = {start_vertex}

    while len(fringe) < graph.vertex_count():
        candidates = _candidate_edges(graph, fringe)
        if not candidates:
            return None
        mst_edge = min(candidates, key=lambda edge_id: get_weight(graph.get_edge(edge_id)))
        edges_in_mst.append(mst_edge)
        fringe.add(mst_edge[1])

    return edges_in_mst