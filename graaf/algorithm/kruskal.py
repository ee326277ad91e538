"""Minimum spanning forest with Kruskal's algorithm."""

from __future__ import annotations

from graaf.edge import get_weight
from graaf.graph import EdgeId, Graph

__all__ = ["kruskal_minimum_spanning_tree"]


class _DisjointSet:
    """Union-find over vertex ids with path compression and union by rank."""

    def __init__(self, elements) -> None:
        self._parent = {element: element for element in elements}
        self._rank = dict.fromkeys(self._parent, 0)

    def find(self, element: int) -> int:
        root = element
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[element] != root:
            self._parent[element], element = root, self._parent[element]
        return root

    def union(self, lhs: int, rhs: int) -> None:
        lhs, rhs = self.find(lhs), self.find(rhs)
        if lhs == rhs:
            return
        if self._rank[lhs] < self._rank[rhs]:
            lhs, rhs = rhs, lhs
        self._parent[rhs] = lhs
        if self._rank[lhs] == self._rank[rhs]:
            self._rank[lhs] += 1


def kruskal_minimum_spanning_tree(graph: Graph) -> list[EdgeId]:
    """Return the edges of a minimum spanning tree, or forest if disconnected.

    Edges come in the order they were chosen: by weight, ties broken by
    the vertex ids of the edge.
    """
    if not graph.is_undirected():
        raise ValueError("Kruskal's algorithm requires an undirected graph.")

    components = _DisjointSet(graph.get_vertices())
    edges = sorted(
        ((get_weight(edge), edge_id) for edge_id, edge in graph.get_edges().items()),
        key=lambda item: (item[0], item[1]),
    )

    mst_edges: list[EdgeId] = []
    target_size = graph.vertex_count() - 1
    for _, (vertex_a, vertex_b) in edges:
        if components.find(vertex_a) != components.find(vertex_b):
            mst_edges.append((vertex_a, vertex_b))
            components.union(vertex_a, vertex_b)
        if len(mst_edges) == target_size:
            break
    return mst_edges