"""Directed and undirected graphs with user supplied vertex and edge values."""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping

__all__ = ["GraphType", "Graph", "DirectedGraph", "UndirectedGraph"]

EdgeId = tuple[int, int]


class GraphType(Enum):
    """Whether edges have a direction."""

    DIRECTED = "directed"
    UNDIRECTED = "undirected"


class Graph:
    """A graph mapping integer vertex ids to vertices and id pairs to edges.

    In an undirected graph an edge id is always stored with the smaller
    vertex id first.
    """

    def __init__(self, graph_type: GraphType) -> None:
        self._graph_type = GraphType(graph_type)
        self._adjacency: dict[int, set[int]] = {}
        self._vertices: dict[int, Any] = {}
        self._edges: dict[EdgeId, Any] = {}
        self._next_vertex_id = 0

    @property
    def graph_type(self) -> GraphType:
        return self._graph_type

    def is_directed(self) -> bool:
        return self._graph_type is GraphType.DIRECTED

    def is_undirected(self) -> bool:
        return self._graph_type is GraphType.UNDIRECTED

    def vertex_count(self) -> int:
        return len(self._vertices)

    def edge_count(self) -> int:
        return len(self._edges)

    def get_vertices(self) -> Mapping[int, Any]:
        """Read-only view from vertex id to vertex."""
        return MappingProxyType(self._vertices)

    def get_edges(self) -> Mapping[EdgeId, Any]:
        """Read-only view from edge id to edge."""
        return MappingProxyType(self._edges)

    def _edge_key(self, vertex_id_lhs: int, vertex_id_rhs: int) -> EdgeId:
        if self.is_undirected() and vertex_id_rhs < vertex_id_lhs:
            return (vertex_id_rhs, vertex_id_lhs)
        return (vertex_id_lhs, vertex_id_rhs)

    def has_vertex(self, vertex_id: int) -> bool:
        return vertex_id in self._vertices

    def has_edge(self, vertex_id_lhs: int, vertex_id_rhs: int) -> bool:
        return self._edge_key(vertex_id_lhs, vertex_id_rhs) in self._edges

    def get_vertex(self, vertex_id: int) -> Any:
        try:
            return self._vertices[vertex_id]
        except KeyError:
            raise ValueError(
                f"Vertex with ID [{vertex_id}] not found in graph."
            ) from None

    def get_edge(self, vertex_id_lhs: Any, vertex_id_rhs: int | None = None) -> Any:
        """Return the edge between two vertices, or by its edge id pair."""
        if vertex_id_rhs is None:
            vertex_id_lhs, vertex_id_rhs = vertex_id_lhs
        try:
            return self._edges[self._edge_key(vertex_id_lhs, vertex_id_rhs)]
        except KeyError:
            raise ValueError(
                f"No edge found between vertices [{vertex_id_lhs}] -> "
                f"[{vertex_id_rhs}]."
            ) from None

    def get_neighbors(self, vertex_id: int) -> set[int]:
        return set(self._adjacency.get(vertex_id, ()))

    def add_vertex(self, vertex: Any, vertex_id: int | None = None) -> int:
        """Add a vertex and return its id.

        Without an id the next free id is used; a taken id raises ValueError.
        """
        if vertex_id is None:
            while self.has_vertex(self._next_vertex_id):
                self._next_vertex_id += 1
            vertex_id = self._next_vertex_id
        elif self.has_vertex(vertex_id):
            raise ValueError(f"Vertex already exists at ID [{vertex_id}]")
        self._vertices[vertex_id] = vertex
        return vertex_id

    def remove_vertex(self, vertex_id: int) -> None:
        """Remove a vertex and every edge touching it; unknown ids are ignored."""
        for neighbor in list(self._adjacency.get(vertex_id, ())):
            self.remove_edge(vertex_id, neighbor)
        if self.is_directed():
            sources = [
                source
                for source, targets in self._adjacency.items()
                if vertex_id in targets
            ]
            for source in sources:
                self.remove_edge(source, vertex_id)
        self._adjacency.pop(vertex_id, None)
        self._vertices.pop(vertex_id, None)

    def add_edge(self, vertex_id_lhs: int, vertex_id_rhs: int, edge: Any) -> None:
        """Connect two existing vertices; an existing edge is kept as it is."""
        if not (self.has_vertex(vertex_id_lhs) and self.has_vertex(vertex_id_rhs)):
            raise ValueError(
                f"Vertices with ID [{vertex_id_lhs}] and [{vertex_id_rhs}] "
                "not found in graph."
            )
        self._adjacency.setdefault(vertex_id_lhs, set()).add(vertex_id_rhs)
        if self.is_undirected():
            self._adjacency.setdefault(vertex_id_rhs, set()).add(vertex_id_lhs)
        self._edges.setdefault(self._edge_key(vertex_id_lhs, vertex_id_rhs), edge)

    def remove_edge(self, vertex_id_lhs: int, vertex_id_rhs: int) -> None:
        self._edges.pop(self._edge_key(vertex_id_lhs, vertex_id_rhs), None)
        if vertex_id_lhs in self._adjacency:
            self._adjacency[vertex_id_lhs].discard(vertex_id_rhs)
        if self.is_undirected() and vertex_id_rhs in self._adjacency:
            self._adjacency[vertex_id_rhs].discard(vertex_id_lhs)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(vertices={self.vertex_count()}, "
            f"edges={self.edge_count()})"
        )


class DirectedGraph(Graph):
    """Graph whose edges go from the first vertex to the second."""

    def __init__(self) -> None:
        super().__init__(GraphType.DIRECTED)


class UndirectedGraph(Graph):
    """Graph whose edges connect both vertices symmetrically."""

    def __init__(self) -> None:
        super().__init__(GraphType.UNDIRECTED)