"""Single source shortest paths with the Bellman-Ford algorithm."""

from __future__ import annotations

import math
from typing import Any

from graaf.algorithm.common import GraphPath
from graaf.edge import get_weight
from graaf.graph import Graph

__all__ = ["bellman_ford_shortest_paths"]


def bellman_ford_shortest_paths(graph: Graph, start_vertex: int) -> dict[int, GraphPath]:
    """Return the shortest path from ``start_vertex`` to every vertex.

    Edges are relaxed in the direction in which they are stored. Vertices
    that cannot be reached keep a path holding only themselves with an
    infinite total weight. Raises ValueError on a negative cycle.
    """
    shortest_paths: dict[int, GraphPath] = {
        vertex_id: GraphPath([vertex_id], math.inf)
        for vertex_id in graph.get_vertices()
    }
    shortest_paths[start_vertex] = GraphPath([start_vertex], 0)

    def found_shorter_path(u: int, v: int, weight: Any) -> bool:
        source = shortest_paths.setdefault(u, GraphPath([u], math.inf))
        target = shortest_paths.setdefault(v, GraphPath([v], math.inf))
        return source.total_weight != math.inf and (
            source.total_weight + weight < target.total_weight
        )

    for _ in range(1, graph.vertex_count()):
        for (u, v), edge in graph.get_edges().items():
            weight = get_weight(edge)
            if found_shorter_path(u, v, weight):
                source = shortest_paths[u]
                shortest_paths[v] = GraphPath(
                    [*source.vertices, v], source.total_weight + weight
                )

    for (u, v), edge in graph.get_edges().items():
        if found_shorter_path(u, v, get_weight(edge)):
            raise ValueError("Negative cycle detected in the graph.")

    return shortest_paths