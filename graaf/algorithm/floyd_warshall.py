"""All pairs shortest distances with the Floyd-Warshall algorithm."""

from __future__ import annotations

import math
from typing import Any

from graaf.edge import get_weight
from graaf.graph import Graph

__all__ = ["floyd_warshall_shortest_paths"]


def floyd_warshall_shortest_paths(graph: Graph) -> list[list[Any]]:
    """Return a matrix of shortest distances between all pairs of vertices.

    Vertex ids are taken to be 0 .. n-1 and used as row and column indices.
    Pairs without a path hold ``math.inf``. Negative edges are allowed,
    negative cycles are not.
    """
    n = graph.vertex_count()
    distances: list[list[Any]] = [[math.inf] * n for _ in range(n)]
    for vertex, row in enumerate(distances):
        row[vertex] = 0

    for from_vertex, row in enumerate(distances):
        for to_vertex in graph.get_neighbors(from_vertex):
            weight = get_weight(graph.get_edge(from_vertex, to_vertex))
            row[to_vertex] = min(row[to_vertex], weight)

    for through in range(n):
        through_row = distances[through]
        for start_row in distances:
            to_through = start_row[through]
            if to_through == math.inf:
                continue
            for end, from_through in enumerate(through_row):
                if from_through != math.inf:
                    start_row[end] = min(start_row[end], to_through + from_through)

    return distances