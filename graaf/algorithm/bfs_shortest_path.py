"""Unweighted shortest path by breadth-first search."""

from __future__ import annotations

from collections import deque

from graaf.algorithm.common import GraphPath, _PathVertex, _reconstruct_path
from graaf.graph import Graph

__all__ = ["bfs_shortest_path"]


def bfs_shortest_path(graph: Graph, start_vertex: int, end_vertex: int) -> GraphPath | None:
    """Return the path with the fewest edges, or None if there is none.

    Edge weights are ignored; the total weight is the number of edges.
    """
    vertex_info = {start_vertex: _PathVertex(start_vertex, 0, start_vertex)}
    queue = deque([start_vertex])

    while queue:
        current = queue.popleft()
        if current == end_vertex:
            break
        for neighbor in graph.get_neighbors(current):
            if neighbor not in vertex_info:
                vertex_info[neighbor] = _PathVertex(
                    neighbor, vertex_info[current].dist_from_start + 1, current
                )
                queue.append(neighbor)

    return _reconstruct_path(start_vertex, end_vertex, vertex_info)