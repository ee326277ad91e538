"""Weighted shortest path with Dijkstra's algorithm."""

from __future__ import annotations

import heapq

from graaf.algorithm.common import GraphPath, _PathVertex, _reconstruct_path
from graaf.edge import get_weight
from graaf.graph import Graph

__all__ = ["dijkstra_shortest_path"]


def dijkstra_shortest_path(
    graph: Graph, start_vertex: int, end_vertex: int
) -> GraphPath | None:
    """Return the lightest path between two vertices, or None if there is none.

    Edges without a weight of their own count as unit weight. Raises
    ValueError when a negative edge weight is met.
    """
    vertex_info = {start_vertex: _PathVertex(start_vertex, 0, start_vertex)}
    to_explore = [(0, start_vertex)]

    while to_explore:
        distance_so_far, current = heapq.heappop(to_explore)
        if current == end_vertex:
            break

        for neighbor in graph.get_neighbors(current):
            edge_weight = get_weight(graph.get_edge(current, neighbor))
            if edge_weight < 0:
                raise ValueError(
                    f"Negative edge weight [{edge_weight}] between vertices "
                    f"[{current}] -> [{neighbor}]."
                )
            distance = distance_so_far + edge_weight
            known = vertex_info.get(neighbor)
            if known is None or distance < known.dist_from_start:
                vertex_info[neighbor] = _PathVertex(neighbor, distance, current)
                heapq.heappush(to_explore, (distance, neighbor))

    return _reconstruct_path(start_vertex, end_vertex, vertex_info)