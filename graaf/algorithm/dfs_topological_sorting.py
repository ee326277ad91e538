"""Topological ordering of directed acyclic graphs."""

from __future__ import annotations

from graaf.algorithm.dfs_cycle_detection import dfs_cycle_detection
from graaf.graph import Graph

__all__ = ["dfs_topological_sort"]


def dfs_topological_sort(graph: Graph) -> list[int] | None:
    """Return the vertex ids in topological order, or None if there is a cycle."""
    if not graph.is_directed():
        raise ValueError("Topological sorting requires a directed graph.")
    if dfs_cycle_detection(graph):
        return None

    finished: list[int] = []
    processed: set[int] = set()

    for root in graph.get_vertices():
        if root in processed:
            continue
        processed.add(root)
        stack = [(root, iter(graph.get_neighbors(root)))]
        while stack:
            vertex, neighbors = stack[-1]
            for neighbor in neighbors:
                if neighbor not in processed:
                    processed.add(neighbor)
                    stack.append((neighbor, iter(graph.get_neighbors(neighbor))))
                    break
            else:
                finished.append(vertex)
                stack.pop()

    finished.reverse()
    return finished