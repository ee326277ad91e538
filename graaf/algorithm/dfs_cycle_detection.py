"""Cycle detection by depth-first traversal."""

from __future__ import annotations

from enum import Enum, auto

from graaf.graph import Graph

__all__ = ["dfs_cycle_detection"]


class _Color(Enum):
    UNVISITED = auto()
    VISITED = auto()
    NO_CYCLE = auto()


def dfs_cycle_detection(graph: Graph) -> bool:
    """Return whether the graph contains a cycle.

    Directed graphs are checked for directed cycles; in undirected graphs
    any cycle counts, self-loops included.
    """
    if graph.is_directed():
        return _has_directed_cycle(graph)
    return _has_undirected_cycle(graph)


def _has_directed_cycle(graph: Graph) -> bool:
    colors: dict[int, _Color] = {}

    for root in graph.get_vertices():
        if colors.get(root, _Color.UNVISITED) is not _Color.UNVISITED:
            continue
        colors[root] = _Color.VISITED
        stack = [(root, iter(graph.get_neighbors(root)))]
        while stack:
            vertex, neighbors = stack[-1]
            for neighbor in neighbors:
                color = colors.get(neighbor, _Color.UNVISITED)
                if color is _Color.VISITED:
                    return True
                if color is _Color.UNVISITED:
                    colors[neighbor] = _Color.VISITED
                    stack.append((neighbor, iter(graph.get_neighbors(neighbor))))
                    break
            else:
                colors[vertex] = _Color.NO_CYCLE
                stack.pop()

    return False


def _has_undirected_cycle(graph: Graph) -> bool:
    # A forest on n vertices has at most n - 1 edges.
    if graph.vertex_count() > 0 and graph.edge_count() >= graph.vertex_count():
        return True

    visited: set[int] = set()

    for root in graph.get_vertices():
        if root in visited:
            continue
        visited.add(root)
        stack: list[tuple[int, int | None, object]] = [
            (root, None, iter(graph.get_neighbors(root)))
        ]
        while stack:
            vertex, parent, neighbors = stack[-1]
            for neighbor in neighbors:
                if neighbor == parent:
                    continue
                if neighbor in visited:
                    return True
                visited.add(neighbor)
                stack.append((neighbor, vertex, iter(graph.get_neighbors(neighbor))))
                break
            else:
                stack.pop()

    return False