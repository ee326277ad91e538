"""Results shared by the shortest path algorithms."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, NamedTuple

__all__ = ["GraphPath"]


@dataclass
class GraphPath:
    """A path through a graph: the vertex ids in order and the summed weight."""

    vertices: list[int] = field(default_factory=list)
    total_weight: Any = 0


class _PathVertex(NamedTuple):
    """A vertex reached during a search, with its distance and predecessor."""

    id: int
    dist_from_start: Any
    prev_id: int


def _reconstruct_path(
    start_vertex: int,
    end_vertex: int,
    vertex_info: Mapping[int, _PathVertex],
) -> GraphPath | None:
    """Follow predecessors back from ``end_vertex``; None if it was not reached."""
    if end_vertex not in vertex_info:
        return None
    vertices = [end_vertex]
    current = end_vertex
    while current != start_vertex:
        current = vertex_info[current].prev_id
        vertices.append(current)
    vertices.reverse()
    return GraphPath(vertices, vertex_info[end_vertex].dist_from_start)