"""Serialisation of graphs to the dot format."""

from __future__ import annotations

import os
from numbers import Real
from typing import Any, Callable

from graaf.edge import get_weight
from graaf.graph import EdgeId, Graph

__all__ = ["default_vertex_writer", "default_edge_writer", "to_dot"]

VertexWriter = Callable[[int, Any], str]
EdgeWriter = Callable[[EdgeId, Any], str]


def _number_to_string(value: Any) -> str:
    if isinstance(value, bool):
        return str(int(value))
    if isinstance(value, float):
        return f"{value:f}"
    if isinstance(value, Real):
        return str(value)
    return str(value)


def default_vertex_writer(vertex_id: int, vertex: Any) -> str:
    """Label a vertex with its id and value."""
    return f'label="{vertex_id}: {_number_to_string(vertex)}"'


def default_edge_writer(edge_id: EdgeId, edge: Any) -> str:
    """Label an edge with its weight."""
    return f'label="{_number_to_string(get_weight(edge))}"'


def to_dot(
    graph: Graph,
    path: str | os.PathLike[str],
    vertex_writer: VertexWriter = default_vertex_writer,
    edge_writer: EdgeWriter = default_edge_writer,
) -> None:
    """Write ``graph`` in dot format to ``path``."""
    keyword, specifier = ("digraph", "->") if graph.is_directed() else ("graph", "--")
    with open(path, "w", encoding="utf-8", newline="\n") as dot_file:
        dot_file.write(f"{keyword} {{\n")
        for vertex_id, vertex in graph.get_vertices().items():
            dot_file.write(f"\t{vertex_id} [{vertex_writer(vertex_id, vertex)}];\n")
        for edge_id, edge in graph.get_edges().items():
            source_id, target_id = edge_id
            dot_file.write(
                f"\t{source_id} {specifier} {target_id} "
                f"[{edge_writer(edge_id, edge)}];\n"
            )
        dot_file.write("}\n")