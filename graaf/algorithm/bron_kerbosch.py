"""Maximal clique detection with the Bron-Kerbosch algorithm."""

from __future__ import annotations

from graaf.graph import Graph

__all__ = ["bron_kerbosch"]


def bron_kerbosch(graph: Graph) -> list[list[int]]:
    """Return every maximal clique of an undirected graph.

    Each clique is a list of vertex ids. Neither the cliques nor the
    vertices within a clique come in any particular order.
    """
    if not graph.is_undirected():
        raise ValueError("Clique detection requires an undirected graph.")
    cliques: list[list[int]] = []
    _expand(graph, [], set(graph.get_vertices()), set(), cliques)
    return cliques


def _expand(
    graph: Graph,
    clique: list[int],
    candidates: set[int],
    excluded: set[int],
    cliques: list[list[int]],
) -> None:
    if not candidates and not excluded:
        cliques.append(list(clique))
        return

    pivot = max(candidates | excluded, key=lambda v: len(graph.get_neighbors(v)))

    for vertex in candidates - graph.get_neighbors(pivot):
        neighbors = graph.get_neighbors(vertex)
        clique.append(vertex)
        _expand(graph, clique, candidates & neighbors, excluded & neighbors, cliques)
        clique.pop()
        candidates.discard(vertex)
        excluded.add(vertex)