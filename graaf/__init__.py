"""Directed and undirected graphs, graph algorithms and DOT export."""

__version__ = "0.1.0"