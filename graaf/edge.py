"""Edge weights: weighted edge interface and weight extraction."""

from __future__ import annotations

from abc import ABC, abstractmethod
from numbers import Real
from typing import Any

__all__ = ["WeightedEdge", "get_weight"]


class WeightedEdge(ABC):
    """Base class for edges that carry their own weight."""

    @abstractmethod
    def get_weight(self) -> Any:
        """Return the weight of this edge."""


def get_weight(edge: Any) -> Any:
    """Return the weight of an edge.

    Weighted edges report their own weight, plain numbers are their own
    weight, and any other edge has unit weight.
    """
    if isinstance(edge, WeightedEdge):
        return edge.get_weight()
    if isinstance(edge, Real):
        return edge
    return 1