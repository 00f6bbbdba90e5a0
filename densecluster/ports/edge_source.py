"""Port: where (source, target, weight) triples come from."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator

from densecluster.domain.models import WeightedEdge


class EdgeSourcePort(ABC):
    """Yield the edges of a graph to be loaded."""

    @abstractmethod
    def read_edges(self) -> Iterator[WeightedEdge]:
        """Yield one edge per well-formed record; malformed ones are dropped."""

    def describe(self) -> str:
        return type(self).__name__
