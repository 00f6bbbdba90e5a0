"""Edge source adapter: in-memory (for tests and programmatic use)."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from densecluster.domain.models import WeightedEdge
from densecluster.ports.edge_source import EdgeSourcePort


class InMemoryEdgeSource(EdgeSourcePort):
    """Serve a fixed list of edges, given as edges or (source, target, weight) tuples."""

    def __init__(self, edges: Iterable[WeightedEdge | tuple[str, str, float]] = ()):
        self._edges: list[WeightedEdge] = [
            e if isinstance(e, WeightedEdge) else WeightedEdge(*e) for e in edges
        ]

    def add(self, source: str, target: str, weight: float = 1.0) -> None:
        self._edges.append(WeightedEdge(source, target, weight))

    def read_edges(self) -> Iterator[WeightedEdge]:
        yield from self._edges

    def describe(self) -> str:
        return f"in-memory ({len(self._edges)} edges)"
