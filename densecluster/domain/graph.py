"""Undirected graph with density and periphery metrics.

Nodes are any hashable, totally ordered ids (text labels in practice).
Every ``add_edge`` call stores two half-edges and nothing is deduplicated,
so repeated pairs form parallel edges and inflate density counts.
Edge weights are kept on each half-edge but no metric reads them.
"""

from __future__ import annotations

from collections.abc import Collection

from densecluster.domain.models import NodeNotFoundError, WeightedEdge


class Graph:
    """Adjacency-list multigraph; read-only once clustering starts."""

    def __init__(self) -> None:
        self._adjacency: dict[str, list[WeightedEdge]] = {}

    # ── write ──

    def add_edge(self, source: str, target: str, weight: float = 1.0) -> None:
        self._adjacency.setdefault(source, []).append(WeightedEdge(source, target, weight))
        self._adjacency.setdefault(target, []).append(WeightedEdge(target, source, weight))

    # ── read ──

    def has_node(self, node: str) -> bool:
        return node in self._adjacency

    def neighbors(self, node: str) -> list[WeightedEdge]:
        """Return the half-edges leaving *node*."""
        return list(self._half_edges(node))

    def all_nodes(self) -> list[str]:
        """Return every node in ascending order."""
        return sorted(self._adjacency)

    def node_count(self) -> int:
        return len(self._adjacency)

    def edge_count(self) -> int:
        """Number of undirected edges, parallel edges included."""
        return sum(len(edges) for edges in self._adjacency.values()) // 2

    def _half_edges(self, node: str) -> list[WeightedEdge]:
        try:
            return self._adjacency[node]
        except KeyError:
            raise NodeNotFoundError(node) from None

    # ── metrics ──

    def intra_edge_count(self, nodes: Collection[str]) -> int:
        """Count edges with both endpoints in *nodes*, each one once.

        An edge is counted only from its smaller endpoint, which also
        means self-loops are never counted.
        """
        members = _as_set(nodes)
        count = 0
        for node in members:
            for edge in self._half_edges(node):
                if edge.target in members and node < edge.target:
                    count += 1
        return count

    def density(self, nodes: Collection[str]) -> float:
        """Intra-set edges over the |S|·(|S|−1)/2 possible; 0.0 below two nodes."""
        members = _as_set(nodes)
        size = len(members)
        if size < 2:
            return 0.0
        max_edges = size * (size - 1) / 2.0
        return self.intra_edge_count(members) / max_edges

    def periphery_ratio(self, candidate: str, nodes: Collection[str]) -> float:
        """Fraction of the set (minus one) that *candidate* links into.

        Returns 0.0 when *candidate* is not in the graph.
        """
        edges = self._adjacency.get(candidate)
        if edges is None:
            return 0.0
        members = _as_set(nodes)
        connections = sum(
            1 for edge in edges if edge.target in members and edge.target != candidate
        )
        denominator = max(len(members) - 1, 1)
        return connections / denominator

    def is_in_periphery(self, candidate: str, nodes: Collection[str], threshold: float) -> bool:
        if candidate not in self._adjacency:
            return False
        return self.periphery_ratio(candidate, nodes) >= threshold

    # ── dunder ──

    def __contains__(self, node: object) -> bool:
        return node in self._adjacency

    def __len__(self) -> int:
        return len(self._adjacency)

    def __repr__(self) -> str:
        return f"Graph(nodes={self.node_count()}, edges={self.edge_count()})"


def _as_set(nodes: Collection[str]) -> set[str] | frozenset[str]:
    if isinstance(nodes, (set, frozenset)):
        return nodes
    return set(nodes)
