"""Orchestrator: wires edge loading, clustering and reporting.

The graph is filled by ``load_edges`` / ``load_from_source`` and only read
afterwards. Each ``perform_clustering`` call is an independent run with
its own visited markers, so repeated calls on the same graph return the
same clusters.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from densecluster.domain.graph import Graph
from densecluster.domain.models import (
    Cluster,
    ClusterStatistics,
    WeightedEdge,
    validate_threshold,
)
from densecluster.ports.clustering import ClusteringPort
from densecluster.ports.edge_source import EdgeSourcePort
from densecluster.services.reporting import ClusterReportService

log = logging.getLogger(__name__)


class ClusteringOrchestrator:
    """Top-level entry point: load edges, cluster, report."""

    def __init__(
        self,
        clustering: ClusteringPort,
        edge_source: EdgeSourcePort | None = None,
        *,
        density_threshold: float = 0.5,
        cp_threshold: float = 0.5,
        graph: Graph | None = None,
    ):
        self._clustering = clustering
        self._edge_source = edge_source
        self._density_threshold = validate_threshold("density_threshold", density_threshold)
        self._cp_threshold = validate_threshold("cp_threshold", cp_threshold)
        self._graph = graph if graph is not None else Graph()
        self.report = ClusterReportService()

    @property
    def graph(self) -> Graph:
        return self._graph

    @property
    def density_threshold(self) -> float:
        return self._density_threshold

    @property
    def cp_threshold(self) -> float:
        return self._cp_threshold

    # ── loading ──

    def load_edges(self, edges: Iterable[WeightedEdge | tuple[str, str, float]]) -> int:
        """Add every (source, target, weight) triple to the graph."""
        count = 0
        for item in edges:
            if isinstance(item, WeightedEdge):
                source, target, weight = item.source, item.target, item.weight
            else:
                source, target, weight = item
            self._graph.add_edge(source, target, weight)
            count += 1
        log.info(
            "Loaded %d edges; graph has %d nodes, %d edges",
            count,
            self._graph.node_count(),
            self._graph.edge_count(),
        )
        return count

    def load_from_source(self) -> int:
        if self._edge_source is None:
            raise ValueError("No edge source configured")
        log.info("Loading edges from %s", self._edge_source.describe())
        return self.load_edges(self._edge_source.read_edges())

    # ── clustering ──

    def perform_clustering(
        self,
        density_threshold: float | None = None,
        cp_threshold: float | None = None,
    ) -> list[Cluster]:
        """Cluster the graph; omitted thresholds fall back to the configured ones."""
        if density_threshold is None:
            density_threshold = self._density_threshold
        if cp_threshold is None:
            cp_threshold = self._cp_threshold
        return self._clustering.cluster(self._graph, density_threshold, cp_threshold)

    # ── reporting ──

    def statistics(self, clusters: list[Cluster]) -> list[ClusterStatistics]:
        return self.report.statistics(clusters)

    def stats(self) -> dict[str, Any]:
        return {
            "nodes": self._graph.node_count(),
            "edges": self._graph.edge_count(),
            "density_threshold": self._density_threshold,
            "cp_threshold": self._cp_threshold,
            "edge_source": self._edge_source.describe() if self._edge_source else None,
        }
