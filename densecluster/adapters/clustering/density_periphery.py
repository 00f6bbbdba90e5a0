"""Clustering adapter: density-threshold expansion with a periphery test."""

from __future__ import annotations

import logging

from densecluster.domain.graph import Graph
from densecluster.domain.models import Cluster, validate_threshold
from densecluster.ports.clustering import ClusteringPort
from densecluster.services.expansion import ClusterExpander, VisitedMarkers

log = logging.getLogger(__name__)


class DensityPeripheryClustering(ClusteringPort):
    """Seed, expand and filter clusters over every node in ascending order.

    A seed's cluster is kept only if its final density reaches the density
    threshold. Members of a discarded cluster stay visited, so they are
    never reseeded nor picked up by a later cluster.
    """

    def cluster(
        self,
        graph: Graph,
        density_threshold: float,
        cp_threshold: float,
    ) -> list[Cluster]:
        density_threshold = validate_threshold("density_threshold", density_threshold)
        cp_threshold = validate_threshold("cp_threshold", cp_threshold)

        nodes = graph.all_nodes()
        visited = VisitedMarkers(nodes)
        expander = ClusterExpander(
            graph,
            visited,
            density_threshold=density_threshold,
            cp_threshold=cp_threshold,
        )

        accepted: list[Cluster] = []
        discarded = 0
        for node in nodes:
            if visited.is_visited(node):
                continue

            visited.mark(node)
            current = Cluster.seeded(node)
            evaluations = expander.expand(current)

            density = graph.density(current.members)
            current.freeze(graph.intra_edge_count(current.members), density)
            if density >= density_threshold:
                accepted.append(current)
                log.debug(
                    "Seed %s: accepted %d nodes (density %.4f, %d evaluations)",
                    node,
                    current.size,
                    density,
                    len(evaluations),
                )
            else:
                discarded += 1
                log.debug(
                    "Seed %s: discarded %d nodes (density %.4f)",
                    node,
                    current.size,
                    density,
                )

        log.info(
            "Clustered %d nodes: %d accepted, %d discarded "
            "(density_threshold=%s, cp_threshold=%s)",
            len(nodes),
            len(accepted),
            discarded,
            density_threshold,
            cp_threshold,
        )
        return accepted
