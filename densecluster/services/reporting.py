"""Service: statistics and node listings for accepted clusters."""

from __future__ import annotations

from densecluster.domain.models import Cluster, ClusterStatistics


class ClusterReportService:
    """Turn accepted clusters into display figures and text blocks."""

    def statistics(self, clusters: list[Cluster]) -> list[ClusterStatistics]:
        return [
            ClusterStatistics(
                index=i,
                node_count=c.size,
                edge_count=c.edge_count,
                density=c.density,
            )
            for i, c in enumerate(clusters, start=1)
        ]

    def format_statistics(self, clusters: list[Cluster]) -> str:
        """Per-cluster node count, edge count and density.

        Density is printed with six significant digits (``%g``).
        """
        blocks = []
        for st in self.statistics(clusters):
            blocks.append(
                f"Cluster {st.index}:\n"
                f"  Number of nodes: {st.node_count}\n"
                f"  Number of edges: {st.edge_count}\n"
                f"  Density: {st.density:g}\n"
            )
        return "\n".join(blocks)

    def format_nodes(self, clusters: list[Cluster]) -> str:
        lines = ["Nodes in all clusters:"]
        for i, c in enumerate(clusters, start=1):
            lines.append(f"Cluster {i}: {' '.join(map(str, c.nodes))}")
        return "\n".join(lines)
