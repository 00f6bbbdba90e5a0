"""Port: graph clustering algorithm."""

from __future__ import annotations

from abc import ABC, abstractmethod

from densecluster.domain.graph import Graph
from densecluster.domain.models import Cluster


class ClusteringPort(ABC):
    """Partition a graph's nodes into accepted clusters."""

    @abstractmethod
    def cluster(
        self,
        graph: Graph,
        density_threshold: float,
        cp_threshold: float,
    ) -> list[Cluster]:
        """Return the accepted clusters in discovery order."""
