"""densecluster: density-threshold graph clustering with a periphery test."""

from densecluster.adapters.clustering.density_periphery import DensityPeripheryClustering
from densecluster.domain.graph import Graph
from densecluster.domain.models import (
    Cluster,
    InvalidThresholdError,
    NodeNotFoundError,
    WeightedEdge,
)
from densecluster.services.orchestrator import ClusteringOrchestrator

__all__ = [
    "Graph",
    "Cluster",
    "WeightedEdge",
    "NodeNotFoundError",
    "InvalidThresholdError",
    "DensityPeripheryClustering",
    "ClusteringOrchestrator",
]
