"""Clustering components for slink."""

from slink.clustering.base import Clusterer
from slink.clustering.metrics import (
    ClusterInfo,
    ClusterMetrics,
    compute_cluster_metrics,
)
from slink.clustering.single_link import SingleLinkClusterer
from slink.clustering.sweep import SweepResult, SweepResults, ThresholdSweep

__all__ = [
    # Protocol
    "Clusterer",
    # Clusterers
    "SingleLinkClusterer",
    # Metrics
    "ClusterInfo",
    "ClusterMetrics",
    "compute_cluster_metrics",
    # Sweep
    "ThresholdSweep",
    "SweepResult",
    "SweepResults",
]
