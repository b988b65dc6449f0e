"""Clustering metrics and info classes."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class ClusterInfo:
    """Information about a single cluster.

    Attributes:
        cluster_id: Label of the cluster
        size: Number of samples in the cluster
        centroid: Mean of the cluster members
        merge_level: Highest merge level inside the cluster (0.0 for singletons)
    """

    cluster_id: int
    size: int
    centroid: np.ndarray
    merge_level: float = 0.0

    def __repr__(self) -> str:
        return (
            f"ClusterInfo(id={self.cluster_id}, size={self.size}, "
            f"merge_level={self.merge_level:.3g})"
        )


@dataclass(frozen=True)
class ClusterMetrics:
    """Overall clustering metrics.

    Attributes:
        silhouette_score: Silhouette score (-1 to 1, higher is better)
        n_clusters: Number of clusters
        n_samples: Total number of samples
        cluster_sizes: List of cluster sizes
        threshold: Distance the dendrogram was cut at (if applicable)
    """

    silhouette_score: float
    n_clusters: int
    n_samples: int
    cluster_sizes: list[int]
    threshold: float | None = None

    @property
    def min_cluster_size(self) -> int:
        """Minimum cluster size."""
        return min(self.cluster_sizes) if self.cluster_sizes else 0

    @property
    def max_cluster_size(self) -> int:
        """Maximum cluster size."""
        return max(self.cluster_sizes) if self.cluster_sizes else 0

    @property
    def avg_cluster_size(self) -> float:
        """Average cluster size."""
        if not self.cluster_sizes:
            return 0.0
        return sum(self.cluster_sizes) / len(self.cluster_sizes)

    @property
    def n_singletons(self) -> int:
        """Number of clusters with a single member."""
        return sum(1 for size in self.cluster_sizes if size == 1)

    def __repr__(self) -> str:
        return (
            f"ClusterMetrics(n_clusters={self.n_clusters}, "
            f"silhouette={self.silhouette_score:.3f}, "
            f"sizes={self.min_cluster_size}-{self.max_cluster_size})"
        )


def compute_cluster_metrics(
    embeddings: np.ndarray,
    labels: np.ndarray,
    threshold: float | None = None,
    metric: str | Callable[[np.ndarray, np.ndarray], float] = "euclidean",
) -> ClusterMetrics:
    """Compute clustering metrics from embeddings and labels.

    Args:
        embeddings: Input embeddings of shape (n_samples, n_features)
        labels: Cluster labels of shape (n_samples,)
        threshold: Optional cut distance the labels came from
        metric: Distance name or callable for sklearn silhouette_score
            (default: "euclidean")

    Returns:
        ClusterMetrics object with computed metrics
    """
    from sklearn.metrics import silhouette_score as sk_silhouette_score

    labels = np.asarray(labels)
    n_samples = len(labels)
    unique_labels = np.unique(labels)
    n_clusters = len(unique_labels)

    cluster_sizes = [int(np.sum(labels == label)) for label in unique_labels]

    # Silhouette is defined for 2 <= n_clusters <= n_samples - 1
    if 2 <= n_clusters < n_samples:
        silhouette = float(sk_silhouette_score(embeddings, labels, metric=metric))
    else:
        silhouette = 0.0

    return ClusterMetrics(
        silhouette_score=silhouette,
        n_clusters=n_clusters,
        n_samples=n_samples,
        cluster_sizes=cluster_sizes,
        threshold=threshold,
    )
