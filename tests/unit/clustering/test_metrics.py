"""Unit tests for clustering metrics."""

import numpy as np
import pytest

from slink.clustering.metrics import (
    ClusterInfo,
    ClusterMetrics,
    compute_cluster_metrics,
)


class TestClusterInfo:
    """Tests for ClusterInfo dataclass."""

    def test_creation(self):
        """Test creating ClusterInfo."""
        centroid = np.array([1.0, 2.0, 3.0])
        info = ClusterInfo(cluster_id=0, size=10, centroid=centroid, merge_level=0.75)

        assert info.cluster_id == 0
        assert info.size == 10
        np.testing.assert_array_equal(info.centroid, centroid)
        assert info.merge_level == 0.75

    def test_default_merge_level(self):
        """Test singletons default to merge level 0."""
        info = ClusterInfo(cluster_id=1, size=1, centroid=np.zeros(2))
        assert info.merge_level == 0.0

    def test_repr(self):
        """Test __repr__ method."""
        info = ClusterInfo(cluster_id=5, size=100, centroid=np.zeros(10), merge_level=1.5)
        assert repr(info) == "ClusterInfo(id=5, size=100, merge_level=1.5)"


class TestClusterMetrics:
    """Tests for ClusterMetrics dataclass."""

    def test_size_statistics(self):
        """Test min/max/avg cluster sizes and singleton count."""
        metrics = ClusterMetrics(
            silhouette_score=0.5,
            n_clusters=4,
            n_samples=10,
            cluster_sizes=[1, 2, 3, 4],
        )
        assert metrics.min_cluster_size == 1
        assert metrics.max_cluster_size == 4
        assert metrics.avg_cluster_size == 2.5
        assert metrics.n_singletons == 1
        assert metrics.threshold is None

    def test_empty_cluster_sizes(self):
        """Test statistics with no clusters."""
        metrics = ClusterMetrics(
            silhouette_score=0.0, n_clusters=0, n_samples=0, cluster_sizes=[]
        )
        assert metrics.min_cluster_size == 0
        assert metrics.max_cluster_size == 0
        assert metrics.avg_cluster_size == 0.0

    def test_repr(self):
        """Test __repr__ method."""
        metrics = ClusterMetrics(
            silhouette_score=0.12345,
            n_clusters=2,
            n_samples=5,
            cluster_sizes=[2, 3],
        )
        assert repr(metrics) == "ClusterMetrics(n_clusters=2, silhouette=0.123, sizes=2-3)"


class TestComputeClusterMetrics:
    """Tests for compute_cluster_metrics."""

    def test_separated_clusters(self, simple_2d_clusters):
        """Test well-separated clusters have a high silhouette."""
        labels = np.repeat([0, 1, 2], 20)
        metrics = compute_cluster_metrics(simple_2d_clusters, labels, threshold=3.0)

        assert metrics.n_clusters == 3
        assert metrics.n_samples == 60
        assert metrics.cluster_sizes == [20, 20, 20]
        assert metrics.silhouette_score > 0.7
        assert metrics.threshold == 3.0

    def test_single_cluster(self, simple_2d_clusters):
        """Test silhouette is 0 for one cluster."""
        metrics = compute_cluster_metrics(simple_2d_clusters, np.zeros(60, dtype=int))
        assert metrics.n_clusters == 1
        assert metrics.silhouette_score == 0.0

    def test_all_singletons(self, simple_2d_clusters):
        """Test silhouette is 0 when every sample is its own cluster."""
        metrics = compute_cluster_metrics(simple_2d_clusters, np.arange(60))
        assert metrics.n_clusters == 60
        assert metrics.silhouette_score == 0.0
        assert metrics.n_singletons == 60

    def test_callable_metric(self, simple_2d_clusters):
        """Test a callable distance is passed through to sklearn."""
        labels = np.repeat([0, 1, 2], 20)

        def manhattan(u, v):
            return float(np.abs(u - v).sum())

        by_name = compute_cluster_metrics(simple_2d_clusters, labels, metric="manhattan")
        by_callable = compute_cluster_metrics(simple_2d_clusters, labels, metric=manhattan)
        assert by_callable.silhouette_score == pytest.approx(by_name.silhouette_score)
