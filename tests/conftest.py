"""Pytest fixtures for slink tests."""

import numpy as np
import pytest

from slink import CallableMetric, SlinkBuilder, VectorMetric


def table_metric(table: dict[frozenset, float]) -> CallableMetric:
    """Metric over string ids backed by a symmetric lookup table."""

    def lookup(a, b):
        return table[frozenset((a, b))]

    return CallableMetric(lookup)


@pytest.fixture
def abc_metric() -> CallableMetric:
    """d(A,B)=1, d(B,C)=2, d(A,C)=3."""
    return table_metric(
        {
            frozenset(("A", "B")): 1.0,
            frozenset(("B", "C")): 2.0,
            frozenset(("A", "C")): 3.0,
        }
    )


@pytest.fixture
def abc_model(abc_metric):
    """Pointer model for A, B, C added in that order."""
    return SlinkBuilder(abc_metric).add_objects(["A", "B", "C"])


@pytest.fixture
def equilateral_metric() -> CallableMetric:
    """Three objects with every pairwise distance equal to 1."""
    return table_metric(
        {
            frozenset(("A", "B")): 1.0,
            frozenset(("B", "C")): 1.0,
            frozenset(("A", "C")): 1.0,
        }
    )


@pytest.fixture
def random_points() -> np.ndarray:
    """Uniform random points (80 samples, 3 dimensions)."""
    np.random.seed(42)
    return np.random.uniform(0.0, 10.0, size=(80, 3))


@pytest.fixture
def random_model(random_points):
    """Pointer model over random_points, rows added in order."""
    metric = VectorMetric(random_points, "euclidean")
    return SlinkBuilder(metric).add_objects(range(len(random_points)))


@pytest.fixture
def simple_2d_clusters() -> np.ndarray:
    """Generate 3 well-separated 2D clusters (60 samples total)."""
    np.random.seed(42)
    cluster1 = np.random.randn(20, 2) + np.array([0, 0])
    cluster2 = np.random.randn(20, 2) + np.array([10, 10])
    cluster3 = np.random.randn(20, 2) + np.array([20, 0])
    return np.vstack([cluster1, cluster2, cluster3])
