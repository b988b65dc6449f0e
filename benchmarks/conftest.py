"""Shared pytest fixtures for benchmarks."""

import numpy as np
import pytest

from slink import SlinkBuilder, VectorMetric


@pytest.fixture
def synthetic_embeddings() -> np.ndarray:
    """Generate synthetic embeddings (2000 samples, 32 dimensions)."""
    np.random.seed(42)
    centers = np.random.uniform(-20, 20, size=(10, 32))
    assignments = np.random.randint(0, 10, size=2000)
    return centers[assignments] + np.random.randn(2000, 32)


@pytest.fixture
def fitted_model(synthetic_embeddings):
    """Pointer model over the first 1000 synthetic embeddings."""
    embeddings = synthetic_embeddings[:1000]
    return SlinkBuilder(VectorMetric(embeddings)).add_objects(range(len(embeddings)))
