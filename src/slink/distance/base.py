"""Metric protocols consumed by the single-link builder."""

from __future__ import annotations

from collections.abc import Hashable, Sequence
from typing import Protocol, runtime_checkable

import numpy as np


@runtime_checkable
class Metric(Protocol):
    """Protocol for distance metrics over object identifiers.

    Implementations must be pure: symmetric, non-negative and free of
    shared mutable state.
    """

    def distance(self, a: Hashable, b: Hashable) -> float:
        """Return the distance between two objects.

        Args:
            a: First object identifier
            b: Second object identifier

        Returns:
            Non-negative distance
        """
        ...


@runtime_checkable
class BatchMetric(Metric, Protocol):
    """Metric that can evaluate one object against many in a single call."""

    def distances(self, others: Sequence[Hashable], b: Hashable) -> np.ndarray:
        """Return distances from every object in ``others`` to ``b``.

        Args:
            others: Object identifiers to compare against
            b: Object identifier

        Returns:
            Distances of shape (len(others),)
        """
        ...


@runtime_checkable
class VectorDistance(Protocol):
    """Protocol for distance strategies over numeric vectors."""

    name: str

    def __call__(self, u: np.ndarray, v: np.ndarray) -> float:
        """Distance between two vectors of shape (n_features,)."""
        ...

    def pairwise(self, X: np.ndarray, v: np.ndarray) -> np.ndarray:
        """Distances from each row of X (n_samples, n_features) to v."""
        ...
