"""Adapters that turn vector distances and plain functions into Metrics."""

from __future__ import annotations

import math
from collections.abc import Callable, Hashable, Mapping, Sequence
from numbers import Real
from typing import Any

import numpy as np

from slink.distance.base import VectorDistance
from slink.distance.registry import get_distance
from slink.exceptions import InvalidInputError, UnknownObjectError


def check_distance(value: Any) -> float:
    """Validate a single metric result and return it as float.

    Raises:
        InvalidInputError: If the value is not a real number, is NaN or negative
    """
    if isinstance(value, bool) or not isinstance(value, (Real, np.floating, np.integer)):
        raise InvalidInputError(f"Metric returned a non-numeric distance: {value!r}")
    value = float(value)
    if math.isnan(value) or value < 0.0:
        raise InvalidInputError(f"Metric returned an invalid distance: {value}")
    return value


def check_distances(values: np.ndarray, expected: int) -> np.ndarray:
    """Validate a row of metric results.

    Raises:
        InvalidInputError: If the shape is wrong or any value is NaN or negative
    """
    try:
        values = np.asarray(values, dtype=np.float64).reshape(-1)
    except (TypeError, ValueError) as e:
        raise InvalidInputError(f"Metric returned non-numeric distances: {e}") from e
    if values.shape[0] != expected:
        raise InvalidInputError(
            f"Metric returned {values.shape[0]} distances, expected {expected}"
        )
    if np.isnan(values).any() or (values < 0.0).any():
        raise InvalidInputError("Metric returned a negative or NaN distance")
    return values


class VectorMetric:
    """Metric over ids backed by numeric vectors and a distance strategy.

    Ids are row indices when ``vectors`` is a 2-D array, or keys when it is
    a mapping of id to vector.

    Example:
        >>> metric = VectorMetric(np.array([[0.0], [1.0], [3.0]]), "manhattan")
        >>> metric.distance(0, 2)
        3.0
    """

    def __init__(
        self,
        vectors: np.ndarray | Mapping[Hashable, Sequence[float]],
        distance: str | VectorDistance = "euclidean",
        **params: Any,
    ) -> None:
        """Initialize VectorMetric.

        Args:
            vectors: Array of shape (n_samples, n_features) or mapping id -> vector
            distance: Distance name or strategy instance (default: "euclidean")
            **params: Parameters for a named distance, e.g. ``p`` for "lp"
        """
        if isinstance(vectors, Mapping):
            self._index = {key: i for i, key in enumerate(vectors)}
            data = np.asarray([vectors[key] for key in vectors], dtype=np.float64)
        else:
            self._index = None
            data = np.asarray(vectors, dtype=np.float64)
        if data.size and data.ndim != 2:
            raise InvalidInputError(
                f"Vectors must form a 2-D array, got shape {data.shape}"
            )
        self._data = data
        self.distance_function = (
            get_distance(distance, **params) if isinstance(distance, str) else distance
        )

    def _row(self, key: Hashable) -> int:
        if self._index is not None:
            try:
                return self._index[key]
            except KeyError:
                raise UnknownObjectError(key) from None
        if isinstance(key, (bool, np.bool_)) or not isinstance(key, (int, np.integer)):
            raise UnknownObjectError(key)
        if not 0 <= key < len(self._data):
            raise UnknownObjectError(key)
        return int(key)

    def vector(self, key: Hashable) -> np.ndarray:
        """Vector stored for an id."""
        return self._data[self._row(key)]

    def ids(self) -> list[Hashable]:
        """All ids known to this metric, in storage order."""
        if self._index is not None:
            return list(self._index)
        return list(range(len(self._data)))

    def distance(self, a: Hashable, b: Hashable) -> float:
        return self.distance_function(self.vector(a), self.vector(b))

    def distances(self, others: Sequence[Hashable], b: Hashable) -> np.ndarray:
        if len(others) == 0:
            return np.empty(0, dtype=np.float64)
        rows = [self._row(key) for key in others]
        return self.distance_function.pairwise(self._data[rows], self.vector(b))

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"VectorMetric(n={len(self._data)}, distance={self.distance_function!r})"


class CallableMetric:
    """Adapt a plain ``(a, b) -> float`` function to the Metric protocol."""

    def __init__(self, func: Callable[[Hashable, Hashable], float]) -> None:
        self.func = func

    def distance(self, a: Hashable, b: Hashable) -> float:
        return self.func(a, b)

    def __repr__(self) -> str:
        name = getattr(self.func, "__name__", type(self.func).__name__)
        return f"CallableMetric({name})"
