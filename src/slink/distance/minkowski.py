"""Minkowski space L_p norms such as the Euclidean and Manhattan distances."""

from __future__ import annotations

import numpy as np

from slink.exceptions import InvalidInputError


def check_dimensions(X: np.ndarray, v: np.ndarray) -> None:
    """Raise InvalidInputError if rows of X and v differ in dimensionality."""
    if X.shape[-1] != v.shape[-1]:
        raise InvalidInputError(
            f"Different dimensionality of feature vectors: {X.shape[-1]} != {v.shape[-1]}"
        )


class LpDistance:
    """Minkowski L_p distance.

    Example:
        >>> dist = LpDistance(p=3)
        >>> dist(np.array([0.0, 0.0]), np.array([1.0, 1.0]))
        1.2599...
    """

    def __init__(self, p: float = 2.0) -> None:
        """Initialize L_p distance.

        Args:
            p: Order of the norm, p >= 1 or ``float("inf")`` (default: 2.0)
        """
        try:
            p = float(p)
        except (TypeError, ValueError) as e:
            raise InvalidInputError(f"p must be a number, got {p!r}") from e
        if np.isnan(p) or p < 1.0:
            raise InvalidInputError(f"p must be >= 1 for a metric L_p norm, got {p}")
        self.p = p

    @property
    def name(self) -> str:
        return f"lp(p={self.p:g})"

    def pairwise(self, X: np.ndarray, v: np.ndarray) -> np.ndarray:
        X = np.atleast_2d(np.asarray(X, dtype=np.float64))
        v = np.asarray(v, dtype=np.float64)
        check_dimensions(X, v)
        return np.linalg.norm(X - v, ord=self.p, axis=1)

    def __call__(self, u: np.ndarray, v: np.ndarray) -> float:
        return float(self.pairwise(np.asarray(u)[np.newaxis], v)[0])

    def __eq__(self, other: object) -> bool:
        return type(other) is type(self) and other.p == self.p

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.p))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(p={self.p:g})"


class EuclideanDistance(LpDistance):
    """Euclidean (L_2) distance."""

    def __init__(self) -> None:
        super().__init__(p=2.0)

    @property
    def name(self) -> str:
        return "euclidean"

    def __repr__(self) -> str:
        return "EuclideanDistance()"


class ManhattanDistance(LpDistance):
    """Manhattan (L_1) distance."""

    def __init__(self) -> None:
        super().__init__(p=1.0)

    @property
    def name(self) -> str:
        return "manhattan"

    def __repr__(self) -> str:
        return "ManhattanDistance()"


class MaximumDistance(LpDistance):
    """Maximum (L_inf, Chebyshev) distance."""

    def __init__(self) -> None:
        super().__init__(p=float("inf"))

    @property
    def name(self) -> str:
        return "maximum"

    def __repr__(self) -> str:
        return "MaximumDistance()"
