"""Bray-Curtis (Sorensen-Dice) dissimilarity."""

from __future__ import annotations

import numpy as np

from slink.distance.minkowski import check_dimensions


class BrayCurtisDistance:
    """Bray-Curtis distance ``sum|x - y| / sum(|x| + |y|)``.

    Values lie in [0, 1] for non-negative data. Two all-zero vectors are at
    distance 0. Not a metric in general (the triangle inequality may fail),
    which single-link construction tolerates.

    References:
        J. R. Bray and J. T. Curtis, "An ordination of the upland forest
        communities of southern Wisconsin", Ecological Monographs 27.4 (1957).
    """

    name = "braycurtis"

    def pairwise(self, X: np.ndarray, v: np.ndarray) -> np.ndarray:
        X = np.atleast_2d(np.asarray(X, dtype=np.float64))
        v = np.asarray(v, dtype=np.float64)
        check_dimensions(X, v)
        sumdiff = np.abs(X - v).sum(axis=1)
        sumsum = (np.abs(X) + np.abs(v)).sum(axis=1)
        out = np.zeros_like(sumdiff)
        np.divide(sumdiff, sumsum, out=out, where=sumsum > 0)
        return out

    def __call__(self, u: np.ndarray, v: np.ndarray) -> float:
        return float(self.pairwise(np.asarray(u)[np.newaxis], v)[0])

    def __eq__(self, other: object) -> bool:
        return type(other) is type(self)

    def __hash__(self) -> int:
        return hash(type(self).__name__)

    def __repr__(self) -> str:
        return "BrayCurtisDistance()"
