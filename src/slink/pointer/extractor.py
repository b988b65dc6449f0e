"""Flat cluster extraction from a finished pointer representation."""

from __future__ import annotations

import math
from collections.abc import Hashable
from numbers import Integral, Real
from typing import Any

import numpy as np

from slink.exceptions import InvalidInputError
from slink.models.storage import ExtractionSummary
from slink.pointer.model import PointerModel


def parse_threshold(value: Any) -> float:
    """Normalise a threshold given as a number or a textual pattern.

    Args:
        value: Number, or string such as "1.5", "2e-3" or "inf"

    Returns:
        Threshold as float

    Raises:
        InvalidInputError: If the value is NaN, boolean or unparseable
    """
    if isinstance(value, (bool, np.bool_)):
        raise InvalidInputError(f"Threshold must be a number, got {value!r}")
    if isinstance(value, str):
        try:
            threshold = float(value.strip())
        except ValueError:
            raise InvalidInputError(f"Cannot parse threshold '{value}'") from None
    elif isinstance(value, (Real, np.floating, np.integer)):
        threshold = float(value)
    else:
        raise InvalidInputError(f"Threshold must be a number, got {type(value).__name__}")
    if math.isnan(threshold):
        raise InvalidInputError("Threshold must not be NaN")
    return threshold


class ClusterExtractor:
    """Cuts a single-link dendrogram at a distance.

    Following ``id, pi(id), pi(pi(id)), ...`` while the merge level stays at
    or below the threshold ends at the object's representative; objects with
    the same representative form a cluster. Pointers always go forward in
    addition order, so walking objects from last to first lets every object
    reuse the representative of its pointer and the whole cut costs O(n).

    Extraction never mutates the model, so one extractor can serve
    concurrent calls on the same model.

    Example:
        >>> extractor = ClusterExtractor()
        >>> extractor.extract(model, 1.0)
        [frozenset({'a', 'b'}), frozenset({'c'})]
    """

    def representatives(self, model: PointerModel, threshold: Any) -> np.ndarray:
        """Addition index of each object's representative.

        Args:
            model: Finished pointer representation
            threshold: Cut distance (number or textual pattern)

        Returns:
            Array of shape (n,) indexed by addition index
        """
        t = parse_threshold(threshold)
        pi = model.pointers.tolist()
        lam = model.levels.tolist()
        rep = list(range(len(pi)))
        for i in reversed(range(len(pi))):
            p = pi[i]
            if p != i and lam[i] <= t:
                rep[i] = rep[p]
        return np.asarray(rep, dtype=np.int64)

    def labels(self, model: PointerModel, threshold: Any) -> np.ndarray:
        """Cluster labels in addition order, numbered by first appearance."""
        rep = self.representatives(model, threshold)
        numbering: dict[int, int] = {}
        labels = [numbering.setdefault(r, len(numbering)) for r in rep.tolist()]
        return np.asarray(labels, dtype=np.int64)

    def extract(self, model: PointerModel, threshold: Any) -> list[frozenset[Hashable]]:
        """Partition the model's objects at a distance threshold.

        Args:
            model: Finished pointer representation
            threshold: Cut distance (number or textual pattern)

        Returns:
            Clusters ordered by the addition index of their first member.
            Empty for an empty model.

        Raises:
            InvalidInputError: If the threshold is malformed
        """
        labels = self.labels(model, threshold)
        members: list[list[Hashable]] = [[] for _ in range(int(labels.max(initial=-1)) + 1)]
        for key, label in zip(model.all_ids(), labels.tolist()):
            members[label].append(key)
        return [frozenset(cluster) for cluster in members]

    def threshold_for_n_clusters(self, model: PointerModel, n_clusters: int) -> float:
        """Merge level at which at most ``n_clusters`` clusters remain.

        When several merges share the level at the cut, they cannot be
        separated and the cut yields fewer clusters than requested.

        Raises:
            InvalidInputError: If n_clusters is not a positive integer
        """
        if isinstance(n_clusters, (bool, np.bool_)) or not isinstance(n_clusters, Integral):
            raise InvalidInputError(f"n_clusters must be an integer, got {n_clusters!r}")
        if n_clusters < 1:
            raise InvalidInputError(f"n_clusters must be positive, got {n_clusters}")
        levels = model.merge_levels()
        n = len(model)
        if n_clusters >= n:
            return float(np.nextafter(levels[0], -np.inf)) if len(levels) else 0.0
        rank = n - n_clusters - 1
        # Objects only reachable through infinite distances merge at inf
        if rank >= len(levels):
            return math.inf
        return float(levels[rank])

    def extract_n_clusters(
        self, model: PointerModel, n_clusters: int
    ) -> list[frozenset[Hashable]]:
        """Partition the model's objects into (at most) ``n_clusters`` clusters."""
        return self.extract(model, self.threshold_for_n_clusters(model, n_clusters))

    def summarize(self, model: PointerModel, threshold: Any) -> ExtractionSummary:
        """Cluster count and sizes for one cut."""
        clusters = self.extract(model, threshold)
        return ExtractionSummary(
            threshold=parse_threshold(threshold),
            n_clusters=len(clusters),
            n_samples=len(model),
            cluster_sizes=[len(cluster) for cluster in clusters],
        )


_default_extractor = ClusterExtractor()


def extract_clusters(model: PointerModel, threshold: Any) -> list[frozenset[Hashable]]:
    """Partition the model's objects at a distance threshold."""
    return _default_extractor.extract(model, threshold)


def cluster_labels(model: PointerModel, threshold: Any) -> np.ndarray:
    """Cluster labels in addition order at a distance threshold."""
    return _default_extractor.labels(model, threshold)
