"""Threshold sweep over a single-link dendrogram."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field

import numpy as np

from slink.clustering.metrics import ClusterMetrics, compute_cluster_metrics
from slink.exceptions import InvalidInputError
from slink.pointer.extractor import ClusterExtractor, parse_threshold
from slink.pointer.model import PointerModel

logger = logging.getLogger(__name__)


@dataclass
class SweepResult:
    """Result of a single dendrogram cut.

    Attributes:
        threshold: Distance the dendrogram was cut at
        metrics: Clustering metrics
        labels: Cluster assignments in addition order
    """

    threshold: float
    metrics: ClusterMetrics
    labels: np.ndarray


@dataclass
class SweepResults:
    """Results from a threshold sweep.

    Attributes:
        results: List of individual sweep results, by increasing threshold
    """

    results: list[SweepResult] = field(default_factory=list)

    def best_by_silhouette(self) -> SweepResult | None:
        """Get the result with the highest silhouette score."""
        if not self.results:
            return None
        return max(self.results, key=lambda r: r.metrics.silhouette_score)

    def best_by_n_clusters(self, target: int) -> SweepResult | None:
        """Get the result closest to target number of clusters with best silhouette."""
        if not self.results:
            return None
        exact_matches = [r for r in self.results if r.metrics.n_clusters == target]
        if exact_matches:
            return max(exact_matches, key=lambda r: r.metrics.silhouette_score)
        return min(self.results, key=lambda r: abs(r.metrics.n_clusters - target))

    def to_dataframe(self):
        """Convert results to a pandas DataFrame."""
        import pandas as pd

        records = []
        for r in self.results:
            records.append(
                {
                    "threshold": r.threshold,
                    "silhouette_score": r.metrics.silhouette_score,
                    "n_clusters": r.metrics.n_clusters,
                    "n_samples": r.metrics.n_samples,
                    "n_singletons": r.metrics.n_singletons,
                    "min_cluster_size": r.metrics.min_cluster_size,
                    "max_cluster_size": r.metrics.max_cluster_size,
                    "avg_cluster_size": r.metrics.avg_cluster_size,
                }
            )
        return pd.DataFrame(records)

    def __len__(self) -> int:
        return len(self.results)

    def __iter__(self):
        return iter(self.results)


class ThresholdSweep:
    """Evaluate many cuts of one dendrogram without rebuilding it.

    Example:
        >>> sweep = ThresholdSweep()
        >>> results = sweep.run(clusterer.pointer_model_, embeddings)
        >>> best = results.best_by_silhouette()
        >>> print(f"Best cut: {best.threshold:.3f} -> {best.metrics.n_clusters} clusters")
    """

    def __init__(
        self,
        thresholds: Sequence[float] | None = None,
        metric: str | Callable[[np.ndarray, np.ndarray], float] = "euclidean",
    ) -> None:
        """Initialize ThresholdSweep.

        Args:
            thresholds: Cut distances to evaluate. If None, every distinct
                merge level of the model is used.
            metric: Distance for the silhouette score (default: "euclidean")
        """
        self.thresholds = (
            None if thresholds is None else sorted(parse_threshold(t) for t in thresholds)
        )
        self.metric = metric
        self._extractor = ClusterExtractor()

    def _thresholds_for(self, model: PointerModel) -> list[float]:
        if self.thresholds is not None:
            return list(self.thresholds)
        return np.unique(model.merge_levels()).tolist()

    def run(self, model: PointerModel, embeddings: np.ndarray) -> SweepResults:
        """Cut the dendrogram at every threshold and score each cut.

        Args:
            model: Pointer representation built over the rows of embeddings,
                added in row order
            embeddings: Input embeddings of shape (n_samples, n_features)

        Returns:
            SweepResults containing all evaluated cuts
        """
        embeddings = np.asarray(embeddings)
        if len(embeddings) != len(model):
            raise InvalidInputError(
                f"Model has {len(model)} objects but {len(embeddings)} embeddings were given"
            )

        results = SweepResults()
        for threshold in self._thresholds_for(model):
            labels = self._extractor.labels(model, threshold)
            metrics = compute_cluster_metrics(
                embeddings, labels, threshold=threshold, metric=self.metric
            )
            logger.debug(f"Threshold {threshold:.6g}: {metrics}")
            results.results.append(
                SweepResult(threshold=threshold, metrics=metrics, labels=labels)
            )
        return results

    def __repr__(self) -> str:
        n = "merge levels" if self.thresholds is None else len(self.thresholds)
        return f"ThresholdSweep(thresholds={n})"
