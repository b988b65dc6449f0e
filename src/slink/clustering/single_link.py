"""Single-link clustering with an sklearn-like interface."""

from __future__ import annotations

import logging

import numpy as np
from pydantic import ValidationError

from slink.clustering.metrics import ClusterInfo, ClusterMetrics, compute_cluster_metrics
from slink.distance.metric import VectorMetric
from slink.exceptions import InvalidInputError, NotFittedError
from slink.models.storage import SlinkConfig
from slink.pointer.builder import SlinkBuilder
from slink.pointer.extractor import ClusterExtractor
from slink.pointer.model import PointerModel

logger = logging.getLogger(__name__)

# Names understood by sklearn.metrics.pairwise_distances
SKLEARN_METRICS = {
    "euclidean": "euclidean",
    "manhattan": "manhattan",
    "maximum": "chebyshev",
    "braycurtis": "braycurtis",
}


def _make_config(**kwargs) -> SlinkConfig:
    try:
        return SlinkConfig(**kwargs)
    except ValidationError as e:
        raise InvalidInputError(f"Invalid clusterer configuration: {e}") from e


class SingleLinkClusterer:
    """Single-link hierarchical clustering cut at a distance or cluster count.

    Builds the pointer representation once with SLINK; ``relabel`` cuts the
    same dendrogram again without rebuilding it.

    Example:
        >>> clusterer = SingleLinkClusterer(threshold=0.5)
        >>> clusterer.fit(embeddings)
        >>> clusterer.relabel(n_clusters=3).labels_
    """

    def __init__(
        self,
        threshold: float | None = None,
        n_clusters: int | None = None,
        metric: str = "euclidean",
        p: float | None = None,
    ) -> None:
        """Initialize single-link clusterer.

        Args:
            threshold: Distance at which to cut the dendrogram
            n_clusters: Number of clusters to cut into (exclusive with threshold)
            metric: Distance name or alias (default: "euclidean")
            p: Order of the norm for metric "lp"/"minkowski"

        Raises:
            InvalidInputError: If the cut criterion or metric is invalid
        """
        self.config = _make_config(
            metric=metric, p=p, threshold=threshold, n_clusters=n_clusters
        )
        self._extractor = ClusterExtractor()
        self._vector_metric: VectorMetric | None = None
        self._model: PointerModel | None = None
        self._embeddings: np.ndarray | None = None
        self._labels: np.ndarray | None = None
        self._cluster_centers: np.ndarray | None = None
        self._threshold: float | None = None

    @property
    def threshold(self) -> float | None:
        return self.config.threshold

    @property
    def n_clusters(self) -> int | None:
        return self.config.n_clusters

    @property
    def metric(self) -> str:
        return self.config.metric

    def fit(self, embeddings: np.ndarray) -> "SingleLinkClusterer":
        """Build the dendrogram over embeddings and cut it.

        Args:
            embeddings: Input embeddings of shape (n_samples, n_features)

        Returns:
            Self

        Raises:
            InvalidInputError: If embeddings are not a non-empty 2-D array
        """
        embeddings = np.asarray(embeddings, dtype=np.float64)
        if embeddings.ndim != 2 or len(embeddings) == 0:
            raise InvalidInputError(
                f"Expected embeddings of shape (n_samples, n_features), got {embeddings.shape}"
            )

        logger.info(
            f"Fitting single-link clustering on {len(embeddings)} samples "
            f"with metric '{self.metric}'"
        )
        self._vector_metric = VectorMetric(
            embeddings, self.metric, **self.config.metric_params()
        )
        builder = SlinkBuilder(self._vector_metric)
        self._model = builder.add_objects(range(len(embeddings)))
        self._embeddings = embeddings
        self._cut()
        return self

    def relabel(
        self, threshold: float | None = None, n_clusters: int | None = None
    ) -> "SingleLinkClusterer":
        """Cut the fitted dendrogram with a new criterion.

        Args:
            threshold: New cut distance
            n_clusters: New cluster count (exclusive with threshold)

        Returns:
            Self
        """
        self._ensure_model()
        self.config = _make_config(
            metric=self.metric,
            p=self.config.p,
            threshold=threshold,
            n_clusters=n_clusters,
        )
        self._cut()
        return self

    def _cut(self) -> None:
        model = self._ensure_model()
        if self.config.n_clusters is not None:
            threshold = self._extractor.threshold_for_n_clusters(
                model, self.config.n_clusters
            )
        else:
            threshold = float(self.config.threshold)  # type: ignore[arg-type]

        self._threshold = threshold
        self._labels = self._extractor.labels(model, threshold)
        self._compute_cluster_centers()
        logger.info(
            f"Cut dendrogram at {threshold:.6g}: {self.n_clusters_} clusters"
        )

    def _compute_cluster_centers(self) -> None:
        """Compute cluster centers as mean of cluster members."""
        if self._labels is None or self._embeddings is None:
            return
        n_found = int(self._labels.max()) + 1
        self._cluster_centers = np.array(
            [self._embeddings[self._labels == label].mean(axis=0) for label in range(n_found)]
        )

    def predict(self, embeddings: np.ndarray) -> np.ndarray:
        """Assign samples to the nearest cluster center.

        Single-link clustering has no native out-of-sample rule; centers are
        the member means and nearness uses the configured distance.

        Args:
            embeddings: Input embeddings of shape (n_samples, n_features)

        Returns:
            Cluster assignments of shape (n_samples,)
        """
        if self._cluster_centers is None or self._vector_metric is None:
            raise NotFittedError(
                "Clusterer must be fitted before predict. Call fit() first."
            )
        embeddings = np.atleast_2d(np.asarray(embeddings, dtype=np.float64))
        distance = self._vector_metric.distance_function
        distances = np.stack(
            [distance.pairwise(self._cluster_centers, row) for row in embeddings]
        )
        return distances.argmin(axis=1)

    def fit_predict(self, embeddings: np.ndarray) -> np.ndarray:
        """Fit the clusterer and return cluster assignments."""
        self.fit(embeddings)
        return self.labels_

    def get_clusters(self) -> list[ClusterInfo]:
        """Per-cluster size, centroid and highest internal merge level."""
        labels = self.labels_
        centers = self.cluster_centers_
        levels = self._ensure_model().levels
        threshold = self.threshold_
        infos = []
        for label in range(len(centers)):
            member_levels = levels[labels == label]
            inside = member_levels[member_levels <= threshold]
            infos.append(
                ClusterInfo(
                    cluster_id=label,
                    size=int(len(member_levels)),
                    centroid=centers[label],
                    merge_level=float(inside.max()) if len(inside) else 0.0,
                )
            )
        return infos

    def get_metrics(self) -> ClusterMetrics:
        """Silhouette and size statistics for the current cut."""
        if self._embeddings is None or self._vector_metric is None:
            raise NotFittedError("Clusterer must be fitted first.")
        metric = SKLEARN_METRICS.get(self.metric, self._vector_metric.distance_function)
        return compute_cluster_metrics(
            self._embeddings, self.labels_, threshold=self.threshold_, metric=metric
        )

    def _ensure_model(self) -> PointerModel:
        if self._model is None:
            raise NotFittedError("Clusterer must be fitted first.")
        return self._model

    @property
    def pointer_model_(self) -> PointerModel:
        """Pointer representation built during fit()."""
        return self._ensure_model()

    @property
    def threshold_(self) -> float:
        """Distance the dendrogram is currently cut at."""
        if self._threshold is None:
            raise NotFittedError("Clusterer must be fitted first.")
        return self._threshold

    @property
    def cluster_centers_(self) -> np.ndarray:
        """Cluster centers of shape (n_clusters, n_features).

        Computed as the mean of cluster members.
        """
        if self._cluster_centers is None:
            raise NotFittedError("Clusterer must be fitted first.")
        return self._cluster_centers

    @property
    def labels_(self) -> np.ndarray:
        """Labels assigned during fit() of shape (n_samples,)."""
        if self._labels is None:
            raise NotFittedError("Clusterer must be fitted first.")
        return self._labels

    @property
    def n_clusters_(self) -> int:
        """Number of clusters in the current cut."""
        return len(self.cluster_centers_)

    def __repr__(self) -> str:
        if self.config.n_clusters is not None:
            cut = f"n_clusters={self.config.n_clusters}"
        else:
            cut = f"threshold={self.config.threshold}"
        return f"SingleLinkClusterer({cut}, metric='{self.metric}')"
