"""Protocol for estimators that cut a single-link dendrogram."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

import numpy as np

from slink.pointer.model import PointerModel


@runtime_checkable
class Clusterer(Protocol):
    """Estimator built on a pointer representation.

    ``fit`` builds the dendrogram once; ``relabel`` cuts it again at a new
    distance or cluster count. Fitted state is exposed through trailing
    underscore properties, sklearn style.
    """

    def fit(self, embeddings: np.ndarray) -> "Clusterer":
        """Build the dendrogram over the rows of embeddings and cut it."""
        ...

    def relabel(
        self, threshold: float | None = None, n_clusters: int | None = None
    ) -> "Clusterer":
        """Cut the fitted dendrogram with a new criterion."""
        ...

    def predict(self, embeddings: np.ndarray) -> np.ndarray:
        """Assign new rows to the nearest cluster center."""
        ...

    @property
    def pointer_model_(self) -> PointerModel:
        """Pointer representation, one object per fitted row."""
        ...

    @property
    def threshold_(self) -> float:
        """Distance the dendrogram is currently cut at."""
        ...

    @property
    def labels_(self) -> np.ndarray:
        ...

    @property
    def n_clusters_(self) -> int:
        ...
