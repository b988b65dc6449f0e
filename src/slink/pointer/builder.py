"""Incremental construction of the pointer representation (SLINK).

Sibson's online update keeps the pi/lambda arrays a valid single-link
pointer representation of every prefix of the input. Adding the k-th object
costs O(k) distance evaluations and O(k) bookkeeping, so n objects take
O(n^2) time and O(n) memory.

References:
    R. Sibson, "SLINK: An optimally efficient algorithm for the single-link
    cluster method", The Computer Journal 16 (1973): 30-34.
"""

from __future__ import annotations

import logging
from collections.abc import Hashable, Iterable

from slink.distance.base import BatchMetric, Metric
from slink.distance.metric import check_distance, check_distances
from slink.exceptions import InvalidInputError
from slink.pointer.model import PointerModel

logger = logging.getLogger(__name__)

DEFAULT_LOG_EVERY = 1000


class SlinkBuilder:
    """Builds a PointerModel one object at a time.

    The order of ``add_object`` calls is the construction order. It changes
    the intermediate arrays but not the dendrogram they encode.

    Not safe for concurrent ``add_object`` calls. The finished model may be
    read from any number of threads.

    Example:
        >>> metric = VectorMetric(np.array([[0.0], [1.0], [3.0]]))
        >>> builder = SlinkBuilder(metric)
        >>> model = builder.add_objects(range(3))
        >>> model.pointer_of(0), model.level_of(0)
        (1, 1.0)
    """

    def __init__(self, metric: Metric, model: PointerModel | None = None) -> None:
        """Initialize SlinkBuilder.

        Args:
            metric: Distance between object ids
            model: Model to extend (default: a new empty model)
        """
        self.metric = metric
        self._model = model if model is not None else PointerModel()
        self._batched = isinstance(metric, BatchMetric)

    @property
    def model(self) -> PointerModel:
        """The model under construction."""
        return self._model

    def _distance_row(self, key: Hashable) -> list[float]:
        """Distances from every object already in the model to ``key``."""
        existing = self._model.all_ids()
        if not existing:
            return []
        if self._batched:
            row = self.metric.distances(existing, key)  # type: ignore[attr-defined]
            return check_distances(row, len(existing)).tolist()
        return [check_distance(self.metric.distance(other, key)) for other in existing]

    def add_object(self, key: Hashable) -> None:
        """Insert one object and update the pointer representation.

        Args:
            key: Identifier of the new object

        Raises:
            InvalidInputError: If the id was already added or the metric
                returns a negative, NaN or non-numeric distance. The model
                is left unchanged.
        """
        if key in self._model:
            raise InvalidInputError(f"Object id {key!r} was already added")

        # Evaluated before any mutation so a failing metric leaves the model intact.
        m = self._distance_row(key)
        k = len(m)
        new = self._model.append(key)
        if k == 0:
            return

        pi = self._model.pointers.tolist()
        lam = self._model.levels.tolist()
        changed = set()

        for i in range(k):
            p = pi[i]
            if m[i] < lam[i]:
                m[p] = min(m[p], lam[i])
                pi[i] = new
                lam[i] = m[i]
                changed.add(i)
            else:
                m[p] = min(m[p], m[i])

        for i in range(k):
            if lam[i] >= lam[pi[i]]:
                pi[i] = new
                changed.add(i)

        for i in changed:
            self._model.set_pointer_at(i, pi[i], lam[i])

    def add_objects(
        self,
        keys: Iterable[Hashable],
        log_every: int = DEFAULT_LOG_EVERY,
    ) -> PointerModel:
        """Insert objects in iteration order.

        Args:
            keys: Object identifiers, each unique
            log_every: Emit a debug progress message every this many objects

        Returns:
            The model under construction
        """
        start = len(self._model)
        logger.info(f"Building pointer representation with {self.metric}")
        for count, key in enumerate(keys, start=1):
            self.add_object(key)
            if log_every and count % log_every == 0:
                logger.debug(f"Added {count} objects ({len(self._model)} total)")
        logger.info(
            f"Pointer representation complete: {len(self._model) - start} objects "
            f"added, {len(self._model)} total"
        )
        return self._model

    def __repr__(self) -> str:
        return f"SlinkBuilder(metric={self.metric!r}, n={len(self._model)})"


def build_pointer_model(
    metric: Metric, keys: Iterable[Hashable], log_every: int = DEFAULT_LOG_EVERY
) -> PointerModel:
    """Build a pointer representation for ``keys`` in a single call."""
    return SlinkBuilder(metric).add_objects(keys, log_every=log_every)

