"""Pointer representation of a single-link dendrogram.

Each object is stored at its addition index. ``pi`` holds the addition index
of the object it will eventually merge into and ``lambda`` the distance at
which that happens. Both live in dense numpy arrays that grow by doubling.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Hashable, Iterator
from pathlib import Path

import numpy as np

from slink.exceptions import InvalidInputError, InvalidModelError, UnknownObjectError
from slink.models.storage import PointerRepresentationData

logger = logging.getLogger(__name__)

_INITIAL_CAPACITY = 16


class PointerModel:
    """The pi/lambda arrays of a single-link dendrogram.

    Readers use ``pointer_of``, ``level_of`` and ``all_ids``. The only
    writers are ``append`` and ``set_pointer``/``set_pointer_at``, which are
    reserved for the builder.

    Example:
        >>> model = PointerModel()
        >>> model.append("a")
        0
        >>> model.level_of("a")
        inf
    """

    def __init__(self, capacity: int = _INITIAL_CAPACITY) -> None:
        capacity = max(int(capacity), 1)
        self._ids: list[Hashable] = []
        self._index: dict[Hashable, int] = {}
        self._pi = np.zeros(capacity, dtype=np.int64)
        self._lambda = np.full(capacity, np.inf, dtype=np.float64)

    # ------------------------------------------------------------------
    # Read access
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._ids)

    def __contains__(self, key: object) -> bool:
        try:
            return key in self._index
        except TypeError:
            return False

    def __iter__(self) -> Iterator[Hashable]:
        return iter(self._ids)

    def all_ids(self) -> list[Hashable]:
        """Object ids in addition order."""
        return list(self._ids)

    def id_at(self, index: int) -> Hashable:
        """Object id stored at an addition index."""
        return self._ids[index]

    def index_of(self, key: Hashable) -> int:
        """Addition index of an object id.

        Raises:
            UnknownObjectError: If the id was never added
        """
        try:
            return self._index[key]
        except (KeyError, TypeError):
            raise UnknownObjectError(key) from None

    def pointer_of(self, key: Hashable) -> Hashable:
        """pi(id): the id this object's cluster merges into."""
        return self._ids[int(self._pi[self.index_of(key)])]

    def level_of(self, key: Hashable) -> float:
        """lambda(id): the distance at which the merge with pi(id) happens."""
        return float(self._lambda[self.index_of(key)])

    @property
    def pointers(self) -> np.ndarray:
        """Read-only view of pi as addition indices, shape (n,)."""
        view = self._pi[: len(self._ids)]
        view.flags.writeable = False
        return view

    @property
    def levels(self) -> np.ndarray:
        """Read-only view of lambda, shape (n,)."""
        view = self._lambda[: len(self._ids)]
        view.flags.writeable = False
        return view

    def merge_levels(self) -> np.ndarray:
        """Finite merge levels sorted ascending.

        Shape (n - 1,) when every pair is at a finite distance; shorter when
        some objects only merge at an infinite level.
        """
        levels = self.levels
        return np.sort(levels[np.isfinite(levels)], kind="stable")

    @property
    def root(self) -> Hashable | None:
        """The most recently added id, or None for an empty model."""
        return self._ids[-1] if self._ids else None

    # ------------------------------------------------------------------
    # Mutation (builder only)
    # ------------------------------------------------------------------

    def append(self, key: Hashable) -> int:
        """Add a new object as its own root with an infinite merge level.

        Returns:
            The addition index of the new object

        Raises:
            InvalidInputError: If the id is already present or unhashable
        """
        try:
            exists = key in self._index
        except TypeError as e:
            raise InvalidInputError(f"Object id must be hashable: {key!r}") from e
        if exists:
            raise InvalidInputError(f"Object id {key!r} was already added")

        index = len(self._ids)
        if index == len(self._pi):
            self._grow()
        self._ids.append(key)
        self._index[key] = index
        self._pi[index] = index
        self._lambda[index] = np.inf
        return index

    def set_pointer_at(self, index: int, pointer: int, level: float) -> None:
        """Set pi and lambda for the object at an addition index."""
        self._pi[index] = pointer
        self._lambda[index] = level

    def set_pointer(self, key: Hashable, pointer: Hashable, level: float) -> None:
        """Set pi(key) = pointer and lambda(key) = level."""
        self.set_pointer_at(self.index_of(key), self.index_of(pointer), level)

    def _grow(self) -> None:
        capacity = 2 * len(self._pi)
        pi = np.zeros(capacity, dtype=np.int64)
        lam = np.full(capacity, np.inf, dtype=np.float64)
        n = len(self._ids)
        pi[:n] = self._pi[:n]
        lam[:n] = self._lambda[:n]
        self._pi, self._lambda = pi, lam

    # ------------------------------------------------------------------
    # Invariants
    # ------------------------------------------------------------------

    def validate(self) -> "PointerModel":
        """Check the structural invariants of the representation.

        Every pointer must go forward in addition order (or be the root's
        fixed point), only the last object may be a root, and merge levels
        must not decrease along a pointer.

        Returns:
            Self

        Raises:
            InvalidModelError: On the first violated invariant
        """
        n = len(self._ids)
        if n == 0:
            return self
        pi = self.pointers
        lam = self.levels
        indices = np.arange(n)

        if (pi < 0).any() or (pi >= n).any():
            raise InvalidModelError("Pointer outside of the model")
        if pi[-1] != n - 1:
            raise InvalidModelError("The last added object must point to itself")
        if not math.isinf(lam[-1]):
            raise InvalidModelError("The last added object must have an infinite level")
        if (pi[:-1] <= indices[:-1]).any():
            bad = int(np.flatnonzero(pi[:-1] <= indices[:-1])[0])
            raise InvalidModelError(
                f"Pointer of {self._ids[bad]!r} does not point to a later object"
            )
        if np.isnan(lam).any() or (lam < 0).any():
            raise InvalidModelError("Merge levels must be non-negative numbers")
        decreasing = lam[:-1] > lam[pi[:-1]]
        if decreasing.any():
            bad = int(np.flatnonzero(decreasing)[0])
            raise InvalidModelError(
                f"Merge level of {self._ids[bad]!r} exceeds the level of its pointer"
            )
        return self

    # ------------------------------------------------------------------
    # Output and persistence
    # ------------------------------------------------------------------

    def to_text(self) -> str:
        """One ``P(id) = pi   L(id) = lambda`` line per object.

        Lines are sorted by id when ids are mutually comparable, otherwise
        they follow addition order.
        """
        try:
            order = sorted(self._ids)
        except TypeError:
            order = list(self._ids)
        lines = [
            f"P({key}) = {self.pointer_of(key)}   L({key}) = {self.level_of(key)}"
            for key in order
        ]
        return "".join(line + "\n" for line in lines)

    def __str__(self) -> str:
        return self.to_text()

    def to_data(self, metric: str | None = None) -> PointerRepresentationData:
        """Convert to the serialisable pydantic schema."""
        return PointerRepresentationData(
            ids=[
                key.item() if isinstance(key, np.generic) else key
                for key in self._ids
            ],
            pointers=self.pointers.tolist(),
            levels=[PointerRepresentationData.encode_level(v) for v in self.levels],
            metric=metric,
        )

    @classmethod
    def from_data(cls, data: PointerRepresentationData) -> "PointerModel":
        """Rebuild a model from serialised data and validate it.

        Raises:
            InvalidModelError: If the data violates the invariants
        """
        model = cls(capacity=len(data.ids))
        try:
            for key in data.ids:
                model.append(key)
        except InvalidInputError as e:
            raise InvalidModelError(f"Invalid object ids: {e}") from e
        for index, (pointer, level) in enumerate(zip(data.pointers, data.levels)):
            model.set_pointer_at(
                index, pointer, PointerRepresentationData.decode_level(level)
            )
        return model.validate()

    def save(self, path: str | Path, metric: str | None = None) -> None:
        """Write the model as JSON."""
        path = Path(path)
        path.write_text(self.to_data(metric=metric).model_dump_json(indent=2))
        logger.info(f"Saved pointer representation with {len(self)} objects to {path}")

    @classmethod
    def load(cls, path: str | Path) -> "PointerModel":
        """Read a model written by ``save``."""
        path = Path(path)
        data = PointerRepresentationData.model_validate_json(path.read_text())
        model = cls.from_data(data)
        logger.info(f"Loaded pointer representation with {len(model)} objects from {path}")
        return model

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PointerModel):
            return NotImplemented
        return (
            self._ids == other._ids
            and np.array_equal(self.pointers, other.pointers)
            and np.array_equal(self.levels, other.levels)
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"PointerModel(n={len(self)})"
