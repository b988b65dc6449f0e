"""Lookup of distance strategies by name and alias."""

from __future__ import annotations

from typing import Any, Callable

from slink.distance.base import VectorDistance
from slink.distance.bray_curtis import BrayCurtisDistance
from slink.distance.minkowski import (
    EuclideanDistance,
    LpDistance,
    ManhattanDistance,
    MaximumDistance,
)
from slink.exceptions import InvalidInputError

DISTANCE_MAP: dict[str, Callable[..., VectorDistance]] = {
    "euclidean": EuclideanDistance,
    "manhattan": ManhattanDistance,
    "maximum": MaximumDistance,
    "lp": LpDistance,
    "braycurtis": BrayCurtisDistance,
}

ALIASES: dict[str, str] = {
    "l2": "euclidean",
    "l1": "manhattan",
    "cityblock": "manhattan",
    "chebyshev": "maximum",
    "linf": "maximum",
    "minkowski": "lp",
    "bray-curtis": "braycurtis",
    "sorensen": "braycurtis",
    "dice": "braycurtis",
    "sorensen-dice": "braycurtis",
}


def canonical_name(name: str) -> str:
    """Resolve an alias to its canonical distance name.

    Raises:
        InvalidInputError: If the name is unknown
    """
    key = name.strip().lower()
    key = ALIASES.get(key, key)
    if key not in DISTANCE_MAP:
        known = sorted(set(DISTANCE_MAP) | set(ALIASES))
        raise InvalidInputError(f"Unknown distance '{name}'. Expected one of: {known}")
    return key


def get_distance(name: str, **params: Any) -> VectorDistance:
    """Create a distance strategy by name.

    Args:
        name: Distance name or alias (e.g. "euclidean", "l1", "bray-curtis")
        **params: Constructor arguments, e.g. ``p`` for "lp"

    Returns:
        Distance strategy instance

    Raises:
        InvalidInputError: If the name is unknown or params are rejected
    """
    factory = DISTANCE_MAP[canonical_name(name)]
    try:
        return factory(**params)
    except InvalidInputError:
        raise
    except (TypeError, ValueError) as e:
        raise InvalidInputError(f"Invalid parameters for distance '{name}': {e}") from e
