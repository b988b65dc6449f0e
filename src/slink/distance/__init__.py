"""Distance metrics for single-link clustering."""

from slink.distance.base import BatchMetric, Metric, VectorDistance
from slink.distance.bray_curtis import BrayCurtisDistance
from slink.distance.metric import (
    CallableMetric,
    VectorMetric,
    check_distance,
    check_distances,
)
from slink.distance.minkowski import (
    EuclideanDistance,
    LpDistance,
    ManhattanDistance,
    MaximumDistance,
)
from slink.distance.registry import canonical_name, get_distance

__all__ = [
    # Protocols
    "Metric",
    "BatchMetric",
    "VectorDistance",
    # Strategies
    "LpDistance",
    "EuclideanDistance",
    "ManhattanDistance",
    "MaximumDistance",
    "BrayCurtisDistance",
    "canonical_name",
    "get_distance",
    # Metric adapters
    "VectorMetric",
    "CallableMetric",
    "check_distance",
    "check_distances",
]
