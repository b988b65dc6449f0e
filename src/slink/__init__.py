"""Slink - single-link hierarchical clustering via the pointer representation.

This package builds Sibson's pointer representation of the single-link
dendrogram incrementally in O(n^2) time and O(n) memory, and cuts it into
flat clusters at any distance without rebuilding.

Usage:
    >>> import numpy as np
    >>> from slink import SlinkBuilder, VectorMetric, extract_clusters
    >>>
    >>> points = np.array([[0.0], [1.0], [3.0]])
    >>> model = SlinkBuilder(VectorMetric(points)).add_objects(range(3))
    >>> extract_clusters(model, 1.0)
    [frozenset({0, 1}), frozenset({2})]
"""

# ============================================================================
# Main API
# ============================================================================

from slink.pointer import (
    ClusterExtractor,
    PointerModel,
    SlinkBuilder,
    build_pointer_model,
    cluster_labels,
    cophenetic_distance,
    extract_clusters,
    parse_threshold,
    to_linkage,
)

# Distance metrics
from slink.distance import CallableMetric, Metric, VectorMetric, get_distance

# Clustering facade
from slink.clustering import SingleLinkClusterer, ThresholdSweep

# Configuration and storage
from slink.models import PointerRepresentationData, SlinkConfig

# Errors
from slink.exceptions import (
    InvalidInputError,
    InvalidModelError,
    NotFittedError,
    SlinkError,
    UnknownObjectError,
)

# Submodules
from slink import clustering, distance, pointer

# ============================================================================
# Package metadata
# ============================================================================

__version__ = "0.1.0"

__all__ = [
    # Main API
    "PointerModel",
    "SlinkBuilder",
    "build_pointer_model",
    "ClusterExtractor",
    "extract_clusters",
    "cluster_labels",
    "parse_threshold",
    "to_linkage",
    "cophenetic_distance",
    # Distances
    "Metric",
    "VectorMetric",
    "CallableMetric",
    "get_distance",
    # Clustering
    "SingleLinkClusterer",
    "ThresholdSweep",
    # Configuration
    "SlinkConfig",
    "PointerRepresentationData",
    # Errors
    "SlinkError",
    "InvalidInputError",
    "InvalidModelError",
    "NotFittedError",
    "UnknownObjectError",
    # Modules
    "clustering",
    "distance",
    "pointer",
]
