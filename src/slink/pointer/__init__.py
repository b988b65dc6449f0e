"""Pointer representation, SLINK construction and cluster extraction."""

from slink.pointer.builder import SlinkBuilder, build_pointer_model
from slink.pointer.dendrogram import cophenetic_distance, to_linkage
from slink.pointer.extractor import (
    ClusterExtractor,
    cluster_labels,
    extract_clusters,
    parse_threshold,
)
from slink.pointer.model import PointerModel

__all__ = [
    "PointerModel",
    "SlinkBuilder",
    "build_pointer_model",
    "ClusterExtractor",
    "extract_clusters",
    "cluster_labels",
    "parse_threshold",
    "to_linkage",
    "cophenetic_distance",
]
