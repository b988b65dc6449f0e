"""Configuration and storage models."""

from slink.models.storage import (
    ExtractionSummary,
    ObjectId,
    PointerRepresentationData,
    SlinkConfig,
)

__all__ = [
    "ExtractionSummary",
    "ObjectId",
    "PointerRepresentationData",
    "SlinkConfig",
]
