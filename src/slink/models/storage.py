"""Pydantic models for clustering configuration and persisted pointer data.

The pointer representation is stored as two parallel lists keyed by a third
list of object ids. JSON has no infinity, so merge levels of ``+inf`` are
written as ``null``.
"""

from __future__ import annotations

import math

from pydantic import BaseModel, Field, field_validator, model_validator

from slink.distance.registry import canonical_name

ObjectId = int | str


class SlinkConfig(BaseModel):
    """Configuration for single-link clustering.

    Attributes:
        metric: Distance name or alias (e.g. "euclidean", "bray-curtis")
        p: Order of the norm when metric is "lp"/"minkowski"
        threshold: Distance at which to cut the dendrogram
        n_clusters: Number of clusters to cut the dendrogram into
    """

    metric: str = Field(default="euclidean", description="Distance function name")
    p: float | None = Field(default=None, ge=1.0, description="Order of the L_p norm")
    threshold: float | None = Field(
        default=None, ge=0.0, description="Dendrogram cut distance"
    )
    n_clusters: int | None = Field(
        default=None, gt=0, description="Dendrogram cut cluster count"
    )

    model_config = {"frozen": True}

    @field_validator("metric")
    @classmethod
    def _known_metric(cls, value: str) -> str:
        return canonical_name(value)

    @model_validator(mode="after")
    def _one_cut_criterion(self) -> "SlinkConfig":
        if (self.threshold is None) == (self.n_clusters is None):
            raise ValueError("Exactly one of threshold or n_clusters must be set")
        if self.p is not None and self.metric != "lp":
            raise ValueError(f"p is only valid for the 'lp' metric, got '{self.metric}'")
        return self

    def metric_params(self) -> dict[str, float]:
        """Keyword arguments for ``get_distance``."""
        return {"p": self.p} if self.p is not None else {}


class PointerRepresentationData(BaseModel):
    """Serialised pointer representation.

    Attributes:
        ids: Object identifiers in addition order
        pointers: Addition index of pi(id) for each id
        levels: lambda(id) for each id, ``None`` for +inf
        metric: Name of the distance the representation was built with
    """

    ids: list[ObjectId] = Field(default_factory=list)
    pointers: list[int] = Field(default_factory=list)
    levels: list[float | None] = Field(default_factory=list)
    metric: str | None = Field(default=None, description="Distance name")

    @model_validator(mode="after")
    def _equal_lengths(self) -> "PointerRepresentationData":
        if not len(self.ids) == len(self.pointers) == len(self.levels):
            raise ValueError(
                f"ids, pointers and levels must have equal length, got "
                f"{len(self.ids)}, {len(self.pointers)}, {len(self.levels)}"
            )
        return self

    @staticmethod
    def encode_level(level: float) -> float | None:
        return None if math.isinf(level) else float(level)

    @staticmethod
    def decode_level(level: float | None) -> float:
        return math.inf if level is None else float(level)


class ExtractionSummary(BaseModel):
    """Summary of one dendrogram cut.

    Attributes:
        threshold: Distance the dendrogram was cut at
        n_clusters: Number of clusters
        n_samples: Total number of objects
        cluster_sizes: Size of each cluster, in cluster order
    """

    threshold: float
    n_clusters: int = Field(..., ge=0)
    n_samples: int = Field(..., ge=0)
    cluster_sizes: list[int] = Field(default_factory=list)

    @property
    def n_singletons(self) -> int:
        """Number of clusters with one member."""
        return sum(1 for size in self.cluster_sizes if size == 1)
