"""Index build settings."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from pikodb.embedding import EmbeddingType


class IndexBuildQuality(Enum):
    """Construction effort of the graph index; the value is ef_construction."""

    QUICK = 100
    STANDARD = 200
    ROBUST = 400


@dataclass(frozen=True)
class IndexConfig:
    """How a collection's index is built and what vectors it holds."""

    build_quality: IndexBuildQuality
    embedding_type: EmbeddingType

    @classmethod
    def quick(cls, embedding_type: EmbeddingType) -> "IndexConfig":
        return cls(IndexBuildQuality.QUICK, embedding_type)

    @classmethod
    def standard(cls, embedding_type: EmbeddingType) -> "IndexConfig":
        return cls(IndexBuildQuality.STANDARD, embedding_type)

    @classmethod
    def robust(cls, embedding_type: EmbeddingType) -> "IndexConfig":
        return cls(IndexBuildQuality.ROBUST, embedding_type)

    def embedding_dimension(self) -> int:
        """Vector length required by this configuration."""
        return self.embedding_type.dimension()

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-compatible representation."""
        return {
            "build_quality": self.build_quality.name,
            "embedding_type": self.embedding_type.value,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "IndexConfig":
        """Build a configuration from the output of :meth:`to_dict`."""
        return cls(
            IndexBuildQuality[data["build_quality"]],
            EmbeddingType(data["embedding_type"]),
        )