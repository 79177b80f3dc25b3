"""Embedding models and stored points."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional

Metadata = Dict[str, str]


class EmbeddingType(Enum):
    TEXT_EMBEDDING_3_SMALL = "text-embedding-3-small"
    TEXT_EMBEDDING_3_LARGE = "text-embedding-3-large"

    def dimension(self) -> int:
        """Length of the vectors this model produces."""
        return 1536 if self is EmbeddingType.TEXT_EMBEDDING_3_SMALL else 3072


@dataclass
class Point:
    """A vector with an identifier and optional string metadata."""

    vector: list
    metadata: Optional[Metadata] = None
    id: uuid.UUID = field(default_factory=uuid.uuid4)

    def __post_init__(self) -> None:
        self.vector = [float(x) for x in self.vector]
        if self.metadata is not None:
            self.metadata = dict(self.metadata)

    def to_dict(self) -> dict[str, Any]:
        return {"id": str(self.id), "vector": list(self.vector), "metadata": self.metadata}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Point":
        return cls(data["vector"], data["metadata"], uuid.UUID(data["id"]))