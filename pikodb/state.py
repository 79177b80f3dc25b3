"""Serializable snapshots of collections."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from typing import Any

from pikodb.embedding import Point
from pikodb.index import IndexConfig


@dataclass
class CollectionData:
    points: list = field(default_factory=list)
    id_to_index: dict = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {
            "points": [point.to_dict() for point in self.points],
            "id_to_index": {str(pid): idx for pid, idx in self.id_to_index.items()},
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "CollectionData":
        return cls(
            [Point.from_dict(p) for p in data["points"]],
            {uuid.UUID(pid): int(idx) for pid, idx in data["id_to_index"].items()},
        )


@dataclass
class CollectionState:
    data: CollectionData
    index_config: IndexConfig

    def to_dict(self) -> dict[str, Any]:
        return {"data": self.data.to_dict(), "index_config": self.index_config.to_dict()}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "CollectionState":
        return cls(
            CollectionData.from_dict(data["data"]),
            IndexConfig.from_dict(data["index_config"]),
        )