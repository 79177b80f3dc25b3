"""A set of points with its search index."""

from __future__ import annotations

from itertools import islice
from typing import Optional, Sequence

from pikodb.embedding import Point
from pikodb.errors import DimensionMismatchError
from pikodb.hnsw import HnswIndex
from pikodb.index import IndexConfig
from pikodb.search import DEFAULT_OVERFETCH_FACTOR, EfSearch, MetadataFilter
from pikodb.state import CollectionData, CollectionState


def _matches(point: Point, filters: list[MetadataFilter]) -> bool:
    return not filters or any(
        all(point.metadata is not None and point.metadata.get(k) == v for k, v in f.items())
        for f in filters
    )


class Collection:
    """Points of one embedding type, searchable by cosine similarity."""

    def __init__(self, index_config: IndexConfig) -> None:
        self.points: list[Point] = []
        self.id_to_index: dict = {}
        self.index_config = index_config
        self.hnsw = HnswIndex(
            max_nb_connection=16,
            ef_construction=index_config.build_quality.value,
            max_layer=index_config.embedding_dimension(),
        )

    def upsert(self, point: Point) -> None:
        """Insert the point, or replace the stored point with the same id."""
        dimension = self.index_config.embedding_dimension()
        if len(point.vector) != dimension:
            raise DimensionMismatchError(dimension, len(point.vector))
        idx = self.id_to_index.get(point.id)
        if idx is None:
            idx = len(self.points)
            self.points.append(point)
            self.id_to_index[point.id] = idx
        else:
            self.points[idx] = point
        self.hnsw.insert(point.vector, idx)

    def search_with_filter(
        self,
        query: Sequence[float],
        limit: int,
        ef: EfSearch,
        filters: Optional[list[MetadataFilter]] = None,
    ) -> list[Point]:
        """Nearest points whose metadata matches all pairs of any one filter."""
        filters = list(filters or [])
        fetch_limit = limit * DEFAULT_OVERFETCH_FACTOR if filters else limit
        hits = (self.points[hit.d_id] for hit in self.hnsw.search(query, fetch_limit, ef.value))
        return list(islice((p for p in hits if _matches(p, filters)), limit))

    def search(self, query: Sequence[float], limit: int, ef: EfSearch) -> list[Point]:
        return self.search_with_filter(query, limit, ef, [])

    @classmethod
    def from_state(cls, state: CollectionState) -> "Collection":
        """Rebuild a collection and its index from a snapshot."""
        collection = cls(state.index_config)
        collection.points = list(state.data.points)
        collection.id_to_index = dict(state.data.id_to_index)
        for idx, point in enumerate(collection.points):
            collection.hnsw.insert(point.vector, idx)
        return collection

    def to_state(self) -> CollectionState:
        return CollectionState(
            CollectionData(list(self.points), dict(self.id_to_index)), self.index_config
        )