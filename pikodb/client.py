"""Entry point managing named collections and their persistence."""

from __future__ import annotations

from typing import Iterable, Optional, Sequence

from pikodb.collection import Collection
from pikodb.embedding import Point
from pikodb.errors import CollectionNotFoundError, NotConfiguredError
from pikodb.index import IndexConfig
from pikodb.persistence import PersistedState, Persistence
from pikodb.search import EfSearch, MetadataFilter


class Client:
    """Holds collections by name, optionally backed by persistent storage."""

    def __init__(
        self,
        collections: Optional[dict] = None,
        persistence_adapter: Optional[Persistence] = None,
    ) -> None:
        self.collections: dict[str, Collection] = dict(collections or {})
        self.persistence_adapter = persistence_adapter

    @classmethod
    def in_memory(cls) -> "Client":
        """A client whose data lives only in memory."""
        return cls()

    @classmethod
    def persistent(cls, adapter: Persistence) -> "Client":
        """A client loaded from, and saving to, ``adapter``."""
        state = adapter.load()
        collections = {
            name: Collection.from_state(coll_state)
            for name, coll_state in state.collections.items()
        }
        return cls(collections, adapter)

    def create_collection(self, name: str, index_config: IndexConfig) -> None:
        """Create a collection; does nothing if the name is taken."""
        if name not in self.collections:
            self.collections[name] = Collection(index_config)

    def get_collection(self, name: str) -> Collection:
        try:
            return self.collections[name]
        except KeyError:
            raise CollectionNotFoundError(name) from None

    def get_or_create_collection(self, name: str, index_config: IndexConfig) -> Collection:
        self.create_collection(name, index_config)
        return self.get_collection(name)

    def upsert_points(self, collection_name: str, points: Iterable[Point]) -> None:
        collection = self.get_collection(collection_name)
        for point in points:
            collection.upsert(point)

    def query_with_filter(
        self,
        collection_name: str,
        query_vector: Sequence[float],
        limit: int,
        ef: EfSearch,
        filters: Optional[list[MetadataFilter]] = None,
    ) -> list[Point]:
        collection = self.get_collection(collection_name)
        return collection.search_with_filter(query_vector, limit, ef, filters or [])

    def query(
        self,
        collection_name: str,
        query_vector: Sequence[float],
        limit: int,
        ef: EfSearch,
    ) -> list[Point]:
        return self.query_with_filter(collection_name, query_vector, limit, ef, [])

    def persist(self) -> None:
        """Save every collection through the configured adapter."""
        if self.persistence_adapter is None:
            raise NotConfiguredError()
        state = PersistedState(
            collections={name: coll.to_state() for name, coll in self.collections.items()}
        )
        self.persistence_adapter.save(state)