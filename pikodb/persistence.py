"""Saving and loading the whole database state."""

from __future__ import annotations

import json
import os
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Union

from pikodb.errors import DeserializationError, FileOperationError, SerializationError
from pikodb.state import CollectionState


@dataclass
class PersistedState:
    """All collections, keyed by name."""

    collections: dict = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-compatible representation."""
        return {
            "collections": {
                name: state.to_dict() for name, state in self.collections.items()
            }
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "PersistedState":
        """Build a state from the output of :meth:`to_dict`."""
        return cls(
            collections={
                str(name): CollectionState.from_dict(state)
                for name, state in data["collections"].items()
            }
        )


class PersistenceAdapter(ABC):
    """Storage backend for a :class:`PersistedState`."""

    @abstractmethod
    def save(self, state: PersistedState) -> None:
        """Store the state."""

    @abstractmethod
    def load(self) -> PersistedState:
        """Return the stored state."""


class FileSystemPersistenceAdapter(PersistenceAdapter):
    """Keeps the state in a single JSON file."""

    def __init__(self, path: Union[str, os.PathLike]) -> None:
        self.path = Path(path)

    def save(self, state: PersistedState) -> None:
        try:
            encoded = json.dumps(state.to_dict()).encode("utf-8")
        except (TypeError, ValueError) as exc:
            raise SerializationError(exc) from exc
        try:
            self.path.write_bytes(encoded)
        except OSError as exc:
            raise FileOperationError(exc) from exc

    def load(self) -> PersistedState:
        try:
            raw = self.path.read_bytes()
        except OSError as exc:
            raise FileOperationError(exc) from exc
        try:
            return PersistedState.from_dict(json.loads(raw))
        except (ValueError, KeyError, TypeError, AttributeError) as exc:
            raise DeserializationError(exc) from exc


class Persistence:
    """The persistence backend chosen for a client."""

    def __init__(self, adapter: PersistenceAdapter) -> None:
        self.adapter = adapter

    @classmethod
    def filesystem(cls, path: Union[str, os.PathLike]) -> "Persistence":
        """Persist to a file at ``path``."""
        return cls(FileSystemPersistenceAdapter(path))

    def save(self, state: PersistedState) -> None:
        self.adapter.save(state)

    def load(self) -> PersistedState:
        return self.adapter.load()