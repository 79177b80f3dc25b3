import pytest

from pikodb.embedding import EmbeddingType, Point
from pikodb.errors import (
    DeserializationError,
    FileOperationError,
    PersistenceError,
    SerializationError,
)
from pikodb.index import IndexConfig
from pikodb.persistence import (
    FileSystemPersistenceAdapter,
    PersistedState,
    Persistence,
    PersistenceAdapter,
)
from pikodb.state import CollectionData, CollectionState


def _state(metadata=None):
    point = Point([0.5, -0.5], metadata)
    data = CollectionData([point], {point.id: 0})
    config = IndexConfig.quick(EmbeddingType.TEXT_EMBEDDING_3_SMALL)
    return PersistedState({"docs": CollectionState(data, config)})


def test_state_dict_round_trip():
    state = _state({"k": "v"})
    assert PersistedState.from_dict(state.to_dict()) == state


def test_file_round_trip(tmp_path):
    adapter = FileSystemPersistenceAdapter(tmp_path / "db.json")
    state = _state({"k": "v"})
    adapter.save(state)
    assert adapter.load() == state


def test_empty_state_round_trip(tmp_path):
    adapter = FileSystemPersistenceAdapter(tmp_path / "empty.json")
    adapter.save(PersistedState())
    assert adapter.load().collections == {}


def test_persistence_filesystem_delegates(tmp_path):
    path = tmp_path / "db.json"
    persistence = Persistence.filesystem(path)
    state = _state()
    persistence.save(state)
    assert path.exists()
    assert persistence.load() == state
    assert FileSystemPersistenceAdapter(path).load() == state


def test_load_missing_file(tmp_path):
    adapter = FileSystemPersistenceAdapter(tmp_path / "missing.json")
    with pytest.raises(FileOperationError) as info:
        adapter.load()
    assert isinstance(info.value.cause, OSError)


def test_load_garbage(tmp_path):
    path = tmp_path / "bad.json"
    path.write_bytes(b"\x00\x01 not json")
    with pytest.raises(DeserializationError):
        FileSystemPersistenceAdapter(path).load()


def test_load_wrong_shape(tmp_path):
    path = tmp_path / "shape.json"
    path.write_text('{"other": 1}')
    with pytest.raises(DeserializationError) as info:
        FileSystemPersistenceAdapter(path).load()
    assert isinstance(info.value, PersistenceError)


def test_save_to_directory_fails(tmp_path):
    with pytest.raises(FileOperationError):
        FileSystemPersistenceAdapter(tmp_path).save(PersistedState())


def test_save_unencodable_metadata(tmp_path):
    path = tmp_path / "db.json"
    with pytest.raises(SerializationError):
        FileSystemPersistenceAdapter(path).save(_state({"k": object()}))
    assert not path.exists()


def test_adapter_is_abstract():
    with pytest.raises(TypeError):
        PersistenceAdapter()


def test_custom_adapter_through_persistence():
    class MemoryAdapter(PersistenceAdapter):
        def __init__(self):
            self.stored = None

        def save(self, state):
            self.stored = state

        def load(self):
            return self.stored

    adapter = MemoryAdapter()
    persistence = Persistence(adapter)
    state = _state()
    persistence.save(state)
    assert adapter.stored is state
    assert persistence.load() is state