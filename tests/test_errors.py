import pytest

from pikodb.errors import (
    CollectionNotFoundError,
    DeserializationError,
    DimensionMismatchError,
    FileOperationError,
    NotConfiguredError,
    PersistenceError,
    SerializationError,
    VectorDbError,
)


def test_dimension_mismatch_message_and_fields():
    err = DimensionMismatchError(expected=1536, actual=3)
    assert str(err) == "Embedding dimension mismatch: expected 1536, got 3"
    assert (err.expected, err.actual) == (1536, 3)
    assert isinstance(err, VectorDbError)


def test_collection_not_found_message():
    err = CollectionNotFoundError("docs")
    assert str(err) == "Collection 'docs' not found"
    assert err.name == "docs"


def test_not_configured_is_persistence_error():
    err = NotConfiguredError()
    assert str(err) == "Persistence error: Persistence adapter not configured"
    assert isinstance(err, PersistenceError)
    assert isinstance(err, VectorDbError)


@pytest.mark.parametrize(
    "cls, prefix",
    [
        (SerializationError, "Persistence error: Serialization failed: "),
        (DeserializationError, "Persistence error: Deserialization failed: "),
        (FileOperationError, "Persistence error: File operation failed: "),
    ],
)
def test_wrapped_errors_keep_cause(cls, prefix):
    cause = ValueError("boom")
    err = cls(cause)
    assert str(err) == prefix + "boom"
    assert err.cause is cause
    assert isinstance(err, PersistenceError)


def test_errors_can_be_caught_as_base():
    err = CollectionNotFoundError("missing")
    assert err.name == "missing"
    assert str(err) == "Collection 'missing' not found"
    with pytest.raises(VectorDbError, match="Collection 'missing' not found") as excinfo:
        raise err
    assert excinfo.value is err