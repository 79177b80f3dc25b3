"""Exceptions raised by the vector database."""


class VectorDbError(Exception):
    """Base class for every database error."""


class DimensionMismatchError(VectorDbError):
    def __init__(self, expected: int, actual: int) -> None:
        super().__init__(f"Embedding dimension mismatch: expected {expected}, got {actual}")
        self.expected = expected
        self.actual = actual


class CollectionNotFoundError(VectorDbError):
    def __init__(self, name: str) -> None:
        super().__init__(f"Collection '{name}' not found")
        self.name = name


class PersistenceError(VectorDbError):
    def __init__(self, detail: str) -> None:
        super().__init__(f"Persistence error: {detail}")
        self.detail = detail


class _CausedPersistenceError(PersistenceError):
    _prefix = ""

    def __init__(self, cause: BaseException) -> None:
        super().__init__(f"{self._prefix}: {cause}")
        self.cause = cause


class SerializationError(_CausedPersistenceError):
    _prefix = "Serialization failed"


class DeserializationError(_CausedPersistenceError):
    _prefix = "Deserialization failed"


class FileOperationError(_CausedPersistenceError):
    _prefix = "File operation failed"


class NotConfiguredError(PersistenceError):
    def __init__(self) -> None:
        super().__init__("Persistence adapter not configured")