"""
Key-Value Store Interface (Port).

Part of ALT-4: Inject persistence into the completion store

This module defines the abstract interface for the local key-value
persistence that holds the completion ledger. Values are JSON-compatible
(lists of strings, strings, integers).
"""
from typing import Any, ContextManager, Mapping, Optional, Protocol


class KeyValueStore(Protocol):
    """
    Abstract interface for durable key-value persistence.

    Implementations must commit every write before returning and must
    raise StorageError when the backend fails.
    """

    def get(self, key: str) -> Optional[Any]:
        """
        Read the value stored under a key.

        Args:
            key: Storage key

        Returns:
            Stored value, or None if the key has never been written
        """
        ...

    def set(self, key: str, value: Any) -> None:
        """
        Write a single value.

        Args:
            key: Storage key
            value: JSON-compatible value
        """
        ...

    def set_many(self, values: Mapping[str, Any]) -> None:
        """
        Write several values as one batch.

        Either every value in the batch is committed or none is.

        Args:
            values: Mapping of key -> JSON-compatible value
        """
        ...

    def lock(self) -> ContextManager[Any]:
        """
        Lock that serializes read-modify-write cycles on this store.

        Every instance backed by the same storage must return the same
        re-entrant lock, since callers create one instance per request.
        """
        ...
