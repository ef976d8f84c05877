"""
Fake Key-Value Store for testing.

Part of ALT-4: Inject persistence into the completion store

This module provides an in-memory implementation of KeyValueStore
for fast, isolated testing without touching disk or Supabase.
"""
from typing import Any, Dict, List, Mapping, Optional
import copy
import threading

from application.errors import StorageError


class InMemoryKeyValueStore:
    """
    In-memory fake implementation of KeyValueStore for testing.

    Stores values in a dict. Failures can be switched on to exercise the
    StorageError paths.

    Usage:
        kv = InMemoryKeyValueStore()
        kv.seed({"streak": 3})
        kv.fail_on_write = True
    """

    def __init__(self, initial: Optional[Dict[str, Any]] = None):
        """Initialize with optional starting values."""
        self._data: Dict[str, Any] = copy.deepcopy(initial or {})
        self.fail_on_read = False
        self.fail_on_write = False
        # Each committed batch, in order
        self.write_batches: List[Dict[str, Any]] = []
        self._lock = threading.RLock()

    def reset(self) -> None:
        """Clear all stored values and recorded batches."""
        self._data.clear()
        self.write_batches.clear()
        self.fail_on_read = False
        self.fail_on_write = False

    def seed(self, values: Dict[str, Any]) -> None:
        """Seed the store with test data without recording a batch."""
        self._data.update(copy.deepcopy(values))

    def get_all(self) -> Dict[str, Any]:
        """Get a copy of every stored value (test helper)."""
        return copy.deepcopy(self._data)

    # =========================================================================
    # KeyValueStore Protocol Methods
    # =========================================================================

    def get(self, key: str) -> Optional[Any]:
        if self.fail_on_read:
            raise StorageError(f"Simulated read failure for {key}")
        return copy.deepcopy(self._data.get(key))

    def set(self, key: str, value: Any) -> None:
        self.set_many({key: value})

    def set_many(self, values: Mapping[str, Any]) -> None:
        if self.fail_on_write:
            raise StorageError(f"Simulated write failure for {sorted(values)}")
        batch = copy.deepcopy(dict(values))
        self.write_batches.append(batch)
        self._data.update(batch)

    def lock(self) -> threading.RLock:
        return self._lock
