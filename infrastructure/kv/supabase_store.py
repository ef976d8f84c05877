"""
Supabase implementation of KeyValueStore.

Part of ALT-8: Optional Supabase-backed ledger

Stores each key as one row of a two-column table:

    create table tracker_kv (
        key text primary key,
        value jsonb not null
    );

A batch is written with a single upsert request, which PostgREST runs in
one statement.
"""

import logging
import threading
from typing import Any, Dict, Mapping, Optional

from supabase import Client

from application.errors import StorageError

logger = logging.getLogger(__name__)

DEFAULT_TABLE = "tracker_kv"

# Table name -> lock shared by every store on that table in this process
_TABLE_LOCKS: Dict[str, threading.RLock] = {}
_TABLE_LOCKS_GUARD = threading.Lock()


def _lock_for(table: str) -> threading.RLock:
    with _TABLE_LOCKS_GUARD:
        lock = _TABLE_LOCKS.get(table)
        if lock is None:
            lock = _TABLE_LOCKS[table] = threading.RLock()
        return lock


class SupabaseKeyValueStore:
    """Supabase-backed implementation of the KeyValueStore protocol."""

    def __init__(self, client: Client, table: str = DEFAULT_TABLE):
        """
        Initialize with Supabase client.

        Args:
            client: Supabase client instance (injected)
            table: Name of the key/value table
        """
        self._client = client
        self._table = table
        self._lock = _lock_for(table)

    def lock(self) -> threading.RLock:
        """
        Process-wide lock for this table.

        Only serializes writers in this process; a deployment with several
        workers on one table still needs a single worker per ledger.
        """
        return self._lock

    def get(self, key: str) -> Optional[Any]:
        try:
            result = (
                self._client.table(self._table)
                .select("value")
                .eq("key", key)
                .limit(1)
                .execute()
            )
        except Exception as e:
            logger.error(f"Error reading {key} from {self._table}: {e}")
            raise StorageError(f"Failed to read {key}: {e}") from e

        if not result.data:
            return None
        return result.data[0].get("value")

    def set(self, key: str, value: Any) -> None:
        self.set_many({key: value})

    def set_many(self, values: Mapping[str, Any]) -> None:
        if not values:
            return
        rows = [{"key": key, "value": value} for key, value in values.items()]
        try:
            self._client.table(self._table).upsert(rows, on_conflict="key").execute()
        except Exception as e:
            logger.error(f"Error writing {sorted(values)} to {self._table}: {e}")
            raise StorageError(f"Failed to write {', '.join(sorted(values))}: {e}") from e
