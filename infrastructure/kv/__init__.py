"""
Infrastructure Key-Value Layer.

Part of ALT-4: Inject persistence into the completion store
Part of ALT-8: Optional Supabase-backed ledger

This package provides implementations of the KeyValueStore port defined in
application.ports. They are injected into CompletionStore.

Usage:
    from infrastructure.kv import JsonFileKeyValueStore, SupabaseKeyValueStore
    from application.services import CompletionStore

    # Local file (default)
    store = CompletionStore(JsonFileKeyValueStore("data/tracker_state.json"))

    # Supabase table
    client = create_client(SUPABASE_URL, SUPABASE_KEY)
    store = CompletionStore(SupabaseKeyValueStore(client, table="tracker_kv"))
"""

from infrastructure.kv.json_file_store import JsonFileKeyValueStore
from infrastructure.kv.supabase_store import SupabaseKeyValueStore

__all__ = [
    "JsonFileKeyValueStore",
    "SupabaseKeyValueStore",
]
