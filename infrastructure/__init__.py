"""
Infrastructure Layer for Alethea Tracker.

Part of ALT-4: Inject persistence into the completion store

This package contains concrete implementations of the application ports:
- kv/: Key-value persistence (local JSON file, Supabase table)
- http/: Remote exercise catalog client
"""

# Re-export adapters for convenient access
from infrastructure.http import HttpExerciseSource
from infrastructure.kv import JsonFileKeyValueStore, SupabaseKeyValueStore

__all__ = [
    "HttpExerciseSource",
    "JsonFileKeyValueStore",
    "SupabaseKeyValueStore",
]
