"""
Repository Interfaces (Ports) for Alethea Tracker.

Part of ALT-4: Inject persistence into the completion store

This package defines abstract interfaces that decouple the completion
core from infrastructure (local storage, remote catalog). Implementations
are provided in the infrastructure layer.

Architecture follows the Ports & Adapters (Hexagonal) pattern:
- Ports: Abstract interfaces defined here (what the core needs)
- Adapters: Concrete implementations in infrastructure/ (how it's provided)

Usage:
    from application.ports import KeyValueStore

    class CompletionStore:
        def __init__(self, kv_store: KeyValueStore):
            self._kv = kv_store
"""

# Local persistence
from application.ports.key_value_store import KeyValueStore

# Remote exercise catalog
from application.ports.exercise_source import ExerciseSource

__all__ = [
    "KeyValueStore",
    "ExerciseSource",
]
