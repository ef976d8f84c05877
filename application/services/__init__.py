"""
Application services for Alethea Tracker.

Part of ALT-4: Inject persistence into the completion store

Services hold state-bearing logic that several use cases share.
"""

from application.services.completion_store import (
    COMPLETED_KEY,
    HISTORY_KEY,
    STREAK_KEY,
    CompletionStore,
    decode_history,
    encode_history,
)

__all__ = [
    "CompletionStore",
    "COMPLETED_KEY",
    "HISTORY_KEY",
    "STREAK_KEY",
    "decode_history",
    "encode_history",
]
