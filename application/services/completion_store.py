"""
Completion Store.

Part of ALT-4: Inject persistence into the completion store
Part of ALT-5: Completion ledger and streak

Durable record of which exercises have been completed, how many
completions happened on each calendar day, and the last computed streak.
All state lives in an injected KeyValueStore under three fixed keys:

- completed_exercises: list of exercise ids (insertion order)
- completion_history: JSON object of ISO day -> count
- streak: integer

Writes outside a transaction are committed immediately. Inside
``transaction()`` they are buffered and committed with one ``set_many``
call when the block exits cleanly.
"""

import json
import logging
from contextlib import contextmanager
from datetime import date, datetime
from typing import Any, Dict, Iterator, List, Mapping, Optional, Set

from application.errors import ParseError
from application.ports import KeyValueStore
from domain.models import DateLike, History, normalize_day

logger = logging.getLogger(__name__)

COMPLETED_KEY = "completed_exercises"
HISTORY_KEY = "completion_history"
STREAK_KEY = "streak"


# ============================================================================
# History blob codec
# ============================================================================

def encode_history(history: Mapping[date, int]) -> str:
    """Serialize the ledger to the stored JSON blob, dropping zero counts."""
    return json.dumps(
        {day.isoformat(): count for day, count in sorted(history.items()) if count > 0}
    )


def decode_history(blob: Any) -> History:
    """
    Parse the stored JSON blob back into a ledger.

    Keys may be plain ISO dates ("2024-01-10") or ISO timestamps at
    midnight ("2024-01-10T00:00:00.000"); both map to the same day and
    their counts are added together.

    Raises:
        ParseError: If the blob is not a JSON object of day -> non-negative int
    """
    try:
        data = json.loads(blob)
    except (TypeError, ValueError) as e:
        raise ParseError(f"Completion history is not valid JSON: {e}") from e

    if not isinstance(data, dict):
        raise ParseError(
            f"Completion history must be a JSON object, got {type(data).__name__}"
        )

    history: History = {}
    for key, count in data.items():
        try:
            day = datetime.fromisoformat(key).date()
        except ValueError as e:
            raise ParseError(f"Invalid day key in completion history: {key!r}") from e

        if isinstance(count, bool) or not isinstance(count, int) or count < 0:
            raise ParseError(f"Invalid completion count for {key}: {count!r}")

        if count > 0:
            history[day] = history.get(day, 0) + count

    return history


# ============================================================================
# Store
# ============================================================================

class CompletionStore:
    """
    Completion ledger backed by a KeyValueStore.

    Usage:
        store = CompletionStore(kv_store)
        store.mark_completed("ex1")
        store.record_for_day(date(2024, 1, 10))

        with store.transaction():
            store.mark_completed("ex2")
            store.record_for_day(date(2024, 1, 10))
            store.save_streak(1)
    """

    def __init__(self, kv_store: KeyValueStore):
        """
        Initialize with a key-value store.

        Args:
            kv_store: Persistence backend (injected, not global)
        """
        self._kv = kv_store
        self._pending: Optional[Dict[str, Any]] = None

    # -------------------------------------------------------------------------
    # Raw access
    # -------------------------------------------------------------------------

    def _read(self, key: str) -> Optional[Any]:
        if self._pending is not None and key in self._pending:
            return self._pending[key]
        return self._kv.get(key)

    def _write(self, key: str, value: Any) -> None:
        if self._pending is not None:
            self._pending[key] = value
        else:
            self._kv.set(key, value)
    @contextmanager
    def transaction(self) -> Iterator["CompletionStore"]:
        """
        Group writes into a single batch.

        Reads inside the block see the buffered writes. The batch is
        committed with one ``set_many`` call on clean exit and discarded if
        the block raises. Nested blocks join the outermost one.

        The outermost block holds the store's lock from the first read to
        the commit, so concurrent requests on the same storage never lose
        an increment.
        """
        if self._pending is not None:
            yield self
            return

        with self._kv.lock():
            self._pending = {}
            try:
                yield self
            except Exception:
                logger.warning(
                    f"Discarding {len(self._pending)} uncommitted completion writes"
                )
                raise
            else:
                if self._pending:
                    self._kv.set_many(self._pending)
            finally:
                self._pending = None
            self._pending = None

    # -------------------------------------------------------------------------
    # Completed exercises
    # -------------------------------------------------------------------------

    def _completed_ids(self) -> List[str]:
        value = self._read(COMPLETED_KEY)
        if value is None:
            return []
        if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
            raise ParseError(f"{COMPLETED_KEY} must be a list of strings")
        return list(value)

    def is_completed(self, exercise_id: str) -> bool:
        """True iff the exercise has been completed at least once."""
        return exercise_id in self._completed_ids()

    def list_completed(self) -> Set[str]:
        """Snapshot of every exercise id ever completed."""
        return set(self._completed_ids())

    def mark_completed(self, exercise_id: str) -> bool:
        """
        Add an exercise id to the completed set.

        Idempotent: marking an id that is already present writes nothing.

        Returns:
            True if the id was newly added, False if it was already present
        """
        with self.transaction():
            completed = self._completed_ids()
            if exercise_id in completed:
                return False

            completed.append(exercise_id)
            self._write(COMPLETED_KEY, completed)
        return True

    # -------------------------------------------------------------------------
    # History ledger
    # -------------------------------------------------------------------------

    def history_snapshot(self) -> History:
        """Snapshot of the ledger, keyed by normalized day."""
        blob = self._read(HISTORY_KEY)
        if blob is None:
            return {}
        try:
            return decode_history(blob)
        except ParseError as e:
            logger.error(f"Corrupt completion history: {e.message}")
            raise

    def record_for_day(self, day: DateLike) -> int:
        """
        Increment the completion count of a day by one.

        Args:
            day: Date or datetime; normalized to its calendar day

        Returns:
            The day's new count
        """
        key = normalize_day(day)
        with self.transaction():
            history = self.history_snapshot()
            history[key] = history.get(key, 0) + 1
            self._write(HISTORY_KEY, encode_history(history))
        return history[key]

    # -------------------------------------------------------------------------
    # Streak
    # -------------------------------------------------------------------------

    def current_streak(self) -> int:
        """Last persisted streak, 0 if none was ever written."""
        value = self._read(STREAK_KEY)
        if value is None:
            return 0
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            raise ParseError(f"{STREAK_KEY} must be a non-negative integer, got {value!r}")
        return value

    def save_streak(self, streak: int) -> None:
        if streak < 0:
            raise ValueError(f"Streak must be non-negative, got {streak}")
        self._write(STREAK_KEY, streak)
