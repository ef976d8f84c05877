"""
RecordCompletion Use Case.

Part of ALT-5: Completion ledger and streak

Records one finished exercise: marks it completed, adds one to the day's
count and recomputes the streak. The three writes are committed together
through CompletionStore.transaction().
"""

import logging
from dataclasses import dataclass
from datetime import date, datetime
from typing import Callable, Optional

from application.services import CompletionStore
from domain.models import DateLike, normalize_day
from domain.streak import compute_streak

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


@dataclass
class RecordCompletionResult:
    """Result of the RecordCompletion use case execution."""

    exercise_id: str
    day: date
    day_count: int
    streak: int
    newly_completed: bool


class RecordCompletionUseCase:
    """
    Use case for recording an exercise completion.

    Orchestrates the following workflow:
    1. Normalize the completion date to a calendar day
    2. Mark the exercise completed (idempotent)
    3. Increment the day's completion count (always, repeats included)
    4. Recompute the streak relative to the clock's "now" and persist it

    The streak is always computed against the current moment, not against
    the completion's date, so back-dated completions only count once the
    walk from today reaches them.

    Usage:
        >>> use_case = RecordCompletionUseCase(completion_store=store)
        >>> result = use_case.execute("ex1", date(2024, 1, 10))
        >>> result.day_count
        1
    """

    def __init__(
        self,
        completion_store: CompletionStore,
        clock: Clock = datetime.now,
    ) -> None:
        """
        Initialize the use case with required dependencies.

        Args:
            completion_store: Ledger to write to
            clock: Returns "now"; injectable for tests
        """
        self._store = completion_store
        self._clock = clock

    def execute(
        self,
        exercise_id: str,
        when: Optional[DateLike] = None,
    ) -> RecordCompletionResult:
        """
        Execute the record completion workflow.

        Args:
            exercise_id: Catalog id of the finished exercise; surrounding
                whitespace is stripped before it is stored
            when: Completion date or timestamp (default: now)

        Returns:
            RecordCompletionResult with the new day count and streak

        Raises:
            ValueError: If exercise_id is blank
            StorageError: If persistence fails; nothing in the batch is committed
            ParseError: If the stored ledger is corrupt
        """
        exercise_id = (exercise_id or "").strip()
        if not exercise_id:
            raise ValueError("exercise_id is required")

        now = self._clock()
        day = normalize_day(when if when is not None else now)

        with self._store.transaction():
            newly_completed = self._store.mark_completed(exercise_id)
            day_count = self._store.record_for_day(day)
            streak = compute_streak(self._store.history_snapshot(), now)
            self._store.save_streak(streak)

        logger.info(
            f"Recorded completion of {exercise_id} on {day.isoformat()} "
            f"(day count {day_count}, streak {streak})"
        )
        return RecordCompletionResult(
            exercise_id=exercise_id,
            day=day,
            day_count=day_count,
            streak=streak,
            newly_completed=newly_completed,
        )
