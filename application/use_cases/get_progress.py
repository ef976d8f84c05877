"""
GetProgress Use Case.

Part of ALT-6: Weekly chart and schedule

Read-only statistics for the progress and schedule screens.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Callable, List, Optional

from application.ports import ExerciseSource
from application.services import CompletionStore
from domain.history import DEFAULT_WINDOW_DAYS, completion_rate, last_n_days, schedule
from domain.models import DayCount, ScheduleDay

logger = logging.getLogger(__name__)


@dataclass
class ProgressResult:
    """Result of the GetProgress use case execution."""

    total_exercises: int
    completed_count: int
    completion_rate: float
    streak: int
    last_days: List[DayCount] = field(default_factory=list)


class GetProgressUseCase:
    """
    Use case for the progress and schedule views.

    ``execute()`` needs the catalog to compute the completion rate; the
    ``history()`` and ``schedule()`` windows only read the ledger.

    Usage:
        >>> use_case = GetProgressUseCase(completion_store=store, exercise_source=source)
        >>> progress = use_case.execute()
        >>> [entry.count for entry in progress.last_days]
        [0, 0, 1, 0, 2, 0, 1]
    """

    def __init__(
        self,
        completion_store: CompletionStore,
        exercise_source: Optional[ExerciseSource] = None,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self._store = completion_store
        self._source = exercise_source
        self._clock = clock

    def execute(self, days: int = DEFAULT_WINDOW_DAYS) -> ProgressResult:
        """
        Build the progress summary.

        Only completed ids that are still in the catalog count toward the
        completion rate, so the rate never exceeds 100%.

        Raises:
            NetworkError: If the catalog is unreachable
            ValueError: If no exercise source was configured
        """
        if self._source is None:
            raise ValueError("GetProgressUseCase.execute() requires an exercise source")

        exercises = self._source.fetch_exercises()
        catalog_ids = {exercise.id for exercise in exercises}
        completed_count = len(self._store.list_completed() & catalog_ids)

        return ProgressResult(
            total_exercises=len(exercises),
            completed_count=completed_count,
            completion_rate=completion_rate(completed_count, len(exercises)),
            streak=self._store.current_streak(),
            last_days=self.history(days),
        )

    def history(self, days: int = DEFAULT_WINDOW_DAYS) -> List[DayCount]:
        """Per-day completion counts for the chart, oldest first."""
        return last_n_days(self._store.history_snapshot(), days, self._clock())

    def schedule(self, days: int = DEFAULT_WINDOW_DAYS) -> List[ScheduleDay]:
        """Done / not done per day for the schedule view, oldest first."""
        return schedule(self._store.history_snapshot(), self._clock(), days)
