"""
LoadDashboard Use Case.

Part of ALT-2: Fetch the exercise catalog

"Fetch everything" for the home screen: the exercise catalog from the
remote source plus completed ids, history and streak from the ledger.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Set

from application.errors import ParseError, TrackerError
from application.ports import ExerciseSource
from application.services import CompletionStore
from domain.models import Exercise, History

logger = logging.getLogger(__name__)


@dataclass
class LoadDashboardResult:
    """Result of the LoadDashboard use case execution."""

    success: bool
    exercises: List[Exercise] = field(default_factory=list)
    completed: Set[str] = field(default_factory=set)
    history: History = field(default_factory=dict)
    streak: int = 0
    error: Optional[str] = None
    retryable: bool = False


class LoadDashboardUseCase:
    """
    Use case for loading the dashboard state.

    Orchestrates the following workflow:
    1. Fetch the exercise catalog
    2. Read completed ids, history and streak from the ledger

    A catalog failure does not hide the local state: the ledger is still
    read and the error is reported alongside it so the client can offer a
    retry. In strict mode every error propagates instead.

    Usage:
        >>> use_case = LoadDashboardUseCase(exercise_source=source, completion_store=store)
        >>> result = use_case.execute()
        >>> if not result.success:
        ...     print(f"Retry later: {result.error}")
    """

    def __init__(
        self,
        exercise_source: ExerciseSource,
        completion_store: CompletionStore,
    ) -> None:
        """
        Initialize the use case with required dependencies.

        Args:
            exercise_source: Remote exercise catalog
            completion_store: Local completion ledger
        """
        self._source = exercise_source
        self._store = completion_store

    def execute(self, *, strict: bool = False) -> LoadDashboardResult:
        """
        Execute the load dashboard workflow.

        Args:
            strict: Raise NetworkError/StorageError/ParseError instead of
                    reporting them in the result

        Returns:
            LoadDashboardResult with catalog and ledger state
        """
        result = LoadDashboardResult(success=True)

        # Step 1: Remote catalog
        try:
            result.exercises = self._source.fetch_exercises()
            logger.info(f"Loaded {len(result.exercises)} exercises")
        except TrackerError as e:
            if strict:
                raise
            logger.warning(f"Exercise catalog unavailable: {e.message}")
            result.success = False
            result.error = e.message
            result.retryable = not isinstance(e, ParseError)

        # Step 2: Local ledger
        try:
            result.completed = self._store.list_completed()
            result.history = self._store.history_snapshot()
            result.streak = self._store.current_streak()
        except TrackerError as e:
            if strict:
                raise
            logger.error(f"Completion ledger unavailable: {e.message}")
            result.success = False
            result.error = e.message
            result.retryable = not isinstance(e, ParseError)

        return result
