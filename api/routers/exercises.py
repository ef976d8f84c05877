"""
Exercises router for the exercise catalog.

Part of ALT-10: HTTP surface for the mobile client

This router contains endpoints for:
- /exercises - "Fetch everything": catalog plus local completion state
- /exercises/{exercise_id} - One catalog exercise with its completed flag
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Query

from api.deps import get_completion_store, get_exercise_source, get_load_dashboard_use_case
from api.schemas import DashboardResponse, ExerciseView
from application.ports import ExerciseSource
from application.services import CompletionStore
from application.use_cases import LoadDashboardUseCase

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/exercises",
    tags=["Exercises"],
)


@router.get("", response_model=DashboardResponse)
def load_dashboard_endpoint(
    strict: bool = Query(default=False),
    use_case: LoadDashboardUseCase = Depends(get_load_dashboard_use_case),
):
    """
    Load the exercise catalog together with completed ids, history and streak.

    A catalog outage does not fail the request: the local state is still
    returned and ``error`` is set so the client can show a Retry button.
    With ``strict=true`` the outage is returned as 502 instead.

    Returns:
        DashboardResponse
    """
    result = use_case.execute(strict=strict)

    return DashboardResponse(
        exercises=[
            ExerciseView(**exercise.model_dump(), completed=exercise.id in result.completed)
            for exercise in result.exercises
        ],
        completed=sorted(result.completed),
        history={day.isoformat(): count for day, count in sorted(result.history.items())},
        streak=result.streak,
        error=result.error,
        retryable=result.retryable,
    )


@router.get("/{exercise_id}", response_model=ExerciseView)
def get_exercise_endpoint(
    exercise_id: str,
    exercise_source: ExerciseSource = Depends(get_exercise_source),
    completion_store: CompletionStore = Depends(get_completion_store),
):
    """
    Get one exercise from the catalog, for the timer screen.

    Raises:
        HTTPException: 404 if the catalog has no exercise with that id
    """
    for exercise in exercise_source.fetch_exercises():
        if exercise.id == exercise_id:
            return ExerciseView(
                **exercise.model_dump(),
                completed=completion_store.is_completed(exercise_id),
            )

    raise HTTPException(status_code=404, detail=f"Exercise {exercise_id} not found")
