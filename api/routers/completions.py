"""
Completions router for exercise completion tracking.

Part of ALT-10: HTTP surface for the mobile client

This router contains endpoints for:
- POST /completions - Record that an exercise timer finished
- GET /completions - Completed exercise ids and the current streak
- GET /completions/{exercise_id} - Whether one exercise was ever completed
"""

import logging

from fastapi import APIRouter, Depends, HTTPException

from api.deps import get_completion_store, get_record_completion_use_case
from api.schemas import (
    CompletedListResponse,
    CompletionResponse,
    CompletionStatusResponse,
    RecordCompletionRequest,
)
from application.services import CompletionStore
from application.use_cases import RecordCompletionUseCase

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/completions",
    tags=["Completions"],
)


@router.post("", response_model=CompletionResponse, status_code=201)
def record_completion_endpoint(
    request: RecordCompletionRequest,
    use_case: RecordCompletionUseCase = Depends(get_record_completion_use_case),
):
    """
    Record an exercise completion.

    Called by the mobile app when the countdown timer reaches zero. Every
    call adds one to that day's count, including repeats of an exercise
    that was already completed.

    Args:
        request: Exercise id and optional completion date

    Returns:
        The day's new count, the recomputed streak and whether the exercise
        was completed for the first time
    """
    try:
        result = use_case.execute(request.exercise_id, request.date)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return CompletionResponse(
        exercise_id=result.exercise_id,
        day=result.day,
        day_count=result.day_count,
        streak=result.streak,
        newly_completed=result.newly_completed,
    )


@router.get("", response_model=CompletedListResponse)
def list_completions_endpoint(
    completion_store: CompletionStore = Depends(get_completion_store),
):
    """List every exercise id ever completed, with the persisted streak."""
    return CompletedListResponse(
        completed=sorted(completion_store.list_completed()),
        streak=completion_store.current_streak(),
    )


@router.get("/{exercise_id}", response_model=CompletionStatusResponse)
def get_completion_status_endpoint(
    exercise_id: str,
    completion_store: CompletionStore = Depends(get_completion_store),
):
    return CompletionStatusResponse(
        exercise_id=exercise_id,
        completed=completion_store.is_completed(exercise_id),
    )
