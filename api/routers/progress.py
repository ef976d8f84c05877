"""
Progress router for derived statistics.

Part of ALT-6: Weekly chart and schedule

This router contains endpoints for:
- /progress - Completion rate, streak and the last 7 days
- /history - Per-day completion counts for the weekly chart
- /schedule - Done / not done per day for the schedule view
"""

import logging

from fastapi import APIRouter, Depends, Query

from api.deps import get_progress_use_case
from api.schemas import HistoryResponse, ProgressResponse, ScheduleResponse
from application.use_cases import GetProgressUseCase
from domain.history import DEFAULT_WINDOW_DAYS

logger = logging.getLogger(__name__)

router = APIRouter(
    tags=["Progress"],
)

# Upper bound for the history and schedule windows
MAX_WINDOW_DAYS = 366


@router.get("/progress", response_model=ProgressResponse)
def get_progress_endpoint(
    use_case: GetProgressUseCase = Depends(get_progress_use_case),
):
    """
    Progress summary for the progress tab.

    Needs the remote catalog for the completion rate; a catalog outage is
    returned as 502.
    """
    progress = use_case.execute(DEFAULT_WINDOW_DAYS)
    return ProgressResponse(
        total_exercises=progress.total_exercises,
        completed_count=progress.completed_count,
        completion_rate=progress.completion_rate,
        streak=progress.streak,
        last_days=progress.last_days,
    )


@router.get("/history", response_model=HistoryResponse)
def get_history_endpoint(
    days: int = Query(default=DEFAULT_WINDOW_DAYS, ge=1, le=MAX_WINDOW_DAYS),
    use_case: GetProgressUseCase = Depends(get_progress_use_case),
):
    """Per-day completion counts ending today, oldest first."""
    return HistoryResponse(days=use_case.history(days))


@router.get("/schedule", response_model=ScheduleResponse)
def get_schedule_endpoint(
    days: int = Query(default=DEFAULT_WINDOW_DAYS, ge=1, le=MAX_WINDOW_DAYS),
    use_case: GetProgressUseCase = Depends(get_progress_use_case),
):
    """Whether any exercise was completed on each day, oldest first."""
    return ScheduleResponse(days=use_case.schedule(days))
