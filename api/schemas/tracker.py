"""
Tracker Schemas for the exercise, completion and progress endpoints.

Part of ALT-10: HTTP surface for the mobile client

Schemas for:
- RecordCompletionRequest: Request body for POST /completions
- Responses for /exercises, /completions, /history, /schedule, /progress
"""

import datetime as dt
from typing import Dict, List, Optional, Union

from pydantic import BaseModel, Field

from domain.models import DayCount, Exercise, ScheduleDay


class RecordCompletionRequest(BaseModel):
    """Request body for POST /completions."""
    exercise_id: str = Field(
        ...,
        description="Catalog id of the finished exercise",
        min_length=1,
        max_length=200,
    )
    date: Optional[Union[dt.datetime, dt.date]] = Field(
        default=None,
        description="When the exercise was completed. Defaults to now.",
    )


class ExerciseView(Exercise):
    """Catalog exercise plus the local completed flag."""
    completed: bool = False


class DashboardResponse(BaseModel):
    """Response for GET /exercises ("fetch everything")."""
    exercises: List[ExerciseView] = Field(default_factory=list)
    completed: List[str] = Field(default_factory=list)
    history: Dict[str, int] = Field(
        default_factory=dict,
        description="ISO day -> completion count",
    )
    streak: int = 0
    error: Optional[str] = None
    retryable: bool = False


class CompletionResponse(BaseModel):
    """Response for POST /completions."""
    exercise_id: str
    day: dt.date
    day_count: int
    streak: int
    newly_completed: bool


class CompletedListResponse(BaseModel):
    """Response for GET /completions."""
    completed: List[str]
    streak: int


class CompletionStatusResponse(BaseModel):
    """Response for GET /completions/{exercise_id}."""
    exercise_id: str
    completed: bool


class HistoryResponse(BaseModel):
    """Response for GET /history (weekly chart)."""
    days: List[DayCount]


class ScheduleResponse(BaseModel):
    """Response for GET /schedule."""
    days: List[ScheduleDay]


class ProgressResponse(BaseModel):
    """Response for GET /progress."""
    total_exercises: int
    completed_count: int
    completion_rate: float = Field(..., description="Percent, one decimal")
    streak: int
    last_days: List[DayCount]
