"""
Pydantic schemas for API requests and responses.

Organized by feature/domain:
- tracker: Exercise, completion and progress models
"""

from api.schemas.tracker import (
    CompletedListResponse,
    CompletionResponse,
    CompletionStatusResponse,
    DashboardResponse,
    ExerciseView,
    HistoryResponse,
    ProgressResponse,
    RecordCompletionRequest,
    ScheduleResponse,
)

__all__ = [
    "CompletedListResponse",
    "CompletionResponse",
    "CompletionStatusResponse",
    "DashboardResponse",
    "ExerciseView",
    "HistoryResponse",
    "ProgressResponse",
    "RecordCompletionRequest",
    "ScheduleResponse",
]
