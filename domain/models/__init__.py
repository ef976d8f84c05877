"""
Domain models for Alethea Tracker.

This package contains pure domain models that are independent of
infrastructure concerns (storage, HTTP, external services).

These models represent the core concepts:
- Exercise: One entry of the remote exercise catalog
- DayCount: Completions recorded on a calendar day
- ScheduleDay: Done / not done flag for a calendar day

Part of ALT-3: Define Exercise domain model
Part of ALT-5: Completion ledger and streak

Usage:
    >>> from domain.models import Exercise, normalize_day

    >>> exercise = Exercise.from_api({"id": "1", "name": "Plank", "duration": 60})
    >>> exercise.model_dump_json()
"""

from domain.models.exercise import Exercise
from domain.models.history import (
    DateLike,
    DayCount,
    History,
    ScheduleDay,
    normalize_day,
)

__all__ = [
    # Catalog
    "Exercise",
    # Ledger
    "DateLike",
    "DayCount",
    "History",
    "ScheduleDay",
    "normalize_day",
]
