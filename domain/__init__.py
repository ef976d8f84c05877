"""
Domain layer for Alethea Tracker.

This package contains pure domain models and computations that are
independent of infrastructure concerns (storage, HTTP, external services).

Part of ALT-3: Define Exercise domain model
Part of ALT-5: Completion ledger and streak
"""

from domain.models import (
    DayCount,
    Exercise,
    History,
    ScheduleDay,
    normalize_day,
)
from domain.streak import compute_streak
from domain.history import completion_rate, last_n_days, schedule

__all__ = [
    "DayCount",
    "Exercise",
    "History",
    "ScheduleDay",
    "normalize_day",
    "compute_streak",
    "completion_rate",
    "last_n_days",
    "schedule",
]
