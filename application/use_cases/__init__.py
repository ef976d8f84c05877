"""
Application Use Cases for Alethea Tracker.

Part of ALT-2: Fetch the exercise catalog
Part of ALT-5: Completion ledger and streak
Part of ALT-6: Weekly chart and schedule

This package contains application-level use cases that orchestrate domain
logic and coordinate between ports/adapters. Dependencies are injected via
constructors for testability.

Usage:
    from application.use_cases import (
        LoadDashboardUseCase,
        RecordCompletionUseCase,
        GetProgressUseCase,
    )

    # Fetch everything for the home screen
    dashboard = LoadDashboardUseCase(
        exercise_source=source,
        completion_store=store,
    ).execute()

    # Mark an exercise completed
    result = RecordCompletionUseCase(completion_store=store).execute("ex1")

    # Weekly chart
    days = GetProgressUseCase(completion_store=store).history(7)
"""

from application.use_cases.get_progress import GetProgressUseCase, ProgressResult
from application.use_cases.load_dashboard import (
    LoadDashboardResult,
    LoadDashboardUseCase,
)
from application.use_cases.record_completion import (
    Clock,
    RecordCompletionResult,
    RecordCompletionUseCase,
)

__all__ = [
    # LoadDashboard
    "LoadDashboardUseCase",
    "LoadDashboardResult",
    # RecordCompletion
    "RecordCompletionUseCase",
    "RecordCompletionResult",
    "Clock",
    # GetProgress
    "GetProgressUseCase",
    "ProgressResult",
]
