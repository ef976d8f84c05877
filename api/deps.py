"""
FastAPI Dependency Providers for Alethea Tracker.

Part of ALT-10: Create api/deps.py dependency providers

This module provides FastAPI dependency injection functions that return
interface types (Protocols) rather than concrete implementations. This
enables clean separation of concerns and easy testing with fake
implementations.

Architecture:
- Settings, Supabase client and catalog client are cached per-process (lru_cache)
- Store and use case providers create new instances per-request
- get_clock supplies "now" so tests can pin the date

Usage in routers:
    from api.deps import get_record_completion_use_case
    from application.use_cases import RecordCompletionUseCase

    @router.post("/completions")
    def record(
        use_case: RecordCompletionUseCase = Depends(get_record_completion_use_case),
    ):
        return use_case.execute("ex1")

Testing:
    # Override dependencies in tests
    app.dependency_overrides[get_key_value_store] = lambda: InMemoryKeyValueStore()
"""

from datetime import datetime
from functools import lru_cache
from typing import Optional

from fastapi import Depends, HTTPException
from supabase import Client, create_client

# Protocol types (interfaces)
from application.ports import ExerciseSource, KeyValueStore
from application.services import CompletionStore
from application.use_cases import (
    Clock,
    GetProgressUseCase,
    LoadDashboardUseCase,
    RecordCompletionUseCase,
)

# Concrete implementations
from infrastructure import (
    HttpExerciseSource,
    JsonFileKeyValueStore,
    SupabaseKeyValueStore,
)

from backend.settings import Settings, get_settings as _get_settings


# =============================================================================
# Settings Provider
# =============================================================================


def get_settings() -> Settings:
    """
    Get application settings.

    Returns cached Settings instance from backend.settings.
    Use this as a FastAPI dependency for settings access.

    Returns:
        Settings: Application settings instance
    """
    return _get_settings()


def get_clock() -> Clock:
    """Get the clock used as "now" by the ledger use cases."""
    return datetime.now


# =============================================================================
# Supabase Client Provider
# =============================================================================


@lru_cache
def get_supabase_client() -> Optional[Client]:
    """
    Get Supabase client instance (cached).

    Creates a Supabase client using credentials from settings.
    Returns None if credentials are not configured.

    Returns:
        Client: Supabase client instance, or None if not configured
    """
    settings = _get_settings()

    if not settings.supabase_url or not settings.supabase_key:
        return None

    return create_client(settings.supabase_url, settings.supabase_key)


# =============================================================================
# Persistence Providers
# =============================================================================


def get_key_value_store(
    settings: Settings = Depends(get_settings),
) -> KeyValueStore:
    """
    Get the KeyValueStore implementation selected by settings.

    Returns:
        KeyValueStore: JSON file store or Supabase table store

    Raises:
        HTTPException: 503 if the supabase backend is selected but not configured
    """
    if settings.storage_backend == "supabase":
        client = get_supabase_client()
        if client is None:
            raise HTTPException(
                status_code=503,
                detail="Storage not available. Supabase credentials not configured.",
            )
        return SupabaseKeyValueStore(client, table=settings.supabase_kv_table)

    return JsonFileKeyValueStore(settings.storage_path)


def get_completion_store(
    kv_store: KeyValueStore = Depends(get_key_value_store),
) -> CompletionStore:
    """Get the completion ledger over the configured key-value store."""
    return CompletionStore(kv_store)


@lru_cache
def _http_exercise_source(url: str, timeout: float) -> HttpExerciseSource:
    """One catalog client per (url, timeout), shared across requests."""
    return HttpExerciseSource(url, timeout=timeout)


def get_exercise_source(
    settings: Settings = Depends(get_settings),
) -> ExerciseSource:
    """
    Get ExerciseSource implementation.

    Returns:
        ExerciseSource: cached httpx client for the remote catalog
    """
    return _http_exercise_source(
        settings.exercises_api_url,
        settings.exercises_api_timeout,
    )


# =============================================================================
# Use Case Providers
# =============================================================================


def get_load_dashboard_use_case(
    exercise_source: ExerciseSource = Depends(get_exercise_source),
    completion_store: CompletionStore = Depends(get_completion_store),
) -> LoadDashboardUseCase:
    return LoadDashboardUseCase(
        exercise_source=exercise_source,
        completion_store=completion_store,
    )


def get_record_completion_use_case(
    completion_store: CompletionStore = Depends(get_completion_store),
    clock: Clock = Depends(get_clock),
) -> RecordCompletionUseCase:
    return RecordCompletionUseCase(completion_store=completion_store, clock=clock)


def get_progress_use_case(
    completion_store: CompletionStore = Depends(get_completion_store),
    exercise_source: ExerciseSource = Depends(get_exercise_source),
    clock: Clock = Depends(get_clock),
) -> GetProgressUseCase:
    return GetProgressUseCase(
        completion_store=completion_store,
        exercise_source=exercise_source,
        clock=clock,
    )
