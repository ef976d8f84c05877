"""
API package for Alethea Tracker.

Part of ALT-10: HTTP surface for the mobile client

This package contains:
- deps.py: FastAPI dependency providers for DI
- routers/: API route handlers
- schemas/: Request and response models
"""

# Re-export dependency providers for convenient access
from api.deps import (
    get_clock,
    get_completion_store,
    get_exercise_source,
    get_key_value_store,
    get_load_dashboard_use_case,
    get_progress_use_case,
    get_record_completion_use_case,
    get_settings,
    get_supabase_client,
)

__all__ = [
    # Settings
    "get_settings",
    "get_clock",
    # Persistence
    "get_supabase_client",
    "get_key_value_store",
    "get_completion_store",
    # Catalog
    "get_exercise_source",
    # Use cases
    "get_load_dashboard_use_case",
    "get_record_completion_use_case",
    "get_progress_use_case",
]
