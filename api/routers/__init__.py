"""
Router package for Alethea Tracker.

Part of ALT-10: HTTP surface for the mobile client

This package contains all API routers organized by domain:
- health: Health check endpoint
- exercises: Exercise catalog and "fetch everything"
- completions: Completion recording and lookup
- progress: Progress summary, weekly history and schedule
"""

from api.routers.health import router as health_router
from api.routers.exercises import router as exercises_router
from api.routers.completions import router as completions_router
from api.routers.progress import router as progress_router

__all__ = [
    "health_router",
    "exercises_router",
    "completions_router",
    "progress_router",
]
