"""
Health check router.

Part of ALT-10: HTTP surface for the mobile client

This router provides health check endpoints for monitoring and load balancers.
"""

import logging

from fastapi import APIRouter, Depends

from backend.settings import Settings, get_settings

logger = logging.getLogger(__name__)

router = APIRouter(
    tags=["Health"],
)


@router.get("/health")
def health(settings: Settings = Depends(get_settings)):
    """
    Simple liveness endpoint for the tracker.

    Returns:
        dict: Status indicator plus the configured ledger backend
    """
    return {"status": "ok", "storage_backend": settings.storage_backend}
