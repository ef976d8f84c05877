"""
Application factory for FastAPI.

Part of ALT-10: HTTP surface for the mobile client

This module provides a factory function for creating FastAPI application instances.
The factory pattern allows for:
- Easy testing with custom settings
- Multiple app instances with different configurations
- Clear separation of app creation from route definitions

Usage:
    from backend.main import create_app
    from backend.settings import Settings

    # Default app (uses get_settings())
    app = create_app()

    # Test app with custom settings
    test_settings = Settings(environment="test", _env_file=None)
    test_app = create_app(settings=test_settings)
"""

import logging
from typing import Optional

import sentry_sdk
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from application.errors import NetworkError, ParseError, StorageError, TrackerError
from backend.settings import Settings, get_settings

logger = logging.getLogger(__name__)

# Status code and machine-readable code per error type
_ERROR_RESPONSES = {
    NetworkError: (502, "NETWORK_ERROR", True),
    StorageError: (503, "STORAGE_ERROR", True),
    ParseError: (500, "PARSE_ERROR", False),
}


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Create and configure a FastAPI application instance.

    Args:
        settings: Optional Settings instance. If not provided, uses get_settings()
                  which loads from environment variables.

    Returns:
        Configured FastAPI application instance.
    """
    if settings is None:
        settings = get_settings()

    # Initialize Sentry for error tracking
    _init_sentry(settings)

    # Create FastAPI app
    app = FastAPI(
        title="Alethea Tracker API",
        description="Exercise catalog, completion ledger and streak statistics",
        version="1.0.0",
    )

    # Configure CORS middleware
    _configure_cors(app, settings)

    # Map tracker errors to HTTP responses
    _register_error_handlers(app)

    # Include API routers
    _include_routers(app)

    logger.info(
        f"Alethea Tracker started (environment={settings.environment}, "
        f"storage={settings.storage_backend})"
    )
    return app


def _init_sentry(settings: Settings) -> None:
    """Initialize Sentry SDK if DSN is configured."""
    if settings.sentry_dsn:
        sentry_sdk.init(
            dsn=settings.sentry_dsn,
            environment=settings.environment,
            traces_sample_rate=0.1,  # 10% of transactions for performance monitoring
        )
        logger.info("Sentry initialized for alethea-tracker")


def _configure_cors(app: FastAPI, settings: Settings) -> None:
    """Configure CORS middleware for the application."""
    trusted_origins = [
        "http://localhost:3000",
        "http://localhost:8080",
    ]
    trusted_origins.extend(settings.cors_origins_list)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=trusted_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )


def _register_error_handlers(app: FastAPI) -> None:
    """Return NetworkError/StorageError/ParseError as JSON with a retry hint."""

    async def handle_tracker_error(request: Request, exc: TrackerError) -> JSONResponse:
        status_code, error_code, retryable = _ERROR_RESPONSES.get(
            type(exc), (500, "TRACKER_ERROR", False)
        )
        if not retryable:
            logger.error(f"{error_code} on {request.url.path}: {exc.message}")
        else:
            logger.warning(f"{error_code} on {request.url.path}: {exc.message}")
        return JSONResponse(
            status_code=status_code,
            content={
                "detail": exc.message,
                "error_code": error_code,
                "retryable": retryable,
            },
        )

    app.add_exception_handler(TrackerError, handle_tracker_error)


def _include_routers(app: FastAPI) -> None:
    """Include all API routers in the application."""
    from api.routers import (
        completions_router,
        exercises_router,
        health_router,
        progress_router,
    )

    # Health router (no prefix - /health at root)
    app.include_router(health_router)

    # Domain routers (with prefixes defined in each router)
    app.include_router(exercises_router)
    app.include_router(completions_router)
    app.include_router(progress_router)


# Default app instance for uvicorn
# This allows: uvicorn backend.main:app --reload
app = create_app()
