"""
Shared pytest fixtures for Alethea Tracker tests.

Part of ALT-11: Test fixtures and fakes

Provides fake ports, a pinned clock and a TestClient whose dependencies
are overridden with the fakes.
"""

import pytest
from fastapi.testclient import TestClient

from api.deps import get_clock, get_exercise_source, get_key_value_store
from application.services import CompletionStore
from backend.main import create_app
from backend.settings import Settings
from tests.fakes import (
    FIXED_NOW,
    FakeExerciseSource,
    InMemoryKeyValueStore,
    create_exercise_source,
)


# ---------------------------------------------------------------------------
# Ports
# ---------------------------------------------------------------------------


@pytest.fixture
def kv_store() -> InMemoryKeyValueStore:
    """Create a fresh in-memory key-value store."""
    return InMemoryKeyValueStore()


@pytest.fixture
def completion_store(kv_store: InMemoryKeyValueStore) -> CompletionStore:
    """Create a CompletionStore over the fake key-value store."""
    return CompletionStore(kv_store)


@pytest.fixture
def exercise_source() -> FakeExerciseSource:
    """Create a fake catalog with exercises "1", "2" and "3"."""
    return create_exercise_source(num_exercises=3)


@pytest.fixture
def clock():
    """Clock pinned to FIXED_NOW."""
    return lambda: FIXED_NOW


# ---------------------------------------------------------------------------
# Test App and Client
# ---------------------------------------------------------------------------


@pytest.fixture
def test_settings(tmp_path) -> Settings:
    """Test settings with the file backend under tmp_path."""
    return Settings(
        _env_file=None,
        environment="test",
        storage_path=str(tmp_path / "tracker_state.json"),
    )


@pytest.fixture
def app(test_settings, kv_store, exercise_source, clock):
    """Create test application instance wired to the fakes."""
    test_app = create_app(settings=test_settings)
    test_app.dependency_overrides[get_key_value_store] = lambda: kv_store
    test_app.dependency_overrides[get_exercise_source] = lambda: exercise_source
    test_app.dependency_overrides[get_clock] = lambda: clock
    yield test_app
    test_app.dependency_overrides.clear()


@pytest.fixture
def client(app) -> TestClient:
    """TestClient for the wired test app."""
    return TestClient(app)
