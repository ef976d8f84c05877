"""
Fake Port Implementations for Testing.

Part of ALT-4: Inject persistence into the completion store

This package provides in-memory fake implementations of the application
ports for fast, isolated testing. No disk, network or database required.

Features:
- All fakes implement the same Protocol interfaces as real implementations
- Supports seeding with test data
- Supports reset() for test isolation
- Failure switches to exercise StorageError / NetworkError paths
- Factory functions for common test scenarios

Usage:
    from tests.fakes import InMemoryKeyValueStore, create_exercise_source

    kv = InMemoryKeyValueStore()
    source = create_exercise_source(num_exercises=5)
"""
from datetime import datetime
from typing import List

from domain.models import Exercise
from tests.fakes.exercise_source import FakeExerciseSource
from tests.fakes.key_value_store import InMemoryKeyValueStore

DIFFICULTIES = ["Beginner", "Intermediate", "Advanced"]

# "Now" for tests that pin the clock
FIXED_NOW = datetime(2024, 1, 10, 9, 30)


# =============================================================================
# Factory Functions
# =============================================================================


def make_exercises(count: int) -> List[Exercise]:
    """Build ``count`` catalog exercises with ids "1".."count"."""
    return [
        Exercise(
            id=str(i),
            name=f"Exercise {i}",
            description=f"Description {i}",
            duration=30 * i,
            difficulty=DIFFICULTIES[(i - 1) % len(DIFFICULTIES)],
        )
        for i in range(1, count + 1)
    ]


def create_exercise_source(*, num_exercises: int = 3) -> FakeExerciseSource:
    """
    Create a FakeExerciseSource with optional pre-populated exercises.

    Args:
        num_exercises: Number of exercises to generate

    Returns:
        FakeExerciseSource seeded with the generated catalog
    """
    return FakeExerciseSource(make_exercises(num_exercises))


__all__ = [
    "FIXED_NOW",
    "FakeExerciseSource",
    "InMemoryKeyValueStore",
    "create_exercise_source",
    "make_exercises",
]
