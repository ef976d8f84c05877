"""
Infrastructure HTTP Layer.

Part of ALT-2: Fetch the exercise catalog
"""

from infrastructure.http.exercise_source import HttpExerciseSource

__all__ = [
    "HttpExerciseSource",
]
