"""
Exercise Source Interface (Port).

Part of ALT-2: Fetch the exercise catalog

The catalog lives on a remote API. The completion core never calls it;
only the dashboard and progress use cases do.
"""
from typing import List, Protocol

from domain.models import Exercise


class ExerciseSource(Protocol):
    """Abstract interface for reading the exercise catalog."""

    def fetch_exercises(self) -> List[Exercise]:
        """
        Fetch every exercise in the catalog.

        Returns:
            List of exercises in catalog order

        Raises:
            NetworkError: If the catalog is unreachable or answers non-2xx
            ParseError: If the payload is not a JSON array of objects
        """
        ...
