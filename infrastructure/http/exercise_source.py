"""
HTTP client for the remote exercise catalog.

Part of ALT-2: Fetch the exercise catalog

The catalog is a single GET endpoint returning a JSON array of exercise
objects.
"""

import logging
from typing import List, Optional

import httpx

from application.errors import NetworkError, ParseError
from domain.models import Exercise

logger = logging.getLogger(__name__)

# Default client timeout
DEFAULT_TIMEOUT = 10.0


class HttpExerciseSource:
    """
    httpx implementation of the ExerciseSource protocol.

    Usage:
        source = HttpExerciseSource("https://example.mockapi.io/dev/workouts")
        exercises = source.fetch_exercises()
    """

    def __init__(
        self,
        url: str,
        timeout: float = DEFAULT_TIMEOUT,
        client: Optional[httpx.Client] = None,
    ):
        """
        Initialize the catalog client.

        Args:
            url: Catalog endpoint
            timeout: Request timeout in seconds (ignored if client is given)
            client: Preconfigured httpx client, e.g. with a MockTransport in tests.
                Without one, a single client is created and reused for every fetch.
        """
        self._url = url
        self._client = client if client is not None else httpx.Client(timeout=timeout)

    def fetch_exercises(self) -> List[Exercise]:
        """
        Fetch every exercise in the catalog.

        Returns:
            List of exercises in catalog order

        Raises:
            NetworkError: If the catalog is unreachable or answers non-2xx
            ParseError: If the payload is not a JSON array of objects
        """
        try:
            response = self._client.get(self._url)
        except httpx.TimeoutException as e:
            logger.error(f"Exercise catalog timeout: {e}")
            raise NetworkError("Exercise catalog request timed out") from e
        except httpx.TransportError as e:
            logger.error(f"Exercise catalog unavailable: {e}")
            raise NetworkError(f"Network error: {e}") from e

        if not response.is_success:
            logger.warning(
                f"Exercise catalog error: {response.status_code} - {response.text[:200]}"
            )
            raise NetworkError(
                f"Failed to load exercises: {response.status_code}",
                status_code=response.status_code,
            )

        return self._parse(response)

    @staticmethod
    def _parse(response: httpx.Response) -> List[Exercise]:
        try:
            data = response.json()
        except ValueError as e:
            raise ParseError(f"Exercise catalog returned invalid JSON: {e}") from e

        if not isinstance(data, list):
            raise ParseError(
                f"Exercise catalog must return a JSON array, got {type(data).__name__}"
            )

        exercises = []
        for i, item in enumerate(data):
            if not isinstance(item, dict):
                raise ParseError(f"Exercise catalog item {i} is not an object")
            exercises.append(Exercise.from_api(item))
        return exercises

    def close(self) -> None:
        """Close the underlying httpx client."""
        self._client.close()
