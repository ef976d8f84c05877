"""
Exercise value object for the remote exercise catalog.

Part of ALT-3: Define Exercise domain model
"""

from typing import Any, Dict

from pydantic import BaseModel, Field

DEFAULT_NAME = "Unknown Exercise"
DEFAULT_DESCRIPTION = "No description"
DEFAULT_DIFFICULTY = "Unknown"


def _parse_duration(value: Any) -> int:
    """Parse a duration leniently; anything unusable becomes 0."""
    if isinstance(value, bool) or value is None:
        return 0
    if isinstance(value, int):
        return max(value, 0)
    try:
        parsed = int(str(value).strip())
    except ValueError:
        return 0
    return max(parsed, 0)


class Exercise(BaseModel):
    """
    Value object representing one exercise from the catalog.

    The catalog is fetched, not owned: the only invariant is that ``id``
    selects a single exercise within one fetch batch.

    Examples:
        >>> exercise = Exercise(id="1", name="Plank", duration=60)
        >>> exercise.duration_label
        '60 seconds'

        >>> Exercise.from_api({"id": 7, "description": "Jumping jacks", "duration": "45"}).name
        'Jumping jacks'
    """

    id: str = Field(..., description="Catalog identifier")
    name: str = Field(default=DEFAULT_NAME, description="Display name")
    description: str = Field(default=DEFAULT_DESCRIPTION)
    duration: int = Field(default=0, ge=0, description="Timer length in seconds")
    difficulty: str = Field(default=DEFAULT_DIFFICULTY)

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "Exercise":
        """
        Build an Exercise from one element of the catalog JSON array.

        Missing fields get the same defaults the mobile client shows.
        ``name`` falls back to ``description`` because older catalog rows
        only carry the description.

        Args:
            data: Raw JSON object from the catalog

        Returns:
            Exercise instance
        """
        raw_id = data.get("id")
        description = data.get("description")
        name = data.get("name") or description or DEFAULT_NAME

        return cls(
            id="" if raw_id is None else str(raw_id),
            name=str(name),
            description=str(description) if description else DEFAULT_DESCRIPTION,
            duration=_parse_duration(data.get("duration")),
            difficulty=str(data.get("difficulty") or DEFAULT_DIFFICULTY),
        )

    @property
    def duration_label(self) -> str:
        return f"{self.duration} seconds"

    def __str__(self) -> str:
        """Human-readable string representation."""
        return f"{self.name} ({self.duration}s, {self.difficulty})"

    model_config = {
        "frozen": True,  # Make immutable (value object semantics)
        "json_schema_extra": {
            "examples": [
                {
                    "id": "1",
                    "name": "Plank",
                    "description": "Hold a straight-arm plank",
                    "duration": 60,
                    "difficulty": "Beginner",
                },
            ]
        },
    }
