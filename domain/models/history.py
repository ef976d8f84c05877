"""
Value objects for the completion ledger.

Part of ALT-5: Completion ledger and streak
"""

from datetime import date, datetime
from typing import Dict, Union

from pydantic import BaseModel, Field

DateLike = Union[date, datetime]

# Ledger of normalized day -> number of completions recorded that day
History = Dict[date, int]


def normalize_day(value: DateLike) -> date:
    """
    Truncate a date or datetime to its calendar day (local midnight).

    Aware datetimes keep their own offset: the offset a client sends is its
    local time, so 01:00 at +05:30 on Jan 10 is Jan 10 whatever the server
    timezone is.

    Examples:
        >>> normalize_day(datetime(2024, 1, 10, 18, 45))
        datetime.date(2024, 1, 10)
    """
    if isinstance(value, datetime):
        return value.date()
    return value


class DayCount(BaseModel):
    """Completions recorded on one calendar day."""

    day: date
    count: int = Field(default=0, ge=0)

    @property
    def completed(self) -> bool:
        return self.count > 0

    model_config = {"frozen": True}


class ScheduleDay(BaseModel):
    """One row of the schedule view: was anything completed that day."""

    day: date
    completed: bool = False

    model_config = {"frozen": True}
