"""
History aggregation for charts and the schedule view.

Part of ALT-6: Weekly chart and schedule
"""

from datetime import date, timedelta
from typing import List, Mapping

from domain.models.history import DateLike, DayCount, ScheduleDay, normalize_day

# Window shown by the weekly chart and the schedule view
DEFAULT_WINDOW_DAYS = 7


def last_n_days(history: Mapping[date, int], n: int, today: DateLike) -> List[DayCount]:
    """
    Return exactly ``n`` days ending at ``today``, oldest first.

    Days missing from the ledger are reported with a count of 0.

    Args:
        history: Ledger of normalized day -> completion count
        n: Window length in days
        today: Last day of the window

    Returns:
        List of DayCount in strictly increasing date order

    Raises:
        ValueError: If n is negative
    """
    if n < 0:
        raise ValueError(f"Window length must be non-negative, got {n}")

    end = normalize_day(today)
    days = [end - timedelta(days=offset) for offset in range(n - 1, -1, -1)]
    return [DayCount(day=day, count=history.get(day, 0)) for day in days]


def schedule(
    history: Mapping[date, int],
    today: DateLike,
    days: int = DEFAULT_WINDOW_DAYS,
) -> List[ScheduleDay]:
    """Same window as last_n_days, reduced to a done / not done flag per day."""
    return [
        ScheduleDay(day=entry.day, completed=entry.completed)
        for entry in last_n_days(history, days, today)
    ]


def completion_rate(completed: int, total: int) -> float:
    """
    Percentage of catalog exercises completed at least once.

    Rounded to one decimal. Returns 0.0 for an empty catalog.
    """
    if total <= 0:
        return 0.0
    return round(completed / total * 100, 1)
