"""
Streak calculation over the completion ledger.

Part of ALT-5: Completion ledger and streak

The streak is the number of consecutive calendar days, counting backward
from today inclusive, that have at least one completion. The walk always
starts at today: if today has nothing recorded the streak is 0, even when
yesterday and earlier are unbroken.
"""

from datetime import date, timedelta
from typing import Mapping

from domain.models.history import DateLike, normalize_day

ONE_DAY = timedelta(days=1)


def compute_streak(history: Mapping[date, int], today: DateLike) -> int:
    """
    Count consecutive completed days ending at ``today``.

    Presence is what matters, not the count: any day with a count >= 1
    extends the streak. Days with a count of 0 are treated as absent.

    Args:
        history: Ledger of normalized day -> completion count
        today: Reference moment; normalized to its calendar day

    Returns:
        Non-negative streak length in days
    """
    cursor = normalize_day(today)
    streak = 0
    while history.get(cursor, 0) > 0:
        streak += 1
        cursor -= ONE_DAY
    return streak
