"""
Unit tests for domain/streak.py

Part of ALT-5: Completion ledger and streak

Tests for:
- Backward walk from today
- Today missing means no streak
- Presence, not count, extends the streak
"""

from datetime import date, datetime, timedelta, timezone

import pytest

from domain.streak import compute_streak

TODAY = date(2024, 1, 10)


def _days_back(*offsets: int, count: int = 1):
    """Ledger with ``count`` completions on TODAY - offset for each offset."""
    return {TODAY - timedelta(days=offset): count for offset in offsets}


@pytest.mark.unit
class TestComputeStreak:
    """Tests for compute_streak."""

    def test_empty_history_is_zero(self):
        assert compute_streak({}, TODAY) == 0

    def test_only_today(self):
        assert compute_streak(_days_back(0), TODAY) == 1

    def test_today_and_yesterday_then_gap(self):
        """Entries for today and today-1 but not today-2 give a streak of 2."""
        history = _days_back(0, 1, 3, 4)
        assert compute_streak(history, TODAY) == 2

    def test_today_missing_is_zero_even_with_unbroken_past(self):
        history = _days_back(1, 2, 3, 4, 5)
        assert compute_streak(history, TODAY) == 0

    @pytest.mark.parametrize("k", [1, 2, 5, 30])
    def test_k_consecutive_days(self, k):
        history = _days_back(*range(k))
        assert compute_streak(history, TODAY) == k

    def test_count_magnitude_is_irrelevant(self):
        assert compute_streak(_days_back(0, 1, count=7), TODAY) == 2

    def test_zero_count_is_treated_as_absent(self):
        history = _days_back(0, 2)
        history[TODAY - timedelta(days=1)] = 0
        assert compute_streak(history, TODAY) == 1

    def test_crosses_month_and_year_boundaries(self):
        new_year = date(2024, 1, 1)
        history = {new_year - timedelta(days=i): 1 for i in range(3)}
        assert compute_streak(history, new_year) == 3

    def test_datetime_today_is_normalized(self):
        history = _days_back(0, 1)
        assert compute_streak(history, datetime(2024, 1, 10, 23, 59)) == 2

    def test_aware_datetime_uses_local_day(self):
        # 01:00 at +05:30 is still Jan 10 for the user, even though it is Jan 9 in UTC
        moment = datetime(2024, 1, 10, 1, 0, tzinfo=timezone(timedelta(hours=5, minutes=30)))
        assert compute_streak({TODAY: 1}, moment) == 1
        assert compute_streak({TODAY - timedelta(days=1): 1}, moment) == 0

    def test_is_pure(self):
        history = _days_back(0, 1)
        before = dict(history)
        compute_streak(history, TODAY)
        assert history == before
