"""
Unit tests for domain/history.py and normalize_day.

Part of ALT-6: Weekly chart and schedule
"""

from datetime import date, datetime, timedelta, timezone

import pytest

from domain.history import completion_rate, last_n_days, schedule
from domain.models import DayCount, normalize_day

TODAY = date(2024, 1, 10)


@pytest.mark.unit
class TestNormalizeDay:
    """Tests for normalize_day."""

    def test_date_is_unchanged(self):
        assert normalize_day(TODAY) == TODAY

    def test_naive_datetime_is_truncated(self):
        assert normalize_day(datetime(2024, 1, 10, 23, 59, 59)) == TODAY

    def test_midnight_stays_on_same_day(self):
        assert normalize_day(datetime(2024, 1, 10)) == TODAY

    def test_aware_datetime_keeps_its_offset(self):
        ist = timezone(timedelta(hours=5, minutes=30))
        assert normalize_day(datetime(2024, 1, 10, 1, 0, tzinfo=ist)) == TODAY
        pst = timezone(timedelta(hours=-8))
        assert normalize_day(datetime(2024, 1, 10, 23, 30, tzinfo=pst)) == TODAY


@pytest.mark.unit
class TestLastNDays:
    """Tests for last_n_days."""

    def test_always_returns_n_entries(self):
        result = last_n_days({}, 7, TODAY)
        assert len(result) == 7
        assert all(entry.count == 0 for entry in result)

    def test_oldest_first_ending_today(self):
        result = last_n_days({}, 7, TODAY)
        days = [entry.day for entry in result]
        assert days == sorted(days)
        assert len(set(days)) == 7
        assert days[0] == date(2024, 1, 4)
        assert days[-1] == TODAY

    def test_counts_come_from_history(self):
        history = {TODAY: 2, TODAY - timedelta(days=3): 1}
        result = last_n_days(history, 7, TODAY)
        assert [entry.count for entry in result] == [0, 0, 0, 1, 0, 0, 2]

    def test_entries_outside_window_are_ignored(self):
        history = {TODAY - timedelta(days=10): 5}
        result = last_n_days(history, 7, TODAY)
        assert sum(entry.count for entry in result) == 0

    def test_datetime_today_is_normalized(self):
        result = last_n_days({TODAY: 1}, 3, datetime(2024, 1, 10, 18, 0))
        assert result[-1] == DayCount(day=TODAY, count=1)

    def test_zero_days_is_empty(self):
        assert last_n_days({TODAY: 1}, 0, TODAY) == []

    def test_negative_days_raises(self):
        with pytest.raises(ValueError):
            last_n_days({}, -1, TODAY)


@pytest.mark.unit
class TestSchedule:
    """Tests for schedule."""

    def test_any_positive_count_means_completed(self):
        history = {TODAY: 3, TODAY - timedelta(days=1): 1}
        result = schedule(history, TODAY)
        assert len(result) == 7
        assert [entry.completed for entry in result] == [
            False, False, False, False, False, True, True,
        ]

    def test_custom_window(self):
        result = schedule({}, TODAY, days=14)
        assert len(result) == 14
        assert result[0].day == TODAY - timedelta(days=13)


@pytest.mark.unit
class TestCompletionRate:
    """Tests for completion_rate."""

    def test_empty_catalog_is_zero(self):
        assert completion_rate(0, 0) == 0.0

    def test_rounded_to_one_decimal(self):
        assert completion_rate(1, 3) == 33.3
        assert completion_rate(2, 3) == 66.7

    def test_all_completed(self):
        assert completion_rate(4, 4) == 100.0
