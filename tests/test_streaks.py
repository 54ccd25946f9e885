"""Tests for streak calculation."""

from datetime import date, datetime

import pytest

from models import Habit
from streaks import ANCHOR_TODAY, current_streak, is_completed_today

TODAY = date(2024, 5, 10)


def _habit(*days):
    return Habit(id="h1", name="Read", completed_dates=list(days))


class TestIsCompletedToday:
    def test_done(self):
        assert is_completed_today(_habit("2024-05-10"), TODAY) is True

    def test_not_done(self):
        assert is_completed_today(_habit("2024-05-09"), TODAY) is False

    def test_accepts_datetime_and_string(self):
        habit = _habit("2024-05-10")
        assert is_completed_today(habit, datetime(2024, 5, 10, 23, 59))
        assert is_completed_today(habit, "2024-05-10")


class TestCurrentStreak:
    def test_empty_is_zero(self):
        assert current_streak(_habit(), TODAY) == 0
        assert current_streak(_habit(), TODAY, anchor=ANCHOR_TODAY) == 0

    def test_only_today_is_one(self):
        assert current_streak(_habit("2024-05-10"), TODAY) == 1

    def test_three_days_ending_today(self):
        habit = _habit("2024-05-08", "2024-05-10", "2024-05-09")
        assert current_streak(habit, TODAY) == 3
        assert current_streak(habit, TODAY, anchor=ANCHOR_TODAY) == 3
        assert is_completed_today(habit, TODAY)

    def test_gap_breaks_streak(self):
        assert current_streak(_habit("2024-05-07"), TODAY) == 0

    def test_run_ending_yesterday_stays_alive(self):
        habit = _habit("2024-05-08", "2024-05-09")
        assert current_streak(habit, TODAY) == 2

    def test_run_ending_yesterday_today_anchor(self):
        # the today-anchored walk compares the newest day with today first
        habit = _habit("2024-05-08", "2024-05-09")
        assert current_streak(habit, TODAY, anchor=ANCHOR_TODAY) == 0

    def test_stops_at_first_gap(self):
        habit = _habit("2024-05-10", "2024-05-09", "2024-05-07", "2024-05-06")
        assert current_streak(habit, TODAY) == 2

    def test_month_boundary(self):
        habit = _habit("2024-04-30", "2024-05-01")
        assert current_streak(habit, date(2024, 5, 1)) == 2

    def test_duplicates_do_not_inflate(self):
        habit = _habit("2024-05-10", "2024-05-10", "2024-05-09")
        assert current_streak(habit, TODAY) == 2

    def test_future_day_breaks(self):
        assert current_streak(_habit("2024-05-11"), TODAY) == 0

    def test_unknown_anchor(self):
        with pytest.raises(ValueError):
            current_streak(_habit("2024-05-10"), TODAY, anchor="sometime")
