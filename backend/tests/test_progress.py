"""Tests for weekly completion counting."""

from datetime import date, timedelta

import pytest

from kaizen.core.exceptions import InvalidHabitDataError
from kaizen.services.habits.progress import (
    dedupe_completions,
    weekly_completion_count,
    weekly_progress,
)
from tests.factories import MONDAY, SUNDAY, WEDNESDAY, make_completion


class TestWeeklyCompletionCount:
    def test_no_events(self):
        assert weekly_completion_count([], "h1", MONDAY, SUNDAY) == 0

    def test_bounds_are_inclusive(self):
        events = [
            make_completion("h1", MONDAY - timedelta(days=1)),
            make_completion("h1", MONDAY),
            make_completion("h1", SUNDAY),
            make_completion("h1", SUNDAY + timedelta(days=1)),
        ]
        assert weekly_completion_count(events, "h1", MONDAY, SUNDAY) == 2

    def test_other_habits_ignored(self):
        events = [make_completion("h1", MONDAY), make_completion("h2", MONDAY)]
        assert weekly_completion_count(events, "h1", MONDAY, SUNDAY) == 1

    def test_duplicates_counted_once(self):
        events = [make_completion("h1", MONDAY), make_completion("h1", MONDAY)]
        assert weekly_completion_count(events, "h1", MONDAY, SUNDAY) == 1

    def test_same_day_different_users_both_count(self):
        events = [make_completion("h1", MONDAY, "u1"), make_completion("h1", MONDAY, "u2")]
        assert weekly_completion_count(events, "h1", MONDAY, SUNDAY) == 2

    def test_monotonic_as_events_grow(self):
        events = []
        previous = 0
        for offset in range(-3, 10):
            events.append(make_completion("h1", MONDAY + timedelta(days=offset)))
            count = weekly_completion_count(events, "h1", MONDAY, SUNDAY)
            assert count >= previous >= 0
            previous = count
        assert previous == 7


class TestWeeklyProgress:
    def test_target_met_in_monday_week(self, weekly_habit):
        events = [
            make_completion("weekly", MONDAY),
            make_completion("weekly", WEDNESDAY),
            make_completion("weekly", SUNDAY),
        ]
        progress = weekly_progress(weekly_habit, events, WEDNESDAY)
        assert progress.week_start == MONDAY
        assert progress.week_end == SUNDAY
        assert progress.completed == 3
        assert progress.target == 3
        assert progress.label == "3/3"
        assert progress.is_target_met

    def test_previous_week_not_counted(self, weekly_habit):
        events = [make_completion("weekly", SUNDAY)]
        progress = weekly_progress(weekly_habit, events, SUNDAY + timedelta(days=1))
        assert progress.completed == 0
        assert not progress.is_target_met

    def test_serialises_label(self, weekly_habit):
        dumped = weekly_progress(weekly_habit, [], WEDNESDAY).model_dump(mode="json")
        assert dumped["label"] == "0/3"
        assert dumped["is_target_met"] is False
        assert dumped["week_start"] == "2024-01-01"

    def test_requires_weekly_target(self, daily_habit):
        with pytest.raises(InvalidHabitDataError):
            weekly_progress(daily_habit, [], WEDNESDAY)


class TestDedupe:
    def test_keeps_first_seen_order(self):
        a = make_completion("a", date(2024, 1, 2))
        b = make_completion("b", date(2024, 1, 1))
        assert dedupe_completions([a, b, a]) == [a, b]
