"""Tests for life area scoring."""

from datetime import date, timedelta

import pytest

from kaizen.core.constants import LIFE_AREAS
from kaizen.models.habit import (
    DailyRecurrence,
    SpecificDaysRecurrence,
    WeeklyTargetRecurrence,
)
from kaizen.services.habits.recurrence import is_habit_active
from kaizen.services.habits.scoring import (
    active_days_in_period,
    compute_category_scores,
    expected_occurrences,
    round_half_up,
)
from tests.factories import make_completion, make_habit

TODAY = date(2024, 1, 31)


def by_category(scores):
    return {score.category: score for score in scores}


class TestRoundHalfUp:
    @pytest.mark.parametrize("value,expected", [(0.5, 1), (1.5, 2), (2.5, 3), (12.49, 12), (70.0, 70)])
    def test_rounds_half_up(self, value, expected):
        assert round_half_up(value) == expected


class TestExpectedOccurrences:
    def test_daily(self):
        assert expected_occurrences(make_habit(), 30) == 30

    def test_specific_days(self):
        habit = make_habit(recurrence=SpecificDaysRecurrence(days=frozenset({1, 3, 5})))
        # 3/7 * 30 = 12.86
        assert expected_occurrences(habit, 30) == 13

    def test_specific_days_missing_config_counts_seven(self):
        habit = make_habit(recurrence=SpecificDaysRecurrence(days=None))
        assert expected_occurrences(habit, 30) == 30

    def test_weekly_target(self):
        habit = make_habit(recurrence=WeeklyTargetRecurrence(target=2))
        # 2 * 30/7 = 8.57
        assert expected_occurrences(habit, 30) == 9

    def test_floor_of_one(self):
        habit = make_habit(recurrence=WeeklyTargetRecurrence(target=1))
        assert expected_occurrences(habit, 1) == 1

    def test_empty_days_still_expects_one(self):
        habit = make_habit(recurrence=SpecificDaysRecurrence(days=frozenset()))
        assert expected_occurrences(habit, 30) == 1


class TestActiveDays:
    def test_old_habit_clamped_to_period(self):
        habit = make_habit(start_date=date(2020, 1, 1))
        assert active_days_in_period(habit, TODAY, TODAY - timedelta(days=30), 30) == 30

    def test_recent_habit_counts_from_start(self):
        habit = make_habit(start_date=TODAY - timedelta(days=10))
        assert active_days_in_period(habit, TODAY, TODAY - timedelta(days=30), 30) == 10

    def test_created_today_is_one(self):
        habit = make_habit(start_date=TODAY)
        assert active_days_in_period(habit, TODAY, TODAY - timedelta(days=30), 30) == 1


class TestComputeCategoryScores:
    def test_always_five_entries(self):
        scores = compute_category_scores([], [], TODAY)
        assert len(scores) == 5
        assert [s.category for s in scores] == list(LIFE_AREAS)
        assert all(not s.has_habits and s.completion_rate == 0 for s in scores)

    def test_recent_daily_habit(self):
        # Created 10 days ago with 7 completions
        habit = make_habit("run", category="Health", start_date=TODAY - timedelta(days=10))
        completions = [make_completion("run", TODAY - timedelta(days=i)) for i in range(7)]

        health = by_category(compute_category_scores([habit], completions, TODAY))["Health"]

        assert health.expected_count == 10
        assert health.completed_count == 7
        assert health.completion_rate == 70
        assert health.total_habits == 1
        assert health.has_habits

    def test_empty_category(self):
        habit = make_habit("run", category="Health")
        joy = by_category(compute_category_scores([habit], [], TODAY))["Joy"]
        assert joy.has_habits is False
        assert joy.completion_rate == 0
        assert joy.total_habits == 0
        assert joy.completed_count == 0
        assert joy.expected_count == 0

    def test_empty_categories_sort_before_scored_ones(self):
        habits = [make_habit(f"h-{area}", category=area) for area in LIFE_AREAS if area != "Joy"]
        scores = compute_category_scores(habits, [], TODAY)
        assert scores[0].category == "Joy"
        assert not scores[0].has_habits
        assert all(s.has_habits for s in scores[1:])

    def test_empty_category_beats_zero_percent(self):
        habits = [make_habit("h", category="Career")]
        scores = compute_category_scores(habits, [], TODAY)
        career_index = [s.category for s in scores].index("Career")
        assert career_index == 4
        assert scores[career_index].completion_rate == 0

    def test_weakest_first_then_taxonomy_order(self):
        habits = [
            make_habit("health", category="Health", start_date=TODAY - timedelta(days=10)),
            make_habit("career", category="Career", start_date=TODAY - timedelta(days=10)),
            make_habit("spirit", category="Spirit", start_date=TODAY - timedelta(days=10)),
            make_habit("mindset", category="Mindset", start_date=TODAY - timedelta(days=10)),
            make_habit("joy", category="Joy", start_date=TODAY - timedelta(days=10)),
        ]
        done = {"health": 9, "career": 2, "spirit": 5, "mindset": 2, "joy": 10}
        completions = [
            make_completion(habit_id, TODAY - timedelta(days=i))
            for habit_id, count in done.items()
            for i in range(count)
        ]
        scores = compute_category_scores(habits, completions, TODAY)
        assert [s.category for s in scores] == ["Career", "Mindset", "Spirit", "Health", "Joy"]
        assert [s.completion_rate for s in scores] == [20, 20, 50, 90, 100]

    def test_rate_clamped_to_100(self):
        habit = make_habit("h", start_date=TODAY - timedelta(days=2))
        completions = [make_completion("h", TODAY - timedelta(days=i)) for i in range(5)]
        health = by_category(compute_category_scores([habit], completions, TODAY))["Health"]
        assert health.expected_count == 2
        assert health.completed_count == 5
        assert health.completion_rate == 100

    def test_rate_rounds_half_up(self):
        habit = make_habit("h", start_date=TODAY - timedelta(days=8))
        health = by_category(compute_category_scores([habit], [make_completion("h", TODAY)], TODAY))["Health"]
        # 1/8 = 12.5%
        assert health.completion_rate == 13

    def test_completions_before_period_ignored(self):
        habit = make_habit("h")
        period_start = TODAY - timedelta(days=30)
        completions = [
            make_completion("h", period_start - timedelta(days=1)),
            make_completion("h", period_start),
        ]
        health = by_category(compute_category_scores([habit], completions, TODAY))["Health"]
        assert health.completed_count == 1
        assert health.expected_count == 30

    def test_duplicate_completions_counted_once(self):
        habit = make_habit("h")
        completions = [make_completion("h", TODAY), make_completion("h", TODAY)]
        health = by_category(compute_category_scores([habit], completions, TODAY))["Health"]
        assert health.completed_count == 1

    def test_future_start_expects_one(self):
        habit = make_habit("later", start_date=TODAY + timedelta(days=5))
        assert not is_habit_active(habit, TODAY)

        health = by_category(compute_category_scores([habit], [], TODAY))["Health"]
        assert health.expected_count == 1
        assert health.completed_count == 0
        assert health.completion_rate == 0
        assert health.has_habits

    def test_mixed_recurrence_in_one_category(self):
        habits = [
            make_habit("daily", category="Mindset", recurrence=DailyRecurrence()),
            make_habit("mwf", category="Mindset",
                       recurrence=SpecificDaysRecurrence(days=frozenset({1, 3, 5}))),
            make_habit("weekly", category="Mindset", recurrence=WeeklyTargetRecurrence(target=2)),
        ]
        mindset = by_category(compute_category_scores(habits, [], TODAY))["Mindset"]
        assert mindset.total_habits == 3
        assert mindset.expected_count == 30 + 13 + 9

    def test_unknown_categories_are_not_scored(self):
        habit = make_habit("h", category="Hobbies")
        scores = compute_category_scores([habit], [], TODAY)
        assert len(scores) == 5
        assert all(not s.has_habits for s in scores)

    def test_custom_period(self):
        habit = make_habit("h")
        completions = [make_completion("h", TODAY - timedelta(days=i)) for i in range(7)]
        health = by_category(compute_category_scores([habit], completions, TODAY, period_days=7))["Health"]
        assert health.expected_count == 7
        assert health.completion_rate == 100

    def test_rates_always_in_range(self):
        habits = [make_habit(f"h{i}", category=LIFE_AREAS[i % 5],
                             start_date=TODAY - timedelta(days=i * 3)) for i in range(12)]
        completions = [make_completion(f"h{i}", TODAY - timedelta(days=d))
                       for i in range(12) for d in range(0, 40, i + 1)]
        for score in compute_category_scores(habits, completions, TODAY):
            assert 0 <= score.completion_rate <= 100

    def test_serialised_with_camel_case(self):
        score = compute_category_scores([make_habit("h")], [], TODAY)[-1]
        dumped = score.model_dump(by_alias=True)
        assert set(dumped) == {
            "category", "completionRate", "totalHabits",
            "completedCount", "expectedCount", "hasHabits",
        }
