"""
Life area scoring - how well each category of habits is going over a trailing period

Expected occurrences are modelled per habit from its recurrence rule and the
part of the period it has existed for, so a habit created last week is not
penalised for the three weeks before it.
"""
import math
from collections import Counter
from datetime import date, timedelta
from typing import Dict, Iterable, List, Sequence

from kaizen.core.constants import DEFAULT_SCORING_PERIOD_DAYS, LIFE_AREAS
from kaizen.models.habit import (
    CompletionEvent,
    Habit,
    SpecificDaysRecurrence,
    WeeklyTargetRecurrence,
)
from kaizen.models.report import CategoryScore
from .progress import dedupe_completions


def round_half_up(value: float) -> int:
    """Round .5 away from zero for non-negative values (round() would give 2 for 2.5)"""
    return int(math.floor(value + 0.5))


def active_days_in_period(habit: Habit, today: date, period_start: date, period_days: int) -> int:
    """Days of the period the habit has existed for, at least 1 and at most period_days"""
    effective_start = max(habit.start_date, period_start)
    active_days = max(1, (today - effective_start).days)
    return min(active_days, period_days)


def expected_occurrences(habit: Habit, active_days: int) -> int:
    """
    How many completions the habit's recurrence rule asks for over active_days.

    Never less than 1.
    """
    recurrence = habit.recurrence
    if isinstance(recurrence, SpecificDaysRecurrence):
        expected = round_half_up(recurrence.days_per_week / 7 * active_days)
    elif isinstance(recurrence, WeeklyTargetRecurrence):
        expected = round_half_up(recurrence.target * (active_days / 7))
    else:
        expected = active_days
    return max(1, expected)


def count_completions_since(completions: Iterable[CompletionEvent], period_start: date) -> Dict[str, int]:
    """Map habit_id -> distinct completions dated on or after period_start"""
    return Counter(
        event.habit_id for event in dedupe_completions(completions)
        if event.date >= period_start
    )


def _score_category(
    category: str,
    habits: List[Habit],
    completion_counts: Dict[str, int],
    today: date,
    period_start: date,
    period_days: int
) -> CategoryScore:
    if not habits:
        return CategoryScore(
            category=category,
            completion_rate=0,
            total_habits=0,
            completed_count=0,
            expected_count=0,
            has_habits=False,
        )

    total_expected = 0
    total_completed = 0
    for habit in habits:
        active_days = active_days_in_period(habit, today, period_start, period_days)
        total_expected += expected_occurrences(habit, active_days)
        total_completed += completion_counts.get(habit.id, 0)

    completion_rate = 0
    if total_expected > 0:
        completion_rate = round_half_up(min(100.0, total_completed / total_expected * 100))

    return CategoryScore(
        category=category,
        completion_rate=completion_rate,
        total_habits=len(habits),
        completed_count=total_completed,
        expected_count=total_expected,
        has_habits=True,
    )


def compute_category_scores(
    habits: Sequence[Habit],
    completions: Iterable[CompletionEvent],
    today: date,
    period_days: int = DEFAULT_SCORING_PERIOD_DAYS,
    life_areas: Sequence[str] = LIFE_AREAS
) -> List[CategoryScore]:
    """
    Score every life area over the period_days before today.

    Args:
        habits: The user's habits
        completions: The user's completion events (older ones are ignored)
        today: Reference date, injected so results are reproducible
        period_days: Length of the trailing period
        life_areas: Category taxonomy, one score per entry

    Returns:
        One CategoryScore per life area. Areas with no habits come first,
        then the rest from weakest to strongest; ties keep taxonomy order.
    """
    period_start = today - timedelta(days=period_days)
    completion_counts = count_completions_since(completions, period_start)

    scores = [
        _score_category(
            category,
            [habit for habit in habits if habit.category == category],
            completion_counts,
            today,
            period_start,
            period_days,
        )
        for category in life_areas
    ]

    return sorted(scores, key=lambda score: (score.has_habits, score.completion_rate))
