"""
Weekly progress - completions inside a habit's week window
"""
from datetime import date
from typing import Iterable, List

from kaizen.core.exceptions import InvalidHabitDataError
from kaizen.models.habit import CompletionEvent, Habit, WeeklyTargetRecurrence
from kaizen.models.report import WeeklyProgress
from .calendar import week_bounds


def dedupe_completions(events: Iterable[CompletionEvent]) -> List[CompletionEvent]:
    """Drop repeated (habit_id, user_id, date) events, keeping first-seen order"""
    seen = set()
    unique = []
    for event in events:
        if event.key in seen:
            continue
        seen.add(event.key)
        unique.append(event)
    return unique


def weekly_completion_count(
    events: Iterable[CompletionEvent],
    habit_id: str,
    week_start_date: date,
    week_end_date: date
) -> int:
    """
    Count a habit's completions between two dates (both inclusive)

    Args:
        events: Completion events, possibly for several habits
        habit_id: Habit to count
        week_start_date: First date of the window
        week_end_date: Last date of the window

    Returns:
        Number of distinct matching completions, 0 if none
    """
    return sum(
        1 for event in dedupe_completions(events)
        if event.habit_id == habit_id and week_start_date <= event.date <= week_end_date
    )


def weekly_progress(habit: Habit, events: Iterable[CompletionEvent], today: date) -> WeeklyProgress:
    """
    Progress of a weekly-target habit for the week containing today

    Raises:
        InvalidHabitDataError: If the habit is not a weekly-target habit
    """
    recurrence = habit.recurrence
    if not isinstance(recurrence, WeeklyTargetRecurrence):
        raise InvalidHabitDataError(f"Habit {habit.id} has no weekly target")

    start, end = week_bounds(today, recurrence.week_start_day)
    return WeeklyProgress(
        habit_id=habit.id,
        completed=weekly_completion_count(events, habit.id, start, end),
        target=recurrence.target,
        week_start=start,
        week_end=end,
    )
