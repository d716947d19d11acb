"""
Recurrence evaluation - is a habit live, and is it scheduled, on a given date
"""
from datetime import date

from kaizen.models.habit import Habit, SpecificDaysRecurrence
from .calendar import day_of_week


def is_habit_active(habit: Habit, day: date) -> bool:
    """
    Whether day falls inside the habit's start_date..end_date window (inclusive).

    A habit whose end_date precedes its start_date has an empty window.
    """
    if habit.start_date is not None and day < habit.start_date:
        return False
    if habit.end_date is not None and day > habit.end_date:
        return False
    return True


def should_display(habit: Habit, day: date) -> bool:
    """
    Whether the habit's recurrence rule schedules it on day.

    Weekly-target habits are scheduled every day; whether this week's
    target is already met is reported by progress.weekly_progress and left
    to the caller. Ignores the active window, see is_scheduled.
    """
    recurrence = habit.recurrence
    if isinstance(recurrence, SpecificDaysRecurrence):
        # An empty set never schedules
        return day_of_week(day) in recurrence.effective_days
    # Daily and weekly-target habits
    return True


def is_scheduled(habit: Habit, day: date) -> bool:
    """Active on day and scheduled by its recurrence rule"""
    return is_habit_active(habit, day) and should_display(habit, day)
