"""Builders and fixed dates shared by the tests."""

from datetime import date

from kaizen.models.habit import CompletionEvent, DailyRecurrence, Habit

# 2024-01-01 is a Monday
MONDAY = date(2024, 1, 1)
TUESDAY = date(2024, 1, 2)
WEDNESDAY = date(2024, 1, 3)
SATURDAY = date(2024, 1, 6)
SUNDAY = date(2024, 1, 7)


def make_habit(habit_id="h1", category="Health", recurrence=None,
               start_date=date(2023, 1, 1), end_date=None, name=None):
    return Habit(
        id=habit_id,
        name=name or f"Habit {habit_id}",
        category=category,
        recurrence=recurrence or DailyRecurrence(),
        start_date=start_date,
        end_date=end_date,
    )


def make_completion(habit_id, day, user_id="u1"):
    return CompletionEvent(habit_id=habit_id, user_id=user_id, date=day)
