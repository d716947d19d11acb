"""
Calendar utilities - week windows with a configurable first day of the week

Weekdays use 0=Sunday .. 6=Saturday throughout, matching how habit
configs are stored. All bounds are inclusive calendar dates.
"""
from datetime import date, datetime, timedelta
from typing import Tuple, Union

from kaizen.core.exceptions import InvalidWeekStartDayError

DateLike = Union[date, datetime]


def _as_date(day: DateLike) -> date:
    # datetime is a subclass of date, so check it first
    if isinstance(day, datetime):
        return day.date()
    return day


def validate_week_start_day(week_start_day: int) -> int:
    """
    Reject week start days outside 0..6

    Raises:
        InvalidWeekStartDayError: If the value is not an int in 0..6
    """
    if isinstance(week_start_day, bool) or not isinstance(week_start_day, int) \
            or not 0 <= week_start_day <= 6:
        raise InvalidWeekStartDayError(
            f"Invalid week start day {week_start_day!r}. Use 0 (Sunday) .. 6 (Saturday)"
        )
    return week_start_day


def day_of_week(day: DateLike) -> int:
    """Weekday index with Sunday as 0"""
    return (_as_date(day).weekday() + 1) % 7


def week_start(day: DateLike, week_start_day: int = 0) -> date:
    """
    First date of the 7-day window containing day

    Args:
        day: Any date (datetimes are truncated to their date)
        week_start_day: Weekday the window begins on, 0=Sunday .. 6=Saturday

    Returns:
        The window's first date

    Raises:
        InvalidWeekStartDayError: If week_start_day is outside 0..6
    """
    validate_week_start_day(week_start_day)
    current = _as_date(day)
    dow = day_of_week(current)
    diff = (dow + 7 if dow < week_start_day else dow) - week_start_day
    return current - timedelta(days=diff)


def week_end(day: DateLike, week_start_day: int = 0) -> date:
    """Last date (inclusive) of the 7-day window containing day"""
    return week_start(day, week_start_day) + timedelta(days=6)


def week_bounds(day: DateLike, week_start_day: int = 0) -> Tuple[date, date]:
    """(start, end) of the 7-day window containing day, both inclusive"""
    start = week_start(day, week_start_day)
    return start, start + timedelta(days=6)
