"""Tests for week window arithmetic."""

from datetime import date, datetime, timedelta

import pytest

from kaizen.core.exceptions import InvalidWeekStartDayError
from kaizen.services.habits.calendar import (
    day_of_week,
    week_bounds,
    week_end,
    week_start,
)
from tests.factories import MONDAY, SATURDAY, SUNDAY, WEDNESDAY


class TestDayOfWeek:
    def test_sunday_is_zero(self):
        assert day_of_week(SUNDAY) == 0

    def test_monday_to_saturday(self):
        assert [day_of_week(MONDAY + timedelta(days=i)) for i in range(6)] == [1, 2, 3, 4, 5, 6]

    def test_accepts_datetime(self):
        assert day_of_week(datetime(2024, 1, 3, 23, 59)) == 3


class TestWeekStart:
    def test_sunday_start(self):
        assert week_start(WEDNESDAY, 0) == date(2023, 12, 31)

    def test_monday_start(self):
        assert week_start(WEDNESDAY, 1) == MONDAY

    def test_start_day_is_its_own_start(self):
        assert week_start(MONDAY, 1) == MONDAY

    def test_wraps_when_weekday_before_start(self):
        # Week starts Monday; Sunday belongs to the week that began six days earlier
        assert week_start(SUNDAY, 1) == MONDAY

    def test_saturday_start(self):
        assert week_start(date(2024, 1, 5), 6) == date(2023, 12, 30)
        assert week_start(SATURDAY, 6) == SATURDAY

    def test_datetime_is_truncated(self):
        result = week_start(datetime(2024, 1, 3, 18, 30), 1)
        assert result == MONDAY
        assert type(result) is date

    def test_default_is_sunday(self):
        assert week_start(WEDNESDAY) == date(2023, 12, 31)


class TestWeekEnd:
    def test_six_days_after_start(self):
        assert week_end(WEDNESDAY, 1) == SUNDAY

    def test_bounds(self):
        assert week_bounds(WEDNESDAY, 1) == (MONDAY, SUNDAY)


class TestWindowContainsDate:
    @pytest.mark.parametrize("week_start_day", range(7))
    def test_start_le_day_le_end(self, week_start_day):
        for offset in range(14):
            day = MONDAY + timedelta(days=offset)
            start, end = week_bounds(day, week_start_day)
            assert start <= day <= end
            assert (end - start).days == 6
            assert day_of_week(start) == week_start_day


class TestPrecondition:
    @pytest.mark.parametrize("bad", [-1, 7, 10])
    def test_out_of_range_rejected(self, bad):
        with pytest.raises(InvalidWeekStartDayError):
            week_start(WEDNESDAY, bad)

    def test_non_int_rejected(self):
        with pytest.raises(InvalidWeekStartDayError):
            week_start(WEDNESDAY, "1")

    def test_bool_rejected(self):
        with pytest.raises(InvalidWeekStartDayError):
            week_end(WEDNESDAY, True)

    def test_is_a_value_error(self):
        with pytest.raises(ValueError):
            week_start(WEDNESDAY, 9)
