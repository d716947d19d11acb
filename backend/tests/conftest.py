"""Shared fixtures for the Kaizen test suite."""

import pytest

from kaizen.models.habit import SpecificDaysRecurrence, WeeklyTargetRecurrence
from kaizen.services.insights.cache import report_cache
from tests.factories import make_habit


@pytest.fixture(autouse=True)
def empty_report_cache():
    """Each test starts without cached AI output."""
    report_cache.clear()
    yield
    report_cache.clear()


@pytest.fixture
def daily_habit():
    return make_habit("daily")


@pytest.fixture
def mwf_habit():
    return make_habit("mwf", recurrence=SpecificDaysRecurrence(days=frozenset({1, 3, 5})))


@pytest.fixture
def weekly_habit():
    return make_habit("weekly", recurrence=WeeklyTargetRecurrence(target=3, week_start_day=1))
