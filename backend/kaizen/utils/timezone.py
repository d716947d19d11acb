"""
Timezone Utilities - Centralized timezone handling
"""
from datetime import date, datetime
import pytz

from kaizen.core.config import settings


def get_app_tz():
    """
    Get the configured application timezone

    Returns:
        pytz timezone for settings.TIMEZONE
    """
    return pytz.timezone(settings.TIMEZONE)


def get_local_now() -> datetime:
    """
    Get current datetime in the application timezone

    Returns:
        Timezone-aware datetime object
    """
    return datetime.now(get_app_tz())


def get_local_today_date() -> date:
    """
    Get today's date in the application timezone

    Returns:
        date object for today
    """
    return get_local_now().date()
