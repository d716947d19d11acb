"""
Habits module - Scheduling, progress, scoring and habit management
"""
from . import calendar
from . import recurrence
from . import progress
from . import scoring
from . import repository
from . import service

# Export commonly used functions for convenience
from .calendar import (
    day_of_week,
    week_start,
    week_end,
    week_bounds
)

from .recurrence import (
    is_habit_active,
    should_display,
    is_scheduled
)

from .progress import (
    dedupe_completions,
    weekly_completion_count,
    weekly_progress
)

from .scoring import (
    compute_category_scores,
    expected_occurrences
)

from .service import (
    add_habit,
    edit_habit,
    remove_habit,
    toggle_completion,
    get_habits_for_date,
    get_daily_summary,
    get_category_scores,
    get_achievements
)

__all__ = [
    # Modules
    'calendar',
    'recurrence',
    'progress',
    'scoring',
    'repository',
    'service',

    # Calendar
    'day_of_week',
    'week_start',
    'week_end',
    'week_bounds',

    # Recurrence
    'is_habit_active',
    'should_display',
    'is_scheduled',

    # Progress and scoring
    'dedupe_completions',
    'weekly_completion_count',
    'weekly_progress',
    'compute_category_scores',
    'expected_occurrences',

    # Service functions
    'add_habit',
    'edit_habit',
    'remove_habit',
    'toggle_completion',
    'get_habits_for_date',
    'get_daily_summary',
    'get_category_scores',
    'get_achievements'
]
