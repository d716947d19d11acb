"""
Daily Insight - builds today's context and asks the LLM for a short insight
"""
import calendar
import logging
from datetime import date
from typing import Dict, List, Sequence

from kaizen.core.constants import LLM_MODEL_DEFAULT, LLM_MAX_TOKENS, LLM_TEMPERATURE
from kaizen.core.dependencies import get_openai_client
from kaizen.core.exceptions import ExternalServiceError
from kaizen.models.habit import CompletionEvent, Habit, WeeklyTargetRecurrence
from kaizen.models.report import (
    CategoryBreakdown,
    DailyInsightContext,
    HabitSummary,
    WeeklyTargetStatus,
)
from kaizen.services.achievements import calculate_xp, current_streak, rank_from_xp
from kaizen.services.habits.progress import dedupe_completions, weekly_progress
from kaizen.services.habits.recurrence import is_scheduled
from kaizen.utils.prompts import DAILY_INSIGHT_SYSTEM_PROMPT, format_daily_insight_prompt

logger = logging.getLogger(__name__)


def monthly_completion_rate(habits: Sequence[Habit], completions: Sequence[CompletionEvent], today: date) -> float:
    """
    Share of the month's habit-days completed, as a percentage with one decimal.

    Uses every habit for every day of today's month as the denominator.
    """
    days_in_month = calendar.monthrange(today.year, today.month)[1]
    month_start = today.replace(day=1)
    max_possible = len(habits) * days_in_month
    if max_possible == 0:
        return 0.0
    month_completions = sum(1 for event in completions if event.date >= month_start)
    return round(month_completions / max_possible * 100, 1)


def build_daily_insight_context(
    habits: Sequence[Habit],
    completions: Sequence[CompletionEvent],
    today: date
) -> DailyInsightContext:
    """
    Summarise a user's habits and completions for today's insight prompt

    Args:
        habits: All of the user's habits
        completions: All of the user's completions
        today: Reference date

    Returns:
        DailyInsightContext
    """
    completions = dedupe_completions(completions)
    completed_ids = {event.habit_id for event in completions if event.date == today}
    todays_habits = [habit for habit in habits if is_scheduled(habit, today)]

    completed_today: List[str] = []
    pending_today: List[str] = []
    category_breakdown: Dict[str, CategoryBreakdown] = {}
    for habit in todays_habits:
        breakdown = category_breakdown.setdefault(habit.category, CategoryBreakdown())
        breakdown.total += 1
        if habit.id in completed_ids:
            completed_today.append(habit.name)
            breakdown.completed += 1
        else:
            pending_today.append(habit.name)

    weekly = []
    for habit in todays_habits:
        if isinstance(habit.recurrence, WeeklyTargetRecurrence):
            progress = weekly_progress(habit, completions, today)
            weekly.append(WeeklyTargetStatus(
                habit_name=habit.name,
                completed_this_week=progress.completed,
                target=progress.target,
            ))

    total_xp = calculate_xp(len(completions))
    rank = rank_from_xp(total_xp)

    return DailyInsightContext(
        habits=[
            HabitSummary(name=h.name, category=h.category, frequency_type=h.recurrence_type.value)
            for h in habits
        ],
        completed_today=completed_today,
        pending_today=pending_today,
        current_streak=current_streak(completions, today),
        weekly_progress=weekly,
        monthly_completion_rate=monthly_completion_rate(habits, completions, today),
        total_xp=total_xp,
        rank_name=rank.name,
        rank_level=rank.level,
        category_breakdown=category_breakdown,
    )


def generate_daily_insight(context: DailyInsightContext) -> str:
    """
    Ask the LLM for today's insight

    Raises:
        ExternalServiceError: If the LLM call fails
    """
    try:
        response = get_openai_client().chat.completions.create(
            model=LLM_MODEL_DEFAULT,
            messages=[
                {"role": "system", "content": DAILY_INSIGHT_SYSTEM_PROMPT},
                {"role": "user", "content": format_daily_insight_prompt(context.model_dump())}
            ],
            temperature=LLM_TEMPERATURE,
            max_tokens=LLM_MAX_TOKENS
        )
        return (response.choices[0].message.content or "").strip()
    except Exception as e:
        logger.error(f"Daily insight generation error: {e}")
        raise ExternalServiceError(f"Failed to generate daily insight: {e}")
