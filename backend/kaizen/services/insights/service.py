"""
Insights Service - life report and daily insight for a user, cached per day
"""
from datetime import date
from typing import Any, Dict
import logging

from kaizen.core.config import settings
from kaizen.models.report import LifeReport, LifeReportAnalysis
from kaizen.services.habits.service import get_category_scores, load_completions, load_habits
from .cache import report_cache
from .daily_insight import build_daily_insight_context, generate_daily_insight
from .life_report import generate_life_report

logger = logging.getLogger(__name__)

LIFE_REPORT_KIND = "life_report"
DAILY_INSIGHT_KIND = "daily_insight"


def get_life_report(user_id: str, today: date, refresh: bool = False) -> LifeReport:
    """
    Category scores (always fresh) plus today's cached narrative analysis

    Args:
        user_id: The user's ID
        today: Reference date
        refresh: Regenerate the analysis even if one is cached for today

    Returns:
        LifeReport

    Raises:
        DatabaseError: If fetching habits or completions fails
        ExternalServiceError: If the LLM call fails
    """
    scores = get_category_scores(user_id, today, settings.SCORING_PERIOD_DAYS)

    analysis = None if refresh else report_cache.get(user_id, LIFE_REPORT_KIND, today)
    if analysis is None:
        logger.info(f"Generating life report for user {user_id}")
        analysis = generate_life_report(scores)
        report_cache.set(user_id, LIFE_REPORT_KIND, today, analysis)

    return LifeReport(scores=scores, analysis=LifeReportAnalysis.model_validate(analysis))


def get_daily_insight(user_id: str, today: date, refresh: bool = False) -> Dict[str, Any]:
    """
    Today's insight for a user, generated at most once a day unless refreshed

    Returns:
        Dict with status, date and insight text

    Raises:
        DatabaseError: If fetching habits or completions fails
        ExternalServiceError: If the LLM call fails
    """
    insight = None if refresh else report_cache.get(user_id, DAILY_INSIGHT_KIND, today)
    if insight is None:
        habits = load_habits(user_id)
        completions = load_completions(user_id, end_date=today)
        context = build_daily_insight_context(habits, completions, today)
        logger.info(f"Generating daily insight for user {user_id}")
        insight = generate_daily_insight(context)
        report_cache.set(user_id, DAILY_INSIGHT_KIND, today, insight)

    return {
        "status": "success",
        "date": str(today),
        "insight": insight
    }
