"""
System prompts for the Kaizen AI features
"""
import json
from typing import Any, Dict, List

# Life Report
LIFE_REPORT_SYSTEM_PROMPT = (
    "You are a warm, encouraging Kaizen life coach. "
    "You analyse habit scores across life areas and respond only with valid JSON."
)


def format_life_report_prompt(scores: List[Dict[str, Any]]) -> str:
    """
    Format prompt for the life report analysis.

    Args:
        scores: Category scores as camelCase dicts (category, completionRate,
                totalHabits, completedCount, expectedCount, hasHabits)

    Returns:
        Formatted prompt string
    """
    return f"""Here are my habit completion scores for each area of my life over the last 30 days:
{json.dumps(scores, indent=2)}

Areas with hasHabits = false have no habits at all; treat them as untracked, not as 0%.

Return ONLY a JSON object with:
- summary: 2-3 encouraging sentences about my overall balance
- strongest_area: the category I am doing best in, or null if nothing is tracked
- focus_area: the one category that needs attention most
- recommendations: a list of 2-3 short, specific, actionable suggestions

Follow the Kaizen philosophy: small, consistent improvements."""


# Daily Insight
DAILY_INSIGHT_SYSTEM_PROMPT = (
    "You are a Kaizen habit coach. You write one short, personal, motivating insight "
    "for today based on the user's habit data. Plain text, no markdown, at most 3 sentences."
)


def format_daily_insight_prompt(context: Dict[str, Any]) -> str:
    """
    Format prompt for today's insight.

    Args:
        context: DailyInsightContext as a dict

    Returns:
        Formatted prompt string
    """
    return f"""Today's habit data:
{json.dumps(context, indent=2, default=str)}

Write today's insight. Mention something specific from the data (a streak, a weekly target,
a pending habit or a strong category)."""


# Habit Generation
HABIT_GENERATION_SYSTEM_PROMPT = "You are a habit coaching expert. You respond only with valid JSON."


def format_habit_generation_prompt(goal: str) -> str:
    """
    Format prompt for generating habits from a goal.

    Args:
        goal: What the user wants to improve

    Returns:
        Formatted prompt string
    """
    return f"""You are a habit coach helping someone improve their life through the philosophy of Kaizen (continuous improvement).

The user wants to improve: "{goal}"

Generate 3-5 specific, actionable daily habits that will help them achieve this goal. Each habit should be:
- Specific and measurable
- Achievable in a single day
- Directly related to their goal
- Focused on consistent small improvements

Return ONLY a JSON object of this exact structure:
{{"habits": [{{"name": "Brief habit name (max 50 chars)", "description": "Clear description of what to do (max 100 chars)"}}]}}"""
