"""
Streaks and one-time celebrations

Which milestones and levels were already celebrated is passed in by the
caller; nothing here remembers state between calls.
"""
from datetime import date, timedelta
from typing import AbstractSet, Iterable, List, Optional

from kaizen.core.constants import STREAK_LOOKBACK_DAYS, STREAK_MILESTONE_COLOR
from kaizen.models.habit import CompletionEvent
from kaizen.models.report import Achievement, Milestone, Rank
from .xp import rank_from_xp

STREAK_MILESTONES: List[Milestone] = [
    Milestone(days=7, name="Week Warrior"),
    Milestone(days=30, name="Monthly Master"),
    Milestone(days=50, name="Consistency Champion"),
    Milestone(days=100, name="Centurion"),
    Milestone(days=365, name="Year of Kaizen"),
]


def current_streak(
    completions: Iterable[CompletionEvent],
    today: date,
    max_days: int = STREAK_LOOKBACK_DAYS
) -> int:
    """
    Consecutive days, counting back from today, with at least one completion.

    Nothing done yet today does not break the streak.
    """
    completed_dates = {event.date for event in completions}

    streak = 0
    for offset in range(max_days):
        if (today - timedelta(days=offset)) in completed_dates:
            streak += 1
        elif offset > 0:
            break
    return streak


def next_milestone(current: int, already_celebrated: AbstractSet[int]) -> Optional[Milestone]:
    """
    Smallest streak milestone reached but not yet celebrated

    Args:
        current: Current streak length in days
        already_celebrated: Milestone lengths (days) shown before

    Returns:
        The milestone to celebrate, or None
    """
    for milestone in STREAK_MILESTONES:
        if current >= milestone.days and milestone.days not in already_celebrated:
            return milestone
    return None


def next_level_up(xp: int, last_celebrated_level: int) -> Optional[Rank]:
    """Rank to celebrate if xp moved past last_celebrated_level (level 1 is never celebrated)"""
    rank = rank_from_xp(xp)
    if rank.level > last_celebrated_level and rank.level > 1:
        return rank
    return None


def milestone_achievement(milestone: Milestone) -> Achievement:
    return Achievement(
        type="streak-milestone",
        title=milestone.name,
        description=f"{milestone.days} day streak! Your consistency is building unstoppable momentum.",
        color=STREAK_MILESTONE_COLOR,
        icon="flame",
    )


def level_up_achievement(rank: Rank) -> Achievement:
    return Achievement(
        type="level-up",
        title=f"{rank.name} Achieved!",
        description=(
            f"You've reached Level {rank.level}. "
            "Your dedication to continuous improvement is remarkable!"
        ),
        color=rank.color,
        icon="trophy",
    )
