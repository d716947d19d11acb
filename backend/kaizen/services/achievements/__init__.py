"""
Achievements module - XP, ranks, streaks and celebrations
"""
from . import xp
from . import milestones

from .xp import (
    RANKS,
    calculate_xp,
    rank_from_xp,
    progress_to_next_rank
)

from .milestones import (
    STREAK_MILESTONES,
    current_streak,
    next_milestone,
    next_level_up,
    milestone_achievement,
    level_up_achievement
)

__all__ = [
    'xp',
    'milestones',
    'RANKS',
    'calculate_xp',
    'rank_from_xp',
    'progress_to_next_rank',
    'STREAK_MILESTONES',
    'current_streak',
    'next_milestone',
    'next_level_up',
    'milestone_achievement',
    'level_up_achievement'
]
