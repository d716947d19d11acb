"""
XP and ranks - every completion is worth a fixed amount of XP
"""
from typing import List

from kaizen.core.constants import XP_PER_COMPLETION
from kaizen.models.report import Rank, RankProgress

RANKS: List[Rank] = [
    Rank(level=1, name="Novice", min_xp=0, max_xp=99, color="#9CA3AF"),
    Rank(level=2, name="Apprentice", min_xp=100, max_xp=299, color="#60A5FA"),
    Rank(level=3, name="Warrior", min_xp=300, max_xp=599, color="#34D399"),
    Rank(level=4, name="Samurai", min_xp=600, max_xp=999, color="#A78BFA"),
    Rank(level=5, name="Ronin", min_xp=1000, max_xp=1499, color="#F59E0B"),
    Rank(level=6, name="Daimyo", min_xp=1500, max_xp=2099, color="#F97316"),
    Rank(level=7, name="Shogun", min_xp=2100, max_xp=2799, color="#EF4444"),
    Rank(level=8, name="Master", min_xp=2800, max_xp=3599, color="#EC4899"),
    Rank(level=9, name="Sensei", min_xp=3600, max_xp=4499, color="#DC2626"),
    Rank(level=10, name="Legend", min_xp=4500, max_xp=None, color="#FBBF24"),
]


def calculate_xp(total_completions: int) -> int:
    """XP earned for a number of completions"""
    return total_completions * XP_PER_COMPLETION


def rank_from_xp(xp: int) -> Rank:
    """Highest rank whose threshold xp has reached (Novice below zero)"""
    for rank in reversed(RANKS):
        if xp >= rank.min_xp:
            return rank
    return RANKS[0]


def progress_to_next_rank(xp: int) -> RankProgress:
    """
    How far xp is between its rank and the next one

    Args:
        xp: Total XP

    Returns:
        RankProgress; at the top rank next_rank is None and progress is 100
    """
    current_rank = rank_from_xp(xp)
    next_index = RANKS.index(current_rank) + 1

    if next_index >= len(RANKS):
        return RankProgress(
            current_rank=current_rank,
            next_rank=None,
            progress_percentage=100.0,
            xp_needed=0,
            current_xp=xp - current_rank.min_xp,
        )

    next_rank = RANKS[next_index]
    xp_in_rank = xp - current_rank.min_xp
    xp_for_next = next_rank.min_xp - current_rank.min_xp

    return RankProgress(
        current_rank=current_rank,
        next_rank=next_rank,
        progress_percentage=min(xp_in_rank / xp_for_next * 100, 100.0),
        xp_needed=next_rank.min_xp - xp,
        current_xp=xp_in_rank,
    )
