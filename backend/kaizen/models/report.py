"""
Pydantic models for progress, scores, achievements and AI output
"""
import datetime as dt
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field
from pydantic.alias_generators import to_camel


class CategoryScore(BaseModel):
    """
    Completion rate for one life area over the scoring period.

    Serialised with camelCase keys; this is the exact payload sent to the
    life report generator. A rate of 0 only means 0% when has_habits is true.
    """
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    category: str
    completion_rate: int = Field(..., ge=0, le=100)
    total_habits: int = 0
    completed_count: int = 0
    expected_count: int = 0
    has_habits: bool = False


class WeeklyProgress(BaseModel):
    """Completions of a weekly-target habit inside its current week"""
    habit_id: str
    completed: int
    target: int
    week_start: dt.date
    week_end: dt.date

    @computed_field
    @property
    def label(self) -> str:
        return f"{self.completed}/{self.target}"

    @computed_field
    @property
    def is_target_met(self) -> bool:
        return self.completed >= self.target


class Rank(BaseModel):
    """An XP rank"""
    model_config = ConfigDict(frozen=True)

    level: int
    name: str
    min_xp: int
    max_xp: Optional[int] = None  # None for the top rank
    color: str


class RankProgress(BaseModel):
    """Where a user sits between two ranks"""
    current_rank: Rank
    next_rank: Optional[Rank] = None
    progress_percentage: float
    xp_needed: int
    current_xp: int


class Milestone(BaseModel):
    """A streak length worth celebrating"""
    model_config = ConfigDict(frozen=True)

    days: int
    name: str


class Achievement(BaseModel):
    """A one-time celebration payload"""
    type: str = Field(..., description="'level-up' or 'streak-milestone'")
    title: str
    description: str
    color: str
    icon: str


class AchievementsSummary(BaseModel):
    """XP, rank, streak and any achievements not yet celebrated"""
    total_completions: int
    total_xp: int
    rank_progress: RankProgress
    current_streak: int
    new_achievements: List[Achievement] = Field(default_factory=list)


class LifeReportAnalysis(BaseModel):
    """Narrative analysis of the category scores"""
    summary: str
    strongest_area: Optional[str] = None
    focus_area: Optional[str] = None
    recommendations: List[str] = Field(default_factory=list)


class LifeReport(BaseModel):
    """Scores plus their narrative analysis"""
    scores: List[CategoryScore]
    analysis: LifeReportAnalysis


class WeeklyTargetStatus(BaseModel):
    habit_name: str
    completed_this_week: int
    target: int


class CategoryBreakdown(BaseModel):
    completed: int = 0
    total: int = 0


class HabitSummary(BaseModel):
    name: str
    category: str
    frequency_type: str


class DailyInsightContext(BaseModel):
    """Everything the daily insight prompt is allowed to know"""
    habits: List[HabitSummary]
    completed_today: List[str]
    pending_today: List[str]
    current_streak: int
    weekly_progress: List[WeeklyTargetStatus]
    monthly_completion_rate: float
    total_xp: int
    rank_name: str
    rank_level: int
    category_breakdown: Dict[str, CategoryBreakdown]


class GeneratedHabit(BaseModel):
    """A suggested habit"""
    name: str
    description: str
    color: str
