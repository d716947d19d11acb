"""
Pydantic models for the application
"""
from kaizen.models.habit import (
    RecurrenceType,
    DailyRecurrence,
    SpecificDaysRecurrence,
    WeeklyTargetRecurrence,
    Recurrence,
    parse_recurrence,
    Habit,
    CompletionEvent,
    CreateHabitRequest,
    UpdateHabitRequest,
    ToggleCompletionRequest,
    GenerateHabitsRequest
)
from kaizen.models.report import (
    CategoryScore,
    WeeklyProgress,
    Rank,
    RankProgress,
    Milestone,
    Achievement,
    AchievementsSummary,
    LifeReportAnalysis,
    LifeReport,
    DailyInsightContext,
    GeneratedHabit
)

__all__ = [
    "RecurrenceType",
    "DailyRecurrence",
    "SpecificDaysRecurrence",
    "WeeklyTargetRecurrence",
    "Recurrence",
    "parse_recurrence",
    "Habit",
    "CompletionEvent",
    "CreateHabitRequest",
    "UpdateHabitRequest",
    "ToggleCompletionRequest",
    "GenerateHabitsRequest",
    "CategoryScore",
    "WeeklyProgress",
    "Rank",
    "RankProgress",
    "Milestone",
    "Achievement",
    "AchievementsSummary",
    "LifeReportAnalysis",
    "LifeReport",
    "DailyInsightContext",
    "GeneratedHabit"
]
