"""
Pydantic models for habits, recurrence rules and completions
"""
import datetime as dt
from enum import Enum
from typing import Annotated, Any, Dict, FrozenSet, Literal, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from kaizen.core.constants import (
    ALL_WEEKDAYS,
    DEFAULT_CATEGORY,
    DEFAULT_WEEK_START_DAY,
    DEFAULT_WEEKLY_TARGET,
)
from kaizen.core.exceptions import InvalidHabitDataError


class RecurrenceType(str, Enum):
    """How often a habit is scheduled"""
    DAILY = "daily"
    SPECIFIC_DAYS = "specific_days"
    WEEKLY_TARGET = "weekly_target"


class DailyRecurrence(BaseModel):
    """Scheduled every day"""
    model_config = ConfigDict(frozen=True)

    type: Literal["daily"] = "daily"

    def to_record(self) -> Tuple[str, Optional[Dict[str, Any]]]:
        return self.type, None


class SpecificDaysRecurrence(BaseModel):
    """
    Scheduled on a fixed set of weekdays (0=Sunday .. 6=Saturday).

    days is None when the stored config was missing or malformed; that is
    treated as every day. An explicit empty set is kept and never schedules.
    """
    model_config = ConfigDict(frozen=True)

    type: Literal["specific_days"] = "specific_days"
    days: Optional[FrozenSet[int]] = None

    @field_validator("days")
    @classmethod
    def validate_days(cls, v: Optional[FrozenSet[int]]) -> Optional[FrozenSet[int]]:
        """Weekday indices must be 0..6"""
        if v is None:
            return v
        for day in v:
            if not 0 <= day <= 6:
                raise ValueError(f"Invalid weekday {day}. Use 0 (Sunday) .. 6 (Saturday)")
        return v

    @property
    def effective_days(self) -> FrozenSet[int]:
        return ALL_WEEKDAYS if self.days is None else self.days

    @property
    def days_per_week(self) -> int:
        return len(self.effective_days)

    def to_record(self) -> Tuple[str, Optional[Dict[str, Any]]]:
        return self.type, {"days": sorted(self.effective_days)}


class WeeklyTargetRecurrence(BaseModel):
    """Completed a target number of times per week, any day"""
    model_config = ConfigDict(frozen=True)

    type: Literal["weekly_target"] = "weekly_target"
    target: int = Field(default=DEFAULT_WEEKLY_TARGET, ge=1, le=7)
    week_start_day: int = Field(default=DEFAULT_WEEK_START_DAY, ge=0, le=6)

    def to_record(self) -> Tuple[str, Optional[Dict[str, Any]]]:
        return self.type, {"target": self.target, "reset_day": self.week_start_day}


Recurrence = Annotated[
    Union[DailyRecurrence, SpecificDaysRecurrence, WeeklyTargetRecurrence],
    Field(discriminator="type"),
]


def _parse_date(value: Any) -> Optional[dt.date]:
    """Accept a date, a datetime or an ISO string (date or timestamp)"""
    if value is None or value == "":
        return None
    if isinstance(value, dt.datetime):
        return value.date()
    if isinstance(value, dt.date):
        return value
    if isinstance(value, str):
        try:
            return dt.date.fromisoformat(value[:10])
        except ValueError:
            raise InvalidHabitDataError(f"Invalid date '{value}'. Use YYYY-MM-DD")
    raise InvalidHabitDataError(f"Invalid date value: {value!r}")


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def parse_recurrence(frequency_type: Optional[str], frequency_config: Any):
    """
    Build a recurrence rule from the stored frequency_type / frequency_config pair.

    Missing or malformed config falls back to defaults instead of raising:
    days -> every day, target -> 3, reset_day -> 0 (Sunday).

    Args:
        frequency_type: 'daily', 'specific_days' or 'weekly_target' (anything else is daily)
        frequency_config: Untyped JSON blob stored alongside the habit

    Returns:
        A DailyRecurrence, SpecificDaysRecurrence or WeeklyTargetRecurrence
    """
    config = frequency_config if isinstance(frequency_config, dict) else {}

    if frequency_type == RecurrenceType.SPECIFIC_DAYS.value:
        raw_days = config.get("days")
        if not isinstance(raw_days, (list, tuple, set, frozenset)):
            return SpecificDaysRecurrence(days=None)
        days = frozenset(d for d in raw_days if _is_int(d) and 0 <= d <= 6)
        return SpecificDaysRecurrence(days=days)

    if frequency_type == RecurrenceType.WEEKLY_TARGET.value:
        target = config.get("target")
        if not (_is_int(target) and 1 <= target <= 7):
            target = DEFAULT_WEEKLY_TARGET
        reset_day = config.get("reset_day")
        if not (_is_int(reset_day) and 0 <= reset_day <= 6):
            reset_day = DEFAULT_WEEK_START_DAY
        return WeeklyTargetRecurrence(target=target, week_start_day=reset_day)

    return DailyRecurrence()


class Habit(BaseModel):
    """A habit as consumed by the scheduling and scoring core"""
    model_config = ConfigDict(frozen=True)

    id: str
    name: str = ""
    category: str = DEFAULT_CATEGORY
    recurrence: Recurrence = Field(default_factory=DailyRecurrence)
    start_date: dt.date
    end_date: Optional[dt.date] = None

    @property
    def recurrence_type(self) -> RecurrenceType:
        return RecurrenceType(self.recurrence.type)

    @classmethod
    def from_record(cls, row: Dict[str, Any]) -> "Habit":
        """
        Build a Habit from a habits table row

        Args:
            row: Row dict with id, name, category, frequency_type, frequency_config,
                 start_date, end_date and created_at columns

        Returns:
            Habit instance

        Raises:
            InvalidHabitDataError: If the row has no id or no usable start date
        """
        if row.get("id") is None:
            raise InvalidHabitDataError("Habit row has no id")

        start_date = _parse_date(row.get("start_date")) or _parse_date(row.get("created_at"))
        if start_date is None:
            raise InvalidHabitDataError(f"Habit {row['id']} has no start_date or created_at")

        return cls(
            id=str(row["id"]),
            name=row.get("name") or "",
            category=row.get("category") or DEFAULT_CATEGORY,
            recurrence=parse_recurrence(row.get("frequency_type"), row.get("frequency_config")),
            start_date=start_date,
            end_date=_parse_date(row.get("end_date")),
        )


class CompletionEvent(BaseModel):
    """A habit marked done by a user for a calendar date"""
    model_config = ConfigDict(frozen=True)

    habit_id: str
    user_id: str = ""
    date: dt.date

    @property
    def key(self) -> Tuple[str, str, dt.date]:
        return self.habit_id, self.user_id, self.date

    @classmethod
    def from_record(cls, row: Dict[str, Any]) -> "CompletionEvent":
        """Build a CompletionEvent from a habit_completions row"""
        if row.get("habit_id") is None:
            raise InvalidHabitDataError("Completion row has no habit_id")
        day = _parse_date(row.get("completed_date") or row.get("date"))
        if day is None:
            raise InvalidHabitDataError(f"Completion for habit {row.get('habit_id')} has no date")
        return cls(
            habit_id=str(row["habit_id"]),
            user_id=str(row.get("user_id") or ""),
            date=day,
        )


# ============================================================================
# REQUEST MODELS
# ============================================================================

class CreateHabitRequest(BaseModel):
    """Request model for adding a new habit"""
    name: str = Field(..., min_length=1, max_length=200, description="Habit name")
    description: Optional[str] = Field(None, max_length=500)
    category: str = Field(DEFAULT_CATEGORY, description="Life area the habit belongs to")
    color: str = Field("#3b82f6", description="Display colour")
    recurrence: Recurrence = Field(default_factory=DailyRecurrence)
    start_date: Optional[dt.date] = Field(None, description="Defaults to today")
    end_date: Optional[dt.date] = Field(None, description="Leave empty for an ongoing habit")


class UpdateHabitRequest(BaseModel):
    """Request model for editing a habit; unset fields are left unchanged"""
    name: Optional[str] = Field(None, min_length=1, max_length=200)
    description: Optional[str] = Field(None, max_length=500)
    category: Optional[str] = None
    color: Optional[str] = None
    recurrence: Optional[Recurrence] = None
    start_date: Optional[dt.date] = None
    end_date: Optional[dt.date] = None


class ToggleCompletionRequest(BaseModel):
    """Request model for marking / unmarking a habit for a date"""
    habit_id: str = Field(..., min_length=1)
    date: Optional[dt.date] = Field(None, description="Defaults to today")


class GenerateHabitsRequest(BaseModel):
    """Request model for AI habit suggestions"""
    goal: str = Field(..., min_length=1, max_length=300, description="What the user wants to improve")
