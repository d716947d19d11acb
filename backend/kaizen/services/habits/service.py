"""
Habits Service - Business logic for habit management
Handles habit CRUD, completion toggles, today's schedule and category scores
"""
from datetime import date, timedelta
from typing import AbstractSet, Any, Dict, List, Optional
import logging

from kaizen.core.constants import DEFAULT_SCORING_PERIOD_DAYS
from kaizen.core.exceptions import HabitNotFoundError, InvalidHabitDataError
from kaizen.models.habit import (
    CompletionEvent,
    CreateHabitRequest,
    Habit,
    UpdateHabitRequest,
    WeeklyTargetRecurrence,
)
from kaizen.models.report import AchievementsSummary, CategoryScore
from kaizen.services.achievements import (
    calculate_xp,
    current_streak,
    level_up_achievement,
    milestone_achievement,
    next_level_up,
    next_milestone,
    progress_to_next_rank,
)
from . import repository
from .progress import dedupe_completions, weekly_progress
from .recurrence import is_scheduled
from .scoring import compute_category_scores

logger = logging.getLogger(__name__)

# Only description and end_date may be cleared with an explicit null
NON_NULLABLE_FIELDS = ("name", "category", "color", "recurrence", "start_date")


def load_habits(user_id: str) -> List[Habit]:
    """Fetch and parse a user's habits, skipping rows that cannot be parsed"""
    habits = []
    for row in repository.get_habits(user_id):
        try:
            habits.append(Habit.from_record(row))
        except InvalidHabitDataError as e:
            logger.warning(f"Skipping habit row {row.get('id')}: {e}")
    return habits


def load_completions(
    user_id: str,
    start_date: Optional[date] = None,
    end_date: Optional[date] = None
) -> List[CompletionEvent]:
    """Fetch and parse a user's completions within optional inclusive bounds, skipping bad rows"""
    completions = []
    for row in repository.get_completions(user_id, start_date=start_date, end_date=end_date):
        try:
            completions.append(CompletionEvent.from_record(row))
        except InvalidHabitDataError as e:
            logger.warning(f"Skipping completion row {row.get('id')}: {e}")
    return completions


def get_owned_habit(user_id: str, habit_id: str) -> Dict[str, Any]:
    """
    Fetch a habit row and check it belongs to user_id

    Raises:
        HabitNotFoundError: If the habit does not exist or belongs to someone else
    """
    row = repository.get_habit_by_id(habit_id)
    if not row or str(row.get("user_id")) != str(user_id):
        raise HabitNotFoundError(f"Habit {habit_id} not found")
    return row


def _check_window(start_date: Optional[date], end_date: Optional[date]) -> None:
    if start_date and end_date and end_date < start_date:
        raise InvalidHabitDataError(f"end_date {end_date} is before start_date {start_date}")


def add_habit(user_id: str, request: CreateHabitRequest, today: date) -> Dict[str, Any]:
    """
    Add a new habit

    Args:
        user_id: The owner's ID
        request: Validated habit fields
        today: Used as start_date when the request has none

    Returns:
        Dict with status, message, and created habit data

    Raises:
        InvalidHabitDataError: If end_date precedes start_date
        DatabaseError: If database operation fails
    """
    start_date = request.start_date or today
    _check_window(start_date, request.end_date)

    frequency_type, frequency_config = request.recurrence.to_record()
    habit_data = repository.create_habit(user_id, {
        "name": request.name,
        "description": request.description,
        "category": request.category,
        "color": request.color,
        "frequency_type": frequency_type,
        "frequency_config": frequency_config,
        "start_date": str(start_date),
        "end_date": str(request.end_date) if request.end_date else None
    })

    logger.info(f"Habit '{request.name}' created for user {user_id}")
    return {
        "status": "success",
        "message": f"Habit '{request.name}' added successfully",
        "data": habit_data
    }


def edit_habit(user_id: str, habit_id: str, request: UpdateHabitRequest) -> Dict[str, Any]:
    """
    Update the fields set on the request

    Raises:
        HabitNotFoundError: If the habit does not exist for this user
        InvalidHabitDataError: If nothing is being changed, a required field is set
            to null, or the window is inverted
        DatabaseError: If database operation fails
    """
    current = get_owned_habit(user_id, habit_id)
    changes = request.model_dump(exclude_unset=True)

    cleared = [field for field in NON_NULLABLE_FIELDS if field in changes and changes[field] is None]
    if cleared:
        raise InvalidHabitDataError(f"Cannot clear required field(s): {', '.join(cleared)}")

    update_data: Dict[str, Any] = {}
    for field in ("name", "description", "category", "color"):
        if field in changes:
            update_data[field] = changes[field]
    if "recurrence" in changes:
        update_data["frequency_type"], update_data["frequency_config"] = request.recurrence.to_record()
    for field in ("start_date", "end_date"):
        if field in changes:
            value = getattr(request, field)
            update_data[field] = str(value) if value else None
    if not update_data:
        raise InvalidHabitDataError("Must provide at least one field to update")

    current_habit = Habit.from_record(current)
    start_date = request.start_date if "start_date" in changes and request.start_date else current_habit.start_date
    end_date = request.end_date if "end_date" in changes else current_habit.end_date
    _check_window(start_date, end_date)

    habit_data = repository.update_habit(habit_id, update_data)
    return {
        "status": "success",
        "message": f"Habit '{habit_data.get('name', current.get('name'))}' updated",
        "data": habit_data
    }


def remove_habit(user_id: str, habit_id: str) -> Dict[str, Any]:
    """
    Delete a habit

    Raises:
        HabitNotFoundError: If the habit does not exist for this user
        DatabaseError: If database operation fails
    """
    current = get_owned_habit(user_id, habit_id)
    repository.delete_habit(habit_id)
    return {
        "status": "success",
        "message": f"Habit '{current.get('name')}' removed successfully",
        "habit_id": habit_id
    }


def toggle_completion(user_id: str, habit_id: str, target_date: date) -> Dict[str, Any]:
    """
    Mark a habit done for a date, or unmark it if it already was

    Args:
        user_id: The acting user
        habit_id: The habit ID
        target_date: The date being marked

    Returns:
        Dict with status, habit_id, date and the new completed state

    Raises:
        HabitNotFoundError: If the habit does not exist for this user
        DatabaseError: If database operation fails
    """
    get_owned_habit(user_id, habit_id)

    existing = repository.get_completion(habit_id, user_id, target_date)
    if existing:
        repository.delete_completion(existing["id"])
        completed = False
    else:
        repository.create_completion(habit_id, user_id, target_date)
        completed = True

    return {
        "status": "success",
        "habit_id": habit_id,
        "date": str(target_date),
        "completed": completed
    }


def get_habits_for_date(user_id: str, target_date: date) -> Dict[str, Any]:
    """
    Get the habits scheduled on a date with their completion status.

    Weekly-target habits carry their week's progress; met targets are
    flagged, not hidden.

    Returns:
        Dict with status, date, and list of habits with completion info
    """
    habits = [h for h in load_habits(user_id) if is_scheduled(h, target_date)]
    if not habits:
        return {"status": "success", "date": str(target_date), "habits": []}

    # Weekly windows reach at most 6 days either side of the date
    completions = load_completions(
        user_id,
        start_date=target_date - timedelta(days=6),
        end_date=target_date + timedelta(days=6)
    )
    done_today = {c.habit_id for c in completions if c.date == target_date}

    result = []
    for habit in habits:
        entry = {
            **habit.model_dump(mode="json"),
            "frequency_type": habit.recurrence_type.value,
            "completed": habit.id in done_today,
            "weekly_progress": None
        }
        if isinstance(habit.recurrence, WeeklyTargetRecurrence):
            entry["weekly_progress"] = weekly_progress(habit, completions, target_date).model_dump(mode="json")
        result.append(entry)

    return {
        "status": "success",
        "date": str(target_date),
        "habits": result
    }


def get_daily_summary(user_id: str, target_date: date) -> Dict[str, Any]:
    """
    Summary of the date's scheduled habits including totals and completion rate

    Returns:
        Dict with status, date, total_habits, completed, missed, completion_rate,
        completed_habits list, and missed_habits list
    """
    habits = get_habits_for_date(user_id, target_date)["habits"]
    total_habits = len(habits)

    completed_habits = [h["name"] for h in habits if h["completed"]]
    missed_habits = [h["name"] for h in habits if not h["completed"]]
    completion_rate = (len(completed_habits) / total_habits * 100) if total_habits > 0 else 0.0

    return {
        "status": "success",
        "date": str(target_date),
        "total_habits": total_habits,
        "completed": len(completed_habits),
        "missed": len(missed_habits),
        "completion_rate": round(completion_rate, 2),
        "completed_habits": completed_habits,
        "missed_habits": missed_habits
    }


def get_category_scores(
    user_id: str,
    today: date,
    period_days: int = DEFAULT_SCORING_PERIOD_DAYS
) -> List[CategoryScore]:
    """
    Score each life area for a user over the trailing period

    Raises:
        InvalidHabitDataError: If period_days is not positive
        DatabaseError: If database operation fails
    """
    if period_days < 1:
        raise InvalidHabitDataError(f"period_days must be at least 1, got {period_days}")

    habits = load_habits(user_id)
    completions = load_completions(
        user_id,
        start_date=today - timedelta(days=period_days),
        end_date=today
    )
    return compute_category_scores(habits, completions, today, period_days)


def get_achievements(
    user_id: str,
    today: date,
    celebrated_milestones: AbstractSet[int] = frozenset(),
    last_celebrated_level: int = 0
) -> AchievementsSummary:
    """
    XP, rank, streak and the celebrations the client has not shown yet

    Args:
        user_id: The user's ID
        today: Reference date for the streak
        celebrated_milestones: Streak lengths (days) already celebrated
        last_celebrated_level: Highest rank level already celebrated

    Returns:
        AchievementsSummary; new_achievements holds at most one level-up
        and one streak milestone
    """
    completions = dedupe_completions(load_completions(user_id))
    total_xp = calculate_xp(len(completions))

    new_achievements = []
    rank = next_level_up(total_xp, last_celebrated_level)
    if rank:
        new_achievements.append(level_up_achievement(rank))

    streak = current_streak(completions, today)
    milestone = next_milestone(streak, celebrated_milestones)
    if milestone:
        new_achievements.append(milestone_achievement(milestone))

    return AchievementsSummary(
        total_completions=len(completions),
        total_xp=total_xp,
        rank_progress=progress_to_next_rank(total_xp),
        current_streak=streak,
        new_achievements=new_achievements
    )
