"""
Habits Repository - Centralized database access layer
All Supabase queries for habits and habit completions
"""
from datetime import date
from typing import List, Dict, Any, Optional
import logging

from kaizen.core.dependencies import get_supabase_client
from kaizen.core.exceptions import DatabaseError

logger = logging.getLogger(__name__)


# ============================================================================
# HABITS TABLE
# ============================================================================

def get_habits(user_id: str) -> List[Dict[str, Any]]:
    """
    Get all habits owned by a user, in display order

    Args:
        user_id: The owner's ID

    Returns:
        List of habit dictionaries

    Raises:
        DatabaseError: If query fails
    """
    try:
        result = get_supabase_client().table("habits")\
            .select("*")\
            .eq("user_id", user_id)\
            .order("display_order")\
            .order("created_at", desc=True)\
            .execute()
        return result.data
    except Exception as e:
        logger.error(f"Database error fetching habits for user {user_id}: {e}")
        raise DatabaseError(f"Failed to fetch habits: {e}")


def get_habit_by_id(habit_id: str) -> Optional[Dict[str, Any]]:
    """
    Get a single habit by ID

    Args:
        habit_id: The habit ID

    Returns:
        Habit dictionary or None if not found

    Raises:
        DatabaseError: If query fails
    """
    try:
        result = get_supabase_client().table("habits").select("*").eq("id", habit_id).execute()
        return result.data[0] if result.data else None
    except Exception as e:
        logger.error(f"Database error fetching habit {habit_id}: {e}")
        raise DatabaseError(f"Failed to fetch habit: {e}")


def create_habit(user_id: str, habit_data: Dict[str, Any]) -> Dict[str, Any]:
    """
    Create a new habit

    Args:
        user_id: The owner's ID
        habit_data: Column values (name, category, frequency_type, frequency_config, ...)

    Returns:
        Created habit data

    Raises:
        DatabaseError: If insert fails
    """
    try:
        row = {**habit_data, "user_id": user_id}
        result = get_supabase_client().table("habits").insert(row).execute()
        return result.data[0] if result.data else {}
    except Exception as e:
        logger.error(f"Database error creating habit: {e}")
        raise DatabaseError(f"Failed to create habit: {e}")


def update_habit(habit_id: str, update_data: Dict[str, Any]) -> Dict[str, Any]:
    """
    Update a habit

    Args:
        habit_id: The habit ID
        update_data: Dictionary of fields to update

    Returns:
        Updated habit data

    Raises:
        DatabaseError: If update fails
    """
    try:
        result = get_supabase_client().table("habits").update(update_data).eq("id", habit_id).execute()
        return result.data[0] if result.data else {}
    except Exception as e:
        logger.error(f"Database error updating habit {habit_id}: {e}")
        raise DatabaseError(f"Failed to update habit: {e}")


def delete_habit(habit_id: str) -> Dict[str, Any]:
    """
    Delete a habit

    Args:
        habit_id: The habit ID

    Returns:
        Deleted habit data

    Raises:
        DatabaseError: If delete fails
    """
    try:
        result = get_supabase_client().table("habits").delete().eq("id", habit_id).execute()
        return result.data[0] if result.data else {}
    except Exception as e:
        logger.error(f"Database error deleting habit {habit_id}: {e}")
        raise DatabaseError(f"Failed to delete habit: {e}")


# ============================================================================
# HABIT_COMPLETIONS TABLE
# ============================================================================

def get_completions(
    user_id: str,
    start_date: Optional[date] = None,
    end_date: Optional[date] = None,
    habit_id: Optional[str] = None
) -> List[Dict[str, Any]]:
    """
    Get a user's completions, newest first, optionally bounded by date (inclusive)

    Args:
        user_id: The user's ID
        start_date: Earliest completed_date to include
        end_date: Latest completed_date to include
        habit_id: Restrict to one habit

    Returns:
        List of completion dictionaries

    Raises:
        DatabaseError: If query fails
    """
    try:
        query = get_supabase_client().table("habit_completions").select("*").eq("user_id", user_id)
        if habit_id:
            query = query.eq("habit_id", habit_id)
        if start_date:
            query = query.gte("completed_date", str(start_date))
        if end_date:
            query = query.lte("completed_date", str(end_date))
        result = query.order("completed_date", desc=True).execute()
        return result.data
    except Exception as e:
        logger.error(f"Database error fetching completions for user {user_id}: {e}")
        raise DatabaseError(f"Failed to fetch completions: {e}")


def get_completion(habit_id: str, user_id: str, target_date: date) -> Optional[Dict[str, Any]]:
    """
    Get the completion for a habit, user and date

    Args:
        habit_id: The habit ID
        user_id: The user's ID
        target_date: The completed date

    Returns:
        Completion dictionary or None if not found

    Raises:
        DatabaseError: If query fails
    """
    try:
        result = get_supabase_client().table("habit_completions")\
            .select("*")\
            .eq("habit_id", habit_id)\
            .eq("user_id", user_id)\
            .eq("completed_date", str(target_date))\
            .execute()
        return result.data[0] if result.data else None
    except Exception as e:
        logger.error(f"Database error fetching completion for habit {habit_id} on {target_date}: {e}")
        raise DatabaseError(f"Failed to fetch completion: {e}")


def create_completion(habit_id: str, user_id: str, target_date: date) -> Dict[str, Any]:
    """
    Create a new completion entry

    Raises:
        DatabaseError: If insert fails
    """
    try:
        result = get_supabase_client().table("habit_completions").insert({
            "habit_id": habit_id,
            "user_id": user_id,
            "completed_date": str(target_date)
        }).execute()
        return result.data[0] if result.data else {}
    except Exception as e:
        logger.error(f"Database error creating completion: {e}")
        raise DatabaseError(f"Failed to create completion: {e}")


def delete_completion(completion_id: str) -> Dict[str, Any]:
    """
    Delete a completion entry

    Raises:
        DatabaseError: If delete fails
    """
    try:
        result = get_supabase_client().table("habit_completions").delete().eq("id", completion_id).execute()
        return result.data[0] if result.data else {}
    except Exception as e:
        logger.error(f"Database error deleting completion {completion_id}: {e}")
        raise DatabaseError(f"Failed to delete completion: {e}")
