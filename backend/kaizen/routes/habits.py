"""
Habit Routes - Endpoints for habit management and today's schedule
"""
from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from kaizen.core.dependencies import get_current_user_id
from kaizen.core.exceptions import (
    HabitNotFoundError,
    InvalidHabitDataError,
    DatabaseError,
    ExternalServiceError
)
from kaizen.models.habit import CreateHabitRequest, GenerateHabitsRequest, UpdateHabitRequest
from kaizen.services.habits import service as habit_service
from kaizen.services.insights import generate_habits
from kaizen.utils.timezone import get_local_today_date

router = APIRouter(prefix="/habits", tags=["habits"])


@router.get("")
async def list_habits(user_id: str = Depends(get_current_user_id)):
    """List all of the user's habits"""
    try:
        habits = habit_service.load_habits(user_id)
        return {"status": "success", "habits": [h.model_dump(mode="json") for h in habits]}
    except DatabaseError as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.post("")
async def add_habit(request: CreateHabitRequest, user_id: str = Depends(get_current_user_id)):
    """Add a new habit"""
    try:
        return habit_service.add_habit(user_id, request, get_local_today_date())
    except InvalidHabitDataError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except DatabaseError as e:
        raise HTTPException(status_code=500, detail=str(e))
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Unexpected error: {str(e)}")


@router.get("/today")
async def get_today_habits(day: Optional[date] = Query(default=None, alias="date"), user_id: str = Depends(get_current_user_id)):
    """Get the habits scheduled on a date (default today) with completion status"""
    try:
        return habit_service.get_habits_for_date(user_id, day or get_local_today_date())
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.get("/summary")
async def get_daily_summary(day: Optional[date] = Query(default=None, alias="date"), user_id: str = Depends(get_current_user_id)):
    """Get a date's summary of habit completion"""
    try:
        return habit_service.get_daily_summary(user_id, day or get_local_today_date())
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.post("/generate")
async def suggest_habits(request: GenerateHabitsRequest):
    """Suggest habits for a goal"""
    try:
        return {"status": "success", "habits": generate_habits(request.goal)}
    except ExternalServiceError as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.patch("/{habit_id}")
async def edit_habit(habit_id: str, request: UpdateHabitRequest, user_id: str = Depends(get_current_user_id)):
    """Edit a habit"""
    try:
        return habit_service.edit_habit(user_id, habit_id, request)
    except HabitNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except InvalidHabitDataError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except DatabaseError as e:
        raise HTTPException(status_code=500, detail=str(e))
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Unexpected error: {str(e)}")


@router.delete("/{habit_id}")
async def remove_habit(habit_id: str, user_id: str = Depends(get_current_user_id)):
    """Delete a habit"""
    try:
        return habit_service.remove_habit(user_id, habit_id)
    except HabitNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except DatabaseError as e:
        raise HTTPException(status_code=500, detail=str(e))
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Unexpected error: {str(e)}")
