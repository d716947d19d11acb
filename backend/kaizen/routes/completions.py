"""
Completion Routes - Marking habits done
"""
from fastapi import APIRouter, Depends, HTTPException

from kaizen.core.dependencies import get_current_user_id
from kaizen.core.exceptions import HabitNotFoundError, DatabaseError
from kaizen.models.habit import ToggleCompletionRequest
from kaizen.services.habits import service as habit_service
from kaizen.utils.timezone import get_local_today_date

router = APIRouter(prefix="/completions", tags=["completions"])


@router.post("/toggle")
async def toggle_completion(request: ToggleCompletionRequest, user_id: str = Depends(get_current_user_id)):
    """Mark a habit done for a date (default today), or unmark it"""
    try:
        return habit_service.toggle_completion(
            user_id,
            request.habit_id,
            request.date or get_local_today_date()
        )
    except HabitNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except DatabaseError as e:
        raise HTTPException(status_code=500, detail=str(e))
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Unexpected error: {str(e)}")
