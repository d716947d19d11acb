"""
Report Routes - Life area scores, life report, daily insight and achievements
"""
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from kaizen.core.config import settings
from kaizen.core.dependencies import get_current_user_id
from kaizen.core.exceptions import InvalidHabitDataError, DatabaseError, ExternalServiceError
from kaizen.services.habits import service as habit_service
from kaizen.services.insights import service as insights_service
from kaizen.utils.timezone import get_local_today_date

router = APIRouter(tags=["reports"])


def _parse_celebrated(celebrated: Optional[str]) -> frozenset:
    if not celebrated:
        return frozenset()
    try:
        return frozenset(int(part) for part in celebrated.split(",") if part.strip())
    except ValueError:
        raise HTTPException(status_code=400, detail=f"Invalid celebrated list '{celebrated}'")


@router.get("/reports/scores")
async def get_category_scores(
    period_days: int = Query(default=settings.SCORING_PERIOD_DAYS),
    user_id: str = Depends(get_current_user_id)
):
    """Completion rate per life area, weakest first"""
    try:
        scores = habit_service.get_category_scores(user_id, get_local_today_date(), period_days)
        return {"status": "success", "scores": [s.model_dump(by_alias=True) for s in scores]}
    except InvalidHabitDataError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except DatabaseError as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.get("/reports/life")
async def get_life_report(refresh: bool = False, user_id: str = Depends(get_current_user_id)):
    """Life area scores with an AI analysis (cached for the day)"""
    try:
        report = insights_service.get_life_report(user_id, get_local_today_date(), refresh)
        return report.model_dump(by_alias=True)
    except (DatabaseError, ExternalServiceError) as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.get("/reports/insight")
async def get_daily_insight(refresh: bool = False, user_id: str = Depends(get_current_user_id)):
    """Today's AI insight (cached for the day)"""
    try:
        return insights_service.get_daily_insight(user_id, get_local_today_date(), refresh)
    except (DatabaseError, ExternalServiceError) as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.get("/achievements")
async def get_achievements(
    celebrated: Optional[str] = None,
    last_level: int = 0,
    user_id: str = Depends(get_current_user_id)
):
    """XP, rank, streak and achievements not yet celebrated by the client"""
    celebrated_milestones = _parse_celebrated(celebrated)
    try:
        return habit_service.get_achievements(
            user_id,
            get_local_today_date(),
            celebrated_milestones,
            last_level
        )
    except DatabaseError as e:
        raise HTTPException(status_code=500, detail=str(e))
