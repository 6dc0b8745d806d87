"""
Streak and statistics endpoints.
"""
from datetime import datetime
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlmodel import Session

from mood_garden.api.dependencies import get_now
from mood_garden.core.database import get_session
from mood_garden.core.logging_config import log_error
from mood_garden.middleware.request_logging import request_id_ctx
from mood_garden.schemas.analytics import MoodStatisticsResponse, StreakResponse
from mood_garden.services.analytics_service import AnalyticsService, DEFAULT_STATS_DAYS
from mood_garden.services.streak_service import StreakService

router = APIRouter()


@router.get(
    "/{user_id}/streak",
    response_model=StreakResponse,
    responses={
        500: {"description": "Internal server error"},
    }
)
async def get_streak(
    user_id: str,
    session: Annotated[Session, Depends(get_session)],
    now: Annotated[datetime, Depends(get_now)],
):
    """
    Get the user's current day streak.

    A streak whose last entry is older than yesterday is reset to 0 and
    the reset is saved.
    """
    try:
        streak = StreakService(session).get_current_streak(user_id, now)
        return StreakResponse(streak=streak)
    except Exception as e:
        log_error(e, request_id=request_id_ctx.get(), user_id=user_id)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch streak"
        )


@router.get(
    "/{user_id}/stats",
    response_model=MoodStatisticsResponse,
    responses={
        500: {"description": "Internal server error"},
    }
)
async def get_mood_statistics(
    user_id: str,
    session: Annotated[Session, Depends(get_session)],
    now: Annotated[datetime, Depends(get_now)],
    days: int = Query(DEFAULT_STATS_DAYS, ge=1, le=3650),
):
    """
    Get mood counts for the last ``days`` days.
    """
    try:
        statistics = AnalyticsService(session).get_mood_statistics(user_id, now, days)
        return MoodStatisticsResponse(**statistics)
    except Exception as e:
        log_error(e, request_id=request_id_ctx.get(), user_id=user_id)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch statistics"
        )
