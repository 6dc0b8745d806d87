"""
Mood entry endpoints: the garden, history, planting and removing entries.
"""
from datetime import datetime
from typing import Annotated, Optional

from fastapi import APIRouter, Body, Depends, HTTPException, Query, status
from sqlmodel import Session

from mood_garden.api.dependencies import get_now
from mood_garden.core.database import get_session
from mood_garden.core.exceptions import EntryNotFoundError, ValidationError
from mood_garden.core.logging_config import log_error, log_user_action
from mood_garden.middleware.request_logging import request_id_ctx
from mood_garden.schemas.mood_entry import (
    GardenResponse,
    HistoryResponse,
    MessageResponse,
    MoodEntryCreate,
    MoodEntryCreatedResponse,
    MoodEntryResponse,
    Pagination,
)
from mood_garden.services.mood_entry_service import (
    DEFAULT_GARDEN_LIMIT,
    DEFAULT_HISTORY_LIMIT,
    MoodEntryService,
)

router = APIRouter()


@router.get(
    "/{user_id}/garden",
    response_model=GardenResponse,
    responses={
        500: {"description": "Internal server error"},
    }
)
async def get_garden(
    user_id: str,
    session: Annotated[Session, Depends(get_session)],
    limit: int = Query(DEFAULT_GARDEN_LIMIT, ge=1, le=500),
):
    """
    Get the user's garden: the most recent entries, newest first.
    """
    try:
        entries = MoodEntryService(session).get_garden(user_id, limit)
        return GardenResponse(
            entries=[MoodEntryResponse.model_validate(entry) for entry in entries]
        )
    except Exception as e:
        log_error(e, request_id=request_id_ctx.get(), user_id=user_id)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch garden"
        )


@router.get(
    "/{user_id}/history",
    response_model=HistoryResponse,
    responses={
        500: {"description": "Internal server error"},
    }
)
async def get_history(
    user_id: str,
    session: Annotated[Session, Depends(get_session)],
    page: int = Query(1, ge=1),
    limit: int = Query(DEFAULT_HISTORY_LIMIT, ge=1, le=100),
):
    """
    Get the user's mood history with offset pagination, newest first.
    """
    try:
        entries, total, total_pages = MoodEntryService(session).get_history(user_id, page, limit)
        return HistoryResponse(
            entries=[MoodEntryResponse.model_validate(entry) for entry in entries],
            pagination=Pagination(page=page, limit=limit, total=total, total_pages=total_pages),
        )
    except Exception as e:
        log_error(e, request_id=request_id_ctx.get(), user_id=user_id)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch history"
        )


@router.post(
    "/{user_id}/entries",
    response_model=MoodEntryCreatedResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"description": "Mood and plant are required"},
        500: {"description": "Internal server error"},
    }
)
async def create_entry(
    user_id: str,
    session: Annotated[Session, Depends(get_session)],
    now: Annotated[datetime, Depends(get_now)],
    entry_data: Annotated[Optional[MoodEntryCreate], Body()] = None,
):
    """
    Plant a mood entry and update the user's streak.

    Only the presence of ``mood`` and ``plant`` is checked here. A mood
    outside the known set is refused by storage and reported as a server
    error.
    """
    try:
        entry, streak = MoodEntryService(session).create_entry(user_id, entry_data, now)
    except ValidationError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )
    except Exception as e:
        log_error(e, request_id=request_id_ctx.get(), user_id=user_id)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create entry"
        )

    log_user_action(user_id, "planted a mood", request_id=request_id_ctx.get(), mood=entry.mood.value)
    return MoodEntryCreatedResponse(
        entry=MoodEntryResponse.model_validate(entry),
        streak=streak.streak,
    )


@router.delete(
    "/{user_id}/entries/{entry_id}",
    response_model=MessageResponse,
    responses={
        404: {"description": "Entry not found"},
        500: {"description": "Internal server error"},
    }
)
async def delete_entry(
    user_id: str,
    entry_id: str,
    session: Annotated[Session, Depends(get_session)],
):
    """Delete one of the user's entries."""
    try:
        MoodEntryService(session).delete_entry(entry_id, user_id)
    except EntryNotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Entry not found"
        )
    except Exception as e:
        log_error(e, request_id=request_id_ctx.get(), user_id=user_id)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to delete entry"
        )

    log_user_action(user_id, "deleted an entry", request_id=request_id_ctx.get(), entry_id=entry_id)
    return MessageResponse(message="Entry deleted successfully")
