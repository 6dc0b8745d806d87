"""
Mood catalogue endpoints.
"""
from typing import List

from fastapi import APIRouter, HTTPException, status

from mood_garden.schemas.mood import MoodResponse
from mood_garden.services.mood_service import MoodService

router = APIRouter()


@router.get("", response_model=List[MoodResponse])
async def get_all_moods():
    """
    Get all moods with their emoji, label, colour and suggested plant.
    """
    return MoodService().get_all_moods()


@router.get(
    "/{mood_id}",
    response_model=MoodResponse,
    responses={
        404: {"description": "Mood not found"},
    }
)
async def get_mood(mood_id: str):
    """Get a single mood by its id (e.g. ``happy``)."""
    mood = MoodService().get_mood(mood_id)
    if not mood:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Mood not found"
        )
    return mood
