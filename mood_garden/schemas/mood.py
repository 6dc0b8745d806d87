"""
Mood catalogue schemas.
"""
from pydantic import BaseModel

from mood_garden.models.enums import MoodType


class MoodResponse(BaseModel):
    """Display metadata for one mood."""
    id: MoodType
    emoji: str
    label: str
    color: str
    plant: str
