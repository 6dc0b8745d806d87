"""
Streak and statistics schemas.
"""
from typing import Dict

from pydantic import BaseModel, ConfigDict, Field


class StreakResponse(BaseModel):
    streak: int


class MoodStatisticsResponse(BaseModel):
    """Mood counts over a trailing window of days."""
    model_config = ConfigDict(populate_by_name=True)

    total: int
    by_mood: Dict[str, int] = Field(alias="byMood")
    recent_entries: int = Field(alias="recentEntries")
