"""
Mood entry schemas.
"""
import uuid
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from mood_garden.core.time_utils import ensure_utc
from mood_garden.models.enums import MoodType


class MoodEntryCreate(BaseModel):
    """Body of a new submission.

    ``mood`` is checked for presence only; values outside the mood set are
    rejected by the storage layer.
    """
    mood: Optional[str] = None
    plant: Optional[str] = None
    journal: Optional[str] = None


class MoodEntryResponse(BaseModel):
    """Mood entry as returned by the API."""
    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    user_id: str
    mood: MoodType
    plant: str
    journal: str
    date: datetime
    created_at: datetime
    updated_at: datetime

    @field_validator("date", "created_at", "updated_at")
    @classmethod
    def validate_utc(cls, v: datetime) -> datetime:
        # SQLite returns naive values; they are stored as UTC
        return ensure_utc(v)


class MoodEntryCreatedResponse(BaseModel):
    entry: MoodEntryResponse
    streak: int


class GardenResponse(BaseModel):
    entries: List[MoodEntryResponse]


class Pagination(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    page: int
    limit: int
    total: int
    total_pages: int = Field(alias="totalPages")


class HistoryResponse(BaseModel):
    entries: List[MoodEntryResponse]
    pagination: Pagination


class MessageResponse(BaseModel):
    message: str
