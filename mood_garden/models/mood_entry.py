"""
Mood entry model.
"""
from datetime import datetime

from sqlalchemy import Column, DateTime, Enum as SAEnum, String, Text
from sqlmodel import Field, Index, CheckConstraint

from mood_garden.core.time_utils import utc_now
from .base import BaseModel
from .enums import MoodType


class MoodEntry(BaseModel, table=True):
    """
    A single planted mood. Entries are never updated, only deleted.
    """
    __tablename__ = "mood_entry"

    user_id: str = Field(
        sa_column=Column(String(255), nullable=False, index=True)
    )
    # The column rejects values outside MoodType at flush time
    mood: MoodType = Field(
        sa_column=Column(
            SAEnum(
                MoodType,
                name="mood_type_enum",
                native_enum=False,
                create_constraint=True,
                validate_strings=True,
                values_callable=lambda x: [e.value for e in x],
            ),
            nullable=False,
        )
    )
    plant: str = Field(sa_column=Column(Text, nullable=False))
    journal: str = Field(default="", sa_column=Column(Text, nullable=False, default=""))
    date: datetime = Field(
        default_factory=utc_now,
        sa_column=Column(DateTime(timezone=True), nullable=False, index=True),
    )

    __table_args__ = (
        Index('idx_mood_entry_user_date', 'user_id', 'date'),
        CheckConstraint("length(plant) > 0", name='check_plant_not_empty'),
    )
