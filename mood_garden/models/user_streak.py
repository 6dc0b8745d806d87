"""
Per-user streak record.
"""
from datetime import datetime
from typing import Optional

from sqlalchemy import Column, DateTime, String
from sqlmodel import Field, CheckConstraint

from .base import BaseModel


class UserStreak(BaseModel, table=True):
    """
    Consecutive-day counter for one user.

    ``streak`` counts calendar days in a row with at least one entry;
    ``last_entry_date`` is the timestamp of the latest submission.
    """
    __tablename__ = "user_streak"

    user_id: str = Field(
        sa_column=Column(String(255), unique=True, nullable=False, index=True)
    )
    streak: int = Field(default=0, ge=0)
    last_entry_date: Optional[datetime] = Field(
        default=None,
        sa_column=Column(DateTime(timezone=True), nullable=True),
    )

    __table_args__ = (
        CheckConstraint('streak >= 0', name='check_streak_non_negative'),
    )
