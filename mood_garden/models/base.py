"""
Base model classes shared by all tables.
"""
import uuid
from datetime import datetime

from sqlalchemy import DateTime
from sqlmodel import Field, SQLModel

from mood_garden.core.time_utils import utc_now


class TimestampMixin(SQLModel):
    """Audit timestamps, stored as timezone-aware UTC values."""

    created_at: datetime = Field(
        default_factory=utc_now,
        sa_type=DateTime(timezone=True),
        nullable=False,
    )
    updated_at: datetime = Field(
        default_factory=utc_now,
        sa_type=DateTime(timezone=True),
        nullable=False,
        sa_column_kwargs={"onupdate": utc_now},
    )


class BaseModel(TimestampMixin):
    """UUID primary key plus audit timestamps."""

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
