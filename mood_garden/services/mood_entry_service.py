"""
Mood entry service for planting, listing and removing entries.
"""
import math
import uuid
from datetime import datetime
from typing import List, Optional, Tuple

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select, func

from mood_garden.core.exceptions import EntryNotFoundError, ValidationError
from mood_garden.core.logging_config import log_info, log_warning, log_error
from mood_garden.core.time_utils import ensure_utc
from mood_garden.models.mood_entry import MoodEntry
from mood_garden.models.user_streak import UserStreak
from mood_garden.schemas.mood_entry import MoodEntryCreate
from mood_garden.services.streak_service import StreakService

DEFAULT_GARDEN_LIMIT = 50
DEFAULT_HISTORY_LIMIT = 20

REQUIRED_FIELDS_MESSAGE = "Mood and plant are required"


class MoodEntryService:
    """Service class for mood entry operations."""

    def __init__(self, session: Session):
        self.session = session

    def _commit(self) -> None:
        """Commit database changes with proper error handling."""
        try:
            self.session.commit()
        except SQLAlchemyError as exc:
            self.session.rollback()
            log_error(exc)
            raise

    @staticmethod
    def _ordered(statement):
        return statement.order_by(MoodEntry.date.desc(), MoodEntry.created_at.desc())

    def create_entry(
        self,
        user_id: str,
        entry_data: Optional[MoodEntryCreate],
        now: datetime,
    ) -> Tuple[MoodEntry, UserStreak]:
        """Plant a new mood entry and advance the user's streak.

        The entry and the streak record are committed together; if either
        fails to persist, neither is stored.

        Raises:
            ValidationError: if ``mood`` or ``plant`` is missing or empty
        """
        if entry_data is None or not entry_data.mood or not entry_data.plant:
            log_warning(f"Rejected entry without mood or plant for user {user_id}")
            raise ValidationError(REQUIRED_FIELDS_MESSAGE)

        now = ensure_utc(now)
        entry = MoodEntry(
            user_id=user_id,
            mood=entry_data.mood,
            plant=entry_data.plant,
            journal=entry_data.journal or "",
            date=now,
        )
        self.session.add(entry)

        try:
            # Flush first so an invalid mood fails before the streak is touched
            self.session.flush()
            streak = StreakService(self.session).register_entry(user_id, now, commit=False)
            self.session.commit()
        except SQLAlchemyError as exc:
            self.session.rollback()
            log_error(exc, user_id=user_id)
            raise

        self.session.refresh(entry)
        self.session.refresh(streak)
        log_info(f"Mood entry created for user {user_id}: {entry.id} (streak {streak.streak})")
        return entry, streak

    def get_garden(self, user_id: str, limit: int = DEFAULT_GARDEN_LIMIT) -> List[MoodEntry]:
        """Get the user's most recent entries, newest first."""
        statement = self._ordered(
            select(MoodEntry).where(MoodEntry.user_id == user_id)
        ).limit(limit)
        return list(self.session.exec(statement))

    def count_user_entries(self, user_id: str) -> int:
        return self.session.exec(
            select(func.count(MoodEntry.id)).where(MoodEntry.user_id == user_id)
        ).one()

    def get_history(
        self,
        user_id: str,
        page: int = 1,
        limit: int = DEFAULT_HISTORY_LIMIT,
    ) -> Tuple[List[MoodEntry], int, int]:
        """Get one page of the user's entries, newest first.

        Returns:
            (entries, total, total_pages)
        """
        offset = (page - 1) * limit
        statement = self._ordered(
            select(MoodEntry).where(MoodEntry.user_id == user_id)
        ).offset(offset).limit(limit)
        entries = list(self.session.exec(statement))

        total = self.count_user_entries(user_id)
        total_pages = math.ceil(total / limit)
        return entries, total, total_pages

    def get_entry_by_id(self, entry_id: str, user_id: str) -> Optional[MoodEntry]:
        """Get an entry by ID, ensuring it belongs to the user."""
        try:
            parsed_id = uuid.UUID(str(entry_id))
        except ValueError:
            return None

        statement = select(MoodEntry).where(
            MoodEntry.id == parsed_id,
            MoodEntry.user_id == user_id,
        )
        return self.session.exec(statement).first()

    def delete_entry(self, entry_id: str, user_id: str) -> None:
        """Delete an entry owned by the user.

        The streak is left as it is.

        Raises:
            EntryNotFoundError: if no entry with this id belongs to the user
        """
        entry = self.get_entry_by_id(entry_id, user_id)
        if not entry:
            log_warning(f"Entry not found for user {user_id}: {entry_id}")
            raise EntryNotFoundError("Entry not found")

        self.session.delete(entry)
        self._commit()
        log_info(f"Mood entry deleted for user {user_id}: {entry_id}")
