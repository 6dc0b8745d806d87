"""
Streak engine and the service that persists its decisions.

Streaks count calendar days, not 24-hour windows: two entries at 23:59 and
00:01 are one day apart. "Today" is taken in the configured streak timezone
(the server's local zone when unset).
"""
from datetime import datetime
from typing import Optional

from sqlalchemy import update
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select

from mood_garden.core.config import settings
from mood_garden.core.logging_config import log_info, log_debug, log_error
from mood_garden.core.time_utils import ensure_utc, local_date, utc_now
from mood_garden.models.user_streak import UserStreak


def day_diff(last_entry_date: datetime, now: datetime, tz_name: Optional[str] = None) -> int:
    """Whole calendar days between the day of ``last_entry_date`` and the day of ``now``.

    Negative when ``last_entry_date`` falls on a later day than ``now``.
    """
    return (local_date(now, tz_name) - local_date(last_entry_date, tz_name)).days


def evaluate_streak(record: Optional[UserStreak], now: datetime, tz_name: Optional[str] = None) -> int:
    """Current streak value as seen at ``now``.

    A record whose last entry is more than one calendar day old is reset to
    0 in place; the caller must persist that change. Returns 0 when there is
    no record or no last entry.
    """
    if record is None or record.last_entry_date is None:
        return 0

    if day_diff(record.last_entry_date, now, tz_name) > 1:
        record.streak = 0
        return 0

    return record.streak


def record_entry(
    record: Optional[UserStreak],
    user_id: str,
    now: datetime,
    tz_name: Optional[str] = None,
) -> UserStreak:
    """Apply a new submission made at ``now`` to a user's streak record.

    - no record: a new one starting at 1
    - same calendar day: unchanged
    - next calendar day: +1
    - any other gap, including a negative one from clock changes: back to 1

    ``last_entry_date`` always moves to ``now``.
    """
    now = ensure_utc(now)
    if record is None:
        return UserStreak(user_id=user_id, streak=1, last_entry_date=now)

    if record.last_entry_date is None:
        record.streak = 1
    else:
        diff = day_diff(record.last_entry_date, now, tz_name)
        if diff == 1:
            record.streak += 1
        elif diff != 0:
            record.streak = 1

    record.last_entry_date = now
    return record


class StreakService:
    """Service class for streak operations."""

    def __init__(self, session: Session, tz_name: Optional[str] = None):
        self.session = session
        self.tz_name = tz_name if tz_name is not None else settings.streak_timezone

    def get_streak_record(self, user_id: str, *, for_update: bool = False) -> Optional[UserStreak]:
        """Get the streak record for a user."""
        statement = select(UserStreak).where(UserStreak.user_id == user_id)
        if for_update:
            # Serializes concurrent submissions per user where the backend supports row locks
            statement = statement.with_for_update()
        return self.session.exec(statement).first()

    def get_current_streak(self, user_id: str, now: datetime) -> int:
        """Read path: current streak for a user, persisting a reset if the streak has lapsed.

        The reset only applies to the row as it was read: if an entry was
        recorded in between, that entry's streak is kept and returned.
        """
        record = self.get_streak_record(user_id)
        if record is None:
            log_debug(f"No streak record for user {user_id}")
            return 0

        stored = record.streak
        record_id = record.id
        loaded_last_entry = record.last_entry_date
        value = evaluate_streak(record, now, self.tz_name)
        if value == stored:
            return value

        # Discard the in-memory reset so a flush cannot write it unconditionally
        self.session.expire(record)
        try:
            result = self.session.exec(
                update(UserStreak)
                .where(
                    UserStreak.id == record_id,
                    UserStreak.last_entry_date == loaded_last_entry,
                )
                .values(streak=0, updated_at=utc_now())
            )
            self.session.commit()
        except SQLAlchemyError as exc:
            self.session.rollback()
            log_error(exc, user_id=user_id)
            raise

        if result.rowcount == 0:
            self.session.refresh(record)
            log_info(f"Streak for user {user_id} changed while being read; keeping {record.streak}")
            return record.streak

        log_info(f"Streak for user {user_id} lapsed and was reset from {stored} to 0")
        return value

    def register_entry(self, user_id: str, now: datetime, *, commit: bool = True) -> UserStreak:
        """Write path: update a user's streak for a submission made at ``now``.

        With ``commit=False`` the record is only added to the session so the
        caller can commit it together with the entry.
        """
        record = self.get_streak_record(user_id, for_update=True)
        previous = record.streak if record is not None else None
        record = record_entry(record, user_id, now, self.tz_name)
        self.session.add(record)

        if commit:
            try:
                self.session.commit()
                self.session.refresh(record)
            except SQLAlchemyError as exc:
                self.session.rollback()
                log_error(exc, user_id=user_id)
                raise

        if previous is None:
            log_info(f"Streak started for user {user_id}")
        elif previous != record.streak:
            log_info(f"Streak for user {user_id} changed from {previous} to {record.streak}")
        return record
