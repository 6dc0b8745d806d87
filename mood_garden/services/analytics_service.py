"""
Analytics service for mood statistics.
"""
from datetime import datetime, timedelta
from typing import Any, Dict

from sqlmodel import Session, select, func

from mood_garden.core.time_utils import ensure_utc
from mood_garden.models.enums import MoodType
from mood_garden.models.mood_entry import MoodEntry

DEFAULT_STATS_DAYS = 30


class AnalyticsService:
    """Service class for analytics operations."""

    def __init__(self, session: Session):
        self.session = session

    def get_mood_statistics(
        self,
        user_id: str,
        now: datetime,
        days: int = DEFAULT_STATS_DAYS,
    ) -> Dict[str, Any]:
        """Count a user's entries per mood over the last ``days`` days.

        Only moods that occur in the window show up in ``by_mood``.
        """
        date_from = ensure_utc(now) - timedelta(days=days)

        mood_counts = self.session.exec(
            select(
                MoodEntry.mood,
                func.count(MoodEntry.id).label('mood_count'),
            )
            .where(
                MoodEntry.user_id == user_id,
                MoodEntry.date >= date_from,
            )
            .group_by(MoodEntry.mood)
        ).all()

        by_mood = {}
        for mood, count in mood_counts:
            key = mood.value if isinstance(mood, MoodType) else str(mood)
            by_mood[key] = count

        total = sum(by_mood.values())
        return {
            'total': total,
            'by_mood': by_mood,
            'recent_entries': total,
        }
