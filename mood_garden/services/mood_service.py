"""
Mood catalogue service.
"""
from typing import Dict, List, Optional

from mood_garden.models.enums import MoodType

# Display metadata shared with the garden frontend
MOOD_CATALOG: List[Dict[str, str]] = [
    {"id": MoodType.AMAZING.value, "emoji": "✨", "label": "Amazing", "color": "#ffd4e5", "plant": "🌸"},
    {"id": MoodType.HAPPY.value, "emoji": "😊", "label": "Happy", "color": "#ffe4b5", "plant": "🌻"},
    {"id": MoodType.OKAY.value, "emoji": "😌", "label": "Okay", "color": "#c8e6f5", "plant": "🌿"},
    {"id": MoodType.SAD.value, "emoji": "😔", "label": "Sad", "color": "#d8d0f0", "plant": "🍄"},
    {"id": MoodType.ANXIOUS.value, "emoji": "😰", "label": "Anxious", "color": "#ffd4f0", "plant": "🌵"},
]


class MoodService:
    """Read-only access to the fixed mood catalogue."""

    def get_all_moods(self) -> List[Dict[str, str]]:
        return [dict(mood) for mood in MOOD_CATALOG]

    def get_mood(self, mood_id: str) -> Optional[Dict[str, str]]:
        for mood in MOOD_CATALOG:
            if mood["id"] == mood_id:
                return dict(mood)
        return None
