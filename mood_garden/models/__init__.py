# Import all models for easy access
from .base import BaseModel
from .enums import MoodType
from .mood_entry import MoodEntry
from .user_streak import UserStreak

__all__ = [
    "BaseModel",
    "MoodType",
    "MoodEntry",
    "UserStreak",
]
