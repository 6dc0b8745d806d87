"""
Enums and constants for the application.
"""
from enum import Enum


class MoodType(str, Enum):
    """Moods a user can plant in the garden."""
    AMAZING = "amazing"
    HAPPY = "happy"
    OKAY = "okay"
    SAD = "sad"
    ANXIOUS = "anxious"
