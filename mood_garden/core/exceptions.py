"""
Custom application exceptions.
"""

class MoodGardenException(Exception):
    """Base exception for the mood garden app."""
    pass


class EntryNotFoundError(MoodGardenException):
    """Raised when a mood entry is not found for the requesting user."""
    pass


class ValidationError(MoodGardenException):
    """Raised when validation fails."""
    pass
