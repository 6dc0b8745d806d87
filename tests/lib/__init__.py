"""Shared helpers for Mood Garden test suites."""

from .api import MoodGardenApiClient, MoodGardenApiError

__all__ = [
    "MoodGardenApiClient",
    "MoodGardenApiError",
]
