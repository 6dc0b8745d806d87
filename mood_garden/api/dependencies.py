"""
Shared FastAPI dependencies.
"""
from datetime import datetime

from mood_garden.core.time_utils import utc_now


def get_now() -> datetime:
    """Current UTC time for the request.

    Streak decisions depend on "today", so endpoints take the clock as a
    dependency that can be overridden.
    """
    return utc_now()
