"""
Timezone-safe datetime utilities.

All timestamps are stored in UTC. Calendar-day logic converts them to a
configured zone (or the server's local zone) before truncating to midnight.
Compatible with both SQLite and PostgreSQL.
"""

from datetime import datetime, date, timezone
from typing import Optional
from zoneinfo import ZoneInfo


def utc_now() -> datetime:
    """
    Return current UTC datetime with timezone info attached.

    Example:
        >>> now = utc_now()
        >>> now.tzinfo
        datetime.timezone.utc
    """
    return datetime.now(timezone.utc)


def ensure_utc(dt: datetime) -> datetime:
    """
    Convert any datetime to UTC.

    If the datetime is naive (no timezone info), it's assumed to be UTC.
    SQLite hands back naive values for timezone-aware columns, so every
    value read from storage goes through here.

    Example:
        >>> naive_dt = datetime(2024, 1, 1, 12, 0, 0)
        >>> ensure_utc(naive_dt).tzinfo
        datetime.timezone.utc
    """
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def to_local(dt: datetime, tz_name: Optional[str] = None) -> datetime:
    """
    Convert a UTC datetime to a local timezone.

    Args:
        dt: UTC datetime (naive values are treated as UTC)
        tz_name: IANA timezone name. None means the server's local zone.

    Example:
        >>> utc_dt = datetime(2024, 1, 1, 8, 0, 0, tzinfo=timezone.utc)
        >>> to_local(utc_dt, "America/Los_Angeles").hour
        0
    """
    utc_dt = ensure_utc(dt)
    if tz_name is None:
        return utc_dt.astimezone()
    return utc_dt.astimezone(ZoneInfo(tz_name))


def local_date(dt: datetime, tz_name: Optional[str] = None) -> date:
    """
    Truncate a timestamp to its calendar day in the given timezone.

    The same UTC moment falls on different calendar dates in different
    timezones.

    Example:
        >>> # 11 PM PST on Dec 31 is 7 AM UTC on Jan 1
        >>> utc_dt = datetime(2024, 1, 1, 7, 0, 0, tzinfo=timezone.utc)
        >>> local_date(utc_dt, "America/Los_Angeles")
        datetime.date(2023, 12, 31)
    """
    return to_local(dt, tz_name).date()


def serialize_datetime(dt: Optional[datetime]) -> Optional[str]:
    """
    Convert datetime to ISO8601 UTC string with 'Z' suffix.

    Example:
        >>> serialize_datetime(datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc))
        '2024-01-01T12:00:00Z'
    """
    if dt is None:
        return None

    iso_string = ensure_utc(dt).isoformat()
    if iso_string.endswith('+00:00'):
        iso_string = iso_string[:-6] + 'Z'
    return iso_string


def validate_timezone(tz_name: str) -> bool:
    """
    Validate that a timezone string is a valid IANA timezone.

    Example:
        >>> validate_timezone("America/Los_Angeles")
        True
        >>> validate_timezone("Invalid/Timezone")
        False
    """
    try:
        ZoneInfo(tz_name)
        return True
    except Exception:
        return False
