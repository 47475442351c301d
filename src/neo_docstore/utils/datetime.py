"""
DateTime utilities for consistent timezone handling.
"""
from datetime import date, datetime, timezone
from typing import Any


def utc_now() -> datetime:
    """
    Get the current UTC time with timezone awareness.

    Returns:
        datetime: Current UTC time with timezone info
    """
    return datetime.now(timezone.utc)


def ensure_utc(dt: datetime) -> datetime:
    """
    Make a datetime timezone-aware in UTC.

    Naive datetimes are assumed to already be UTC.
    """
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def is_temporal(value: Any) -> bool:
    """Check whether a value is a date or datetime."""
    return isinstance(value, (datetime, date))


def to_datetime(value: Any) -> datetime:
    """
    Convert a date or datetime to an aware UTC datetime.

    A plain ``date`` becomes midnight UTC of that day.
    """
    if isinstance(value, datetime):
        return ensure_utc(value)
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day, tzinfo=timezone.utc)
    raise TypeError(f"Expected date or datetime, got {type(value).__name__}")
