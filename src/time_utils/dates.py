"""
Date truncation helpers.
Each helper works in the datetime's own zone; naive datetimes are treated as local wall-clock time.
"""

from datetime import datetime
from typing import Optional


def start_of_day(dt: datetime) -> datetime:
    return dt.replace(hour=0, minute=0, second=0, microsecond=0)


def start_of_hour(dt: datetime) -> datetime:
    return dt.replace(minute=0, second=0, microsecond=0)


def start_of_minute(dt: datetime) -> datetime:
    return dt.replace(second=0, microsecond=0)


def is_same_hour_as_now(dt: datetime, now: Optional[datetime] = None) -> bool:
    """
    Check whether dt falls on today's date and in the current hour.

    Args:
        dt: Datetime to check
        now: Reference time, default is the current time in dt's zone
    """
    if now is None:
        now = datetime.now(dt.tzinfo)
    elif dt.tzinfo is not None and now.tzinfo is not None:
        now = now.astimezone(dt.tzinfo)

    return dt.date() == now.date() and dt.hour == now.hour


def short_style(dt: datetime) -> str:
    """Short date and time, e.g. '3/7/26, 9:05 PM'."""
    hour = dt.hour % 12 or 12
    meridiem = 'AM' if dt.hour < 12 else 'PM'
    return f"{dt.month}/{dt.day}/{dt:%y}, {hour}:{dt:%M} {meridiem}"
