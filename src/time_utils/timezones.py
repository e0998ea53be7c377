"""
Time-zone helpers.
Reads the UTC offset at the end of an ISO 8601 or RFC 822 date string.
"""

import regex
from datetime import datetime, timedelta, timezone
from typing import Optional

from regex_engine.regex_processor import match_substrings

# Trailing offset: +02:00, -0530, +14:00 ...
OFFSET_PATTERN = regex.compile(r'([+-])(0\d|1[0-4]):?([0-5]\d)$', regex.MULTILINE)


def timezone_for(date_string: str) -> Optional[timezone]:
    """
    Fixed-offset time zone from a date string such as '2016-02-11T10:00:00+01:00'
    or 'Thu, 11 Feb 2016 10:00:00 -0500'.

    Returns:
        datetime.timezone, or None if the string has no trailing offset
    """
    match = OFFSET_PATTERN.search(date_string)
    if match is None:
        return None

    sign, hours, minutes = match_substrings(match, range(1, 4))
    seconds = (int(hours) * 3600 + int(minutes) * 60) * int(sign + '1')
    return timezone(timedelta(seconds=seconds))


def hour_of_the_day(tz: timezone, now: Optional[datetime] = None) -> int:
    """Current hour (0-23) in tz."""
    now = datetime.now(tz) if now is None else now.astimezone(tz)
    return now.hour


def hours_remaining_in_today(tz: timezone, now: Optional[datetime] = None) -> int:
    """Whole hours left after the current one in tz."""
    return 23 - hour_of_the_day(tz, now)


def hour_of_the_day_of(date_string: str, now: Optional[datetime] = None) -> Optional[int]:
    tz = timezone_for(date_string)
    if tz is None:
        return None
    return hour_of_the_day(tz, now)


def hours_remaining_in_day_of(date_string: str, now: Optional[datetime] = None) -> Optional[int]:
    tz = timezone_for(date_string)
    if tz is None:
        return None
    return hours_remaining_in_today(tz, now)
