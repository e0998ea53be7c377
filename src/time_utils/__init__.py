"""Date and time-zone helpers."""

from .dates import start_of_day, start_of_hour, start_of_minute, is_same_hour_as_now, short_style
from .timezones import (timezone_for, hour_of_the_day, hours_remaining_in_today,
                        hour_of_the_day_of, hours_remaining_in_day_of)

__all__ = ['start_of_day', 'start_of_hour', 'start_of_minute', 'is_same_hour_as_now',
           'short_style', 'timezone_for', 'hour_of_the_day', 'hours_remaining_in_today',
           'hour_of_the_day_of', 'hours_remaining_in_day_of']
