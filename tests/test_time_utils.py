"""Tests for date truncation and time-zone parsing."""

from datetime import datetime, timedelta, timezone

from time_utils.dates import (
    is_same_hour_as_now,
    short_style,
    start_of_day,
    start_of_hour,
    start_of_minute,
)
from time_utils.timezones import (
    hour_of_the_day,
    hour_of_the_day_of,
    hours_remaining_in_day_of,
    hours_remaining_in_today,
    timezone_for,
)

MOMENT = datetime(2026, 3, 7, 21, 5, 42, 123456)
UTC_EVENING = datetime(2026, 1, 1, 22, 30, tzinfo=timezone.utc)


class TestTruncation:

    def test_start_of_day(self) -> None:
        assert start_of_day(MOMENT) == datetime(2026, 3, 7)

    def test_start_of_hour(self) -> None:
        assert start_of_hour(MOMENT) == datetime(2026, 3, 7, 21)

    def test_start_of_minute(self) -> None:
        assert start_of_minute(MOMENT) == datetime(2026, 3, 7, 21, 5)

    def test_keeps_zone(self) -> None:
        assert start_of_hour(UTC_EVENING).tzinfo is timezone.utc


class TestSameHour:

    def test_same_hour(self) -> None:
        assert is_same_hour_as_now(datetime(2026, 3, 7, 10, 15), now=datetime(2026, 3, 7, 10, 59))

    def test_other_hour(self) -> None:
        assert not is_same_hour_as_now(datetime(2026, 3, 7, 9, 59), now=datetime(2026, 3, 7, 10, 0))

    def test_other_day(self) -> None:
        assert not is_same_hour_as_now(datetime(2026, 3, 6, 10, 15), now=datetime(2026, 3, 7, 10, 15))

    def test_aware_reference_converted(self) -> None:
        dt = datetime(2026, 3, 7, 10, 15, tzinfo=timezone.utc)
        now = datetime(2026, 3, 7, 11, 20, tzinfo=timezone(timedelta(hours=1)))
        assert is_same_hour_as_now(dt, now=now)


class TestShortStyle:

    def test_evening(self) -> None:
        assert short_style(MOMENT) == "3/7/26, 9:05 PM"

    def test_midnight(self) -> None:
        assert short_style(datetime(2026, 12, 31, 0, 0)) == "12/31/26, 12:00 AM"


class TestTimezoneFor:

    def test_iso8601_offset(self) -> None:
        tz = timezone_for("2016-02-11T10:00:00+01:00")
        assert tz.utcoffset(None) == timedelta(hours=1)

    def test_rfc822_offset(self) -> None:
        tz = timezone_for("Thu, 11 Feb 2016 10:00:00 -0530")
        assert tz.utcoffset(None) == -timedelta(hours=5, minutes=30)

    def test_largest_offset(self) -> None:
        assert timezone_for("2016-02-11T10:00:00+14:00").utcoffset(None) == timedelta(hours=14)

    def test_out_of_range_offset(self) -> None:
        assert timezone_for("2016-02-11T10:00:00+15:00") is None

    def test_zulu_not_supported(self) -> None:
        assert timezone_for("2016-02-11T10:00:00Z") is None

    def test_offset_at_end_of_line(self) -> None:
        tz = timezone_for("Date: 11 Feb 2016 10:00 +0200\nSubject: hi")
        assert tz.utcoffset(None) == timedelta(hours=2)


class TestHours:

    def test_hour_of_the_day(self) -> None:
        assert hour_of_the_day(timezone(timedelta(hours=1)), now=UTC_EVENING) == 23

    def test_hours_remaining(self) -> None:
        assert hours_remaining_in_today(timezone(timedelta(hours=1)), now=UTC_EVENING) == 0
        assert hours_remaining_in_today(timezone.utc, now=UTC_EVENING) == 1

    def test_hour_of_date_string(self) -> None:
        assert hour_of_the_day_of("2016-02-11T10:00:00-05:00", now=UTC_EVENING) == 17

    def test_hours_remaining_of_date_string(self) -> None:
        assert hours_remaining_in_day_of("2016-02-11T10:00:00-05:00", now=UTC_EVENING) == 6

    def test_unparseable_date_string(self) -> None:
        assert hour_of_the_day_of("yesterday") is None
        assert hours_remaining_in_day_of("yesterday") is None
