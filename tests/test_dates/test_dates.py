"""Tests for the date and time helpers."""

import math
from datetime import date, datetime, timedelta, timezone

import pytest

from chisel.dates import (
    DateParseError,
    angle_between_clock_hands,
    is_leap_year,
    parse_iso8601,
    parse_rfc2822,
    time_span_to_string,
)


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------


class TestParseRfc2822:
    def test_gmt(self):
        parsed = parse_rfc2822("Tue, 26 Jan 2016 13:48:02 GMT")
        assert parsed == datetime(2016, 1, 26, 13, 48, 2, tzinfo=timezone.utc)

    def test_gmt_with_hour_offset(self):
        parsed = parse_rfc2822("Sun, 17 May 1998 03:00:00 GMT+01")
        assert parsed.utcoffset() == timedelta(hours=1)
        assert parsed.astimezone(timezone.utc) == datetime(1998, 5, 17, 2, 0, tzinfo=timezone.utc)

    def test_numeric_offset(self):
        parsed = parse_rfc2822("Sun, 17 May 1998 03:00:00 -0500")
        assert parsed.utcoffset() == timedelta(hours=-5)

    def test_long_month_form(self):
        assert parse_rfc2822("December 17, 1995 03:24:00") == datetime(1995, 12, 17, 3, 24, 0)

    def test_garbage(self):
        with pytest.raises(DateParseError) as exc_info:
            parse_rfc2822("not a date")
        assert exc_info.value.value == "not a date"

    def test_error_is_value_error(self):
        with pytest.raises(ValueError):
            parse_rfc2822("")


class TestParseIso8601:
    def test_explicit_offset(self):
        parsed = parse_iso8601("2016-01-19T16:07:37+00:00")
        assert parsed == datetime(2016, 1, 19, 16, 7, 37, tzinfo=timezone.utc)

    def test_zulu(self):
        parsed = parse_iso8601("2016-01-19T08:07:37Z")
        assert parsed == datetime(2016, 1, 19, 8, 7, 37, tzinfo=timezone.utc)

    def test_naive(self):
        assert parse_iso8601("2016-01-19T08:07:37") == datetime(2016, 1, 19, 8, 7, 37)

    def test_garbage(self):
        with pytest.raises(DateParseError, match="ISO 8601"):
            parse_iso8601("19/01/2016")


# ---------------------------------------------------------------------------
# Leap years
# ---------------------------------------------------------------------------


class TestIsLeapYear:
    @pytest.mark.parametrize(
        "year, expected",
        [(1900, False), (2000, True), (2001, False), (2012, True), (2015, False)],
    )
    def test_years(self, year, expected):
        assert is_leap_year(date(year, 2, 1)) is expected

    def test_accepts_int(self):
        assert is_leap_year(2024) is True

    def test_accepts_datetime(self):
        assert is_leap_year(datetime(2100, 1, 1)) is False


# ---------------------------------------------------------------------------
# Time spans
# ---------------------------------------------------------------------------


class TestTimeSpanToString:
    START = datetime(2000, 2, 1, 10, 0, 0)

    @pytest.mark.parametrize(
        "end, expected",
        [
            (datetime(2000, 2, 1, 11, 0, 0), "01:00:00.000"),
            (datetime(2000, 2, 1, 10, 30, 0), "00:30:00.000"),
            (datetime(2000, 2, 1, 10, 0, 20), "00:00:20.000"),
            (datetime(2000, 2, 1, 10, 0, 0, 250_000), "00:00:00.250"),
            (datetime(2000, 2, 1, 15, 20, 10, 453_000), "05:20:10.453"),
        ],
    )
    def test_spans(self, end, expected):
        assert time_span_to_string(self.START, end) == expected

    def test_order_does_not_matter(self):
        end = datetime(2000, 2, 1, 11, 30, 0)
        assert time_span_to_string(end, self.START) == "01:30:00.000"

    def test_borrows_across_units(self):
        start = datetime(2000, 2, 1, 10, 59, 59, 900_000)
        end = datetime(2000, 2, 1, 11, 0, 0, 100_000)
        assert time_span_to_string(start, end) == "00:00:00.200"

    def test_over_a_day(self):
        end = self.START + timedelta(days=1, hours=2)
        assert time_span_to_string(self.START, end) == "26:00:00.000"


# ---------------------------------------------------------------------------
# Clock hands
# ---------------------------------------------------------------------------


class TestAngleBetweenClockHands:
    @pytest.mark.parametrize(
        "moment, expected",
        [
            (datetime(2016, 3, 5, 0, 0, tzinfo=timezone.utc), 0),
            (datetime(2016, 4, 5, 3, 0, tzinfo=timezone.utc), math.pi / 2),
            (datetime(2016, 4, 5, 18, 0, tzinfo=timezone.utc), math.pi),
            (datetime(2016, 4, 5, 21, 0, tzinfo=timezone.utc), math.pi / 2),
        ],
    )
    def test_whole_hours(self, moment, expected):
        assert angle_between_clock_hands(moment) == pytest.approx(expected)

    def test_half_past(self):
        # 3:30 -> hour hand 105 deg, minute hand 180 deg
        moment = datetime(2016, 4, 5, 3, 30, tzinfo=timezone.utc)
        assert angle_between_clock_hands(moment) == pytest.approx(math.radians(75))

    def test_returns_smaller_angle(self):
        # 9:00 is 270 deg one way, 90 deg the other
        moment = datetime(2016, 4, 5, 9, 0, tzinfo=timezone.utc)
        assert angle_between_clock_hands(moment) == pytest.approx(math.pi / 2)

    def test_converts_to_utc(self):
        moment = datetime(2016, 4, 5, 6, 0, tzinfo=timezone(timedelta(hours=3)))
        assert angle_between_clock_hands(moment) == pytest.approx(math.pi / 2)

    def test_naive_is_utc(self):
        assert angle_between_clock_hands(datetime(2016, 4, 5, 18, 0)) == pytest.approx(math.pi)
