"""Date and time helpers.

- parse_rfc2822 / parse_iso8601 -> datetime
- is_leap_year                  -> Gregorian leap year test
- time_span_to_string           -> 'HH:mm:ss.sss' span between two datetimes
- angle_between_clock_hands     -> radians between the hands of an analog clock
"""

from __future__ import annotations

import math
import re
from datetime import date, datetime, timezone
from email.utils import parsedate_to_datetime

__all__ = [
    "DateParseError",
    "parse_rfc2822",
    "parse_iso8601",
    "is_leap_year",
    "time_span_to_string",
    "angle_between_clock_hands",
]

# 'GMT+01', 'GMT-0530' -> numeric offset understood by email.utils
_GMT_OFFSET_RE = re.compile(r"\bGMT(?P<sign>[+-])(?P<hours>\d{1,2})(?::?(?P<minutes>\d{2}))?\b")

# Long forms email.utils does not accept, e.g. 'December 17, 1995 03:24:00'
_FALLBACK_FORMATS = (
    "%B %d, %Y %H:%M:%S",
    "%B %d, %Y",
    "%b %d, %Y %H:%M:%S",
)


class DateParseError(ValueError):
    """Raised when a date string cannot be parsed."""

    def __init__(self, value: str, kind: str) -> None:
        super().__init__(f"Cannot parse {kind} date: {value!r}")
        self.value = value
        self.kind = kind


def _normalize_gmt_offset(value: str) -> str:
    def _replace(match: re.Match[str]) -> str:
        hours = int(match.group("hours"))
        minutes = int(match.group("minutes") or 0)
        return f"{match.group('sign')}{hours:02d}{minutes:02d}"

    return _GMT_OFFSET_RE.sub(_replace, value)


def parse_rfc2822(value: str) -> datetime:
    """Parse an RFC 2822 date such as 'Tue, 26 Jan 2016 13:48:02 GMT'.

    A 'GMT+hh[mm]' suffix is read as a numeric offset. The long form
    'December 17, 1995 03:24:00' is accepted too and yields a naive datetime.
    """
    text = value.strip()
    try:
        return parsedate_to_datetime(_normalize_gmt_offset(text))
    except (TypeError, ValueError):
        pass

    for fmt in _FALLBACK_FORMATS:
        try:
            return datetime.strptime(text, fmt)
        except ValueError:
            continue
    raise DateParseError(value, "RFC 2822")


def parse_iso8601(value: str) -> datetime:
    """Parse an ISO 8601 date such as '2016-01-19T08:07:37Z'."""
    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        raise DateParseError(value, "ISO 8601") from None


def is_leap_year(value: date | int) -> bool:
    """Return True if the year of *value* (a date or a year number) is a leap year."""
    year = value if isinstance(value, int) else value.year
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def time_span_to_string(start: datetime, end: datetime) -> str:
    """Format the absolute span between two datetimes as 'HH:mm:ss.sss'."""
    span = abs(end - start)
    total_ms = span.days * 86_400_000 + span.seconds * 1000 + span.microseconds // 1000
    hours, rest = divmod(total_ms, 3_600_000)
    minutes, rest = divmod(rest, 60_000)
    seconds, millis = divmod(rest, 1000)
    return f"{hours:02d}:{minutes:02d}:{seconds:02d}.{millis:03d}"


def angle_between_clock_hands(moment: datetime) -> float:
    """Return the smaller angle (radians) between the hands for the UTC time of *moment*.

    Naive datetimes are taken to be UTC.
    """
    if moment.tzinfo is not None:
        moment = moment.astimezone(timezone.utc)
    hours = moment.hour % 12
    minutes = moment.minute

    # hour hand: 0.5 deg per minute, minute hand: 6 deg per minute
    angle = abs(0.5 * (60 * hours + minutes) - 6 * minutes)
    if angle > 180:
        angle = 360 - angle
    return math.radians(angle)
