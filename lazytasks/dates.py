"""Date and time helpers for lazytasks.

Thin, eager functions around the standard library's datetime support:
parsing the two common textual formats, and a few calendar and clock
calculations.
"""

import calendar
import logging
import math
import re
from datetime import date, datetime, timedelta, timezone
from email.utils import parsedate_to_datetime
from typing import Union

logger = logging.getLogger(__name__)

# "GMT+01", "UTC-0530", "GMT+05:30" at the end of an RFC 2822 string
_GMT_OFFSET = re.compile(r"\b(?:GMT|UTC)([+-])(\d{1,2}):?(\d{2})?$")

# Long-form dates browsers accept alongside RFC 2822
_LONG_FORMATS = (
    "%B %d, %Y %H:%M:%S",
    "%b %d, %Y %H:%M:%S",
    "%B %d, %Y",
)


class ParseError(ValueError):
    """Raised when a date string cannot be parsed."""
    pass


def parse_rfc2822(value: str) -> datetime:
    """Parse an RFC 2822 date string.

    See https://tools.ietf.org/html/rfc2822#page-14

    Args:
        value: Date string such as 'Tue, 26 Jan 2016 13:48:02 GMT'

    Returns:
        datetime, timezone-aware when the string carries a zone

    Raises:
        ParseError: If the string is not a recognizable date

    Example:
        >>> parse_rfc2822('Sun, 17 May 1998 03:00:00 GMT+01').utcoffset()
        datetime.timedelta(seconds=3600)
    """
    text = _GMT_OFFSET.sub(
        lambda m: f"{m.group(1)}{int(m.group(2)):02d}{m.group(3) or '00'}",
        value.strip(),
    )

    try:
        return parsedate_to_datetime(text)
    except (TypeError, ValueError):
        # Older interpreters raise TypeError on unparseable input
        logger.debug("%r is not strict RFC 2822, trying long formats", value)

    for fmt in _LONG_FORMATS:
        try:
            return datetime.strptime(text, fmt)
        except ValueError:
            continue

    raise ParseError(f"Not an RFC 2822 date: {value!r}")


def parse_iso8601(value: str) -> datetime:
    """Parse an ISO 8601 date string.

    See https://en.wikipedia.org/wiki/ISO_8601

    Args:
        value: Date string such as '2016-01-19T16:07:37+00:00' or
            '2016-01-19T08:07:37Z'

    Returns:
        datetime, timezone-aware when the string carries an offset

    Raises:
        ParseError: If the string is not ISO 8601
    """
    text = value.strip()
    if text[-1:] in ("Z", "z"):
        text = text[:-1] + "+00:00"

    try:
        return datetime.fromisoformat(text)
    except ValueError as e:
        raise ParseError(f"Not an ISO 8601 date: {value!r}") from e


def is_leap_year(value: Union[date, datetime]) -> bool:
    """Check if the year of the given date is a leap year.

    Divisible by 4 and not by 100, or divisible by 400.
    """
    return calendar.isleap(value.year)


def timespan_to_string(start: datetime, end: datetime) -> str:
    """Format the time between two datetimes as "HH:mm:ss.sss".

    Hours are not wrapped at 24, so a span of 26 hours formats as "26:...".

    Args:
        start: Start of the span
        end: End of the span, not before start

    Returns:
        Formatted span, e.g. "05:20:10.453"

    Raises:
        ValueError: If end is before start
    """
    span = end - start
    if span < timedelta(0):
        raise ValueError(f"End {end} is before start {start}")

    total_ms = span // timedelta(milliseconds=1)
    hours, remainder = divmod(total_ms, 3_600_000)
    minutes, remainder = divmod(remainder, 60_000)
    seconds, millis = divmod(remainder, 1000)
    return f"{hours:02d}:{minutes:02d}:{seconds:02d}.{millis:03d}"


def angle_between_clock_hands(value: datetime) -> float:
    """Return the angle in radians between the hands of an analog clock.

    Uses the UTC time of ``value``; naive datetimes are taken as UTC. The
    result is the smaller of the two angles, in [0, pi].
    See https://en.wikipedia.org/wiki/Clock_angle_problem
    """
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc)

    # Hour hand moves 30 degrees per hour plus 0.5 per minute
    hour_hand = 30 * (value.hour % 12) + 0.5 * value.minute
    minute_hand = 6 * value.minute
    angle = abs(hour_hand - minute_hand)
    return math.radians(min(angle, 360 - angle))
