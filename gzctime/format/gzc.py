"""GZC (geographic zone calendar) string codec.

Calendar string:

    YYYY-MM-DD#hh:mm:ss#TOK#+hh:00

TOK is ``DST`` for daylight saving time, ``STD`` for standard time and
``UTC`` for an unspecified DST state whose offset is the relative
deviation from UTC. The offset always carries ``:00`` minutes, so
sub-hour offsets are written rounded toward zero.

Duration string:

    D{signed days}#hh:mm:ss

Only the days carry the sign; a negative duration shorter than a day is
written ``D-0#...``.

The non-strict parsers return the INVALID sentinel of their type on
failure; pass ``strict=True`` to get a ParseError instead.

Examples:
    >>> cal = parse_calendar("2023-09-20#17:17:38#DST#+01:00")
    >>> cal.hour, cal.dst.name, cal.offset.hours
    (17, 'DAYLIGHT', 1)
    >>> format_calendar(cal)
    '2023-09-20#17:17:38#DST#+01:00'
    >>> format_duration(parse_duration("D95#00:42:22"))
    'D95#00:42:22'
    >>> parse_calendar("2023-09-20#17:17:38#XYZ#+01:00").is_valid
    False
"""

from __future__ import annotations

import logging
import re
from typing import Union

from gzctime.core.calendar import CalendarInstant
from gzctime.core.duration import Duration
from gzctime.errors import GzcTimeError, ParseError, RangeError
from gzctime.units.dst import Dst
from gzctime.units.timezone import TimeZoneOffset

logger = logging.getLogger(__name__)

CALENDAR_PATTERN = re.compile(
    r"^(-?\d{4,})-(\d{2})-(\d{2})#(\d{2}):(\d{2}):(\d{2})#([^#]*)#([+-])(\d{2}):(\d{2})$"
)
DURATION_PATTERN = re.compile(r"^D([+-]?)(\d+)#(\d{2,}):(\d{2,}):(\d{2,})$")

DURATION_PREFIX = "D"


def format_calendar(cal: CalendarInstant) -> str:
    """Format a calendar value as a GZC calendar string.

    Raises:
        RangeError: If cal is the INVALID sentinel.
    """
    if not cal.is_valid:
        raise RangeError("cannot format the invalid calendar value")
    if cal.year < 0:
        year = f"-{abs(cal.year):04d}"
    else:
        year = f"{cal.year:04d}"
    offset = cal.offset
    sign = "-" if offset.hours < 0 else "+"
    return (
        f"{year}-{cal.month:02d}-{cal.day:02d}"
        f"#{cal.hour:02d}:{cal.minute:02d}:{cal.second:02d}"
        f"#{Dst(cal.dst).token}"
        f"#{sign}{abs(offset.hours):02d}:00"
    )


def parse_calendar(text: str, strict: bool = False) -> CalendarInstant:
    """Parse a GZC calendar string.

    Args:
        text: The string to parse.
        strict: Raise ParseError instead of returning INVALID.

    Raises:
        ParseError: Only when strict is True.
    """
    try:
        return _parse_calendar(text)
    except GzcTimeError as e:
        if strict:
            if isinstance(e, ParseError):
                raise
            raise ParseError(f"invalid calendar string {text!r}: {e}") from e
        logger.debug("calendar string %r rejected: %s", text, e)
        return CalendarInstant.INVALID


def _parse_calendar(text: str) -> CalendarInstant:
    if not isinstance(text, str):
        raise ParseError(f"expected str, got {type(text).__name__}")
    match = CALENDAR_PATTERN.match(text.strip())
    if not match:
        raise ParseError(f"not a GZC calendar string: {text!r}")

    year, month, day, hour, minute, second = (int(g) for g in match.group(1, 2, 3, 4, 5, 6))
    dst = Dst.from_token(match.group(7))
    if match.group(10) != "00":
        raise ParseError(f"GZC offsets carry whole hours only: {text!r}")
    offset_hours = int(match.group(9))
    if match.group(8) == "-":
        offset_hours = -offset_hours

    offset = TimeZoneOffset(offset_hours, relative=dst is Dst.UNSPECIFIED)
    return CalendarInstant(year, month, day, hour, minute, second, dst=dst, offset=offset)


def format_duration(dur: Duration) -> str:
    """Format a Duration as a GZC duration string.

    Raises:
        RangeError: If dur is the INVALID sentinel.
    """
    if not dur.is_valid:
        raise RangeError("cannot format the invalid duration")
    sign = "-" if dur.is_negative else ""
    return (
        f"{DURATION_PREFIX}{sign}{dur.days}"
        f"#{dur.hours:02d}:{dur.minutes:02d}:{dur.seconds:02d}"
    )


def parse_duration(text: str, strict: bool = False) -> Duration:
    """Parse a GZC duration string.

    Args:
        text: The string to parse.
        strict: Raise ParseError instead of returning Duration.INVALID.

    Raises:
        ParseError: Only when strict is True.
    """
    try:
        return _parse_duration(text)
    except GzcTimeError as e:
        if strict:
            if isinstance(e, ParseError):
                raise
            raise ParseError(f"invalid duration string {text!r}: {e}") from e
        logger.debug("duration string %r rejected: %s", text, e)
        return Duration.INVALID


def _parse_duration(text: str) -> Duration:
    if not isinstance(text, str):
        raise ParseError(f"expected str, got {type(text).__name__}")
    match = DURATION_PATTERN.match(text.strip())
    if not match:
        raise ParseError(f"not a GZC duration string: {text!r}")
    sign = -1 if match.group(1) == "-" else 1
    days, hours, minutes, seconds = (int(g) for g in match.group(2, 3, 4, 5))
    return Duration(days, hours, minutes, seconds, sign)


def parse(text: str, strict: bool = False) -> Union[CalendarInstant, Duration]:
    """Parse either GZC string kind, dispatching on a leading ``D``.

    Examples:
        >>> parse("D-0#00:00:30").total_seconds
        -30
        >>> parse("2001-01-01#00:00:00#STD#+00:00").day_of_week
        1
    """
    if isinstance(text, str) and text.lstrip().startswith(DURATION_PREFIX):
        return parse_duration(text, strict)
    return parse_calendar(text, strict)


__all__ = [
    "CALENDAR_PATTERN",
    "DURATION_PATTERN",
    "format_calendar",
    "parse_calendar",
    "format_duration",
    "parse_duration",
    "parse",
]
