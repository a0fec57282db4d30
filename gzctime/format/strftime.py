"""strftime-style formatting and parsing of calendar values.

Supported Directives:
    %Y - Year, at least 4 digits (e.g., 2024, -0044)
    %m - 2-digit month (01-12)
    %d - 2-digit day (01-31)
    %H - 2-digit hour, 24-hour (00-23)
    %M - 2-digit minute (00-59)
    %S - 2-digit second (00-59)
    %j - 3-digit day of year (001-366)
    %u - Day of week (1 = Monday, 7 = Sunday)
    %V - 2-digit calendar week (00-53)
    %a, %A - Abbreviated and full weekday name
    %b, %B - Abbreviated and full month name
    %U - DST token (UTC, STD, DST)
    %z - UTC offset (+01:00, -05:30)
    %Z - Offset relative to UTC including DST (UTC, +02:00)
    %% - Literal %

Names come from gzctime.format.names and follow the language argument.
The GZC layout is ``"%Y-%m-%d#%H:%M:%S#%U#%z"`` for whole-hour offsets.

Functions:
    strftime: Format a CalendarInstant using a format string.
    strptime: Parse a string into a CalendarInstant using a format string.

Examples:
    >>> from gzctime.core.calendar import CalendarInstant
    >>> from gzctime.units.dst import Dst
    >>> cal = CalendarInstant(2023, 9, 20, 17, 17, 38, dst=Dst.DAYLIGHT, offset=1)
    >>> strftime(cal, "%A, %d. %B %Y %H:%M (%U, %Z)", "de")
    'Mittwoch, 20. September 2023 17:17 (DST, +02:00)'
    >>> strptime("2023-09-20#17:17:38#DST#+01:00", GZC_FORMAT) == cal
    True
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from gzctime.errors import ParseError

if TYPE_CHECKING:
    from gzctime.core.calendar import CalendarInstant

GZC_FORMAT = "%Y-%m-%d#%H:%M:%S#%U#%z"

# Mapping of format directives to their patterns for parsing
_PARSE_PATTERNS: dict[str, str] = {
    "%Y": r"(?P<year>-?\d{4,})",
    "%m": r"(?P<month>\d{2})",
    "%d": r"(?P<day>\d{2})",
    "%H": r"(?P<hour>\d{2})",
    "%M": r"(?P<minute>\d{2})",
    "%S": r"(?P<second>\d{2})",
    "%j": r"(?P<yday>\d{3})",
    "%u": r"(?P<wday>[1-7])",
    "%V": r"(?P<week>\d{2})",
    "%a": r"(?P<wname_abbr>[^\W\d_]+\.?)",
    "%A": r"(?P<wname>[^\W\d_]+)",
    "%b": r"(?P<mname_abbr>[^\W\d_]+\.?)",
    "%B": r"(?P<mname>[^\W\d_]+)",
    "%U": r"(?P<dst>UTC|STD|DST)",
    "%z": r"(?P<tz_offset>[+-]\d{2}:?\d{2})",
    "%Z": r"(?P<tz_name>UTC|[+-]\d{2}:\d{2})",
    "%%": r"%",
}

_SUPPORTED = ", ".join(_PARSE_PATTERNS)


def strftime(value: CalendarInstant, fmt: str, language: str | None = None) -> str:
    """Format a calendar value using a strftime-style format string.

    Args:
        value: The CalendarInstant to format.
        fmt: Format string with %-directives.
        language: Language tag for %a, %A, %b and %B.

    Raises:
        ValueError: If format contains unsupported directives.
        RangeError: If value is the INVALID sentinel.
    """
    from gzctime.errors import RangeError

    if not value.is_valid:
        raise RangeError("cannot format the invalid calendar value")

    result = []
    i = 0
    while i < len(fmt):
        if fmt[i] == "%" and i + 1 < len(fmt):
            result.append(_format_directive(value, fmt[i : i + 2], language))
            i += 2
        else:
            result.append(fmt[i])
            i += 1

    return "".join(result)


def _format_directive(value: CalendarInstant, directive: str, language: str | None) -> str:
    from gzctime.format.names import month_name, weekday_name
    from gzctime.units.dst import Dst

    if directive == "%%":
        return "%"
    elif directive == "%Y":
        if value.year >= 0:
            return f"{value.year:04d}"
        return f"-{abs(value.year):04d}"
    elif directive == "%m":
        return f"{value.month:02d}"
    elif directive == "%d":
        return f"{value.day:02d}"
    elif directive == "%H":
        return f"{value.hour:02d}"
    elif directive == "%M":
        return f"{value.minute:02d}"
    elif directive == "%S":
        return f"{value.second:02d}"
    elif directive == "%j":
        return f"{value.day_of_year:03d}"
    elif directive == "%u":
        return str(value.day_of_week)
    elif directive == "%V":
        return f"{value.calendar_week:02d}"
    elif directive == "%a":
        return weekday_name(value.day_of_week, language, abbreviated=True)
    elif directive == "%A":
        return weekday_name(value.day_of_week, language)
    elif directive == "%b":
        return month_name(value.month, language, abbreviated=True)
    elif directive == "%B":
        return month_name(value.month, language)
    elif directive == "%U":
        return Dst(value.dst).token
    elif directive == "%z":
        return str(value.offset)
    elif directive == "%Z":
        deviation = value.deviation
        return "UTC" if deviation.is_utc else str(deviation)
    else:
        raise ValueError(f"unsupported strftime directive: {directive}. Supported: {_SUPPORTED}")


def strptime(s: str, fmt: str) -> CalendarInstant:
    """Parse a string into a CalendarInstant using a format string.

    Missing time components default to 0, a missing %U to standard time and
    a missing offset to +00:00. Names, %j, %u and %V are matched and checked
    against the parsed date.

    Raises:
        ParseError: If the string doesn't match the format, a name is
            unknown, or a derived field disagrees with the date.
        ValueError: If format contains unsupported directives.

    Examples:
        >>> strptime("20.09.2023 17:17", "%d.%m.%Y %H:%M").minute
        17
        >>> strptime("2023-09-20#17:17:38#UTC#+13:00", GZC_FORMAT).offset.hours
        13
    """
    from gzctime.core.calendar import CalendarInstant
    from gzctime.errors import RangeError
    from gzctime.format.names import lookup_month, lookup_weekday
    from gzctime.units.dst import Dst
    from gzctime.units.timezone import TimeZoneOffset

    match = re.match(_format_to_regex(fmt), s)
    if not match:
        raise ParseError(f"string {s!r} does not match format {fmt!r}")
    groups = match.groupdict()

    try:
        month = int(groups["month"]) if groups.get("month") else None
        if month is None:
            name = groups.get("mname") or groups.get("mname_abbr")
            if name:
                month = lookup_month(name)
        weekday = None
        name = groups.get("wname") or groups.get("wname_abbr")
        if name:
            weekday = lookup_weekday(name)
    except KeyError as e:
        raise ParseError(f"unknown name {e.args[0]!r} in {s!r}") from None

    year = int(groups["year"]) if groups.get("year") else None
    day = int(groups["day"]) if groups.get("day") else None
    if year is None or month is None or day is None:
        raise ParseError(
            "strptime requires year, month, and day components. "
            f"Got: year={year}, month={month}, day={day}"
        )

    dst = Dst.from_token(groups["dst"]) if groups.get("dst") else Dst.STANDARD
    relative = dst is Dst.UNSPECIFIED
    offset = None
    try:
        if groups.get("tz_offset"):
            offset = TimeZoneOffset.from_string(groups["tz_offset"], relative=relative)
        elif groups.get("tz_name"):
            offset = TimeZoneOffset.from_string(groups["tz_name"], relative=True)
            if not relative:
                offset = offset.shifted(-dst.extra_hours)
        cal = CalendarInstant(
            year,
            month,
            day,
            int(groups.get("hour") or 0),
            int(groups.get("minute") or 0),
            int(groups.get("second") or 0),
            dst=dst,
            offset=offset,
        )
    except RangeError as e:
        raise ParseError(f"string {s!r} holds out-of-range fields: {e}") from e

    checks = (
        ("yday", cal.day_of_year),
        ("wday", cal.day_of_week),
        ("week", cal.calendar_week),
    )
    for key, actual in checks:
        if groups.get(key) and int(groups[key]) != actual:
            raise ParseError(f"{key} {groups[key]} does not match the date in {s!r}")
    if weekday is not None and weekday != cal.day_of_week:
        raise ParseError(f"weekday name does not match the date in {s!r}")
    return cal


def _format_to_regex(fmt: str) -> str:
    result = []
    i = 0
    while i < len(fmt):
        if fmt[i] == "%" and i + 1 < len(fmt):
            directive = fmt[i : i + 2]
            if directive not in _PARSE_PATTERNS:
                raise ValueError(
                    f"unsupported strptime directive: {directive}. Supported: {_SUPPORTED}"
                )
            result.append(_PARSE_PATTERNS[directive])
            i += 2
        else:
            result.append(re.escape(fmt[i]))
            i += 1

    return "^" + "".join(result) + "$"


__all__ = ["GZC_FORMAT", "strftime", "strptime"]
