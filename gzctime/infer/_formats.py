"""Format templates for the free-text scanner.

Each template pairs a regex with an extractor that turns the match into
broken-down fields (year, month, day, hour, minute, second and an optional
offset string).

Internal module - use scan() from gzctime.infer instead.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, Optional, Pattern

Fields = dict[str, Optional[int | str]]

_TIME = r"(\d{1,2}):(\d{2})(?::(\d{2}))?\s*([AaPp][Mm])?"
_OFFSET = r"\s*([Zz]|UTC|GMT|[+-]\d{2}(?::?\d{2})?)?"


@dataclass(frozen=True)
class FormatTemplate:
    """A format template for matching free-text date strings.

    Attributes:
        name: Format name reported by scan().
        pattern: Compiled regex.
        confidence: Base confidence score (0.0 to 1.0).
        extractor: Turns a match into broken-down fields.
    """

    name: str
    pattern: Pattern[str]
    confidence: float
    extractor: Callable[[re.Match[str], str], Fields]


def month_from_name(name: str) -> int | None:
    """Resolve an English, German or French month name or abbreviation."""
    from gzctime.format.names import lookup_month

    for candidate in (name, name.rstrip(".")):
        try:
            return lookup_month(candidate)
        except KeyError:
            pass
    name = name.rstrip(".")
    # "Sept" and friends: unique prefixes of at least three letters
    if len(name) >= 3:
        from gzctime.format.names import month_name

        for month in range(1, 13):
            if month_name(month).casefold().startswith(name.casefold()):
                return month
    return None


def _clock(match: re.Match[str], first: int) -> Fields:
    """Extract hour, minute, second and AM/PM from _TIME groups at `first`."""
    if match.group(first) is None:
        return {"hour": 0, "minute": 0, "second": 0}
    hour = int(match.group(first))
    ampm = match.group(first + 3)
    if ampm:
        if ampm.upper() == "AM":
            if hour == 12:
                hour = 0
        elif hour != 12:
            hour += 12
    return {
        "hour": hour,
        "minute": int(match.group(first + 1)),
        "second": int(match.group(first + 2) or 0),
    }


def _with_offset(fields: Fields, match: re.Match[str]) -> Fields:
    fields["tz_string"] = match.group(match.re.groups)
    return fields


# ISO style: 2024-01-15, 2024-01-15T14:30:00+01:00, 2024-01-15 14:30
_ISO_PATTERN = re.compile(
    r"^(-?\d{4})-(\d{2})-(\d{2})(?:[Tt\s]+" + _TIME + r")?" + _OFFSET + r"$"
)


def _extract_iso(match: re.Match[str], date_order: str) -> Fields:
    fields: Fields = {
        "year": int(match.group(1)),
        "month": int(match.group(2)),
        "day": int(match.group(3)),
    }
    fields.update(_clock(match, 4))
    return _with_offset(fields, match)


# Numeric with separators: 15.01.2024, 01/15/2024, 2024/01/15, 15-01-2024
_NUMERIC_PATTERN = re.compile(
    r"^(\d{1,4})([./-])(\d{1,2})\2(\d{1,4})(?:,?\s+" + _TIME + r")?" + _OFFSET + r"$"
)


def _extract_numeric(match: re.Match[str], date_order: str) -> Fields:
    g1, sep, g2, g3 = match.group(1), match.group(2), match.group(3), match.group(4)
    if len(g1) == 4:
        year, month, day = g1, g2, g3
    elif sep == "." or date_order == "DMY":
        day, month, year = g1, g2, g3
    else:
        month, day, year = g1, g2, g3
    year_value = int(year)
    if len(year) <= 2:
        year_value += 2000
    fields: Fields = {"year": year_value, "month": int(month), "day": int(day)}
    fields.update(_clock(match, 5))
    return _with_offset(fields, match)


# Named month first: Jan 15, 2024 2:30 PM
_NAMED_MDY_PATTERN = re.compile(
    r"^([^\W\d_]{3,}\.?)\s+(\d{1,2})(?:,|,?\s)\s*(-?\d{4})(?:,?\s+" + _TIME + r")?"
    + _OFFSET + r"$"
)


def _extract_named_mdy(match: re.Match[str], date_order: str) -> Fields:
    fields: Fields = {
        "year": int(match.group(3)),
        "month": month_from_name(match.group(1)),
        "day": int(match.group(2)),
    }
    fields.update(_clock(match, 4))
    return _with_offset(fields, match)


# Day first: 15 January 2024, 20. September 2023 17:17
_NAMED_DMY_PATTERN = re.compile(
    r"^(\d{1,2})\.?\s+([^\W\d_]{3,}\.?),?\s+(-?\d{4})(?:,?\s+" + _TIME + r")?"
    + _OFFSET + r"$"
)


def _extract_named_dmy(match: re.Match[str], date_order: str) -> Fields:
    fields: Fields = {
        "year": int(match.group(3)),
        "month": month_from_name(match.group(2)),
        "day": int(match.group(1)),
    }
    fields.update(_clock(match, 4))
    return _with_offset(fields, match)


# Templates list - ordered by specificity (most specific first)
TEMPLATES: tuple[FormatTemplate, ...] = (
    FormatTemplate("iso", _ISO_PATTERN, 1.0, _extract_iso),
    FormatTemplate("named_month_mdy", _NAMED_MDY_PATTERN, 0.95, _extract_named_mdy),
    FormatTemplate("named_month_dmy", _NAMED_DMY_PATTERN, 0.95, _extract_named_dmy),
    FormatTemplate("numeric", _NUMERIC_PATTERN, 0.8, _extract_numeric),
)


__all__ = [
    "Fields",
    "FormatTemplate",
    "TEMPLATES",
    "month_from_name",
]
