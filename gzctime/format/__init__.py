"""Formatting and parsing.

This module provides:
    - GZC calendar and duration strings (format_calendar, parse_calendar,
      format_duration, parse_duration, parse)
    - strftime-style formatting and parsing (strftime, strptime)
    - localized weekday and month names (weekday_name, month_name)
"""

from __future__ import annotations

from gzctime.format.gzc import (
    format_calendar,
    format_duration,
    parse,
    parse_calendar,
    parse_duration,
)
from gzctime.format.names import month_name, weekday_name
from gzctime.format.strftime import GZC_FORMAT, strftime, strptime

__all__: list[str] = [
    "format_calendar",
    "parse_calendar",
    "format_duration",
    "parse_duration",
    "parse",
    "strftime",
    "strptime",
    "GZC_FORMAT",
    "weekday_name",
    "month_name",
]
