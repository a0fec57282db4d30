"""gzctime: time instants with an explicit zone and daylight saving model.

gzctime converts epoch seconds into calendar views and back without
relying on the host's 32-bit time functions, and keeps the DST state of
every calendar value explicit.

Core Types:
    Instant: Absolute point in time as signed epoch seconds
    CalendarInstant: Wall clock fields tagged with offset and DST state
    Duration: Signed elapsed days, hours, minutes and seconds

Units:
    Dst: Daylight saving tri-state (UNSPECIFIED, STANDARD, DAYLIGHT)
    TimeZoneOffset: Signed hour + minute UTC offset
    Local, Utc, AsUtc, Explicit: Zone requests for calendar views

Conversion:
    ConverterConfig: Epoch width, algorithm and language settings
    get_converter: Build the configured epoch converter
    ZoneResolver: Resolve zone requests against a clock oracle

Format Functions:
    format_calendar / parse_calendar: GZC calendar strings
    format_duration / parse_duration: GZC duration strings
    strftime / strptime: Pattern based formatting

Exceptions:
    GzcTimeError: Base exception
    ParseError: Failed to parse string
    RangeError: Value outside its representable bounds
    AmbiguousDstError: Platform cannot determine DST

Example:
    >>> from gzctime import Explicit, Instant
    >>> Instant(1695223058).to_string(request=Explicit(0))
    '2023-09-20#15:17:38#UTC#+00:00'
"""

from __future__ import annotations

__version__ = "0.1.0"

# Core types
from gzctime.core.calendar import CalendarInstant
from gzctime.core.duration import Duration
from gzctime.core.instant import Instant

# Units
from gzctime.units.dst import Dst
from gzctime.units.timezone import TimeZoneOffset
from gzctime.units.zone_request import AS_UTC, LOCAL, UTC, AsUtc, Explicit, Local, Utc

# Conversion
from gzctime.config import ConverterConfig
from gzctime.convert import get_converter
from gzctime.zone import FixedClock, SystemClock, ZoneResolver

# Exceptions
from gzctime.errors import AmbiguousDstError, GzcTimeError, ParseError, RangeError

# Format functions
from gzctime.format import (
    format_calendar,
    format_duration,
    parse_calendar,
    parse_duration,
    strftime,
    strptime,
)

__all__: list[str] = [
    "__version__",
    # Core types
    "CalendarInstant",
    "Duration",
    "Instant",
    # Units
    "Dst",
    "TimeZoneOffset",
    "Local",
    "Utc",
    "AsUtc",
    "Explicit",
    "LOCAL",
    "UTC",
    "AS_UTC",
    # Conversion
    "ConverterConfig",
    "get_converter",
    "ZoneResolver",
    "SystemClock",
    "FixedClock",
    # Exceptions
    "GzcTimeError",
    "ParseError",
    "RangeError",
    "AmbiguousDstError",
    # Format functions
    "format_calendar",
    "parse_calendar",
    "format_duration",
    "parse_duration",
    "strftime",
    "strptime",
]
