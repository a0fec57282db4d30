"""Zone units and enumerations.

This module provides:
    - Dst: daylight saving tri-state
    - TimeZoneOffset: signed hour + minute UTC offset
    - ResolvedZone: offset and dst a calendar view is expressed in
    - ZoneRequest variants: Local, Utc, AsUtc, Explicit
"""

from __future__ import annotations

from gzctime.units.dst import Dst
from gzctime.units.timezone import ResolvedZone, TimeZoneOffset, utc_deviation
from gzctime.units.zone_request import (
    AS_UTC,
    LOCAL,
    UTC,
    AsUtc,
    Explicit,
    Local,
    Utc,
    ZoneRequest,
)

__all__: list[str] = [
    "Dst",
    "TimeZoneOffset",
    "ResolvedZone",
    "utc_deviation",
    "Local",
    "Utc",
    "AsUtc",
    "Explicit",
    "ZoneRequest",
    "LOCAL",
    "UTC",
    "AS_UTC",
]
