"""Core time types.

This module provides the fundamental value types:
    - Instant: Absolute point in time as signed epoch seconds
    - CalendarInstant: Broken-down wall clock view tagged with zone and DST
    - Duration: Signed elapsed time split into days, hours, minutes, seconds
"""

from __future__ import annotations

from gzctime.core.calendar import CalendarInstant
from gzctime.core.duration import Duration
from gzctime.core.instant import Instant

__all__: list[str] = [
    "CalendarInstant",
    "Duration",
    "Instant",
]
