"""Internal utilities for gzctime.

This module contains private implementation details:
    - Calendar constants and month tables
    - Integer calendar arithmetic (floor modulo, leap years, weeks)
    - Range validation helpers

Note: This module is not part of the public API.
"""

from __future__ import annotations

from gzctime._internal.calendar import floor_modulo, is_leap_year
from gzctime._internal.validation import (
    validate_clock,
    validate_day,
    validate_epoch,
    validate_month,
    validate_range,
)

__all__: list[str] = [
    "floor_modulo",
    "is_leap_year",
    "validate_clock",
    "validate_day",
    "validate_epoch",
    "validate_month",
    "validate_range",
]
