"""Internal constants for gzctime.

These constants define the calendar periods, the pivot used by the
overflow-safe converter and the sentinel maxima of the fixed-width
calendar schema. This module is not part of the public API.
"""

from __future__ import annotations

# Time unit conversions
SECONDS_PER_MINUTE: int = 60
MINUTES_PER_HOUR: int = 60
HOURS_PER_DAY: int = 24
SECONDS_PER_HOUR: int = MINUTES_PER_HOUR * SECONDS_PER_MINUTE
SECONDS_PER_DAY: int = HOURS_PER_DAY * SECONDS_PER_HOUR  # 86_400
DAYS_PER_WEEK: int = 7
SECONDS_PER_WEEK: int = DAYS_PER_WEEK * SECONDS_PER_DAY

# Gregorian leap cycle blocks. Each block ends with the year that carries
# the block's leap rule, e.g. the 4-year block 2001-2004 ends with 2004.
DAYS_PER_NORMAL_YEAR: int = 365
DAYS_PER_4_YEARS: int = 4 * DAYS_PER_NORMAL_YEAR + 1  # 1461
DAYS_PER_100_YEARS: int = 25 * DAYS_PER_4_YEARS - 1  # 36524
DAYS_PER_400_YEARS: int = 4 * DAYS_PER_100_YEARS + 1  # 146097

SECONDS_PER_NORMAL_YEAR: int = DAYS_PER_NORMAL_YEAR * SECONDS_PER_DAY
SECONDS_PER_4_YEARS: int = DAYS_PER_4_YEARS * SECONDS_PER_DAY
SECONDS_PER_100_YEARS: int = DAYS_PER_100_YEARS * SECONDS_PER_DAY
SECONDS_PER_400_YEARS: int = DAYS_PER_400_YEARS * SECONDS_PER_DAY

# Epoch and pivot
EPOCH_YEAR: int = 1970
PIVOT_YEAR: int = 2001  # first year of a 400-year cycle, January 1 is a Monday
PIVOT_EPOCH_SECONDS: int = 978_307_200  # 2001-01-01 00:00:00 UTC
PIVOT_CYCLE_INDEX: int = 5  # 2001 = 400 * 5 + 1
WRAP_EPOCH_SECONDS: int = 1_893_456_000  # 2030-01-01 00:00:00 UTC

# Days in each month (non-leap year)
DAYS_IN_MONTH: tuple[int, ...] = (
    0,   # Placeholder for 1-indexed access
    31,  # January
    28,  # February (non-leap)
    31,  # March
    30,  # April
    31,  # May
    30,  # June
    31,  # July
    31,  # August
    30,  # September
    31,  # October
    30,  # November
    31,  # December
)


def _cumulative_month_seconds(leap: bool) -> tuple[int, ...]:
    table = [0]
    for month in range(1, 12):
        days = DAYS_IN_MONTH[month] + (1 if leap and month == 2 else 0)
        table.append(table[-1] + days * SECONDS_PER_DAY)
    return tuple(table)


# Seconds from January 1 00:00:00 to the first of each month (0-indexed by
# month - 1), indexed first by the leap year predicate.
SECONDS_TILL_MONTH: tuple[tuple[int, ...], tuple[int, ...]] = (
    _cumulative_month_seconds(False),
    _cumulative_month_seconds(True),
)

# Offset limits
MIN_OFFSET_HOURS: int = -12
MAX_OFFSET_HOURS: int = 12

# Sentinel maxima of the fixed-width schema
INT8_MAX: int = 0x7F
UINT8_MAX: int = 0xFF
UINT16_MAX: int = 0xFFFF
INT32_MAX: int = 0x7FFF_FFFF
UINT32_MAX: int = 0xFFFF_FFFF
UINT64_MAX: int = 0xFFFF_FFFF_FFFF_FFFF

SUPPORTED_EPOCH_BITS: tuple[int, ...] = (32, 64)


__all__ = [
    "SECONDS_PER_MINUTE",
    "MINUTES_PER_HOUR",
    "HOURS_PER_DAY",
    "SECONDS_PER_HOUR",
    "SECONDS_PER_DAY",
    "DAYS_PER_WEEK",
    "SECONDS_PER_WEEK",
    "DAYS_PER_NORMAL_YEAR",
    "DAYS_PER_4_YEARS",
    "DAYS_PER_100_YEARS",
    "DAYS_PER_400_YEARS",
    "SECONDS_PER_NORMAL_YEAR",
    "SECONDS_PER_4_YEARS",
    "SECONDS_PER_100_YEARS",
    "SECONDS_PER_400_YEARS",
    "EPOCH_YEAR",
    "PIVOT_YEAR",
    "PIVOT_EPOCH_SECONDS",
    "PIVOT_CYCLE_INDEX",
    "WRAP_EPOCH_SECONDS",
    "DAYS_IN_MONTH",
    "SECONDS_TILL_MONTH",
    "MIN_OFFSET_HOURS",
    "MAX_OFFSET_HOURS",
    "INT8_MAX",
    "UINT8_MAX",
    "UINT16_MAX",
    "INT32_MAX",
    "UINT32_MAX",
    "UINT64_MAX",
    "SUPPORTED_EPOCH_BITS",
]
