"""Calendar utilities for gzctime.

This module provides the integer building blocks shared by both epoch
converters and by CalendarInstant's derived fields: the leap year rule,
month lengths, floor modulo, ordinal days and the ISO-style calendar week.

Nothing here touches floating point or the platform's calendar routines.

This module is not part of the public API.
"""

from __future__ import annotations

from gzctime._internal.constants import DAYS_IN_MONTH, DAYS_PER_WEEK


def is_leap_year(year: int) -> bool:
    """Check if a year is a leap year in the proleptic Gregorian calendar.

    A year is a leap year if:
    - Divisible by 4, AND
    - NOT divisible by 100, unless also divisible by 400

    Examples:
        >>> is_leap_year(2000)  # Divisible by 400
        True
        >>> is_leap_year(1900)  # Divisible by 100 but not 400
        False
        >>> is_leap_year(2024)
        True
    """
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in a given month.

    Raises:
        ValueError: If month is not in 1-12.
    """
    if month < 1 or month > 12:
        raise ValueError(f"month must be 1-12, got {month}")

    if month == 2 and is_leap_year(year):
        return 29
    return DAYS_IN_MONTH[month]


def days_in_year(year: int) -> int:
    """Return 366 for leap years, 365 otherwise."""
    return 366 if is_leap_year(year) else 365


def floor_modulo(value: int, modulo: int) -> tuple[int, int]:
    """Split value into a quotient and a non-negative remainder.

    The quotient is the greatest integer not exceeding value / modulo, so
    the result always satisfies ``value == quotient * modulo + remainder``
    with ``0 <= remainder < modulo``, also for negative values. This is
    what distinguishes it from truncating division.

    A zero modulo yields ``(1, 0)`` instead of raising.

    Args:
        value: The dividend (any sign).
        modulo: The positive divisor.

    Returns:
        Tuple of (quotient, remainder).

    Examples:
        >>> floor_modulo(7, 3)
        (2, 1)
        >>> floor_modulo(-7, 3)
        (-3, 2)
        >>> floor_modulo(-6, 3)
        (-2, 0)
    """
    if modulo == 0:
        return 1, 0
    quotient, remainder = divmod(value, abs(modulo))
    return quotient, remainder


# Days before each month (cumulative), for non-leap years
# Index 0 is unused, months are 1-indexed
_DAYS_BEFORE_MONTH = (0, 0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334)


def day_of_year(year: int, month: int, day: int) -> int:
    """Return the 1-based day of the year (1-366)."""
    result = _DAYS_BEFORE_MONTH[month] + day
    if month > 2 and is_leap_year(year):
        result += 1
    return result


def ymd_to_ordinal(year: int, month: int, day: int) -> int:
    """Convert year, month, day to ordinal (days since year 1).

    The ordinal for 0001-01-01 is 1. Works for year 0 and negative years
    because ``//`` floors toward negative infinity.
    """
    y = year - 1
    days_before_year = y * 365 + y // 4 - y // 100 + y // 400
    return days_before_year + day_of_year(year, month, day)


def day_of_week(year: int, month: int, day: int) -> int:
    """Return the ISO day of the week, 1 for Monday through 7 for Sunday.

    Examples:
        >>> day_of_week(2023, 9, 20)
        3
        >>> day_of_week(2001, 1, 1)
        1
    """
    # 0001-01-01 (ordinal 1) was a Monday
    return (ymd_to_ordinal(year, month, day) - 1) % DAYS_PER_WEEK + 1


def calendar_week(yday: int, wday: int) -> int:
    """Return the calendar week from a day of year and a day of week.

    Weeks run Monday to Sunday. The week holding January 1 is week 1 when
    January 1 falls on Monday to Thursday. Otherwise the days before the
    first Monday belong to the last week of the previous year and are
    reported as week 0.

    Args:
        yday: Day of year, 1-366.
        wday: Day of week, 1 (Monday) to 7 (Sunday).

    Returns:
        Calendar week, 0-53.

    Examples:
        >>> calendar_week(1, 1)  # 2001-01-01, Monday
        1
        >>> calendar_week(1, 5)  # 2021-01-01, Friday
        0
    """
    jan1 = (wday - yday) % DAYS_PER_WEEK  # 0 = Monday
    week = (yday - 1 + jan1) // DAYS_PER_WEEK + 1
    if jan1 >= 4:
        week -= 1
    return week


def epoch_bounds(bits: int) -> tuple[int, int]:
    """Return the inclusive (min, max) of a signed epoch of the given width."""
    half = 1 << (bits - 1)
    return -half, half - 1


def wrap_signed(value: int, bits: int) -> int:
    """Wrap value into a two's complement integer of the given width."""
    span = 1 << bits
    half = span >> 1
    return (value + half) % span - half


__all__ = [
    "is_leap_year",
    "days_in_month",
    "days_in_year",
    "floor_modulo",
    "day_of_year",
    "ymd_to_ordinal",
    "day_of_week",
    "calendar_week",
    "epoch_bounds",
    "wrap_signed",
]
