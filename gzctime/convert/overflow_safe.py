"""Pure integer epoch converter based on the Gregorian 400-year cycle.

The epoch value is re-based to 2001-01-01 00:00:00 UTC, the first second
of a 400-year cycle and a Monday, and then decomposed by floor modulo into
400-year, 100-year, 4-year and single-year blocks. Every block ends with
the year that carries its leap rule, so only the last block of each kind
can hold an extra day.

With a 32-bit epoch width the counter is read relative to the 2030 epoch
(wrapping arithmetic), which moves the usable window to roughly
1962-2098 instead of 1901-2038.
"""

from __future__ import annotations

from gzctime._internal.calendar import floor_modulo, is_leap_year, wrap_signed
from gzctime._internal.constants import (
    DAYS_PER_4_YEARS,
    DAYS_PER_100_YEARS,
    DAYS_PER_400_YEARS,
    DAYS_PER_NORMAL_YEAR,
    DAYS_PER_WEEK,
    INT32_MAX,
    PIVOT_CYCLE_INDEX,
    PIVOT_EPOCH_SECONDS,
    PIVOT_YEAR,
    SECONDS_PER_4_YEARS,
    SECONDS_PER_100_YEARS,
    SECONDS_PER_400_YEARS,
    SECONDS_PER_DAY,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
    SECONDS_PER_NORMAL_YEAR,
    SECONDS_PER_WEEK,
    SECONDS_TILL_MONTH,
    WRAP_EPOCH_SECONDS,
)
from gzctime._internal.validation import validate_epoch, validate_int
from gzctime.convert.base import EpochConverter
from gzctime.core.calendar import CalendarInstant
from gzctime.errors import RangeError
from gzctime.units.dst import Dst
from gzctime.units.timezone import ResolvedZone

# Seconds between the pivot and the 2030 epoch used by the 32-bit window
_WRAP_TO_PIVOT: int = WRAP_EPOCH_SECONDS - PIVOT_EPOCH_SECONDS


class OverflowSafeConverter(EpochConverter):
    """Epoch converter using only integer floor modulo arithmetic.

    Examples:
        >>> conv = OverflowSafeConverter()
        >>> cal = conv.to_calendar(978307200, ResolvedZone.utc())
        >>> (cal.year, cal.month, cal.day, cal.day_of_week, cal.calendar_week)
        (2001, 1, 1, 1, 1)
        >>> conv.to_epoch(cal)
        978307200
    """

    name = "overflow_safe"

    def _to_pivot(self, epoch_seconds: int) -> int:
        """Return seconds since the pivot for an epoch value."""
        validate_int("epoch_seconds", epoch_seconds)
        validate_epoch(epoch_seconds, self._epoch_bits)
        if self._epoch_bits == 32:
            time32 = wrap_signed(epoch_seconds - WRAP_EPOCH_SECONDS, 32)
            return time32 + _WRAP_TO_PIVOT
        return epoch_seconds - PIVOT_EPOCH_SECONDS

    def _from_pivot(self, time64: int) -> int:
        """Return the epoch value for seconds since the pivot."""
        if self._epoch_bits == 32:
            time32 = time64 - _WRAP_TO_PIVOT
            low, high = self.bounds
            if time32 < low or time32 > high:
                raise RangeError(
                    "calendar value lies outside the 32-bit window around the 2030 epoch"
                )
            return wrap_signed(time32 + WRAP_EPOCH_SECONDS, 32)
        return validate_epoch(time64 + PIVOT_EPOCH_SECONDS, self._epoch_bits)

    def to_calendar(self, epoch_seconds: int, zone: ResolvedZone) -> CalendarInstant:
        time64 = self._to_pivot(epoch_seconds) + zone.deviation_seconds

        k, block400 = floor_modulo(time64, SECONDS_PER_400_YEARS)
        j, block100 = floor_modulo(block400, SECONDS_PER_100_YEARS)
        if j == 4:
            # last day of a leap 400th year
            j, block100 = 3, block100 + SECONDS_PER_100_YEARS
        i, block4 = floor_modulo(block100, SECONDS_PER_4_YEARS)
        h, block1 = floor_modulo(block4, SECONDS_PER_NORMAL_YEAR)
        if h == 4:
            # last day of a leap 4th year
            h, block1 = 3, block1 + SECONDS_PER_NORMAL_YEAR

        days_before_year = (
            k * DAYS_PER_400_YEARS
            + j * DAYS_PER_100_YEARS
            + i * DAYS_PER_4_YEARS
            + h * DAYS_PER_NORMAL_YEAR
        )
        year = (k + PIVOT_CYCLE_INDEX) * 400 + j * 100 + i * 4 + h + 1
        if year < -INT32_MAX - 1 or year >= INT32_MAX:
            raise RangeError(
                f"epoch {epoch_seconds} falls in year {year}, beyond a signed 32-bit year"
            )

        till_month = SECONDS_TILL_MONTH[is_leap_year(year)]
        month_index = 11
        while block1 < till_month[month_index]:
            month_index -= 1
        block_month = block1 - till_month[month_index]

        day, block_day = floor_modulo(block_month, SECONDS_PER_DAY)
        hour, block_hour = floor_modulo(block_day, SECONDS_PER_HOUR)
        minute, second = floor_modulo(block_hour, SECONDS_PER_MINUTE)
        yday = block1 // SECONDS_PER_DAY + 1

        weeks, block_week = floor_modulo(time64, SECONDS_PER_WEEK)
        wday = block_week // SECONDS_PER_DAY + 1
        year_weeks, jan1 = floor_modulo(days_before_year, DAYS_PER_WEEK)
        week = weeks - year_weeks + 1
        if jan1 >= 4:
            week -= 1

        return CalendarInstant._from_internal(
            year,
            month_index + 1,
            day + 1,
            hour,
            minute,
            second,
            zone.dst,
            zone.offset,
            day_of_year=yday,
            day_of_week=wday,
            calendar_week=week,
        )

    def to_epoch(self, calendar: CalendarInstant) -> int:
        if not calendar.is_valid or not 1 <= calendar.month <= 12:
            raise RangeError(f"cannot convert {calendar!r} to epoch seconds")

        k, rem400 = floor_modulo(calendar.year - PIVOT_YEAR, 400)
        j, rem100 = floor_modulo(rem400, 100)
        i, h = floor_modulo(rem100, 4)

        time64 = (
            k * SECONDS_PER_400_YEARS
            + j * SECONDS_PER_100_YEARS
            + i * SECONDS_PER_4_YEARS
            + h * SECONDS_PER_NORMAL_YEAR
        )
        time64 += SECONDS_TILL_MONTH[is_leap_year(calendar.year)][calendar.month - 1]
        time64 += (calendar.day - 1) * SECONDS_PER_DAY
        time64 += calendar.hour * SECONDS_PER_HOUR
        time64 += calendar.minute * SECONDS_PER_MINUTE
        time64 += calendar.second
        time64 -= ResolvedZone(calendar.offset, Dst(calendar.dst)).deviation_seconds
        return self._from_pivot(time64)


__all__ = ["OverflowSafeConverter"]
