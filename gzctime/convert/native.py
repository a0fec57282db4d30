"""Epoch converter over the platform calendar routines.

Breaks epoch seconds down with ``time.gmtime`` and recomposes them with
``calendar.timegm``. Both routines are limited by the platform: values
they reject are reported as RangeError.
"""

from __future__ import annotations

import calendar as _calendar
import time

from gzctime._internal.calendar import calendar_week
from gzctime._internal.constants import SECONDS_PER_HOUR, SECONDS_PER_MINUTE
from gzctime._internal.validation import validate_epoch, validate_int
from gzctime.convert.base import EpochConverter
from gzctime.core.calendar import CalendarInstant
from gzctime.errors import RangeError
from gzctime.units.dst import Dst
from gzctime.units.timezone import ResolvedZone


def _gmtime(seconds: int) -> time.struct_time:
    try:
        return time.gmtime(seconds)
    except (OverflowError, OSError, ValueError) as e:
        raise RangeError(f"platform cannot break down epoch value {seconds}: {e}") from e


def _timegm(fields: tuple[int, ...]) -> int:
    try:
        return _calendar.timegm(fields)
    except (OverflowError, OSError, ValueError) as e:
        raise RangeError(f"platform cannot recompose {fields[:6]}: {e}") from e


class NativeConverter(EpochConverter):
    """Epoch converter using ``time.gmtime`` and ``calendar.timegm``.

    The zone deviation is overlaid by shifting the broken-down hour and
    minute fields and re-normalizing them through ``calendar.timegm``.

    Examples:
        >>> conv = NativeConverter(epoch_bits=32)
        >>> conv.to_calendar(0, ResolvedZone.utc()).year
        1970
        >>> conv.to_calendar(2**31, ResolvedZone.utc())
        Traceback (most recent call last):
        ...
        gzctime.errors.RangeError: epoch value 2147483648 is outside the 32-bit range [-2147483648, 2147483647]
    """

    name = "native"

    def to_calendar(self, epoch_seconds: int, zone: ResolvedZone) -> CalendarInstant:
        validate_int("epoch_seconds", epoch_seconds)
        validate_epoch(epoch_seconds, self._epoch_bits)

        tm = _gmtime(epoch_seconds)
        deviation = zone.deviation_seconds
        if deviation:
            sign = -1 if deviation < 0 else 1
            hours, rest = divmod(abs(deviation), SECONDS_PER_HOUR)
            minutes = rest // SECONDS_PER_MINUTE
            shifted = _timegm(
                (
                    tm.tm_year,
                    tm.tm_mon,
                    tm.tm_mday,
                    tm.tm_hour + sign * hours,
                    tm.tm_min + sign * minutes,
                    tm.tm_sec,
                )
            )
            tm = _gmtime(shifted)

        yday = tm.tm_yday
        wday = tm.tm_wday + 1
        return CalendarInstant._from_internal(
            tm.tm_year,
            tm.tm_mon,
            tm.tm_mday,
            tm.tm_hour,
            tm.tm_min,
            tm.tm_sec,
            zone.dst,
            zone.offset,
            day_of_year=yday,
            day_of_week=wday,
            calendar_week=calendar_week(yday, wday),
        )

    def to_epoch(self, calendar: CalendarInstant) -> int:
        if not calendar.is_valid or not 1 <= calendar.month <= 12:
            raise RangeError(f"cannot convert {calendar!r} to epoch seconds")

        wall = _timegm(
            (
                calendar.year,
                calendar.month,
                calendar.day,
                calendar.hour,
                calendar.minute,
                calendar.second,
            )
        )
        deviation = ResolvedZone(calendar.offset, Dst(calendar.dst)).deviation_seconds
        return validate_epoch(wall - deviation, self._epoch_bits)


__all__ = ["NativeConverter"]
