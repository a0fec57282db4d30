"""Fixed-width binary records for calendar and duration values.

Both records use explicit big-endian byte order so they read the same on
every host.

Calendar record (24 bytes):
    year int32, month, day, hour, minute, second uint8, dst int8,
    offset hours int8, offset minutes uint8, subsecond uint32,
    day_of_year uint16, day_of_week, calendar_week, leap_second uint8,
    3 padding bytes.

Duration record (33 bytes):
    days, hours, minutes, seconds uint64, sign int8.

The INVALID sentinels round-trip through both records.
"""

from __future__ import annotations

import struct

from gzctime.core.calendar import CalendarInstant
from gzctime.core.duration import Duration
from gzctime.errors import ParseError, RangeError
from gzctime.units.dst import Dst
from gzctime.units.timezone import TimeZoneOffset

CALENDAR_RECORD = struct.Struct(">iBBBBBbbBIHBBB3x")
DURATION_RECORD = struct.Struct(">QQQQb")


def calendar_to_bytes(cal: CalendarInstant) -> bytes:
    """Pack a CalendarInstant into its 24-byte record.

    Raises:
        RangeError: If a field does not fit its record slot.
    """
    try:
        return CALENDAR_RECORD.pack(
            cal.year,
            cal.month,
            cal.day,
            cal.hour,
            cal.minute,
            cal.second,
            int(cal.dst),
            cal.offset.hours,
            cal.offset.minutes,
            cal.subsecond,
            cal.day_of_year,
            cal.day_of_week,
            cal.calendar_week,
            cal.leap_second,
        )
    except struct.error as e:
        raise RangeError(f"calendar value does not fit the binary record: {e}") from e


def calendar_from_bytes(data: bytes) -> CalendarInstant:
    """Unpack a 24-byte calendar record.

    The derived fields stored in the record are ignored and recomputed.

    Raises:
        ParseError: If data has the wrong length.
        RangeError: If the unpacked fields are out of range.
    """
    if len(data) != CALENDAR_RECORD.size:
        raise ParseError(
            f"calendar record must be {CALENDAR_RECORD.size} bytes, got {len(data)}"
        )
    if data == calendar_to_bytes(CalendarInstant.INVALID):
        return CalendarInstant.INVALID
    (
        year, month, day, hour, minute, second, dst,
        offset_hours, offset_minutes, subsecond, _yday, _wday, _week, leap_second,
    ) = CALENDAR_RECORD.unpack(data)

    relative = dst == Dst.UNSPECIFIED
    return CalendarInstant(
        year,
        month,
        day,
        hour,
        minute,
        second,
        dst=dst,
        offset=TimeZoneOffset(offset_hours, offset_minutes, relative=relative),
        subsecond=subsecond,
        leap_second=leap_second,
    )


def duration_to_bytes(dur: Duration) -> bytes:
    """Pack a Duration into its 33-byte record.

    Raises:
        RangeError: If a magnitude does not fit 64 bits.
    """
    try:
        return DURATION_RECORD.pack(dur.days, dur.hours, dur.minutes, dur.seconds, dur.sign)
    except struct.error as e:
        raise RangeError(f"duration does not fit the binary record: {e}") from e


def duration_from_bytes(data: bytes) -> Duration:
    """Unpack a 33-byte duration record.

    Raises:
        ParseError: If data has the wrong length.
        RangeError: If the sign byte is neither +1, -1 nor the sentinel.
    """
    if len(data) != DURATION_RECORD.size:
        raise ParseError(
            f"duration record must be {DURATION_RECORD.size} bytes, got {len(data)}"
        )
    days, hours, minutes, seconds, sign = DURATION_RECORD.unpack(data)
    candidate = Duration._unchecked(days, hours, minutes, seconds, sign)
    if candidate == Duration.INVALID:
        return Duration.INVALID
    return Duration(days, hours, minutes, seconds, sign)


__all__ = [
    "CALENDAR_RECORD",
    "DURATION_RECORD",
    "calendar_to_bytes",
    "calendar_from_bytes",
    "duration_to_bytes",
    "duration_from_bytes",
]
