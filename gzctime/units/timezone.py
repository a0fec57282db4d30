"""Time zone offsets using a signed hour + minute model.

This module provides TimeZoneOffset, the offset carried by every calendar
value, and ResolvedZone, the (offset, dst) pair a converter needs to turn
epoch seconds into wall clock fields and back.

A geographic offset is the region's standard-time offset and does not
change with the season. The relative deviation from UTC is the geographic
offset plus one hour while daylight saving time is active. Only the
relative deviation combines linearly with epoch seconds.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import ClassVar

from gzctime._internal.constants import (
    MAX_OFFSET_HOURS,
    MIN_OFFSET_HOURS,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
)
from gzctime._internal.validation import validate_int
from gzctime.errors import ParseError, RangeError
from gzctime.units.dst import Dst


class TimeZoneOffset:
    """A UTC offset of whole hours plus minutes.

    The minutes are unsigned and take the sign of the hours, so
    ``TimeZoneOffset(-3, 30)`` is 3.5 hours west of UTC.

    Geographic offsets are limited to -12..+12 hours. A relative offset
    may reach +13 hours, the deviation of a +12 zone during daylight
    saving time.

    Attributes:
        hours: Signed whole hours.
        minutes: Unsigned minutes (0-59).

    Examples:
        >>> TimeZoneOffset(1).seconds
        3600
        >>> str(TimeZoneOffset(-5, 30))
        '-05:30'
        >>> TimeZoneOffset.utc() == TimeZoneOffset(0)
        True
    """

    __slots__ = ("_hours", "_minutes")

    MAX_RELATIVE_HOURS: ClassVar[int] = MAX_OFFSET_HOURS + 1

    def __init__(self, hours: int = 0, minutes: int = 0, *, relative: bool = False) -> None:
        """Create an offset.

        Args:
            hours: Signed hours, -12..+12 (-12..+13 when relative).
            minutes: Unsigned minutes, 0..59.
            relative: Accept the extended range of a relative deviation.

        Raises:
            RangeError: If hours or minutes are out of range.
        """
        validate_int("hours", hours)
        validate_int("minutes", minutes)
        max_hours = self.MAX_RELATIVE_HOURS if relative else MAX_OFFSET_HOURS
        if hours < MIN_OFFSET_HOURS or hours > max_hours:
            raise RangeError(
                f"offset hours must be between {MIN_OFFSET_HOURS} and {max_hours}, got {hours}"
            )
        if minutes < 0 or minutes > 59:
            raise RangeError(f"offset minutes must be between 0 and 59, got {minutes}")
        self._hours = hours
        self._minutes = minutes

    @classmethod
    def _unchecked(cls, hours: int, minutes: int) -> TimeZoneOffset:
        instance = object.__new__(cls)
        instance._hours = hours
        instance._minutes = minutes
        return instance

    @classmethod
    def utc(cls) -> TimeZoneOffset:
        """Return the zero offset."""
        return cls(0, 0)

    @classmethod
    def from_seconds(cls, seconds: int, *, relative: bool = False) -> TimeZoneOffset:
        """Create an offset from signed seconds, dropping sub-minute parts.

        Raises:
            RangeError: If the offset is out of range, or is west of UTC by
                less than one hour. The minutes take the sign of the hours,
                so such an offset has no representation.

        Examples:
            >>> TimeZoneOffset.from_seconds(-19800)
            TimeZoneOffset(hours=-5, minutes=30)
        """
        sign = -1 if seconds < 0 else 1
        total_minutes = abs(seconds) // SECONDS_PER_MINUTE
        hours, minutes = divmod(total_minutes, 60)
        if sign < 0 and hours == 0 and minutes:
            raise RangeError(f"offset of {seconds} seconds cannot carry a sign on zero hours")
        return cls(sign * hours, minutes, relative=relative)

    @classmethod
    def from_string(cls, s: str, *, relative: bool = False) -> TimeZoneOffset:
        """Parse ``+HH:MM``, ``-HHMM``, ``+HH`` or ``Z``/``UTC``.

        Raises:
            ParseError: If the string is not an offset.
            RangeError: If the parsed offset is out of range.
        """
        s = s.strip()
        if s.upper() in ("Z", "UTC"):
            return cls.utc()

        match = re.match(r"^([+-])(\d{1,2})(?::?(\d{2}))?$", s)
        if not match:
            raise ParseError(f"cannot parse offset string: {s!r}")

        sign_str, hours_str, minutes_str = match.groups()
        hours = int(hours_str)
        if sign_str == "-":
            hours = -hours
        minutes = int(minutes_str) if minutes_str else 0
        if hours == 0 and sign_str == "-" and minutes:
            raise RangeError(f"offset {s!r} cannot carry a sign on zero hours")
        return cls(hours, minutes, relative=relative)

    @property
    def hours(self) -> int:
        """Return the signed whole hours."""
        return self._hours

    @property
    def minutes(self) -> int:
        """Return the unsigned minutes."""
        return self._minutes

    @property
    def seconds(self) -> int:
        """Return the signed offset in seconds."""
        magnitude = abs(self._hours) * SECONDS_PER_HOUR + self._minutes * SECONDS_PER_MINUTE
        return -magnitude if self._hours < 0 else magnitude

    @property
    def is_utc(self) -> bool:
        """Return True for the zero offset."""
        return self._hours == 0 and self._minutes == 0

    @property
    def is_whole_hours(self) -> bool:
        """Return True when the offset has no minutes part."""
        return self._minutes == 0

    def shifted(self, hours: int) -> TimeZoneOffset:
        """Return a relative offset moved by whole hours."""
        return TimeZoneOffset.from_seconds(self.seconds + hours * SECONDS_PER_HOUR, relative=True)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TimeZoneOffset):
            return NotImplemented
        return self._hours == other._hours and self._minutes == other._minutes

    def __hash__(self) -> int:
        return hash((self._hours, self._minutes))

    def __repr__(self) -> str:
        return f"TimeZoneOffset(hours={self._hours}, minutes={self._minutes})"

    def __str__(self) -> str:
        sign = "-" if self._hours < 0 else "+"
        return f"{sign}{abs(self._hours):02d}:{self._minutes:02d}"


def utc_deviation(offset: TimeZoneOffset, dst: Dst) -> TimeZoneOffset:
    """Return the relative deviation from UTC for a geographic offset.

    The deviation is the offset plus one hour during daylight saving time.
    For standard time, and for an unspecified dst whose offset already is
    relative, the offset is returned unchanged.

    Examples:
        >>> utc_deviation(TimeZoneOffset(1), Dst.DAYLIGHT)
        TimeZoneOffset(hours=2, minutes=0)
        >>> utc_deviation(TimeZoneOffset(1), Dst.UNSPECIFIED)
        TimeZoneOffset(hours=1, minutes=0)
    """
    if dst is Dst.DAYLIGHT:
        return offset.shifted(1)
    return offset


@dataclass(frozen=True)
class ResolvedZone:
    """The zone a calendar view is expressed in.

    Attributes:
        offset: Geographic offset, or the relative deviation when dst is
            unspecified.
        dst: Daylight saving state tagged onto the calendar view.
        degraded: True when the platform could not tell whether daylight
            saving time was active and the relative offset stands in for
            the geographic one.
    """

    offset: TimeZoneOffset
    dst: Dst = Dst.STANDARD
    degraded: bool = False

    @property
    def deviation(self) -> TimeZoneOffset:
        """Return the relative deviation from UTC."""
        return utc_deviation(self.offset, self.dst)

    @property
    def deviation_seconds(self) -> int:
        """Return the relative deviation from UTC in seconds."""
        return self.offset.seconds + self.dst.extra_hours * SECONDS_PER_HOUR

    @classmethod
    def utc(cls) -> ResolvedZone:
        """Return offset zero in standard time."""
        return cls(TimeZoneOffset.utc(), Dst.STANDARD)


__all__ = ["TimeZoneOffset", "ResolvedZone", "utc_deviation"]
