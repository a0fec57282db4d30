"""CalendarInstant: a calendar view of an instant.

This module provides the CalendarInstant value type holding the human
calendar fields of an instant together with the zone they are expressed
in, plus the derived day of year, day of week and calendar week.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, ClassVar

from gzctime._internal.calendar import calendar_week, day_of_week, day_of_year
from gzctime._internal.constants import (
    INT8_MAX,
    INT32_MAX,
    MAX_OFFSET_HOURS,
    UINT8_MAX,
    UINT16_MAX,
    UINT32_MAX,
)
from gzctime._internal.validation import (
    validate_clock,
    validate_day,
    validate_int,
    validate_month,
)
from gzctime.errors import RangeError
from gzctime.units.dst import Dst
from gzctime.units.timezone import TimeZoneOffset, utc_deviation

if TYPE_CHECKING:
    from gzctime.units.timezone import ResolvedZone


class CalendarInstant:
    """Calendar and wall clock fields of an instant in a given zone.

    The offset is the geographic offset when dst is STANDARD or DAYLIGHT
    and the relative deviation from UTC when dst is UNSPECIFIED.

    The derived fields (day_of_year, day_of_week, calendar_week) are always
    computed from year, month and day; they cannot be passed in.

    Three distinguished values exist as class attributes:
        ZERO: every field zero, a safe default.
        EPOCH: 1970-01-01 00:00:00 +00:00 in standard time.
        INVALID: every field at its schema maximum; returned by the
            non-strict parsers and checked with ``is_valid``.

    Attributes:
        year: Signed year.
        month: 1-12.
        day: 1-31.
        hour: 0-23.
        minute: 0-59.
        second: 0-59.
        dst: Daylight saving state.
        offset: TimeZoneOffset of the wall clock fields.
        subsecond: Placeholder for picoseconds after the second.
        leap_second: Placeholder flag, always 0 from the converters.
        day_of_year: 1-366.
        day_of_week: 1 (Monday) to 7 (Sunday).
        calendar_week: 1-53, or 0 for the last week of the previous year.

    Examples:
        >>> cal = CalendarInstant(2023, 9, 20, 17, 17, 38, dst=Dst.DAYLIGHT, offset=1)
        >>> cal.day_of_week
        3
        >>> str(cal)
        '2023-09-20#17:17:38#DST#+01:00'
    """

    __slots__ = (
        "_year",
        "_month",
        "_day",
        "_hour",
        "_minute",
        "_second",
        "_dst",
        "_offset",
        "_subsecond",
        "_leap_second",
        "_day_of_year",
        "_day_of_week",
        "_calendar_week",
    )

    ZERO: ClassVar[CalendarInstant]
    EPOCH: ClassVar[CalendarInstant]
    INVALID: ClassVar[CalendarInstant]

    def __init__(
        self,
        year: int,
        month: int,
        day: int,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        *,
        dst: Dst | int = Dst.STANDARD,
        offset: TimeZoneOffset | int | None = None,
        subsecond: int = 0,
        leap_second: int = 0,
    ) -> None:
        """Create a calendar value from its fields.

        Args:
            year: The year (astronomical, may be zero or negative).
            month: The month (1-12).
            day: The day of the month.
            hour: The hour (0-23).
            minute: The minute (0-59).
            second: The second (0-59).
            dst: Dst member or its integer value (-1, 0, 1).
            offset: TimeZoneOffset, or whole hours as int. None means +00:00.
            subsecond: Picosecond placeholder (0 to 2**32 - 1).
            leap_second: Leap second placeholder flag (0 or 1).

        Raises:
            RangeError: If any field is out of range, including February 29
                in a non-leap year.
        """
        for name, value in (
            ("year", year),
            ("month", month),
            ("day", day),
            ("hour", hour),
            ("minute", minute),
            ("second", second),
            ("subsecond", subsecond),
            ("leap_second", leap_second),
        ):
            validate_int(name, value)

        if year < -INT32_MAX - 1 or year >= INT32_MAX:
            raise RangeError(f"year must fit a signed 32-bit field, got {year}")
        validate_month(month)
        validate_day(year, month, day)
        validate_clock(hour, minute, second)
        if subsecond < 0 or subsecond > UINT32_MAX:
            raise RangeError(f"subsecond must fit an unsigned 32-bit field, got {subsecond}")
        if leap_second not in (0, 1):
            raise RangeError(f"leap_second must be 0 or 1, got {leap_second}")

        try:
            dst = Dst(dst)
        except ValueError:
            raise RangeError(f"dst must be -1, 0 or 1, got {dst!r}") from None

        if offset is None:
            offset = TimeZoneOffset.utc()
        elif not isinstance(offset, TimeZoneOffset):
            offset = TimeZoneOffset(validate_int("offset", offset), relative=True)
        if dst is not Dst.UNSPECIFIED and offset.hours > MAX_OFFSET_HOURS:
            raise RangeError(
                f"geographic offset hours must not exceed {MAX_OFFSET_HOURS}, got {offset.hours}"
            )

        yday = day_of_year(year, month, day)
        wday = day_of_week(year, month, day)
        self._assign(
            year, month, day, hour, minute, second, dst, offset, subsecond, leap_second,
            yday, wday, calendar_week(yday, wday),
        )

    def _assign(
        self,
        year: int,
        month: int,
        day: int,
        hour: int,
        minute: int,
        second: int,
        dst: Dst | int,
        offset: TimeZoneOffset,
        subsecond: int,
        leap_second: int,
        yday: int,
        wday: int,
        week: int,
    ) -> None:
        self._year = year
        self._month = month
        self._day = day
        self._hour = hour
        self._minute = minute
        self._second = second
        self._dst = dst
        self._offset = offset
        self._subsecond = subsecond
        self._leap_second = leap_second
        self._day_of_year = yday
        self._day_of_week = wday
        self._calendar_week = week

    @classmethod
    def _from_internal(
        cls,
        year: int,
        month: int,
        day: int,
        hour: int,
        minute: int,
        second: int,
        dst: Dst | int,
        offset: TimeZoneOffset,
        *,
        day_of_year: int,
        day_of_week: int,
        calendar_week: int,
        subsecond: int = 0,
        leap_second: int = 0,
    ) -> CalendarInstant:
        """Create a CalendarInstant from converter output without validation.

        The converters compute the derived fields with their own algorithm.
        They must equal the values __init__ would recompute.
        """
        instance = object.__new__(cls)
        instance._assign(
            year, month, day, hour, minute, second, dst, offset, subsecond, leap_second,
            day_of_year, day_of_week, calendar_week,
        )
        return instance

    @classmethod
    def in_zone(
        cls,
        year: int,
        month: int,
        day: int,
        hour: int,
        minute: int,
        second: int,
        zone: ResolvedZone,
    ) -> CalendarInstant:
        """Create a calendar value tagged with a resolved zone."""
        return cls(
            year, month, day, hour, minute, second, dst=zone.dst, offset=zone.offset
        )

    # Properties - stored fields

    @property
    def year(self) -> int:
        return self._year

    @property
    def month(self) -> int:
        return self._month

    @property
    def day(self) -> int:
        return self._day

    @property
    def hour(self) -> int:
        return self._hour

    @property
    def minute(self) -> int:
        return self._minute

    @property
    def second(self) -> int:
        return self._second

    @property
    def dst(self) -> Dst | int:
        """Return the daylight saving state.

        Always a Dst member, except for INVALID which carries the raw
        sentinel value 127.
        """
        return self._dst

    @property
    def offset(self) -> TimeZoneOffset:
        return self._offset

    @property
    def subsecond(self) -> int:
        return self._subsecond

    @property
    def leap_second(self) -> int:
        return self._leap_second

    # Properties - derived fields

    @property
    def day_of_year(self) -> int:
        return self._day_of_year

    @property
    def day_of_week(self) -> int:
        return self._day_of_week

    @property
    def calendar_week(self) -> int:
        return self._calendar_week

    @property
    def is_valid(self) -> bool:
        """Return False only for the INVALID sentinel."""
        return self != CalendarInstant.INVALID

    @property
    def deviation(self) -> TimeZoneOffset:
        """Return the relative deviation from UTC of the wall clock fields."""
        return utc_deviation(self._offset, Dst(self._dst))

    def replace(self, **changes: Any) -> CalendarInstant:
        """Return a new CalendarInstant with some fields replaced.

        The result is validated and its derived fields are recomputed.

        Examples:
            >>> CalendarInstant(2024, 2, 29).replace(year=2023)
            Traceback (most recent call last):
            ...
            gzctime.errors.RangeError: day must be between 1 and 28 for 2023-02, got 29
        """
        fields: dict[str, Any] = {
            "year": self._year,
            "month": self._month,
            "day": self._day,
            "hour": self._hour,
            "minute": self._minute,
            "second": self._second,
            "dst": self._dst,
            "offset": self._offset,
            "subsecond": self._subsecond,
            "leap_second": self._leap_second,
        }
        unknown = set(changes) - set(fields)
        if unknown:
            raise TypeError(f"unknown calendar field(s): {', '.join(sorted(unknown))}")
        fields.update(changes)
        year = fields.pop("year")
        month = fields.pop("month")
        day = fields.pop("day")
        return CalendarInstant(year, month, day, **fields)

    def weekday_name(self, language: str = "en") -> str:
        """Return the localized name of the day of week."""
        from gzctime.format.names import weekday_name

        return weekday_name(self._day_of_week, language)

    def month_name(self, language: str = "en") -> str:
        """Return the localized name of the month."""
        from gzctime.format.names import month_name

        return month_name(self._month, language)

    def _key(self) -> tuple[Any, ...]:
        return (
            self._year,
            self._month,
            self._day,
            self._hour,
            self._minute,
            self._second,
            int(self._dst),
            self._offset,
            self._subsecond,
            self._leap_second,
            self._day_of_year,
            self._day_of_week,
            self._calendar_week,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CalendarInstant):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        if self is CalendarInstant.INVALID:
            return "CalendarInstant.INVALID"
        dst = self._dst.name if isinstance(self._dst, Dst) else self._dst
        return (
            f"CalendarInstant({self._year}, {self._month}, {self._day}, "
            f"{self._hour}, {self._minute}, {self._second}, "
            f"dst={dst}, offset={self._offset})"
        )

    def __str__(self) -> str:
        if not self.is_valid:
            return repr(self)
        from gzctime.format.gzc import format_calendar

        return format_calendar(self)


CalendarInstant.ZERO = CalendarInstant._from_internal(
    0, 0, 0, 0, 0, 0, Dst.STANDARD, TimeZoneOffset.utc(),
    day_of_year=0, day_of_week=0, calendar_week=0,
)
CalendarInstant.EPOCH = CalendarInstant(1970, 1, 1, dst=Dst.STANDARD, offset=0)
CalendarInstant.INVALID = CalendarInstant._from_internal(
    INT32_MAX, UINT8_MAX, UINT8_MAX, UINT8_MAX, UINT8_MAX, UINT8_MAX,
    INT8_MAX, TimeZoneOffset._unchecked(INT8_MAX, UINT8_MAX),
    day_of_year=UINT16_MAX, day_of_week=UINT8_MAX, calendar_week=UINT8_MAX,
    subsecond=UINT32_MAX, leap_second=UINT8_MAX,
)


__all__ = ["CalendarInstant"]
