"""Instant: an absolute point in time as epoch seconds.

An Instant is a signed count of seconds relative to 1970-01-01 00:00:00
UTC. It carries no zone; every CalendarInstant is a view of an Instant
under some zone request.

Operations that depend on the host zone or on the configured converter
take an optional ``resolver``; without one the shared default resolver
(SystemClock, configuration from the environment) is used.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Union

from gzctime._internal.validation import validate_epoch, validate_int, validate_range
from gzctime.errors import ParseError
from gzctime.units.dst import Dst
from gzctime.units.zone_request import LOCAL

if TYPE_CHECKING:
    from gzctime.core.calendar import CalendarInstant
    from gzctime.core.duration import Duration
    from gzctime.infer import InferOptions
    from gzctime.units.zone_request import ZoneRequest
    from gzctime.zone.oracle import ClockOracle
    from gzctime.zone.resolver import ZoneResolver


def _resolver(resolver: ZoneResolver | None) -> ZoneResolver:
    if resolver is not None:
        return resolver
    from gzctime.zone.resolver import default_resolver

    return default_resolver()


class Instant:
    """An absolute instant, immutable, hashable and totally ordered.

    Attributes:
        seconds: Signed epoch seconds (fits a signed 64-bit integer).

    Examples:
        >>> from gzctime.units.zone_request import Explicit
        >>> from gzctime.zone import FixedClock, ZoneResolver
        >>> resolver = ZoneResolver(FixedClock(offset_hours=1, dst=Dst.DAYLIGHT))
        >>> t = Instant(1695223058)
        >>> t.to_string(resolver=resolver)
        '2023-09-20#17:17:38#DST#+01:00'
        >>> t.to_string(request=Explicit(0), resolver=resolver)
        '2023-09-20#15:17:38#UTC#+00:00'
        >>> (Instant(8210542) - Instant(0)).to_duration_string()
        'D95#00:42:22'
    """

    __slots__ = ("_seconds",)

    def __init__(self, seconds: int = 0) -> None:
        """Create an Instant from epoch seconds.

        Raises:
            RangeError: If seconds is not an integer or exceeds the signed
                64-bit range.
        """
        validate_int("seconds", seconds)
        self._seconds = validate_epoch(seconds, 64)

    # Constructors

    @classmethod
    def now(cls, oracle: ClockOracle | None = None) -> Instant:
        """Return the current instant according to an oracle."""
        if oracle is None:
            oracle = _resolver(None).oracle
        return cls(oracle.current_instant())

    @classmethod
    def from_calendar(
        cls, calendar: CalendarInstant, resolver: ZoneResolver | None = None
    ) -> Instant:
        """Return the instant a calendar value denotes.

        Raises:
            RangeError: If the calendar value is invalid or out of range.
        """
        return cls(_resolver(resolver).to_epoch(calendar))

    @classmethod
    @validate_range(zone_hours=(-12, 13), zone_minutes=(0, 59))
    def from_fields(
        cls,
        year: int,
        month: int,
        day: int,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        *,
        dst: Dst | int | None = None,
        zone_hours: int | None = None,
        zone_minutes: int = 0,
        resolver: ZoneResolver | None = None,
    ) -> Instant:
        """Return the instant of wall clock fields.

        Without dst and zone the fields are read in the local zone with the
        DST state in effect at that wall clock time. With zone_hours alone
        the zone is a relative offset. With dst alone the local geographic
        offset is used.

        Raises:
            RangeError: If a field or the zone is out of range.

        Examples:
            >>> Instant.from_fields(2001, 1, 1, zone_hours=0).seconds
            978307200
            >>> Instant.from_fields(2023, 9, 20, 17, 17, 38, dst=Dst.DAYLIGHT, zone_hours=1).seconds
            1695223058
        """
        from gzctime.core.calendar import CalendarInstant
        from gzctime.units.timezone import TimeZoneOffset

        resolver = _resolver(resolver)
        if dst is None and zone_hours is None:
            cal = resolver.local_calendar(year, month, day, hour, minute, second)
            return cls(resolver.to_epoch(cal))

        if zone_hours is None:
            offset = resolver.local_time_zone().offset
        else:
            relative = dst is None or Dst(dst) is Dst.UNSPECIFIED
            offset = TimeZoneOffset(zone_hours, zone_minutes, relative=relative)
        cal = CalendarInstant(
            year,
            month,
            day,
            hour,
            minute,
            second,
            dst=Dst.UNSPECIFIED if dst is None else dst,
            offset=offset,
        )
        return cls(resolver.to_epoch(cal))

    @classmethod
    def from_duration(cls, duration: Duration, epoch_bits: int = 64) -> Instant:
        """Return the instant counting a duration from the epoch.

        Raises:
            RangeError: If the duration is invalid or does not fit the width.
        """
        from gzctime.arithmetic.ops import duration_seconds

        return cls(duration_seconds(duration, epoch_bits))

    @classmethod
    def from_duration_fields(
        cls,
        days: int = 0,
        hours: int = 0,
        minutes: int = 0,
        seconds: int = 0,
        sign: int = 1,
    ) -> Instant:
        """Return the instant counting signed elapsed fields from the epoch."""
        from gzctime.core.duration import Duration

        return cls.from_duration(Duration(days, hours, minutes, seconds, sign))

    @classmethod
    def parse(
        cls,
        text: str,
        *,
        fmt: str | None = None,
        fuzzy: bool = False,
        options: InferOptions | None = None,
        resolver: ZoneResolver | None = None,
    ) -> Instant:
        """Parse an instant from text.

        By default text is a GZC calendar or duration string. With ``fmt``
        it is parsed with strptime. With ``fuzzy=True`` the free-text
        scanner supplies the fields: a scanned offset becomes a relative
        zone, no offset means the local zone.

        Raises:
            ParseError: If the text cannot be parsed.
            RangeError: If the parsed value is out of range.

        Examples:
            >>> Instant.parse("D1#00:00:00").seconds
            86400
            >>> Instant.parse("2001-01-01#01:00:00#STD#+01:00").seconds
            978307200
            >>> Instant.parse("2001-01-01T00:00:00Z", fuzzy=True).seconds
            978307200
        """
        from gzctime.core.calendar import CalendarInstant
        from gzctime.core.duration import Duration
        from gzctime.errors import RangeError

        if fmt is not None:
            from gzctime.format.strftime import strptime

            return cls.from_calendar(strptime(text, fmt), resolver)

        if fuzzy:
            from gzctime.infer import scan

            fields = scan(text, options)
            resolver = _resolver(resolver)
            try:
                if fields.offset is None:
                    cal = resolver.local_calendar(
                        fields.year, fields.month, fields.day,
                        fields.hour, fields.minute, fields.second,
                    )
                else:
                    cal = CalendarInstant(
                        fields.year, fields.month, fields.day,
                        fields.hour, fields.minute, fields.second,
                        dst=Dst.UNSPECIFIED, offset=fields.offset,
                    )
            except RangeError as e:
                raise ParseError(f"scanned fields of {text!r} are out of range: {e}") from e
            return cls(resolver.to_epoch(cal))

        from gzctime.format.gzc import parse as parse_gzc

        value = parse_gzc(text, strict=True)
        if isinstance(value, Duration):
            return cls.from_duration(value)
        return cls.from_calendar(value, resolver)

    # Views

    @property
    def seconds(self) -> int:
        return self._seconds

    def calendar(
        self, request: ZoneRequest = LOCAL, resolver: ZoneResolver | None = None
    ) -> CalendarInstant:
        """Return the calendar view of this instant under a zone request."""
        return _resolver(resolver).calendar(self._seconds, request)

    def duration(self) -> Duration:
        """Return the epoch seconds split into a Duration."""
        from gzctime.arithmetic.ops import to_duration

        return to_duration(self._seconds)

    def to_string(
        self,
        fmt: str | None = None,
        language: str | None = None,
        request: ZoneRequest = LOCAL,
        resolver: ZoneResolver | None = None,
    ) -> str:
        """Format the calendar view of this instant.

        Without ``fmt`` the GZC calendar string is returned.
        """
        cal = self.calendar(request, resolver)
        if fmt is None:
            from gzctime.format.gzc import format_calendar

            return format_calendar(cal)
        from gzctime.format.strftime import strftime

        if language is None:
            from gzctime.config import ConverterConfig

            language = ConverterConfig.from_env().language
        return strftime(cal, fmt, language)

    def to_duration_string(self) -> str:
        """Return the GZC duration string of the epoch seconds."""
        from gzctime.format.gzc import format_duration

        return format_duration(self.duration())

    # Arithmetic

    def __add__(self, other: Union[Instant, Duration]) -> Instant:
        from gzctime.arithmetic.ops import add
        from gzctime.core.duration import Duration

        if not isinstance(other, (Instant, Duration)):
            return NotImplemented
        return add(self, other)

    def __sub__(self, other: Union[Instant, Duration]) -> Instant:
        from gzctime.arithmetic.ops import subtract
        from gzctime.core.duration import Duration

        if not isinstance(other, (Instant, Duration)):
            return NotImplemented
        return subtract(self, other)

    # Comparison

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return self._seconds == other._seconds

    def __lt__(self, other: Instant) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return self._seconds < other._seconds

    def __le__(self, other: Instant) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return self._seconds <= other._seconds

    def __gt__(self, other: Instant) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return self._seconds > other._seconds

    def __ge__(self, other: Instant) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return self._seconds >= other._seconds

    def __hash__(self) -> int:
        return hash(self._seconds)

    def __int__(self) -> int:
        return self._seconds

    def __repr__(self) -> str:
        return f"Instant({self._seconds})"


__all__ = ["Instant"]
