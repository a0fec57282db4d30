"""Duration: a signed elapsed time split into days, hours, minutes, seconds.

The four magnitudes are independent and never normalized against each
other; a Duration of 0 days and 30 hours is kept as such. Only the sign is
shared by all of them.
"""

from __future__ import annotations

from typing import Any, ClassVar

from gzctime._internal.constants import (
    INT8_MAX,
    SECONDS_PER_DAY,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
    UINT64_MAX,
)
from gzctime._internal.validation import validate_int
from gzctime.errors import RangeError


class Duration:
    """A signed elapsed time.

    Represented seconds are
    ``sign * (days*86400 + hours*3600 + minutes*60 + seconds)``.

    Attributes:
        days: Non-negative day count.
        hours: Non-negative hour count.
        minutes: Non-negative minute count.
        seconds: Non-negative second count.
        sign: +1 or -1.

    Examples:
        >>> d = Duration(95, 0, 42, 22)
        >>> d.total_seconds
        8210542
        >>> str(d)
        'D95#00:42:22'
        >>> Duration.from_seconds(-90).minutes
        1
    """

    __slots__ = ("_days", "_hours", "_minutes", "_seconds", "_sign")

    ZERO: ClassVar[Duration]
    INVALID: ClassVar[Duration]

    def __init__(
        self,
        days: int = 0,
        hours: int = 0,
        minutes: int = 0,
        seconds: int = 0,
        sign: int = 1,
    ) -> None:
        """Create a Duration.

        Raises:
            RangeError: If a magnitude is negative or exceeds 2**64 - 1, or
                sign is not +1 or -1.
        """
        for name, value in (
            ("days", days),
            ("hours", hours),
            ("minutes", minutes),
            ("seconds", seconds),
        ):
            validate_int(name, value)
            if value < 0 or value > UINT64_MAX:
                raise RangeError(
                    f"{name} must be a non-negative 64-bit magnitude, got {value}"
                )
        if sign not in (1, -1):
            raise RangeError(f"sign must be +1 or -1, got {sign!r}")

        self._days = days
        self._hours = hours
        self._minutes = minutes
        self._seconds = seconds
        self._sign = sign

    @classmethod
    def _unchecked(
        cls, days: int, hours: int, minutes: int, seconds: int, sign: int
    ) -> Duration:
        instance = object.__new__(cls)
        instance._days = days
        instance._hours = hours
        instance._minutes = minutes
        instance._seconds = seconds
        instance._sign = sign
        return instance

    @classmethod
    def from_seconds(cls, total: int) -> Duration:
        """Decompose signed seconds into days, hours, minutes and seconds."""
        from gzctime.arithmetic.ops import to_duration

        return to_duration(total)

    @property
    def days(self) -> int:
        return self._days

    @property
    def hours(self) -> int:
        return self._hours

    @property
    def minutes(self) -> int:
        return self._minutes

    @property
    def seconds(self) -> int:
        return self._seconds

    @property
    def sign(self) -> int:
        return self._sign

    @property
    def is_negative(self) -> bool:
        return self._sign < 0

    @property
    def is_valid(self) -> bool:
        """Return False only for the INVALID sentinel."""
        return self != Duration.INVALID

    @property
    def total_seconds(self) -> int:
        """Return the represented signed seconds (unbounded)."""
        magnitude = (
            self._days * SECONDS_PER_DAY
            + self._hours * SECONDS_PER_HOUR
            + self._minutes * SECONDS_PER_MINUTE
            + self._seconds
        )
        return self._sign * magnitude

    def to_seconds(self, epoch_bits: int = 64) -> int:
        """Return the represented seconds, checked against an epoch width.

        Raises:
            RangeError: If the value does not fit a signed epoch of
                ``epoch_bits`` or the duration is INVALID.
        """
        from gzctime.arithmetic.ops import duration_seconds

        return duration_seconds(self, epoch_bits)

    def __neg__(self) -> Duration:
        if not self.is_valid:
            return self
        return Duration(self._days, self._hours, self._minutes, self._seconds, -self._sign)

    def __abs__(self) -> Duration:
        if not self.is_valid:
            return self
        return Duration(self._days, self._hours, self._minutes, self._seconds, 1)

    def __bool__(self) -> bool:
        return self.total_seconds != 0

    def _key(self) -> tuple[Any, ...]:
        return (self._days, self._hours, self._minutes, self._seconds, self._sign)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        if self is Duration.INVALID:
            return "Duration.INVALID"
        return (
            f"Duration(days={self._days}, hours={self._hours}, "
            f"minutes={self._minutes}, seconds={self._seconds}, sign={self._sign})"
        )

    def __str__(self) -> str:
        if not self.is_valid:
            return repr(self)
        from gzctime.format.gzc import format_duration

        return format_duration(self)


Duration.ZERO = Duration()
Duration.INVALID = Duration._unchecked(UINT64_MAX, UINT64_MAX, UINT64_MAX, UINT64_MAX, INT8_MAX)


__all__ = ["Duration"]
