"""Duration decomposition and instant arithmetic.

This module provides the canonical implementations that the operators on
Instant and Duration delegate to.

Supported operations:
    - to_duration: split signed seconds into a Duration
    - duration_seconds: recompose a Duration, checked against an epoch width
    - add: Instant + Instant, Instant + Duration
    - subtract: Instant - Instant, Instant - Duration

Type Combinations:
    - Instant + Instant -> Instant (sum of the epoch counts)
    - Instant - Instant -> Instant (elapsed seconds as an instant)
    - Instant + Duration -> Instant
    - Instant - Duration -> Instant
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Union

from gzctime._internal.constants import (
    SECONDS_PER_DAY,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
)
from gzctime._internal.validation import validate_epoch, validate_epoch_bits, validate_int
from gzctime.errors import RangeError

if TYPE_CHECKING:
    from gzctime.core.duration import Duration
    from gzctime.core.instant import Instant


def to_duration(epoch_seconds: int) -> Duration:
    """Split signed seconds into days, hours, minutes and seconds.

    The sign is taken first, then the absolute value is divided by the
    day, hour and minute periods in turn.

    Examples:
        >>> to_duration(8210542)
        Duration(days=95, hours=0, minutes=42, seconds=22, sign=1)
        >>> to_duration(-61)
        Duration(days=0, hours=0, minutes=1, seconds=1, sign=-1)
    """
    from gzctime.core.duration import Duration

    validate_int("epoch_seconds", epoch_seconds)
    sign = -1 if epoch_seconds < 0 else 1
    remainder = abs(epoch_seconds)
    days, remainder = divmod(remainder, SECONDS_PER_DAY)
    hours, remainder = divmod(remainder, SECONDS_PER_HOUR)
    minutes, seconds = divmod(remainder, SECONDS_PER_MINUTE)
    return Duration(days, hours, minutes, seconds, sign)


def duration_seconds(duration: Duration, epoch_bits: int = 64) -> int:
    """Recompose a Duration into signed seconds.

    Args:
        duration: The duration to recompose.
        epoch_bits: Width of the epoch the result must fit (32 or 64).

    Raises:
        RangeError: If the duration is INVALID or the result does not fit
            the epoch width.

    Examples:
        >>> from gzctime.core.duration import Duration
        >>> duration_seconds(Duration(1, 0, 0, 1, -1))
        -86401
        >>> duration_seconds(Duration(days=30000), epoch_bits=32)
        Traceback (most recent call last):
        ...
        gzctime.errors.RangeError: epoch value 2592000000 is outside the 32-bit range [-2147483648, 2147483647]
    """
    validate_epoch_bits(epoch_bits)
    if not duration.is_valid:
        raise RangeError("cannot recompose an invalid duration")
    return validate_epoch(duration.total_seconds, epoch_bits)


def add(left: Instant, right: Union[Instant, Duration]) -> Instant:
    """Add an Instant or a Duration to an Instant.

    Raises:
        TypeError: If the operand types are not supported.
        RangeError: If the sum leaves the 64-bit epoch range.
    """
    from gzctime.core.instant import Instant

    if not isinstance(left, Instant):
        raise TypeError(f"unsupported operand type for +: {type(left).__name__!r}")
    return Instant(left.seconds + _operand_seconds(right, "+"))


def subtract(left: Instant, right: Union[Instant, Duration]) -> Instant:
    """Subtract an Instant or a Duration from an Instant.

    The difference of two instants is itself an Instant counting the
    elapsed seconds; use ``Instant.duration()`` to split it up.

    Raises:
        TypeError: If the operand types are not supported.
        RangeError: If the difference leaves the 64-bit epoch range.
    """
    from gzctime.core.instant import Instant

    if not isinstance(left, Instant):
        raise TypeError(f"unsupported operand type for -: {type(left).__name__!r}")
    return Instant(left.seconds - _operand_seconds(right, "-"))


def _operand_seconds(value: object, op: str) -> int:
    from gzctime.core.duration import Duration
    from gzctime.core.instant import Instant

    if isinstance(value, Instant):
        return value.seconds
    if isinstance(value, Duration):
        return duration_seconds(value)
    raise TypeError(
        f"unsupported operand type(s) for {op}: 'Instant' and {type(value).__name__!r}"
    )


__all__ = [
    "to_duration",
    "duration_seconds",
    "add",
    "subtract",
]
