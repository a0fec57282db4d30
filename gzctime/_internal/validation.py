"""Validation utilities for gzctime.

This module provides validation decorators and helpers that check
calendar fields and epoch values against their representable ranges,
raising RangeError.

This module is not part of the public API.
"""

from __future__ import annotations

import functools
import inspect
from typing import Callable, TypeVar, ParamSpec

from gzctime._internal.calendar import days_in_month, epoch_bounds
from gzctime._internal.constants import SUPPORTED_EPOCH_BITS
from gzctime.errors import RangeError

P = ParamSpec("P")
T = TypeVar("T")


def validate_range(
    **limits: tuple[int, int],
) -> Callable[[Callable[P, T]], Callable[P, T]]:
    """Decorator to validate that parameters are within specified ranges.

    Both min and max are inclusive. Parameters that are absent or None are
    not checked.

    Examples:
        >>> @validate_range(month=(1, 12))
        ... def first_of(year: int, month: int) -> None:
        ...     pass

        >>> first_of(2024, 13)
        Traceback (most recent call last):
        ...
        RangeError: month must be between 1 and 12, got 13
    """

    def decorator(func: Callable[P, T]) -> Callable[P, T]:
        sig = inspect.signature(func)

        @functools.wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> T:
            bound = sig.bind_partial(*args, **kwargs)
            for param_name, (min_val, max_val) in limits.items():
                value = bound.arguments.get(param_name)
                if value is not None and (value < min_val or value > max_val):
                    raise RangeError(
                        f"{param_name} must be between {min_val} and {max_val}, "
                        f"got {value}"
                    )
            return func(*args, **kwargs)

        return wrapper

    return decorator


def validate_int(name: str, value: object) -> int:
    """Reject non-integers (bool included) with RangeError."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise RangeError(f"{name} must be an integer, got {type(value).__name__}")
    return value


def validate_month(month: int) -> None:
    """Raise RangeError if month is outside 1-12."""
    if month < 1 or month > 12:
        raise RangeError(f"month must be between 1 and 12, got {month}")


def validate_day(year: int, month: int, day: int) -> None:
    """Raise RangeError if day does not exist in the given month."""
    max_day = days_in_month(year, month)
    if day < 1 or day > max_day:
        raise RangeError(
            f"day must be between 1 and {max_day} for {year}-{month:02d}, got {day}"
        )


def validate_clock(hour: int, minute: int, second: int) -> None:
    """Raise RangeError if a wall clock field is out of range."""
    if hour < 0 or hour > 23:
        raise RangeError(f"hour must be between 0 and 23, got {hour}")
    if minute < 0 or minute > 59:
        raise RangeError(f"minute must be between 0 and 59, got {minute}")
    if second < 0 or second > 59:
        raise RangeError(f"second must be between 0 and 59, got {second}")


def validate_epoch_bits(bits: int) -> int:
    """Raise RangeError for epoch widths other than 32 or 64."""
    if bits not in SUPPORTED_EPOCH_BITS:
        raise RangeError(
            f"epoch width must be one of {SUPPORTED_EPOCH_BITS}, got {bits}"
        )
    return bits


def validate_epoch(seconds: int, bits: int) -> int:
    """Raise RangeError if seconds does not fit a signed epoch of `bits`."""
    low, high = epoch_bounds(bits)
    if seconds < low or seconds > high:
        raise RangeError(
            f"epoch value {seconds} is outside the {bits}-bit range [{low}, {high}]"
        )
    return seconds


__all__ = [
    "validate_range",
    "validate_int",
    "validate_month",
    "validate_day",
    "validate_clock",
    "validate_epoch_bits",
    "validate_epoch",
]
