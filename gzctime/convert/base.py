"""Epoch converter interface.

An EpochConverter maps epoch seconds to calendar fields in a resolved
zone and back. Both directions form a bijection as long as the calendar
value carries the zone it was produced in.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, ClassVar

from gzctime._internal.calendar import epoch_bounds
from gzctime._internal.validation import validate_epoch_bits

if TYPE_CHECKING:
    from gzctime.core.calendar import CalendarInstant
    from gzctime.units.timezone import ResolvedZone


class EpochConverter(ABC):
    """Base class of the epoch <-> calendar algorithms.

    Attributes:
        name: Short algorithm name used by ConverterConfig.
        epoch_bits: Width of the signed epoch counter (32 or 64).
    """

    name: ClassVar[str] = ""

    def __init__(self, epoch_bits: int = 64) -> None:
        self._epoch_bits = validate_epoch_bits(epoch_bits)

    @property
    def epoch_bits(self) -> int:
        return self._epoch_bits

    @property
    def bounds(self) -> tuple[int, int]:
        """Return the inclusive epoch range of the configured width."""
        return epoch_bounds(self._epoch_bits)

    @abstractmethod
    def to_calendar(self, epoch_seconds: int, zone: ResolvedZone) -> CalendarInstant:
        """Break epoch seconds down into calendar fields in ``zone``.

        Raises:
            RangeError: If the value cannot be represented.
        """

    @abstractmethod
    def to_epoch(self, calendar: CalendarInstant) -> int:
        """Recompose epoch seconds from calendar fields and their zone.

        Raises:
            RangeError: If the calendar value is invalid or the result does
                not fit the epoch width.
        """

    def __repr__(self) -> str:
        return f"{type(self).__name__}(epoch_bits={self._epoch_bits})"


__all__ = ["EpochConverter"]
