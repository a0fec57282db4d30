"""Zone requests for calendar views.

A zone request tells the resolver which zone a calendar view of an
instant should be expressed in. It is a closed set of variants:

    Local       the host's geographic offset and its DST state
    Utc         offset zero, standard time
    AsUtc       the local wall clock, relabelled with the relative deviation
    Explicit    a caller-supplied relative offset

Examples:
    >>> from gzctime.units.zone_request import Explicit, LOCAL
    >>> Explicit(5).offset.hours
    5
    >>> LOCAL
    Local()
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

from gzctime.units.timezone import TimeZoneOffset


@dataclass(frozen=True)
class Local:
    """Use the local geographic offset with its observed DST state."""


@dataclass(frozen=True)
class Utc:
    """Use offset zero in standard time."""


@dataclass(frozen=True)
class AsUtc:
    """Keep the local wall clock but fold DST into a relative offset."""


@dataclass(frozen=True)
class Explicit:
    """Use a caller-supplied relative UTC offset.

    Attributes:
        hours: Signed relative offset hours.
        minutes: Unsigned minutes taking the sign of hours.
    """

    hours: int
    minutes: int = 0
    offset: TimeZoneOffset = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "offset", TimeZoneOffset(self.hours, self.minutes, relative=True)
        )


ZoneRequest = Union[Local, Utc, AsUtc, Explicit]

LOCAL = Local()
UTC = Utc()
AS_UTC = AsUtc()


__all__ = [
    "Local",
    "Utc",
    "AsUtc",
    "Explicit",
    "ZoneRequest",
    "LOCAL",
    "UTC",
    "AS_UTC",
]
