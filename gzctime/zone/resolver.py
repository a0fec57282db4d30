"""Zone request resolution.

ZoneResolver turns a ZoneRequest into the ResolvedZone a converter needs,
using a clock oracle for everything that depends on the host's local zone.

Resolution rules:
    Local          geographic offset and DST state at the converted instant
    Utc            offset zero, standard time
    AsUtc          local deviation folded into the offset, dst unspecified
    Explicit(h)    relative offset h, dst unspecified

When the oracle cannot determine DST the resolver falls back to the
relative deviation as geographic offset with dst forced to standard time,
logs a warning and marks the result as degraded. The wall clock stays
correct and converts back to the same instant.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from gzctime._internal.constants import SECONDS_PER_HOUR
from gzctime.core.calendar import CalendarInstant
from gzctime.errors import AmbiguousDstError
from gzctime.units.dst import Dst
from gzctime.units.timezone import ResolvedZone, TimeZoneOffset, utc_deviation
from gzctime.units.zone_request import AsUtc, Explicit, Local, Utc, LOCAL
from gzctime.zone.oracle import SystemClock

if TYPE_CHECKING:
    from gzctime.convert.base import EpochConverter
    from gzctime.units.zone_request import ZoneRequest
    from gzctime.zone.oracle import ClockOracle

logger = logging.getLogger(__name__)


class ZoneResolver:
    """Resolves zone requests and produces calendar views of instants.

    Args:
        oracle: Clock oracle; defaults to SystemClock().
        converter: Epoch converter; defaults to ``get_converter()``.

    Examples:
        >>> from gzctime.zone.oracle import FixedClock
        >>> resolver = ZoneResolver(FixedClock(offset_hours=1, dst=Dst.DAYLIGHT))
        >>> str(resolver.calendar(1695223058))
        '2023-09-20#17:17:38#DST#+01:00'
        >>> str(resolver.calendar(1695223058, AsUtc()))
        '2023-09-20#17:17:38#UTC#+02:00'
    """

    def __init__(
        self,
        oracle: ClockOracle | None = None,
        converter: EpochConverter | None = None,
    ) -> None:
        if converter is None:
            from gzctime.convert import get_converter

            converter = get_converter()
        self._oracle = oracle if oracle is not None else SystemClock()
        self._converter = converter

    @property
    def oracle(self) -> ClockOracle:
        return self._oracle

    @property
    def converter(self) -> EpochConverter:
        return self._converter

    def local_time_zone(self, reference: int | None = None) -> ResolvedZone:
        """Return the host's geographic offset and DST state at ``reference``.

        Args:
            reference: Epoch seconds; defaults to the oracle's current instant.
        """
        if reference is None:
            reference = self._oracle.current_instant()
        try:
            local = self._oracle.local_zone(reference)
        except AmbiguousDstError as e:
            logger.warning(
                "DST state unknown at %d, using relative offset %+d s as geographic zone",
                reference,
                e.relative_offset_seconds,
            )
            offset = TimeZoneOffset.from_seconds(e.relative_offset_seconds, relative=True)
            return ResolvedZone(offset, Dst.STANDARD, degraded=True)
        return ResolvedZone(local.offset, local.dst)

    @staticmethod
    def utc_deviation(offset: TimeZoneOffset, dst: Dst) -> TimeZoneOffset:
        """Return the relative deviation from UTC, see ``utc_deviation``."""
        return utc_deviation(offset, dst)

    def resolve(self, request: ZoneRequest, epoch_seconds: int | None = None) -> ResolvedZone:
        """Resolve a zone request for the instant ``epoch_seconds``.

        Raises:
            TypeError: If request is not a ZoneRequest variant.
        """
        if isinstance(request, Utc):
            return ResolvedZone.utc()
        if isinstance(request, Explicit):
            return ResolvedZone(request.offset, Dst.UNSPECIFIED)
        if isinstance(request, Local):
            return self.local_time_zone(epoch_seconds)
        if isinstance(request, AsUtc):
            local = self.local_time_zone(epoch_seconds)
            return ResolvedZone(local.deviation, Dst.UNSPECIFIED, degraded=local.degraded)
        raise TypeError(f"expected a zone request, got {type(request).__name__}")

    def calendar(self, epoch_seconds: int, request: ZoneRequest = LOCAL) -> CalendarInstant:
        """Return the calendar view of an instant under a zone request."""
        return self._converter.to_calendar(
            epoch_seconds, self.resolve(request, epoch_seconds)
        )

    def to_epoch(self, calendar: CalendarInstant) -> int:
        """Return the epoch seconds a calendar value denotes."""
        return self._converter.to_epoch(calendar)

    def reexpress(self, calendar: CalendarInstant, request: ZoneRequest) -> CalendarInstant:
        """View the instant behind ``calendar`` under another zone request."""
        return self.calendar(self.to_epoch(calendar), request)

    def local_calendar(
        self,
        year: int,
        month: int,
        day: int,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
    ) -> CalendarInstant:
        """Tag wall clock fields with the local zone in effect at that time.

        The fields are first read as local standard time. If DST is active
        at that instant and still active one hour earlier, the wall clock
        is a daylight saving time.
        """
        probe = CalendarInstant(year, month, day, hour, minute, second)
        now_zone = self.local_time_zone()
        standard = self.to_epoch(probe.replace(offset=now_zone.offset, dst=Dst.STANDARD))

        zone = self.local_time_zone(standard)
        dst = Dst.STANDARD
        if zone.dst is Dst.DAYLIGHT:
            shifted = self.local_time_zone(standard - SECONDS_PER_HOUR)
            if shifted.dst is Dst.DAYLIGHT:
                dst = Dst.DAYLIGHT
        return probe.replace(offset=zone.offset, dst=dst)

    def __repr__(self) -> str:
        return f"ZoneResolver(oracle={self._oracle!r}, converter={self._converter!r})"


_default: ZoneResolver | None = None


def default_resolver() -> ZoneResolver:
    """Return the shared resolver over SystemClock, configured from the environment."""
    global _default
    if _default is None:
        from gzctime.config import ConverterConfig
        from gzctime.convert import get_converter

        _default = ZoneResolver(SystemClock(), get_converter(ConverterConfig.from_env()))
    return _default


__all__ = ["ZoneResolver", "default_resolver"]
