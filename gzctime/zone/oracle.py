"""Clock and local time zone oracles.

An oracle answers two questions: what is the current instant, and what is
the host's geographic offset and DST state at a given instant. The core
never reads the platform clock directly; it asks an oracle.

This module provides:
    - ClockOracle: the oracle protocol
    - LocalZone: geographic offset plus DST state answered by an oracle
    - SystemClock: oracle over the ``time`` module
    - FixedClock: deterministic oracle for tests and replays
    - Snapshot: caches one oracle answer per logical "now"
"""

from __future__ import annotations

import calendar as _calendar
import time
from typing import Callable, NamedTuple, Protocol, Union

from gzctime._internal.constants import SECONDS_PER_HOUR
from gzctime.errors import AmbiguousDstError, RangeError
from gzctime.units.dst import Dst
from gzctime.units.timezone import TimeZoneOffset


class LocalZone(NamedTuple):
    """Geographic offset and DST state of the host at some instant."""

    offset: TimeZoneOffset
    dst: Dst


class ClockOracle(Protocol):
    """Source of the current instant and of the local zone."""

    def current_instant(self) -> int:
        """Return the current epoch seconds."""
        ...

    def local_zone(self, reference: int) -> LocalZone:
        """Return the geographic offset and DST state at ``reference``.

        Raises:
            AmbiguousDstError: If the DST state cannot be determined. The
                exception carries the relative deviation from UTC.
        """
        ...


class SystemClock:
    """Oracle backed by ``time.time`` and ``time.localtime``."""

    def current_instant(self) -> int:
        return int(time.time())

    def local_zone(self, reference: int) -> LocalZone:
        try:
            lt = time.localtime(reference)
        except (OverflowError, OSError, ValueError) as e:
            raise RangeError(f"platform cannot localize epoch value {reference}: {e}") from e

        deviation = lt.tm_gmtoff
        if deviation is None:
            deviation = _calendar.timegm(lt) - reference
        if lt.tm_isdst < 0:
            raise AmbiguousDstError(
                f"platform cannot tell whether DST is active at {reference}",
                relative_offset_seconds=deviation,
            )
        dst = Dst.from_isdst(lt.tm_isdst)
        geographic = deviation - dst.extra_hours * SECONDS_PER_HOUR
        return LocalZone(TimeZoneOffset.from_seconds(geographic), dst)

    def __repr__(self) -> str:
        return "SystemClock()"


DstRule = Union[Dst, Callable[[int], Dst]]


class FixedClock:
    """Deterministic oracle with a frozen current instant and zone.

    Args:
        now: Epoch seconds returned by current_instant().
        offset_hours: Geographic offset hours of the simulated host.
        dst: DST state, or a callable mapping epoch seconds to a DST state
            to simulate seasonal switches. Dst.UNSPECIFIED simulates a
            platform that cannot determine DST.
        offset_minutes: Geographic offset minutes.

    Examples:
        >>> clock = FixedClock(now=0, offset_hours=1, dst=Dst.DAYLIGHT)
        >>> clock.local_zone(0)
        LocalZone(offset=TimeZoneOffset(hours=1, minutes=0), dst=<Dst.DAYLIGHT: 1>)
    """

    def __init__(
        self,
        now: int = 0,
        offset_hours: int = 0,
        dst: DstRule = Dst.STANDARD,
        offset_minutes: int = 0,
    ) -> None:
        self._now = now
        self._offset = TimeZoneOffset(offset_hours, offset_minutes)
        self._dst = dst
        self.calls = 0

    def current_instant(self) -> int:
        self.calls += 1
        return self._now

    def local_zone(self, reference: int) -> LocalZone:
        self.calls += 1
        dst = self._dst(reference) if callable(self._dst) else self._dst
        if dst is Dst.UNSPECIFIED:
            raise AmbiguousDstError(
                f"DST state at {reference} is unknown",
                relative_offset_seconds=self._offset.seconds,
            )
        return LocalZone(self._offset, dst)

    def __repr__(self) -> str:
        return f"FixedClock(now={self._now}, offset={self._offset}, dst={self._dst!r})"


class Snapshot:
    """One logical "now" taken from an oracle.

    ``Snapshot.take(oracle)`` asks the oracle once for the current instant
    and once for the local zone at that instant. Later queries for the same
    instant are answered from the cache; other instants are delegated.

    Examples:
        >>> clock = FixedClock(now=100)
        >>> snap = Snapshot.take(clock)
        >>> snap.current_instant(), snap.current_instant()
        (100, 100)
        >>> clock.calls
        2
    """

    __slots__ = ("_oracle", "_now", "_zone", "_error")

    def __init__(
        self,
        oracle: ClockOracle,
        now: int,
        zone: LocalZone | None,
        error: AmbiguousDstError | None,
    ) -> None:
        self._oracle = oracle
        self._now = now
        self._zone = zone
        self._error = error

    @classmethod
    def take(cls, oracle: ClockOracle) -> Snapshot:
        """Query ``oracle`` for the current instant and its local zone."""
        now = oracle.current_instant()
        try:
            return cls(oracle, now, oracle.local_zone(now), None)
        except AmbiguousDstError as e:
            return cls(oracle, now, None, e)

    def current_instant(self) -> int:
        return self._now

    def local_zone(self, reference: int) -> LocalZone:
        if reference != self._now:
            return self._oracle.local_zone(reference)
        if self._zone is None:
            raise self._error or AmbiguousDstError(
                "snapshot holds no local zone", relative_offset_seconds=0
            )
        return self._zone

    def __repr__(self) -> str:
        return f"Snapshot(now={self._now}, oracle={self._oracle!r})"


__all__ = [
    "ClockOracle",
    "LocalZone",
    "SystemClock",
    "FixedClock",
    "Snapshot",
]
