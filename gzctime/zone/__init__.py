"""Local zone oracles and zone request resolution.

This module provides:
    - ClockOracle, LocalZone: the oracle protocol and its answer
    - SystemClock, FixedClock, Snapshot: oracle implementations
    - ZoneResolver: resolves zone requests into calendar views
"""

from __future__ import annotations

from gzctime.zone.oracle import ClockOracle, FixedClock, LocalZone, Snapshot, SystemClock
from gzctime.zone.resolver import ZoneResolver, default_resolver

__all__: list[str] = [
    "ClockOracle",
    "LocalZone",
    "SystemClock",
    "FixedClock",
    "Snapshot",
    "ZoneResolver",
    "default_resolver",
]
