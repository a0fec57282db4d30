"""Pytest configuration and fixtures for gzctime tests."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Add the parent directory to sys.path so gzctime can be imported
# without needing to install the package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from gzctime.convert import NativeConverter, OverflowSafeConverter  # noqa: E402
from gzctime.units.dst import Dst  # noqa: E402
from gzctime.zone import FixedClock, ZoneResolver  # noqa: E402

# 2023-09-20 15:17:38 UTC
SCENARIO_EPOCH = 1695223058


@pytest.fixture
def cet_summer_clock() -> FixedClock:
    """A host at +01:00 with daylight saving time active."""
    return FixedClock(now=SCENARIO_EPOCH, offset_hours=1, dst=Dst.DAYLIGHT)


@pytest.fixture
def cet_summer(cet_summer_clock: FixedClock) -> ZoneResolver:
    """Resolver for a +01:00 host in summer, 64-bit overflow-safe converter."""
    return ZoneResolver(cet_summer_clock, OverflowSafeConverter())


@pytest.fixture
def utc_host() -> ZoneResolver:
    """Resolver for a host sitting at UTC without DST."""
    return ZoneResolver(FixedClock(now=SCENARIO_EPOCH), OverflowSafeConverter())


@pytest.fixture(params=["native", "overflow_safe"])
def converter(request: pytest.FixtureRequest):
    """Both 64-bit converters."""
    if request.param == "native":
        return NativeConverter()
    return OverflowSafeConverter()
