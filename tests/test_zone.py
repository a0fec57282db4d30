"""Tests for clock oracles and zone resolution."""

from __future__ import annotations

import calendar
import logging
import time

import pytest

from conftest import SCENARIO_EPOCH
from gzctime.convert import OverflowSafeConverter
from gzctime.core.calendar import CalendarInstant
from gzctime.errors import AmbiguousDstError, RangeError
from gzctime.units.dst import Dst
from gzctime.units.timezone import TimeZoneOffset
from gzctime.units.zone_request import AS_UTC, UTC, Explicit, Local
from gzctime.zone import (
    FixedClock,
    LocalZone,
    Snapshot,
    SystemClock,
    ZoneResolver,
    default_resolver,
)

# 2023-03-26 01:00 UTC and 2023-10-29 01:00 UTC
SUMMER_START = 1679792400
SUMMER_END = 1698541200


def european_summer(epoch: int) -> Dst:
    return Dst.DAYLIGHT if SUMMER_START <= epoch < SUMMER_END else Dst.STANDARD


class AmbiguousAtPlus13:
    """Oracle of a +12 host in DST whose platform cannot report DST."""

    def current_instant(self) -> int:
        return SCENARIO_EPOCH

    def local_zone(self, reference: int) -> LocalZone:
        raise AmbiguousDstError("unknown", relative_offset_seconds=13 * 3600)


class TestFixedClock:
    """Tests for the deterministic oracle."""

    def test_answers(self) -> None:
        """The clock returns its frozen instant and zone."""
        clock = FixedClock(now=42, offset_hours=-5, dst=Dst.STANDARD)
        assert clock.current_instant() == 42
        assert clock.local_zone(0) == LocalZone(TimeZoneOffset(-5), Dst.STANDARD)

    def test_dst_rule(self) -> None:
        """A callable decides DST per instant."""
        clock = FixedClock(offset_hours=1, dst=european_summer)
        assert clock.local_zone(SCENARIO_EPOCH).dst is Dst.DAYLIGHT
        assert clock.local_zone(SUMMER_END).dst is Dst.STANDARD

    def test_unspecified_raises(self) -> None:
        """UNSPECIFIED simulates an undecidable platform."""
        clock = FixedClock(offset_hours=2, dst=Dst.UNSPECIFIED)
        with pytest.raises(AmbiguousDstError) as excinfo:
            clock.local_zone(0)
        assert excinfo.value.relative_offset_seconds == 7200

    def test_counts_calls(self) -> None:
        """Each query increments calls."""
        clock = FixedClock()
        clock.current_instant()
        clock.local_zone(0)
        assert clock.calls == 2


class TestSystemClock:
    """Tests for the platform oracle."""

    def test_current_instant_is_int(self) -> None:
        """The current instant is whole seconds."""
        now = SystemClock().current_instant()
        assert isinstance(now, int)
        assert abs(now - time.time()) < 5

    def test_local_zone_matches_platform(self) -> None:
        """The geographic offset plus DST equals the platform deviation."""
        zone = SystemClock().local_zone(SCENARIO_EPOCH)
        deviation = calendar.timegm(time.localtime(SCENARIO_EPOCH)) - SCENARIO_EPOCH
        assert zone.offset.seconds + zone.dst.extra_hours * 3600 == deviation
        assert zone.dst in (Dst.STANDARD, Dst.DAYLIGHT)


class TestResolve:
    """Tests for ZoneResolver views of the scenario instant."""

    def test_local(self, cet_summer: ZoneResolver) -> None:
        """Local keeps the geographic offset and tags DST."""
        assert str(cet_summer.calendar(SCENARIO_EPOCH)) == "2023-09-20#17:17:38#DST#+01:00"

    def test_as_utc(self, cet_summer: ZoneResolver) -> None:
        """AsUtc folds DST into a relative offset."""
        cal = cet_summer.calendar(SCENARIO_EPOCH, AS_UTC)
        assert str(cal) == "2023-09-20#17:17:38#UTC#+02:00"
        assert cal.dst is Dst.UNSPECIFIED

    def test_utc(self, cet_summer: ZoneResolver) -> None:
        """Utc is offset zero in standard time."""
        assert str(cet_summer.calendar(SCENARIO_EPOCH, UTC)) == "2023-09-20#15:17:38#STD#+00:00"

    def test_explicit(self, cet_summer: ZoneResolver) -> None:
        """Explicit uses the relative offset as is."""
        assert (
            str(cet_summer.calendar(SCENARIO_EPOCH, Explicit(0)))
            == "2023-09-20#15:17:38#UTC#+00:00"
        )
        assert (
            str(cet_summer.calendar(SCENARIO_EPOCH, Explicit(-5)))
            == "2023-09-20#10:17:38#UTC#-05:00"
        )

    def test_views_denote_same_instant(self, cet_summer: ZoneResolver) -> None:
        """Every view converts back to the original instant."""
        for request in (Local(), AS_UTC, UTC, Explicit(13), Explicit(-12)):
            cal = cet_summer.calendar(SCENARIO_EPOCH, request)
            assert cet_summer.to_epoch(cal) == SCENARIO_EPOCH

    def test_reexpress(self, cet_summer: ZoneResolver) -> None:
        """reexpress changes the zone, not the instant."""
        local = cet_summer.calendar(SCENARIO_EPOCH)
        moved = cet_summer.reexpress(local, Explicit(9))
        assert moved.hour == 0
        assert moved.day == 21
        assert cet_summer.to_epoch(moved) == SCENARIO_EPOCH

    def test_unknown_request(self, cet_summer: ZoneResolver) -> None:
        """Anything but a zone request raises TypeError."""
        with pytest.raises(TypeError):
            cet_summer.resolve("local")  # type: ignore[arg-type]

    def test_west_half_hour_host_in_daylight_time(self) -> None:
        """A -01:30 host in DST reads -00:30 locally and cannot fold it."""
        resolver = ZoneResolver(
            FixedClock(offset_hours=-1, offset_minutes=30, dst=Dst.DAYLIGHT),
            OverflowSafeConverter(),
        )
        local = resolver.calendar(0)
        assert (local.year, local.month, local.day) == (1969, 12, 31)
        assert (local.hour, local.minute) == (23, 30)
        assert local.offset == TimeZoneOffset(-1, 30)
        assert resolver.to_epoch(local) == 0
        with pytest.raises(RangeError):
            resolver.calendar(0, AS_UTC)

    def test_utc_deviation(self) -> None:
        """The static helper adds the DST hour."""
        assert ZoneResolver.utc_deviation(TimeZoneOffset(1), Dst.DAYLIGHT).hours == 2

    def test_seasonal_switch(self) -> None:
        """DST follows the instant being converted, not the current one."""
        resolver = ZoneResolver(
            FixedClock(now=SCENARIO_EPOCH, offset_hours=1, dst=european_summer),
            OverflowSafeConverter(),
        )
        winter = resolver.calendar(1673784000)  # 2023-01-15 12:00 UTC
        assert str(winter) == "2023-01-15#13:00:00#STD#+01:00"


class TestDegradation:
    """When DST cannot be determined the resolver falls back."""

    def test_fallback_to_relative_offset(self, caplog: pytest.LogCaptureFixture) -> None:
        """Relative offset as geographic zone, standard time, a warning."""
        resolver = ZoneResolver(
            FixedClock(now=SCENARIO_EPOCH, offset_hours=1, dst=Dst.UNSPECIFIED),
            OverflowSafeConverter(),
        )
        with caplog.at_level(logging.WARNING, logger="gzctime.zone.resolver"):
            zone = resolver.local_time_zone()
        assert zone.degraded
        assert zone.dst is Dst.STANDARD
        assert zone.offset == TimeZoneOffset(1)
        assert "DST state unknown" in caplog.text

    def test_degraded_wall_clock_is_correct(self) -> None:
        """The degraded view still shows the right wall clock."""
        resolver = ZoneResolver(AmbiguousAtPlus13(), OverflowSafeConverter())
        cal = resolver.calendar(SCENARIO_EPOCH)
        assert (cal.day, cal.hour) == (21, 4)
        assert cal.offset.hours == 13
        assert cal.dst is Dst.STANDARD
        assert resolver.to_epoch(cal) == SCENARIO_EPOCH

    def test_as_utc_degraded(self) -> None:
        """AsUtc propagates the degraded flag."""
        resolver = ZoneResolver(AmbiguousAtPlus13(), OverflowSafeConverter())
        zone = resolver.resolve(AS_UTC, SCENARIO_EPOCH)
        assert zone.degraded
        assert zone.dst is Dst.UNSPECIFIED


class TestSnapshot:
    """Tests for Snapshot caching."""

    def test_single_oracle_query(self) -> None:
        """Views of the snapshot instant do not query the oracle again."""
        clock = FixedClock(now=SCENARIO_EPOCH, offset_hours=1, dst=Dst.DAYLIGHT)
        snap = Snapshot.take(clock)
        assert clock.calls == 2
        resolver = ZoneResolver(snap, OverflowSafeConverter())
        resolver.calendar(SCENARIO_EPOCH)
        resolver.calendar(SCENARIO_EPOCH, AS_UTC)
        resolver.local_time_zone()
        assert clock.calls == 2

    def test_other_instants_are_delegated(self) -> None:
        """Queries for other instants reach the oracle."""
        clock = FixedClock(now=SCENARIO_EPOCH)
        snap = Snapshot.take(clock)
        snap.local_zone(0)
        assert clock.calls == 3

    def test_cached_error(self) -> None:
        """An ambiguous answer is cached and re-raised."""
        clock = FixedClock(now=5, dst=Dst.UNSPECIFIED)
        snap = Snapshot.take(clock)
        with pytest.raises(AmbiguousDstError):
            snap.local_zone(5)
        assert clock.calls == 2

    def test_empty_snapshot_raises(self) -> None:
        """A snapshot built without zone or error has nothing to answer."""
        snap = Snapshot(FixedClock(), 5, None, None)
        with pytest.raises(AmbiguousDstError):
            snap.local_zone(5)


class TestLocalCalendar:
    """Tests for tagging wall clock fields with the local zone."""

    @pytest.fixture
    def seasonal(self) -> ZoneResolver:
        return ZoneResolver(
            FixedClock(now=SCENARIO_EPOCH, offset_hours=1, dst=european_summer),
            OverflowSafeConverter(),
        )

    def test_summer(self, seasonal: ZoneResolver) -> None:
        """A summer wall clock is tagged DST."""
        cal = seasonal.local_calendar(2023, 9, 20, 17, 17, 38)
        assert cal.dst is Dst.DAYLIGHT
        assert seasonal.to_epoch(cal) == SCENARIO_EPOCH

    def test_winter(self, seasonal: ZoneResolver) -> None:
        """A winter wall clock is tagged STD."""
        cal = seasonal.local_calendar(2023, 1, 15, 13)
        assert cal.dst is Dst.STANDARD
        assert seasonal.to_epoch(cal) == 1673784000

    def test_repeated_hour_reads_as_standard(self, seasonal: ZoneResolver) -> None:
        """02:30 on the fall-back night is read in standard time."""
        cal = seasonal.local_calendar(2023, 10, 29, 2, 30)
        assert cal.dst is Dst.STANDARD
        assert seasonal.to_epoch(cal) == SUMMER_END + 1800

    def test_after_spring_forward(self, seasonal: ZoneResolver) -> None:
        """03:30 on the spring-forward night is daylight saving time."""
        cal = seasonal.local_calendar(2023, 3, 26, 3, 30)
        assert cal.dst is Dst.DAYLIGHT
        assert seasonal.to_epoch(cal) == SUMMER_START + 1800


class TestDefaultResolver:
    """Tests for the shared resolver."""

    def test_cached(self) -> None:
        """The default resolver is created once."""
        assert default_resolver() is default_resolver()
        assert isinstance(default_resolver().oracle, SystemClock)

    def test_repr(self, cet_summer: ZoneResolver) -> None:
        """repr shows oracle and converter."""
        assert "OverflowSafeConverter(epoch_bits=64)" in repr(cet_summer)


def test_calendar_instant_identity(cet_summer: ZoneResolver) -> None:
    """Resolver output is a CalendarInstant."""
    assert isinstance(cet_summer.calendar(0), CalendarInstant)
