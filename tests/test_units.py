"""Tests for Dst, TimeZoneOffset, ResolvedZone and zone requests."""

from __future__ import annotations

import dataclasses

import pytest

from gzctime.errors import ParseError, RangeError
from gzctime.units import (
    AS_UTC,
    LOCAL,
    UTC,
    AsUtc,
    Dst,
    Explicit,
    Local,
    ResolvedZone,
    TimeZoneOffset,
    Utc,
    utc_deviation,
)


class TestDst:
    """Tests for the Dst tri-state."""

    def test_values_follow_isdst(self) -> None:
        """Integer values match the C library convention."""
        assert int(Dst.UNSPECIFIED) == -1
        assert int(Dst.STANDARD) == 0
        assert int(Dst.DAYLIGHT) == 1

    def test_tokens(self) -> None:
        """Each state has a GZC token."""
        assert Dst.UNSPECIFIED.token == "UTC"
        assert Dst.STANDARD.token == "STD"
        assert Dst.DAYLIGHT.token == "DST"

    def test_from_token(self) -> None:
        """Tokens parse back to their state."""
        for dst in Dst:
            assert Dst.from_token(dst.token) is dst

    @pytest.mark.parametrize("token", ["dst", "XYZ", "", "STD "])
    def test_unknown_token(self, token: str) -> None:
        """Tokens are exact and case sensitive."""
        with pytest.raises(ParseError):
            Dst.from_token(token)

    def test_from_isdst(self) -> None:
        """Any positive tm_isdst means daylight saving time."""
        assert Dst.from_isdst(2) is Dst.DAYLIGHT
        assert Dst.from_isdst(0) is Dst.STANDARD
        assert Dst.from_isdst(-5) is Dst.UNSPECIFIED

    def test_extra_hours(self) -> None:
        """Only daylight saving time adds an hour."""
        assert Dst.DAYLIGHT.extra_hours == 1
        assert Dst.STANDARD.extra_hours == 0
        assert Dst.UNSPECIFIED.extra_hours == 0


class TestTimeZoneOffset:
    """Tests for TimeZoneOffset."""

    def test_seconds(self) -> None:
        """Minutes take the sign of the hours."""
        assert TimeZoneOffset(1).seconds == 3600
        assert TimeZoneOffset(-5, 30).seconds == -19800
        assert TimeZoneOffset(5, 45).seconds == 20700

    def test_str(self) -> None:
        """Offsets render as +HH:MM."""
        assert str(TimeZoneOffset(1)) == "+01:00"
        assert str(TimeZoneOffset(-5, 30)) == "-05:30"
        assert str(TimeZoneOffset.utc()) == "+00:00"

    def test_geographic_range(self) -> None:
        """Geographic offsets are limited to -12..+12 hours."""
        TimeZoneOffset(-12)
        TimeZoneOffset(12)
        with pytest.raises(RangeError):
            TimeZoneOffset(13)
        with pytest.raises(RangeError):
            TimeZoneOffset(-13)

    def test_relative_allows_plus_13(self) -> None:
        """A relative deviation may reach +13 hours."""
        assert TimeZoneOffset(13, relative=True).hours == 13
        with pytest.raises(RangeError):
            TimeZoneOffset(14, relative=True)

    def test_minutes_range(self) -> None:
        """Minutes are 0..59."""
        with pytest.raises(RangeError):
            TimeZoneOffset(1, 60)
        with pytest.raises(RangeError):
            TimeZoneOffset(1, -1)

    def test_from_seconds(self) -> None:
        """Sub-minute parts are dropped."""
        assert TimeZoneOffset.from_seconds(-19800) == TimeZoneOffset(-5, 30)
        assert TimeZoneOffset.from_seconds(3659) == TimeZoneOffset(1, 0)

    def test_from_seconds_west_under_an_hour(self) -> None:
        """A negative offset of minutes only cannot keep its sign."""
        with pytest.raises(RangeError):
            TimeZoneOffset.from_seconds(-1800)
        assert TimeZoneOffset.from_seconds(-59) == TimeZoneOffset(0)

    def test_shifted_into_west_under_an_hour(self) -> None:
        """Daylight time on -01:30 would be -00:30, which is rejected."""
        with pytest.raises(RangeError):
            utc_deviation(TimeZoneOffset(-1, 30), Dst.DAYLIGHT)

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("+01:00", TimeZoneOffset(1)),
            ("-0530", TimeZoneOffset(-5, 30)),
            ("+02", TimeZoneOffset(2)),
            ("Z", TimeZoneOffset(0)),
            ("UTC", TimeZoneOffset(0)),
        ],
    )
    def test_from_string(self, text: str, expected: TimeZoneOffset) -> None:
        """Common offset spellings parse."""
        assert TimeZoneOffset.from_string(text) == expected

    def test_from_string_rejects_garbage(self) -> None:
        """Non-offset strings raise ParseError."""
        with pytest.raises(ParseError):
            TimeZoneOffset.from_string("CET")

    def test_shifted(self) -> None:
        """Shifting produces a relative offset."""
        assert TimeZoneOffset(12).shifted(1) == TimeZoneOffset(13, relative=True)
        assert TimeZoneOffset(-5, 30).shifted(1) == TimeZoneOffset(-4, 30)

    def test_hashable(self) -> None:
        """Equal offsets hash equally."""
        assert len({TimeZoneOffset(1), TimeZoneOffset(1, 0)}) == 1


class TestDeviation:
    """Tests for utc_deviation and ResolvedZone."""

    def test_daylight_adds_an_hour(self) -> None:
        """DST deviation is the geographic offset plus one hour."""
        assert utc_deviation(TimeZoneOffset(1), Dst.DAYLIGHT) == TimeZoneOffset(2)

    def test_standard_and_unspecified_unchanged(self) -> None:
        """Standard and unspecified keep the offset."""
        assert utc_deviation(TimeZoneOffset(1), Dst.STANDARD) == TimeZoneOffset(1)
        assert utc_deviation(TimeZoneOffset(2), Dst.UNSPECIFIED) == TimeZoneOffset(2)

    def test_resolved_zone_seconds(self) -> None:
        """deviation_seconds matches deviation."""
        zone = ResolvedZone(TimeZoneOffset(-3, 30), Dst.DAYLIGHT)
        assert zone.deviation_seconds == zone.deviation.seconds == -9000

    def test_resolved_utc(self) -> None:
        """ResolvedZone.utc() is offset zero in standard time."""
        zone = ResolvedZone.utc()
        assert zone.offset.is_utc
        assert zone.dst is Dst.STANDARD
        assert not zone.degraded


class TestZoneRequests:
    """Tests for the ZoneRequest variants."""

    def test_singletons(self) -> None:
        """Module constants are instances of their variant."""
        assert isinstance(LOCAL, Local)
        assert isinstance(UTC, Utc)
        assert isinstance(AS_UTC, AsUtc)

    def test_explicit_offset(self) -> None:
        """Explicit builds a relative offset."""
        assert Explicit(13).offset == TimeZoneOffset(13, relative=True)
        assert Explicit(-3, 30).offset.seconds == -12600

    def test_explicit_out_of_range(self) -> None:
        """Explicit rejects offsets beyond +13."""
        with pytest.raises(RangeError):
            Explicit(14)

    def test_explicit_is_frozen(self) -> None:
        """Zone requests are immutable."""
        request = Explicit(1)
        with pytest.raises(dataclasses.FrozenInstanceError):
            request.hours = 2  # type: ignore[misc]

    def test_equality(self) -> None:
        """Requests compare by value."""
        assert Explicit(1) == Explicit(1)
        assert Local() == LOCAL
