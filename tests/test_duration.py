"""Tests for Duration and the arithmetic helpers."""

from __future__ import annotations

import pytest

from gzctime.arithmetic import add, duration_seconds, subtract, to_duration
from gzctime.core.duration import Duration
from gzctime.core.instant import Instant
from gzctime.errors import RangeError


class TestDurationConstruction:
    """Tests for Duration construction."""

    def test_fields(self) -> None:
        """Magnitudes are stored unnormalized."""
        d = Duration(0, 30, 0, 0)
        assert d.days == 0
        assert d.hours == 30
        assert d.total_seconds == 108000

    def test_sign(self) -> None:
        """The sign applies to every magnitude."""
        d = Duration(1, 0, 0, 1, sign=-1)
        assert d.is_negative
        assert d.total_seconds == -86401

    @pytest.mark.parametrize("sign", [0, 2, -2])
    def test_bad_sign(self, sign: int) -> None:
        """Only +1 and -1 are signs."""
        with pytest.raises(RangeError):
            Duration(1, sign=sign)

    def test_negative_magnitude(self) -> None:
        """Magnitudes are non-negative."""
        with pytest.raises(RangeError):
            Duration(-1)

    def test_magnitude_limit(self) -> None:
        """Magnitudes fit 64 unsigned bits."""
        Duration(2**64 - 1)
        with pytest.raises(RangeError):
            Duration(2**64)


class TestDurationValues:
    """Tests for sentinels and value semantics."""

    def test_zero(self) -> None:
        """ZERO is falsy and valid."""
        assert not Duration.ZERO
        assert Duration.ZERO.is_valid

    def test_invalid(self) -> None:
        """INVALID carries the maxima and prints its name."""
        invalid = Duration.INVALID
        assert not invalid.is_valid
        assert invalid.days == 2**64 - 1
        assert invalid.sign == 127
        assert repr(invalid) == "Duration.INVALID"
        assert str(invalid) == "Duration.INVALID"

    def test_neg_and_abs(self) -> None:
        """Negation flips the sign only."""
        d = Duration(1, 2, 3, 4)
        assert (-d).sign == -1
        assert abs(-d) == d
        assert -Duration.INVALID is Duration.INVALID

    def test_equality_is_fieldwise(self) -> None:
        """30 hours and 1 day 6 hours are different values."""
        assert Duration(0, 30) != Duration(1, 6)
        assert Duration(0, 30).total_seconds == Duration(1, 6).total_seconds

    def test_str(self) -> None:
        """str() is the GZC duration string."""
        assert str(Duration(95, 0, 42, 22)) == "D95#00:42:22"
        assert str(Duration(0, 0, 0, 30, -1)) == "D-0#00:00:30"


class TestDecomposition:
    """Tests for to_duration and duration_seconds."""

    def test_scenario(self) -> None:
        """8210542 seconds are 95 days, 42 minutes and 22 seconds."""
        assert to_duration(8210542) == Duration(95, 0, 42, 22)

    def test_negative(self) -> None:
        """The sign is taken before splitting."""
        assert to_duration(-61) == Duration(0, 0, 1, 1, -1)

    def test_zero(self) -> None:
        """Zero is positive."""
        assert to_duration(0) == Duration.ZERO

    def test_from_seconds_alias(self) -> None:
        """Duration.from_seconds delegates to to_duration."""
        assert Duration.from_seconds(3661) == Duration(0, 1, 1, 1)

    def test_recompose(self) -> None:
        """duration_seconds inverts to_duration."""
        for seconds in (-10**12, -86401, -1, 0, 59, 8210542, 2**62):
            assert duration_seconds(to_duration(seconds)) == seconds

    def test_recompose_overflow(self) -> None:
        """A sum beyond the epoch width raises RangeError."""
        with pytest.raises(RangeError):
            duration_seconds(Duration(2**64 - 1))
        with pytest.raises(RangeError):
            Duration(days=30000).to_seconds(epoch_bits=32)

    def test_recompose_invalid(self) -> None:
        """INVALID cannot be recomposed."""
        with pytest.raises(RangeError):
            duration_seconds(Duration.INVALID)


class TestInstantArithmetic:
    """Tests for add and subtract."""

    def test_instant_minus_instant(self) -> None:
        """The difference is an instant counting the elapsed seconds."""
        diff = subtract(Instant(8210542), Instant(0))
        assert diff == Instant(8210542)
        assert diff.duration() == Duration(95, 0, 42, 22)

    def test_instant_plus_instant(self) -> None:
        """Instants add their epoch counts."""
        assert add(Instant(10), Instant(-3)) == Instant(7)

    def test_instant_plus_duration(self) -> None:
        """Durations add their signed seconds."""
        assert add(Instant(0), Duration(1)) == Instant(86400)
        assert subtract(Instant(0), Duration(0, 1, sign=-1)) == Instant(3600)

    def test_operators(self) -> None:
        """Instant operators delegate to the helpers."""
        assert Instant(5) + Duration(0, 0, 0, 5) == Instant(10)
        assert Instant(5) - Instant(2) == Instant(3)

    def test_unsupported_operand(self) -> None:
        """Plain integers are not operands."""
        with pytest.raises(TypeError):
            Instant(5) + 5  # type: ignore[operator]
        with pytest.raises(TypeError):
            add(5, Instant(1))  # type: ignore[arg-type]

    def test_overflow(self) -> None:
        """Results outside 64 bits raise RangeError."""
        with pytest.raises(RangeError):
            Instant(2**63 - 1) + Instant(1)
