"""Tests for the free-text date scanner."""

from __future__ import annotations

import pytest

from gzctime.errors import ParseError
from gzctime.infer import DateOrder, InferOptions, ScannedFields, scan
from gzctime.infer._formats import month_from_name
from gzctime.infer._patterns import detect_format
from gzctime.units.timezone import TimeZoneOffset


class TestScannedFields:
    """Tests for the ScannedFields dataclass."""

    def test_frozen(self) -> None:
        """Scanned fields are immutable."""
        fields = scan("2023-09-20")
        with pytest.raises(AttributeError):
            fields.year = 2024  # type: ignore[misc]

    def test_defaults(self) -> None:
        """Date-only input has a midnight clock and no offset."""
        fields = scan("2023-09-20")
        assert fields == ScannedFields(2023, 9, 20, format_detected="iso", confidence=1.0)


class TestIso:
    """Tests for ISO-like input."""

    def test_full(self) -> None:
        """Date, time and offset."""
        fields = scan("2023-09-20T17:17:38+01:00")
        assert (fields.year, fields.month, fields.day) == (2023, 9, 20)
        assert (fields.hour, fields.minute, fields.second) == (17, 17, 38)
        assert fields.offset == TimeZoneOffset(1)

    def test_space_separator_without_seconds(self) -> None:
        """A space separates date and time; seconds are optional."""
        fields = scan("2023-09-20 17:17")
        assert (fields.hour, fields.minute, fields.second) == (17, 17, 0)

    @pytest.mark.parametrize("suffix", ["Z", "UTC", " GMT"])
    def test_utc_suffixes(self, suffix: str) -> None:
        """Z, UTC and GMT are offset zero."""
        assert scan("2023-09-20T17:17:38" + suffix).offset == TimeZoneOffset.utc()

    def test_plus_13(self) -> None:
        """Scanned offsets are relative and may reach +13."""
        assert scan("2023-09-21T04:17:38+13:00").offset.hours == 13

    def test_offset_out_of_range(self) -> None:
        """Offsets beyond +13 raise ParseError."""
        with pytest.raises(ParseError):
            scan("2023-09-21T04:17:38+14:00")


class TestNumeric:
    """Tests for numeric dates with separators."""

    def test_dotted_is_day_first(self) -> None:
        """Dotted dates are read day first regardless of options."""
        fields = scan("20.09.2023 17:17:38")
        assert (fields.day, fields.month, fields.hour) == (20, 9, 17)

    def test_slash_mdy_default(self) -> None:
        """Slashed dates follow the MDY default."""
        fields = scan("09/20/2023")
        assert (fields.month, fields.day) == (9, 20)

    def test_slash_dmy_option(self) -> None:
        """DMY reads the day first."""
        fields = scan("01/02/2024", InferOptions(date_order=DateOrder.DMY))
        assert (fields.day, fields.month) == (1, 2)

    def test_year_first(self) -> None:
        """A four digit first group is the year."""
        fields = scan("2023/09/20")
        assert (fields.year, fields.month, fields.day) == (2023, 9, 20)

    def test_two_digit_year(self) -> None:
        """Two digit years are in the 2000s."""
        assert scan("20.09.23").year == 2023


class TestNamedMonths:
    """Tests for dates with month names."""

    def test_month_first_with_pm(self) -> None:
        """English month-first with a 12-hour clock."""
        fields = scan("Sep 20, 2023 5:17:38 PM")
        assert (fields.month, fields.day, fields.hour) == (9, 20, 17)
        assert fields.format_detected == "named_month_mdy"

    def test_midnight_am(self) -> None:
        """12 AM is midnight."""
        assert scan("Sep 20, 2023 12:05 AM").hour == 0

    def test_day_first_german(self) -> None:
        """German day-first with a dotted day."""
        fields = scan("20. März 2023 17:17")
        assert (fields.day, fields.month, fields.hour) == (20, 3, 17)

    def test_day_first_english(self) -> None:
        """English day-first with a full month name."""
        fields = scan("20 September 2023")
        assert fields.month == 9
        assert fields.format_detected == "named_month_dmy"

    def test_prefix_names(self) -> None:
        """Unambiguous prefixes like Sept resolve."""
        assert month_from_name("Sept") == 9
        assert month_from_name("sept.") == 9
        assert month_from_name("janv.") == 1
        assert month_from_name("Xyz") is None

    def test_unknown_month_name(self) -> None:
        """A word that is no month does not match."""
        with pytest.raises(ParseError):
            scan("Foo 20, 2023")


class TestDetection:
    """Tests for format detection and confidence."""

    def test_empty(self) -> None:
        """Blank input raises ParseError."""
        with pytest.raises(ParseError, match="empty"):
            scan("   ")

    def test_no_match(self) -> None:
        """Unrecognized input raises ParseError."""
        with pytest.raises(ParseError, match="cannot determine"):
            scan("next tuesday")

    def test_best_match_first(self) -> None:
        """Matches are sorted by confidence."""
        matches = detect_format("2023-09-20", "MDY")
        assert matches[0].template.name == "iso"
        assert all(a.confidence >= b.confidence for a, b in zip(matches, matches[1:]))

    def test_out_of_range_lowers_confidence(self) -> None:
        """Implausible fields halve the confidence."""
        fields = scan("13/45/2023")
        assert fields.confidence < 0.8
