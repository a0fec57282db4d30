"""JSON serialization and deserialization for gzctime values.

This module provides functions for converting values to and from
JSON-serializable dictionaries.

Functions:
    to_json: Convert a value to a JSON-serializable dict.
    from_json: Create a value from a JSON dict.

The JSON format carries a type tag for polymorphic deserialization:

    {"_type": "Instant", "value": 1695223058}
    {"_type": "CalendarInstant", "value": "2023-09-20#17:17:38#DST#+01:00",
     "offset": "+01:00"}
    {"_type": "Duration", "value": "D95#00:42:22", "total_seconds": 8210542}

The calendar ``value`` is the GZC string, which only keeps whole offset
hours, so the full offset travels in ``offset``. The INVALID sentinels
serialize with ``"value": null``.

Examples:
    >>> from gzctime.core.duration import Duration
    >>> data = to_json(Duration(95, 0, 42, 22))
    >>> data["value"]
    'D95#00:42:22'
    >>> from_json(data) == Duration(95, 0, 42, 22)
    True
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Union

from gzctime.errors import ParseError

if TYPE_CHECKING:
    from gzctime.core.calendar import CalendarInstant
    from gzctime.core.duration import Duration
    from gzctime.core.instant import Instant

# Type alias for serializable values
GzcType = Union["Instant", "CalendarInstant", "Duration"]


def to_json(value: GzcType) -> dict[str, Any]:
    """Convert a value to a JSON-serializable dictionary.

    Args:
        value: An Instant, CalendarInstant or Duration.

    Returns:
        A dictionary with a ``_type`` tag.

    Raises:
        TypeError: If value is not a supported type.

    Examples:
        >>> from gzctime.core.instant import Instant
        >>> to_json(Instant(0))
        {'_type': 'Instant', 'value': 0}
    """
    # Import here to avoid circular imports
    from gzctime.core.calendar import CalendarInstant
    from gzctime.core.duration import Duration
    from gzctime.core.instant import Instant
    from gzctime.format.gzc import format_calendar, format_duration

    if isinstance(value, Instant):
        return {"_type": "Instant", "value": value.seconds}
    elif isinstance(value, CalendarInstant):
        if not value.is_valid:
            return {"_type": "CalendarInstant", "value": None}
        return {
            "_type": "CalendarInstant",
            "value": format_calendar(value),
            "offset": str(value.offset),
        }
    elif isinstance(value, Duration):
        if not value.is_valid:
            return {"_type": "Duration", "value": None}
        return {
            "_type": "Duration",
            "value": format_duration(value),
            "total_seconds": value.total_seconds,
        }
    else:
        raise TypeError(
            f"expected Instant, CalendarInstant or Duration, got {type(value).__name__}"
        )


def from_json(data: dict[str, Any]) -> GzcType:
    """Create a value from a JSON dictionary.

    Raises:
        ParseError: If the data is missing required fields or has an
            invalid format.
        TypeError: If ``_type`` is not a recognized type.

    Examples:
        >>> from_json({"_type": "Instant", "value": 978307200}).seconds
        978307200
        >>> cal = from_json({"_type": "CalendarInstant",
        ...                  "value": "2023-09-20#17:17:38#DST#+01:00"})
        >>> cal.hour, cal.dst.token
        (17, 'DST')
    """
    from gzctime.core.calendar import CalendarInstant
    from gzctime.core.duration import Duration
    from gzctime.core.instant import Instant
    from gzctime.format.gzc import parse_calendar, parse_duration
    from gzctime.units.dst import Dst
    from gzctime.units.timezone import TimeZoneOffset

    if not isinstance(data, dict):
        raise ParseError(f"expected dict, got {type(data).__name__}")

    type_name = data.get("_type")
    if not type_name:
        raise ParseError("missing '_type' field in JSON data")
    if "value" not in data:
        raise ParseError(f"missing 'value' field for {type_name}")
    value = data["value"]

    if type_name == "Instant":
        if isinstance(value, bool) or not isinstance(value, int):
            raise ParseError(f"Instant value must be an integer, got {value!r}")
        return Instant(value)

    elif type_name == "CalendarInstant":
        if value is None:
            return CalendarInstant.INVALID
        cal = parse_calendar(value, strict=True)
        offset = data.get("offset")
        if offset is not None:
            cal = cal.replace(
                offset=TimeZoneOffset.from_string(
                    offset, relative=cal.dst is Dst.UNSPECIFIED
                )
            )
        return cal

    elif type_name == "Duration":
        if value is None:
            return Duration.INVALID
        return parse_duration(value, strict=True)

    else:
        raise TypeError(f"unknown gzctime type: {type_name!r}")


__all__ = ["to_json", "from_json"]
