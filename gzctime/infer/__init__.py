"""Free-text date scanner.

The scanner turns loosely formatted date strings into broken-down calendar
fields. It does not convert anything itself: ``Instant.parse(text,
fuzzy=True)`` feeds the fields into the epoch converter unchanged.

Public API:
    scan: Scan a date string into ScannedFields.
    ScannedFields: Broken-down fields with the detected format.
    InferOptions: Configuration for ambiguous numeric dates.
    DateOrder: Enum for date component ordering (YMD, MDY, DMY).

Recognized shapes:
    - "2023-09-20", "2023-09-20T17:17:38+01:00", "2023-09-20 17:17"
    - "20.09.2023 17:17:38", "09/20/2023", "2023/09/20"
    - "Sep 20, 2023 5:17 PM", "20 September 2023", "20. März 2023"

Examples:
    >>> fields = scan("Sep 20, 2023 5:17:38 PM")
    >>> fields.year, fields.month, fields.day, fields.hour
    (2023, 9, 20, 17)
    >>> scan("2023-09-20T17:17:38+01:00").offset
    TimeZoneOffset(hours=1, minutes=0)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from gzctime.errors import ParseError, RangeError
from gzctime.infer._patterns import detect_format
from gzctime.units.timezone import TimeZoneOffset

logger = logging.getLogger(__name__)


class DateOrder(Enum):
    """Order of day and month in ambiguous numeric dates like 01/02/2024."""

    YMD = "YMD"
    MDY = "MDY"
    DMY = "DMY"


@dataclass(frozen=True)
class InferOptions:
    """Configuration for the scanner.

    Attributes:
        date_order: Order for ambiguous numeric dates. Dotted dates are
            always read day first.
    """

    date_order: DateOrder = DateOrder.MDY


@dataclass(frozen=True)
class ScannedFields:
    """Broken-down fields found by the scanner.

    Attributes:
        year, month, day, hour, minute, second: Calendar fields as found.
        offset: Relative UTC offset if the text named one, else None.
        format_detected: Name of the matching template.
        confidence: Confidence score from 0.0 to 1.0.
    """

    year: int
    month: int
    day: int
    hour: int = 0
    minute: int = 0
    second: int = 0
    offset: TimeZoneOffset | None = None
    format_detected: str = ""
    confidence: float = 1.0


def scan(text: str, options: InferOptions | None = None) -> ScannedFields:
    """Scan a free-text date string into broken-down fields.

    The fields are not range checked here; the calendar constructor does
    that when they are used.

    Raises:
        ParseError: If no format matches or the offset is malformed.
    """
    if options is None:
        options = InferOptions()

    text = text.strip()
    if not text:
        raise ParseError("empty string")

    matches = detect_format(text, options.date_order.value)
    if not matches:
        raise ParseError(f"cannot determine date format for: {text!r}")

    best = matches[0]
    components = best.components
    logger.debug(
        "scanned %r as %s (confidence %.2f)", text, best.template.name, best.confidence
    )

    offset = None
    tz_string = components.get("tz_string")
    if isinstance(tz_string, str):
        if tz_string.upper() in ("Z", "UTC", "GMT"):
            offset = TimeZoneOffset.utc()
        else:
            try:
                offset = TimeZoneOffset.from_string(tz_string, relative=True)
            except RangeError as e:
                raise ParseError(f"offset {tz_string!r} in {text!r} is out of range") from e

    return ScannedFields(
        year=components["year"],  # type: ignore[arg-type]
        month=components["month"],  # type: ignore[arg-type]
        day=components["day"],  # type: ignore[arg-type]
        hour=components.get("hour", 0),  # type: ignore[arg-type]
        minute=components.get("minute", 0),  # type: ignore[arg-type]
        second=components.get("second", 0),  # type: ignore[arg-type]
        offset=offset,
        format_detected=best.template.name,
        confidence=best.confidence,
    )


__all__ = [
    "DateOrder",
    "InferOptions",
    "ScannedFields",
    "scan",
]
