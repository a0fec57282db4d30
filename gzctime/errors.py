"""gzctime exception hierarchy.

All gzctime-specific exceptions inherit from GzcTimeError.
"""

from __future__ import annotations


class GzcTimeError(Exception):
    """Base exception for all gzctime errors."""

    pass


class ParseError(GzcTimeError):
    """Failed to parse a string representation.

    The non-strict codec functions translate this error into the invalid
    sentinel value instead of raising it.

    Examples:
        - Calendar string not matching YYYY-MM-DD#hh:mm:ss#TOK#+hh:00
        - Unknown DST token (anything other than UTC, STD, DST)
        - Duration string not starting with 'D'
    """

    pass


class RangeError(GzcTimeError):
    """Value outside its representable bounds.

    Raised, never clamped, when a calendar field is out of range or an
    epoch value does not fit into the configured epoch width.

    Examples:
        - Month value outside 1-12
        - February 29 in a non-leap year
        - Offset hours outside -12..+12
        - Recomposed duration larger than a 64-bit epoch
    """

    pass


class AmbiguousDstError(GzcTimeError):
    """The platform clock cannot tell whether daylight saving time is active.

    Raised by clock oracles. ZoneResolver catches it and degrades to the
    relative offset with dst forced to standard time.
    """

    def __init__(self, message: str, relative_offset_seconds: int = 0) -> None:
        super().__init__(message)
        self.relative_offset_seconds = relative_offset_seconds


__all__ = [
    "GzcTimeError",
    "ParseError",
    "RangeError",
    "AmbiguousDstError",
]
