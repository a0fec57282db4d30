"""Daylight saving time tri-state.

This module provides the Dst enum distinguishing standard time, daylight
saving time and an unspecified state in which the accompanying offset
already is the relative deviation from UTC.
"""

from __future__ import annotations

from enum import IntEnum

from gzctime.errors import ParseError


class Dst(IntEnum):
    """Daylight saving state of a calendar value.

    The integer values match the ``tm_isdst`` convention of the C library
    and the signed 8-bit field of the binary calendar record.

    Examples:
        >>> Dst.DAYLIGHT.token
        'DST'
        >>> Dst.from_token("UTC")
        <Dst.UNSPECIFIED: -1>
    """

    UNSPECIFIED = -1
    STANDARD = 0
    DAYLIGHT = 1

    @property
    def token(self) -> str:
        """Return the GZC string token: UTC, STD or DST."""
        return _TOKENS[self]

    @property
    def extra_hours(self) -> int:
        """Return the hours daylight saving adds to the geographic offset."""
        return 1 if self is Dst.DAYLIGHT else 0

    @classmethod
    def from_token(cls, token: str) -> Dst:
        """Parse a GZC DST token.

        Raises:
            ParseError: If the token is not exactly UTC, STD or DST.
        """
        try:
            return _BY_TOKEN[token]
        except KeyError:
            raise ParseError(f"unknown DST token: {token!r}") from None

    @classmethod
    def from_isdst(cls, isdst: int) -> Dst:
        """Map a C library ``tm_isdst`` value (any sign) onto Dst."""
        if isdst > 0:
            return cls.DAYLIGHT
        if isdst == 0:
            return cls.STANDARD
        return cls.UNSPECIFIED


_TOKENS = {
    Dst.UNSPECIFIED: "UTC",
    Dst.STANDARD: "STD",
    Dst.DAYLIGHT: "DST",
}
_BY_TOKEN = {token: dst for dst, token in _TOKENS.items()}


__all__ = ["Dst"]
