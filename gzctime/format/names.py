"""Localized weekday and month names.

Names are looked up by a language tag. Regional subtags are ignored
("de-AT" reads as "de"), and unknown languages fall back to English.

Examples:
    >>> weekday_name(3)
    'Wednesday'
    >>> month_name(9, "de")
    'September'
    >>> weekday_name(1, "fr-CA", abbreviated=True)
    'lun.'
"""

from __future__ import annotations

import logging

from gzctime.errors import RangeError

logger = logging.getLogger(__name__)

DEFAULT_LANGUAGE = "en"

_WEEKDAYS: dict[str, tuple[str, ...]] = {
    "en": ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"),
    "de": ("Montag", "Dienstag", "Mittwoch", "Donnerstag", "Freitag", "Samstag", "Sonntag"),
    "fr": ("lundi", "mardi", "mercredi", "jeudi", "vendredi", "samedi", "dimanche"),
}

_WEEKDAYS_ABBR: dict[str, tuple[str, ...]] = {
    "en": ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"),
    "de": ("Mo", "Di", "Mi", "Do", "Fr", "Sa", "So"),
    "fr": ("lun.", "mar.", "mer.", "jeu.", "ven.", "sam.", "dim."),
}

_MONTHS: dict[str, tuple[str, ...]] = {
    "en": (
        "January", "February", "March", "April", "May", "June",
        "July", "August", "September", "October", "November", "December",
    ),
    "de": (
        "Januar", "Februar", "März", "April", "Mai", "Juni",
        "Juli", "August", "September", "Oktober", "November", "Dezember",
    ),
    "fr": (
        "janvier", "février", "mars", "avril", "mai", "juin",
        "juillet", "août", "septembre", "octobre", "novembre", "décembre",
    ),
}

_MONTHS_ABBR: dict[str, tuple[str, ...]] = {
    "en": ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"),
    "de": ("Jan", "Feb", "Mär", "Apr", "Mai", "Jun", "Jul", "Aug", "Sep", "Okt", "Nov", "Dez"),
    "fr": (
        "janv.", "févr.", "mars", "avr.", "mai", "juin",
        "juil.", "août", "sept.", "oct.", "nov.", "déc.",
    ),
}


def normalize_language(language: str | None) -> str:
    """Return the supported base language for a tag, English if unknown."""
    if not language:
        return DEFAULT_LANGUAGE
    base = language.replace("_", "-").split("-", 1)[0].lower()
    if base not in _WEEKDAYS:
        logger.debug("no names for language %r, using %r", language, DEFAULT_LANGUAGE)
        return DEFAULT_LANGUAGE
    return base


def supported_languages() -> tuple[str, ...]:
    return tuple(_WEEKDAYS)


def weekday_name(day_of_week: int, language: str | None = None, *, abbreviated: bool = False) -> str:
    """Return the name of a day of week, 1 (Monday) to 7 (Sunday).

    Raises:
        RangeError: If day_of_week is outside 1-7.
    """
    if not 1 <= day_of_week <= 7:
        raise RangeError(f"day of week must be between 1 and 7, got {day_of_week}")
    table = _WEEKDAYS_ABBR if abbreviated else _WEEKDAYS
    return table[normalize_language(language)][day_of_week - 1]


def month_name(month: int, language: str | None = None, *, abbreviated: bool = False) -> str:
    """Return the name of a month, 1-12.

    Raises:
        RangeError: If month is outside 1-12.
    """
    if not 1 <= month <= 12:
        raise RangeError(f"month must be between 1 and 12, got {month}")
    table = _MONTHS_ABBR if abbreviated else _MONTHS
    return table[normalize_language(language)][month - 1]


def lookup_weekday(name: str) -> int:
    """Return the day of week (1-7) for a full or abbreviated name in any language.

    Raises:
        KeyError: If the name is unknown.
    """
    return _lookup(name, (_WEEKDAYS, _WEEKDAYS_ABBR))


def lookup_month(name: str) -> int:
    """Return the month (1-12) for a full or abbreviated name in any language.

    Raises:
        KeyError: If the name is unknown.
    """
    return _lookup(name, (_MONTHS, _MONTHS_ABBR))


def _lookup(name: str, tables: tuple[dict[str, tuple[str, ...]], ...]) -> int:
    folded = name.casefold()
    for table in tables:
        for names in table.values():
            for index, candidate in enumerate(names):
                if candidate.casefold() == folded:
                    return index + 1
    raise KeyError(name)


__all__ = [
    "DEFAULT_LANGUAGE",
    "normalize_language",
    "supported_languages",
    "weekday_name",
    "month_name",
    "lookup_weekday",
    "lookup_month",
]
