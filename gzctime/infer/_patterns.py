"""Format detection for the free-text scanner.

Internal module - use scan() from gzctime.infer instead.
"""

from __future__ import annotations

from dataclasses import dataclass

from gzctime.infer._formats import TEMPLATES, Fields, FormatTemplate


@dataclass
class PatternMatch:
    """A template that matched, with its fields and adjusted confidence."""

    template: FormatTemplate
    components: Fields
    confidence: float


def detect_format(text: str, date_order: str = "YMD") -> list[PatternMatch]:
    """Return all templates matching text, highest confidence first.

    Templates whose month name cannot be resolved are skipped.
    """
    text = text.strip()
    if not text:
        return []

    matches: list[PatternMatch] = []
    for template in TEMPLATES:
        match = template.pattern.match(text)
        if not match:
            continue
        components = template.extractor(match, date_order)
        if components.get("month") is None:
            continue
        matches.append(
            PatternMatch(
                template=template,
                components=components,
                confidence=_adjust_confidence(template, components),
            )
        )

    matches.sort(key=lambda m: m.confidence, reverse=True)
    return matches


def _adjust_confidence(template: FormatTemplate, components: Fields) -> float:
    """Halve the confidence for each field outside its plain range."""
    confidence = template.confidence
    limits = {
        "month": (1, 12),
        "day": (1, 31),
        "hour": (0, 23),
        "minute": (0, 59),
        "second": (0, 59),
    }
    for name, (low, high) in limits.items():
        value = components.get(name)
        if isinstance(value, int) and not low <= value <= high:
            confidence *= 0.5
    return confidence


__all__ = [
    "PatternMatch",
    "detect_format",
]
