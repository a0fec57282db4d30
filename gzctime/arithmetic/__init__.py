"""Duration and instant arithmetic.

Arithmetic Operations (from gzctime.arithmetic.ops):
    - to_duration: split signed seconds into a Duration
    - duration_seconds: recompose a Duration into signed seconds
    - add: add an Instant or Duration to an Instant
    - subtract: subtract an Instant or Duration from an Instant
"""

from __future__ import annotations

from gzctime.arithmetic.ops import add, duration_seconds, subtract, to_duration

__all__: list[str] = [
    "to_duration",
    "duration_seconds",
    "add",
    "subtract",
]
