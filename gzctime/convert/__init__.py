"""Epoch converters and serialization.

Converters (EpochConverter implementations):
    - NativeConverter: platform calendar routines
    - OverflowSafeConverter: pure integer 400-year cycle algorithm
    - get_converter: build the converter a ConverterConfig selects

Serialization:
    - to_json / from_json: JSON-friendly dicts
    - calendar_to_bytes / calendar_from_bytes: 24-byte calendar record
    - duration_to_bytes / duration_from_bytes: 33-byte duration record
"""

from __future__ import annotations

import logging

from gzctime.config import ConverterConfig
from gzctime.convert.base import EpochConverter
from gzctime.convert.binary import (
    calendar_from_bytes,
    calendar_to_bytes,
    duration_from_bytes,
    duration_to_bytes,
)
from gzctime.convert.json import from_json, to_json
from gzctime.convert.native import NativeConverter
from gzctime.convert.overflow_safe import OverflowSafeConverter

logger = logging.getLogger(__name__)

_CONVERTERS: dict[str, type[EpochConverter]] = {
    NativeConverter.name: NativeConverter,
    OverflowSafeConverter.name: OverflowSafeConverter,
}


def get_converter(config: ConverterConfig | None = None) -> EpochConverter:
    """Return the converter selected by a configuration.

    Args:
        config: Converter configuration; defaults to ConverterConfig().

    Examples:
        >>> get_converter(ConverterConfig(epoch_bits=32))
        OverflowSafeConverter(epoch_bits=32)
    """
    if config is None:
        config = ConverterConfig()
    cls = _CONVERTERS[config.resolved_algorithm]
    logger.debug(
        "selected %s for %d-bit epochs (algorithm=%s)",
        cls.__name__,
        config.epoch_bits,
        config.algorithm,
    )
    return cls(config.epoch_bits)


__all__: list[str] = [
    "EpochConverter",
    "NativeConverter",
    "OverflowSafeConverter",
    "get_converter",
    "to_json",
    "from_json",
    "calendar_to_bytes",
    "calendar_from_bytes",
    "duration_to_bytes",
    "duration_from_bytes",
]
