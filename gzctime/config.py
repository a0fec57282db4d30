"""Converter configuration.

ConverterConfig selects the epoch width, the conversion algorithm and the
default language of localized names. ``ConverterConfig.from_env()`` reads
overrides from the environment:

    GZCTIME_EPOCH_BITS   32 or 64
    GZCTIME_ALGORITHM    auto, native or overflow_safe
    GZCTIME_LANGUAGE     language tag for weekday and month names
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import ClassVar, Mapping

from gzctime._internal.constants import SUPPORTED_EPOCH_BITS
from gzctime.errors import RangeError

ENV_EPOCH_BITS = "GZCTIME_EPOCH_BITS"
ENV_ALGORITHM = "GZCTIME_ALGORITHM"
ENV_LANGUAGE = "GZCTIME_LANGUAGE"


@dataclass(frozen=True)
class ConverterConfig:
    """Configuration of the epoch converter.

    Attributes:
        epoch_bits: Width of the signed epoch counter, 32 or 64.
        algorithm: "native", "overflow_safe" or "auto". Auto picks the
            overflow-safe converter for a 32-bit width and the native one
            for a 64-bit width.
        language: Default language tag for localized names.

    Examples:
        >>> ConverterConfig().resolved_algorithm
        'native'
        >>> ConverterConfig(epoch_bits=32).resolved_algorithm
        'overflow_safe'
    """

    epoch_bits: int = 64
    algorithm: str = "auto"
    language: str = "en"

    ALGORITHMS: ClassVar[tuple[str, ...]] = ("auto", "native", "overflow_safe")

    def __post_init__(self) -> None:
        if self.epoch_bits not in SUPPORTED_EPOCH_BITS:
            raise RangeError(
                f"epoch_bits must be one of {SUPPORTED_EPOCH_BITS}, got {self.epoch_bits!r}"
            )
        if self.algorithm not in self.ALGORITHMS:
            raise RangeError(
                f"algorithm must be one of {self.ALGORITHMS}, got {self.algorithm!r}"
            )
        if not self.language:
            raise RangeError("language must not be empty")

    @property
    def resolved_algorithm(self) -> str:
        """Return the concrete algorithm name, resolving "auto"."""
        if self.algorithm != "auto":
            return self.algorithm
        return "overflow_safe" if self.epoch_bits == 32 else "native"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> ConverterConfig:
        """Build a configuration from environment variables.

        Unset variables keep their defaults.

        Raises:
            RangeError: If a variable holds an unsupported value.
        """
        env = os.environ if environ is None else environ
        bits_text = env.get(ENV_EPOCH_BITS, "64").strip()
        try:
            bits = int(bits_text)
        except ValueError:
            raise RangeError(f"{ENV_EPOCH_BITS} must be an integer, got {bits_text!r}") from None
        return cls(
            epoch_bits=bits,
            algorithm=env.get(ENV_ALGORITHM, "auto").strip().lower(),
            language=env.get(ENV_LANGUAGE, "en").strip().lower(),
        )


__all__ = ["ConverterConfig", "ENV_EPOCH_BITS", "ENV_ALGORITHM", "ENV_LANGUAGE"]
