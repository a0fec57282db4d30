"""Tests for the public import surface."""

from __future__ import annotations

import importlib

import pytest

import gzctime

MODULES = [
    "gzctime",
    "gzctime.core",
    "gzctime.units",
    "gzctime.arithmetic",
    "gzctime.convert",
    "gzctime.format",
    "gzctime.infer",
    "gzctime.zone",
    "gzctime.config",
    "gzctime.errors",
]


class TestImports:
    """Every public module imports and exports what it lists."""

    @pytest.mark.parametrize("name", MODULES)
    def test_all_resolves(self, name: str) -> None:
        """Each name in __all__ is an attribute of the module."""
        module = importlib.import_module(name)
        for attr in module.__all__:
            assert hasattr(module, attr), f"{name}.{attr}"

    def test_version(self) -> None:
        """The package has a version string."""
        assert isinstance(gzctime.__version__, str)

    def test_error_hierarchy(self) -> None:
        """All errors derive from GzcTimeError."""
        for error in (gzctime.ParseError, gzctime.RangeError, gzctime.AmbiguousDstError):
            assert issubclass(error, gzctime.GzcTimeError)

    def test_top_level_types(self) -> None:
        """Core types are reachable from the package root."""
        assert gzctime.Instant(0).calendar(gzctime.UTC).year == 1970
        assert gzctime.Duration(1).total_seconds == 86400
