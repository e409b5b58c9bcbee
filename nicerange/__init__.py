"""Human-readable date ranges that do not repeat what both ends share."""

from __future__ import annotations

from .config import ConfigurationError
from .formatting import FormatError, format_instant
from .granularity import Granularity, classify
from .profiles import BUILTIN_PROFILES, LONG, SHORT, StyleProfile, select_patterns
from .render import RangeInput, RenderedRange, preview, render

__version__ = "0.1.0"

__all__ = [
    "BUILTIN_PROFILES",
    "ConfigurationError",
    "FormatError",
    "Granularity",
    "LONG",
    "RangeInput",
    "RenderedRange",
    "SHORT",
    "StyleProfile",
    "classify",
    "format_instant",
    "preview",
    "render",
    "select_patterns",
]
