"""Built-in "Nice long" and "Nice short" style profiles."""

from __future__ import annotations

from ...config import NiceRangeConfig
from ...profiles import BUILTIN_PROFILES, StyleProfile
from .._markers import hookimpl


@hookimpl
def style_profiles(config: NiceRangeConfig) -> tuple[StyleProfile, ...]:
    """Expose the built-in profiles as a plugin contribution."""

    return tuple(BUILTIN_PROFILES.values())
