"""Hook specifications for nicerange plugins."""

from __future__ import annotations

from collections.abc import Iterable

from nicerange.config import NiceRangeConfig
from nicerange.profiles import StyleProfile

from ._markers import hookspec


class NiceRangeHookSpec:
    """Collection of pluggy hook specifications."""

    @hookspec
    def style_profiles(self, config: NiceRangeConfig) -> Iterable[StyleProfile]:
        """Return the style profiles provided by the plugin."""
