"""Built-in nicerange plugins."""

from __future__ import annotations

from . import configured, nice

BUILTIN_PLUGINS = (nice, configured)

__all__ = ["BUILTIN_PLUGINS"]
