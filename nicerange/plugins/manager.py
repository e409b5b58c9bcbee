"""Helpers for creating and working with the nicerange plugin manager."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Sequence
from functools import lru_cache
from types import MappingProxyType
from typing import Mapping, Tuple

import pluggy

from ..config import NiceRangeConfig
from ..profiles import StyleProfile
from ._markers import ENTRY_POINT_GROUP, PLUGIN_NAMESPACE
from .spec import NiceRangeHookSpec

logger = logging.getLogger(__name__)


class PluginRegistrationError(RuntimeError):
    """Raised when a plugin fails validation or registration."""


def create_plugin_manager() -> pluggy.PluginManager:
    """Instantiate a pluggy ``PluginManager`` with entry-point plugins loaded."""

    manager = pluggy.PluginManager(PLUGIN_NAMESPACE)
    manager.add_hookspecs(NiceRangeHookSpec)

    loaded = manager.load_setuptools_entrypoints(ENTRY_POINT_GROUP)
    logger.debug("Loaded %d plugin(s) from entry points", loaded)

    return manager


def register_modules(
    manager: pluggy.PluginManager,
    modules: Sequence[object],
) -> None:
    """Register in-process plugin modules with the manager."""

    for module in modules:
        try:
            manager.register(module)
        except (pluggy.PluginValidationError, ValueError) as exc:
            raise PluginRegistrationError(str(exc)) from exc


def iter_style_profiles(
    manager: pluggy.PluginManager,
    config: NiceRangeConfig,
) -> Iterator[StyleProfile]:
    """Yield style profiles from all registered plugins."""

    for contributions in manager.hook.style_profiles(config=config):
        if not contributions:
            continue
        yield from _ensure_iterable(contributions)


def iter_plugin_modules() -> Tuple[object, ...]:
    """Return plugin modules bundled with nicerange."""

    return _builtin_plugin_modules()


def _builtin_plugin_modules() -> Tuple[object, ...]:
    from .builtin import BUILTIN_PLUGINS

    return BUILTIN_PLUGINS


@lru_cache(maxsize=1)
def _build_plugin_manager() -> pluggy.PluginManager:
    manager = create_plugin_manager()
    register_modules(manager, iter_plugin_modules())
    return manager


def get_plugin_manager() -> pluggy.PluginManager:
    """Return the cached plugin manager instance."""

    return _build_plugin_manager()


def reset_plugin_manager_cache() -> None:
    """Clear cached plugin manager so future calls rebuild state."""

    _build_plugin_manager.cache_clear()


def load_style_profiles(config: NiceRangeConfig) -> Mapping[str, StyleProfile]:
    """Collect style profiles from all registered plugins, keyed by id."""

    manager = get_plugin_manager()

    profiles: dict[str, StyleProfile] = {}
    for profile in iter_style_profiles(manager, config):
        key = profile.profile_id.lower()
        if key in profiles:
            raise PluginRegistrationError(
                f"Duplicate style profile detected: '{profile.profile_id}'."
            )
        profiles[key] = profile

    logger.debug("Available style profiles: %s", ", ".join(sorted(profiles)))
    return MappingProxyType(profiles)


def _ensure_iterable(contributions: object) -> Iterable[StyleProfile]:
    """Normalize hook return values to a concrete iterable of profiles."""

    if isinstance(contributions, StyleProfile):
        return (contributions,)

    if not isinstance(contributions, Iterable) or isinstance(
        contributions, (str, bytes)
    ):
        raise PluginRegistrationError(
            "Plugin hook did not return an iterable profile collection."
        )

    normalized: list[StyleProfile] = []
    for item in contributions:
        if not isinstance(item, StyleProfile):
            raise PluginRegistrationError(
                "Style profiles must be StyleProfile instances."
            )
        normalized.append(item)
    return tuple(normalized)


__all__ = [
    "PluginRegistrationError",
    "create_plugin_manager",
    "get_plugin_manager",
    "iter_plugin_modules",
    "iter_style_profiles",
    "load_style_profiles",
    "register_modules",
    "reset_plugin_manager_cache",
]
