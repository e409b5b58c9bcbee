"""Style profiles declared in the ``[profiles.*]`` tables of the config file."""

from __future__ import annotations

from ...config import NiceRangeConfig
from ...profiles import StyleProfile, profile_from_mapping
from .._markers import hookimpl


@hookimpl
def style_profiles(config: NiceRangeConfig) -> tuple[StyleProfile, ...]:
    return tuple(
        profile_from_mapping(profile_id, table)
        for profile_id, table in config.profiles.items()
    )
