"""Profile lookup services for nicerange."""

from __future__ import annotations

from typing import Mapping

from ..config import ConfigurationError, NiceRangeConfig
from ..formatting import FormatError
from ..plugins import (
    PluginRegistrationError,
    load_style_profiles,
    reset_plugin_manager_cache,
)
from ..profiles import StyleProfile, missing_patterns
from ..render import preview


def clear_profile_registry_cache() -> None:
    """Reset cached profile discovery (primarily for testing)."""

    reset_plugin_manager_cache()


def load_profile_registry(config: NiceRangeConfig) -> Mapping[str, StyleProfile]:
    """Return every known style profile keyed by lowercase id."""

    try:
        return load_style_profiles(config)
    except PluginRegistrationError as exc:
        raise ConfigurationError(str(exc)) from exc


def get_profile(config: NiceRangeConfig, name: str | None = None) -> StyleProfile:
    """Return the profile called ``name`` (the configured one by default)."""

    registry = load_profile_registry(config)
    wanted = name or config.profile

    profile = registry.get(wanted.lower())
    if profile is None:
        available = ", ".join(sorted(registry))
        raise ConfigurationError(
            f"Unknown style profile: {wanted}. Available: {available}."
        )
    return profile


def get_profile_descriptions(config: NiceRangeConfig) -> list[tuple[str, str]]:
    """Return ``(profile_id, "Label (sample)")`` tuples for every profile.

    Profiles that cannot render the sample instant are listed with the
    reason instead of a sample.
    """

    registry = load_profile_registry(config)
    descriptions: list[tuple[str, str]] = []
    for key in sorted(registry):
        profile = registry[key]
        try:
            sample = preview(profile, timezone_override=config.timezone_override)
        except (ConfigurationError, FormatError) as exc:
            sample = f"unusable: {exc}"
        descriptions.append((key, f"{profile.label} ({sample})"))
    return descriptions


def get_missing_patterns(config: NiceRangeConfig) -> dict[str, tuple[str, ...]]:
    """Return the empty pattern fields of every incomplete profile, by id."""

    registry = load_profile_registry(config)
    incomplete: dict[str, tuple[str, ...]] = {}
    for key in sorted(registry):
        missing = missing_patterns(registry[key])
        if missing:
            incomplete[key] = missing
    return incomplete


def settings_summary(config: NiceRangeConfig) -> list[str]:
    """Return human-readable lines describing the active settings."""

    profile = get_profile(config)
    summary = [f"Format: {profile.label}"]
    if config.separator:
        summary.append(f"Separator: {config.separator}")
    if config.timezone_override:
        summary.append(f"Time zone: {config.timezone_override}")
    return summary
