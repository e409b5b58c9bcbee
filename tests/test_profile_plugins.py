"""Tests covering style profile discovery through plugins."""

from __future__ import annotations

import types

import pytest
from nicerange.config import ConfigurationError, NiceRangeConfig
from nicerange.plugins import hookimpl
from nicerange.plugins import manager as plugin_manager
from nicerange.profiles import StyleProfile
from nicerange.services import profiles as profile_service

EXTRA = StyleProfile(
    profile_id="iso",
    label="ISO",
    same_instant="%Y-%m-%d %H:%M",
    same_day_start="%Y-%m-%d %H:%M",
    same_day_end="%H:%M",
    same_month_start="%Y-%m-%d",
    same_month_end="%d",
    same_year_start="%Y-%m-%d",
    same_year_end="%m-%d",
    different_start="%Y-%m-%d",
    different_end="%Y-%m-%d",
)


@pytest.fixture(autouse=True)
def reset_profile_registry() -> None:
    """Ensure plugin discovery cache is cleared between tests."""

    profile_service.clear_profile_registry_cache()
    yield
    profile_service.clear_profile_registry_cache()


def _install_plugin(monkeypatch, module: types.ModuleType) -> None:
    original_iter = plugin_manager._builtin_plugin_modules

    def _combined() -> tuple[object, ...]:
        return original_iter() + (module,)

    monkeypatch.setattr(plugin_manager, "_builtin_plugin_modules", _combined)
    plugin_manager.reset_plugin_manager_cache()


def test_registry_contains_builtin_profiles() -> None:
    registry = profile_service.load_profile_registry(NiceRangeConfig())

    assert sorted(registry) == ["long", "short"]
    assert profile_service.get_profile(NiceRangeConfig()).label == "Nice long"


def test_registry_includes_config_profiles() -> None:
    config = NiceRangeConfig(
        profile="compact",
        profiles={"compact": {"label": "Compact", "same_instant": "%d.%m.%Y"}},
    )

    profile = profile_service.get_profile(config)

    assert profile.label == "Compact"
    assert profile.same_instant == "%d.%m.%Y"


def test_get_profile_is_case_insensitive() -> None:
    assert profile_service.get_profile(NiceRangeConfig(), "SHORT").profile_id == "short"


def test_unknown_profile_lists_available() -> None:
    with pytest.raises(ConfigurationError) as exc_info:
        profile_service.get_profile(NiceRangeConfig(), "medium")

    message = str(exc_info.value)
    assert "medium" in message
    assert "long, short" in message


def test_custom_plugin_contributes_profile(monkeypatch) -> None:
    module = types.ModuleType("nicerange_test_plugin")

    @hookimpl
    def style_profiles() -> tuple[StyleProfile, ...]:
        return (EXTRA,)

    module.style_profiles = style_profiles
    _install_plugin(monkeypatch, module)

    registry = profile_service.load_profile_registry(NiceRangeConfig())

    assert registry["iso"] is EXTRA
    assert "long" in registry


def test_plugin_may_return_single_profile(monkeypatch) -> None:
    module = types.ModuleType("nicerange_single_plugin")

    @hookimpl
    def style_profiles() -> StyleProfile:
        return EXTRA

    module.style_profiles = style_profiles
    _install_plugin(monkeypatch, module)

    assert "iso" in profile_service.load_profile_registry(NiceRangeConfig())


def test_duplicate_profile_id_is_a_configuration_error(monkeypatch) -> None:
    module = types.ModuleType("nicerange_duplicate_plugin")

    @hookimpl
    def style_profiles() -> tuple[StyleProfile, ...]:
        return (StyleProfile(profile_id="Long", label="Shadow"),)

    module.style_profiles = style_profiles
    _install_plugin(monkeypatch, module)

    with pytest.raises(ConfigurationError, match="Duplicate style profile"):
        profile_service.load_profile_registry(NiceRangeConfig())


def test_malformed_hook_result_is_rejected(monkeypatch) -> None:
    module = types.ModuleType("nicerange_malformed_plugin")

    @hookimpl
    def style_profiles() -> str:
        return "long"

    module.style_profiles = style_profiles
    _install_plugin(monkeypatch, module)

    with pytest.raises(ConfigurationError):
        profile_service.load_profile_registry(NiceRangeConfig())


def test_profile_descriptions_include_sample() -> None:
    descriptions = dict(profile_service.get_profile_descriptions(NiceRangeConfig()))

    assert descriptions == {
        "long": "Nice long (June 01, 2024 - 10:00 AM)",
        "short": "Nice short (06/01/2024 - 10:00 am)",
    }


def test_profile_descriptions_flag_incomplete_profiles() -> None:
    config = NiceRangeConfig(profiles={"empty": {"label": "Empty"}})

    descriptions = dict(profile_service.get_profile_descriptions(config))

    assert descriptions["empty"].startswith("Empty (unusable:")


def test_settings_summary() -> None:
    config = NiceRangeConfig(
        profile="short", separator="to", timezone_override="Europe/Paris"
    )

    assert profile_service.settings_summary(config) == [
        "Format: Nice short",
        "Separator: to",
        "Time zone: Europe/Paris",
    ]


def test_missing_patterns_reported_for_incomplete_profiles() -> None:
    config = NiceRangeConfig(
        profiles={"partial": {"same_instant": "%d.%m.%Y", "same_day_start": "%H:%M"}}
    )

    incomplete = profile_service.get_missing_patterns(config)

    assert list(incomplete) == ["partial"]
    assert "same_instant" not in incomplete["partial"]
    assert "same_day_start" not in incomplete["partial"]
    assert incomplete["partial"][0] == "same_day_end"
    assert "different_end" in incomplete["partial"]
