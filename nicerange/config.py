"""Configuration management for nicerange."""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

DEFAULT_CONFIG_DIR = Path("~/.config/nicerange").expanduser()
DEFAULT_CONFIG_PATH = DEFAULT_CONFIG_DIR / "config.toml"
DEFAULT_PROFILE = "long"
DEFAULT_SEPARATOR = "-"


class ConfigurationError(RuntimeError):
    """Base error for configuration related issues."""


class MissingConfigError(ConfigurationError):
    """Raised when the configuration file cannot be found."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"Configuration file not found at {path}")
        self.path = path


class InvalidConfigError(ConfigurationError):
    """Raised when the configuration file holds malformed keys or values."""


@dataclass(slots=True)
class NiceRangeConfig:
    """In-memory representation of the nicerange configuration file."""

    profile: str = DEFAULT_PROFILE
    separator: str = DEFAULT_SEPARATOR
    timezone_override: str | None = None
    profiles: dict[str, dict[str, Any]] = field(default_factory=dict)
    source_path: Path | None = None


def load_config(path: Path | None = None) -> NiceRangeConfig:
    """Load configuration from ``path`` or the default location.

    Parameters
    ----------
    path:
        Optional location of the configuration file. When ``None`` the default
        path (``~/.config/nicerange/config.toml``) is used.

    Raises
    ------
    MissingConfigError
        If the file cannot be found.
    InvalidConfigError
        If settings are malformed.
    """

    config_path = (path or DEFAULT_CONFIG_PATH).expanduser()
    if not config_path.exists():
        raise MissingConfigError(config_path)

    try:
        with config_path.open("rb") as fh:
            raw = tomllib.load(fh)
    except tomllib.TOMLDecodeError as exc:
        raise InvalidConfigError(f"Malformed configuration file: {exc}") from exc

    section = raw.get("nicerange", {})
    if not isinstance(section, dict):
        raise InvalidConfigError("'nicerange' section must be a table")

    profile_raw = section.get("profile", DEFAULT_PROFILE)
    if not isinstance(profile_raw, str):
        raise InvalidConfigError("'profile' must be a string when provided")
    profile = profile_raw.strip()
    if not profile:
        raise InvalidConfigError("'profile' must be a non-empty string")

    # An empty separator is allowed; the renderer still pads it with spaces.
    separator = section.get("separator", DEFAULT_SEPARATOR)
    if not isinstance(separator, str):
        raise InvalidConfigError("'separator' must be a string when provided")

    timezone_override = parse_timezone(section.get("timezone_override"))

    profiles_section = raw.get("profiles")
    profiles: dict[str, dict[str, Any]] = {}
    if profiles_section is not None:
        if not isinstance(profiles_section, dict):
            raise InvalidConfigError("'profiles' must be a table of tables")
        for key, value in profiles_section.items():
            if not isinstance(value, dict):
                raise InvalidConfigError(f"Profile '{key}' must be a table")
            profiles[key] = dict(value)

    return NiceRangeConfig(
        profile=profile,
        separator=separator,
        timezone_override=timezone_override,
        profiles=profiles,
        source_path=config_path,
    )


def parse_timezone(value: object) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise InvalidConfigError("'timezone_override' must be a string when provided")
    name = value.strip()
    if not name:
        return None
    try:
        ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as exc:
        raise InvalidConfigError(f"Unknown timezone: '{name}'") from exc
    return name


def bootstrap_config_file(path: Path) -> bool:
    """Create a default config file if missing.

    Returns True when the file was created, False if it already existed.
    """

    if path.exists():
        return False

    config_dir = path.parent
    config_dir.mkdir(parents=True, exist_ok=True)
    default_content = (
        "[nicerange]\n"
        f'profile = "{DEFAULT_PROFILE}"\n'
        f'separator = "{DEFAULT_SEPARATOR}"\n'
        '# timezone_override = "UTC"\n'
    )
    path.write_text(default_content, encoding="utf-8")
    return True
