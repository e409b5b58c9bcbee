"""Application bootstrap and context container for nicerange."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Any

from .config import MissingConfigError, NiceRangeConfig, load_config, parse_timezone
from .formatting import strftime_format
from .profiles import StyleProfile
from .render import FormatFn, RangeInput, RenderedRange, render
from .services.profiles import get_profile


@dataclass(slots=True)
class RenderContext:
    """Active configuration and the profile it resolves to."""

    config: NiceRangeConfig
    profile: StyleProfile

    def build_input(self, start: datetime, end: datetime) -> RangeInput:
        return RangeInput(
            start=start,
            end=end,
            profile=self.profile,
            separator=self.config.separator,
            timezone_override=self.config.timezone_override,
        )

    def render(
        self,
        start: datetime,
        end: datetime,
        format_fn: FormatFn = strftime_format,
    ) -> RenderedRange:
        return render(self.build_input(start, end), format_fn)


def build_context(
    config: NiceRangeConfig,
    *,
    profile: str | None = None,
    separator: str | None = None,
    timezone_override: str | None = None,
) -> RenderContext:
    """Resolve the style profile for ``config`` with optional overrides.

    An empty ``timezone_override`` clears the configured one.
    """

    overrides: dict[str, Any] = {}
    if profile is not None:
        overrides["profile"] = profile
    if separator is not None:
        overrides["separator"] = separator
    if timezone_override is not None:
        overrides["timezone_override"] = parse_timezone(timezone_override)
    if overrides:
        config = dataclasses.replace(config, **overrides)

    return RenderContext(config=config, profile=get_profile(config))


def bootstrap(
    config_path: Path | None,
    *,
    allow_missing: bool = False,
) -> RenderContext:
    """Load configuration and resolve the active style profile.

    With ``allow_missing`` a missing configuration file yields the defaults.
    """

    try:
        config = load_config(config_path)
    except MissingConfigError:
        if not allow_missing:
            raise
        config = NiceRangeConfig()

    return build_context(config)
