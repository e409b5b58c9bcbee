"""Shared helpers for nicerange CLI commands."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import click

from ..app import RenderContext, build_context
from ..config import (
    ConfigurationError,
    MissingConfigError,
    NiceRangeConfig,
    load_config,
)
from ..utils.datetime_fmt import parse_user_datetime

CONTEXT_SETTINGS: dict[str, Any] = {"help_option_names": ["-h", "--help"]}


class NiceRangeCliError(click.ClickException):
    """Shared Click exception wrapper for CLI failures."""


def get_config(ctx: click.Context) -> NiceRangeConfig:
    """Return the configuration for the current CLI invocation.

    The defaults apply when the default configuration file does not exist; a
    path given with ``--config`` must exist.
    """

    config: NiceRangeConfig | None = ctx.obj.get("config")
    if config is not None:
        return config

    config_path_opt: Path | None = ctx.obj.get("config_path")

    try:
        config = load_config(config_path_opt)
    except MissingConfigError as exc:
        if config_path_opt is not None:
            raise NiceRangeCliError(str(exc)) from exc
        config = NiceRangeConfig()
    except ConfigurationError as exc:
        raise NiceRangeCliError(str(exc)) from exc

    ctx.obj["config"] = config
    return config


def get_render_context(
    ctx: click.Context,
    *,
    profile: str | None = None,
    separator: str | None = None,
    timezone_override: str | None = None,
) -> RenderContext:
    """Resolve the active profile, applying command line overrides."""

    try:
        return build_context(
            get_config(ctx),
            profile=profile,
            separator=separator,
            timezone_override=timezone_override,
        )
    except ConfigurationError as exc:
        raise NiceRangeCliError(str(exc)) from exc


class TimestampParamType(click.ParamType):
    """Click parameter accepting ISO-8601 timestamps."""

    name = "timestamp"

    def convert(self, value: Any, param: click.Parameter | None, ctx: click.Context | None):
        if isinstance(value, str):
            try:
                return parse_user_datetime(value)
            except ValueError:
                self.fail(f"'{value}' is not an ISO-8601 timestamp", param, ctx)
        return value


TIMESTAMP = TimestampParamType()
