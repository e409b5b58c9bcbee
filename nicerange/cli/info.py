"""Info command for nicerange CLI."""

from __future__ import annotations

import click

from ..config import ConfigurationError, NiceRangeConfig
from ..services.profiles import settings_summary
from ._common import NiceRangeCliError, get_config


@click.command(name="info")
@click.pass_context
def info(ctx: click.Context) -> None:
    """Display the active settings and where they come from."""

    config: NiceRangeConfig = get_config(ctx)

    try:
        summary = settings_summary(config)
    except ConfigurationError as exc:
        raise NiceRangeCliError(str(exc)) from exc

    source = str(config.source_path) if config.source_path else "(defaults)"
    click.echo(f"Configuration : {source}")
    for line in summary:
        click.echo(f"  {line}")
    if config.profiles:
        click.echo(f"  Config profiles: {', '.join(sorted(config.profiles))}")


def register(cli: click.Group) -> None:
    """Register the command with the root CLI group."""

    cli.add_command(info)
