"""Profiles command for nicerange CLI."""

from __future__ import annotations

import click

from ..config import ConfigurationError
from ..services.profiles import get_missing_patterns, get_profile_descriptions
from ._common import NiceRangeCliError, get_config


@click.command(name="profiles")
@click.pass_context
def profiles(ctx: click.Context) -> None:
    """List available style profiles with a sample rendering."""

    config = get_config(ctx)

    try:
        descriptions = get_profile_descriptions(config)
        incomplete = get_missing_patterns(config)
    except ConfigurationError as exc:
        raise NiceRangeCliError(str(exc)) from exc

    click.echo("Available style profiles:\n")
    for profile_id, description in descriptions:
        marker = "*" if profile_id == config.profile.lower() else " "
        click.echo(f"{marker} {profile_id}: {description}")
        if profile_id in incomplete:
            click.echo(f"    missing: {', '.join(incomplete[profile_id])}")


def register(cli: click.Group) -> None:
    """Register the command with the root CLI group."""

    cli.add_command(profiles)
