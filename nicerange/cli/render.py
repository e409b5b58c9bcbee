"""Render command for nicerange CLI."""

from __future__ import annotations

from datetime import datetime

import click

from ..config import ConfigurationError
from ..formatting import FormatError
from ._common import TIMESTAMP, NiceRangeCliError, get_render_context


@click.command(name="render")
@click.argument("start", type=TIMESTAMP)
@click.argument("end", type=TIMESTAMP)
@click.option("-p", "--profile", type=str, default=None, help="Style profile id.")
@click.option(
    "-s",
    "--separator",
    type=str,
    default=None,
    help="Text placed between the start and end dates.",
)
@click.option(
    "-z",
    "--timezone",
    "timezone_override",
    type=str,
    default=None,
    help="Render both dates in this timezone (empty string disables).",
)
@click.pass_context
def render(
    ctx: click.Context,
    start: datetime,
    end: datetime,
    profile: str | None,
    separator: str | None,
    timezone_override: str | None,
) -> None:
    """Render the range between the ISO-8601 timestamps START and END."""

    context = get_render_context(
        ctx,
        profile=profile,
        separator=separator,
        timezone_override=timezone_override,
    )

    try:
        rendered = context.render(start, end)
    except (ConfigurationError, FormatError) as exc:
        raise NiceRangeCliError(str(exc)) from exc

    click.echo(rendered.text)


def register(cli: click.Group) -> None:
    """Register the command with the root CLI group."""

    cli.add_command(render)
