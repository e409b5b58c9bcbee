"""Batch command for nicerange CLI."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import click
import yaml

from ..config import ConfigurationError
from ..formatting import FormatError
from ..utils.datetime_fmt import coerce_datetime
from ._common import NiceRangeCliError, get_render_context

logger = logging.getLogger(__name__)


@click.command(name="batch")
@click.argument(
    "source",
    type=click.Path(path_type=Path, dir_okay=False, exists=True),
)
@click.option(
    "-o",
    "--output",
    "output_format",
    type=click.Choice(["text", "yaml"]),
    default="text",
    show_default=True,
    help="Output format.",
)
@click.option("-p", "--profile", type=str, default=None, help="Style profile id.")
@click.pass_context
def batch(
    ctx: click.Context,
    source: Path,
    output_format: str,
    profile: str | None,
) -> None:
    """Render every range listed in the YAML file SOURCE.

    The file holds a list of mappings with ``start`` and ``end`` keys. Items
    missing either endpoint are skipped.
    """

    context = get_render_context(ctx, profile=profile)
    items = _load_items(source)

    results: list[dict[str, str]] = []
    for index, item in enumerate(items):
        try:
            start = coerce_datetime(item.get("start"))
            end = coerce_datetime(item.get("end"))
        except ValueError as exc:
            raise NiceRangeCliError(f"Item {index}: {exc}") from exc

        if start is None or end is None:
            logger.warning("Skipping item %d: both 'start' and 'end' are required", index)
            continue

        try:
            rendered = context.render(start, end)
        except (ConfigurationError, FormatError) as exc:
            raise NiceRangeCliError(f"Item {index}: {exc}") from exc

        results.append(
            {"start": start.isoformat(), "end": end.isoformat(), "text": rendered.text}
        )

    if output_format == "yaml":
        click.echo(yaml.safe_dump(results, sort_keys=False, allow_unicode=True), nl=False)
    else:
        for result in results:
            click.echo(result["text"])


def _load_items(source: Path) -> list[dict[str, Any]]:
    try:
        loaded = yaml.safe_load(source.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise NiceRangeCliError(f"Invalid YAML in {source}: {exc}") from exc

    if loaded is None:
        return []
    if not isinstance(loaded, list):
        raise NiceRangeCliError(f"{source} must contain a list of ranges")

    items: list[dict[str, Any]] = []
    for index, item in enumerate(loaded):
        if not isinstance(item, dict):
            raise NiceRangeCliError(f"Item {index} must be a mapping")
        items.append(item)
    return items


def register(cli: click.Group) -> None:
    """Register the command with the root CLI group."""

    cli.add_command(batch)
