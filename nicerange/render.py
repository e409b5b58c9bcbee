"""Render a start/end pair without repeating the calendar fields they share."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Protocol

from .config import DEFAULT_SEPARATOR
from .formatting import localize, strftime_format
from .granularity import Granularity, classify
from .profiles import StyleProfile, select_patterns

logger = logging.getLogger(__name__)

# Fixed so that profile previews are reproducible.
SAMPLE_INSTANT = datetime(2024, 6, 1, 10, 0, tzinfo=timezone.utc)


class FormatFn(Protocol):
    """Callable applying a pattern to a single instant."""

    def __call__(self, instant: datetime, pattern: str) -> str:  # pragma: no cover
        """Return ``instant`` rendered with ``pattern``."""


@dataclass(slots=True, frozen=True)
class RangeInput:
    """Everything needed to render one range."""

    start: datetime
    end: datetime
    profile: StyleProfile
    separator: str = DEFAULT_SEPARATOR
    timezone_override: str | None = None


@dataclass(slots=True, frozen=True)
class RenderedRange:
    """Rendered segments; ``end_text`` is ``None`` when the range collapsed."""

    start_text: str
    separator_text: str = ""
    end_text: str | None = None

    @property
    def collapsed(self) -> bool:
        return self.end_text is None

    @property
    def text(self) -> str:
        if self.end_text is None:
            return self.start_text
        return f"{self.start_text}{self.separator_text}{self.end_text}"

    def __str__(self) -> str:
        return self.text


def render(range_input: RangeInput, format_fn: FormatFn = strftime_format) -> RenderedRange:
    """Render ``range_input`` using ``format_fn`` for each endpoint.

    When a timezone override is set both endpoints are converted before they
    are classified, so the shared fields are those of the rendered dates.
    Errors raised by ``format_fn`` propagate unchanged.
    """

    start = localize(range_input.start, range_input.timezone_override)
    end = localize(range_input.end, range_input.timezone_override)

    granularity = classify(start, end)
    start_pattern, end_pattern = select_patterns(granularity, range_input.profile)
    logger.debug(
        "Rendering %s range with profile '%s'",
        granularity.value,
        range_input.profile.profile_id,
    )

    start_text = format_fn(start, start_pattern)
    if granularity is Granularity.EQUAL:
        return RenderedRange(start_text=start_text)

    end_text = format_fn(end, end_pattern)
    return RenderedRange(
        start_text=start_text,
        separator_text=f" {range_input.separator} ",
        end_text=end_text,
    )


def preview(
    profile: StyleProfile,
    format_fn: FormatFn = strftime_format,
    *,
    sample: datetime = SAMPLE_INSTANT,
    timezone_override: str | None = None,
) -> str:
    """Return how a single instant looks under ``profile``."""

    range_input = RangeInput(
        start=sample,
        end=sample,
        profile=profile,
        timezone_override=timezone_override,
    )
    return render(range_input, format_fn).text


__all__ = [
    "FormatFn",
    "RangeInput",
    "RenderedRange",
    "SAMPLE_INSTANT",
    "preview",
    "render",
]
