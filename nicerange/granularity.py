"""Calendar granularity classification for a pair of instants."""

from __future__ import annotations

import enum
import math
from datetime import datetime, timezone


class Granularity(enum.Enum):
    """Coarsest calendar unit two instants share, from narrowest to widest."""

    EQUAL = "equal"
    SAME_DAY = "same_day"
    SAME_MONTH = "same_month"
    SAME_YEAR = "same_year"
    DIFFERENT = "different"


def epoch_seconds(instant: datetime) -> int:
    """Return whole seconds since the Unix epoch; naive values are read as UTC."""

    if instant.tzinfo is None:
        instant = instant.replace(tzinfo=timezone.utc)
    return math.floor(instant.timestamp())


def classify(start: datetime, end: datetime) -> Granularity:
    """Return the granularity at which ``start`` and ``end`` first differ.

    Calendar fields are read from each instant as represented, i.e. in its own
    timezone, so the result follows the dates a reader will actually see.
    """

    if epoch_seconds(start) == epoch_seconds(end):
        return Granularity.EQUAL
    if (start.year, start.month, start.day) == (end.year, end.month, end.day):
        return Granularity.SAME_DAY
    if (start.year, start.month) == (end.year, end.month):
        return Granularity.SAME_MONTH
    if start.year == end.year:
        return Granularity.SAME_YEAR
    return Granularity.DIFFERENT


__all__ = ["Granularity", "classify", "epoch_seconds"]
