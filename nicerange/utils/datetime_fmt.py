"""Datetime parsing helpers for command line and batch input."""

from __future__ import annotations

from datetime import date, datetime, time


def parse_user_datetime(value: str) -> datetime:
    """Parse an ISO-8601 timestamp or date supplied by a user.

    A trailing ``Z`` is accepted as UTC and a bare date means midnight.

    Raises
    ------
    ValueError
        If ``value`` is not ISO-8601.
    """

    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    return datetime.fromisoformat(text)


def coerce_datetime(value: object) -> datetime | None:
    """Return ``value`` as a datetime, or ``None`` when it is empty.

    Accepts datetimes and dates as produced by YAML loaders, and ISO strings.
    """

    if value is None:
        return None
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime.combine(value, time.min)
    if isinstance(value, str):
        if not value.strip():
            return None
        return parse_user_datetime(value)
    raise ValueError(f"Unsupported timestamp value: {value!r}")
