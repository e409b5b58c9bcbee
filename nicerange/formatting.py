"""Default pattern-formatting service built on ``datetime.strftime``."""

from __future__ import annotations

import re
from datetime import datetime, timezone
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from .config import ConfigurationError

# "%%" must be matched first so an escaped percent never starts a token.
_EXTENSION_TOKENS = re.compile(r"%%|%P")


class FormatError(RuntimeError):
    """Raised when a pattern cannot be applied to an instant."""


def localize(instant: datetime, timezone_override: str | None = None) -> datetime:
    """Return ``instant`` as seen in ``timezone_override``.

    Without an override the instant is returned untouched. Naive instants are
    read as UTC before conversion. Instants the target zone cannot represent
    raise ``FormatError``.
    """

    if not timezone_override:
        return instant
    try:
        zone = ZoneInfo(timezone_override)
    except (ZoneInfoNotFoundError, ValueError) as exc:
        raise ConfigurationError(f"Unknown timezone: '{timezone_override}'") from exc
    if instant.tzinfo is None:
        instant = instant.replace(tzinfo=timezone.utc)
    try:
        return instant.astimezone(zone)
    except (OverflowError, ValueError) as exc:
        raise FormatError(
            f"Cannot represent {instant!r} in {timezone_override}: {exc}"
        ) from exc


def strftime_format(instant: datetime, pattern: str) -> str:
    """Apply ``pattern`` to ``instant``.

    Besides the platform's strftime directives, ``%P`` renders a lowercase
    ``am``/``pm`` on every platform.
    """

    if not isinstance(pattern, str):
        raise FormatError(f"Pattern must be a string, got {type(pattern).__name__}")
    if "\x00" in pattern:
        raise FormatError(f"Pattern must not contain NUL characters: {pattern!r}")

    def expand(match: re.Match[str]) -> str:
        if match.group() == "%%":
            return "%%"
        return instant.strftime("%p").lower()

    try:
        return instant.strftime(_EXTENSION_TOKENS.sub(expand, pattern))
    except (ValueError, OverflowError) as exc:
        raise FormatError(f"Cannot format {instant!r} with {pattern!r}: {exc}") from exc


def format_instant(
    instant: datetime,
    pattern: str,
    timezone_override: str | None = None,
) -> str:
    """Render ``instant`` with ``pattern``, optionally in another timezone."""

    return strftime_format(localize(instant, timezone_override), pattern)


__all__ = ["FormatError", "format_instant", "localize", "strftime_format"]
