"""Style profiles mapping each granularity to a pair of patterns."""

from __future__ import annotations

from dataclasses import dataclass, fields
from types import MappingProxyType
from typing import Any, Mapping

from .config import ConfigurationError
from .granularity import Granularity


@dataclass(slots=True, frozen=True)
class StyleProfile:
    """Named bundle of strftime patterns keyed by granularity.

    Pattern fields left as ``None`` are missing entries; they are only
    reported when a range needing them is rendered.
    """

    profile_id: str
    label: str
    same_instant: str | None = None
    same_day_start: str | None = None
    same_day_end: str | None = None
    same_month_start: str | None = None
    same_month_end: str | None = None
    same_year_start: str | None = None
    same_year_end: str | None = None
    different_start: str | None = None
    different_end: str | None = None


PATTERN_FIELDS: Mapping[Granularity, tuple[str, str]] = MappingProxyType(
    {
        Granularity.EQUAL: ("same_instant", "same_instant"),
        Granularity.SAME_DAY: ("same_day_start", "same_day_end"),
        Granularity.SAME_MONTH: ("same_month_start", "same_month_end"),
        Granularity.SAME_YEAR: ("same_year_start", "same_year_end"),
        Granularity.DIFFERENT: ("different_start", "different_end"),
    }
)

_PATTERN_NAMES = frozenset(name for pair in PATTERN_FIELDS.values() for name in pair)


LONG = StyleProfile(
    profile_id="long",
    label="Nice long",
    same_instant="%B %d, %Y - %I:%M %p",
    same_day_start="%B %d, %Y - %I:%M %p",
    same_day_end="%I:%M %p",
    same_month_start="%B %d",
    same_month_end="%d, %Y",
    same_year_start="%B %d",
    same_year_end="%B %d, %Y",
    different_start="%B %d, %Y",
    different_end="%B %d, %Y",
)

# %P is the lowercase meridian ("am"/"pm") understood by nicerange.formatting.
SHORT = StyleProfile(
    profile_id="short",
    label="Nice short",
    same_instant="%m/%d/%Y - %I:%M %P",
    same_day_start="%m/%d/%Y - %I:%M %P",
    same_day_end="%I:%M %P",
    same_month_start="%m/%d",
    same_month_end="%d/%Y",
    same_year_start="%m/%d",
    same_year_end="%m/%d/%Y",
    different_start="%m/%d/%Y",
    different_end="%m/%d/%Y",
)

BUILTIN_PROFILES: Mapping[str, StyleProfile] = MappingProxyType(
    {LONG.profile_id: LONG, SHORT.profile_id: SHORT}
)


def select_patterns(granularity: Granularity, profile: StyleProfile) -> tuple[str, str]:
    """Return the ``(start, end)`` patterns ``profile`` defines for ``granularity``.

    Raises
    ------
    ConfigurationError
        If the profile lacks either entry. No other entry is substituted.
    """

    start_field, end_field = PATTERN_FIELDS[granularity]
    start_pattern = getattr(profile, start_field)
    end_pattern = getattr(profile, end_field)
    for name, pattern in ((start_field, start_pattern), (end_field, end_pattern)):
        if not pattern:
            raise ConfigurationError(
                f"Profile '{profile.profile_id}' has no '{name}' pattern "
                f"required for {granularity.value} ranges."
            )
    return start_pattern, end_pattern


def profile_from_mapping(profile_id: str, data: Mapping[str, Any]) -> StyleProfile:
    """Build a profile from a configuration table.

    Keys are pattern field names plus an optional ``label``. Missing pattern
    keys are accepted.
    """

    known = _PATTERN_NAMES | {"label"}
    unknown = sorted(str(key) for key in data if key not in known)
    if unknown:
        raise ConfigurationError(
            f"Profile '{profile_id}' has unknown keys: {', '.join(unknown)}"
        )

    values: dict[str, str] = {}
    for key, value in data.items():
        if not isinstance(value, str):
            raise ConfigurationError(
                f"Profile '{profile_id}' key '{key}' must be a string"
            )
        values[key] = value

    label = values.pop("label", "").strip() or profile_id
    return StyleProfile(profile_id=profile_id, label=label, **values)


def missing_patterns(profile: StyleProfile) -> tuple[str, ...]:
    """Return the names of pattern fields ``profile`` leaves empty."""

    return tuple(
        f.name
        for f in fields(profile)
        if f.name in _PATTERN_NAMES and not getattr(profile, f.name)
    )


__all__ = [
    "BUILTIN_PROFILES",
    "LONG",
    "PATTERN_FIELDS",
    "SHORT",
    "StyleProfile",
    "missing_patterns",
    "profile_from_mapping",
    "select_patterns",
]
