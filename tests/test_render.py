from __future__ import annotations

from datetime import datetime, timezone

import pytest
from nicerange.config import ConfigurationError
from nicerange.profiles import LONG, SHORT, StyleProfile
from nicerange.render import SAMPLE_INSTANT, RangeInput, RenderedRange, preview, render

UTC = timezone.utc


def test_same_day_short_renders_time_only_end() -> None:
    rendered = render(
        RangeInput(
            start=datetime(2024, 6, 1, 10, 0, tzinfo=UTC),
            end=datetime(2024, 6, 1, 14, 0, tzinfo=UTC),
            profile=SHORT,
            separator="-",
        )
    )

    assert rendered == RenderedRange(
        start_text="06/01/2024 - 10:00 am",
        separator_text=" - ",
        end_text="02:00 pm",
    )
    assert rendered.text == "06/01/2024 - 10:00 am - 02:00 pm"


def test_same_month_long_shares_month_and_year() -> None:
    rendered = render(
        RangeInput(
            start=datetime(2024, 6, 1, tzinfo=UTC),
            end=datetime(2024, 6, 15, tzinfo=UTC),
            profile=LONG,
        )
    )

    assert rendered.start_text == "June 01"
    assert rendered.end_text == "15, 2024"
    assert str(rendered) == "June 01 - 15, 2024"


def test_same_year_long() -> None:
    rendered = render(
        RangeInput(
            start=datetime(2024, 6, 1, tzinfo=UTC),
            end=datetime(2024, 9, 3, tzinfo=UTC),
            profile=LONG,
        )
    )

    assert rendered.text == "June 01 - September 03, 2024"


def test_different_years_repeat_full_date() -> None:
    rendered = render(
        RangeInput(
            start=datetime(2024, 1, 1, tzinfo=UTC),
            end=datetime(2025, 1, 1, tzinfo=UTC),
            profile=LONG,
        )
    )

    assert rendered.text == "January 01, 2024 - January 01, 2025"


def test_equal_instants_collapse_to_single_segment() -> None:
    instant = datetime(2024, 6, 1, 10, 0, tzinfo=UTC)

    rendered = render(RangeInput(start=instant, end=instant, profile=LONG, separator="to"))

    assert rendered.collapsed
    assert rendered.separator_text == ""
    assert rendered.end_text is None
    assert rendered.text == "June 01, 2024 - 10:00 AM"


def test_custom_separator_is_padded() -> None:
    rendered = render(
        RangeInput(
            start=datetime(2024, 6, 1, tzinfo=UTC),
            end=datetime(2024, 6, 15, tzinfo=UTC),
            profile=SHORT,
            separator="to",
        )
    )

    assert rendered.text == "06/01 to 15/2024"


def test_timezone_override_classifies_rendered_dates() -> None:
    # Crosses midnight in UTC but not in New York.
    range_input = RangeInput(
        start=datetime(2024, 6, 1, 23, 30, tzinfo=UTC),
        end=datetime(2024, 6, 2, 1, 0, tzinfo=UTC),
        profile=LONG,
        timezone_override="America/New_York",
    )

    assert render(range_input).text == "June 01, 2024 - 07:30 PM - 09:00 PM"


def test_render_is_deterministic() -> None:
    range_input = RangeInput(
        start=datetime(2024, 3, 10, 8, 0, tzinfo=UTC),
        end=datetime(2024, 3, 10, 9, 30, tzinfo=UTC),
        profile=SHORT,
    )

    assert render(range_input) == render(range_input)


def test_injected_formatter_receives_selected_patterns() -> None:
    calls: list[tuple[datetime, str]] = []

    def fake_format(instant: datetime, pattern: str) -> str:
        calls.append((instant, pattern))
        return f"<{pattern}>"

    start = datetime(2024, 6, 1, tzinfo=UTC)
    end = datetime(2024, 6, 15, tzinfo=UTC)

    rendered = render(RangeInput(start=start, end=end, profile=LONG), fake_format)

    assert calls == [(start, "%B %d"), (end, "%d, %Y")]
    assert rendered.text == "<%B %d> - <%d, %Y>"


def test_formatter_errors_propagate_unchanged() -> None:
    failure = RuntimeError("bad pattern")

    def failing_format(instant: datetime, pattern: str) -> str:
        raise failure

    range_input = RangeInput(
        start=datetime(2024, 6, 1, tzinfo=UTC),
        end=datetime(2024, 6, 2, tzinfo=UTC),
        profile=LONG,
    )

    with pytest.raises(RuntimeError) as exc_info:
        render(range_input, failing_format)

    assert exc_info.value is failure


def test_missing_same_month_entry_fails_before_formatting() -> None:
    profile = StyleProfile(
        profile_id="partial",
        label="Partial",
        same_month_end="%d, %Y",
    )
    calls: list[str] = []

    def recording_format(instant: datetime, pattern: str) -> str:
        calls.append(pattern)
        return pattern

    range_input = RangeInput(
        start=datetime(2024, 6, 1, tzinfo=UTC),
        end=datetime(2024, 6, 15, tzinfo=UTC),
        profile=profile,
    )

    with pytest.raises(ConfigurationError, match="same_month_start"):
        render(range_input, recording_format)
    assert calls == []


def test_preview_uses_fixed_sample() -> None:
    assert preview(LONG) == "June 01, 2024 - 10:00 AM"
    assert preview(SHORT) == "06/01/2024 - 10:00 am"
    assert preview(SHORT, timezone_override="Asia/Tokyo") == "06/01/2024 - 07:00 pm"
    assert SAMPLE_INSTANT.tzinfo is UTC
