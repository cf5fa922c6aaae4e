"""Tests for the timer input models and their invariants."""

from __future__ import annotations

from datetime import datetime, timedelta

import pytest
from pydantic import ValidationError

from src.timeinput.schema import (
    FormatLocale,
    InputKind,
    ParsedDuration,
    ParsedMoment,
    TimerInput,
)


def test_duration_must_not_be_negative() -> None:
    with pytest.raises(ValueError):
        ParsedDuration(value=timedelta(seconds=-1))


def test_models_are_frozen() -> None:
    duration = ParsedDuration(value=timedelta(minutes=1))
    with pytest.raises(ValidationError):
        duration.value = timedelta(minutes=2)  # type: ignore[misc]


def test_models_are_value_types() -> None:
    assert ParsedMoment(value=datetime(2025, 1, 1)) == ParsedMoment(value=datetime(2025, 1, 1))
    assert ParsedDuration(value=timedelta(seconds=90)).total_seconds == 90


def test_timer_input_requires_matching_payload() -> None:
    with pytest.raises(ValueError):
        TimerInput(kind=InputKind.duration)
    with pytest.raises(ValueError):
        TimerInput(kind=InputKind.moment, duration=ParsedDuration(value=timedelta(0)))
    with pytest.raises(ValueError):
        TimerInput(
            kind=InputKind.duration,
            duration=ParsedDuration(value=timedelta(0)),
            moment=ParsedMoment(value=datetime(2025, 1, 1)),
        )


def test_timer_input_constructors() -> None:
    duration = TimerInput.of_duration(ParsedDuration(value=timedelta(minutes=5)))
    moment = TimerInput.of_moment(ParsedMoment(value=datetime(2025, 1, 1)))

    assert duration.is_duration
    assert not moment.is_duration
    assert moment.kind == InputKind.moment


@pytest.mark.parametrize(
    ("pattern", "expected"),
    [
        ("M/d/yyyy", FormatLocale.month_first),
        ("MM/dd/yy", FormatLocale.month_first),
        ("dd/MM/yyyy", FormatLocale.day_first),
        ("d.M.yyyy", FormatLocale.day_first),
        ("yyyy-MM-dd", FormatLocale.year_first),
        ("yyyy/M/d", FormatLocale.year_first),
        ("", FormatLocale.day_first),
    ],
)
def test_locale_from_short_date_pattern(pattern: str, expected: FormatLocale) -> None:
    assert FormatLocale.from_short_date_pattern(pattern) == expected
