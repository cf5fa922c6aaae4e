"""Tests for natural-language duration parsing."""

from __future__ import annotations

from datetime import timedelta

import pytest

from src.timeinput.dictionaries import Unit
from src.timeinput.durations import infer_units, parse_duration, split_parts, try_parse_duration
from src.timeinput.errors import (
    AmbiguousUnitsError,
    EmptyInputError,
    InvalidNumberError,
    NegativeDurationError,
    UnknownUnitError,
)


def test_bare_integer_is_minutes() -> None:
    assert parse_duration("5").value == timedelta(minutes=5)
    assert parse_duration("5").total_seconds == 300


def test_fractional_hours_are_exact() -> None:
    assert parse_duration("1.5 hours").value == timedelta(seconds=5400)


def test_compact_units_split_at_numbers() -> None:
    assert parse_duration("2h30m").value == timedelta(seconds=9000)


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("1:30", timedelta(minutes=1, seconds=30)),
        ("1:30:00", timedelta(hours=1, minutes=30)),
        ("1:02:03:04", timedelta(days=1, hours=2, minutes=3, seconds=4)),
        ("1.30", timedelta(minutes=1, seconds=30)),
        ("3 days 2 hours", timedelta(days=3, hours=2)),
        ("3 days 2", timedelta(days=3, hours=2)),
        ("2 30s", timedelta(minutes=2, seconds=30)),
        ("1d 2 3", timedelta(days=1, hours=2, minutes=3)),
        ("5 minutes 0 seconds", timedelta(minutes=5)),
        ("45 secs", timedelta(seconds=45)),
        ("10 mins", timedelta(minutes=10)),
        ("2 hrs", timedelta(hours=2)),
        ("1 dy", timedelta(days=1)),
        ("90S", timedelta(seconds=90)),
        ("  15  ", timedelta(minutes=15)),
        (".5m", timedelta(seconds=30)),
    ],
)
def test_parse_duration_examples(text: str, expected: timedelta) -> None:
    assert parse_duration(text).value == expected


def test_split_parts_on_separators_and_numbers() -> None:
    assert split_parts("1:30:00") == ["1", "30", "00"]
    assert split_parts("2h30m") == ["2h", "30m"]
    assert split_parts("3 days 2 hours") == ["3 days", "2 hours"]


def test_infer_units_left_then_right() -> None:
    assert infer_units([Unit.hours, Unit.unspecified]) == [Unit.hours, Unit.minutes]
    assert infer_units([Unit.unspecified, Unit.unspecified]) == [Unit.minutes, Unit.seconds]
    assert infer_units([Unit.unspecified, Unit.seconds]) == [Unit.minutes, Unit.seconds]


def test_unit_after_seconds_is_ambiguous() -> None:
    with pytest.raises(AmbiguousUnitsError):
        parse_duration("5s 3")


def test_unit_before_days_is_ambiguous() -> None:
    with pytest.raises(AmbiguousUnitsError):
        parse_duration("5 3d")


@pytest.mark.parametrize("text", ["", "   ", None])
def test_empty_input(text: str | None) -> None:
    with pytest.raises(EmptyInputError):
        parse_duration(text)


def test_non_numeric_part_fails_whole_string() -> None:
    with pytest.raises(InvalidNumberError):
        parse_duration("soon")


@pytest.mark.parametrize("text", ["\u0665", "\u0661\u0660m", "\uff15 minutes"])
def test_only_ascii_digits_are_numbers(text: str) -> None:
    with pytest.raises(InvalidNumberError):
        parse_duration(text)


def test_unknown_unit_suffix() -> None:
    with pytest.raises(UnknownUnitError):
        parse_duration("5 fortnights")


def test_negative_part_is_rejected() -> None:
    # Negative input is a hard parse error rather than being clamped to zero.
    with pytest.raises(NegativeDurationError):
        parse_duration("-5m")
    with pytest.raises(NegativeDurationError):
        parse_duration("10m -5s")


def test_huge_duration_is_invalid_number() -> None:
    with pytest.raises(InvalidNumberError):
        parse_duration("99999999999999 days")


def test_try_parse_duration_returns_none_on_failure() -> None:
    assert try_parse_duration("next friday") is None
    assert try_parse_duration("2h").value == timedelta(hours=2)
