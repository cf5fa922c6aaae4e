"""Natural English rendering of durations and moments.

Only the order of day, month and year depends on the `FormatLocale`; wording is always English:
    - day_first:   "14 February 2025 5:30 PM"
    - month_first: "February 14, 2025 5:30 PM"
    - year_first:  "2025 February 14 5:30 PM"
"""

from __future__ import annotations

from datetime import datetime, timedelta

from src.timeinput.dictionaries import month_name
from src.timeinput.errors import InvalidRangeError
from src.timeinput.schema import FormatLocale, ParsedDuration, ParsedMoment, TimerInput

_UNITS: tuple[tuple[str, int], ...] = (
    ("day", 24 * 60 * 60),
    ("hour", 60 * 60),
    ("minute", 60),
    ("second", 1),
)


def _breakdown(duration: timedelta | ParsedDuration) -> list[tuple[str, int]]:
    """Split a duration into whole (unit, count) pairs, largest unit first."""

    if isinstance(duration, ParsedDuration):
        duration = duration.value
    if duration < timedelta(0):
        raise InvalidRangeError("duration must be at least zero")

    remaining = duration.days * 24 * 60 * 60 + duration.seconds
    parts: list[tuple[str, int]] = []
    for unit, size in _UNITS:
        count, remaining = divmod(remaining, size)
        parts.append((unit, count))
    return parts


def _with_unit(count: int, unit: str) -> str:
    return f"{count} {unit}" if count == 1 else f"{count} {unit}s"


def format_duration(duration: timedelta | ParsedDuration) -> str:
    """Render a duration with every unit below the largest non-zero one.

    Examples: "0 seconds", "5 minutes 0 seconds", "1 day 0 hours 0 minutes 1 second".

    Raises:
        InvalidRangeError: If the duration is negative.
    """

    words: list[str] = []
    for unit, count in _breakdown(duration):
        if count != 0 or words or unit == "second":
            words.append(_with_unit(count, unit))
    return " ".join(words)


def format_duration_short(duration: timedelta | ParsedDuration) -> str:
    """Render a duration using only its non-zero units ("1 hour 5 seconds").

    Raises:
        InvalidRangeError: If the duration is negative.
    """

    words = [_with_unit(count, unit) for unit, count in _breakdown(duration) if count != 0]
    return " ".join(words) if words else _with_unit(0, "second")


def _format_date(value: datetime, locale: FormatLocale) -> str:
    month = month_name(value.month)
    if locale == FormatLocale.month_first:
        return f"{month} {value.day}, {value.year}"
    if locale == FormatLocale.year_first:
        return f"{value.year} {month} {value.day}"
    return f"{value.day} {month} {value.year}"


def _format_time(value: datetime) -> str:
    hour = value.hour % 12 or 12
    period = "AM" if value.hour < 12 else "PM"
    if value.second != 0:
        return f"{hour}:{value.minute:02d}:{value.second:02d} {period}"
    return f"{hour}:{value.minute:02d} {period}"


def format_moment(
        moment: datetime | ParsedMoment,
        locale: FormatLocale = FormatLocale.day_first,
) -> str:
    """Render a moment as a date, followed by the time of day unless it is midnight."""

    value = moment.value if isinstance(moment, ParsedMoment) else moment

    text = _format_date(value, locale)
    if value.hour or value.minute or value.second:
        text = f"{text} {_format_time(value)}"
    return text


def format_timer_input(value: TimerInput, locale: FormatLocale = FormatLocale.day_first) -> str:
    """Render a resolved input: durations in the short form, moments with `format_moment`."""

    if value.duration is not None:
        return format_duration_short(value.duration)
    return format_moment(value.moment, locale)
