"""English dictionaries for months, weekdays, and duration units.

These tables are shared by the lexers and the formatter and are never mutated. Month and weekday
names are recognized by their three-letter prefix, case-insensitively.
"""

from __future__ import annotations

import re
from enum import IntEnum

MONTH_NAMES: tuple[str, ...] = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

# Sunday-first, matching the week the "next week" rule compares against.
WEEKDAY_NAMES: tuple[str, ...] = (
    "Sunday",
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
)

MONTH_PATTERN = "|".join(name[:3] for name in MONTH_NAMES)
WEEKDAY_PATTERN = "|".join(name[:3] for name in WEEKDAY_NAMES)


class Unit(IntEnum):
    """Duration unit buckets, valued in seconds (`unspecified` is a bare number)."""

    unspecified = 0
    seconds = 1
    minutes = 60
    hours = 60 * 60
    days = 24 * 60 * 60


UNIT_SUFFIXES: dict[Unit, tuple[str, ...]] = {
    Unit.days: ("d", "dy", "dys", "day", "days"),
    Unit.hours: ("h", "hr", "hrs", "hour", "hours"),
    Unit.minutes: ("m", "min", "mins", "minute", "minutes"),
    Unit.seconds: ("s", "sec", "secs", "second", "seconds"),
}

SUFFIX_TO_UNIT: dict[str, Unit] = {
    suffix: unit for unit, suffixes in UNIT_SUFFIXES.items() for suffix in suffixes
}

# Left-to-right inference takes the next smaller unit; right-to-left the next larger one.
SMALLER_UNIT: dict[Unit, Unit] = {
    Unit.days: Unit.hours,
    Unit.hours: Unit.minutes,
    Unit.minutes: Unit.seconds,
}
LARGER_UNIT: dict[Unit, Unit] = {smaller: larger for larger, smaller in SMALLER_UNIT.items()}

_NUMBER_WITH_SUFFIX_RE = re.compile(
    r"^[+\-]?(?:\d+(?:\.\d*)?|\.\d+)\s*(?P<suffix>[a-z]*)$",
    flags=re.IGNORECASE | re.ASCII,
)


def parse_month(text: str) -> int | None:
    """Return the month number (1-12) whose three-letter prefix starts `text`."""

    value = (text or "").strip().lower()
    for idx, name in enumerate(MONTH_NAMES):
        if value.startswith(name[:3].lower()):
            return idx + 1
    return None


def parse_weekday(text: str) -> int | None:
    """Return the Sunday-first weekday index (0-6) whose three-letter prefix starts `text`."""

    value = (text or "").strip().lower()
    for idx, name in enumerate(WEEKDAY_NAMES):
        if value.startswith(name[:3].lower()):
            return idx
    return None


def month_name(month: int) -> str:
    """Return the English name of a month number between 1 and 12."""

    if month < 1 or month > 12:
        raise ValueError("month must be between 1 and 12")
    return MONTH_NAMES[month - 1]


def classify_unit(part: str) -> Unit | None:
    """Classify a duration part (`"30m"`, `"1.5 hours"`, `"5"`) into a unit bucket.

    Returns:
        The unit, `Unit.unspecified` for a bare number, or `None` if the suffix is unknown.
    """

    match = _NUMBER_WITH_SUFFIX_RE.match(part)
    if not match:
        return None

    suffix = match.group("suffix").lower()
    if not suffix:
        return Unit.unspecified
    return SUFFIX_TO_UNIT.get(suffix)
