"""Natural-language duration parsing.

Examples of accepted input:
    - "5"            -> 5 minutes (a bare integer is always minutes)
    - "1:30:00"      -> 1 hour 30 minutes
    - "2h30m"        -> 2 hours 30 minutes
    - "1.5 hours"    -> 90 minutes
    - "3 days 2"     -> 3 days 2 hours

Parts without a unit take one from their neighbours: left to right a part gets the next smaller
unit than the one before it, the last part defaults to seconds, and right to left a part gets the
next larger unit than the one after it.
"""

from __future__ import annotations

import re
from datetime import timedelta
from decimal import ROUND_DOWN, Decimal, InvalidOperation

from src.timeinput.dictionaries import LARGER_UNIT, SMALLER_UNIT, Unit, classify_unit
from src.timeinput.errors import (
    AmbiguousUnitsError,
    EmptyInputError,
    InvalidNumberError,
    NegativeDurationError,
    ParseError,
    UnknownUnitError,
)
from src.timeinput.schema import ParsedDuration

_INTEGER_RE = re.compile(r"^\d+$", flags=re.ASCII)
_SEPARATED_RE = re.compile(r"^[\d.,;:]+$", flags=re.ASCII)
_SEPARATOR_RE = re.compile(r"[.,;:]", flags=re.ASCII)
# Split before each number: on whitespace followed by a number, or where a number starts right after
# a non-number (so "2h30m" -> "2h", "30m").
_NUMBER_BOUNDARY_RE = re.compile(
    r"\s+(?=[+\-\d.])|(?<![+\-\d.])(?=[+\-\d.])",
    flags=re.ASCII,
)
_LEADING_NUMBER_RE = re.compile(r"^[+\-]?\d+(?:\.\d*)?|^[+\-]?\.\d+", flags=re.ASCII)

_MICROSECONDS_PER_SECOND = Decimal(1_000_000)


def split_parts(text: str) -> list[str]:
    """Split a trimmed duration string into non-empty parts."""

    if _SEPARATED_RE.match(text):
        parts = _SEPARATOR_RE.split(text)
    else:
        parts = _NUMBER_BOUNDARY_RE.split(text)
    return [p for p in parts if p]


def _parse_value(part: str) -> Decimal:
    match = _LEADING_NUMBER_RE.match(part)
    if not match:
        raise InvalidNumberError(f"not a number: {part!r}")

    try:
        value = Decimal(match.group(0))
    except InvalidOperation as exc:
        raise InvalidNumberError(f"not a number: {part!r}") from exc

    if value < 0:
        raise NegativeDurationError(f"negative durations are not allowed: {part!r}")
    return value


def _parse_unit(part: str) -> Unit:
    unit = classify_unit(part)
    if unit is None:
        raise UnknownUnitError(f"unknown unit: {part!r}")
    return unit


def infer_units(units: list[Unit]) -> list[Unit]:
    """Fill `Unit.unspecified` entries from their neighbours.

    Raises:
        AmbiguousUnitsError: If an unspecified unit would need to be smaller than seconds or larger
            than days.
    """

    resolved = list(units)
    if not resolved:
        return resolved

    last = resolved[0]
    for i in range(1, len(resolved)):
        if resolved[i] == Unit.unspecified and last != Unit.unspecified:
            if last not in SMALLER_UNIT:
                raise AmbiguousUnitsError("no unit smaller than seconds")
            resolved[i] = SMALLER_UNIT[last]
        last = resolved[i]

    # Anchor the chain on the last part.
    if last == Unit.unspecified:
        last = resolved[-1] = Unit.seconds

    for i in range(len(resolved) - 2, -1, -1):
        if resolved[i] == Unit.unspecified:
            if last not in LARGER_UNIT:
                raise AmbiguousUnitsError("no unit larger than days")
            resolved[i] = LARGER_UNIT[last]
        last = resolved[i]

    return resolved


def _to_timedelta(total_seconds: Decimal) -> timedelta:
    microseconds = (total_seconds * _MICROSECONDS_PER_SECOND).to_integral_value(rounding=ROUND_DOWN)
    try:
        return timedelta(microseconds=int(microseconds))
    except OverflowError as exc:
        raise InvalidNumberError("duration is too large") from exc


def parse_duration(text: str | None) -> ParsedDuration:
    """Parse text into a non-negative duration.

    Raises:
        ParseError: If the text is empty or any part cannot be read (no partial results).
    """

    value = (text or "").strip()
    if not value:
        raise EmptyInputError("empty input")

    if _INTEGER_RE.match(value):
        return ParsedDuration(value=_to_timedelta(Decimal(value) * Unit.minutes))

    parts = split_parts(value)
    if not parts:
        raise InvalidNumberError(f"no numbers in {value!r}")

    values = [_parse_value(p) for p in parts]
    units = infer_units([_parse_unit(p) for p in parts])

    total = sum((v * int(u) for v, u in zip(values, units, strict=True)), Decimal(0))
    return ParsedDuration(value=_to_timedelta(total))


def try_parse_duration(text: str | None) -> ParsedDuration | None:
    """Parse text into a duration, or return `None` if it is not one."""

    try:
        return parse_duration(text)
    except ParseError:
        return None
