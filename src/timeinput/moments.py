"""Natural-language moment parsing.

A moment is an absolute date and/or time of day resolved against a caller-supplied reference
moment, e.g. "5pm", "next Friday", "14 Feb 2025 at 9:30", "noon tomorrow".

Resolution happens in three steps:
    1. Fields captured by the first matching grammar pattern are collected into a `_FieldSet`.
    2. Missing fields cascade: a year implies January, a month implies the 1st, a day implies
       midnight, an hour implies :00, a minute implies :00. Anything still missing is taken from
       the reference moment.
    3. A result at or before the reference is moved once into the future (future bias).
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import date, datetime, time, timedelta
from enum import StrEnum

from dateutil.relativedelta import relativedelta

from src.timeinput.dictionaries import MONTH_PATTERN, parse_month, parse_weekday
from src.timeinput.errors import EmptyInputError, NoMatchError, ParseError
from src.timeinput.grammar import grammar_for
from src.timeinput.normalize import normalize_moment_text
from src.timeinput.schema import FormatLocale, ParsedMoment

_NEW_YEAR_RE = re.compile(r"^(?:nye?|new\s*year(?:'?s)?(?:\s*eve)?)$", flags=re.IGNORECASE)
_CHRISTMAS_RE = re.compile(r"^(?:[ck]h?rist?|x)-?mass?(?:\s*day)?$", flags=re.IGNORECASE)
_MONTH_ONLY_RE = re.compile(rf"^(?P<month>{MONTH_PATTERN})[a-z]*$", flags=re.IGNORECASE)
_DIGITS_RE = re.compile(r"^\d+$", flags=re.ASCII)

_HALF_DAY = timedelta(hours=12)
# Bare hours before this are read as evening when the daytime bias is enabled.
_DAYTIME_START_HOUR = 8


class HourPeriod(StrEnum):
    """Indicator following a time of day."""

    am = "am"
    pm = "pm"
    # "17:30h": an explicit 24-hour clock reading.
    clock = "clock"


@dataclass
class _FieldSet:
    year: int | None = None
    month: int | None = None
    day: int | None = None
    hour: int | None = None
    minute: int | None = None
    second: int | None = None
    period: HourPeriod | None = None
    matched: set[str] = field(default_factory=set)

    def capture(self, name: str, value: int) -> None:
        setattr(self, name, value)
        self.matched.add(name)


def _sunday_first_weekday(value: date) -> int:
    return (value.weekday() + 1) % 7


def _next_weekday(
        weekday: int,
        reference: datetime,
        *,
        after_next: bool,
        next_week: bool,
) -> date:
    """Find the nearest date strictly after the reference that falls on `weekday`."""

    candidate = reference.date() + timedelta(days=1)
    while _sunday_first_weekday(candidate) != weekday:
        candidate += timedelta(days=1)

    if after_next:
        candidate += timedelta(days=7)

    if next_week and weekday > _sunday_first_weekday(reference):
        candidate += timedelta(days=7)

    return candidate


def _parse_period(text: str) -> HourPeriod:
    value = text.lower()
    if value.startswith("p"):
        return HourPeriod.pm
    if value.startswith("a"):
        return HourPeriod.am
    return HourPeriod.clock


def _collect_fields(groups: dict[str, str | None], reference: datetime) -> _FieldSet:
    """Turn the named captures of a match into a field set (hour already in 24-hour form)."""

    fields = _FieldSet()

    if groups.get("weekday"):
        weekday = parse_weekday(groups["weekday"])
        if weekday is None:
            raise ValueError(f"unknown weekday: {groups['weekday']!r}")
        resolved = _next_weekday(
            weekday,
            reference,
            after_next=bool(groups.get("next")),
            next_week=bool(groups.get("nextweek")),
        )
        fields.capture("year", resolved.year)
        fields.capture("month", resolved.month)
        fields.capture("day", resolved.day)
    else:
        if groups.get("day"):
            fields.capture("day", int(groups["day"]))

        raw_month = groups.get("month")
        if raw_month:
            month = int(raw_month) if _DIGITS_RE.match(raw_month) else parse_month(raw_month)
            if month is None:
                raise ValueError(f"unknown month: {raw_month!r}")
            fields.capture("month", month)

        if groups.get("year"):
            year = int(groups["year"])
            if year < 100:
                year += reference.year // 100 * 100
            fields.capture("year", year)

    for name in ("hour", "minute", "second"):
        if groups.get(name):
            fields.capture(name, int(groups[name]))

    if groups.get("ampm"):
        fields.period = _parse_period(groups["ampm"])

    if fields.hour is not None:
        if fields.period == HourPeriod.pm and fields.hour != 12:
            fields.hour += 12
        if fields.period in (None, HourPeriod.am) and fields.hour == 12:
            fields.hour = 0

    return fields


def _apply_cascade(fields: _FieldSet) -> None:
    if fields.year is not None and fields.month is None:
        fields.month = 1
    if fields.month is not None and fields.day is None:
        fields.day = 1
    if fields.day is not None and fields.hour is None:
        fields.hour = 0
    if fields.hour is not None and fields.minute is None:
        fields.minute = 0
    if fields.minute is not None and fields.second is None:
        fields.second = 0


def _resolve(fields: _FieldSet, reference: datetime, *, daytime_bias: bool) -> datetime:
    """Combine a field set with the reference moment.

    Raises:
        ValueError: If the fields do not form a valid date and time.
        OverflowError: If shifting the result leaves the supported date range.
    """

    _apply_cascade(fields)

    result = datetime(
        fields.year if fields.year is not None else reference.year,
        fields.month if fields.month is not None else reference.month,
        fields.day if fields.day is not None else reference.day,
        fields.hour if fields.hour is not None else reference.hour,
        fields.minute if fields.minute is not None else reference.minute,
        fields.second if fields.second is not None else reference.second,
        tzinfo=reference.tzinfo,
    )

    bare_hour = "hour" in fields.matched and fields.period is None

    if result <= reference:
        if bare_hour and result.hour < 12 and result + _HALF_DAY > reference:
            result += _HALF_DAY
        elif "day" not in fields.matched:
            result += timedelta(days=1)
        elif "month" not in fields.matched:
            result += relativedelta(months=1)
        elif "year" not in fields.matched:
            result += relativedelta(years=1)

    if (
            daytime_bias
            and bare_hour
            and result.date() != reference.date()
            and result.time() != time.min
            and result.hour < _DAYTIME_START_HOUR
    ):
        result += _HALF_DAY

    return result


def _parse_literal(text: str, reference: datetime) -> datetime | None:
    if _NEW_YEAR_RE.match(text):
        return datetime(reference.year + 1, 1, 1, tzinfo=reference.tzinfo)

    if _CHRISTMAS_RE.match(text):
        result = datetime(reference.year, 12, 25, tzinfo=reference.tzinfo)
        return result if result > reference else result + relativedelta(years=1)

    match = _MONTH_ONLY_RE.match(text)
    if match:
        month = parse_month(match.group("month"))
        result = datetime(reference.year, month, 1, tzinfo=reference.tzinfo)
        return result if result > reference else result + relativedelta(years=1)

    return None


def parse_moment(
        text: str | None,
        reference: datetime,
        locale: FormatLocale = FormatLocale.day_first,
        *,
        daytime_bias: bool = False,
) -> ParsedMoment:
    """Parse text into an absolute moment relative to `reference`.

    Args:
        text: User input such as "5:30 pm", "next Friday", or "Jan 1".
        reference: The "now" against which relative input is resolved.
        locale: Preferred ordering for numeric dates like "02/03".
        daytime_bias: Read bare early hours on another day as evening ("Friday 5" -> 5 pm).

    Raises:
        ParseError: If the text is empty or no pattern yields a valid moment.
    """

    value = (text or "").strip()
    if not value:
        raise EmptyInputError("empty input")

    literal = _parse_literal(value, reference)
    if literal is not None:
        return ParsedMoment(value=literal)

    value = normalize_moment_text(value, reference)

    for pattern in grammar_for(locale):
        match = pattern.regex.fullmatch(value)
        if not match:
            continue

        try:
            fields = _collect_fields(match.groupdict(), reference)
            return ParsedMoment(value=_resolve(fields, reference, daytime_bias=daytime_bias))
        except (ValueError, OverflowError):
            # Matched text that is not a real date (e.g. "31/02"): try the next pattern.
            continue

    raise NoMatchError(f"not a recognized date or time: {text!r}")


def try_parse_moment(
        text: str | None,
        reference: datetime,
        locale: FormatLocale = FormatLocale.day_first,
        *,
        daytime_bias: bool = False,
) -> ParsedMoment | None:
    """Parse text into a moment, or return `None` if it is not one."""

    try:
        return parse_moment(text, reference, locale, daytime_bias=daytime_bias)
    except ParseError:
        return None
