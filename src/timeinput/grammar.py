"""Ordered moment grammars.

A grammar is a tuple of compiled patterns tried top to bottom; the first pattern that matches the
whole input (and yields a valid calendar value) wins, so the order below is part of the contract.

Date patterns capture some of `weekday`, `next`, `nextweek`, `day`, `month`, `year`; time patterns
capture some of `hour`, `minute`, `second`, `ampm`. A combined grammar for one `FormatLocale` is:

    1. every date pattern alone,
    2. every time pattern alone,
    3. for each date pattern and each time pattern: "date [at] time", then "time [on] date".
"""

from __future__ import annotations

import re
from collections.abc import Iterator
from dataclasses import dataclass
from functools import cache

from src.timeinput.dictionaries import MONTH_PATTERN, WEEKDAY_PATTERN
from src.timeinput.schema import FormatLocale

_FLAGS = re.IGNORECASE | re.VERBOSE | re.ASCII

_YEAR = r"(?P<year>(?:\d\d)?\d\d)"
_ORDINAL_SUFFIX = r"(?:st|nd|rd|th)"
_SPELLED_YEAR = rf"(?:(?:\s*,?\s*)?{_YEAR})?"

WEEKDAY = rf"""
    (?:(?:this|next)\s*)?
    (?P<weekday>{WEEKDAY_PATTERN})[a-z]*
"""

WEEKDAY_AFTER_NEXT = rf"""
    (?P<weekday>{WEEKDAY_PATTERN})[a-z]*
    (?:\s*after)?
    \s*(?P<next>next)
"""

WEEKDAY_NEXT_WEEK = rf"""
    (?P<weekday>{WEEKDAY_PATTERN})[a-z]*
    \s*(?P<nextweek>next\s*week)
"""

DAY_ONLY = rf"""
    (?:the\s*)?
    (?P<day>\d\d?)
    \s*{_ORDINAL_SUFFIX}
"""

SPELLED_DAY_FIRST = rf"""
    (?P<day>\d\d?)
    (?:\s*{_ORDINAL_SUFFIX})?
    (?:\s*of)?
    \s*(?P<month>{MONTH_PATTERN})[a-z]*
    {_SPELLED_YEAR}
"""

SPELLED_MONTH_FIRST = rf"""
    (?P<month>{MONTH_PATTERN})[a-z]*
    \s*(?P<day>\d\d?)
    (?:\s*{_ORDINAL_SUFFIX})?
    {_SPELLED_YEAR}
"""

NUMERIC_DAY_FIRST = rf"""
    (?P<day>\d\d?)
    [.\-/]
    (?P<month>\d\d?)
    (?:[.\-/]{_YEAR})?
"""

NUMERIC_MONTH_FIRST = rf"""
    (?P<month>\d\d?)
    [.\-/]
    (?P<day>\d\d?)
    (?:[.\-/]{_YEAR})?
"""

NUMERIC_YEAR_FIRST = rf"""
    {_YEAR}
    [.\-/]
    (?P<month>\d\d?)
    [.\-/]
    (?P<day>\d\d?)
"""

YEAR_ONLY = r"""
    (?P<year>20\d\d)
"""

_AMPM = r"""
    (?P<ampm>
        [ap]\.?\s*m\.?
        |
        h[a-z]*
    )?
"""

# "5", "5 pm", "5:30", "5.30 p.m.", "5:30:45 pm", "17:30h"
TIME_WITH_SEPARATORS = rf"""
    (?P<hour>\d\d?)
    (?:
        [.:]
        (?P<minute>\d\d?)
        (?:[.:](?P<second>\d\d?))?
    )?
    \s*
    {_AMPM}
"""

# "530", "530 pm", "53045 pm", "1730h"
TIME_WITHOUT_SEPARATORS = rf"""
    (?P<hour>\d\d?)
    (?:
        (?P<minute>\d\d)
        (?P<second>\d\d)?
    )?
    \s*
    {_AMPM}
"""

TIME_PATTERNS: tuple[tuple[str, str], ...] = (
    ("time", TIME_WITH_SEPARATORS),
    ("compact-time", TIME_WITHOUT_SEPARATORS),
)

_LEADING_DATE_PATTERNS: tuple[tuple[str, str], ...] = (
    ("weekday", WEEKDAY),
    ("weekday-after-next", WEEKDAY_AFTER_NEXT),
    ("weekday-next-week", WEEKDAY_NEXT_WEEK),
    ("day", DAY_ONLY),
    ("spelled-day-first", SPELLED_DAY_FIRST),
    ("spelled-month-first", SPELLED_MONTH_FIRST),
)

_NUMERIC_DAY_FIRST = ("numeric-day-first", NUMERIC_DAY_FIRST)
_NUMERIC_MONTH_FIRST = ("numeric-month-first", NUMERIC_MONTH_FIRST)
_NUMERIC_YEAR_FIRST = ("numeric-year-first", NUMERIC_YEAR_FIRST)

_NUMERIC_DATE_ORDER: dict[FormatLocale, tuple[tuple[str, str], ...]] = {
    FormatLocale.day_first: (_NUMERIC_DAY_FIRST, _NUMERIC_MONTH_FIRST, _NUMERIC_YEAR_FIRST),
    FormatLocale.month_first: (_NUMERIC_MONTH_FIRST, _NUMERIC_DAY_FIRST, _NUMERIC_YEAR_FIRST),
    FormatLocale.year_first: (_NUMERIC_YEAR_FIRST, _NUMERIC_DAY_FIRST, _NUMERIC_MONTH_FIRST),
}


@dataclass(frozen=True)
class Pattern:
    """One compiled alternative of a grammar."""

    name: str
    regex: re.Pattern[str]


def date_patterns(locale: FormatLocale) -> tuple[tuple[str, str], ...]:
    """Named date sub-grammar in priority order for a locale."""

    return _LEADING_DATE_PATTERNS + _NUMERIC_DATE_ORDER[locale] + (("year", YEAR_ONLY),)


def _iter_sources(locale: FormatLocale) -> Iterator[tuple[str, str]]:
    dates = date_patterns(locale)

    yield from dates
    yield from TIME_PATTERNS

    for date_name, date in dates:
        for time_name, time in TIME_PATTERNS:
            yield f"{date_name} at {time_name}", rf"{date} \s+(?:at\s+)? {time}"
            yield f"{time_name} on {date_name}", rf"{time} \s+(?:on\s+)? {date}"


@cache
def grammar_for(locale: FormatLocale) -> tuple[Pattern, ...]:
    """Return the full, compiled grammar for a locale (built once per locale)."""

    return tuple(
        Pattern(name=name, regex=re.compile(source, _FLAGS))
        for name, source in _iter_sources(locale)
    )
