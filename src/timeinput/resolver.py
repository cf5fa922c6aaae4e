"""Ambiguity resolution between duration and moment input.

Many inputs are valid under both grammars ("5" is five minutes or five o'clock). The resolver
decides which interpretation to try first; the other one is only tried if the first fails.

Strategy:
    1) Input starting with "until"/"till" (marker stripped), or a bare year like "2030", is read as
       a moment first, then as a duration.
    2) Anything else is read as a duration first, then as a moment.
    3) If both fail, raise `NoValidInputError`. There is never a third guess.
"""

from __future__ import annotations

import re
from datetime import datetime

from src.timeinput.durations import parse_duration
from src.timeinput.errors import NoValidInputError, ParseError
from src.timeinput.moments import parse_moment
from src.timeinput.schema import FormatLocale, TimerInput

_UNTIL_RE = re.compile(r"^\s*(?:un)?till?\s*", flags=re.IGNORECASE)
_YEAR_ONLY_RE = re.compile(r"^20\d\d$", flags=re.ASCII)


def prefers_moment(text: str) -> bool:
    """Whether the text should be read as a moment before trying a duration."""

    return bool(_UNTIL_RE.match(text) or _YEAR_ONLY_RE.match(text))


def strip_until(text: str) -> str:
    """Remove a leading "until"/"till" marker."""

    return _UNTIL_RE.sub("", text, count=1)


def resolve(
        text: str | None,
        reference: datetime | None = None,
        locale: FormatLocale = FormatLocale.day_first,
        *,
        daytime_bias: bool = False,
) -> TimerInput:
    """Interpret text as either a duration or a moment.

    Args:
        text: Raw user input.
        reference: The "now" for moment input; defaults to the current local time.
        locale: Preferred ordering for numeric dates.
        daytime_bias: See `parse_moment`.

    Raises:
        NoValidInputError: If the text is neither a duration nor a moment.
    """

    value = text or ""
    if reference is None:
        reference = datetime.now()

    moment_first = prefers_moment(value)
    if moment_first:
        value = strip_until(value)

    def as_duration() -> TimerInput:
        return TimerInput.of_duration(parse_duration(value))

    def as_moment() -> TimerInput:
        return TimerInput.of_moment(
            parse_moment(value, reference, locale, daytime_bias=daytime_bias)
        )

    attempts = (as_moment, as_duration) if moment_first else (as_duration, as_moment)

    last_error: ParseError | None = None
    for attempt in attempts:
        try:
            return attempt()
        except ParseError as exc:
            last_error = exc

    raise NoValidInputError(f"no valid input: {text!r}") from last_error
