"""Timer input contract (Pydantic models).

These models are what the parsers hand back to a surrounding application and what the formatter
accepts. They are immutable value types: a new instance is produced for every parse call.
"""

from __future__ import annotations

import re
from datetime import datetime, timedelta
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, field_validator, model_validator

_MONTH_FIRST_PATTERN_RE = re.compile(r"^.*M.*d.*y.*$")
_YEAR_FIRST_PATTERN_RE = re.compile(r"^.*y.*M.*d.*$")


class FormatLocale(StrEnum):
    """Preferred ordering of day, month and year fields."""

    day_first = "day_first"
    month_first = "month_first"
    year_first = "year_first"

    @classmethod
    def from_short_date_pattern(cls, pattern: str) -> FormatLocale:
        """Derive the field ordering from a short date pattern such as `M/d/yyyy` or `yyyy-MM-dd`."""

        value = (pattern or "").strip()
        if _MONTH_FIRST_PATTERN_RE.match(value):
            return cls.month_first
        if _YEAR_FIRST_PATTERN_RE.match(value):
            return cls.year_first
        return cls.day_first


class InputKind(StrEnum):
    """Which interpretation produced a `TimerInput`."""

    duration = "duration"
    moment = "moment"


class ParsedDuration(BaseModel):
    """A non-negative span of elapsed time."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    value: timedelta

    @field_validator("value")
    @classmethod
    def validate_non_negative(cls, value: timedelta) -> timedelta:
        """Reject negative spans; the parsers never produce them."""

        if value < timedelta(0):
            raise ValueError("duration must be at least zero")
        return value

    @property
    def total_seconds(self) -> float:
        return self.value.total_seconds()


class ParsedMoment(BaseModel):
    """An absolute point in time resolved against a reference moment."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    value: datetime


class TimerInput(BaseModel):
    """Tagged union of a parsed duration or a parsed moment."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    kind: InputKind
    duration: ParsedDuration | None = None
    moment: ParsedMoment | None = None

    @model_validator(mode="after")
    def validate_payload(self) -> TimerInput:
        """Exactly the payload named by `kind` must be present."""

        if self.kind == InputKind.duration:
            if self.duration is None or self.moment is not None:
                raise ValueError("kind=duration requires only a duration payload")
        else:
            if self.moment is None or self.duration is not None:
                raise ValueError("kind=moment requires only a moment payload")
        return self

    @classmethod
    def of_duration(cls, duration: ParsedDuration) -> TimerInput:
        return cls(kind=InputKind.duration, duration=duration)

    @classmethod
    def of_moment(cls, moment: ParsedMoment) -> TimerInput:
        return cls(kind=InputKind.moment, moment=moment)

    @property
    def is_duration(self) -> bool:
        return self.kind == InputKind.duration
