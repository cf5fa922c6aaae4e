"""Error taxonomy for parsing and formatting natural time input.

Every failure is immediate and total: parsers never return partial results and never fall back to a
default value. Callers decide how to surface the error to the user.
"""

from __future__ import annotations

from enum import StrEnum
from typing import ClassVar


class ErrorKind(StrEnum):
    """Machine-readable classification of a failure."""

    empty = "empty"
    invalid_number = "invalid_number"
    ambiguous_units = "ambiguous_units"
    unknown_unit = "unknown_unit"
    negative_not_allowed = "negative_not_allowed"
    no_match = "no_match"
    invalid_range = "invalid_range"
    no_valid_input = "no_valid_input"


class TimeInputError(ValueError):
    """Base class for all errors raised by the time input core."""

    kind: ClassVar[ErrorKind]


class ParseError(TimeInputError):
    """Raised when a string cannot be interpreted as a duration or a moment."""


class EmptyInputError(ParseError):
    """Input is `None`, empty, or whitespace only."""

    kind = ErrorKind.empty


class InvalidNumberError(ParseError):
    """A part of a duration does not start with a usable number."""

    kind = ErrorKind.invalid_number


class AmbiguousUnitsError(ParseError):
    """Units of a duration could not be inferred from their neighbours."""

    kind = ErrorKind.ambiguous_units


class UnknownUnitError(ParseError):
    """A duration part carries a suffix that is not a known unit."""

    kind = ErrorKind.unknown_unit


class NegativeDurationError(ParseError):
    """A duration part is negative."""

    kind = ErrorKind.negative_not_allowed


class NoMatchError(ParseError):
    """No moment grammar pattern matched the input."""

    kind = ErrorKind.no_match


class InvalidRangeError(TimeInputError):
    """A negative duration was passed to the formatter."""

    kind = ErrorKind.invalid_range


class NoValidInputError(TimeInputError):
    """Neither a duration nor a moment could be read from the input."""

    kind = ErrorKind.no_valid_input
