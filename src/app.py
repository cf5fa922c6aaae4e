"""Application composition root.

This module binds configuration to the parsing core for a surrounding application: the current time
as the reference moment, the configured locale, and the daytime-bias switch.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime

from src.config.settings import Settings
from src.timeinput.formatting import format_duration, format_timer_input
from src.timeinput.resolver import resolve
from src.timeinput.schema import TimerInput


@dataclass(frozen=True)
class App:
    """Shared dependencies for entry points."""

    settings: Settings
    clock: Callable[[], datetime] = field(default=datetime.now)

    def resolve(self, text: str, reference: datetime | None = None) -> TimerInput:
        """Resolve user input against `reference` (or the clock) with the configured options."""

        return resolve(
            text,
            reference or self.clock(),
            self.settings.locale,
            daytime_bias=self.settings.daytime_bias,
        )

    def describe(self, value: TimerInput, *, long: bool = False) -> str:
        """Render a resolved input as a natural phrase."""

        if long and value.duration is not None:
            return format_duration(value.duration)
        return format_timer_input(value, self.settings.locale)


def create_app(settings: Settings) -> App:
    """Create the application container."""

    return App(settings=settings)
