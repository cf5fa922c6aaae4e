"""Tests for the application container and the command-line entry point."""

from __future__ import annotations

import logging
from datetime import datetime, timedelta

import pytest

from src.app import App, create_app
from src.cli import main
from src.config.settings import Settings
from src.timeinput.schema import FormatLocale, InputKind

_REFERENCE = "2024-03-01T08:00:00"


def test_app_uses_clock_when_no_reference() -> None:
    app = App(settings=Settings(), clock=lambda: datetime(2024, 3, 1, 8, 0))

    value = app.resolve("noon")

    assert value.kind == InputKind.moment
    assert value.moment.value == datetime(2024, 3, 1, 12, 0)


def test_app_passes_configured_options() -> None:
    settings = Settings(TIMEINPUT_LOCALE=FormatLocale.month_first, TIMEINPUT_DAYTIME_BIAS=True)
    app = App(settings=settings, clock=lambda: datetime(2024, 3, 1, 8, 0))

    assert app.resolve("until 02/03").moment.value == datetime(2025, 2, 3)
    # Friday 8:00 reference: "Saturday 5" is read as evening.
    assert app.resolve("Saturday 5").moment.value == datetime(2024, 3, 2, 17, 0)


def test_app_describe() -> None:
    app = create_app(Settings())
    value = app.resolve("90", datetime(2024, 3, 1, 8, 0))

    assert value.duration.value == timedelta(minutes=90)
    assert app.describe(value) == "1 hour 30 minutes"
    assert app.describe(value, long=True) == "1 hour 30 minutes 0 seconds"


def test_cli_prints_duration(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["5", "--reference", _REFERENCE]) == 0

    assert capsys.readouterr().out == "duration\t5 minutes\t300s\n"


def test_cli_prints_long_duration(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["1:30:00", "--long"]) == 0

    assert capsys.readouterr().out == "duration\t1 hour 30 minutes 0 seconds\t5400s\n"


def test_cli_prints_moment(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["noon", "--reference", _REFERENCE]) == 0

    assert capsys.readouterr().out == "moment\t1 March 2024 12:00 PM\t2024-03-01T12:00:00\n"


def test_cli_locale_override(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["until 02/03", "--locale", "month_first", "--reference", _REFERENCE]) == 0

    assert capsys.readouterr().out == "moment\tFebruary 3, 2025\t2025-02-03T00:00:00\n"


def test_cli_rejects_unrecognized_input(
        capsys: pytest.CaptureFixture[str],
        caplog: pytest.LogCaptureFixture,
) -> None:
    with caplog.at_level(logging.INFO, logger="src.cli"):
        assert main(["whenever", "--reference", _REFERENCE]) == 1

    assert capsys.readouterr().out == ""
    assert "rejected" in caplog.text
