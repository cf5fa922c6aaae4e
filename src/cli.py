"""Command-line entry point: resolve one timer input and print it back.

Usage:
    python -m src.cli "next friday at 5pm"
    python -m src.cli "1:30:00" --long
    python -m src.cli "02/03" --locale month_first --reference 2025-01-15T09:00:00
"""

from __future__ import annotations

import argparse
import logging
from datetime import datetime

from src.app import App, create_app
from src.config.logging import configure_logging
from src.config.settings import load_settings
from src.timeinput.errors import NoValidInputError
from src.timeinput.schema import FormatLocale, TimerInput

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Interpret a natural timer input.")
    parser.add_argument("text", help='Input such as "5", "2h30m", "noon", or "until Jan 1".')
    parser.add_argument(
        "--reference",
        type=datetime.fromisoformat,
        default=None,
        help="ISO 8601 reference moment (defaults to now).",
    )
    parser.add_argument(
        "--locale",
        type=FormatLocale,
        choices=list(FormatLocale),
        default=None,
        help="Field order for numeric dates (overrides TIMEINPUT_LOCALE).",
    )
    parser.add_argument(
        "--daytime-bias",
        action="store_true",
        help="Read bare early hours on another day as evening.",
    )
    parser.add_argument(
        "--long",
        action="store_true",
        help="Print durations with every unit below the largest one.",
    )
    return parser


def _render(app: App, value: TimerInput, *, long: bool) -> str:
    phrase = app.describe(value, long=long)
    if value.duration is not None:
        return f"duration\t{phrase}\t{value.duration.total_seconds:g}s"
    return f"moment\t{phrase}\t{value.moment.value.isoformat()}"


def main(argv: list[str] | None = None) -> int:
    """Run the CLI and return the process exit status."""

    args = _build_parser().parse_args(argv)

    settings = load_settings()
    configure_logging(settings.log_level)

    overrides = {}
    if args.locale is not None:
        overrides["locale"] = args.locale
    if args.daytime_bias:
        overrides["daytime_bias"] = True
    if overrides:
        settings = settings.model_copy(update=overrides)

    app = create_app(settings)
    try:
        value = app.resolve(args.text, args.reference)
    except NoValidInputError as exc:
        logger.info("rejected reason=%s cause=%s", exc, exc.__cause__)
        return 1

    logger.debug("resolved kind=%s locale=%s", value.kind, settings.locale)
    print(_render(app, value, long=args.long))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
