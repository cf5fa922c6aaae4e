"""Logging configuration for command-line processes."""

from __future__ import annotations

import logging


def configure_logging(level: str | None = None) -> None:
    """Configure Python logging for the process.

    The parsing core never logs; only process entry points report failures.
    """

    log_level = (level or "INFO").upper()
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
