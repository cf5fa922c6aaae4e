"""Environment configuration and validation.

This module defines strongly-typed application settings loaded from environment variables
(optionally via a local `.env` file).

The parsers themselves take every option as an argument; these settings only decide which options a
surrounding application passes in.
"""

from __future__ import annotations

import logging

from pydantic import Field, ValidationError, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.timeinput.schema import FormatLocale


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    locale: FormatLocale = Field(default=FormatLocale.day_first, alias="TIMEINPUT_LOCALE")
    short_date_pattern: str | None = Field(default=None, alias="TIMEINPUT_SHORT_DATE_PATTERN")
    daytime_bias: bool = Field(default=False, alias="TIMEINPUT_DAYTIME_BIAS")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Validate that the log level is one of the standard `logging` level names."""

        level = value.strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"unknown LOG_LEVEL: {value}")
        return level

    @model_validator(mode="after")
    def apply_short_date_pattern(self) -> Settings:
        """Derive the locale from a short date pattern (e.g. `M/d/yyyy`) when one is configured.

        The pattern takes precedence over `TIMEINPUT_LOCALE`.
        """

        if self.short_date_pattern:
            self.locale = FormatLocale.from_short_date_pattern(self.short_date_pattern)
        return self


def load_settings() -> Settings:
    """Load and validate settings from environment variables.

    Raises:
        RuntimeError: If the environment configuration is missing or invalid.
    """

    try:
        return Settings()
    except ValidationError as exc:
        raise RuntimeError(f"Invalid environment configuration: {exc}") from exc
