"""Application configuration."""

import os
from datetime import date
from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from recipe_finder.domain.ingredients import parse_use_by_date

_ENVIRONMENT = os.getenv("RECIPE_FINDER_ENVIRONMENT", "local")

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    environment: str = _ENVIRONMENT
    log_level: LogLevel = "WARNING"
    no_match_message: str = "no match available"
    csv_delimiter: str = ","
    today: date | None = None

    model_config = SettingsConfigDict(
        env_prefix="RECIPE_FINDER_",
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip().upper()
        return value

    @field_validator("today", mode="before")
    @classmethod
    def _parse_today(cls, value: object) -> object:
        """Accept DD/MM/YYYY like the use-by dates, as well as ISO dates."""
        if isinstance(value, str) and "/" in value:
            return parse_use_by_date(value.strip())
        return value
