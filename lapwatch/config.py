"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - Every setting can be overridden with a LAPWATCH_-prefixed environment variable
    - get_settings() is cached (lru_cache): single instance per process
    - Invalid values fail at load time, not at first use

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Defaults provided for all settings: the CLI works with no environment at all
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache

from lapwatch.core.convert_duration import parse_time_unit
from lapwatch.core.domain_types import TimeUnit

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
LOG_FORMATS = ("json", "text")

# Largest value a C `long` holds
DEFAULT_MAX_NUMBER = 2**63 - 1


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env", env_prefix="LAPWATCH_", case_sensitive=False,
    )

    # Observability
    log_level: str = "WARNING"
    log_format: str = "text"

    # powerful command
    max_number: int = DEFAULT_MAX_NUMBER

    # --timing output
    default_time_unit: TimeUnit = TimeUnit.MILLISECONDS

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        if isinstance(v, str):
            v = v.upper()
        if v not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return v

    @field_validator("log_format", mode="before")
    @classmethod
    def normalize_log_format(cls, v: str) -> str:
        if isinstance(v, str):
            v = v.lower()
        if v not in LOG_FORMATS:
            raise ValueError(f"log_format must be one of {', '.join(LOG_FORMATS)}")
        return v

    @field_validator("default_time_unit", mode="before")
    @classmethod
    def resolve_time_unit(cls, v: str | TimeUnit) -> TimeUnit:
        """Accept abbreviations like "ms" as well as full unit names."""
        return parse_time_unit(v)

    @field_validator("max_number")
    @classmethod
    def check_max_number(cls, v: int) -> int:
        if v < 1:
            raise ValueError("max_number must be positive")
        return v


@lru_cache
def get_settings() -> Settings:
    return Settings()
