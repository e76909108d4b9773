"""Configuration — tests for environment-driven Settings.

Tests cover:
    - Defaults work with no environment
    - LAPWATCH_-prefixed variables override defaults
    - Invalid values fail at load time
    - get_settings() is cached
"""

import pytest
from pydantic import ValidationError

from lapwatch.config import DEFAULT_MAX_NUMBER, Settings, get_settings
from lapwatch.core.domain_types import TimeUnit


@pytest.fixture
def clean_env(monkeypatch):
    for name in (
        "LAPWATCH_LOG_LEVEL", "LAPWATCH_LOG_FORMAT",
        "LAPWATCH_MAX_NUMBER", "LAPWATCH_DEFAULT_TIME_UNIT",
    ):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_defaults(clean_env):
    settings = Settings(_env_file=None)
    assert settings.log_level == "WARNING"
    assert settings.log_format == "text"
    assert settings.max_number == DEFAULT_MAX_NUMBER == 2**63 - 1
    assert settings.default_time_unit == TimeUnit.MILLISECONDS


def test_environment_overrides(clean_env):
    clean_env.setenv("LAPWATCH_LOG_LEVEL", "debug")
    clean_env.setenv("LAPWATCH_LOG_FORMAT", "JSON")
    clean_env.setenv("LAPWATCH_MAX_NUMBER", "1000")
    clean_env.setenv("LAPWATCH_DEFAULT_TIME_UNIT", "us")
    settings = Settings(_env_file=None)
    assert settings.log_level == "DEBUG"
    assert settings.log_format == "json"
    assert settings.max_number == 1000
    assert settings.default_time_unit == TimeUnit.MICROSECONDS


@pytest.mark.parametrize(
    "name, value",
    [
        ("LAPWATCH_LOG_LEVEL", "chatty"),
        ("LAPWATCH_LOG_FORMAT", "xml"),
        ("LAPWATCH_MAX_NUMBER", "0"),
        ("LAPWATCH_DEFAULT_TIME_UNIT", "fortnights"),
    ],
)
def test_invalid_values_rejected(clean_env, name, value):
    clean_env.setenv(name, value)
    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_get_settings_is_cached(clean_env):
    assert get_settings() is get_settings()
