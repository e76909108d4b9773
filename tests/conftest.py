"""Root conftest — shared test configuration and fixtures."""

import os

import pytest

from lapwatch.config import get_settings
from lapwatch.core.stopwatch import Stopwatch
from tests.core.fake_clock import FakeClock

# Keep a developer's shell or .env from changing CLI behavior under test
os.environ.setdefault("LAPWATCH_LOG_LEVEL", "WARNING")
os.environ.setdefault("LAPWATCH_LOG_FORMAT", "text")


@pytest.fixture(autouse=True)
def fresh_settings():
    """Settings are lru_cached per process; drop the cache around every test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock(start=1_000_000)


@pytest.fixture
def stopwatch(clock: FakeClock) -> Stopwatch:
    return Stopwatch(clock)
