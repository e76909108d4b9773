"""Duration Conversion — tests for integer unit conversion and unit parsing.

Tests cover:
    - convert_nanos truncates toward zero (positive and negative)
    - parse_time_unit accepts values, names and abbreviations
    - parse_time_unit rejects unknown units with InvalidInputError
"""

import pytest

from lapwatch.core.convert_duration import convert_nanos, parse_time_unit
from lapwatch.core.domain_types import TimeUnit
from lapwatch.core.errors import InvalidInputError


def test_convert_nanos_identity():
    assert convert_nanos(123, TimeUnit.NANOSECONDS) == 123


def test_convert_nanos_truncates_positive():
    assert convert_nanos(1_999_999, TimeUnit.MILLISECONDS) == 1
    assert convert_nanos(59_999_999_999, TimeUnit.MINUTES) == 0


def test_convert_nanos_truncates_negative_toward_zero():
    assert convert_nanos(-1_999_999, TimeUnit.MILLISECONDS) == -1
    assert convert_nanos(-1, TimeUnit.SECONDS) == 0


def test_convert_nanos_exact_boundaries():
    assert convert_nanos(86_400_000_000_000, TimeUnit.DAYS) == 1
    assert convert_nanos(3_600_000_000_000, TimeUnit.HOURS) == 1


def test_convert_nanos_returns_int():
    assert isinstance(convert_nanos(1_500_000_000, TimeUnit.SECONDS), int)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("ms", TimeUnit.MILLISECONDS),
        ("milliseconds", TimeUnit.MILLISECONDS),
        ("MILLISECONDS", TimeUnit.MILLISECONDS),
        ("  seconds ", TimeUnit.SECONDS),
        ("ns", TimeUnit.NANOSECONDS),
        ("us", TimeUnit.MICROSECONDS),
        ("d", TimeUnit.DAYS),
        (TimeUnit.HOURS, TimeUnit.HOURS),
    ],
)
def test_parse_time_unit(text, expected):
    assert parse_time_unit(text) is expected


@pytest.mark.parametrize("text", ["fortnights", "", "MS"])
def test_parse_time_unit_rejects_unknown(text):
    with pytest.raises(InvalidInputError) as excinfo:
        parse_time_unit(text)
    assert excinfo.value.field == "time_unit"
