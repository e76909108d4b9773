"""Elapsed Formatting — tests for hours:minutes:seconds.millis rendering.

Tests cover:
    - Field decomposition (hours uncapped, minutes/seconds wrap at 60)
    - Trailing field is the total millisecond count
"""

from lapwatch.core.format_elapsed import decompose_millis, format_elapsed


def test_zero():
    assert format_elapsed(0) == "0:0:0.0"


def test_sub_second():
    assert format_elapsed(999) == "0:0:0.999"


def test_trailing_field_is_total_millis():
    assert format_elapsed(1500) == "0:0:1.1500"
    assert format_elapsed(61_001) == "0:1:1.61001"


def test_hours_are_not_wrapped():
    fields = decompose_millis(30 * 3_600_000 + 59 * 60_000 + 59_000)
    assert fields["hours"] == 30
    assert fields["minutes"] == 59
    assert fields["seconds"] == 59


def test_minutes_and_seconds_wrap():
    fields = decompose_millis(3_600_000)
    assert fields == {
        "hours": 1, "minutes": 0, "seconds": 0, "milliseconds": 3_600_000,
    }
