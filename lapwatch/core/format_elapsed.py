"""Elapsed Formatting — renders a millisecond reading as hours:minutes:seconds.millis.

Invariants:
    - The trailing field is the TOTAL millisecond count, not millis % 1000
    - No zero padding: 1500 ms renders as "0:0:1.1500"
"""

MILLIS_PER_SECOND = 1_000
MILLIS_PER_MINUTE = 60_000
MILLIS_PER_HOUR = 3_600_000


def decompose_millis(millis: int) -> dict:
    """Split a millisecond count into display fields. Pure, no IO."""
    return {
        "hours": millis // MILLIS_PER_HOUR,
        "minutes": (millis // MILLIS_PER_MINUTE) % 60,
        "seconds": (millis // MILLIS_PER_SECOND) % 60,
        "milliseconds": millis,
    }


def format_elapsed(millis: int) -> str:
    fields = decompose_millis(millis)
    return (
        f"{fields['hours']}:{fields['minutes']}:"
        f"{fields['seconds']}.{fields['milliseconds']}"
    )
