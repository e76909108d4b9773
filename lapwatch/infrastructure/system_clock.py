"""System Clock — MonotonicClock backed by the OS monotonic timer.

Invariants:
    - Readings never go backwards and are unaffected by wall-clock adjustments
    - Integer nanoseconds end to end (no float seconds)

Design Decisions:
    - time.monotonic_ns over time.time: wall-clock time jumps with NTP and DST
      and has coarse resolution on some platforms
"""

import time

from lapwatch.core.domain_types import Instant


class SystemClock:
    """Process-wide monotonic clock."""

    def now(self) -> Instant:
        return Instant(time.monotonic_ns())
