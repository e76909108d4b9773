"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - Instant and Nanos are integer nanosecond counts, never floats
    - Instant is an opaque monotonic reading; only differences between Instants mean anything
    - All valid states and units encoded as Enums; no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON and log records without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Value Types ─────────────────────────────────────────────────

Instant = NewType("Instant", int)   # monotonic clock reading, ns
Nanos = NewType("Nanos", int)       # duration, ns


# ─── Enums ───────────────────────────────────────────────────────

class StopwatchState(str, Enum):
    """Stopwatch lifecycle states. READY is initial; none is terminal."""
    READY = "ready"
    RUNNING = "running"
    STOPPED = "stopped"
    SUSPENDED = "suspended"


class TimeUnit(str, Enum):
    """Units an elapsed reading can be expressed in."""
    NANOSECONDS = "nanoseconds"
    MICROSECONDS = "microseconds"
    MILLISECONDS = "milliseconds"
    SECONDS = "seconds"
    MINUTES = "minutes"
    HOURS = "hours"
    DAYS = "days"


# ─── Constants ───────────────────────────────────────────────────

NANOS_PER_UNIT: dict[TimeUnit, int] = {
    TimeUnit.NANOSECONDS: 1,
    TimeUnit.MICROSECONDS: 1_000,
    TimeUnit.MILLISECONDS: 1_000_000,
    TimeUnit.SECONDS: 1_000_000_000,
    TimeUnit.MINUTES: 60 * 1_000_000_000,
    TimeUnit.HOURS: 3_600 * 1_000_000_000,
    TimeUnit.DAYS: 86_400 * 1_000_000_000,
}

UNIT_ABBREVIATIONS: dict[str, TimeUnit] = {
    "ns": TimeUnit.NANOSECONDS,
    "us": TimeUnit.MICROSECONDS,
    "ms": TimeUnit.MILLISECONDS,
    "s": TimeUnit.SECONDS,
    "m": TimeUnit.MINUTES,
    "h": TimeUnit.HOURS,
    "d": TimeUnit.DAYS,
}
