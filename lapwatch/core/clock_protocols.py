"""Boundary Protocols — contracts between core and the time source.

Invariants:
    - Core NEVER imports a concrete clock at module level; dependency arrows point inward only
    - now() returns a non-decreasing integer nanosecond Instant
    - Implementations provided by infrastructure (real) or tests (fake) via injection

Design Decisions:
    - Protocol over ABC: structural subtyping, any object with now() qualifies
"""

from typing import Protocol

from lapwatch.core.domain_types import Instant


class MonotonicClock(Protocol):
    """Contract for a monotonic time source — implemented by infrastructure."""
    def now(self) -> Instant: ...
