"""Duration Conversion — integer nanosecond arithmetic between time units.

Invariants:
    - All arithmetic is integer; no float ever touches a duration
    - Conversion truncates toward zero, for negative durations as well
    - parse_time_unit raises InvalidInputError, never returns None

Design Decisions:
    - Pure functions over methods on TimeUnit: the enum stays a plain value type
"""

from lapwatch.core.domain_types import (
    NANOS_PER_UNIT, UNIT_ABBREVIATIONS, TimeUnit,
)
from lapwatch.core.errors import InvalidInputError


def convert_nanos(nanos: int, unit: TimeUnit) -> int:
    """Convert a nanosecond count to `unit`, truncating toward zero."""
    per_unit = NANOS_PER_UNIT[unit]
    # floor division rounds toward -inf; mirror it for negatives
    if nanos < 0:
        return -(-nanos // per_unit)
    return nanos // per_unit


def parse_time_unit(text: str | TimeUnit) -> TimeUnit:
    """Resolve a unit from its value, member name, or short abbreviation.

    Accepts "milliseconds", "MILLISECONDS" and "ms" alike.
    """
    if isinstance(text, TimeUnit):
        return text

    key = text.strip()
    if key in UNIT_ABBREVIATIONS:
        return UNIT_ABBREVIATIONS[key]

    lowered = key.lower()
    for unit in TimeUnit:
        if lowered == unit.value:
            return unit

    raise InvalidInputError(f"Unknown time unit: {text!r}", "time_unit", text)
