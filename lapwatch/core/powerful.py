"""Powerful Numbers — naive trial-division test for OEIS A001694.

A positive integer is powerful when every prime factor divides it at least
squared. 1 is powerful (no prime factors).

Invariants:
    - Pure function: no IO, no state
    - 0, negatives and non-integers raise InvalidInputError, never return a bool
    - A factor found with exponent exactly 1 ends the search immediately

Design Decisions:
    - Divisors 2 and 3 first, then pairs d, d + 2 for d = 5, 11, 17, ...
      (every prime above 3 is 6k - 1 or 6k + 1)
    - Search stops at the square root of what remains; a leftover > 1 is a
      prime with exponent 1
"""

from lapwatch.core.errors import InvalidInputError


def is_powerful(number: int) -> bool:
    """Return True if `number` is powerful. Slow for very large inputs."""
    if isinstance(number, bool) or not isinstance(number, int):
        raise InvalidInputError(
            f"Expected an integer, got {type(number).__name__}.", "number", number,
        )
    if number < 0:
        raise InvalidInputError("Number must not be negative.", "number", number)
    if number == 0:
        raise InvalidInputError("Zero is not a valid input.", "number", number)

    number, exponent = _strip_factor(number, 2)
    if exponent == 1:
        return False

    number, exponent = _strip_factor(number, 3)
    if exponent == 1:
        return False

    divisor = 5
    while divisor * divisor <= number:
        for candidate in (divisor, divisor + 2):
            number, exponent = _strip_factor(number, candidate)
            if exponent == 1:
                return False
        divisor += 6

    return number == 1


def _strip_factor(number: int, divisor: int) -> tuple[int, int]:
    """Divide out `divisor` completely. Returns (remaining, exponent)."""
    exponent = 0
    while number % divisor == 0:
        number //= divisor
        exponent += 1
    return number, exponent
