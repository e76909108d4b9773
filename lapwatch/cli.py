"""Command-line interface for lapwatch (Click-based).

Invariants:
    - stdout carries only the command result ("1" or "0")
    - Every rejected input exits with status 1 and a distinct message on stderr
    - Usage errors (wrong argument count, unknown option) exit with status 2
    - LapwatchError never escapes as a traceback; it is logged and reported

Design Decisions:
    - Logging configured in the group callback so every subcommand inherits it
    - The check is always timed with Stopwatch; --timing only decides whether
      the reading is printed
"""

from __future__ import annotations

import logging

import click

from lapwatch.config import LOG_FORMATS, LOG_LEVELS, get_settings
from lapwatch.core.convert_duration import parse_time_unit
from lapwatch.core.errors import LapwatchError
from lapwatch.core.powerful import is_powerful
from lapwatch.core.stopwatch import Stopwatch
from lapwatch.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)

NOT_AN_INTEGER = "The number specified is not a valid integer."
NOT_POSITIVE = "The number specified should be positive."
TOO_LARGE = "The number specified is too large."


@click.group(help="Stopwatch and powerful-number utilities")
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default=None,
    help="Override LAPWATCH_LOG_LEVEL",
)
@click.option(
    "--log-format",
    type=click.Choice(LOG_FORMATS, case_sensitive=False),
    default=None,
    help="Override LAPWATCH_LOG_FORMAT",
)
def cli(log_level: str | None, log_format: str | None) -> None:
    """Top-level CLI group."""
    settings = get_settings()
    setup_logging(
        log_level or settings.log_level,
        (log_format or settings.log_format).lower(),
    )


@cli.command(
    "powerful",
    help="Print 1 if NUMBER is powerful, 0 otherwise",
    # lets "-5" reach the argument instead of failing as an unknown option.
    # A mistyped long option reaches it too: "--timming 4" is then an extra
    # argument (usage error) and a lone "--timming" fails as not an integer.
    context_settings={"ignore_unknown_options": True},
)
@click.argument("number")
@click.option("--timing", is_flag=True, help="Report how long the check took on stderr")
@click.option(
    "--unit",
    default=None,
    help="Unit for --timing (ns, us, ms, s, m, h, d or full name)",
)
def powerful(number: str, timing: bool, unit: str | None) -> None:
    """Test NUMBER for powerfulness."""
    settings = get_settings()
    value = parse_number(number, settings.max_number)

    try:
        time_unit = parse_time_unit(unit) if unit else settings.default_time_unit
        with Stopwatch() as stopwatch:
            result = is_powerful(value)
    except LapwatchError as exc:
        logger.warning(
            exc.message,
            extra={"error_code": exc.code, "number": number, **exc.to_dict()},
        )
        raise click.ClickException(exc.message) from exc

    logger.debug(
        f"Checked {value}: powerful={result}",
        extra={"number": value, "elapsed_ms": stopwatch.elapsed()},
    )
    click.echo("1" if result else "0")

    if timing:
        click.echo(
            f"elapsed: {stopwatch} "
            f"({stopwatch.elapsed(time_unit)} {time_unit.value})",
            err=True,
        )


def parse_number(text: str, max_number: int) -> int:
    """Parse a CLI integer with base auto-detection (0x, 0o, 0b prefixes).

    Digit-group underscores ("1_000") are refused.
    Raises click.ClickException with a message per failure kind.
    """
    try:
        if "_" in text:
            raise ValueError(text)
        value = int(text.strip(), 0)
    except ValueError:
        logger.warning(NOT_AN_INTEGER, extra={"error_code": "NOT_AN_INTEGER", "number": text})
        raise click.ClickException(NOT_AN_INTEGER) from None

    if value < 0:
        logger.warning(NOT_POSITIVE, extra={"error_code": "NEGATIVE", "number": text})
        raise click.ClickException(NOT_POSITIVE)
    if value > max_number:
        logger.warning(TOO_LARGE, extra={"error_code": "OUT_OF_RANGE", "number": text})
        raise click.ClickException(TOO_LARGE)
    return value


def main() -> None:
    """CLI entry point for console scripts."""
    cli()


__all__ = ["cli", "main", "parse_number"]
