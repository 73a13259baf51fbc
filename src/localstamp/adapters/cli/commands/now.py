"""The ``now`` command: print the local date and time.

Contents:
    * :func:`cli_now` - Print ``YYYY-MM-DD HH:MM:SS`` for now or an injected instant.
"""

from __future__ import annotations

import logging

import orjson
import rich_click as click

from localstamp.adapters.clock.resolve import resolve_clock_reading
from localstamp.adapters.clock.settings import load_stamp_settings
from localstamp.domain.behaviors import ClockReading, parse_instant
from localstamp.domain.enums import OutputFormat
from localstamp.domain.errors import ConfigurationError, InvalidInstantError, InvalidOffsetError

from ..constants import HELP_SETTINGS
from ..context import get_cli_context
from ..exit_codes import ExitCode
from ._shared import exit_with_error, log_scope

logger = logging.getLogger(__name__)


def render_reading(reading: ClockReading, output_format: OutputFormat) -> str:
    """Render *reading* for terminal output.

    Example:
        >>> from datetime import datetime, timedelta, timezone
        >>> reading = ClockReading(datetime(2023, 1, 1, 23, 30, tzinfo=timezone.utc), timedelta(hours=9))
        >>> render_reading(reading, OutputFormat.HUMAN)
        '2023-01-02 08:30:00'
        >>> print(render_reading(reading, OutputFormat.JSON))
        {
          "local": "2023-01-02 08:30:00",
          "instant": "2023-01-01T23:30:00+00:00",
          "offset_minutes": 540
        }
    """
    if output_format is OutputFormat.JSON:
        payload = {
            "local": reading.format(),
            "instant": reading.instant.isoformat(),
            "offset_minutes": reading.offset_minutes,
        }
        return orjson.dumps(payload, option=orjson.OPT_INDENT_2).decode()
    return reading.format()


@click.command("now", context_settings=HELP_SETTINGS)
@click.option(
    "--at",
    "at",
    type=str,
    default=None,
    metavar="ISO8601",
    help="Format this instant instead of the current time (e.g. 2023-01-01T00:30:00Z)",
)
@click.option(
    "--offset",
    "offset_minutes",
    type=int,
    default=None,
    metavar="MINUTES",
    help="Local offset in minutes east of UTC (e.g. 540, -300); overrides config and host",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice([f.value for f in OutputFormat], case_sensitive=False),
    default=OutputFormat.HUMAN.value,
    help="Output format (bare timestamp or JSON)",
)
@click.pass_context
def cli_now(ctx: click.Context, at: str | None, offset_minutes: int | None, output_format: str) -> None:
    """Print the local date and time as YYYY-MM-DD HH:MM:SS.

    The offset comes from --offset, then [localstamp].offset_minutes, then
    the host time zone.
    """
    cli_ctx = get_cli_context(ctx)
    fmt = OutputFormat(output_format.lower())

    with log_scope("cli-now", {"command": "now", "format": fmt.value}):
        try:
            instant = parse_instant(at) if at is not None else None
        except InvalidInstantError as exc:
            exit_with_error(str(exc), ExitCode.INVALID_ARGUMENT)

        if offset_minutes is None:
            try:
                offset_minutes = load_stamp_settings(cli_ctx.config).offset_minutes
            except ConfigurationError as exc:
                exit_with_error(str(exc), ExitCode.CONFIG_ERROR)

        try:
            reading = resolve_clock_reading(cli_ctx.services.read_clock, instant=instant, offset_minutes=offset_minutes)
        except InvalidOffsetError as exc:
            exit_with_error(str(exc), ExitCode.INVALID_ARGUMENT)

        logger.info(
            "Formatting local datetime",
            extra={"instant": reading.instant.isoformat(), "offset_minutes": reading.offset_minutes},
        )
        click.echo(render_reading(reading, fmt))


__all__ = ["cli_now", "render_reading"]
