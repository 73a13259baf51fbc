"""The ``config`` command: show the merged configuration the run will use."""

from __future__ import annotations

import logging

import rich_click as click

from localstamp.domain.enums import OutputFormat

from ..constants import HELP_SETTINGS
from ..context import get_cli_context
from ..exit_codes import ExitCode
from ._shared import exit_with_error, log_scope

logger = logging.getLogger(__name__)


@click.command("config", context_settings=HELP_SETTINGS)
@click.option(
    "--format",
    "output_format",
    type=click.Choice([f.value for f in OutputFormat], case_sensitive=False),
    default=OutputFormat.HUMAN.value,
    help="human (TOML-like, with sources) or json",
)
@click.option("--section", default=None, help="Only this section, e.g. 'localstamp'")
@click.pass_context
def cli_config(ctx: click.Context, output_format: str, section: str | None) -> None:
    """Show the configuration after every layer and --set override.

    Layers, later wins: defaults, app, host, user, .env, environment.
    Use the global --profile to look at another profile.
    """
    cli_ctx = get_cli_context(ctx)
    fmt = OutputFormat(output_format.lower())

    with log_scope("cli-config", {"command": "config", "format": fmt.value, "profile": cli_ctx.profile}):
        logger.info("Showing configuration", extra={"section": section, "profile": cli_ctx.profile})
        try:
            cli_ctx.services.display_config(cli_ctx.config, output_format=fmt, section=section, profile=cli_ctx.profile)
        except ValueError as exc:
            exit_with_error(str(exc), ExitCode.INVALID_ARGUMENT)


__all__ = ["cli_config"]
