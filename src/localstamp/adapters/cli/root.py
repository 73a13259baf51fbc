"""The ``localstamp`` group: global flags, config loading and subcommands."""

from __future__ import annotations

from typing import TYPE_CHECKING

import rich_click as click
from lib_layered_config import Config

from localstamp import __init__conf__
from localstamp.adapters.config.overrides import apply_overrides
from localstamp.domain.errors import ConfigurationError

from .commands import cli_config, cli_info, cli_now
from .commands._shared import exit_with_error
from .constants import HELP_SETTINGS
from .context import CLIContext, TracebackSettings
from .exit_codes import ExitCode

if TYPE_CHECKING:
    from localstamp.composition import AppServices


def _prepare(services: AppServices, profile: str | None, overrides: tuple[str, ...]) -> Config:
    """Load config for *profile*, layer ``--set`` values on top and start logging."""
    try:
        config = services.get_config(profile=profile)
    except ValueError as exc:
        raise click.BadParameter(str(exc), param_hint="'--profile'") from exc
    try:
        config = apply_overrides(config, overrides)
    except (TypeError, ValueError) as exc:
        raise click.UsageError(str(exc)) from exc
    try:
        services.init_logging(config)
    except ConfigurationError as exc:
        exit_with_error(str(exc), ExitCode.CONFIG_ERROR)
    return config


@click.group(help=__init__conf__.title, context_settings=HELP_SETTINGS, invoke_without_command=True)
@click.version_option(
    version=__init__conf__.version,
    prog_name=__init__conf__.shell_command,
    message=f"{__init__conf__.shell_command} version {__init__conf__.version}",
)
@click.option("--traceback/--no-traceback", default=False, help="Show the full Python traceback on errors")
@click.option("--profile", default=None, help="Configuration profile to load, e.g. 'test'")
@click.option(
    "--set",
    "overrides",
    multiple=True,
    metavar="SECTION.KEY=VALUE",
    help="Override one setting for this run, e.g. localstamp.offset_minutes=540 (repeatable)",
)
@click.pass_context
def cli(ctx: click.Context, traceback: bool, profile: str | None, overrides: tuple[str, ...]) -> None:
    if not callable(ctx.obj):
        raise RuntimeError("localstamp CLI started without a services factory on ctx.obj")
    services: AppServices = ctx.obj()
    TracebackSettings.from_flag(traceback).install()
    ctx.obj = CLIContext(config=_prepare(services, profile, overrides), services=services, profile=profile)

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


for _command in (cli_now, cli_info, cli_config):
    cli.add_command(_command)


__all__ = ["cli"]
