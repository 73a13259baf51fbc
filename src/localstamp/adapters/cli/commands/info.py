"""The ``info`` command: print installed package metadata."""

from __future__ import annotations

import logging

import rich_click as click

from localstamp import __init__conf__

from ..constants import HELP_SETTINGS
from ._shared import log_scope

logger = logging.getLogger(__name__)


@click.command("info", context_settings=HELP_SETTINGS)
def cli_info() -> None:
    """Print name, version, homepage and author of the installed package.

    Example:
        >>> from click.testing import CliRunner
        >>> CliRunner().invoke(cli_info).exit_code
        0
    """
    with log_scope("cli-info", {"command": "info"}):
        logger.info("Printing package metadata")
        __init__conf__.print_info()


__all__ = ["cli_info"]
