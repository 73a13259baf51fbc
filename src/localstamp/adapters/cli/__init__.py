"""rich-click front end for localstamp.

``main`` is what entry points call; ``cli`` is the group itself, handy for
``CliRunner``.
"""

from __future__ import annotations

from .commands import cli_config, cli_info, cli_now
from .context import CLIContext, TracebackSettings, get_cli_context
from .exit_codes import ExitCode
from .main import main
from .root import cli

__all__ = [
    "CLIContext",
    "ExitCode",
    "TracebackSettings",
    "cli",
    "cli_config",
    "cli_info",
    "cli_now",
    "get_cli_context",
    "main",
]
