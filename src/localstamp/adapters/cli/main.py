"""Run the ``localstamp`` group and turn its outcome into a process exit code.

Shared by the console script and ``python -m localstamp``.
"""

from __future__ import annotations

import sys
import threading
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING

import click
import lib_cli_exit_tools
import lib_log_rich.runtime

from localstamp import __init__conf__

from .constants import TRACEBACK_LIMITS
from .context import TracebackSettings
from .exit_codes import ExitCode

if TYPE_CHECKING:
    from localstamp.composition import AppServices


def _report_unexpected(exc: BaseException) -> int:
    """Print *exc* the way ``--traceback`` asks for and return its exit code."""
    verbose = TracebackSettings.current().enabled
    TracebackSettings.from_flag(verbose).install()
    lib_cli_exit_tools.print_exception_message(trace_back=verbose, length_limit=TRACEBACK_LIMITS[verbose])
    return lib_cli_exit_tools.get_system_exit_code(exc)


def _stop_logging() -> None:
    # Only the main thread may tear the runtime down; workers share it.
    if threading.current_thread() is threading.main_thread() and lib_log_rich.runtime.is_initialised():
        lib_log_rich.runtime.shutdown()


def main(
    argv: Sequence[str] | None = None,
    *,
    restore_traceback: bool = True,
    services_factory: Callable[[], AppServices] | None = None,
) -> int:
    """Run the CLI with *argv* (default ``sys.argv[1:]``) and return the exit code.

    Click runs in non-standalone mode with *services_factory* on ``obj``.
    Usage errors print usage, ``exit_with_error`` codes pass through, and
    any other exception goes to ``lib_cli_exit_tools``.

    Raises:
        ValueError: Without a *services_factory*.
    """
    if services_factory is None:
        raise ValueError("main() needs a services_factory, e.g. composition.build_production")

    from .root import cli

    saved = TracebackSettings.current()
    try:
        try:
            outcome = cli.main(
                args=list(argv) if argv is not None else sys.argv[1:],
                prog_name=__init__conf__.shell_command,
                obj=services_factory,
                standalone_mode=False,
            )
        except click.ClickException as exc:
            exc.show()
            return exc.exit_code
        except click.exceptions.Exit as exc:
            return exc.exit_code
        except SystemExit as exc:
            if exc.code is None:
                return ExitCode.SUCCESS
            return exc.code if isinstance(exc.code, int) else ExitCode.GENERAL_ERROR
        except BaseException as exc:  # noqa: BLE001
            return _report_unexpected(exc)
        return outcome if isinstance(outcome, int) else ExitCode.SUCCESS
    finally:
        if restore_traceback:
            saved.install()
        _stop_logging()


__all__ = ["main"]
