"""Shared helpers for CLI command modules.

Contents:
    * :func:`log_scope` - Bind lib_log_rich context when logging is live.
    * :func:`exit_with_error` - Print an error and exit with an ExitCode.
"""

from __future__ import annotations

import contextlib
from collections.abc import Mapping
from contextlib import AbstractContextManager
from typing import Any, NoReturn

import lib_log_rich.runtime
import rich_click as click

from ..exit_codes import ExitCode


def log_scope(job_id: str, extra: Mapping[str, Any]) -> AbstractContextManager[Any]:
    """Return ``lib_log_rich.runtime.bind(...)``, or a null context before init.

    In-memory services skip logging initialization, so binding would have
    no runtime to attach to.
    """
    if lib_log_rich.runtime.is_initialised():
        return lib_log_rich.runtime.bind(job_id=job_id, extra=dict(extra))
    return contextlib.nullcontext()


def exit_with_error(message: str, code: ExitCode) -> NoReturn:
    """Echo *message* to stderr and raise ``SystemExit(code)``."""
    click.echo(f"Error: {message}", err=True)
    raise SystemExit(code)


__all__ = ["exit_with_error", "log_scope"]
