"""State shared between the root group, its subcommands and ``main``.

``ctx.obj`` arrives as the services factory and leaves the root group as a
:class:`CLIContext`. The ``--traceback`` flag lives in
``lib_cli_exit_tools.config`` because that is what renders failures;
:class:`TracebackSettings` captures and reinstalls it around a run.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

import lib_cli_exit_tools
import rich_click as click
from lib_layered_config import Config

if TYPE_CHECKING:
    from localstamp.composition import AppServices


@dataclass(frozen=True, slots=True)
class CLIContext:
    """Loaded config, wired services and the profile they were loaded for."""

    config: Config
    services: AppServices
    profile: str | None = None


def get_cli_context(ctx: click.Context) -> CLIContext:
    """Return the :class:`CLIContext` the root group left on *ctx*.

    Raises:
        RuntimeError: When a subcommand runs without the root group.
    """
    if not isinstance(ctx.obj, CLIContext):
        raise RuntimeError("localstamp subcommands must be invoked through the root group")
    return ctx.obj


@dataclass(frozen=True, slots=True)
class TracebackSettings:
    """The two ``lib_cli_exit_tools.config`` flags driven by ``--traceback``.

    Example:
        >>> saved = TracebackSettings.current()
        >>> TracebackSettings.from_flag(True).install()
        >>> TracebackSettings.current()
        TracebackSettings(enabled=True, force_color=True)
        >>> saved.install()
    """

    enabled: bool
    force_color: bool

    @classmethod
    def current(cls) -> TracebackSettings:
        cfg = lib_cli_exit_tools.config
        return cls(bool(getattr(cfg, "traceback", False)), bool(getattr(cfg, "traceback_force_color", False)))

    @classmethod
    def from_flag(cls, enabled: bool) -> TracebackSettings:
        return cls(bool(enabled), bool(enabled))

    def install(self) -> None:
        lib_cli_exit_tools.config.traceback = self.enabled
        lib_cli_exit_tools.config.traceback_force_color = self.force_color


__all__ = ["CLIContext", "TracebackSettings", "get_cli_context"]
