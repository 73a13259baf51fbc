"""Wiring: which adapter answers each application port.

``build_production`` is used by the entry points; ``build_testing`` swaps in
the in-memory adapters so CLI tests never touch the host clock or disk.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..adapters.clock.system import get_local_datetime_string, read_system_clock
from ..adapters.config.display import display_config
from ..adapters.config.loader import get_config
from ..adapters.logging.setup import init_logging
from ..application.ports import DisplayConfig, GetConfig, InitLogging, ReadClock

if TYPE_CHECKING:
    from ..adapters.memory.clock import FixedClock


@dataclass(frozen=True, slots=True)
class AppServices:
    """One implementation per port, handed to the CLI through ``ctx.obj``."""

    read_clock: ReadClock
    get_config: GetConfig
    display_config: DisplayConfig
    init_logging: InitLogging


def build_production() -> AppServices:
    """Host clock, layered config files, Rich display and lib_log_rich."""
    return AppServices(
        read_clock=read_system_clock,
        get_config=get_config,
        display_config=display_config,
        init_logging=init_logging,
    )


def build_testing(*, clock: FixedClock | None = None) -> AppServices:
    """In-memory services around *clock*.

    Without a *clock* a new ``FixedClock`` reports 2023-01-01T00:30:00Z at
    +09:00. Pass your own to inspect the instants it was asked for.
    """
    from ..adapters.memory import (
        FixedClock,
        display_config_in_memory,
        get_config_in_memory,
        init_logging_in_memory,
    )

    return AppServices(
        read_clock=clock if clock is not None else FixedClock(),
        get_config=get_config_in_memory,
        display_config=display_config_in_memory,
        init_logging=init_logging_in_memory,
    )


__all__ = [
    "AppServices",
    "build_production",
    "build_testing",
    "get_config",
    "get_local_datetime_string",
    "read_system_clock",
]
