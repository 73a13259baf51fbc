"""Stand-ins for every port: a fixed clock, an empty config, silent logging.

Used by ``composition.build_testing``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .clock import FIXED_INSTANT, FIXED_OFFSET, FixedClock, read_clock_in_memory
from .config import display_config_in_memory, get_config_in_memory
from .logging import init_logging_in_memory

if TYPE_CHECKING:
    from localstamp.application.ports import DisplayConfig, GetConfig, InitLogging, ReadClock

    _clock_port: ReadClock = FixedClock()
    _clock_function_port: ReadClock = read_clock_in_memory
    _config_port: GetConfig = get_config_in_memory
    _display_port: DisplayConfig = display_config_in_memory
    _logging_port: InitLogging = init_logging_in_memory

__all__ = [
    "FIXED_INSTANT",
    "FIXED_OFFSET",
    "FixedClock",
    "display_config_in_memory",
    "get_config_in_memory",
    "init_logging_in_memory",
    "read_clock_in_memory",
]
