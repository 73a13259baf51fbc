"""Ports: the callables localstamp needs from the outside world.

Each port is a callable ``Protocol`` so plain adapter functions, and the
``FixedClock`` instance, satisfy it structurally. ``Config`` is only
imported for type checking; this layer has no runtime dependency on
lib_layered_config.
"""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Protocol

from ..domain.behaviors import ClockReading
from ..domain.enums import OutputFormat

if TYPE_CHECKING:
    from lib_layered_config import Config


class ReadClock(Protocol):
    """Read the current instant, or the given one, together with the local UTC offset."""

    def __call__(self, instant: datetime | None = ...) -> ClockReading: ...


class GetConfig(Protocol):
    """Load layered configuration with application defaults."""

    def __call__(self, *, profile: str | None = ..., start_dir: str | None = ...) -> Config: ...


class DisplayConfig(Protocol):
    """Display the provided configuration in the requested format."""

    def __call__(
        self, config: Config, *, output_format: OutputFormat = ..., section: str | None = ..., profile: str | None = ...
    ) -> None: ...


class InitLogging(Protocol):
    """Initialize lib_log_rich runtime with the provided configuration."""

    def __call__(self, config: Config) -> None: ...


__all__ = [
    "DisplayConfig",
    "GetConfig",
    "InitLogging",
    "ReadClock",
]
