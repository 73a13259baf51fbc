"""Clock adapter - system clock access and the ``[localstamp]`` settings.

Contents:
    * :func:`.system.read_system_clock` - Read (instant, offset) from the host
    * :func:`.system.get_local_datetime_string` - Wired local datetime string
    * :func:`.settings.load_stamp_settings` - Typed ``[localstamp]`` section
    * :func:`.resolve.resolve_clock_reading` - Apply injected instant/offset
"""

from __future__ import annotations

from .resolve import resolve_clock_reading
from .settings import StampSettings, load_stamp_settings
from .system import get_local_datetime_string, host_offset_at, read_system_clock

__all__ = [
    "StampSettings",
    "get_local_datetime_string",
    "host_offset_at",
    "load_stamp_settings",
    "read_system_clock",
    "resolve_clock_reading",
]
