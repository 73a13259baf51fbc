"""localstamp: the current local date and time as ``YYYY-MM-DD HH:MM:SS``.

``get_local_datetime_string()`` reads the host clock and time zone;
``format_local_datetime(instant, offset)`` is the pure formatter behind it.
"""

from __future__ import annotations

from .__init__conf__ import print_info
from .composition import get_config, get_local_datetime_string, read_system_clock
from .domain.behaviors import ClockReading, format_local_datetime

__all__ = [
    "ClockReading",
    "format_local_datetime",
    "get_config",
    "get_local_datetime_string",
    "print_info",
    "read_system_clock",
]
