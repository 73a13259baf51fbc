"""Pure formatting of a local timestamp, plus the offset and instant helpers it needs."""

from __future__ import annotations

from .behaviors import (
    LOCAL_DATETIME_FORMAT_PATTERN,
    MAX_OFFSET_MINUTES,
    ClockReading,
    as_utc,
    format_local_datetime,
    offset_from_minutes,
    offset_to_minutes,
    parse_instant,
)
from .enums import OutputFormat
from .errors import ConfigurationError, InvalidInstantError, InvalidOffsetError

__all__ = [
    "LOCAL_DATETIME_FORMAT_PATTERN",
    "MAX_OFFSET_MINUTES",
    "ClockReading",
    "ConfigurationError",
    "InvalidInstantError",
    "InvalidOffsetError",
    "OutputFormat",
    "as_utc",
    "format_local_datetime",
    "offset_from_minutes",
    "offset_to_minutes",
    "parse_instant",
]
