"""System clock adapter - reads the host clock and local UTC offset.

This is the only place that touches host time state. Everything downstream
receives a :class:`~localstamp.domain.behaviors.ClockReading`.
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone
from typing import cast

from localstamp.domain.behaviors import ClockReading, as_utc

logger = logging.getLogger(__name__)


def host_offset_at(instant: datetime) -> timedelta:
    """Return the host's local UTC offset in effect at *instant*.

    Naive instants are UTC, the same reading the formatter gives them.
    ``TZ`` and daylight saving rules come from the platform's local time
    conversion.

    Example:
        >>> isinstance(host_offset_at(datetime.now(timezone.utc)), timedelta)
        True
    """
    return cast(timedelta, as_utc(instant).astimezone().utcoffset())


def read_system_clock(instant: datetime | None = None) -> ClockReading:
    """Read the system clock, or look up the host offset for *instant*.

    Args:
        instant: Optional point in time to use instead of "now". Naive
            values are UTC. The local offset still comes from the host.

    Returns:
        Consistent (instant, offset) pair with an aware UTC instant.
    """
    current = as_utc(instant) if instant is not None else datetime.now(timezone.utc)
    reading = ClockReading(instant=current, offset=host_offset_at(current))
    logger.debug("Read clock", extra={"instant": reading.instant.isoformat(), "offset_minutes": reading.offset_minutes})
    return reading


def get_local_datetime_string() -> str:
    """Return the current local date and time as ``YYYY-MM-DD HH:MM:SS``.

    Example:
        >>> from localstamp.domain.behaviors import LOCAL_DATETIME_FORMAT_PATTERN
        >>> bool(LOCAL_DATETIME_FORMAT_PATTERN.match(get_local_datetime_string()))
        True
    """
    return read_system_clock().format()


__all__ = [
    "get_local_datetime_string",
    "host_offset_at",
    "read_system_clock",
]
