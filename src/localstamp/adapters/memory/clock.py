"""In-memory clock adapter for testing.

Returns a fixed reading instead of touching the host clock or time zone.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone

from ...domain.behaviors import ClockReading

#: 2023-01-01T00:30:00Z, the reference instant used across the test suite.
FIXED_INSTANT = datetime(2023, 1, 1, 0, 30, tzinfo=timezone.utc)
#: +09:00, so the reference reading renders as ``2023-01-01 09:30:00``.
FIXED_OFFSET = timedelta(hours=9)


@dataclass
class FixedClock:
    """Clock double that always reports the same instant and offset.

    Every call is recorded so tests can assert on what was asked for.

    Example:
        >>> clock = FixedClock()
        >>> clock().format()
        '2023-01-01 09:30:00'
        >>> clock(datetime(2023, 1, 1, 23, 30, tzinfo=timezone.utc)).format()
        '2023-01-02 08:30:00'
        >>> len(clock.calls)
        2
    """

    instant: datetime = FIXED_INSTANT
    offset: timedelta = FIXED_OFFSET
    calls: list[datetime | None] = field(default_factory=list)

    def __call__(self, instant: datetime | None = None) -> ClockReading:
        self.calls.append(instant)
        return ClockReading(instant=instant if instant is not None else self.instant, offset=self.offset)


def read_clock_in_memory(instant: datetime | None = None) -> ClockReading:
    """Return the reference reading, optionally at a different instant."""
    return ClockReading(instant=instant if instant is not None else FIXED_INSTANT, offset=FIXED_OFFSET)


__all__ = [
    "FIXED_INSTANT",
    "FIXED_OFFSET",
    "FixedClock",
    "read_clock_in_memory",
]
