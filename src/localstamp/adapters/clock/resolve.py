"""Combine a clock port with injected instant and offset overrides."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from localstamp.domain.behaviors import ClockReading, offset_from_minutes

if TYPE_CHECKING:
    from localstamp.application.ports import ReadClock


def resolve_clock_reading(
    read_clock: ReadClock,
    *,
    instant: datetime | None = None,
    offset_minutes: int | None = None,
) -> ClockReading:
    """Return the reading to format, honouring any injected instant or offset.

    Without a fixed offset the clock supplies the offset for the chosen
    instant, so a historical ``instant`` gets the offset that was in effect
    then. With a fixed offset the clock is only consulted for "now".

    Args:
        read_clock: Clock port (system or in-memory).
        instant: Optional instant to format instead of "now".
        offset_minutes: Optional fixed offset in minutes east of UTC.

    Raises:
        InvalidOffsetError: If *offset_minutes* is out of range.

    Example:
        >>> from localstamp.adapters.memory import read_clock_in_memory
        >>> resolve_clock_reading(read_clock_in_memory, offset_minutes=-300).format()
        '2022-12-31 19:30:00'
    """
    if offset_minutes is None:
        return read_clock(instant)
    offset = offset_from_minutes(offset_minutes)
    if instant is None:
        instant = read_clock().instant
    return ClockReading(instant=instant, offset=offset)


__all__ = ["resolve_clock_reading"]
