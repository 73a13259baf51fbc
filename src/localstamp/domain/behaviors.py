"""Pure domain functions with no I/O or framework dependencies.

The local datetime string is derived from two inputs: an instant and the
offset between local time and UTC at that instant. Both are passed in so the
formatter never reads host state itself.

Contents:
    * :class:`ClockReading` - One consistent read of (instant, offset).
    * :func:`format_local_datetime` - Render ``YYYY-MM-DD HH:MM:SS`` local time.
    * :func:`offset_from_minutes` / :func:`offset_to_minutes` - Offset conversion.
    * :func:`parse_instant` - ISO 8601 parsing for injected instants.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Final

from .errors import InvalidInstantError, InvalidOffsetError

#: Matches every string produced by :func:`format_local_datetime`.
LOCAL_DATETIME_FORMAT_PATTERN: Final[re.Pattern[str]] = re.compile(r"^\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}$")

#: Offsets must stay strictly inside one day in either direction.
MAX_OFFSET_MINUTES: Final[int] = 24 * 60 - 1


def as_utc(instant: datetime) -> datetime:
    """Return *instant* as an aware UTC datetime; naive values are taken as UTC.

    Examples:
        >>> as_utc(datetime(2023, 3, 12, 6, 30))
        datetime.datetime(2023, 3, 12, 6, 30, tzinfo=datetime.timezone.utc)
        >>> as_utc(datetime(2023, 3, 12, 1, 30, tzinfo=timezone(timedelta(hours=-5)))).hour
        6
    """
    if instant.tzinfo is None or instant.utcoffset() is None:
        return instant.replace(tzinfo=timezone.utc)
    return instant.astimezone(timezone.utc)


def format_local_datetime(instant: datetime, offset: timedelta) -> str:
    r"""Render *instant* shifted by *offset* as ``YYYY-MM-DD HH:MM:SS``.

    The UTC instant is shifted by the offset and the resulting fields are
    written out as if they were UTC, so no timezone suffix appears. Every
    field is zero-padded explicitly; sub-second precision is dropped.

    Args:
        instant: Point in time. Aware values are converted to UTC first,
            naive values are interpreted as UTC.
        offset: Local time minus UTC (positive east of Greenwich).

    Returns:
        Local wall-clock time as a fixed-width string.

    Raises:
        OverflowError: If the shifted value leaves the ``datetime`` range.

    Examples:
        >>> format_local_datetime(datetime(2023, 1, 1, 0, 30, tzinfo=timezone.utc), timedelta(hours=9))
        '2023-01-01 09:30:00'
        >>> format_local_datetime(datetime(2023, 1, 1, 23, 30, tzinfo=timezone.utc), timedelta(hours=9))
        '2023-01-02 08:30:00'
        >>> format_local_datetime(datetime(2023, 1, 1, 23, 30, tzinfo=timezone.utc), timedelta(hours=-5))
        '2023-01-01 18:30:00'
    """
    shifted = as_utc(instant) + offset
    return (
        f"{shifted.year:04d}-{shifted.month:02d}-{shifted.day:02d} "
        f"{shifted.hour:02d}:{shifted.minute:02d}:{shifted.second:02d}"
    )


def offset_from_minutes(minutes: int) -> timedelta:
    """Convert a whole-minute offset into a ``timedelta``.

    Raises:
        InvalidOffsetError: If *minutes* is not an int or lies outside one day.

    Examples:
        >>> offset_from_minutes(540)
        datetime.timedelta(seconds=32400)
        >>> offset_from_minutes(-330)
        datetime.timedelta(days=-1, seconds=66600)
    """
    if isinstance(minutes, bool) or not isinstance(minutes, int):
        raise InvalidOffsetError(f"offset must be a whole number of minutes, got {minutes!r}")
    if abs(minutes) > MAX_OFFSET_MINUTES:
        raise InvalidOffsetError(f"offset must be within ±{MAX_OFFSET_MINUTES} minutes, got {minutes}")
    return timedelta(minutes=minutes)


def offset_to_minutes(offset: timedelta) -> int:
    """Return *offset* in whole minutes, truncated toward zero.

    Examples:
        >>> offset_to_minutes(timedelta(hours=-5))
        -300
        >>> offset_to_minutes(timedelta(hours=5, minutes=45, seconds=30))
        345
    """
    return int(offset.total_seconds() / 60)


def parse_instant(text: str) -> datetime:
    """Parse an ISO 8601 timestamp into an aware UTC ``datetime``.

    Accepts every form ``datetime.fromisoformat`` reads on Python 3.11+,
    including fractional seconds, the basic ``20230101T003000`` form and a
    trailing ``Z`` (either case). Values without an offset are UTC.

    Raises:
        InvalidInstantError: If *text* is not a valid ISO 8601 timestamp.

    Examples:
        >>> parse_instant("2023-01-01T00:30:00Z")
        datetime.datetime(2023, 1, 1, 0, 30, tzinfo=datetime.timezone.utc)
        >>> parse_instant("2023-01-01T09:30:00+09:00")
        datetime.datetime(2023, 1, 1, 0, 30, tzinfo=datetime.timezone.utc)
    """
    candidate = text.strip()
    if candidate.endswith("z"):
        candidate = candidate[:-1] + "Z"
    try:
        parsed = datetime.fromisoformat(candidate)
    except ValueError as exc:
        raise InvalidInstantError(f"invalid ISO 8601 instant: {text!r}") from exc
    return as_utc(parsed)


@dataclass(frozen=True, slots=True)
class ClockReading:
    """A single read of the clock: the instant and the local offset at it.

    Example:
        >>> reading = ClockReading(datetime(2023, 1, 1, 0, 30, tzinfo=timezone.utc), timedelta(hours=9))
        >>> reading.format()
        '2023-01-01 09:30:00'
        >>> reading.offset_minutes
        540
    """

    instant: datetime
    offset: timedelta

    @property
    def offset_minutes(self) -> int:
        return offset_to_minutes(self.offset)

    def format(self) -> str:
        """Render this reading as a local datetime string."""
        return format_local_datetime(self.instant, self.offset)


__all__ = [
    "LOCAL_DATETIME_FORMAT_PATTERN",
    "MAX_OFFSET_MINUTES",
    "ClockReading",
    "as_utc",
    "format_local_datetime",
    "offset_from_minutes",
    "offset_to_minutes",
    "parse_instant",
]
