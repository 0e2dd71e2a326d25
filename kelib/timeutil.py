"""Conversions between timespec values, durations and time points, and time formatting."""

from __future__ import annotations

import time
from datetime import datetime, timedelta, timezone
from enum import Enum

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

_NS_PER_SECOND = 1_000_000_000


class TimeUnit(Enum):
    """A unit of time, valued as its length in nanoseconds."""

    NANOSECONDS = 1
    MICROSECONDS = 1_000
    MILLISECONDS = 1_000_000
    SECONDS = 1_000_000_000
    MINUTES = 60 * 1_000_000_000
    HOURS = 3600 * 1_000_000_000


def _to_unit(unit: TimeUnit | str) -> TimeUnit:
    if isinstance(unit, TimeUnit):
        return unit
    try:
        return TimeUnit[unit.upper()]
    except (KeyError, AttributeError):
        raise ValueError(f"unknown time unit: {unit!r}") from None


def _nanoseconds_to_time_point(total_ns: int) -> datetime:
    # Sub-microsecond precision cannot be held by datetime; round toward the past.
    micros, _ = divmod(total_ns, 1000)
    return EPOCH + timedelta(microseconds=micros)


def timespec_to_duration(seconds: int, nanoseconds: int) -> int:
    """Total length of a (seconds, nanoseconds) timespec, in nanoseconds."""
    return int(seconds) * _NS_PER_SECOND + int(nanoseconds)


def timespec_to_time_point(seconds: int, nanoseconds: int) -> datetime:
    """The UTC time point a timespec measured from the Unix epoch refers to."""
    return _nanoseconds_to_time_point(timespec_to_duration(seconds, nanoseconds))


def format_time(tm: time.struct_time | datetime | tuple, fmt: str) -> str:
    """Format a broken-down time (struct_time, time tuple or datetime) with fmt."""
    if isinstance(tm, datetime):
        return tm.strftime(fmt)
    return time.strftime(fmt, tuple(tm) if not isinstance(tm, time.struct_time) else tm)


def epoch_value_to_time_point(value: int, unit: TimeUnit | str = TimeUnit.SECONDS) -> datetime:
    """The UTC time point that lies value units after the Unix epoch."""
    return _nanoseconds_to_time_point(int(value) * _to_unit(unit).value)