from __future__ import annotations

import operator
import warnings
from datetime import datetime, timedelta

from dateutil import tz

from easytime.calendar import NaiveDatetimeError
from easytime.clock import Clock, LocalClock, UtcClock
from easytime.formatting import (
    DEFAULT_DATE_FORMAT,
    format_instant,
    to_date,
    to_date_time,
    to_time,
    to_timestamp,
)
from easytime.offset import Direction, TimeUnit, offset, offset_arbitrary
from easytime.offset import in_future as _in_future
from easytime.offset import in_past as _in_past


class EasyTime:
    """
    A count of units anchored at a base instant.

    ``EasyTime(5).days_from_now()`` is five days after the moment the object
    was created; ``EasyTime.utc(3).months_ago()`` is three calendar months
    before the current UTC time.  The base instant comes from ``clock``
    unless given explicitly.
    """

    def __init__(
        self,
        value: int,
        time: datetime | None = None,
        clock: Clock | None = None,
    ) -> None:
        self._clock: Clock = clock if clock is not None else LocalClock()
        self._value = operator.index(value)
        self._time = _aware(time if time is not None else self._clock.now())

    # ── constructors ─────────────────────────────────────────────────────

    @classmethod
    def local(cls, value: int, time: datetime | None = None) -> EasyTime:
        return cls(value, time, clock=LocalClock())

    @classmethod
    def utc(cls, value: int, time: datetime | None = None) -> EasyTime:
        if time is not None:
            time = _aware(time).astimezone(tz.UTC)
        return cls(value, time, clock=UtcClock())

    @classmethod
    def with_time(cls, value: int, time: datetime) -> EasyTime:
        return cls(value, time)

    @classmethod
    def from_time(cls, time: datetime) -> EasyTime:
        """Wrap ``time`` with a zero count, mainly for the formatting helpers."""
        return cls(0, time)

    @classmethod
    def in_future(
        cls,
        value: int,
        unit: TimeUnit,
        time: datetime | None = None,
        clock: Clock | None = None,
    ) -> datetime:
        return _in_future(value, unit, reference=time, clock=clock)

    @classmethod
    def in_past(
        cls,
        value: int,
        unit: TimeUnit,
        time: datetime | None = None,
        clock: Clock | None = None,
    ) -> datetime:
        return _in_past(value, unit, reference=time, clock=clock)

    # ── accessors ────────────────────────────────────────────────────────

    @property
    def value(self) -> int:
        return self._value

    @value.setter
    def value(self, value: int) -> None:
        self._value = operator.index(value)

    @property
    def time(self) -> datetime:
        return self._time

    @time.setter
    def time(self, time: datetime) -> None:
        self._time = _aware(time)

    @property
    def clock(self) -> Clock:
        return self._clock

    def get_value(self) -> int:
        return self._value

    def set_value(self, value: int) -> None:
        self.value = value

    def get_time(self) -> datetime:
        return self._time

    def set_time(self, time: datetime) -> None:
        self.time = time

    # ── offsets ──────────────────────────────────────────────────────────

    def _forward(self, unit: TimeUnit) -> datetime:
        return offset(self._time, self._value, unit, Direction.FUTURE)

    def _backward(self, unit: TimeUnit) -> datetime:
        return offset(self._time, self._value, unit, Direction.PAST)

    def shift(self, duration: timedelta, direction: Direction = Direction.FUTURE) -> datetime:
        """Offset the base instant by an arbitrary ``timedelta``; ignores ``value``."""
        return offset_arbitrary(self._time, duration, direction)

    def seconds_from_now(self) -> datetime:
        return self._forward(TimeUnit.SECONDS)

    def seconds_ago(self) -> datetime:
        return self._backward(TimeUnit.SECONDS)

    def minutes_from_now(self) -> datetime:
        return self._forward(TimeUnit.MINUTES)

    def minutes_ago(self) -> datetime:
        return self._backward(TimeUnit.MINUTES)

    def hours_from_now(self) -> datetime:
        return self._forward(TimeUnit.HOURS)

    def hours_ago(self) -> datetime:
        return self._backward(TimeUnit.HOURS)

    def days_from_now(self) -> datetime:
        return self._forward(TimeUnit.DAYS)

    def days_ago(self) -> datetime:
        return self._backward(TimeUnit.DAYS)

    def months_from_now(self) -> datetime:
        """Clamps to the last day of a shorter month (Jan 31 → Feb 28/29)."""
        return self._forward(TimeUnit.MONTHS)

    def months_ago(self) -> datetime:
        return self._backward(TimeUnit.MONTHS)

    def years_from_now(self) -> datetime:
        """Feb 29 lands on Feb 28 when the target year is not a leap year."""
        return self._forward(TimeUnit.YEARS)

    def years_ago(self) -> datetime:
        return self._backward(TimeUnit.YEARS)

    def decades_from_now(self) -> datetime:
        return self._forward(TimeUnit.DECADES)

    def decades_ago(self) -> datetime:
        return self._backward(TimeUnit.DECADES)

    def centuries_from_now(self) -> datetime:
        return self._forward(TimeUnit.CENTURIES)

    def centuries_ago(self) -> datetime:
        return self._backward(TimeUnit.CENTURIES)

    def millenniums_from_now(self) -> datetime:
        return self._forward(TimeUnit.MILLENNIUMS)

    def millenniums_ago(self) -> datetime:
        return self._backward(TimeUnit.MILLENNIUMS)

    # ── formatting ───────────────────────────────────────────────────────

    def to_string(self) -> str:
        return format_instant(self._time)

    def to_string_with_format(self, fmt: str) -> str:
        return format_instant(self._time, fmt)

    def to_string_with_timezone(self) -> str:
        return format_instant(self._time, DEFAULT_DATE_FORMAT, show_tz=True)

    def to_string_with_timezone_format(self, fmt: str) -> str:
        return format_instant(self._time, fmt, show_tz=True)

    def to_string_with_timezone_format_with_timezone(self, fmt: str) -> str:
        warnings.warn(
            "to_string_with_timezone_format_with_timezone() is deprecated; "
            "use to_string_with_timezone_format()",
            DeprecationWarning,
            stacklevel=2,
        )
        return self.to_string_with_timezone_format(fmt)

    def to_timestamp(self) -> int:
        return to_timestamp(self._time)

    def to_date(self) -> str:
        return to_date(self._time)

    def to_time(self) -> str:
        return to_time(self._time)

    def to_date_time(self) -> str:
        return to_date_time(self._time)

    def to_date_time_with_timezone_format(self, fmt: str) -> str:
        return format_instant(self._time, fmt, show_tz=True)

    # ── dunder ───────────────────────────────────────────────────────────

    def __str__(self) -> str:
        return self.to_string()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EasyTime):
            return NotImplemented
        return (self._value, self._time) == (other._value, other._time)

    def __hash__(self) -> int:
        return hash((self._value, self._time))

    def __repr__(self) -> str:
        return (
            f"EasyTime(value={self._value}, "
            f"time={self._time.isoformat()!r}, "
            f"clock={self._clock!r})"
        )


def _aware(time: datetime) -> datetime:
    if time.tzinfo is None or time.utcoffset() is None:
        raise NaiveDatetimeError(f"EasyTime needs a timezone-aware datetime; got {time!r}.")
    return time
