from __future__ import annotations

import logging
import operator
from datetime import datetime, timedelta

from dateutil import tz

from easytime.calendar import (
    CalendarError,
    NaiveDatetimeError,
    NonexistentTimeError,
    OffsetOverflowError,
    shift_months,
)
from easytime.clock import Clock, LocalClock

from .units import Direction, TimeUnit

_LOGGER = logging.getLogger(__name__)


# ── helpers ──────────────────────────────────────────────────────────────

def _require_aware(reference: datetime) -> None:
    if reference.tzinfo is None or reference.utcoffset() is None:
        raise NaiveDatetimeError(
            f"Offsets need a timezone-aware datetime; got {reference!r}."
        )


def _shift_absolute(reference: datetime, delta: timedelta) -> datetime:
    # Elapsed-time arithmetic on the UTC timeline, re-expressed in the
    # reference's own zone.
    try:
        moved = reference.astimezone(tz.UTC) + delta
        return moved.astimezone(reference.tzinfo)
    except (OverflowError, ValueError) as exc:
        _LOGGER.debug("Offset of %s from %s overflowed: %s", delta, reference, exc)
        raise OffsetOverflowError(
            f"{reference.isoformat()} shifted by {delta} is out of range."
        ) from exc


def _resolve_clock(clock: Clock | None) -> Clock:
    return clock if clock is not None else LocalClock()


# ── fixed-length units ───────────────────────────────────────────────────

def offset_fixed(
    reference: datetime,
    magnitude: int,
    unit: TimeUnit,
    direction: Direction = Direction.FUTURE,
) -> datetime:
    """Shift by ``magnitude`` seconds, minutes, hours or days of elapsed time."""
    _require_aware(reference)
    if not unit.is_fixed:
        raise CalendarError(f"{unit!r} is a calendar unit; use offset_calendar().")
    seconds = direction.sign * operator.index(magnitude) * unit.seconds
    if seconds == 0:
        return reference
    try:
        delta = timedelta(seconds=seconds)
    except OverflowError as exc:
        raise OffsetOverflowError(
            f"{magnitude} {unit.label} does not fit in a timedelta."
        ) from exc
    return _shift_absolute(reference, delta)


# ── calendar units ───────────────────────────────────────────────────────

def offset_calendar(
    reference: datetime,
    magnitude: int,
    unit: TimeUnit,
    direction: Direction = Direction.FUTURE,
) -> datetime:
    """
    Shift by ``magnitude`` months, years, decades, centuries or millenniums.

    The month count is applied to the reference's wall-clock date with the
    day clamped to the target month's length (Feb 29 + 1 year is Feb 28).
    The wall time and tzinfo are kept; the UTC offset is whatever the zone
    says for the new date.  Ambiguous wall times take their first
    occurrence and wall times inside a DST gap raise
    :class:`NonexistentTimeError`.
    """
    _require_aware(reference)
    if unit.is_fixed:
        raise CalendarError(f"{unit!r} is a fixed unit; use offset_fixed().")
    months = direction.sign * operator.index(magnitude) * unit.months
    if months == 0:
        return reference

    target = shift_months(reference, months).replace(fold=0)
    try:
        exists = tz.datetime_exists(target)
    except OverflowError as exc:
        raise OffsetOverflowError(
            f"{target.isoformat()} cannot be placed on the UTC timeline."
        ) from exc
    if not exists:
        raise NonexistentTimeError(
            f"{target.replace(tzinfo=None).isoformat()} does not exist in "
            f"{target.tzinfo!r}."
        )
    return target


def offset(
    reference: datetime,
    magnitude: int,
    unit: TimeUnit,
    direction: Direction = Direction.FUTURE,
) -> datetime:
    if unit.is_fixed:
        return offset_fixed(reference, magnitude, unit, direction)
    return offset_calendar(reference, magnitude, unit, direction)


def offset_arbitrary(
    reference: datetime,
    duration: timedelta,
    direction: Direction = Direction.FUTURE,
) -> datetime:
    """Apply a free-form ``timedelta`` such as ``timedelta(days=15, hours=10)``."""
    _require_aware(reference)
    try:
        delta = duration if direction is Direction.FUTURE else -duration
    except OverflowError as exc:
        raise OffsetOverflowError(f"Cannot negate {duration!r}.") from exc
    return _shift_absolute(reference, delta)


# ── relative to a clock ──────────────────────────────────────────────────

def in_future(
    magnitude: int,
    unit: TimeUnit,
    reference: datetime | None = None,
    clock: Clock | None = None,
) -> datetime:
    if reference is None:
        reference = _resolve_clock(clock).now()
    return offset(reference, magnitude, unit, Direction.FUTURE)


def in_past(
    magnitude: int,
    unit: TimeUnit,
    reference: datetime | None = None,
    clock: Clock | None = None,
) -> datetime:
    if reference is None:
        reference = _resolve_clock(clock).now()
    return offset(reference, magnitude, unit, Direction.PAST)


def offset_from_now(magnitude: int, unit: TimeUnit, clock: Clock | None = None) -> datetime:
    return in_future(magnitude, unit, clock=clock)


def offset_ago(magnitude: int, unit: TimeUnit, clock: Clock | None = None) -> datetime:
    return in_past(magnitude, unit, clock=clock)
