import logging
from datetime import MAXYEAR, MINYEAR, date
from typing import TypeVar, Union

import numpy as np
from dateutil.relativedelta import relativedelta

from ._exceptions import CalendarError, OffsetOverflowError

_LOGGER = logging.getLogger(__name__)

WallT = TypeVar("WallT", bound=date)
ArrayLike = Union["np.datetime64", "np.ndarray"]

# Days in each month of a common (non-leap) year.
DAYS_IN_MONTH: tuple[int, ...] = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)

_EPOCH_YEAR = 1970
_MAX_MONTH_SPAN = 12 * (MAXYEAR - MINYEAR + 1)
_INT64_MAX = int(np.iinfo(np.int64).max)
_ONE_DAY = np.timedelta64(1, "D")


# ── primitives ───────────────────────────────────────────────────────────

def is_leap_year(year: int) -> bool:
    """Gregorian rule: every 4th year, except centuries not divisible by 400."""
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    if not 1 <= month <= 12:
        raise CalendarError(f"Month must be in 1..12; got {month}.")
    if month == 2 and is_leap_year(year):
        return 29
    return DAYS_IN_MONTH[month - 1]


def _check_year(year: int) -> None:
    if not MINYEAR <= year <= MAXYEAR:
        _LOGGER.debug("Target year %d outside %d..%d", year, MINYEAR, MAXYEAR)
        raise OffsetOverflowError(
            f"Year {year} is outside the supported range {MINYEAR}..{MAXYEAR}."
        )


# ── scalar month shifting ────────────────────────────────────────────────

def shift_months(wall: WallT, months: int) -> WallT:
    """
    Move ``wall`` by ``months`` calendar months, clamping the day-of-month.

    Jan 31 + 1 month lands on the last day of February rather than rolling
    into March.  Time-of-day and tzinfo are carried over unchanged;
    re-resolving the UTC offset for the new date is left to the tzinfo.
    """
    if abs(months) > _MAX_MONTH_SPAN:
        raise OffsetOverflowError(f"{months} months exceeds the supported calendar range.")
    try:
        moved = wall + relativedelta(months=months)
    except (ValueError, OverflowError) as exc:
        _LOGGER.debug("Shifting %s by %d months failed: %s", wall, months, exc)
        raise OffsetOverflowError(
            f"{wall.isoformat()} shifted by {months} months is outside "
            f"{MINYEAR}..{MAXYEAR}."
        ) from exc

    if moved.day != wall.day:
        _LOGGER.debug(
            "Clamped day %d to %d for %04d-%02d", wall.day, moved.day, moved.year, moved.month
        )
    return moved


# ── datetime64 day splitting ─────────────────────────────────────────────

def _units_per_day(unit: np.dtype) -> int:
    base, count = np.datetime_data(unit)
    if base in ("Y", "M", "W", "D"):
        return 1
    return int(_ONE_DAY // np.timedelta64(count, base))


def _split_days(t: np.ndarray) -> tuple[np.ndarray, np.ndarray]:
    """Whole days (``datetime64[D]``) and time-of-day at ``t``'s own resolution."""
    days = t.astype("datetime64[D]")
    per_day = _units_per_day(t.dtype)
    if per_day == 1:
        return days, np.zeros(t.shape, dtype="timedelta64[D]")
    base, count = np.datetime_data(t.dtype)
    ticks = t.astype(np.int64) % per_day
    return days, ticks * np.timedelta64(count, base)


def _join_days(
    days: np.ndarray,
    time_of_day: np.ndarray,
    unit: np.dtype,
    nat: np.ndarray,
) -> np.ndarray:
    """
    Rebuild ``days + time_of_day`` at ``unit`` resolution.

    Raises instead of letting int64 wrap: the result must lie inside
    ``MINYEAR..MAXYEAR`` and inside what ``unit`` can represent
    (``datetime64[ns]`` stops in 2262).
    """
    carry = time_of_day // _ONE_DAY
    days = days + carry.astype("timedelta64[D]")
    time_of_day = time_of_day - carry * _ONE_DAY

    valid = days[~nat]
    if valid.size:
        years = valid.astype("datetime64[Y]").astype(np.int64) + _EPOCH_YEAR
        bad = years[(years < MINYEAR) | (years > MAXYEAR)]
        if bad.size:
            _check_year(int(bad[0]))

    per_day = _units_per_day(unit)
    if per_day == 1:
        return days.astype(unit)

    limit = _INT64_MAX // per_day - 1
    if valid.size and int(np.abs(valid.astype(np.int64)).max()) > limit:
        _LOGGER.debug("Result days exceed +/-%d for %s", limit, unit)
        raise OffsetOverflowError(f"Offset result does not fit in {unit}.")
    return (days.astype(unit) + time_of_day).astype(unit)


# ── vectorised month shifting ────────────────────────────────────────────

def shift_months_array(values: ArrayLike, months: int | np.ndarray) -> ArrayLike:
    """
    NumPy counterpart of :func:`shift_months` for naive ``datetime64`` values.

    ``values`` and ``months`` broadcast against each other.  The datetime
    unit of ``values`` is preserved (non-datetime input is read as
    ``datetime64[us]``) and ``NaT`` entries pass through.  Results that the
    unit cannot hold raise :class:`OffsetOverflowError`.
    """
    scalar = np.ndim(values) == 0 and np.ndim(months) == 0
    t = np.asarray(values)
    if t.dtype.kind != "M":
        t = t.astype("datetime64[us]")
    m = np.asarray(months)
    if m.dtype.kind not in "iu":
        raise CalendarError(f"Month counts must be integers; got dtype {m.dtype}.")
    if m.size and int(np.abs(m).max()) > _MAX_MONTH_SPAN:
        raise OffsetOverflowError("Month count exceeds the supported calendar range.")

    t, m = np.broadcast_arrays(np.atleast_1d(t), np.atleast_1d(m.astype(np.int64)))
    unit = t.dtype
    nat = np.isnat(t)
    days, time_of_day = _split_days(np.where(nat, np.zeros((), dtype=unit), t))

    month_start = days.astype("datetime64[M]")
    day_index   = (days - month_start.astype("datetime64[D]")).astype(np.int64)

    target = month_start + m.astype("timedelta64[M]")
    years  = target.astype(np.int64) // 12 + _EPOCH_YEAR
    out_of_range = ~nat & ((years < MINYEAR) | (years > MAXYEAR))
    if out_of_range.any():
        _check_year(int(years[out_of_range][0]))

    first_day    = target.astype("datetime64[D]")
    month_length = (
        (target + np.timedelta64(1, "M")).astype("datetime64[D]") - first_day
    ).astype(np.int64)
    day_index = np.minimum(day_index, month_length - 1)

    result = _join_days(first_day + day_index.astype("timedelta64[D]"), time_of_day, unit, nat)
    result[nat] = np.datetime64("NaT")
    return result[0] if scalar else result
