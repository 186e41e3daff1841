from datetime import MAXYEAR, MINYEAR
from typing import Union

import numpy as np

from easytime.calendar import CalendarError, OffsetOverflowError, shift_months_array
from easytime.calendar.calendar import _ONE_DAY, _join_days, _split_days

from .units import Direction, TimeUnit

ArrayLike = Union["np.datetime64", "np.ndarray"]

_MAX_SPAN_SECONDS = (MAXYEAR - MINYEAR + 1) * 366 * 86400


def _as_counts(magnitude: int | np.ndarray, per_unit: int) -> np.ndarray:
    counts = np.asarray(magnitude)
    if counts.dtype.kind not in "iu":
        raise CalendarError(f"Magnitudes must be integers; got dtype {counts.dtype}.")
    counts = counts.astype(np.int64)
    if counts.size and int(np.abs(counts).max()) > _MAX_SPAN_SECONDS // per_unit:
        raise OffsetOverflowError("Magnitude exceeds the supported calendar range.")
    return counts


def offset_array(
    values: ArrayLike,
    magnitude: int | np.ndarray,
    unit: TimeUnit,
    direction: Direction = Direction.FUTURE,
) -> ArrayLike:
    """
    Vectorised :func:`~easytime.offset.offset` over naive ``datetime64`` values.

    ``magnitude`` broadcasts against ``values``.  Fixed units add a
    ``timedelta64`` of the unit's own resolution, so ``datetime64[D]`` plus
    days stays ``datetime64[D]``.  Results the unit cannot hold (past 2262
    for ``datetime64[ns]``) raise :class:`~easytime.calendar.OffsetOverflowError`.
    Calendar units go through :func:`~easytime.calendar.shift_months_array`.
    """
    if not unit.is_fixed:
        counts = _as_counts(magnitude, 1) * direction.sign * unit.months
        return shift_months_array(values, counts)

    scalar = np.ndim(values) == 0 and np.ndim(magnitude) == 0
    t = np.asarray(values)
    if t.dtype.kind != "M":
        t = t.astype("datetime64[us]")
    counts = _as_counts(magnitude, unit.seconds) * direction.sign
    shift = counts.astype(f"timedelta64[{unit.np_code}]")
    result_unit = (np.empty(0, t.dtype) + np.empty(0, shift.dtype)).dtype

    t, shift = np.broadcast_arrays(np.atleast_1d(t), np.atleast_1d(shift))
    nat = np.isnat(t)
    days, time_of_day = _split_days(np.where(nat, np.zeros((), dtype=t.dtype), t))

    # Whole days and the sub-day remainder are added separately so nothing
    # is scaled to the caller's resolution before the range check.
    whole_days = shift // _ONE_DAY
    rest = time_of_day + (shift - whole_days * _ONE_DAY)
    result = _join_days(days + whole_days.astype("timedelta64[D]"), rest, result_unit, nat)
    result[nat] = np.datetime64("NaT")
    return result[0] if scalar else result
