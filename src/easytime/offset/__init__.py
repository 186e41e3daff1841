# src/easytime/offset/__init__.py
"""
easytime.offset
~~~~~~~~~~~~~~~

Move an aware ``datetime`` forwards or backwards by a whole number of
units.  Seconds, minutes, hours and days are elapsed time; months, years,
decades, centuries and millenniums are calendar arithmetic with
day-of-month clamping.

Basic usage::

    from datetime import datetime
    from dateutil import tz
    from easytime.offset import Direction, TimeUnit, offset

    start = datetime(2024, 1, 31, 9, 30, tzinfo=tz.UTC)
    offset(start, 1, TimeUnit.MONTHS)                   # → 2024-02-29 09:30
    offset(start, 2, TimeUnit.DAYS, Direction.PAST)     # → 2024-01-29 09:30

Relative to a clock::

    from easytime.offset import in_future, offset_ago
    in_future(5, TimeUnit.DAYS)            # five days from the local now
    offset_ago(3, TimeUnit.YEARS)

NumPy ``datetime64`` arrays::

    import numpy as np
    days = np.array(["2024-01-31", "2024-03-31"], dtype="datetime64[D]")
    offset_array(days, 1, TimeUnit.MONTHS)  # → ['2024-02-29', '2024-04-30']

Public API
----------
TimeUnit           Second .. millennium.
Direction          FUTURE / PAST.
offset             Dispatches to offset_fixed / offset_calendar.
offset_arbitrary   Free-form ``timedelta`` offset.
in_future, in_past, offset_from_now, offset_ago
offset_array       Vectorised offsets.
"""

from easytime.offset.array import offset_array
from easytime.offset.offset import (
    in_future,
    in_past,
    offset,
    offset_ago,
    offset_arbitrary,
    offset_calendar,
    offset_fixed,
    offset_from_now,
)
from easytime.offset.units import Direction, TimeUnit

__all__ = [
    "Direction",
    "TimeUnit",
    "in_future",
    "in_past",
    "offset",
    "offset_ago",
    "offset_arbitrary",
    "offset_array",
    "offset_calendar",
    "offset_fixed",
    "offset_from_now",
]
