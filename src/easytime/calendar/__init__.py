# src/easytime/calendar/__init__.py
"""
easytime.calendar
~~~~~~~~~~~~~~~~~

Gregorian calendar primitives.  Month arithmetic carries into the year in
base 12 and clamps the day-of-month to the target month's length, so
Jan 31 + 1 month is Feb 28 (or Feb 29 in a leap year).

Basic usage::

    from datetime import date
    from easytime.calendar import shift_months, is_leap_year

    shift_months(date(2024, 1, 31), 1)     # → date(2024, 2, 29)
    is_leap_year(1900)                     # → False

NumPy ``datetime64`` arrays are accepted by the vectorised form::

    import numpy as np
    days = np.array(["2023-01-31", "2024-01-31"], dtype="datetime64[D]")
    shift_months_array(days, 1)            # → ['2023-02-28', '2024-02-29']

Public API
----------
is_leap_year         Gregorian leap-year rule.
days_in_month        Length of a (year, month).
shift_months         Clamped month shift of a date / datetime.
shift_months_array   Vectorised shift over ``datetime64`` values.
EasyTimeError        Base exception for all easytime errors.
"""

from __future__ import annotations

from easytime.calendar._exceptions import (
    CalendarError,
    EasyTimeError,
    NaiveDatetimeError,
    NonexistentTimeError,
    OffsetOverflowError,
)
from easytime.calendar.calendar import (
    DAYS_IN_MONTH,
    days_in_month,
    is_leap_year,
    shift_months,
    shift_months_array,
)

__all__ = [
    "DAYS_IN_MONTH",
    "days_in_month",
    "is_leap_year",
    "shift_months",
    "shift_months_array",
    "CalendarError",
    "EasyTimeError",
    "NaiveDatetimeError",
    "NonexistentTimeError",
    "OffsetOverflowError",
]
