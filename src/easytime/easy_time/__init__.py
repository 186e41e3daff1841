# src/easytime/easy_time/__init__.py
"""
easytime.easy_time
~~~~~~~~~~~~~~~~~~

Human-friendly wrapper: a count of units plus a base instant.

Basic usage::

    from easytime.easy_time import EasyTime
    from easytime.offset import TimeUnit

    EasyTime(5).days_from_now()                 # local time, five days ahead
    EasyTime.utc(10).hours_from_now()           # UTC
    EasyTime.in_past(1, TimeUnit.YEARS)         # a year ago, local time

With a fixed base instant::

    from datetime import datetime
    from dateutil import tz

    base = datetime(2020, 2, 29, 8, 0, tzinfo=tz.UTC)
    EasyTime.with_time(1, base).years_from_now()    # → 2021-02-28 08:00 UTC
    EasyTime.from_time(base).to_string()            # '2020-02-29 08:00:00'

Public API
----------
EasyTime   The wrapper class.
"""

from easytime.easy_time.easy_time import EasyTime

__all__ = ["EasyTime"]
