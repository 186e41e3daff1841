# src/easytime/clock/__init__.py
"""
easytime.clock
~~~~~~~~~~~~~~

Where "now" comes from.  Everything in easytime that needs the current
instant reads it from a :class:`Clock`, so tests can pin time with a
:class:`FixedClock`::

    from datetime import datetime
    from dateutil import tz
    from easytime.clock import FixedClock

    clock = FixedClock(datetime(2024, 1, 31, 12, 0, tzinfo=tz.UTC))
    clock.now()                            # → 2024-01-31 12:00:00+00:00

Public API
----------
Clock        Protocol with a single ``now()``.
LocalClock   Machine-local zone (DST aware).
UtcClock     UTC.
FixedClock   Pinned instant for deterministic use.
"""

from easytime.clock.clock import Clock, FixedClock, LocalClock, UtcClock

__all__ = ["Clock", "FixedClock", "LocalClock", "UtcClock"]
