from __future__ import annotations

from datetime import datetime, timedelta
from typing import Protocol, runtime_checkable

from dateutil import tz

from easytime.calendar import NaiveDatetimeError


@runtime_checkable
class Clock(Protocol):
    """Source of the current instant.  ``now()`` must be timezone-aware."""

    def now(self) -> datetime: ...


class LocalClock:
    """
    Current time in the machine's local zone.

    Uses ``dateutil.tz.tzlocal()`` rather than a fixed offset so that wall
    times shifted into another season pick up that season's UTC offset.
    """

    def __init__(self) -> None:
        self._tz = tz.tzlocal()

    @property
    def tzinfo(self) -> tz.tzlocal:
        return self._tz

    def now(self) -> datetime:
        return datetime.now(self._tz)

    def __repr__(self) -> str:
        return "LocalClock()"


class UtcClock:

    @property
    def tzinfo(self) -> tz.tzutc:
        return tz.UTC

    def now(self) -> datetime:
        return datetime.now(tz.UTC)

    def __repr__(self) -> str:
        return "UtcClock()"


class FixedClock:
    """Always reports the same instant until moved with :meth:`advance`."""

    def __init__(self, instant: datetime) -> None:
        if instant.tzinfo is None or instant.utcoffset() is None:
            raise NaiveDatetimeError("FixedClock needs a timezone-aware instant.")
        self._instant = instant

    @property
    def tzinfo(self):
        return self._instant.tzinfo

    def now(self) -> datetime:
        return self._instant

    def advance(self, delta: timedelta) -> None:
        self._instant = self._instant + delta

    def __repr__(self) -> str:
        return f"FixedClock(instant={self._instant.isoformat()!r})"
