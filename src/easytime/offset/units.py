from __future__ import annotations

from enum import Enum


class TimeUnit(Enum):
    """
    Units accepted by the offset functions.

    Fixed units carry their length in elapsed seconds; calendar units carry
    their length in months and are applied with day-of-month clamping.
    Members can also be looked up by name: ``TimeUnit("days")``,
    ``TimeUnit("Day")``.
    """

    # label, seconds, months, numpy timedelta code
    SECONDS     = ("seconds", 1, 0, "s")
    MINUTES     = ("minutes", 60, 0, "m")
    HOURS       = ("hours", 3600, 0, "h")
    DAYS        = ("days", 86400, 0, "D")
    MONTHS      = ("months", 0, 1, None)
    YEARS       = ("years", 0, 12, None)
    DECADES     = ("decades", 0, 120, None)
    CENTURIES   = ("centuries", 0, 1200, None)
    MILLENNIUMS = ("millenniums", 0, 12000, None)

    def __init__(self, label: str, seconds: int, months: int, np_code: str | None) -> None:
        self.label = label
        self.seconds = seconds
        self.months = months
        self.np_code = np_code

    @property
    def is_fixed(self) -> bool:
        return self.seconds > 0

    @classmethod
    def _missing_(cls, value):
        if isinstance(value, str):
            key = value.strip().lower()
            for unit in cls:
                if key in (unit.label, _SINGULAR[unit.label]):
                    return unit
        return None

    def __repr__(self) -> str:
        return f"TimeUnit.{self.name}"


_SINGULAR = {
    "seconds": "second",
    "minutes": "minute",
    "hours": "hour",
    "days": "day",
    "months": "month",
    "years": "year",
    "decades": "decade",
    "centuries": "century",
    "millenniums": "millennium",
}


class Direction(Enum):
    FUTURE = 1
    PAST = -1

    @property
    def sign(self) -> int:
        return self.value

    @property
    def opposite(self) -> Direction:
        return Direction.PAST if self is Direction.FUTURE else Direction.FUTURE
