from __future__ import annotations

from datetime import datetime, timedelta, timezone

from easytime.calendar import NaiveDatetimeError

DEFAULT_DATE_FORMAT: str = "%Y-%m-%d %H:%M:%S"
DATE_FORMAT: str = "%Y-%m-%d"
TIME_FORMAT: str = "%H:%M:%S"

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_SECOND = timedelta(seconds=1)


def format_offset(instant: datetime) -> str:
    """``"UTC"`` for UTC instants, otherwise the offset as ``+HH:MM``."""
    utcoffset = instant.utcoffset()
    if utcoffset is None:
        raise NaiveDatetimeError("Cannot render the offset of a naive datetime.")
    if not utcoffset and instant.tzname() == "UTC":
        return "UTC"

    sign = "-" if utcoffset < timedelta(0) else "+"
    minutes, seconds = divmod(int(abs(utcoffset).total_seconds()), 60)
    hours, minutes = divmod(minutes, 60)
    text = f"{sign}{hours:02d}:{minutes:02d}"
    return f"{text}:{seconds:02d}" if seconds else text


def format_instant(
    instant: datetime,
    fmt: str = DEFAULT_DATE_FORMAT,
    show_tz: bool = False,
) -> str:
    text = instant.strftime(fmt)
    if show_tz:
        return f"{text} {format_offset(instant)}"
    return text


def to_timestamp(instant: datetime) -> int:
    """Whole seconds since the UNIX epoch, floored like ``time_t``."""
    if instant.utcoffset() is None:
        raise NaiveDatetimeError("A naive datetime has no UNIX timestamp.")
    return (instant - _EPOCH) // _SECOND


def to_date(instant: datetime) -> str:
    return instant.strftime(DATE_FORMAT)


def to_time(instant: datetime) -> str:
    return instant.strftime(TIME_FORMAT)


def to_date_time(instant: datetime) -> str:
    return instant.strftime(DEFAULT_DATE_FORMAT)
