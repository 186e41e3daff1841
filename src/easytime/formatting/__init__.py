# src/easytime/formatting/__init__.py
"""
easytime.formatting
~~~~~~~~~~~~~~~~~~~

Thin wrappers over ``datetime.strftime`` with the library's default
layouts, plus UNIX timestamps.

    from easytime.formatting import format_instant, to_timestamp

    format_instant(moment)                      # '2024-02-29 09:30:00'
    format_instant(moment, show_tz=True)        # '2024-02-29 09:30:00 UTC'
    to_timestamp(moment)                        # 1709199000
"""

from easytime.formatting.formatting import (
    DATE_FORMAT,
    DEFAULT_DATE_FORMAT,
    TIME_FORMAT,
    format_instant,
    format_offset,
    to_date,
    to_date_time,
    to_time,
    to_timestamp,
)

__all__ = [
    "DATE_FORMAT",
    "DEFAULT_DATE_FORMAT",
    "TIME_FORMAT",
    "format_instant",
    "format_offset",
    "to_date",
    "to_date_time",
    "to_time",
    "to_timestamp",
]
