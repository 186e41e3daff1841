class EasyTimeError(Exception):
    """Base class for every error raised by easytime."""


class CalendarError(EasyTimeError, ValueError):
    """Invalid calendar input (unknown month, wrong kind of unit)."""


class OffsetOverflowError(EasyTimeError, OverflowError):
    """The offset instant falls outside the representable range."""


class NonexistentTimeError(EasyTimeError, ValueError):
    """The target wall time is skipped by a DST transition."""


class NaiveDatetimeError(EasyTimeError, ValueError):
    """A timezone-aware instant was required."""
