"""
tests/offset/test_offset.py

Covers:
  - TimeUnit / Direction metadata and lookup
  - Fixed-unit offsets (elapsed time, round trips, DST)
  - Calendar-unit offsets (clamp, leap years, long units)
  - Identity, negative magnitudes and concurrent calls
  - Time-of-day / tzinfo preservation, DST gaps and folds
  - Arbitrary timedelta offsets
  - Clock-relative helpers
  - Overflow and input errors
"""

from concurrent.futures import ThreadPoolExecutor
from datetime import datetime, timedelta, timezone

import pytest
from dateutil import tz

from easytime.calendar import (
    CalendarError,
    NaiveDatetimeError,
    NonexistentTimeError,
    OffsetOverflowError,
)
from easytime.clock import FixedClock
from easytime.offset import (
    Direction,
    TimeUnit,
    in_future,
    in_past,
    offset,
    offset_ago,
    offset_arbitrary,
    offset_calendar,
    offset_fixed,
    offset_from_now,
)

FIXED_UNITS = [TimeUnit.SECONDS, TimeUnit.MINUTES, TimeUnit.HOURS, TimeUnit.DAYS]
CALENDAR_UNITS = [
    TimeUnit.MONTHS,
    TimeUnit.YEARS,
    TimeUnit.DECADES,
    TimeUnit.CENTURIES,
    TimeUnit.MILLENNIUMS,
]


# ── Fixtures ──────────────────────────────────────────────────────────────────

@pytest.fixture
def new_york():
    return tz.gettz("America/New_York")


@pytest.fixture
def noon():
    """2024-01-31 12:00 UTC."""
    return datetime(2024, 1, 31, 12, 0, tzinfo=tz.UTC)


@pytest.fixture
def clock(noon):
    return FixedClock(noon)


# ── Helpers ───────────────────────────────────────────────────────────────────

def utc(*args):
    return datetime(*args, tzinfo=tz.UTC)


def elapsed(a, b):
    """Absolute elapsed time b - a, independent of shared tzinfo."""
    return b.astimezone(timezone.utc) - a.astimezone(timezone.utc)


# ── Units ─────────────────────────────────────────────────────────────────────

class TestUnits:

    def test_fixed_lengths(self):
        assert [u.seconds for u in FIXED_UNITS] == [1, 60, 3600, 86400]

    def test_calendar_lengths(self):
        assert [u.months for u in CALENDAR_UNITS] == [1, 12, 120, 1200, 12000]

    def test_is_fixed(self):
        assert all(u.is_fixed for u in FIXED_UNITS)
        assert not any(u.is_fixed for u in CALENDAR_UNITS)

    @pytest.mark.parametrize(
        "name, unit",
        [("days", TimeUnit.DAYS), ("Day", TimeUnit.DAYS), ("century", TimeUnit.CENTURIES),
         (" Millenniums ", TimeUnit.MILLENNIUMS), ("month", TimeUnit.MONTHS)],
    )
    def test_lookup_by_name(self, name, unit):
        assert TimeUnit(name) is unit

    def test_unknown_name_raises(self):
        with pytest.raises(ValueError):
            TimeUnit("fortnights")

    def test_direction(self):
        assert Direction.FUTURE.sign == 1
        assert Direction.PAST.sign == -1
        assert Direction.FUTURE.opposite is Direction.PAST
        assert Direction.PAST.opposite is Direction.FUTURE


# ── Fixed units ───────────────────────────────────────────────────────────────

class TestFixed:

    @pytest.mark.parametrize(
        "unit, delta",
        [(TimeUnit.SECONDS, timedelta(seconds=10)),
         (TimeUnit.MINUTES, timedelta(minutes=10)),
         (TimeUnit.HOURS, timedelta(hours=10)),
         (TimeUnit.DAYS, timedelta(days=10))],
    )
    def test_forward_and_back(self, noon, unit, delta):
        assert offset_fixed(noon, 10, unit) == noon + delta
        assert offset_fixed(noon, 10, unit, Direction.PAST) == noon - delta

    @pytest.mark.parametrize("unit", FIXED_UNITS)
    @pytest.mark.parametrize("magnitude", [0, 1, 7, 59, 1000, -3, 123456])
    def test_round_trip(self, noon, new_york, unit, magnitude):
        for start in (noon, noon.astimezone(new_york)):
            there = offset_fixed(start, magnitude, unit, Direction.FUTURE)
            back = offset_fixed(there, magnitude, unit, Direction.PAST)
            assert back == start
            assert back.astimezone(timezone.utc) == start.astimezone(timezone.utc)

    def test_day_is_elapsed_across_spring_forward(self, new_york):
        start = datetime(2024, 3, 9, 12, 0, tzinfo=new_york)
        moved = offset_fixed(start, 1, TimeUnit.DAYS)
        assert elapsed(start, moved) == timedelta(days=1)
        assert (moved.day, moved.hour) == (10, 13)
        assert moved.utcoffset() == timedelta(hours=-4)

    def test_hour_through_fall_back_fold(self, new_york):
        start = datetime(2024, 11, 3, 0, 30, tzinfo=new_york)
        one = offset_fixed(start, 1, TimeUnit.HOURS)
        two = offset_fixed(start, 2, TimeUnit.HOURS)
        assert (one.hour, two.hour) == (1, 1)
        assert elapsed(one, two) == timedelta(hours=1)

    def test_keeps_tzinfo(self, new_york):
        start = datetime(2024, 6, 1, 8, 0, tzinfo=new_york)
        assert offset_fixed(start, 5, TimeUnit.HOURS).tzinfo is new_york

    def test_negative_magnitude_flips_direction(self, noon):
        assert offset_fixed(noon, -5, TimeUnit.MINUTES) == offset_fixed(
            noon, 5, TimeUnit.MINUTES, Direction.PAST
        )

    def test_calendar_unit_rejected(self, noon):
        with pytest.raises(CalendarError):
            offset_fixed(noon, 1, TimeUnit.MONTHS)

    def test_float_magnitude_rejected(self, noon):
        with pytest.raises(TypeError):
            offset_fixed(noon, 1.5, TimeUnit.HOURS)


# ── Calendar units ────────────────────────────────────────────────────────────

class TestCalendar:

    def test_month_clamp_common_year(self):
        assert offset_calendar(utc(2023, 1, 31), 1, TimeUnit.MONTHS) == utc(2023, 2, 28)

    def test_month_clamp_leap_year(self):
        assert offset_calendar(utc(2024, 1, 31), 1, TimeUnit.MONTHS) == utc(2024, 2, 29)

    def test_leap_to_leap(self):
        assert offset_calendar(utc(2020, 2, 29), 4, TimeUnit.YEARS) == utc(2024, 2, 29)

    def test_leap_to_common(self):
        assert offset_calendar(utc(2020, 2, 29), 1, TimeUnit.YEARS) == utc(2021, 2, 28)

    def test_months_ago_clamp(self):
        assert offset_calendar(utc(2024, 3, 31), 1, TimeUnit.MONTHS, Direction.PAST) == utc(2024, 2, 29)

    def test_month_carry_into_year(self):
        assert offset_calendar(utc(2023, 12, 15), 1, TimeUnit.MONTHS) == utc(2024, 1, 15)
        assert offset_calendar(utc(2024, 1, 15), 1, TimeUnit.MONTHS, Direction.PAST) == utc(2023, 12, 15)

    def test_decades(self):
        assert offset_calendar(utc(2020, 2, 29), 1, TimeUnit.DECADES) == utc(2030, 2, 28)
        assert offset_calendar(utc(2024, 7, 4), 3, TimeUnit.DECADES, Direction.PAST) == utc(1994, 7, 4)

    def test_centuries(self):
        assert offset_calendar(utc(2000, 2, 29), 1, TimeUnit.CENTURIES) == utc(2100, 2, 28)
        assert offset_calendar(utc(2020, 2, 29), 1, TimeUnit.CENTURIES) == utc(2120, 2, 29)

    def test_millenniums(self):
        assert offset_calendar(utc(2024, 6, 15), 1, TimeUnit.MILLENNIUMS, Direction.PAST) == utc(1024, 6, 15)
        assert offset_calendar(utc(2000, 2, 29), 2, TimeUnit.MILLENNIUMS) == utc(4000, 2, 29)

    def test_round_trip_without_clamp(self, noon):
        start = noon.replace(day=15)
        for unit in CALENDAR_UNITS:
            there = offset_calendar(start, 3, unit)
            assert offset_calendar(there, 3, unit, Direction.PAST) == start

    def test_time_and_tzinfo_preserved(self):
        zone = timezone(timedelta(hours=5, minutes=30))
        start = datetime(2024, 1, 31, 23, 59, 59, 999999, tzinfo=zone)
        for unit in CALENDAR_UNITS:
            for direction in Direction:
                moved = offset_calendar(start, 1, unit, direction)
                assert moved.timetz() == start.timetz()
                assert moved.tzinfo is zone
                assert moved.utcoffset() == start.utcoffset()

    def test_fixed_unit_rejected(self, noon):
        with pytest.raises(CalendarError):
            offset_calendar(noon, 1, TimeUnit.DAYS)


# ── Identity and sign ─────────────────────────────────────────────────────────

class TestIdentity:

    @pytest.mark.parametrize("unit", list(TimeUnit))
    @pytest.mark.parametrize("direction", list(Direction))
    def test_zero_magnitude_is_identity(self, noon, new_york, unit, direction):
        for start in (noon, datetime(2024, 11, 3, 1, 30, fold=1, tzinfo=new_york)):
            assert offset(start, 0, unit, direction) is start

    @pytest.mark.parametrize("unit", list(TimeUnit))
    def test_negative_magnitude_equals_past(self, noon, unit):
        assert offset(noon, -2, unit) == offset(noon, 2, unit, Direction.PAST)

    @pytest.mark.parametrize("unit", list(TimeUnit))
    def test_deterministic(self, noon, unit):
        assert offset(noon, 7, unit) == offset(noon, 7, unit)

    def test_concurrent_calls_agree(self, noon, new_york):
        starts = [noon, datetime(2024, 7, 4, 9, 15, tzinfo=new_york)]
        jobs = [(start, unit) for start in starts for unit in TimeUnit] * 50
        expected = [offset(start, 7, unit) for start, unit in jobs]

        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(lambda job: offset(job[0], 7, job[1]), jobs))

        for got, want in zip(results, expected):
            assert got == want
            assert got.utcoffset() == want.utcoffset()
            assert got.tzinfo is want.tzinfo

    def test_dispatch(self, noon):
        assert offset(noon, 1, TimeUnit.MONTHS) == offset_calendar(noon, 1, TimeUnit.MONTHS)
        assert offset(noon, 1, TimeUnit.HOURS) == offset_fixed(noon, 1, TimeUnit.HOURS)


# ── DST-aware wall-clock arithmetic ───────────────────────────────────────────

class TestDaylightSaving:

    def test_offset_follows_season(self, new_york):
        start = datetime(2024, 1, 15, 9, 0, tzinfo=new_york)
        moved = offset_calendar(start, 6, TimeUnit.MONTHS)
        assert moved.replace(tzinfo=None) == datetime(2024, 7, 15, 9, 0)
        assert start.utcoffset() == timedelta(hours=-5)
        assert moved.utcoffset() == timedelta(hours=-4)

    def test_wall_time_in_gap_raises(self, new_york):
        start = datetime(2024, 2, 10, 2, 30, tzinfo=new_york)
        with pytest.raises(NonexistentTimeError):
            offset_calendar(start, 1, TimeUnit.MONTHS)

    def test_gap_error_is_value_error(self, new_york):
        start = datetime(2024, 2, 10, 2, 30, tzinfo=new_york)
        with pytest.raises(ValueError):
            offset_calendar(start, 1, TimeUnit.MONTHS)

    def test_ambiguous_takes_first_occurrence(self, new_york):
        start = datetime(2024, 10, 3, 1, 30, tzinfo=new_york)
        moved = offset_calendar(start, 1, TimeUnit.MONTHS)
        assert moved.replace(tzinfo=None) == datetime(2024, 11, 3, 1, 30)
        assert moved.fold == 0
        assert moved.utcoffset() == timedelta(hours=-4)


# ── Arbitrary durations ───────────────────────────────────────────────────────

class TestArbitrary:

    def test_forward(self, noon):
        moved = offset_arbitrary(noon, timedelta(days=15, hours=10))
        assert moved == utc(2024, 2, 15, 22, 0)

    def test_past(self, noon):
        moved = offset_arbitrary(noon, timedelta(days=15, hours=10), Direction.PAST)
        assert moved == utc(2024, 1, 16, 2, 0)

    def test_round_trip(self, noon, new_york):
        start = noon.astimezone(new_york)
        d = timedelta(days=40, minutes=7, microseconds=3)
        assert offset_arbitrary(offset_arbitrary(start, d), d, Direction.PAST) == start

    def test_elapsed_across_dst(self, new_york):
        start = datetime(2024, 3, 9, 22, 0, tzinfo=new_york)
        moved = offset_arbitrary(start, timedelta(hours=6))
        assert elapsed(start, moved) == timedelta(hours=6)
        assert moved.hour == 5

    def test_overflow(self):
        with pytest.raises(OffsetOverflowError):
            offset_arbitrary(utc(9999, 12, 31), timedelta(days=1))


# ── Clock-relative helpers ────────────────────────────────────────────────────

class TestRelativeToClock:

    def test_in_future(self, clock):
        assert in_future(5, TimeUnit.DAYS, clock=clock) == utc(2024, 2, 5, 12, 0)

    def test_in_past(self, clock):
        assert in_past(2, TimeUnit.MONTHS, clock=clock) == utc(2023, 11, 30, 12, 0)

    def test_explicit_reference_wins(self, clock):
        ref = utc(2020, 2, 29)
        assert in_future(1, TimeUnit.YEARS, reference=ref, clock=clock) == utc(2021, 2, 28)

    def test_from_now_and_ago(self, clock):
        assert offset_from_now(1, TimeUnit.MONTHS, clock=clock) == utc(2024, 2, 29, 12, 0)
        assert offset_ago(1, TimeUnit.HOURS, clock=clock) == utc(2024, 1, 31, 11, 0)

    def test_default_clock_is_local(self):
        before = datetime.now(timezone.utc)
        result = in_future(1, TimeUnit.HOURS)
        assert result.tzinfo is not None
        assert timedelta(minutes=59) < elapsed(before, result) < timedelta(minutes=61)


# ── Errors ────────────────────────────────────────────────────────────────────

class TestErrors:

    def test_year_overflow(self):
        with pytest.raises(OffsetOverflowError):
            offset(utc(9999, 6, 1), 1, TimeUnit.YEARS)

    def test_year_underflow(self):
        with pytest.raises(OffsetOverflowError):
            offset(utc(500, 6, 1), 1, TimeUnit.MILLENNIUMS, Direction.PAST)

    def test_fixed_overflow(self):
        with pytest.raises(OffsetOverflowError):
            offset(utc(9999, 12, 31, 23, 59), 1, TimeUnit.DAYS)

    def test_huge_magnitude(self, noon):
        with pytest.raises(OffsetOverflowError):
            offset(noon, 10 ** 12, TimeUnit.DAYS)
        with pytest.raises(OffsetOverflowError):
            offset(noon, 10 ** 12, TimeUnit.MILLENNIUMS)

    def test_overflow_is_builtin_overflow(self):
        with pytest.raises(OverflowError):
            offset(utc(9999, 6, 1), 1, TimeUnit.YEARS)

    @pytest.mark.parametrize("unit", list(TimeUnit))
    def test_naive_rejected(self, unit):
        with pytest.raises(NaiveDatetimeError):
            offset(datetime(2024, 1, 1), 1, unit)
