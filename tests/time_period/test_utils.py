"""
Unit tests for the utils module
"""

import calendar
import datetime
from zoneinfo import ZoneInfo

import pytest

from time_period.utils import (
    add_elapsed,
    civil_datetime,
    days_in_month,
    days_in_year,
    elapsed,
    localise,
    tdivmod,
)

TZ_UTC = datetime.timezone.utc
AMSTERDAM = ZoneInfo("Europe/Amsterdam")


class TestTdivmod:
    """Unit tests for the tdivmod function."""

    @pytest.mark.parametrize(
        "numerator,denominator,expected",
        [
            (91, 60, (1, 31)),
            (-91, 60, (-1, -31)),
            (91, -60, (-1, 31)),
            (-91, -60, (1, -31)),
            (59, 60, (0, 59)),
            (-59, 60, (0, -59)),
            (0, 24, (0, 0)),
            (120, 60, (2, 0)),
        ],
        ids=["positive", "negative", "negative divisor", "both negative", "below", "negative below", "zero", "exact"],
    )
    def test_tdivmod(self, numerator: int, denominator: int, expected: tuple[int, int]) -> None:
        assert tdivmod(numerator, denominator) == expected


class TestCivilDatetime:
    """Unit tests for the civil_datetime function."""

    @pytest.mark.parametrize(
        "fields,expected",
        [
            ((2017, 3, 7), datetime.datetime(2017, 3, 7)),
            ((2016, 13, 1), datetime.datetime(2017, 1, 1)),
            ((2016, 14, 1), datetime.datetime(2017, 2, 1)),
            ((2017, 0, 1), datetime.datetime(2016, 12, 1)),
            ((2017, -11, 1), datetime.datetime(2016, 1, 1)),
            ((2017, 2, 29), datetime.datetime(2017, 3, 1)),
            ((2016, 2, 30), datetime.datetime(2016, 3, 1)),
            ((2017, 1, 0), datetime.datetime(2016, 12, 31)),
            ((2017, 1, 59), datetime.datetime(2017, 2, 28)),
            ((2017, 12, 32), datetime.datetime(2018, 1, 1)),
        ],
        ids=[
            "in range",
            "month 13",
            "month 14",
            "month 0",
            "negative month",
            "day past february",
            "day past leap february",
            "day 0",
            "day count into next month",
            "day past new year",
        ],
    )
    def test_rollover(self, fields: tuple[int, int, int], expected: datetime.datetime) -> None:
        assert civil_datetime(*fields) == expected

    def test_keeps_time_and_zone(self) -> None:
        result = civil_datetime(2017, 3, 26, 6, 30, 15, 999, tzinfo=AMSTERDAM)
        assert result == datetime.datetime(2017, 3, 26, 6, 30, 15, 999, tzinfo=AMSTERDAM)
        assert result.tzinfo is AMSTERDAM

    def test_repeated_hour_takes_later_offset(self) -> None:
        result = civil_datetime(2017, 10, 29, 2, 30, tzinfo=AMSTERDAM)
        assert result == datetime.datetime(2017, 10, 29, 1, 30, tzinfo=TZ_UTC)
        assert result.utcoffset() == datetime.timedelta(hours=1)
        assert (result.hour, result.minute) == (2, 30)

    def test_skipped_hour_takes_earlier_offset(self) -> None:
        """02:30 does not exist on the spring-forward night, so it is read with the winter offset."""
        result = civil_datetime(2017, 3, 26, 2, 30, tzinfo=AMSTERDAM)
        assert result == datetime.datetime(2017, 3, 26, 1, 30, tzinfo=TZ_UTC)
        assert result.hour == 3

    def test_offsets_either_side_of_transitions(self) -> None:
        assert civil_datetime(2017, 10, 29, 1, 30, tzinfo=AMSTERDAM).utcoffset() == datetime.timedelta(hours=2)
        assert civil_datetime(2017, 10, 29, 3, 30, tzinfo=AMSTERDAM).utcoffset() == datetime.timedelta(hours=1)
        assert civil_datetime(2017, 3, 26, 1, 30, tzinfo=AMSTERDAM).utcoffset() == datetime.timedelta(hours=1)
        assert civil_datetime(2017, 3, 26, 3, 30, tzinfo=AMSTERDAM).utcoffset() == datetime.timedelta(hours=2)


class TestLocalise:
    """Unit tests for the localise function."""

    def test_naive(self) -> None:
        result = localise(datetime.datetime(2017, 3, 26, 6), AMSTERDAM)
        assert result.tzinfo is AMSTERDAM
        assert result.hour == 6

    def test_aware(self) -> None:
        result = localise(datetime.datetime(2017, 3, 26, 4, tzinfo=TZ_UTC), AMSTERDAM)
        assert result.tzinfo is AMSTERDAM
        assert result.hour == 6


class TestElapsed:
    """Unit tests for the elapsed function."""

    def test_same_zone_across_transition(self) -> None:
        """Two wall-clock times in one zone are six hours apart on the clock but five in elapsed time."""
        start = datetime.datetime(2017, 3, 26, tzinfo=AMSTERDAM)
        end = datetime.datetime(2017, 3, 26, 6, tzinfo=AMSTERDAM)
        assert elapsed(start, end) == datetime.timedelta(hours=5)
        assert elapsed(end, start) == datetime.timedelta(hours=-5)

    def test_different_zones(self) -> None:
        start = datetime.datetime(2017, 3, 26, tzinfo=AMSTERDAM)
        end = datetime.datetime(2017, 3, 26, tzinfo=TZ_UTC)
        assert elapsed(start, end) == datetime.timedelta(hours=1)

    def test_naive(self) -> None:
        start = datetime.datetime(2017, 3, 26)
        end = datetime.datetime(2017, 3, 26, 6)
        assert elapsed(start, end) == datetime.timedelta(hours=6)


class TestAddElapsed:
    """Unit tests for the add_elapsed function."""

    def test_across_transition(self) -> None:
        start = datetime.datetime(2017, 3, 26, tzinfo=AMSTERDAM)
        result = add_elapsed(start, datetime.timedelta(hours=5))
        assert result == datetime.datetime(2017, 3, 26, 6, tzinfo=AMSTERDAM)
        assert result.tzinfo is AMSTERDAM
        assert result.hour == 6

    def test_naive(self) -> None:
        start = datetime.datetime(2017, 3, 26)
        assert add_elapsed(start, datetime.timedelta(hours=5)) == datetime.datetime(2017, 3, 26, 5)


class TestDaysInYear:
    """Unit tests for the days_in_year function."""

    @pytest.mark.parametrize(
        "year,expected",
        [(2016, 366), (2017, 365), (2000, 366), (1900, 365), (2100, 365), (2400, 366)],
        ids=["leap", "common", "leap century", "common century", "common century 2100", "leap century 2400"],
    )
    def test_days_in_year(self, year: int, expected: int) -> None:
        assert days_in_year(year) == expected
        assert days_in_year(year, TZ_UTC) == expected

    def test_leap_years(self) -> None:
        for year in range(1890, 2110):
            assert (days_in_year(year) == 366) is calendar.isleap(year), year

    def test_in_zone(self) -> None:
        assert days_in_year(2016, AMSTERDAM) == 366
        assert days_in_year(2017, AMSTERDAM) == 365


class TestDaysInMonth:
    """Unit tests for the days_in_month function."""

    @pytest.mark.parametrize(
        "year,month,expected",
        [
            (2016, 2, 29),
            (2017, 2, 28),
            (2017, 8, 31),
            (2017, 4, 30),
            (2017, 12, 31),
            (2016, 13, 31),
            (2017, 0, 31),
            (2016, 14, 28),
        ],
        ids=[
            "leap february",
            "common february",
            "august",
            "april",
            "december",
            "month 13 is next january",
            "month 0 is previous december",
            "month 14 is next february",
        ],
    )
    def test_days_in_month(self, year: int, month: int, expected: int) -> None:
        assert days_in_month(year, month) == expected

    def test_gregorian_lengths(self) -> None:
        for year in (1900, 2000, 2016, 2017):
            for month in range(1, 13):
                assert days_in_month(year, month) == calendar.monthrange(year, month)[1], (year, month)

    @pytest.mark.parametrize(
        "month,expected",
        [(3, 30), (10, 31), (6, 30), (1, 31)],
        ids=["spring forward", "fall back", "summer", "winter"],
    )
    def test_in_zone(self, month: int, expected: int) -> None:
        """A month that loses an hour to summer time holds one fewer whole 24-hour day."""
        assert days_in_month(2017, month, AMSTERDAM) == expected
