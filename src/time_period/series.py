"""
Time-Period Series Module.

This module applies the period engine element by element to `Polars` Series, so that whole columns of datetimes or
period strings can be handled in one call:

- ``apply_period`` shifts every datetime of a Series by a Period.
- ``periods_between`` measures the Period between two Series of datetimes, as ISO 8601 strings.
- ``parse_periods`` reads a Series of ISO 8601 strings into a Struct Series of period fields.

Null elements pass through as nulls.
"""

import datetime as dt
from dataclasses import asdict, fields

import polars as pl

from time_period.exceptions import ColumnTypeError
from time_period.period import Period, between, from_string
from time_period.utils import UTC

PERIOD_STRUCT = pl.Struct({field.name: pl.Int64 for field in fields(Period)})


def _check_dtype(series: pl.Series, dtype: type[pl.DataType]) -> None:
    """Check that a Series has the expected data type.

    Args:
        series: The Series to check
        dtype: The expected `Polars` data type class

    Raises:
        ColumnTypeError: If the Series is of a different type.
    """
    if series.dtype != dtype:
        raise ColumnTypeError(f"Series '{series.name}' must be of type {dtype}, not {series.dtype}")


def apply_period(date_times: pl.Series, period: Period | str) -> pl.Series:
    """Apply a period to every value in a Series of datetimes.

    Args:
        date_times: A Datetime Series, with or without a time zone.
        period: The Period (or ISO 8601 duration string) to add to each datetime.

    Returns:
        A Datetime Series of the same name and type, with each value shifted by the period.
    """
    _check_dtype(date_times, pl.Datetime)
    if isinstance(period, str):
        period = from_string(period)

    shifted = [None if value is None else period.apply(value) for value in date_times]
    return pl.Series(date_times.name, shifted, dtype=date_times.dtype)


def periods_between(starts: pl.Series, ends: pl.Series, zone: dt.tzinfo = UTC) -> pl.Series:
    """Return the period between each pair of datetimes in two Series.

    Args:
        starts: A Datetime Series of start values.
        ends: A Datetime Series of end values, the same length as ``starts``.
        zone: The time zone whose calendar is used (defaults to UTC). Naive values are taken as wall-clock time in it.

    Returns:
        A String Series of ISO 8601 periods, named after ``starts``.
    """
    _check_dtype(starts, pl.Datetime)
    _check_dtype(ends, pl.Datetime)
    if starts.len() != ends.len():
        raise ValueError(f"Series lengths differ: {starts.len()} != {ends.len()}")

    periods = [
        None if start is None or end is None else str(between(start, end, zone)) for start, end in zip(starts, ends)
    ]
    return pl.Series(starts.name, periods, dtype=pl.String)


def parse_periods(texts: pl.Series) -> pl.Series:
    """Parse a Series of ISO 8601 duration strings.

    Args:
        texts: A String Series of periods, e.g. "P1Y2M", "PT15M" or "P2W".

    Returns:
        A Struct Series with one Int64 field per period field (years, months, weeks, days, hours, minutes, seconds).

    Raises:
        PeriodParsingError: If any non-null element is not a valid period.
    """
    _check_dtype(texts, pl.String)
    parsed = [None if text is None else asdict(from_string(text)) for text in texts]
    return pl.Series(texts.name, parsed, dtype=PERIOD_STRUCT)
