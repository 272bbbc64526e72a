"""
Time-Period Utility Module.

This module provides the calendar helpers used across the time_period package for working with civil (wall-clock)
dates in a given time zone, and for moving between civil time and true elapsed time.

Two kinds of arithmetic are kept strictly apart:

- Calendar arithmetic works on the year/month/day fields of a wall-clock datetime and lets out-of-range fields roll
  over into the next larger field (the 13th month of 2016 is January 2017, the 32nd of January is the 1st of February).
- Elapsed arithmetic works on absolute instants, so it sees the hour that is lost or gained at a daylight-saving
  transition.
"""

import datetime as dt

UTC = dt.timezone.utc

INT64_MAX = 2**63 - 1
INT64_MIN = -(2**63)

_ONE_DAY = dt.timedelta(days=1)


def tdivmod(numerator: int, denominator: int) -> tuple[int, int]:
    """Integer division truncating toward zero.

    Unlike the built-in ``divmod``, which floors, the remainder always takes the sign of the numerator, so that
    ``tdivmod(-91, 60) == (-1, -31)`` mirrors ``tdivmod(91, 60) == (1, 31)``.

    Args:
        numerator: The number to divide
        denominator: The (non-zero) number to divide by

    Returns:
        A tuple of (quotient, remainder)
    """
    quotient = abs(numerator) // abs(denominator)
    if (numerator < 0) != (denominator < 0):
        quotient = -quotient
    return quotient, numerator - quotient * denominator


def civil_datetime(
    year: int,
    month: int,
    day: int,
    hour: int = 0,
    minute: int = 0,
    second: int = 0,
    microsecond: int = 0,
    tzinfo: dt.tzinfo | None = None,
) -> dt.datetime:
    """Build a datetime from calendar fields, rolling over any month or day outside its natural range.

    Months are folded into the year first, then the day is counted forwards (or backwards) from the first of the
    resulting month. So ``civil_datetime(2017, 1, 31 + 28)`` is the 28th of February 2017, and
    ``civil_datetime(2016, 14, 1)`` is the 1st of February 2017.

    In a zone with transitions, the offset is the one in force at the wall-clock time read as UTC, read once more at
    the resulting instant if it does not hold there. A wall time skipped by a spring-forward transition therefore takes
    the offset from before the transition (02:30 on the spring-forward night in Amsterdam is 03:30 summer time), and a
    wall time repeated by a fall-back transition resolves to the later of its two occurrences in zones east of UTC.

    Args:
        year: The calendar year
        month: The month, where values outside 1-12 roll into neighbouring years
        day: The day of the month, where values outside the month roll into neighbouring months
        hour: The hour of the day (0-23)
        minute: The minute of the hour (0-59)
        second: The second of the minute (0-59)
        microsecond: The microsecond of the second
        tzinfo: The time zone of the wall-clock fields, or None for a naive datetime

    Returns:
        The datetime object
    """
    new_year, month0 = divmod(year * 12 + month - 1, 12)
    date = dt.date(new_year, month0 + 1, 1) + dt.timedelta(days=day - 1)
    naive = dt.datetime(date.year, date.month, date.day, hour, minute, second, microsecond)
    if tzinfo is None:
        return naive
    return _resolve_wall_time(naive, tzinfo)


def _resolve_wall_time(naive: dt.datetime, zone: dt.tzinfo) -> dt.datetime:
    """Return the aware datetime for a wall-clock time in a zone, resolving gaps and overlaps.

    Args:
        naive: The wall-clock fields
        zone: The time zone the fields are read in

    Returns:
        An aware datetime in the zone
    """
    offset = naive.replace(tzinfo=UTC).astimezone(zone).utcoffset()
    local = (naive - offset).replace(tzinfo=UTC).astimezone(zone)
    if local.utcoffset() != offset:
        local = (naive - local.utcoffset()).replace(tzinfo=UTC).astimezone(zone)
    return local


def localise(datetime_obj: dt.datetime, zone: dt.tzinfo) -> dt.datetime:
    """Express a datetime as wall-clock time in the given zone.

    An aware datetime is converted to the zone. A naive datetime is taken to already be wall-clock time in the zone.

    Args:
        datetime_obj: The input datetime object
        zone: The target time zone

    Returns:
        An aware datetime object in the given zone
    """
    if datetime_obj.tzinfo is None:
        return datetime_obj.replace(tzinfo=zone)
    return datetime_obj.astimezone(zone)


def elapsed(start: dt.datetime, end: dt.datetime) -> dt.timedelta:
    """Return the true elapsed time from start to end.

    Subtracting two aware datetimes that share a tzinfo compares their wall-clock fields only, so aware values are
    measured in UTC.

    Args:
        start: The start datetime
        end: The end datetime

    Returns:
        The elapsed time, negative when end precedes start
    """
    if start.tzinfo is None or end.tzinfo is None:
        return end - start
    return end.astimezone(UTC) - start.astimezone(UTC)


def add_elapsed(datetime_obj: dt.datetime, delta: dt.timedelta) -> dt.datetime:
    """Return the datetime that lies a true elapsed time after (or before) the given one.

    The result is expressed in the same tzinfo as the input.

    Args:
        datetime_obj: The datetime to shift
        delta: The elapsed time to add

    Returns:
        The shifted datetime object
    """
    if datetime_obj.tzinfo is None:
        return datetime_obj + delta
    return (datetime_obj.astimezone(UTC) + delta).astimezone(datetime_obj.tzinfo)


def days_in_year(year: int, zone: dt.tzinfo = UTC) -> int:
    """Return the number of days in the given year.

    Counted as the whole 24-hour blocks elapsed between midnight on the 1st of January of the year and midnight on the
    1st of January of the following year, in the given time zone.

    Args:
        year: The calendar year
        zone: The time zone to measure in (defaults to UTC)

    Returns:
        The number of days (365 or 366 in any zone without a transition at new year)
    """
    start = civil_datetime(year, 1, 1, tzinfo=zone)
    end = civil_datetime(year + 1, 1, 1, tzinfo=zone)
    return elapsed(start, end) // _ONE_DAY


def days_in_month(year: int, month: int, zone: dt.tzinfo = UTC) -> int:
    """Return the number of days in the given month of the given year.

    Counted as the whole 24-hour blocks elapsed between midnight on the 1st of the month and midnight on the 1st of the
    following month, in the given time zone. A month that loses an hour to a daylight-saving transition is therefore
    one day shorter than its calendar length.

    Months outside 1-12 roll over into neighbouring years, e.g. month 13 of 2016 is January 2017.

    Args:
        year: The calendar year
        month: The month of the year
        zone: The time zone to measure in (defaults to UTC)

    Returns:
        The number of days
    """
    start = civil_datetime(year, month, 1, tzinfo=zone)
    end = civil_datetime(year, month + 1, 1, tzinfo=zone)
    return elapsed(start, end) // _ONE_DAY
