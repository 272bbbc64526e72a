"""
Period: a calendar-relative duration.

A period is a count of years, months, weeks, days, hours, minutes and
seconds, as written in an ISO 8601 duration string such as "P1Y2M3DT4H".
It has no calendar anchor of its own: how much elapsed time "P1M" stands
for depends on the datetime it is applied to.

The date part (years, months, weeks, days) moves the calendar fields of
a datetime. The time part (hours, minutes, seconds) is true elapsed time,
so adding "PT36H" across a daylight-saving transition lands on a
different wall-clock hour than adding "P1DT12H".

Example usage:

    To create a Period object use the constructor, or one of the
    functions of this module:

       p = Period(months=1, days=3)
       p = from_string("P1M3D")
       p = from_duration(datetime.timedelta(hours=27))
       p = between(start, end, ZoneInfo("Europe/Amsterdam"))

    Then apply it to a datetime, or render it back to a string:

       later = p.apply(start)
       text = str(p)

"""

import datetime as dt
import logging
import re
from dataclasses import (
    dataclass,
)

from time_period.exceptions import PeriodOverflowError, PeriodParsingError
from time_period.utils import (
    INT64_MAX,
    INT64_MIN,
    UTC,
    add_elapsed,
    civil_datetime,
    elapsed,
    localise,
    tdivmod,
)

logger = logging.getLogger(__name__)

_PERIOD_PATTERN = re.compile(
    r"P"
    r"(?:(?P<years>\d+)Y)?"
    r"(?:(?P<months>\d+)M)?"
    r"(?:(?P<days>\d+)D)?"
    r"(?:T"
    r"(?:(?P<hours>\d+)H)?"
    r"(?:(?P<minutes>\d+)M)?"
    r"(?:(?P<seconds>\d+)S)?"
    r")?",
    re.ASCII,
)
_WEEK_PATTERN = re.compile(r"P(?P<weeks>\d+)W", re.ASCII)

_DATE_DESIGNATORS = (("years", "Y"), ("months", "M"), ("weeks", "W"), ("days", "D"))
_TIME_DESIGNATORS = (("hours", "H"), ("minutes", "M"), ("seconds", "S"))


def _total_microseconds(delta: dt.timedelta) -> int:
    """Return total number of microseconds in a timedelta

    Args:
        delta: A datetime timedelta object

    Returns:
        The total number of microseconds in a timedelta
    """
    return (delta.days * 86_400 + delta.seconds) * 1_000_000 + delta.microseconds


def _str2int(num: str, period_string: str) -> int:
    """Convert a numeric submatch of a period string to an int that fits a signed 64-bit field.

    Args:
        num: The digits to convert
        period_string: The full period string, for error reporting

    Returns:
        The int value read from the digits

    Raises:
        PeriodParsingError: If the digits do not form an int in range.
    """
    try:
        value = int(num)
    except ValueError as err:
        raise PeriodParsingError(string=period_string) from err
    if value > INT64_MAX:
        raise PeriodParsingError(f"Bad period format: {period_string!r} ({num} is out of range)", period_string)
    return value


def _borrow(higher: int, lower: int, base: int, negative_base: int | None = None) -> tuple[int, int]:
    """Move one unit of a larger field into the adjacent smaller field when their signs disagree.

    Args:
        higher: The value of the larger unit
        lower: The value of the smaller unit
        base: How many smaller units make one larger unit
        negative_base: The amount taken off the smaller unit when the larger unit is negative (defaults to base)

    Returns:
        A tuple of the adjusted (higher, lower) values
    """
    if higher > 0 and lower < 0:
        return higher - 1, lower + base
    if higher < 0 and lower > 0:
        return higher + 1, lower - (base if negative_base is None else negative_base)
    return higher, lower


# ------------------------------------------------------------------------------
# Period
# ------------------------------------------------------------------------------
@dataclass(frozen=True)
class Period:
    """An ISO 8601 period of years, months, weeks, days, hours, minutes and seconds.

    Any field may hold any int, of either sign, and several may be non-zero at once (e.g. both weeks and days).
    A period straight from the constructor or a parser is "unnormalized"; ``normalize()`` folds it into canonical
    ranges.

    Period instances are immutable.

    Period instances are hashable and can be used in sets and as keys in dictionaries. Equality is field by field, so
    ``Period(seconds=90) != Period(minutes=1, seconds=30)``.
    """

    years: int = 0
    months: int = 0
    weeks: int = 0
    days: int = 0
    hours: int = 0
    minutes: int = 0
    seconds: int = 0

    @staticmethod
    def of_iso_duration(iso_8601_duration: str) -> "Period":
        """Return a Period from an ISO 8601 duration string

        Args:
            iso_8601_duration: An ISO 8601 duration string such as "P1Y2M3DT4H5M6S" or "P7W"

        Returns:
            A Period object

        Raises:
            PeriodParsingError if the string is not a valid period.
        """
        return from_string(iso_8601_duration)

    @staticmethod
    def of_timedelta(timedelta: dt.timedelta) -> "Period":
        """Return a normalized Period from a Python timedelta, truncated to whole seconds

        Args:
            timedelta: A timedelta object

        Returns:
            A Period object
        """
        return from_duration(timedelta)

    @staticmethod
    def between(start: dt.datetime, end: dt.datetime, zone: dt.tzinfo = UTC) -> "Period":
        """Return the Period from start to end, measured in the given time zone

        Args:
            start: The start datetime
            end: The end datetime
            zone: The time zone whose calendar is used (defaults to UTC)

        Returns:
            A Period object
        """
        return between(start, end, zone)

    @property
    def iso_duration(self) -> str:
        """Return the ISO 8601 duration string of this period.

        Each field is written only when non-zero, and the "T" separator only when there is a time part, so the
        zero period is the bare string "P". Weeks are written alongside the other date fields if they are set,
        which ``from_string`` will not accept back.
        """
        elems = ["P"]
        for name, designator in _DATE_DESIGNATORS:
            value = getattr(self, name)
            if value != 0:
                elems.append(f"{value}{designator}")
        if self.has_time_part():
            elems.append("T")
            for name, designator in _TIME_DESIGNATORS:
                value = getattr(self, name)
                if value != 0:
                    elems.append(f"{value}{designator}")
        return "".join(elems)

    def has_date_part(self) -> bool:
        """Return True if any of years, months, weeks or days is non-zero"""
        return self.years != 0 or self.months != 0 or self.weeks != 0 or self.days != 0

    def has_time_part(self) -> bool:
        """Return True if any of hours, minutes or seconds is non-zero"""
        return self.hours != 0 or self.minutes != 0 or self.seconds != 0

    def normalize(self) -> "Period":
        """Return this period folded into canonical ranges.

        Seconds carry into minutes, minutes into hours, hours into days, weeks become 7 days each and months carry
        into years. Days never carry into months or years, as the length of a month depends on the calendar.

        For a period with non-negative fields the result has 0 <= seconds < 60, 0 <= minutes < 60, 0 <= hours < 24,
        weeks == 0 and 0 <= months < 12. Division truncates toward zero, so negating a period before or after
        normalizing gives the same result.

        Returns:
            A new, normalized Period object
        """
        minutes, seconds = tdivmod(self.seconds, 60)
        hours, minutes = tdivmod(self.minutes + minutes, 60)
        days, hours = tdivmod(self.hours + hours, 24)
        years, months = tdivmod(self.months, 12)
        return Period(
            years=self.years + years,
            months=months,
            weeks=0,
            days=self.days + self.weeks * 7 + days,
            hours=hours,
            minutes=minutes,
            seconds=seconds,
        )

    def apply(self, datetime_obj: dt.datetime) -> dt.datetime:
        """Return the datetime reached by adding this period to the given datetime.

        Years, months, weeks and days are added to the calendar fields, keeping the wall-clock time, and a date
        past the end of a shorter month rolls over (31 January plus one month is 3 March, or 2 March in a leap year).
        Hours, minutes and seconds are then added as elapsed time, so the wall-clock result shifts by an hour when a
        daylight-saving transition is crossed.

        A naive datetime has no transitions, so for one the time part is plain wall-clock arithmetic.

        Args:
            datetime_obj: The datetime to shift

        Returns:
            The shifted datetime, in the same tzinfo as the input
        """
        shifted = civil_datetime(
            datetime_obj.year + self.years,
            datetime_obj.month + self.months,
            datetime_obj.day + self.weeks * 7 + self.days,
            datetime_obj.hour,
            datetime_obj.minute,
            datetime_obj.second,
            datetime_obj.microsecond,
            tzinfo=datetime_obj.tzinfo,
        )
        return add_elapsed(shifted, dt.timedelta(hours=self.hours, minutes=self.minutes, seconds=self.seconds))

    def __neg__(self) -> "Period":
        return Period(
            years=-self.years,
            months=-self.months,
            weeks=-self.weeks,
            days=-self.days,
            hours=-self.hours,
            minutes=-self.minutes,
            seconds=-self.seconds,
        )

    def __str__(self) -> str:
        return self.iso_duration


def between(start: dt.datetime, end: dt.datetime, zone: dt.tzinfo = UTC) -> Period:
    """Return the period between two datetimes, measured in the given time zone.

    The date part is the naive difference of the year, month and day fields of the two datetimes in the zone. The
    time part is the true elapsed time from start's wall-clock time on end's date to end itself, so it reflects any
    daylight-saving transition on that day. Finally, fields of opposite sign are evened out (negative seconds against
    positive minutes, minutes against hours, hours against days, months against years).

    Weeks are always 0, and sub-second differences are dropped. The result is negated when start and end are swapped.

    Example:
        2016-02-28 and 2016-03-31 are +(1 month and 3 days) apart, note the leap day of 2016
        2017-03-26 00:00 and 2017-03-26 06:00 Europe/Amsterdam are +(5 hours) apart, note the DST transition
        2017-03-26 00:00 and 2017-03-27 02:00 Europe/Amsterdam are +(1 day and 2 hours) apart
        2017-03-28 07:10 and 2017-03-28 08:05 are +(55 minutes) apart

    Args:
        start: The start datetime (naive values are taken as wall-clock time in the zone)
        end: The end datetime (naive values are taken as wall-clock time in the zone)
        zone: The time zone whose calendar is used (defaults to UTC)

    Returns:
        A Period object
    """
    start = localise(start, zone)
    end = localise(end, zone)
    if elapsed(start, end) == dt.timedelta(0):
        return Period()

    years = end.year - start.year
    months = end.month - start.month
    days = end.day - start.day

    adjusted = civil_datetime(
        start.year + years,
        start.month + months,
        start.day + days,
        start.hour,
        start.minute,
        start.second,
        tzinfo=zone,
    )
    diff = elapsed(adjusted, end)
    logger.debug("Between %s and %s: %d years, %d months, %d days and %s", start, end, years, months, days, diff)

    total_seconds, _ = tdivmod(_total_microseconds(diff), 1_000_000)
    hours, remainder = tdivmod(total_seconds, 3_600)
    minutes, seconds = tdivmod(remainder, 60)

    # The seconds/minutes step takes 24, not 60, off the seconds on its negative branch.
    minutes, seconds = _borrow(minutes, seconds, 60, negative_base=24)
    hours, minutes = _borrow(hours, minutes, 60)
    days, hours = _borrow(days, hours, 24)
    years, months = _borrow(years, months, 12)

    return Period(years=years, months=months, weeks=0, days=days, hours=hours, minutes=minutes, seconds=seconds)


def from_duration(duration: dt.timedelta | int) -> Period:
    """Return a normalized period from an elapsed duration, truncated toward zero to whole seconds.

    Args:
        duration: A timedelta, or an int number of nanoseconds

    Returns:
        A Period object

    Raises:
        PeriodOverflowError: If the number of seconds does not fit a signed 64-bit int.
    """
    if isinstance(duration, dt.timedelta):
        seconds, _ = tdivmod(_total_microseconds(duration), 1_000_000)
    elif isinstance(duration, int) and not isinstance(duration, bool):
        seconds, _ = tdivmod(duration, 1_000_000_000)
    else:
        raise TypeError(f"Expected a timedelta or int nanoseconds, got {type(duration).__name__}")

    if seconds > INT64_MAX or seconds < INT64_MIN:
        raise PeriodOverflowError(seconds=seconds)

    return Period(seconds=seconds).normalize()


def from_string(period_string: str) -> Period:
    """Return a period parsed from an ISO 8601 duration string.

    Two forms are accepted: "P[nY][nM][nD][T[nH][nM][nS]]", and "PnW" with weeks on their own. Each n is a
    plain run of decimal digits; signs, fractions and lower-case designators are rejected.

    Args:
        period_string: The string to parse

    Returns:
        A Period object, unnormalized, with the fields exactly as written

    Raises:
        PeriodParsingError: If the string matches neither form.
    """
    matcher = _WEEK_PATTERN.fullmatch(period_string) or _PERIOD_PATTERN.fullmatch(period_string)
    if matcher is None:
        logger.debug("Rejected period string %r", period_string)
        raise PeriodParsingError(string=period_string)

    fields = {name: _str2int(num, period_string) for name, num in matcher.groupdict().items() if num is not None}
    return Period(**fields)
