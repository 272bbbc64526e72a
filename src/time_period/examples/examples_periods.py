from time_period import Period


def constructing_periods() -> None:
    # [start_block_1]
    from time_period import Period

    # Create periods from their fields
    Period(years=1)
    Period(months=3)
    Period(weeks=2)
    Period(days=1, hours=12)
    Period(minutes=15)
    Period(seconds=1)
    # [end_block_1]


def iso_periods() -> None:
    # [start_block_2]
    from time_period import from_string

    # Using ISO 8601 duration strings
    from_string("P1Y")
    from_string("P3M")
    from_string("P2W")
    from_string("P1DT12H")
    from_string("PT15M")
    from_string("P6Y5M4DT3H2M1S")

    # And back again
    print(Period(years=6, months=5, days=4, hours=3, minutes=2, seconds=1))
    # [end_block_2]


def timedelta_periods() -> None:
    # [start_block_3]
    from datetime import timedelta

    from time_period import from_duration

    # Using timedelta objects, truncated to whole seconds and normalized
    print(from_duration(timedelta(hours=27, minutes=74, seconds=63)))
    print(from_duration(timedelta(seconds=1, microseconds=999_999)))
    # [end_block_3]


def normalizing_periods() -> None:
    # [start_block_4]
    period = Period(years=1, months=15, weeks=2, days=31, hours=27, minutes=73, seconds=91)

    # Carry seconds into minutes, minutes into hours, hours and weeks into days, months into years
    print(period.normalize())
    # [end_block_4]


def calendar_helpers() -> None:
    # [start_block_5]
    from zoneinfo import ZoneInfo

    from time_period import days_in_month, days_in_year

    print(days_in_year(2016))
    print(days_in_month(2017, 2))

    # March 2017 in Amsterdam lost an hour to summer time, so holds 30 whole 24-hour days
    print(days_in_month(2017, 3, ZoneInfo("Europe/Amsterdam")))
    # [end_block_5]
