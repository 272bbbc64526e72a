from datetime import datetime

import polars as pl

from time_period import Period


def shifting_a_series() -> None:
    # [start_block_1]
    from time_period.series import apply_period

    date_times = pl.Series("time", [datetime(2023, 1, 31), datetime(2023, 6, 15), None])

    # Shift each value by one month and a quarter hour
    print(apply_period(date_times, Period(months=1, minutes=15)))
    print(apply_period(date_times, "P1W"))
    # [end_block_1]


def measuring_a_series() -> None:
    # [start_block_2]
    from time_period.series import parse_periods, periods_between

    starts = pl.Series("start", [datetime(2016, 2, 28), datetime(2017, 3, 28, 7, 10)])
    ends = pl.Series("end", [datetime(2016, 3, 31), datetime(2017, 3, 28, 8, 5)])

    periods = periods_between(starts, ends)
    print(periods)
    print(parse_periods(periods))
    # [end_block_2]
