from datetime import datetime
from zoneinfo import ZoneInfo

from time_period import Period, between

AMSTERDAM = ZoneInfo("Europe/Amsterdam")


def measuring_periods() -> None:
    # [start_block_1]
    # The leap day of 2016 is counted by the calendar
    start = datetime(2016, 2, 28, tzinfo=AMSTERDAM)
    end = datetime(2016, 3, 31, tzinfo=AMSTERDAM)
    print(between(start, end, AMSTERDAM))
    print(between(end, start, AMSTERDAM))
    # [end_block_1]


def periods_across_dst() -> None:
    # [start_block_2]
    # Clocks went forward at 02:00 on 26 March 2017, so only 5 hours passed between midnight and 06:00
    start = datetime(2017, 3, 26, tzinfo=AMSTERDAM)
    end = datetime(2017, 3, 26, 6, tzinfo=AMSTERDAM)
    print(between(start, end, AMSTERDAM))
    # [end_block_2]


def applying_periods() -> None:
    # [start_block_3]
    start = datetime(2017, 3, 26, tzinfo=AMSTERDAM)

    # One calendar day then 12 hours lands at noon...
    print(Period(days=1, hours=12).apply(start))

    # ...but 36 elapsed hours crosses the transition and lands at 13:00
    print(Period(hours=36).apply(start))

    # Dates past the end of a shorter month roll over
    print(Period(months=1).apply(datetime(2017, 1, 31)))
    # [end_block_3]


def periods_across_fall_back() -> None:
    # [start_block_4]
    # Clocks went back at 03:00 on 29 October 2017, so 02:30 happened twice. A wall time built by calendar
    # arithmetic takes the second, winter-time reading
    start = datetime(2017, 10, 28, 2, 30, tzinfo=AMSTERDAM)
    end = datetime(2017, 10, 29, 4, tzinfo=AMSTERDAM)
    print(between(start, end, AMSTERDAM))
    print(between(end, start, AMSTERDAM))
    print(Period(days=1).apply(start).isoformat())
    # [end_block_4]
