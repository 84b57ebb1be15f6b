from datetime import date, timezone

from dates.calendar_math import (beginning_of_day, end_of_day, elapsed_days, first_day_of_month,
                                 last_day_of_month, quarter_end, quarter_first_month, quarter_start,
                                 shift_months, shift_years, week_start)
from helpers import utc


def test_day_boundaries():
    start = beginning_of_day(date(2024, 5, 15), timezone.utc)
    end = end_of_day(date(2024, 5, 15), timezone.utc)
    assert start == utc(2024, 5, 15, 0, 0, 0)
    assert end == utc(2024, 5, 15, 23, 59, 59)
    assert end.microsecond == 0


def test_week_starts_on_monday():
    assert week_start(date(2024, 5, 15)) == date(2024, 5, 13)
    assert week_start(date(2024, 5, 13)) == date(2024, 5, 13)
    assert week_start(date(2024, 5, 19)) == date(2024, 5, 13)
    # week spanning a year boundary
    assert week_start(date(2025, 1, 1)) == date(2024, 12, 30)


def test_month_boundaries():
    assert first_day_of_month(date(2024, 2, 10)) == date(2024, 2, 1)
    assert last_day_of_month(date(2024, 2, 10)) == date(2024, 2, 29)
    assert last_day_of_month(date(2023, 2, 10)) == date(2023, 2, 28)
    assert last_day_of_month(date(2024, 12, 5)) == date(2024, 12, 31)
    assert last_day_of_month(date(2024, 4, 30)) == date(2024, 4, 30)


def test_quarter_first_month():
    assert [quarter_first_month(m) for m in range(1, 13)] == [1, 1, 1, 4, 4, 4, 7, 7, 7, 10, 10, 10]


def test_quarter_boundaries():
    assert quarter_start(date(2024, 5, 15)) == date(2024, 4, 1)
    assert quarter_end(date(2024, 5, 15)) == date(2024, 6, 30)
    assert quarter_start(date(2024, 3, 31)) == date(2024, 1, 1)
    assert quarter_end(date(2024, 2, 1)) == date(2024, 3, 31)
    assert quarter_end(date(2024, 8, 20)) == date(2024, 9, 30)
    assert quarter_end(date(2024, 11, 2)) == date(2024, 12, 31)


def test_shift_months_clamps_day():
    assert shift_months(date(2024, 3, 31), -1) == date(2024, 2, 29)
    assert shift_months(date(2024, 5, 31), -3) == date(2024, 2, 29)
    assert shift_months(date(2024, 1, 15), -1) == date(2023, 12, 15)


def test_shift_years_from_leap_day():
    assert shift_years(date(2024, 2, 29), -1) == date(2023, 2, 28)


def test_elapsed_days_counts_calendar_days():
    assert elapsed_days(utc(2024, 5, 15, 0, 0, 0), utc(2024, 5, 15, 23, 59, 59)) == 0
    assert elapsed_days(utc(2024, 5, 13, 0, 0, 0), utc(2024, 5, 19, 23, 59, 59)) == 6
    assert elapsed_days(utc(2024, 5, 14, 23, 0, 0), utc(2024, 5, 15, 1, 0, 0)) == 1
