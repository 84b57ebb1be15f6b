from datetime import date, datetime, time, timedelta, tzinfo
from dateutil.relativedelta import relativedelta

START_OF_DAY = time(0, 0, 0)
END_OF_DAY = time(23, 59, 59)


def beginning_of_day(day: date, tz: tzinfo) -> datetime:
    return datetime.combine(day, START_OF_DAY, tzinfo=tz)


def end_of_day(day: date, tz: tzinfo) -> datetime:
    # 23:59:59 with no sub-second part
    return datetime.combine(day, END_OF_DAY, tzinfo=tz)


def first_day_of_month(day: date) -> date:
    return day.replace(day=1)


def last_day_of_month(day: date) -> date:
    return first_day_of_month(day) + relativedelta(months=1) - timedelta(days=1)


def week_start(day: date) -> date:
    """Monday of the ISO week containing ``day``"""
    return day - timedelta(days=day.weekday())


def quarter_first_month(month: int) -> int:
    return (month - 1) // 3 * 3 + 1


def quarter_start(day: date) -> date:
    return date(day.year, quarter_first_month(day.month), 1)


def quarter_end(day: date) -> date:
    return last_day_of_month(quarter_start(day) + relativedelta(months=2))


def shift_months(day: date, months: int) -> date:
    """Move by whole months, clamping the day (Mar 31 - 1 month = Feb 28/29)"""
    return day + relativedelta(months=months)


def shift_years(day: date, years: int) -> date:
    return day + relativedelta(years=years)


def elapsed_days(start: datetime, end: datetime) -> int:
    """Calendar-day difference, not a duration in seconds"""
    return (end.date() - start.date()).days
