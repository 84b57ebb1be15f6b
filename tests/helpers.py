from datetime import datetime, timezone

from engine.clock import FixedClock
from engine.period import Period
from models.settings import PeriodSettings

# Wednesday
NOW = datetime(2024, 5, 15, 14, 30, 45, 123456, tzinfo=timezone.utc)


def utc(*args) -> datetime:
    return datetime(*args, tzinfo=timezone.utc)


def make_period(now: datetime = NOW, date_format: str = "%Y-%m-%d", tz: str = "UTC") -> Period:
    settings = PeriodSettings(normal_date_format=date_format, timezone=tz)
    return Period(settings, FixedClock(now))
