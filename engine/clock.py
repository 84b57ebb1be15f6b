from abc import ABC, abstractmethod
from datetime import datetime, timezone, tzinfo
from typing import Optional


class Clock(ABC):
    """Source of the current instant for period calculations"""

    @abstractmethod
    def now(self) -> datetime:
        """Return the current time as a timezone aware datetime"""
        pass


class SystemClock(Clock):
    def __init__(self, tz: Optional[tzinfo] = None):
        self.tz = tz or timezone.utc

    def now(self) -> datetime:
        return datetime.now(self.tz)


class FixedClock(Clock):
    """Clock frozen at a single instant"""

    def __init__(self, instant: datetime):
        if instant.tzinfo is None:
            raise ValueError("FixedClock needs a timezone aware datetime")
        self.instant = instant

    def now(self) -> datetime:
        return self.instant
