from enum import Enum
from datetime import datetime
from typing import List
from pydantic import BaseModel, ConfigDict

class PeriodType(Enum):
    NONE = 0
    MONTH_TO_DATE = 1
    MONTH_PREVIOUS = 2
    QUARTER_TO_DATE = 3
    QUARTER_PREVIOUS = 4
    YEAR_TO_DATE = 5
    YEAR_PREVIOUS = 6
    WEEK_TO_DATE = 7
    WEEK_PREVIOUS = 8
    WEEK_LAST_TWO = 9
    ARBITRARY_DATES = 10

    @property
    def label(self) -> str:
        match self:
            case PeriodType.NONE:
                return "None"
            case PeriodType.WEEK_TO_DATE:
                return "This Week"
            case PeriodType.WEEK_PREVIOUS:
                return "Last Week"
            case PeriodType.WEEK_LAST_TWO:
                return "Last Two Weeks"
            case PeriodType.MONTH_TO_DATE:
                return "This Month"
            case PeriodType.MONTH_PREVIOUS:
                return "Last Month"
            case PeriodType.QUARTER_TO_DATE:
                return "This Quarter"
            case PeriodType.QUARTER_PREVIOUS:
                return "Last Quarter"
            case PeriodType.YEAR_TO_DATE:
                return "Year to Date"
            case PeriodType.YEAR_PREVIOUS:
                return "Last Year"
            case PeriodType.ARBITRARY_DATES:
                return "Select Dates"

    @classmethod
    def menu(cls) -> List["PeriodType"]:
        """Members in the order the period selector lists them"""
        return [
            cls.NONE,
            cls.WEEK_TO_DATE,
            cls.WEEK_PREVIOUS,
            cls.WEEK_LAST_TWO,
            cls.MONTH_TO_DATE,
            cls.MONTH_PREVIOUS,
            cls.QUARTER_TO_DATE,
            cls.QUARTER_PREVIOUS,
            cls.YEAR_TO_DATE,
            cls.YEAR_PREVIOUS,
            cls.ARBITRARY_DATES,
        ]


class PeriodRange(BaseModel):
    """Snapshot of a computed period, for display layers"""
    model_config = ConfigDict(frozen=True)

    period_type: PeriodType
    start: datetime
    end: datetime
    date_format: str
    start_formatted: str
    end_formatted: str
    elapsed_days: int

    @property
    def start_timestamp(self) -> int:
        return int(self.start.timestamp())

    @property
    def end_timestamp(self) -> int:
        return int(self.end.timestamp())
