from datetime import date, datetime, timedelta
from typing import Mapping, Optional, Union
import logging

from models.period import PeriodRange, PeriodType
from models.settings import PeriodSettings
from engine.clock import Clock, SystemClock
from dates.calendar_math import (beginning_of_day, end_of_day, elapsed_days, first_day_of_month,
                                 last_day_of_month, quarter_end, quarter_start, shift_months,
                                 shift_years, week_start)

Reference = Union[date, datetime]


class Period:
    """Start and end dates of a reporting period.

    A new instance covers today: start is the beginning of today and end is
    the current instant. The ``set_*`` methods replace both bounds in place;
    callers read the result through the ``get_*`` accessors or ``to_range()``.

    Every end bound is clamped so it never lies after "now", which is read
    from the clock each time it is needed.
    """

    def __init__(self, settings: Optional[PeriodSettings] = None, clock: Optional[Clock] = None,
                 period_type: PeriodType = PeriodType.NONE):
        self.settings = settings or PeriodSettings()
        self.tz = self.settings.tzinfo
        self.clock = clock or SystemClock(self.tz)
        self.format = self.settings.normal_date_format
        self.period_type = period_type

        now = self._now()
        self.start: datetime = beginning_of_day(now.date(), self.tz)
        self.end: datetime = now.replace(microsecond=0)

    def set_week(self, reference: Reference, weeks: int = 1) -> None:
        """Monday of the reference week through Sunday ``weeks - 1`` weeks later"""
        monday = week_start(self._as_date(reference))
        sunday = monday + timedelta(days=6 + 7 * (weeks - 1))
        self.start = beginning_of_day(monday, self.tz)
        self._set_end(sunday)

    def set_this_week(self, reference: Optional[Reference] = None) -> None:
        self.set_week(self._reference(reference))

    def set_last_week(self, weeks: int = 1, reference: Optional[Reference] = None) -> None:
        self.set_week(self._reference(reference) - timedelta(weeks=1), weeks)

    def set_week_to_date(self, reference: Optional[Reference] = None) -> None:
        self.set_this_week(reference)
        self._clamp_to_date()

    def set_month(self, reference: Reference) -> None:
        day = self._as_date(reference)
        self.start = beginning_of_day(first_day_of_month(day), self.tz)
        self._set_end(last_day_of_month(day))

    def set_this_month(self, reference: Optional[Reference] = None) -> None:
        self.set_month(self._reference(reference))

    def set_last_month(self, reference: Optional[Reference] = None) -> None:
        self.set_month(shift_months(self._reference(reference), -1))

    def set_month_to_date(self, reference: Optional[Reference] = None) -> None:
        self.set_this_month(reference)
        self._clamp_to_date()

    def set_quarter(self, reference: Reference) -> None:
        day = self._as_date(reference)
        self.start = beginning_of_day(quarter_start(day), self.tz)
        self._set_end(quarter_end(day))

    def set_this_quarter(self, reference: Optional[Reference] = None) -> None:
        self.set_quarter(self._reference(reference))

    def set_last_quarter(self, reference: Optional[Reference] = None) -> None:
        self.set_quarter(shift_months(self._reference(reference), -3))

    def set_quarter_to_date(self, reference: Optional[Reference] = None) -> None:
        self.set_this_quarter(reference)
        self._clamp_to_date()

    def set_year(self, reference: Reference) -> None:
        day = self._as_date(reference)
        self.start = beginning_of_day(date(day.year, 1, 1), self.tz)
        self._set_end(date(day.year, 12, 31))

    def set_this_year(self, reference: Optional[Reference] = None) -> None:
        self.set_year(self._reference(reference))

    def set_last_year(self, reference: Optional[Reference] = None) -> None:
        self.set_year(shift_years(self._reference(reference), -1))

    def set_year_to_date(self, reference: Optional[Reference] = None) -> None:
        self.set_this_year(reference)
        self._clamp_to_date()

    def get_start_timestamp(self) -> int:
        return int(self.start.timestamp())

    def get_end_timestamp(self) -> int:
        return int(self.end.timestamp())

    def get_start_formatted(self) -> str:
        return self.start.strftime(self.format) if self.period_type != PeriodType.NONE else ''

    def get_end_formatted(self) -> str:
        return self.end.strftime(self.format) if self.period_type != PeriodType.NONE else ''

    def get_elapsed_days(self) -> int:
        return elapsed_days(self.start, self.end)

    def apply_selection(self, period_type: PeriodType, reference: Optional[Reference] = None,
                        start_override: Optional[str] = None, end_override: Optional[str] = None) -> None:
        """Set the dates for ``period_type`` and make it the active type.

        ``reference`` anchors the named periods and defaults to today. The
        overrides are only read for ``ARBITRARY_DATES``; a bound whose string
        is empty or does not match the date format keeps its current value.
        """
        self.period_type = period_type

        match period_type:
            case PeriodType.NONE:
                pass
            case PeriodType.WEEK_TO_DATE:
                self.set_week_to_date(reference)
            case PeriodType.WEEK_PREVIOUS:
                self.set_last_week(reference=reference)
            case PeriodType.WEEK_LAST_TWO:
                self.set_last_week(2, reference=reference)
            case PeriodType.MONTH_TO_DATE:
                self.set_month_to_date(reference)
            case PeriodType.MONTH_PREVIOUS:
                self.set_last_month(reference)
            case PeriodType.QUARTER_TO_DATE:
                self.set_quarter_to_date(reference)
            case PeriodType.QUARTER_PREVIOUS:
                self.set_last_quarter(reference)
            case PeriodType.YEAR_TO_DATE:
                self.set_year_to_date(reference)
            case PeriodType.YEAR_PREVIOUS:
                self.set_last_year(reference)
            case PeriodType.ARBITRARY_DATES:
                self._set_arbitrary_dates(start_override, end_override)

    def set_period_from_selector(self, values: Mapping[str, str], control_name: str,
                                 start_field: str = 'start_date', end_field: str = 'end_date') -> None:
        """Apply the selection submitted by a period selector form"""
        period_type = self._parse_period_type(values.get(control_name))
        start_override = values.get(start_field, '') if start_field else None
        end_override = values.get(end_field, '') if end_field else None
        self.apply_selection(period_type, start_override=start_override, end_override=end_override)

    def to_range(self) -> PeriodRange:
        return PeriodRange(
            period_type=self.period_type,
            start=self.start,
            end=self.end,
            date_format=self.format,
            start_formatted=self.get_start_formatted(),
            end_formatted=self.get_end_formatted(),
            elapsed_days=self.get_elapsed_days()
        )

    def _set_arbitrary_dates(self, start_override: Optional[str], end_override: Optional[str]) -> None:
        start_date = self._parse_date(start_override)
        if start_date:
            self.start = beginning_of_day(start_date, self.tz)

        end_date = self._parse_date(end_override)
        if end_date:
            self._set_end(end_date)

    def _parse_date(self, value: Optional[str]) -> Optional[date]:
        if not value:
            return None
        try:
            return datetime.strptime(value, self.format).date()
        except ValueError:
            logging.warning(f"Ignoring date '{value}' not matching format '{self.format}'")
            return None

    @staticmethod
    def _parse_period_type(value: Optional[str]) -> PeriodType:
        if value is None or value == '':
            return PeriodType.NONE
        try:
            return PeriodType(int(value))
        except (TypeError, ValueError):
            logging.warning(f"Unknown period type '{value}', using {PeriodType.NONE.name}")
            return PeriodType.NONE

    def _set_end(self, day: date) -> None:
        self.end = min(end_of_day(day, self.tz), self._now())

    def _clamp_to_date(self) -> None:
        # to-date periods stop at the current second instead of end of day
        self.end = min(self.end, self._now()).replace(microsecond=0)

    def _now(self) -> datetime:
        return self.clock.now().astimezone(self.tz)

    def _reference(self, reference: Optional[Reference]) -> date:
        return self._as_date(reference) if reference is not None else self._now().date()

    def _as_date(self, reference: Reference) -> date:
        if isinstance(reference, datetime):
            if reference.tzinfo is not None:
                reference = reference.astimezone(self.tz)
            return reference.date()
        return reference
