"""
Application service binding configuration to the calendar operations.

The domain functions take an optional timezone and explicit schedule
counts. The service fixes both from configuration, so the CLI stays thin
and callers that work in one zone do not repeat it on every call.
"""

from __future__ import annotations

import logging
from typing import Any, List, Optional

from pendulum import DateTime

from ..config import AppConfig
from ..domain import calendar_math
from ..domain.models import DatePeriod, Quarter, WorkSchedulePattern

logger = logging.getLogger(__name__)


class CalendarService:
    """
    Calendar operations evaluated in one configured timezone.

    Absolute-instant operations (timestamps, UTC formatting, period
    queries) do not depend on the zone and are passed straight through.
    """

    def __init__(
        self,
        timezone: Optional[str] = None,
        schedule_pattern: Optional[WorkSchedulePattern] = None,
    ) -> None:
        self._timezone = timezone
        self._schedule_pattern = schedule_pattern or WorkSchedulePattern(5, 2)

    @classmethod
    def from_config(cls, config: AppConfig) -> "CalendarService":
        """Build a service from application configuration."""
        return cls(
            timezone=config.timezone,
            schedule_pattern=config.schedule.to_pattern(),
        )

    @property
    def timezone(self) -> Optional[str]:
        return self._timezone

    @property
    def schedule_pattern(self) -> WorkSchedulePattern:
        return self._schedule_pattern

    # Absolute instants

    def date_to_timestamp(self, value: Any) -> Optional[int]:
        return calendar_math.date_to_timestamp(value)

    def format_date(self, value: Any) -> Optional[str]:
        return calendar_math.format_date(value)

    def get_count_days_on_period(self, start: Any, end: Any) -> Optional[int]:
        return calendar_math.get_count_days_on_period(start, end)

    def is_date_in_period(self, value: Any, period: Any) -> bool:
        return calendar_math.is_date_in_period(value, period)

    # Local interpretation

    def get_time(self, value: Any) -> Optional[str]:
        return calendar_math.get_time(value, self._timezone)

    def get_day_name(self, value: Any) -> Optional[str]:
        return calendar_math.get_day_name(value, self._timezone)

    def get_quarter(self, value: Any) -> Optional[Quarter]:
        return calendar_math.get_quarter(value, self._timezone)

    def is_leap_year(self, value: Any) -> Optional[bool]:
        return calendar_math.is_leap_year(value, self._timezone)

    def get_week_number_by_date(self, value: Any) -> Optional[int]:
        return calendar_math.get_week_number_by_date(value, self._timezone)

    def get_next_friday(self, value: Any) -> Optional[DateTime]:
        return calendar_math.get_next_friday(value, self._timezone)

    def get_next_friday_the_13th(self, value: Any) -> Optional[DateTime]:
        return calendar_math.get_next_friday_the_13th(value, self._timezone)

    # Month queries

    def get_count_days_in_month(self, month: int, year: int) -> int:
        return calendar_math.get_count_days_in_month(month, year)

    def get_count_weekends_in_month(self, month: int, year: int) -> int:
        return calendar_math.get_count_weekends_in_month(month, year)

    # Schedules

    def get_work_schedule(
        self,
        period: Any,
        count_work_days: Optional[int] = None,
        count_off_days: Optional[int] = None,
    ) -> List[str]:
        """
        Generate a work schedule, filling omitted counts from the default pattern.
        """
        pattern = self._schedule_pattern
        work_days = count_work_days if count_work_days is not None else pattern.count_work_days
        off_days = count_off_days if count_off_days is not None else pattern.count_off_days

        period = DatePeriod.coerce(period)
        logger.debug(
            "Generating schedule %s..%s with %d on / %d off",
            period.start, period.end, work_days, off_days,
        )
        return calendar_math.get_work_schedule(period, work_days, off_days)
