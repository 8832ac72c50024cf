"""
Domain layer - Pure calendar arithmetic without I/O.
"""

from .calendar_math import (
    date_to_timestamp,
    format_date,
    get_count_days_in_month,
    get_count_days_on_period,
    get_count_weekends_in_month,
    get_day_name,
    get_next_friday,
    get_next_friday_the_13th,
    get_quarter,
    get_time,
    get_week_number_by_date,
    get_work_schedule,
    is_date_in_period,
    is_leap_year,
)
from .exceptions import CalendarMathError, InvalidFieldError
from .models import DatePeriod, Quarter, WorkSchedulePattern

__all__ = [
    "CalendarMathError",
    "DatePeriod",
    "InvalidFieldError",
    "Quarter",
    "WorkSchedulePattern",
    "date_to_timestamp",
    "format_date",
    "get_count_days_in_month",
    "get_count_days_on_period",
    "get_count_weekends_in_month",
    "get_day_name",
    "get_next_friday",
    "get_next_friday_the_13th",
    "get_quarter",
    "get_time",
    "get_week_number_by_date",
    "get_work_schedule",
    "is_date_in_period",
    "is_leap_year",
]
