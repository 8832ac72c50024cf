"""
Core calendar arithmetic.

Every function is a pure transformation from date input(s) to a primitive,
an instant or a list. Field arithmetic is delegated to pendulum; what lives
here are the boundary policies: inclusive counts, week anchors, month
rollovers and loop termination.

Malformed dates never raise. They come back as ``None`` (or ``False`` for
the containment check), so callers test results instead of catching.
"""

from __future__ import annotations

import logging
from typing import Any, List, Optional

import pendulum
from pendulum import Date, DateTime

from .exceptions import CalendarMathError, InvalidFieldError
from .models import WEEKDAY_NAMES, WEEKEND_DAYS, DatePeriod, Quarter, WorkSchedulePattern
from .parsing import (
    TimezoneLike,
    format_day_month_year,
    parse_day_month_year,
    to_instant,
    to_utc_instant,
)

logger = logging.getLogger(__name__)

MILLISECONDS_PER_DAY = 86_400_000

# Longest possible gap between two Friday the 13ths is 14 months.
MAX_FRIDAY_13TH_CANDIDATES = 15


# ── Timestamp & formatting ───────────────────────────────────────────────────

def date_to_timestamp(value: Any) -> Optional[int]:
    """
    Return the milliseconds elapsed since 1970-01-01T00:00:00Z.

    Example:
        '04 Dec 1995 00:12:00 UTC' -> 818035920000
    """
    instant = to_utc_instant(value)
    if instant is None:
        return None
    return instant.int_timestamp * 1000 + instant.microsecond // 1000


def get_time(value: Any, tz: TimezoneLike = None) -> Optional[str]:
    """Return the wall-clock time as zero-padded 24-hour ``HH:mm:ss``."""
    instant = to_instant(value, tz)
    if instant is None:
        return None
    return instant.format("HH:mm:ss")


def format_date(value: Any) -> Optional[str]:
    """
    Format an instant in UTC as ``M/D/YYYY, h:mm:ss AM|PM``.

    Example:
        '2010-12-15T22:59:00.000Z' -> '12/15/2010, 10:59:00 PM'
    """
    instant = to_utc_instant(value)
    if instant is None:
        return None
    return instant.format("M/D/YYYY, h:mm:ss A", locale="en")


def get_day_name(value: Any, tz: TimezoneLike = None) -> Optional[str]:
    """Return the English weekday name of the instant in local interpretation."""
    instant = to_instant(value, tz)
    if instant is None:
        return None
    return WEEKDAY_NAMES[instant.day_of_week]


# ── Period & range queries ───────────────────────────────────────────────────

def get_count_days_on_period(start: Any, end: Any) -> Optional[int]:
    """
    Return the number of days in a period, counting both ends.

    Partial days are floored, so bounds that are not a whole number of
    days apart count only the complete days between them.
    """
    start_ms = date_to_timestamp(start)
    end_ms = date_to_timestamp(end)
    if start_ms is None or end_ms is None:
        return None
    return (end_ms - start_ms) // MILLISECONDS_PER_DAY + 1


def is_date_in_period(value: Any, period: Any) -> bool:
    """
    Check whether an instant lies in a closed period.

    An unparseable date or bound makes the check false.
    """
    period = DatePeriod.coerce(period)
    current = to_utc_instant(value)
    start = to_utc_instant(period.start)
    end = to_utc_instant(period.end)
    if current is None or start is None or end is None:
        return False
    return start <= current <= end


# ── Month & calendar queries ─────────────────────────────────────────────────

def get_count_days_in_month(month: int, year: int) -> int:
    """Return the number of days (28-31) in a month of a given year."""
    return _first_of_month(month, year).days_in_month


def get_count_weekends_in_month(month: int, year: int) -> int:
    """Count the Saturdays and Sundays of a month."""
    current = _first_of_month(month, year)
    end = current.add(months=1)

    weekends = 0
    while current < end:
        if current.day_of_week in WEEKEND_DAYS:
            weekends += 1
        current = current.add(days=1)

    return weekends


def get_quarter(value: Any, tz: TimezoneLike = None) -> Optional[Quarter]:
    """
    Return the quarter the instant falls in.

    The instant is compared in order against April 1, July 1 and October 1
    of its own year; the first bound it precedes decides the quarter.
    """
    instant = to_instant(value, tz)
    if instant is None:
        return None

    for quarter in (Quarter.Q1, Quarter.Q2, Quarter.Q3):
        upper_bound = pendulum.datetime(
            instant.year, quarter.first_month + 3, 1, tz=instant.tzinfo
        )
        if instant < upper_bound:
            return quarter
    return Quarter.Q4


def is_leap_year(value: Any, tz: TimezoneLike = None) -> Optional[bool]:
    """Check whether the instant's year is a Gregorian leap year."""
    instant = to_instant(value, tz)
    if instant is None:
        return None
    return _is_gregorian_leap_year(instant.year)


# ── Week & recurring-date arithmetic ─────────────────────────────────────────

def get_week_number_by_date(value: Any, tz: TimezoneLike = None) -> Optional[int]:
    """
    Return the week of the year, with weeks starting on Monday.

    Week 1 is the week containing January 1, so it may begin in the
    previous year.
    """
    instant = to_instant(value, tz)
    if instant is None:
        return None

    target_monday = _monday_on_or_before(instant.date())
    first_monday = _monday_on_or_before(pendulum.date(instant.year, 1, 1))
    return first_monday.diff(target_monday).in_days() // 7 + 1


def get_next_friday(value: Any, tz: TimezoneLike = None) -> Optional[DateTime]:
    """
    Return the next Friday strictly after the instant.

    A Friday moves exactly one week ahead. The time of day is kept.
    """
    instant = to_instant(value, tz)
    if instant is None:
        return None
    try:
        return instant.next(pendulum.FRIDAY, keep_time=True)
    except (ValueError, OverflowError) as exc:
        logger.debug("No Friday after %s within the calendar range: %s", instant, exc)
        return None


def get_next_friday_the_13th(value: Any, tz: TimezoneLike = None) -> Optional[DateTime]:
    """
    Return the next Friday the 13th on or after the instant's month.

    The search starts at the 13th of the current month when the day is at
    most 13, otherwise at the 13th of the following month. An instant that
    already is a Friday the 13th is returned unchanged.

    Returns None when the search would run past December 9999, the last
    month a ``datetime`` can hold.
    """
    instant = to_instant(value, tz)
    if instant is None:
        return None

    try:
        if instant.day <= 13:
            candidate = instant.set(day=13)
        else:
            candidate = instant.set(day=1).add(months=1).set(day=13)

        for _ in range(MAX_FRIDAY_13TH_CANDIDATES):
            if candidate.day_of_week == pendulum.FRIDAY:
                return candidate
            candidate = candidate.add(months=1)
    except (ValueError, OverflowError) as exc:
        logger.debug("Friday the 13th search from %s left the calendar range: %s", instant, exc)
        return None

    raise CalendarMathError(f"No Friday the 13th found after {instant.to_date_string()}")


def get_work_schedule(
    period: Any,
    count_work_days: int,
    count_off_days: int,
) -> List[str]:
    """
    List the first day of every work block within a period.

    Args:
        period: Inclusive bounds as ``DD-MM-YYYY`` strings; unpadded
            bounds such as ``1-1-2024`` are read as well
        count_work_days: Consecutive working days per cycle
        count_off_days: Consecutive days off per cycle

    Returns:
        Zero-padded ``DD-MM-YYYY`` dates. The start date is always listed,
        even when it lies after the end; each following date is listed only
        if it does not exceed the end. Empty when either bound is invalid.

    Raises:
        InvalidFieldError: If either count is not a positive integer
    """
    pattern = WorkSchedulePattern(count_work_days, count_off_days)
    period = DatePeriod.coerce(period)

    current = parse_day_month_year(period.start)
    end = parse_day_month_year(period.end)
    if current is None:
        return []
    if end is None:
        logger.warning("Work schedule end %r is not a DD-MM-YYYY date", period.end)
        return []

    schedule: List[str] = []
    while True:
        schedule.append(format_day_month_year(current))
        try:
            current = current.add(days=pattern.cycle_length)
        except (ValueError, OverflowError):
            break
        if current > end:
            break

    return schedule


# ── Helpers ──────────────────────────────────────────────────────────────────

def _first_of_month(month: int, year: int) -> Date:
    if not 1 <= month <= 12:
        raise InvalidFieldError(f"Month must be between 1 and 12, got {month}")
    return pendulum.date(year, month, 1)


def _monday_on_or_before(day: Date) -> Date:
    # pendulum weekdays run Monday=0 .. Sunday=6
    return day.subtract(days=day.day_of_week)


def _is_gregorian_leap_year(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)
