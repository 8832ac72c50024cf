"""
Domain models for periods, schedule patterns and quarters.
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Dict, Mapping

import pendulum
from pendulum import WeekDay

from .exceptions import InvalidFieldError


WEEKDAY_NAMES: Dict[WeekDay, str] = {
    pendulum.MONDAY: "Monday",
    pendulum.TUESDAY: "Tuesday",
    pendulum.WEDNESDAY: "Wednesday",
    pendulum.THURSDAY: "Thursday",
    pendulum.FRIDAY: "Friday",
    pendulum.SATURDAY: "Saturday",
    pendulum.SUNDAY: "Sunday",
}

WEEKEND_DAYS = frozenset({pendulum.SATURDAY, pendulum.SUNDAY})


class Quarter(IntEnum):
    """Quarter of the year, starting in January, April, July and October."""
    Q1 = 1
    Q2 = 2
    Q3 = 3
    Q4 = 4

    @property
    def first_month(self) -> int:
        """Return the month (1-12) the quarter starts in."""
        return 3 * (self.value - 1) + 1


@dataclass(frozen=True)
class DatePeriod:
    """
    An inclusive (start, end) pair of raw date values.

    Unlike a validated range, ``start <= end`` is not enforced: callers own
    the ordering, and operations document what they do with reversed periods.
    """
    start: Any
    end: Any

    @classmethod
    def coerce(cls, value: Any) -> "DatePeriod":
        """
        Build a period from a DatePeriod, a mapping or a (start, end) pair.

        Raises:
            TypeError: If the value has no recognisable start/end
        """
        if isinstance(value, DatePeriod):
            return value
        if isinstance(value, Mapping):
            return cls(start=value.get("start"), end=value.get("end"))
        if isinstance(value, (tuple, list)) and len(value) == 2:
            return cls(start=value[0], end=value[1])
        raise TypeError(
            f"Cannot build a DatePeriod from {type(value).__name__}; "
            "expected a mapping with 'start'/'end' or a (start, end) pair."
        )


@dataclass(frozen=True)
class WorkSchedulePattern:
    """
    A repeating cycle of consecutive work days followed by days off.

    Invariant: both counts are positive.
    """
    count_work_days: int
    count_off_days: int

    def __post_init__(self):
        for name in ("count_work_days", "count_off_days"):
            count = getattr(self, name)
            if isinstance(count, bool) or not isinstance(count, int) or count < 1:
                raise InvalidFieldError(f"{name} must be a positive integer, got {count!r}")

    @property
    def cycle_length(self) -> int:
        """Number of days between the first days of two work blocks."""
        return self.count_work_days + self.count_off_days

    def __str__(self) -> str:
        return f"{self.count_work_days} on / {self.count_off_days} off"
