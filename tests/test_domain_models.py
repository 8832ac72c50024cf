"""
Tests for domain models.
"""

import pendulum
import pytest

from calendarmath.domain.exceptions import CalendarMathError, InvalidFieldError
from calendarmath.domain.models import (
    WEEKDAY_NAMES,
    WEEKEND_DAYS,
    DatePeriod,
    Quarter,
    WorkSchedulePattern,
)


class TestDatePeriod:
    """Tests for DatePeriod model."""

    def test_coerce_mapping(self):
        """Test building a period from a mapping."""
        period = DatePeriod.coerce({"start": "2024-02-02", "end": "2024-03-02"})

        assert period.start == "2024-02-02"
        assert period.end == "2024-03-02"

    def test_coerce_pair(self):
        """Test building a period from a pair."""
        assert DatePeriod.coerce(("a", "b")) == DatePeriod("a", "b")
        assert DatePeriod.coerce(["a", "b"]) == DatePeriod("a", "b")

    def test_coerce_returns_same_instance(self):
        """Test that a period passes through unchanged."""
        period = DatePeriod("a", "b")
        assert DatePeriod.coerce(period) is period

    def test_reversed_bounds_are_allowed(self):
        """Test that ordering is left to the caller."""
        period = DatePeriod("2024-03-02", "2024-02-02")
        assert period.start == "2024-03-02"

    def test_coerce_rejects_other_values(self):
        """Test unusable input."""
        with pytest.raises(TypeError, match="Cannot build a DatePeriod"):
            DatePeriod.coerce("2024-02-02")
        with pytest.raises(TypeError):
            DatePeriod.coerce(("only-one",))


class TestWorkSchedulePattern:
    """Tests for WorkSchedulePattern model."""

    def test_cycle_length(self):
        """Test the cycle length."""
        pattern = WorkSchedulePattern(count_work_days=1, count_off_days=3)

        assert pattern.cycle_length == 4
        assert str(pattern) == "1 on / 3 off"

    @pytest.mark.parametrize("work, off", [(0, 1), (1, 0), (-2, 3), (1.5, 1), (True, 1)])
    def test_invalid_counts_raise(self, work, off):
        """Test that counts must be positive integers."""
        with pytest.raises(InvalidFieldError, match="must be a positive integer"):
            WorkSchedulePattern(work, off)

    def test_invalid_field_error_is_value_error(self):
        """Test the exception hierarchy."""
        with pytest.raises(ValueError):
            WorkSchedulePattern(0, 0)
        assert issubclass(InvalidFieldError, CalendarMathError)


class TestQuarter:
    """Tests for Quarter enum."""

    def test_first_month(self):
        """Test quarter start months."""
        assert [q.first_month for q in Quarter] == [1, 4, 7, 10]

    def test_int_values(self):
        """Test numeric values."""
        assert [int(q) for q in Quarter] == [1, 2, 3, 4]


class TestWeekdays:
    """Tests for weekday tables."""

    def test_names_cover_week(self):
        """Test that all seven days are named."""
        assert len(WEEKDAY_NAMES) == 7
        assert WEEKDAY_NAMES[pendulum.SUNDAY] == "Sunday"
        assert WEEKDAY_NAMES[pendulum.MONDAY] == "Monday"

    def test_weekend(self):
        """Test weekend membership."""
        assert pendulum.SATURDAY in WEEKEND_DAYS
        assert pendulum.SUNDAY in WEEKEND_DAYS
        assert pendulum.FRIDAY not in WEEKEND_DAYS
