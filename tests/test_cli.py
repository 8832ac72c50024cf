"""
Tests for the Typer command line interface.
"""

from pathlib import Path

import pytest
from typer.testing import CliRunner

from calendarmath.cli.app import app

runner = CliRunner()


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    """Config pinned to UTC with a one-on, three-off schedule."""
    path = tmp_path / "calendarmath.yaml"
    path.write_text(
        "timezone: UTC\n"
        "schedule:\n"
        "  count_work_days: 1\n"
        "  count_off_days: 3\n",
        encoding="utf-8",
    )
    return path


def _invoke(config_file: Path, *args: str):
    return runner.invoke(app, ["--config", str(config_file), *args])


class TestCommands:
    """Tests for individual commands."""

    def test_timestamp(self, config_file):
        """Test the timestamp command."""
        result = _invoke(config_file, "timestamp", "2024-02-01T15:00:00.000Z")

        assert result.exit_code == 0
        assert "1706799600000" in result.output

    def test_time(self, config_file):
        """Test the time command."""
        result = _invoke(config_file, "time", "2024-01-01T12:34:56Z")

        assert result.exit_code == 0
        assert "12:34:56" in result.output

    def test_day_name(self, config_file):
        """Test the day-name command."""
        result = _invoke(config_file, "day-name", "2024-01-30T00:00:00.000Z")

        assert result.exit_code == 0
        assert "Tuesday" in result.output

    def test_format(self, config_file):
        """Test the format command."""
        result = _invoke(config_file, "format", "2010-12-15T22:59:00.000Z")

        assert result.exit_code == 0
        assert "12/15/2010, 10:59:00 PM" in result.output

    def test_period_days(self, config_file):
        """Test the period-days command."""
        result = _invoke(config_file, "period-days", "2024-02-01", "2024-02-12")

        assert result.exit_code == 0
        assert "12" in result.output

    def test_in_period(self, config_file):
        """Test the in-period command."""
        inside = _invoke(config_file, "in-period", "2024-02-02", "2024-02-02", "2024-03-02")
        outside = _invoke(config_file, "in-period", "2024-02-01", "2024-02-02", "2024-03-02")

        assert "yes" in inside.output
        assert "no" in outside.output

    def test_days_in_month(self, config_file):
        """Test the days-in-month command."""
        result = _invoke(config_file, "days-in-month", "2", "2024")

        assert result.exit_code == 0
        assert "29" in result.output

    def test_weekends(self, config_file):
        """Test the weekends command."""
        result = _invoke(config_file, "weekends", "12", "2023")

        assert result.exit_code == 0
        assert "10" in result.output

    def test_quarter(self, config_file):
        """Test the quarter command."""
        result = _invoke(config_file, "quarter", "2024-04-01")

        assert result.exit_code == 0
        assert "2" in result.output

    def test_leap_year(self, config_file):
        """Test the leap-year command."""
        assert "common year" in _invoke(config_file, "leap-year", "1900-03-01").output
        assert "leap year" in _invoke(config_file, "leap-year", "2000-03-01").output

    def test_week_number(self, config_file):
        """Test the week-number command."""
        result = _invoke(config_file, "week-number", "2024-01-31")

        assert result.exit_code == 0
        assert "5" in result.output

    def test_next_friday(self, config_file):
        """Test the next-friday command."""
        result = _invoke(config_file, "next-friday", "2024-02-16")

        assert result.exit_code == 0
        assert "2024-02-23" in result.output
        assert "Friday" in result.output

    def test_next_friday_13th(self, config_file):
        """Test the next-friday-13th command."""
        result = _invoke(config_file, "next-friday-13th", "2024-01-13")

        assert result.exit_code == 0
        assert "2024-09-13" in result.output

    def test_schedule_uses_config_defaults(self, config_file):
        """Test the schedule command with configured counts."""
        result = _invoke(config_file, "schedule", "01-01-2024", "15-01-2024")

        assert result.exit_code == 0
        for day in ("01-01-2024", "05-01-2024", "09-01-2024", "13-01-2024"):
            assert day in result.output

    def test_schedule_options(self, config_file):
        """Test the schedule command with explicit counts."""
        result = _invoke(config_file, "schedule", "01-01-2024", "10-01-2024", "--work", "1", "--off", "1")

        assert result.exit_code == 0
        assert "09-01-2024" in result.output

    def test_version(self, config_file):
        """Test the version command."""
        result = _invoke(config_file, "version")

        assert result.exit_code == 0
        assert "calendarmath" in result.output


class TestErrors:
    """Tests for error reporting."""

    def test_invalid_date_exits_with_error(self, config_file):
        """Test that an invalid date is reported."""
        result = _invoke(config_file, "day-name", "bogus")

        assert result.exit_code == 1
        assert "not a valid date" in result.output

    def test_invalid_month_exits_with_error(self, config_file):
        """Test that an impossible month is reported."""
        result = _invoke(config_file, "days-in-month", "13", "2024")

        assert result.exit_code == 1
        assert "Month must be between 1 and 12" in result.output

    def test_invalid_schedule_counts(self, config_file):
        """Test that a zero-length cycle is reported."""
        result = _invoke(config_file, "schedule", "01-01-2024", "10-01-2024", "--work", "0")

        assert result.exit_code == 1
        assert "positive integer" in result.output

    def test_schedule_with_bad_dates(self, config_file):
        """Test that an unparseable period is reported."""
        result = _invoke(config_file, "schedule", "2024-01-01", "10-01-2024")

        assert result.exit_code == 1
        assert "DD-MM-YYYY" in result.output

    def test_missing_config_file(self, tmp_path):
        """Test an explicit config path that does not exist."""
        result = runner.invoke(app, ["--config", str(tmp_path / "nope.yaml"), "version"])

        assert result.exit_code == 1
        assert "No config file" in result.output
