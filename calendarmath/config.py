"""
Configuration management using Pydantic models loaded from YAML.
"""

from pathlib import Path
from typing import Optional

import pendulum
import yaml
from pydantic import BaseModel, Field, field_validator

from .domain.models import WorkSchedulePattern


DEFAULT_CONFIG_FILENAME = "calendarmath.yaml"


class ScheduleDefaults(BaseModel):
    """Default work/off cycle for schedule generation."""
    count_work_days: int = 5
    count_off_days: int = 2

    @field_validator("count_work_days", "count_off_days")
    @classmethod
    def validate_count(cls, value: int) -> int:
        """Ensure day counts are positive."""
        if value <= 0:
            raise ValueError(f"Day counts must be greater than zero, got {value}")
        return value

    def to_pattern(self) -> WorkSchedulePattern:
        """Get the defaults as a WorkSchedulePattern."""
        return WorkSchedulePattern(self.count_work_days, self.count_off_days)


class AppConfig(BaseModel):
    """Application configuration."""
    timezone: Optional[str] = None  # None: host local timezone
    schedule: ScheduleDefaults = Field(default_factory=ScheduleDefaults)

    @field_validator("timezone")
    @classmethod
    def validate_timezone(cls, value: Optional[str]) -> Optional[str]:
        """Ensure the timezone is a known IANA name."""
        if value is None:
            return value
        try:
            pendulum.timezone(value)
        except (ValueError, KeyError) as exc:
            raise ValueError(f"Unknown timezone: '{value}'") from exc
        return value

    @classmethod
    def load_from_yaml(cls, config_path: Optional[Path] = None) -> "AppConfig":
        """
        Read settings from a YAML file.

        Without ``config_path`` the file found by :func:`find_default_config`
        is read, and the built-in defaults apply when there is none. An
        explicit path has to exist.

        Raises:
            FileNotFoundError: If an explicit config path does not exist
            ValueError: If the file is not YAML or does not hold a mapping
        """
        if config_path is None:
            config_path = find_default_config()
            if config_path is None:
                return cls()
        elif not config_path.is_file():
            raise FileNotFoundError(
                f"No config file at {config_path}; "
                f"copy {DEFAULT_CONFIG_FILENAME}.example to start one."
            )

        try:
            data = yaml.safe_load(config_path.read_text(encoding="utf-8"))
        except yaml.YAMLError as exc:
            raise ValueError(f"{config_path} is not valid YAML: {exc}") from exc

        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise ValueError(
                f"{config_path} must hold a mapping of settings, not a {type(data).__name__}"
            )
        return cls(**data)


def find_default_config() -> Optional[Path]:
    """Return the first calendarmath.yaml in the working directory or the project root."""
    for directory in (Path.cwd(), Path(__file__).resolve().parent.parent):
        candidate = directory / DEFAULT_CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None
