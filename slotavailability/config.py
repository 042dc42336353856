"""
Configuration management using Pydantic models loaded from YAML.
"""

from pathlib import Path
from typing import Optional

import pendulum
import yaml
from pydantic import BaseModel, Field, field_validator, model_validator

from .domain.models import SchedulingConfig

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class SchedulingSettings(BaseModel):
    """Working day and booking rules."""
    work_start_hour: int = 8
    work_end_hour: int = 17
    required_gap_hours: int = 1
    advance_booking_days: int = 0
    unparsed_time_as_midnight: bool = True

    @field_validator("work_start_hour", "work_end_hour")
    @classmethod
    def validate_hour(cls, v: int) -> int:
        """Validate hour is between 0 and 24."""
        if not 0 <= v <= 24:
            raise ValueError(f"Hour must be between 0 and 24, got {v}")
        return v

    @field_validator("required_gap_hours", "advance_booking_days")
    @classmethod
    def validate_non_negative(cls, v: int) -> int:
        if v < 0:
            raise ValueError(f"Value must not be negative, got {v}")
        return v

    @model_validator(mode="after")
    def validate_hours_order(self) -> "SchedulingSettings":
        """An empty working day is allowed, a reversed one is not."""
        if self.work_end_hour < self.work_start_hour:
            raise ValueError("work_end_hour must not be earlier than work_start_hour")
        return self


class AppConfig(BaseModel):
    """Application configuration."""
    scheduling: SchedulingSettings = Field(default_factory=SchedulingSettings)
    timezone: str = "Asia/Manila"
    events_file: Optional[Path] = None
    log_level: str = "WARNING"

    @field_validator("timezone")
    @classmethod
    def validate_timezone(cls, value: str) -> str:
        try:
            pendulum.timezone(value)
        except Exception as exc:
            raise ValueError(f"Unknown timezone: {value}") from exc
        return value

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level: {value}")
        return level

    def scheduling_config(self) -> SchedulingConfig:
        """Domain rules for the engine."""
        return SchedulingConfig(**self.scheduling.model_dump())

    @classmethod
    def load_from_yaml(cls, config_path: Path) -> "AppConfig":
        """
        Load configuration from YAML file.
        
        Args:
            config_path: Path to the YAML config file
            
        Returns:
            AppConfig instance
            
        Raises:
            FileNotFoundError: If config file doesn't exist
            ValueError: If config is invalid
        """
        if not config_path.exists():
            raise FileNotFoundError(
                f"Config file not found: {config_path}\n"
                f"Please create a config.yaml file. See config.example.yaml for reference."
            )

        try:
            with open(config_path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as exc:
            raise ValueError(f"Invalid YAML in {config_path}: {exc}") from exc

        if not isinstance(data, dict):
            raise ValueError("Config file must contain a mapping at the root level.")

        config = cls(**data)

        # Relative event files are resolved against the config file location
        if config.events_file is not None and not config.events_file.is_absolute():
            config.events_file = config_path.parent / config.events_file

        return config


def get_default_config_path() -> Path:
    """Get the default configuration file path."""
    # Look for config.yaml in current directory
    current_dir = Path.cwd()
    config_path = current_dir / "config.yaml"
    
    if not config_path.exists():
        # Try in the project root (parent of the package)
        project_root = Path(__file__).parent.parent
        config_path = project_root / "config.yaml"
    
    return config_path
