"""
Configuration management using Pydantic models loaded from YAML.
"""

import logging
from datetime import tzinfo
from pathlib import Path
from typing import Optional

import pendulum
import yaml
from pydantic import BaseModel, Field, field_validator

from .domain.boundaries import Boundaries
from .domain.precision import Precision

CONFIG_FILE_NAME = "timeperiods.yaml"

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class DefaultsConfig(BaseModel):
    """Defaults applied to periods built from loose dates."""
    precision: str = "day"
    boundaries: str = "[]"
    timezone: str = "UTC"

    @field_validator("precision")
    @classmethod
    def validate_precision(cls, value: str) -> str:
        """Ensure precision names one of the known granularities."""
        value = value.lower()
        known = [precision.unit for precision in Precision.all()]
        if value not in known:
            raise ValueError(f"precision must be one of {known}, got '{value}'")
        return value

    @field_validator("boundaries")
    @classmethod
    def validate_boundaries(cls, value: str) -> str:
        """Ensure boundaries is a two-character bracket pair."""
        if len(value) != 2:
            raise ValueError(f"boundaries must be a bracket pair such as '[)', got '{value}'")
        Boundaries.from_string(value[0], value[1])
        return value

    @field_validator("timezone")
    @classmethod
    def validate_timezone(cls, value: str) -> str:
        """Ensure the timezone name resolves."""
        try:
            pendulum.timezone(value)
        except ValueError as exc:
            raise ValueError(f"Unknown timezone: '{value}'") from exc
        return value

    def get_precision(self) -> Precision:
        return Precision(self.precision)

    def get_boundaries(self) -> Boundaries:
        return Boundaries.from_string(self.boundaries[0], self.boundaries[1])

    def get_tzinfo(self) -> tzinfo:
        return pendulum.timezone(self.timezone)


class DisplayConfig(BaseModel):
    """Output settings for the command line."""
    show_length: bool = True
    show_included: bool = True


class AppConfig(BaseModel):
    """Application configuration."""
    defaults: DefaultsConfig = Field(default_factory=DefaultsConfig)
    display: DisplayConfig = Field(default_factory=DisplayConfig)
    log_level: str = "WARNING"

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Ensure the level is one the logging module knows."""
        value = value.upper()
        if value not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {list(_LOG_LEVELS)}, got '{value}'")
        return value

    def get_log_level(self) -> int:
        return logging.getLevelName(self.log_level)

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
                f"See config.example.yaml for reference."
            )

        try:
            with open(config_path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as exc:
            raise ValueError(f"Invalid YAML in {config_path}: {exc}") from exc

        if not isinstance(data, dict):
            raise ValueError("Config file must contain a mapping at the root level.")

        return cls(**data)

    @classmethod
    def load(cls, config_path: Optional[Path] = None) -> "AppConfig":
        """
        Load an explicit config file, or the default one if it exists.

        Only an explicitly requested file is required to exist; without one
        the built-in defaults apply.
        """
        if config_path is not None:
            return cls.load_from_yaml(config_path)

        default_path = get_default_config_path()
        if default_path.exists():
            return cls.load_from_yaml(default_path)

        return cls()


def get_default_config_path() -> Path:
    """Get the default configuration file path."""
    # Look in the current directory first
    config_path = Path.cwd() / CONFIG_FILE_NAME

    if not config_path.exists():
        # Fall back to the project root (parent of the package)
        config_path = Path(__file__).parent.parent / CONFIG_FILE_NAME

    return config_path
