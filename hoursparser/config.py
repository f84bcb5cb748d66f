"""
Configuration management using Pydantic models loaded from YAML.
"""

import logging
from pathlib import Path
from typing import Literal, Optional

import yaml
from pydantic import BaseModel, Field, field_validator

DEFAULT_CONFIG_NAME = "hoursparser.yaml"


class ParserConfig(BaseModel):
    """Settings for the parsing pipeline."""
    normalize_meridiem: bool = True


class OutputConfig(BaseModel):
    """Settings for rendering results."""
    format: Literal["json", "table"] = "json"
    show_diagnostics: bool = True
    json_indent: Optional[int] = None

    @field_validator("json_indent")
    @classmethod
    def validate_indent(cls, value: Optional[int]) -> Optional[int]:
        """Ensure the JSON indent is not negative."""
        if value is not None and value < 0:
            raise ValueError(f"json_indent must be zero or greater, got {value}")
        return value


class AppConfig(BaseModel):
    """Application configuration."""
    log_level: str = "WARNING"
    parser: ParserConfig = Field(default_factory=ParserConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Ensure the level is a standard logging level name."""
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level

    def get_log_level(self) -> int:
        """Get the numeric logging level."""
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
                f"See hoursparser.example.yaml for reference."
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

        An explicit path must exist; a missing default file yields the
        built-in defaults.
        """
        if config_path is not None:
            return cls.load_from_yaml(config_path)

        default_path = get_default_config_path()
        if default_path.exists():
            return cls.load_from_yaml(default_path)

        return cls()


def get_default_config_path() -> Path:
    """Get the default configuration file path."""
    # Look for the config in current directory
    config_path = Path.cwd() / DEFAULT_CONFIG_NAME

    if not config_path.exists():
        # Try in the project root (parent of hoursparser/)
        project_root = Path(__file__).parent.parent
        config_path = project_root / DEFAULT_CONFIG_NAME

    return config_path
