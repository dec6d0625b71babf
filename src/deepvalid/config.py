"""Configuration management for deepvalid using Pydantic models."""

import json
import logging
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

CONFIG_FILE_NAME = ".deepvalid.json"


class OutputFormat(str, Enum):
    """Output format types."""
    TEXT = "text"
    JSON = "json"


class LogLevel(str, Enum):
    """Logging levels."""
    ERROR = "error"
    WARN = "warn"
    INFO = "info"
    DEBUG = "debug"


_PYTHON_LEVELS = {
    LogLevel.ERROR.value: logging.ERROR,
    LogLevel.WARN.value: logging.WARNING,
    LogLevel.INFO.value: logging.INFO,
    LogLevel.DEBUG.value: logging.DEBUG,
}


class SchemaConfig(BaseModel):
    """Where the CLI finds the rules to check against."""
    target: str | None = None

    @field_validator("target")
    @classmethod
    def validate_target(cls, v):
        if v is not None and v.count(":") != 1:
            raise ValueError(f"target must look like 'package.module:attribute', got: {v}")
        return v


class OutputConfig(BaseModel):
    """Output configuration section."""
    format: OutputFormat = OutputFormat.TEXT

    model_config = ConfigDict(use_enum_values=True)


class LoggingConfig(BaseModel):
    """Logging configuration section."""
    level: LogLevel = LogLevel.WARN

    model_config = ConfigDict(use_enum_values=True)

    @property
    def python_level(self) -> int:
        return _PYTHON_LEVELS[self.level]


class DeepValidConfig(BaseModel):
    """Complete deepvalid configuration model."""
    # "schema" would shadow BaseModel.schema
    schema_: SchemaConfig = Field(default_factory=SchemaConfig, alias="schema")
    output: OutputConfig = Field(default_factory=OutputConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = ConfigDict(extra="forbid")


def load_config(config_path: str | Path | None = None) -> DeepValidConfig:
    """Load configuration, searching for .deepvalid.json when no path is given.

    Missing files yield the defaults.

    Raises:
        ValueError: If the file is not JSON or its fields are invalid
    """
    path = find_config_file() if config_path is None else Path(config_path)
    if path is None or not path.exists():
        return DeepValidConfig()

    try:
        config_data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in config file {path}: {e}") from e

    try:
        return DeepValidConfig.model_validate(config_data)
    except ValidationError as e:
        raise ValueError(f"Failed to load config from {path}: {e}") from e


def find_config_file(start_dir: Path | None = None) -> Path | None:
    """Return the nearest .deepvalid.json in ``start_dir`` or its parents."""
    start = Path(start_dir or Path.cwd()).resolve()
    for directory in (start, *start.parents):
        config_file = directory / CONFIG_FILE_NAME
        if config_file.exists():
            return config_file
    return None
