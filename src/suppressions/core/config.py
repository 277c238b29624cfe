"""
Runtime settings for the suppressions CLI.

Settings come from an optional YAML file and the ``SUPPRESSIONS_LOG_LEVEL``
environment variable, which wins over the file.

Exports:
    - Settings: Validated settings model.
    - load_settings: Read settings from a YAML file (or defaults).
"""

import os
from pathlib import Path
from typing import Optional, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .enums import ExportFormat, Namespace
from .errors import ConfigError

__all__ = [
    "ENV_LOG_LEVEL",
    "Settings",
    "load_settings",
]

ENV_LOG_LEVEL = "SUPPRESSIONS_LOG_LEVEL"
LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    log_level: str = Field("WARNING", description="Console log level")
    log_file: Optional[Path] = Field(None, description="Optional rotating log file")
    default_namespace: Namespace = Namespace.PMD
    default_format: ExportFormat = ExportFormat.MARKDOWN
    export_dir: Path = Field(Path("docs"), description="Where exports land when no path is given")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}, got {v!r}")
        return level


def load_settings(path: Optional[Union[str, Path]] = None) -> Settings:
    """
    Load settings from a YAML file, then apply environment overrides.

    Args:
        path: YAML file to read. Defaults are used when None.

    Raises:
        ConfigError: If the file cannot be read or does not validate.
    """
    data = {}
    if path is not None:
        try:
            with open(path, "r") as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as exc:
            raise ConfigError(f"Cannot read configuration {path}: {exc}") from exc
        if not isinstance(data, dict):
            raise ConfigError(f"Configuration {path} must be a mapping")

    env_level = os.environ.get(ENV_LOG_LEVEL)
    if env_level:
        data = {**data, "log_level": env_level}

    try:
        return Settings.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(f"Invalid configuration{f' in {path}' if path else ''}:\n{exc}") from exc
