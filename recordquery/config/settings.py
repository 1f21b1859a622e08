"""
Configuration management for RecordQuery.

Provides a settings dataclass and utilities for loading it
from YAML files.
"""

import os
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Optional

import yaml

from ..core.exceptions import ConfigError
from ..utils.logging import PACKAGE_LOGGER, setup_logger

CONFIG_ENV_VAR = "RECORDQUERY_CONFIG"
LOCAL_CONFIG_NAME = "recordquery.yaml"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class QuerySettings:
    """
    Settings applied to every query built from a ``RecordQuery``.

    Attributes:
        ignore_non_populated_fields: Start chains with populated-field
            checking turned off
        log_level: Level for the ``recordquery`` logger
        log_file: Optional file the logger also writes to
    """
    ignore_non_populated_fields: bool = False
    log_level: str = "WARNING"
    log_file: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict) -> "QuerySettings":
        """Create QuerySettings from dictionary."""
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigError(f"Unknown setting(s): {', '.join(unknown)}")
        ignore = data.get("ignore_non_populated_fields", False)
        if not isinstance(ignore, bool):
            raise ConfigError(
                f"ignore_non_populated_fields must be true or false, got {ignore!r}"
            )
        log_file = data.get("log_file")
        if log_file is not None and not isinstance(log_file, str):
            raise ConfigError(f"log_file must be a path string, got {log_file!r}")
        level = data.get("log_level", "WARNING")
        if not isinstance(level, str):
            raise ConfigError(f"Invalid log_level: {level!r}")
        level = level.upper()
        if level not in LOG_LEVELS:
            raise ConfigError(f"Invalid log_level: {data['log_level']!r}")
        return cls(**{**data, "log_level": level})

    def to_dict(self) -> dict:
        """Convert QuerySettings to dictionary."""
        return asdict(self)

    def configure_logging(self) -> None:
        """Apply log_level and log_file to the package logger."""
        setup_logger(PACKAGE_LOGGER, level=self.log_level, log_file=self.log_file)


def get_default_config_path() -> Optional[Path]:
    """
    Locate the configuration file.

    Looks for ``./recordquery.yaml`` first, then the path named by the
    ``RECORDQUERY_CONFIG`` environment variable.
    """
    local_config = Path(LOCAL_CONFIG_NAME)
    if local_config.exists():
        return local_config

    env_config = os.environ.get(CONFIG_ENV_VAR)
    if env_config:
        return Path(env_config)

    return None


def load_config(config_path: Optional[str] = None) -> QuerySettings:
    """
    Load configuration from YAML file.

    Args:
        config_path: Path to config file. If None, uses default lookup.

    Returns:
        QuerySettings with loaded configuration (defaults if no file)

    Raises:
        ConfigError: If the file is not a mapping or has unknown keys

    Example:
        >>> settings = load_config()
        >>> settings = load_config("./recordquery.yaml")
    """
    path = Path(config_path) if config_path is not None else get_default_config_path()

    if path is None or not path.exists():
        return QuerySettings()

    with open(path, "r") as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        return QuerySettings()

    if not isinstance(data, dict):
        raise ConfigError(f"Expected a mapping in {path}, got {type(data).__name__}")

    return QuerySettings.from_dict(data)
