"""
Configuration for RecordQuery.

Example:
    >>> from recordquery.config import load_config
    >>>
    >>> settings = load_config()
    >>> print(settings.ignore_non_populated_fields)
"""

from .settings import (
    QuerySettings,
    load_config,
    get_default_config_path,
)

__all__ = [
    "QuerySettings",
    "load_config",
    "get_default_config_path",
]
