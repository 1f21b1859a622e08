"""
Utility functions for RecordQuery.
"""

from .logging import setup_logger, get_logger

__all__ = [
    "setup_logger",
    "get_logger",
]
