"""Utility modules for indexnum.

Provides:
- logger: get_logger for logging
"""

from indexnum.utils.logger import get_logger

__all__ = [
    "get_logger",
]
