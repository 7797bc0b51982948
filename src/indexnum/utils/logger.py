"""Minimal logging utilities for indexnum.

Provides a simple get_logger function that wraps the standard library logging.

Example:
    >>> from indexnum.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Collecting index entries")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "indexnum." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'indexnum.mymodule'
    """
    if not (name == "indexnum" or name.startswith("indexnum.")):
        name = f"indexnum.{name}"
    return logging.getLogger(name)
