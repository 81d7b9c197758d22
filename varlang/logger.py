"""Minimal logging utilities for varlang.

Provides a simple get_logger function that wraps the standard library logging.
The library never installs handlers; applications (and the varlang-lex CLI)
configure logging themselves.

Example:
    >>> from varlang.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Scanning input")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "varlang." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'varlang.mymodule'
    """
    if not (name == "varlang" or name.startswith("varlang.")):
        name = f"varlang.{name}"
    return logging.getLogger(name)
