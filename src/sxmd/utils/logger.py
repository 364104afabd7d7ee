"""Logging helpers for sxmd.

Everything under the ``sxmd`` logger is debug chatter: unterminated
comments, CDATA sections and environments, plus a one-line summary per
conversion. The library never installs handlers; the CLI's ``--verbose``
routes these records to stderr.

Example:
    >>> from sxmd.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("unterminated HTML comment at offset %d", 42)
"""

from __future__ import annotations

import logging

ROOT_LOGGER_NAME = "sxmd"


def get_logger(name: str) -> logging.Logger:
    """Get a logger under ``sxmd``, so one level setting covers the scanner.

    Example:
        >>> get_logger("cli").name
        'sxmd.cli'
        >>> get_logger("sxmd.scanner.core").name
        'sxmd.scanner.core'
    """
    if name != ROOT_LOGGER_NAME and not name.startswith(ROOT_LOGGER_NAME + "."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)
