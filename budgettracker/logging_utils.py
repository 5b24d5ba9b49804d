"""Mini README: Application-wide logging helpers for the budget tracker.

Structure:
    * configure_root_logger - one-time root handler setup with a readable format.
    * get_logger - factory returning module loggers with the baseline config.

Usage:
    Modules create ``LOGGER = get_logger(__name__)`` at import time. The CLI
    calls ``configure_root_logger`` with the configured level before serving;
    the handler is only ever installed once so reloaded modules do not stack
    duplicate output.
"""

from __future__ import annotations

import logging
from typing import Optional, Union

_LOGGER_INITIALISED = False


def configure_root_logger(level: Optional[Union[int, str]] = None) -> None:
    """Configure the root logger with a timestamped, module-aware formatter.

    The handler is installed on the first call. Later calls only adjust the
    level, and only when one is passed explicitly.
    """

    global _LOGGER_INITIALISED
    if isinstance(level, str):
        level = level.upper()
    root_logger = logging.getLogger()
    if _LOGGER_INITIALISED:
        if level is not None:
            root_logger.setLevel(level)
        return

    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter(
            "[%(asctime)s] [%(levelname)s] %(name)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )

    root_logger.setLevel(logging.INFO if level is None else level)
    root_logger.addHandler(handler)
    _LOGGER_INITIALISED = True


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a module-specific logger ensuring baseline configuration."""

    configure_root_logger()
    return logging.getLogger(name)
