"""Logging utilities.

This module provides a unified logging interface for the whole package.
Every module obtains its logger through :func:`get_logger` so that handler
setup and level changes happen in one place.

Notes
-----
The initial level is read from the active configuration
(``logging.level``); :func:`set_log_level` changes it at runtime for every
logger handed out so far.
"""

import logging
from typing import Dict

from pyntl.configs import active_config


_LOGGERS: Dict[str, logging.Logger] = {}


def _initial_level() -> int:
    """Return the configured default log level.

    Returns
    -------
    int
        Numeric logging level.
    """
    level = active_config().get("logging", {}).get("level", "WARNING")
    return getattr(logging, str(level).upper(), logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Get a configured logger for the given module.

    Parameters
    ----------
    name : str
        Module name (typically __name__).

    Returns
    -------
    logging.Logger
        Configured logger instance.

    Notes
    -----
    - Loggers are named ``pyntl.<name>`` (a leading ``pyntl.`` is not doubled)
    - One StreamHandler per logger, propagation disabled
    - Always use this function instead of direct logging.getLogger()

    Examples
    --------
    >>> logger = get_logger("fields.extension")
    >>> logger.name
    'pyntl.fields.extension'
    """
    if name not in _LOGGERS:
        full_name = name if name.startswith("pyntl") else f"pyntl.{name}"
        logger = logging.getLogger(full_name)
        if not logger.handlers:
            handler = logging.StreamHandler()
            formatter = logging.Formatter("%(levelname)s:%(name)s:%(message)s")
            handler.setFormatter(formatter)
            logger.addHandler(handler)
            logger.propagate = False
        logger.setLevel(_initial_level())
        _LOGGERS[name] = logger
    return _LOGGERS[name]


def set_log_level(level: str) -> None:
    """Set the logging level for all pyntl loggers.

    Parameters
    ----------
    level : str
        Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    for logger in _LOGGERS.values():
        logger.setLevel(numeric_level)
