# scalar_aad/core/config.py
"""
Package-wide numeric and logging configuration.

Nothing here runs on import besides constant definitions: the library never
installs logging handlers on its own. Applications (or test sessions) that
want to see the engine's DEBUG trace call `configure_logging()`.
"""
from __future__ import annotations
import logging
import os
from typing import Optional, Union
import numpy as np

# numeric type of every node value and gradient accumulator
DTYPE = np.float64

# d(root)/d(root)
ROOT_SEED = 1.0

# numpy floating-point errors are silenced in forward and reverse passes:
# inf and nan flow through the graph instead of warning or raising
NUMERIC_ERRSTATE = dict(divide="ignore", invalid="ignore", over="ignore", under="ignore")

LOGGER_NAME = "scalar_aad"
LOG_LEVEL_ENV = "SCALAR_AAD_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"

_handler: Optional[logging.Handler] = None


def _resolve_level(level: Union[int, str, None]) -> int:
    if level is None:
        level = os.environ.get(LOG_LEVEL_ENV, "WARNING")
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level!r}")
    return resolved


def configure_logging(level: Union[int, str, None] = None,
                      filename: Optional[str] = None) -> logging.Logger:
    """
    Attach a handler to the package logger.

    Args:
        level    : int or level name ("DEBUG", "info", ...). When omitted the
                   SCALAR_AAD_LOG_LEVEL environment variable is read, falling
                   back to WARNING.
        filename : log to this file instead of stderr.

    Returns:
        The "scalar_aad" logger.

    Calling this again replaces the handler installed by the previous call.
    """
    global _handler
    logger = logging.getLogger(LOGGER_NAME)
    resolved = _resolve_level(level)

    if _handler is not None:
        logger.removeHandler(_handler)
        _handler.close()

    handler = logging.FileHandler(filename) if filename else logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATEFMT))
    logger.addHandler(handler)
    logger.setLevel(resolved)
    _handler = handler
    return logger
