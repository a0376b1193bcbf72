"""Logging utilities for optbox.

Solvers log their entry and exit at DEBUG level and numerical guards
(degenerate gradients, covariance fallbacks, bracketing caps) at WARNING.
The default level is read from the ``OPTBOX_LOG_LEVEL`` environment variable.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import IO, Optional

_ROOT = "optbox"
_LOG_LEVEL_ENV_VAR = "OPTBOX_LOG_LEVEL"
_FORMAT = "[%(levelname)s] %(name)s: %(message)s"


def _parse_level(level: int | str) -> int:
    if isinstance(level, str):
        return getattr(logging, level.upper(), logging.WARNING)
    return int(level)


_DEFAULT_LEVEL = _parse_level(os.getenv(_LOG_LEVEL_ENV_VAR, "WARNING"))
_default_stream: IO[str] = sys.stderr
_default_format = _FORMAT

_loggers: dict[str, logging.Logger] = {}


def _make_handler(level: int) -> logging.Handler:
    handler = logging.StreamHandler(_default_stream)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(_default_format))
    return handler


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return the cached ``optbox`` logger for ``name``.

    Names outside the package namespace are prefixed with ``optbox.``, so
    ``get_logger(__name__)`` inside the package and ``get_logger("mytool")``
    outside it both land under the package logger tree. Each logger gets
    one stderr handler and does not propagate to the root logger.

    Example:
        >>> from optbox.logging import get_logger
        >>> logger = get_logger(__name__)
        >>> logger.debug("starting line search")
    """
    if name is None or name == _ROOT:
        logger_name = _ROOT
    elif name.startswith(_ROOT + "."):
        logger_name = name
    else:
        logger_name = f"{_ROOT}.{name}"

    cached = _loggers.get(logger_name)
    if cached is not None:
        return cached

    logger = logging.getLogger(logger_name)
    if not logger.handlers:
        logger.setLevel(_DEFAULT_LEVEL)
        logger.addHandler(_make_handler(_DEFAULT_LEVEL))
        logger.propagate = False
    _loggers[logger_name] = logger
    return logger


def set_log_level(level: int | str) -> None:
    """Change the level of every optbox logger, including ones created later.

    ``level`` is a :mod:`logging` constant or its name (``"DEBUG"``...).
    """
    global _DEFAULT_LEVEL
    _DEFAULT_LEVEL = _parse_level(level)
    for logger in _loggers.values():
        logger.setLevel(_DEFAULT_LEVEL)
        for handler in logger.handlers:
            handler.setLevel(_DEFAULT_LEVEL)


def configure_logging(
    level: int | str = logging.WARNING,
    format_string: Optional[str] = None,
    stream: Optional[IO[str]] = None,
) -> None:
    """Send all optbox logging to ``stream`` (stderr by default) at ``level``.

    Existing loggers get a fresh handler; loggers created afterwards pick up
    the same stream, format and level.
    """
    global _DEFAULT_LEVEL, _default_stream, _default_format
    _DEFAULT_LEVEL = _parse_level(level)
    _default_stream = stream if stream is not None else sys.stderr
    _default_format = format_string or _FORMAT

    for logger in _loggers.values():
        logger.setLevel(_DEFAULT_LEVEL)
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
        logger.addHandler(_make_handler(_DEFAULT_LEVEL))


__all__ = ["configure_logging", "get_logger", "set_log_level"]
