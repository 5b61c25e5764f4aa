"""Central logging configuration for ``transaction_analytics``.

Entrypoints (the CLI, or a host application) call :func:`configure_logging`
once. Library modules only ever call :func:`get_logger` with a dotted name
under ``"transaction_analytics"`` and never attach handlers themselves, so an
embedding application keeps full control over where records go.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import IO

PACKAGE_LOGGER_NAME = "transaction_analytics"
LOG_LEVEL_ENV_VAR = "TRANSACTION_ANALYTICS_LOG_LEVEL"
DEFAULT_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"

_handler: logging.Handler | None = None


def resolve_level(level: int | str | None) -> int:
    """Translate ``level`` into a numeric logging level.

    Accepts an ``int``, a numeric string or a level name (case-insensitive).
    ``None`` and unrecognised names fall back to ``TRANSACTION_ANALYTICS_LOG_LEVEL``
    and then to ``logging.INFO``.
    """

    if isinstance(level, int):
        return level
    if isinstance(level, str):
        name = level.strip().upper()
        if name.isdigit():
            return int(name)
        numeric = logging.getLevelName(name)
        if isinstance(numeric, int):
            return numeric
    env_val = os.getenv(LOG_LEVEL_ENV_VAR)
    if env_val and env_val.strip() and env_val != level:
        return resolve_level(env_val)
    return logging.INFO


def configure_logging(
    level: int | str | None = None,
    *,
    fmt: str | None = None,
    stream: IO[str] = sys.stderr,
) -> logging.Logger:
    """Attach a single ``StreamHandler`` to the package logger.

    Repeated calls are no-ops and return the already configured logger.
    Records do not propagate to the root logger once configured.
    """

    global _handler
    logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    if _handler is not None:
        return logger

    for existing in list(logger.handlers):
        if isinstance(existing, logging.NullHandler):
            logger.removeHandler(existing)

    numeric = resolve_level(level)
    handler = logging.StreamHandler(stream)
    handler.setLevel(numeric)
    handler.setFormatter(logging.Formatter(fmt or DEFAULT_FORMAT))

    logger.setLevel(numeric)
    logger.addHandler(handler)
    logger.propagate = False

    _handler = handler
    return logger


def reset_logging() -> None:
    """Undo :func:`configure_logging` (used by tests and long-lived hosts)."""

    global _handler
    logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    if _handler is not None:
        logger.removeHandler(_handler)
        _handler = None
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


def get_logger(name: str) -> logging.Logger:
    """Return ``logging.getLogger(name)``.

    Until :func:`configure_logging` runs, the package logger gets a
    ``NullHandler`` so library use stays silent instead of warning about
    missing handlers.
    """

    pkg_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    if _handler is None and not pkg_logger.handlers:
        pkg_logger.addHandler(logging.NullHandler())
    return logging.getLogger(name)


__all__ = [
    "PACKAGE_LOGGER_NAME",
    "LOG_LEVEL_ENV_VAR",
    "configure_logging",
    "get_logger",
    "reset_logging",
    "resolve_level",
]
