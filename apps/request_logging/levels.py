"""
apps.request_logging.levels
~~~~~~~~~~~~~~~~~~~~~~~~~~~
The closed set of severities a request can be logged at, and the dispatch
from a :class:`Level` onto a structlog bound logger.

Public API
----------
Level   – Ordered severity enum
emit    – Emit one entry at a given Level
"""
from __future__ import annotations

import logging
from enum import IntEnum

from common.exceptions import InvalidLevelError


class Level(IntEnum):
    """
    Severity of a request's log entries, ordered by increasing severity.

    Values line up with :mod:`logging` numbers so that ``filter_by_level``
    and stdlib handlers treat them consistently.  ``PANIC`` sits above
    ``CRITICAL`` and has no stdlib counterpart.
    """

    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARN = logging.WARNING
    ERROR = logging.ERROR
    FATAL = logging.CRITICAL
    PANIC = logging.CRITICAL + 10

    @classmethod
    def parse(cls, value: Level | str) -> Level:
        """
        Return the :class:`Level` named by *value*.

        Names are case-insensitive; ``warning`` and ``critical`` are accepted
        as aliases for ``warn`` and ``fatal``.

        Raises:
            InvalidLevelError: *value* names no level.
        """
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            raise InvalidLevelError(value)
        name = value.strip().lower()
        level = _ALIASES.get(name)
        if level is None:
            raise InvalidLevelError(value)
        return level


_ALIASES: dict[str, Level] = {
    "debug": Level.DEBUG,
    "info": Level.INFO,
    "warn": Level.WARN,
    "warning": Level.WARN,
    "error": Level.ERROR,
    "fatal": Level.FATAL,
    "critical": Level.FATAL,
    "panic": Level.PANIC,
}


def emit(logger, level: Level, event: str, **fields) -> None:
    """Emit *event* on *logger* at *level*."""
    if level is Level.DEBUG:
        logger.debug(event, **fields)
    elif level is Level.INFO:
        logger.info(event, **fields)
    elif level is Level.WARN:
        logger.warning(event, **fields)
    elif level is Level.ERROR:
        logger.error(event, **fields)
    elif level is Level.FATAL or level is Level.PANIC:
        logger.critical(event, **fields)
    else:
        raise InvalidLevelError(level)
