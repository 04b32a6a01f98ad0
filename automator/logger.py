"""Run-scoped logger with a queryable log record."""

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import UTC, datetime
from enum import IntEnum
from typing import Any

RUN_LOGGER_NAME = "automator.run"


class Level(IntEnum):
    """Log levels, ordered from most to least verbose."""

    DEBUG = 0
    INFO = 1
    WARN = 2
    ERROR = 3

    @classmethod
    def coerce(cls, value: object) -> "Level":
        """Resolve a level from a member, name, value or logging module level.

        Anything unrecognized resolves to ERROR.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            return cls.__members__.get(value.upper(), cls.ERROR)
        if isinstance(value, int) and not isinstance(value, bool):
            if value in cls._value2member_map_:
                return cls(value)
            return _FROM_STDLIB.get(value, cls.ERROR)
        return cls.ERROR

    @property
    def stdlib(self) -> int:
        """Equivalent level in the standard logging module."""
        return _STDLIB_LEVELS[self]


_STDLIB_LEVELS = {
    Level.DEBUG: logging.DEBUG,
    Level.INFO: logging.INFO,
    Level.WARN: logging.WARNING,
    Level.ERROR: logging.ERROR,
}
_FROM_STDLIB = {stdlib: level for level, stdlib in _STDLIB_LEVELS.items()}


@dataclass(frozen=True, kw_only=True)
class LogEntry:
    """Single message in a run's log record."""

    level: Level
    message: str
    timestamp: datetime
    context: Mapping[str, Any] = field(default_factory=dict)


class Logger:
    """Records messages at or above its level and forwards them to logging."""

    def __init__(self, level: Level = Level.ERROR) -> None:
        self.level = Level.coerce(level)
        self._entries: list[LogEntry] = []
        self._log = logging.getLogger(RUN_LOGGER_NAME)

    @property
    def entries(self) -> tuple[LogEntry, ...]:
        return tuple(self._entries)

    def log(
        self, message: str, level: Level | int = Level.INFO, **context: Any
    ) -> LogEntry | None:
        """Record a message.

        Args:
            message: Text of the entry
            level: Severity of the entry, a Level or a logging module level
            **context: Extra key-value pairs stored with the entry

        Returns:
            The recorded entry, or None if its level is below the logger's

        """
        level = Level.coerce(level)
        if level < self.level:
            return None

        entry = LogEntry(
            level=level,
            message=message,
            timestamp=datetime.now(UTC),
            context=context,
        )
        self._entries.append(entry)
        self._log.log(level.stdlib, message, extra={"context": context})
        return entry

    def debug(self, message: str, **context: Any) -> LogEntry | None:
        return self.log(message, Level.DEBUG, **context)

    def info(self, message: str, **context: Any) -> LogEntry | None:
        return self.log(message, Level.INFO, **context)

    def warning(self, message: str, **context: Any) -> LogEntry | None:
        return self.log(message, Level.WARN, **context)

    def error(self, message: str, **context: Any) -> LogEntry | None:
        return self.log(message, Level.ERROR, **context)
