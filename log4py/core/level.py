"""
Event level enumeration

Totally ordered severity levels shared by loggers, appender references
and filters.
"""

from enum import IntEnum
from typing import Dict


class Level(IntEnum):
    """
    Severity level of a log event.

    Ordered ALL < TRACE < DEBUG < INFO < WARN < ERROR < FATAL < OFF.
    A threshold of ALL lets everything through, OFF blocks everything.
    """

    ALL = 0
    TRACE = 100
    DEBUG = 200
    INFO = 300
    WARN = 400
    ERROR = 500
    FATAL = 600
    OFF = 1000

    def __str__(self) -> str:
        """String representation of level."""
        return self.name

    @classmethod
    def from_string(cls, level_str: str) -> "Level":
        """
        Convert string to Level.

        Args:
            level_str: Level name (case-insensitive). WARNING and CRITICAL
                are accepted as aliases of WARN and FATAL.

        Returns:
            Level enum value

        Raises:
            ValueError: If level_str is not valid
        """
        key = level_str.strip().upper()
        key = LEVEL_ALIASES.get(key, key)
        if key in cls.__members__:
            return cls[key]
        raise ValueError(f"Invalid log level: {level_str}")

    @classmethod
    def coerce(cls, value) -> "Level":
        """Accept a Level, a level name or a numeric value."""
        if isinstance(value, Level):
            return value
        if isinstance(value, str):
            return cls.from_string(value)
        return cls(value)

    @property
    def color_code(self) -> str:
        """
        Get ANSI color code for this level.

        Returns:
            ANSI escape sequence
        """
        colors = {
            Level.TRACE: "\033[37m",     # White
            Level.DEBUG: "\033[36m",     # Cyan
            Level.INFO: "\033[32m",      # Green
            Level.WARN: "\033[33m",      # Yellow
            Level.ERROR: "\033[31m",     # Red
            Level.FATAL: "\033[35m",     # Magenta
        }
        return colors.get(self, "\033[0m")

    @property
    def reset_code(self) -> str:
        """ANSI reset code."""
        return "\033[0m"


LEVEL_ALIASES: Dict[str, str] = {
    "WARNING": "WARN",
    "CRITICAL": "FATAL",
}


def compare(a: Level, b: Level) -> int:
    """Return -1, 0 or 1 as `a` is less severe, equal or more severe than `b`."""
    return (a > b) - (a < b)


def enabled_at(threshold: Level, event_level: Level) -> bool:
    """True when an event at `event_level` passes `threshold` (inclusive)."""
    return event_level >= threshold
