"""
Internal status logger

The framework reports its own problems (broken configuration sources,
failing appenders) here instead of through the loggers it manages.
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Deque, List, Optional, TextIO
import sys

from log4py.core.level import Level
from log4py.core.message import ParameterizedMessage

MAX_STATUS_ENTRIES = 200


@dataclass
class StatusData:
    """One status record."""

    level: Level
    message: str
    exc_info: Optional[BaseException] = None
    timestamp: datetime = field(default_factory=datetime.now)

    def __str__(self) -> str:
        text = f"{self.level.name} StatusLogger {self.message}"
        if self.exc_info is not None:
            text += f": {type(self.exc_info).__name__}: {self.exc_info}"
        return text


class StatusLogger:
    """
    Self-logger of the framework.

    Every record is kept in a bounded buffer; records at or above `level`
    are also written to the stream (stderr by default, resolved on each
    write).
    """

    def __init__(
        self,
        level: Level = Level.WARN,
        stream: Optional[TextIO] = None,
        max_entries: int = MAX_STATUS_ENTRIES,
    ):
        self.level = level
        self.stream = stream
        self._buffer: Deque[StatusData] = deque(maxlen=max_entries)

    def log(
        self,
        level: Level,
        msg: str,
        *params: Any,
        exc_info: Optional[BaseException] = None,
    ) -> None:
        """Record a status message."""
        text = ParameterizedMessage(msg, *params).formatted() if params else msg
        data = StatusData(level=level, message=text, exc_info=exc_info)
        self._buffer.append(data)

        if level >= self.level:
            stream = self.stream or sys.stderr
            stream.write(str(data) + "\n")
            stream.flush()

    def trace(self, msg: str, *params: Any, **kwargs) -> None:
        self.log(Level.TRACE, msg, *params, **kwargs)

    def debug(self, msg: str, *params: Any, **kwargs) -> None:
        self.log(Level.DEBUG, msg, *params, **kwargs)

    def info(self, msg: str, *params: Any, **kwargs) -> None:
        self.log(Level.INFO, msg, *params, **kwargs)

    def warn(self, msg: str, *params: Any, **kwargs) -> None:
        self.log(Level.WARN, msg, *params, **kwargs)

    def error(self, msg: str, *params: Any, **kwargs) -> None:
        self.log(Level.ERROR, msg, *params, **kwargs)

    def fatal(self, msg: str, *params: Any, **kwargs) -> None:
        self.log(Level.FATAL, msg, *params, **kwargs)

    def get_entries(self, min_level: Level = Level.ALL) -> List[StatusData]:
        """Return buffered records at or above `min_level`."""
        return [data for data in self._buffer if data.level >= min_level]

    def clear(self) -> None:
        """Drop all buffered records."""
        self._buffer.clear()


STATUS_LOGGER = StatusLogger()
