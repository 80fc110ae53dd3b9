"""
Log event

Provides contextual information about a logged message.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any, Dict, Optional
import threading

from log4py.core.level import Level
from log4py.core.message import Message


class Event(ABC):
    """Abstract log event: read-only view of one logging call."""

    @property
    @abstractmethod
    def fqmn(self) -> str:
        """Fully qualified module name of the caller of the logging API."""

    @property
    @abstractmethod
    def level(self) -> Level:
        """Event level."""

    @property
    @abstractmethod
    def logger(self) -> str:
        """Logger name."""

    @property
    @abstractmethod
    def marker(self) -> Optional[str]:
        """Marker associated with the event."""

    @property
    @abstractmethod
    def message(self) -> Message:
        """Message associated with the event."""

    @property
    @abstractmethod
    def timestamp(self) -> datetime:
        """Event timestamp."""


class LogEvent(Event):
    """
    Default log event.

    Created once per logging call and never mutated afterwards. Thread
    information is captured at construction.
    """

    __slots__ = (
        "_logger", "_fqmn", "_marker", "_level", "_message",
        "_timestamp", "_thread_id", "_thread_name",
    )

    def __init__(
        self,
        logger: str,
        fqmn: str,
        marker: Optional[str],
        level: Level,
        message: Message,
        timestamp: Optional[datetime] = None,
    ):
        if not isinstance(level, Level):
            raise TypeError("level must be Level enum")
        if not isinstance(message, Message):
            raise TypeError("message must be a Message")

        self._logger = logger
        self._fqmn = fqmn
        self._marker = marker
        self._level = level
        self._message = message
        self._timestamp = timestamp or datetime.now()
        self._thread_id = threading.get_ident()
        self._thread_name = threading.current_thread().name

    @property
    def fqmn(self) -> str:
        return self._fqmn

    @property
    def level(self) -> Level:
        return self._level

    @property
    def logger(self) -> str:
        return self._logger

    @property
    def marker(self) -> Optional[str]:
        return self._marker

    @property
    def message(self) -> Message:
        return self._message

    @property
    def timestamp(self) -> datetime:
        return self._timestamp

    @property
    def thread_id(self) -> int:
        return self._thread_id

    @property
    def thread_name(self) -> str:
        return self._thread_name

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert log event to dictionary.

        Returns:
            Dictionary representation
        """
        return {
            "timestamp": self._timestamp.isoformat(),
            "level": self._level.name,
            "logger": self._logger,
            "fqmn": self._fqmn,
            "marker": self._marker,
            "message": self._message.formatted(),
            "thread_id": self._thread_id,
            "thread_name": self._thread_name,
        }

    def __repr__(self) -> str:
        return (
            f"LogEvent(logger={self._logger!r}, level={self._level!s}, "
            f"message={self._message!r})"
        )

    def __str__(self) -> str:
        """String representation."""
        return (
            f"[{self._timestamp.strftime('%Y-%m-%d %H:%M:%S.%f')[:-3]}] "
            f"[{self._level.name:5}] "
            f"[{self._logger or 'root'}] "
            f"{self._message.formatted()}"
        )
