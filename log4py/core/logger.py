"""
Logger - the object application code logs through

A logger is bound to the LoggerConfig its name resolves to inside a
started LoggerContext.
"""

from __future__ import annotations
from typing import TYPE_CHECKING, Any, Optional

from log4py.core.level import Level
from log4py.core.message import Message

if TYPE_CHECKING:
    from log4py.config.logger_config import LoggerConfig
    from log4py.context.logger_context import LoggerContext


class Logger:
    """Named logger bound to a logger configuration."""

    def __init__(
        self,
        context: "LoggerContext",
        name: str,
        logger_config: "LoggerConfig",
        message_factory: type,
        fqmn: Optional[str] = None,
    ):
        self._context = context
        self._name = name
        self._config = logger_config
        self._message_factory = message_factory
        self._fqmn = fqmn if fqmn is not None else context.name
        self._metrics = {"logged": 0, "filtered": 0}

    @property
    def name(self) -> str:
        return self._name

    @property
    def fqmn(self) -> str:
        return self._fqmn

    @property
    def context(self) -> "LoggerContext":
        return self._context

    @property
    def logger_config(self) -> "LoggerConfig":
        """The configuration node this logger's name resolved to."""
        return self._config

    @property
    def level(self) -> Level:
        """Effective level of the bound configuration."""
        return self._config.level

    @property
    def message_factory(self) -> type:
        return self._message_factory

    def is_enabled(self, level: Level, marker: Optional[str] = None) -> bool:
        """Check whether an event at `level` would be logged."""
        return self._config.is_enabled(level, marker)

    def log(
        self,
        level: Level,
        msg: Any,
        *params: Any,
        marker: Optional[str] = None,
        fqmn: Optional[str] = None,
    ) -> None:
        """
        Log a message.

        Args:
            level: Event level
            msg: Message pattern, Message instance or any object
            *params: Pattern parameters
            marker: Optional symbolic tag
            fqmn: Caller identity (default: the one given at acquisition)
        """
        if not self._config.is_enabled(level, marker, msg, *params):
            self._metrics["filtered"] += 1
            return

        message: Message = self._message_factory.create(msg, *params)
        self._config.log_message(
            self._name, fqmn or self._fqmn, level, marker, message
        )
        self._metrics["logged"] += 1

    def trace(self, msg: Any, *params: Any, **kwargs) -> None:
        """Log trace message."""
        self.log(Level.TRACE, msg, *params, **kwargs)

    def debug(self, msg: Any, *params: Any, **kwargs) -> None:
        """Log debug message."""
        self.log(Level.DEBUG, msg, *params, **kwargs)

    def info(self, msg: Any, *params: Any, **kwargs) -> None:
        """Log info message."""
        self.log(Level.INFO, msg, *params, **kwargs)

    def warn(self, msg: Any, *params: Any, **kwargs) -> None:
        """Log warning message."""
        self.log(Level.WARN, msg, *params, **kwargs)

    def error(self, msg: Any, *params: Any, **kwargs) -> None:
        """Log error message."""
        self.log(Level.ERROR, msg, *params, **kwargs)

    def fatal(self, msg: Any, *params: Any, **kwargs) -> None:
        """Log fatal message."""
        self.log(Level.FATAL, msg, *params, **kwargs)

    def get_metrics(self) -> dict:
        """Get logging metrics."""
        return self._metrics.copy()

    def __repr__(self) -> str:
        return f"Logger({self._name or 'root'}:{self.level!s})"
