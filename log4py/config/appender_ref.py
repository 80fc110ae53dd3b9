"""
Appender reference

Binds an appender to the minimum level and optional filter one logger
configuration uses it with.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

from log4py.appenders.base_appender import Appender
from log4py.core.errors import AppenderError, ContractError, LifeCycleError
from log4py.core.level import Level
from log4py.core.status import STATUS_LOGGER
from log4py.filters.base_filter import BaseFilter, is_filtered

if TYPE_CHECKING:
    from log4py.core.event import Event


@dataclass
class AppenderReference:
    """
    Reference from a logger configuration to an appender.

    Attributes:
        appender: The referenced appender
        level: Minimum event level (default: ALL, always passes)
        filter: Optional filter; a DENY vote drops the event
    """

    appender: Appender
    level: Level = Level.ALL
    filter: Optional[BaseFilter] = None

    def __post_init__(self):
        if not isinstance(self.appender, Appender):
            raise ContractError(f"Not an appender: {self.appender!r}")
        self.level = Level.ALL if self.level is None else Level.coerce(self.level)

    @property
    def name(self) -> str:
        return self.appender.name

    def accepts(self, event: "Event") -> bool:
        """
        Check level and filters for an event.

        Args:
            event: Event to check

        Returns:
            True if the event should reach the appender
        """
        if event.level < self.level:
            return False
        if is_filtered(self.filter, event):
            return False
        return not is_filtered(self.appender.filter, event)

    def append(self, event: "Event") -> bool:
        """
        Deliver an event to the appender.

        Failures of the filters or the appender are swallowed and reported
        when the appender ignores exceptions, otherwise they are raised as
        AppenderError.

        Returns:
            True if the appender received the event
        """
        try:
            accepted = self.accepts(event)
        except Exception as e:
            return self._failed(e)
        if not accepted:
            return False

        appender = self.appender
        if not appender.is_started:
            if not appender.ignore_exceptions:
                raise LifeCycleError(
                    f"Attempted to append to non-started appender '{appender.name}'"
                )
            STATUS_LOGGER.error(
                "Attempted to append to non-started appender {}", appender.name
            )
            return False

        try:
            appender.append(event)
        except Exception as e:
            return self._failed(e)
        return True

    def _failed(self, error: Exception) -> bool:
        appender = self.appender
        if not appender.ignore_exceptions:
            raise AppenderError(appender.name, str(error)) from error
        STATUS_LOGGER.error(
            "An exception occurred processing appender {}", appender.name,
            exc_info=error,
        )
        return False

    def __repr__(self) -> str:
        """String representation."""
        filter_str = "custom" if self.filter else "none"
        return (
            f"AppenderReference(appender={self.appender.name!r}, "
            f"level={self.level!s}, filter={filter_str})"
        )
