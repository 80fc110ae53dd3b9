"""
Base filter interface

A filter votes on an event; only a DENY vote stops delivery.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from log4py.core.event import Event


class FilterResult(Enum):
    """Outcome of a filter."""

    ACCEPT = "accept"
    NEUTRAL = "neutral"
    DENY = "deny"

    @classmethod
    def from_string(cls, value: str) -> "FilterResult":
        """Convert string (case-insensitive) to FilterResult."""
        try:
            return cls[value.strip().upper()]
        except KeyError:
            raise ValueError(f"Invalid filter result: {value}") from None


class BaseFilter(ABC):
    """
    Abstract base class for event filters.

    Filters decide whether an event routed through an appender reference
    should reach the appender.
    """

    @abstractmethod
    def filter(self, event: "Event") -> FilterResult:
        """
        Vote on an event.

        Args:
            event: The log event to filter

        Returns:
            ACCEPT, NEUTRAL or DENY
        """

    def __call__(self, event: "Event") -> FilterResult:
        """Allow filters to be callable."""
        return self.filter(event)


def is_filtered(event_filter: Optional[BaseFilter], event: "Event") -> bool:
    """Return True if `event_filter` is set and denies `event`."""
    return event_filter is not None and event_filter.filter(event) is FilterResult.DENY
