"""
Callback-based filter

Filters events using custom callback functions
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from log4py.core.status import STATUS_LOGGER
from log4py.filters.base_filter import BaseFilter, FilterResult

if TYPE_CHECKING:
    from log4py.core.event import Event


class CallbackFilter(BaseFilter):
    """
    Filter events using a predicate.

    The predicate returns True to let the event through and False to deny
    it.
    """

    def __init__(self, callback: Callable[["Event"], bool]):
        """
        Initialize callback filter.

        Args:
            callback: Function that takes an Event and returns bool.

        Example:
            # Only events carrying a marker
            filter = CallbackFilter(lambda event: event.marker == "AUDIT")
        """
        if not callable(callback):
            raise TypeError("callback must be callable")

        self.callback = callback

    def filter(self, event: "Event") -> FilterResult:
        try:
            allowed = self.callback(event)
        except Exception as e:
            # Report and let the event through
            STATUS_LOGGER.error("Filter callback {} failed", self, exc_info=e)
            return FilterResult.NEUTRAL
        return FilterResult.NEUTRAL if allowed else FilterResult.DENY

    def __repr__(self) -> str:
        """String representation."""
        callback_name = getattr(self.callback, '__name__', repr(self.callback))
        return f"CallbackFilter(callback={callback_name})"
