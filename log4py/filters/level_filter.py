"""
Level-based filter

Filters events based on a level range
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Mapping, Optional

from log4py.core.level import Level
from log4py.filters.base_filter import BaseFilter, FilterResult

if TYPE_CHECKING:
    from log4py.core.event import Event


class LevelFilter(BaseFilter):
    """
    Filter events based on level.

    Events inside [min_level, max_level] get `on_match`, others get
    `on_mismatch`.
    """

    def __init__(
        self,
        min_level: Optional[Level] = None,
        max_level: Optional[Level] = None,
        on_match: FilterResult = FilterResult.NEUTRAL,
        on_mismatch: FilterResult = FilterResult.DENY,
    ):
        """
        Initialize level filter.

        Args:
            min_level: Minimum level (inclusive). If None, no minimum.
            max_level: Maximum level (inclusive). If None, no maximum.
            on_match: Result for events inside the range
            on_mismatch: Result for events outside the range

        Example:
            # Only let WARN and above through
            filter = LevelFilter(min_level=Level.WARN)

            # Only DEBUG to INFO
            filter = LevelFilter(min_level=Level.DEBUG, max_level=Level.INFO)
        """
        self.min_level = min_level
        self.max_level = max_level
        self.on_match = on_match
        self.on_mismatch = on_mismatch

    @classmethod
    def from_options(cls, options: Mapping[str, Any]) -> "LevelFilter":
        """Create filter from declarative options."""
        def level(key):
            value = options.get(key)
            return Level.coerce(value) if value is not None else None

        return cls(
            min_level=level("min_level"),
            max_level=level("max_level"),
            on_match=FilterResult.from_string(options.get("on_match", "neutral")),
            on_mismatch=FilterResult.from_string(options.get("on_mismatch", "deny")),
        )

    def filter(self, event: "Event") -> FilterResult:
        if self.min_level is not None and event.level < self.min_level:
            return self.on_mismatch

        if self.max_level is not None and event.level > self.max_level:
            return self.on_mismatch

        return self.on_match

    def __repr__(self) -> str:
        """String representation."""
        return f"LevelFilter(min={self.min_level!s}, max={self.max_level!s})"
