"""
Pattern-based filter using regular expressions

Filters events based on formatted message content
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Any, Mapping, Pattern, Union

from log4py.core.options import bool_option
from log4py.filters.base_filter import BaseFilter, FilterResult

if TYPE_CHECKING:
    from log4py.core.event import Event


class PatternFilter(BaseFilter):
    """
    Filter events based on regex pattern matching.

    Can be configured to include or exclude matching messages.
    """

    def __init__(
        self,
        pattern: Union[str, Pattern],
        exclude: bool = False,
        case_sensitive: bool = True
    ):
        """
        Initialize pattern filter.

        Args:
            pattern: Regular expression pattern (string or compiled Pattern)
            exclude: If True, deny matching messages. If False, deny
                everything that does not match.
            case_sensitive: Whether pattern matching is case-sensitive
        """
        if isinstance(pattern, str):
            flags = 0 if case_sensitive else re.IGNORECASE
            self.pattern = re.compile(pattern, flags)
        else:
            self.pattern = pattern

        self.exclude = exclude

    @classmethod
    def from_options(cls, options: Mapping[str, Any]) -> "PatternFilter":
        """Create filter from declarative options."""
        return cls(
            options["pattern"],
            exclude=bool_option(options, "exclude", False),
            case_sensitive=bool_option(options, "case_sensitive", True),
        )

    def filter(self, event: "Event") -> FilterResult:
        matches = self.pattern.search(event.message.formatted()) is not None
        if matches != self.exclude:
            return FilterResult.NEUTRAL
        return FilterResult.DENY

    def __repr__(self) -> str:
        """String representation."""
        mode = "exclude" if self.exclude else "include"
        return f"PatternFilter(pattern='{self.pattern.pattern}', mode={mode})"
