"""
List appender: holds events, messages and data in memory

Primarily used for testing. Use in a real environment is discouraged as
it grows without bound.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Any, List, Mapping, Optional

from log4py.core.options import bool_option
from log4py.filters.base_filter import BaseFilter
from log4py.layouts.base_layout import Layout
from log4py.appenders.base_appender import Appender

if TYPE_CHECKING:
    from log4py.core.event import Event

_LINE_BREAKS = re.compile(r"[\r\n]+")


class ListAppender(Appender):
    """
    In-memory appender.

    Without a layout, events are kept as is. With a layout, serialized
    output is kept as raw bytes (`raw=True`) or decoded strings, optionally
    split into one entry per line (`new_line=True`).
    """

    def __init__(
        self,
        name: str = "List",
        layout: Optional[Layout] = None,
        raw: bool = False,
        new_line: bool = False,
        filter: Optional[BaseFilter] = None,
        ignore_exceptions: bool = True,
    ):
        super().__init__(
            name, layout=layout, filter=filter, ignore_exceptions=ignore_exceptions
        )
        self.raw = raw
        self.new_line = new_line
        self.events: List["Event"] = []
        self.messages: List[str] = []
        self.data = bytearray()

    @classmethod
    def from_options(
        cls,
        name: str,
        layout: Optional[Layout],
        filter: Optional[BaseFilter],
        options: Mapping[str, Any],
    ) -> "ListAppender":
        """Create appender from declarative options."""
        return cls(
            name,
            layout=layout,
            raw=bool_option(options, "raw", False),
            new_line=bool_option(options, "new_line", False),
            filter=filter,
            ignore_exceptions=bool_option(options, "ignore_exceptions", True),
        )

    def append(self, event: "Event") -> None:
        if self._layout is None:
            self.events.append(event)
        else:
            self.write(self._layout.serialize(event))

    def write(self, data: bytes) -> None:
        if self.raw:
            self.data.extend(data)
            return

        msg = data.decode("utf-8")
        if self.new_line:
            self.messages.extend(part for part in _LINE_BREAKS.split(msg) if part)
        else:
            self.messages.append(msg)

    def clear(self) -> None:
        """Drop everything recorded so far."""
        self.events.clear()
        self.messages.clear()
        self.data.clear()
