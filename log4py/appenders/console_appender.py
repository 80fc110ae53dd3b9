"""Console appender with optional ANSI colors"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, Any, Mapping, Optional, TextIO

from log4py.core.errors import ConfigurationError
from log4py.core.options import bool_option
from log4py.filters.base_filter import BaseFilter
from log4py.layouts.base_layout import Layout, StringLayout
from log4py.layouts.pattern_layout import PatternLayout
from log4py.appenders.base_appender import Appender

if TYPE_CHECKING:
    from log4py.core.event import Event

TARGETS = ("stdout", "stderr")


class ConsoleAppender(Appender):
    """Write events to the console."""

    def __init__(
        self,
        name: str = "Console",
        layout: Optional[Layout] = None,
        target: str = "stdout",
        colored: bool = False,
        stream: Optional[TextIO] = None,
        filter: Optional[BaseFilter] = None,
        ignore_exceptions: bool = True,
    ):
        """
        Initialize console appender.

        Args:
            name: Appender name
            layout: Layout (default: PatternLayout())
            target: "stdout" or "stderr"; resolved on every write
            colored: Wrap output in the level's ANSI color
            stream: Explicit output stream, overrides target
            filter: Optional filter
            ignore_exceptions: Swallow append failures
        """
        if target not in TARGETS:
            raise ConfigurationError(f"Console target must be one of {TARGETS}")

        super().__init__(
            name,
            layout=layout or PatternLayout(),
            filter=filter,
            ignore_exceptions=ignore_exceptions,
        )
        self.target = target
        self.colored = colored
        self._stream = stream

    @classmethod
    def from_options(
        cls,
        name: str,
        layout: Optional[Layout],
        filter: Optional[BaseFilter],
        options: Mapping[str, Any],
    ) -> "ConsoleAppender":
        """Create appender from declarative options."""
        return cls(
            name,
            layout=layout,
            target=options.get("target", "stdout"),
            colored=bool_option(options, "colored", False),
            filter=filter,
            ignore_exceptions=bool_option(options, "ignore_exceptions", True),
        )

    @property
    def stream(self) -> TextIO:
        if self._stream is not None:
            return self._stream
        return sys.stdout if self.target == "stdout" else sys.stderr

    def append(self, event: "Event") -> None:
        """Write event to console."""
        if isinstance(self._layout, StringLayout):
            text = self._layout.to_string(event)
        else:
            text = self._layout.serialize(event).decode("utf-8", errors="replace")

        if self.colored:
            body = text.rstrip("\r\n")
            text = f"{event.level.color_code}{body}{event.level.reset_code}{text[len(body):]}"

        self.stream.write(text)
        self.stream.flush()

    def write(self, data: bytes) -> None:
        self.stream.write(data.decode("utf-8", errors="replace"))
        self.stream.flush()

    def flush(self) -> None:
        """Flush stream."""
        self.stream.flush()
