"""File appender"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any, BinaryIO, Mapping, Optional, Union

from log4py.core.errors import ConfigurationError
from log4py.core.options import bool_option
from log4py.filters.base_filter import BaseFilter
from log4py.layouts.base_layout import Layout
from log4py.layouts.pattern_layout import PatternLayout
from log4py.appenders.base_appender import Appender

if TYPE_CHECKING:
    from log4py.core.event import Event


class FileAppender(Appender):
    """Write events to a file; the file is open between start and stop."""

    def __init__(
        self,
        name: str,
        filepath: Union[str, Path],
        layout: Optional[Layout] = None,
        append: bool = True,
        immediate_flush: bool = True,
        filter: Optional[BaseFilter] = None,
        ignore_exceptions: bool = True,
    ):
        """
        Initialize file appender.

        Args:
            name: Appender name
            filepath: Path to log file; parent directories are created
            layout: Layout (default: PatternLayout())
            append: Append to an existing file instead of truncating it
            immediate_flush: Flush after every event
            filter: Optional filter
            ignore_exceptions: Swallow append failures
        """
        super().__init__(
            name,
            layout=layout or PatternLayout(),
            filter=filter,
            ignore_exceptions=ignore_exceptions,
        )
        self.filepath = Path(filepath)
        self.append_mode = append
        self.immediate_flush = immediate_flush
        self._file: Optional[BinaryIO] = None

    @classmethod
    def from_options(
        cls,
        name: str,
        layout: Optional[Layout],
        filter: Optional[BaseFilter],
        options: Mapping[str, Any],
    ) -> "FileAppender":
        """Create appender from declarative options."""
        if "path" not in options:
            raise ConfigurationError(f"File appender '{name}' requires a 'path'")
        return cls(
            name,
            options["path"],
            layout=layout,
            append=bool_option(options, "append", True),
            immediate_flush=bool_option(options, "immediate_flush", True),
            filter=filter,
            ignore_exceptions=bool_option(options, "ignore_exceptions", True),
        )

    def _open(self) -> None:
        """Open log file."""
        self.filepath.parent.mkdir(parents=True, exist_ok=True)
        self._file = open(self.filepath, "ab" if self.append_mode else "wb")

    def _close(self) -> None:
        """Close file."""
        if self._file:
            self._file.close()
            self._file = None

    def append(self, event: "Event") -> None:
        """Write event to file."""
        self.write(self._layout.serialize(event))

    def write(self, data: bytes) -> None:
        if self._file is None:
            raise ValueError(f"File '{self.filepath}' is not open")
        self._file.write(data)
        if self.immediate_flush:
            self._file.flush()

    def flush(self) -> None:
        """Flush file buffer."""
        if self._file:
            self._file.flush()
