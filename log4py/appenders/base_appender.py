"""
Base appender interface

An appender is a named output sink with an optional layout and filter.
Appenders take part in the life cycle of the configuration that owns
them: the layout header is written on start and the footer on stop.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Optional

from log4py.core.errors import ContractError
from log4py.core.lifecycle import LifeCycle
from log4py.filters.base_filter import BaseFilter
from log4py.layouts.base_layout import Layout

if TYPE_CHECKING:
    from log4py.core.event import Event


class Appender(LifeCycle, ABC):
    """
    Abstract base class for appenders.

    Subclasses implement `append` (deliver one event) and `write` (emit raw
    layout output), and may override `_open`/`_close` to acquire and
    release resources.
    """

    def __init__(
        self,
        name: str,
        layout: Optional[Layout] = None,
        filter: Optional[BaseFilter] = None,
        ignore_exceptions: bool = True,
    ):
        """
        Initialize appender.

        Args:
            name: Appender name used by appender references. An empty name
                falls back to the class name.
            layout: Layout used to serialize events
            filter: Filter consulted before every append
            ignore_exceptions: When False, append failures propagate to the
                logging call

        Raises:
            ContractError: If name is not a string or layout/filter have the
                wrong type
        """
        super().__init__()
        if not isinstance(name, str):
            raise ContractError(
                f"{type(self).__name__} requires a string name, got {name!r}"
            )
        if layout is not None and not isinstance(layout, Layout):
            raise ContractError(f"Not a layout: {layout!r}")
        if filter is not None and not isinstance(filter, BaseFilter):
            raise ContractError(f"Not a filter: {filter!r}")

        self._name = name or type(self).__name__
        self._layout = layout
        self._filter = filter
        self._ignore_exceptions = ignore_exceptions

    @property
    def name(self) -> str:
        return self._name

    @property
    def layout(self) -> Optional[Layout]:
        return self._layout

    @property
    def filter(self) -> Optional[BaseFilter]:
        return self._filter

    @property
    def ignore_exceptions(self) -> bool:
        """Whether append failures are swallowed (and reported)."""
        return self._ignore_exceptions

    @abstractmethod
    def append(self, event: "Event") -> None:
        """Append an event."""

    @abstractmethod
    def write(self, data: bytes) -> None:
        """Write serialized layout output."""

    def _on_start(self) -> None:
        self._open()
        if self._layout is not None:
            header = self._layout.header()
            if header:
                self.write(header)

    def _on_stop(self) -> None:
        try:
            if self._layout is not None:
                footer = self._layout.footer()
                if footer:
                    self.write(footer)
        finally:
            self._close()

    def _open(self) -> None:
        """Acquire resources."""

    def _close(self) -> None:
        """Release resources."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self._name!r}, state={self.state})"
