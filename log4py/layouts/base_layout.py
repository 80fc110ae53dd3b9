"""
Base layout interface

Layouts turn an event into the bytes an appender writes.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from log4py.core.event import Event


class Layout(ABC):
    """
    Abstract base class for layouts.

    Every layout provides a content type (e.g. "text/plain").
    """

    def header(self) -> bytes:
        """Header written when an appender starts."""
        return b""

    def footer(self) -> bytes:
        """Footer written when an appender stops."""
        return b""

    @abstractmethod
    def serialize(self, event: "Event") -> bytes:
        """
        Format an event into bytes.

        Args:
            event: The log event to format

        Returns:
            Serialized event
        """

    @property
    @abstractmethod
    def content_type(self) -> str:
        """Content type output by this layout."""


class StringLayout(Layout):
    """Layout whose output is text in a fixed charset."""

    def __init__(self, charset: str = "utf-8", header: str = "", footer: str = ""):
        self.charset = charset
        self._header = header
        self._footer = footer

    @abstractmethod
    def to_string(self, event: "Event") -> str:
        """Format an event into a string."""

    def header(self) -> bytes:
        return self._header.encode(self.charset)

    def footer(self) -> bytes:
        return self._footer.encode(self.charset)

    def serialize(self, event: "Event") -> bytes:
        return self.to_string(event).encode(self.charset)

    @property
    def content_type(self) -> str:
        return f"text/plain; charset={self.charset}"

    def __call__(self, event: "Event") -> str:
        """Allow layouts to be callable."""
        return self.to_string(event)
