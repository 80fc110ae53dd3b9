"""
JSON layout for structured logging

Formats events as one JSON object per line
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any, Mapping, Optional

from log4py.core.options import bool_option
from log4py.core.settings import get_settings
from log4py.layouts.base_layout import StringLayout

if TYPE_CHECKING:
    from log4py.core.event import Event


class JSONLayout(StringLayout):
    """
    Format events as JSON objects.

    Produces structured output suitable for log aggregation systems.
    """

    def __init__(
        self,
        include_thread_info: bool = True,
        include_parameters: bool = False,
        indent: Optional[int] = None,
        ensure_ascii: bool = False,
        charset: str = "utf-8",
    ):
        """
        Initialize JSON layout.

        Args:
            include_thread_info: Include thread_id and thread_name
            include_parameters: Include the message pattern and parameters
            indent: JSON indentation (None for compact, 2 for readable)
            ensure_ascii: Escape non-ASCII characters
            charset: Output encoding
        """
        super().__init__(charset=charset)
        self.include_thread_info = include_thread_info
        self.include_parameters = include_parameters
        self.indent = indent
        self.ensure_ascii = ensure_ascii

    @classmethod
    def from_options(cls, options: Mapping[str, Any]) -> "JSONLayout":
        """Create layout from declarative options."""
        return cls(
            include_thread_info=bool_option(options, "include_thread_info", True),
            include_parameters=bool_option(options, "include_parameters", False),
            indent=options.get("indent"),
            ensure_ascii=bool_option(options, "ensure_ascii", False),
            charset=options.get("charset", "utf-8"),
        )

    def to_string(self, event: "Event") -> str:
        log_dict = {
            "timestamp": event.timestamp.isoformat(),
            "level": event.level.name,
            "logger": event.logger,
            "fqmn": event.fqmn,
            "message": event.message.formatted(),
        }

        if event.marker:
            log_dict["marker"] = event.marker

        if self.include_thread_info:
            log_dict["thread_id"] = getattr(event, "thread_id", 0)
            log_dict["thread_name"] = getattr(event, "thread_name", "")

        if self.include_parameters:
            params = event.message.parameters()
            log_dict["format"] = event.message.format()
            log_dict["parameters"] = [str(p) for p in params] if params else []

        return json.dumps(
            log_dict,
            indent=self.indent,
            ensure_ascii=self.ensure_ascii
        ) + get_settings().line_separator

    @property
    def content_type(self) -> str:
        return f"application/json; charset={self.charset}"

    def __repr__(self) -> str:
        """String representation."""
        return f"JSONLayout(indent={self.indent})"
