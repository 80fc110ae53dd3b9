"""
Pattern layout with customizable template

Formats events using a template string with placeholders
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Mapping, Optional

from log4py.core.settings import get_settings
from log4py.layouts.base_layout import StringLayout

if TYPE_CHECKING:
    from log4py.core.event import Event


class PatternLayout(StringLayout):
    """
    Format events using a customizable template.

    Every formatted event ends with the configured line separator.
    """

    DEFAULT_TEMPLATE = "[{timestamp}] [{level:5}] [{logger}] {message}"

    def __init__(
        self,
        pattern: Optional[str] = None,
        timestamp_format: str = "%Y-%m-%d %H:%M:%S.%f",
        charset: str = "utf-8",
        header: str = "",
        footer: str = "",
    ):
        """
        Initialize pattern layout.

        Args:
            pattern: Format template with placeholders.
                     Available placeholders:
                     - {timestamp}: Timestamp
                     - {level}: Level name
                     - {logger}: Logger name ("root" for the root logger)
                     - {fqmn}: Caller identity
                     - {marker}: Marker (empty if none)
                     - {message}: Formatted message
                     - {thread}: Thread name
                     - {thread_id}: Thread ID
            timestamp_format: strftime format for timestamps; a trailing
                %f is cut to milliseconds
            charset: Output encoding
            header: Text written when the appender starts
            footer: Text written when the appender stops

        Example:
            layout = PatternLayout("{level} {logger} - {message}")
        """
        super().__init__(charset=charset, header=header, footer=footer)
        self.pattern = pattern or self.DEFAULT_TEMPLATE
        self.timestamp_format = timestamp_format

    @classmethod
    def from_options(cls, options: Mapping[str, Any]) -> "PatternLayout":
        """Create layout from declarative options."""
        return cls(
            pattern=options.get("pattern"),
            timestamp_format=options.get("timestamp_format", "%Y-%m-%d %H:%M:%S.%f"),
            charset=options.get("charset", "utf-8"),
            header=options.get("header", ""),
            footer=options.get("footer", ""),
        )

    def to_string(self, event: "Event") -> str:
        timestamp_str = event.timestamp.strftime(self.timestamp_format)
        if self.timestamp_format.endswith("%f"):
            timestamp_str = timestamp_str[:-3]

        format_dict = {
            "timestamp": timestamp_str,
            "level": event.level.name,
            "logger": event.logger or "root",
            "fqmn": event.fqmn,
            "marker": event.marker or "",
            "message": event.message.formatted(),
            "thread": getattr(event, "thread_name", ""),
            "thread_id": getattr(event, "thread_id", 0),
        }

        try:
            text = self.pattern.format(**format_dict)
        except KeyError as e:
            # Unknown placeholder in template
            text = f"[FORMAT ERROR: {e}] {format_dict['message']}"
        return text + get_settings().line_separator

    def __repr__(self) -> str:
        """String representation."""
        return f"PatternLayout(pattern='{self.pattern}')"
