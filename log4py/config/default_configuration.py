"""
Default configuration

Used whenever no configuration source is found or the source cannot be
evaluated: one console appender on the root logger, root level set to
the default status level.
"""

from log4py.appenders.console_appender import ConsoleAppender
from log4py.config.configuration import Configuration
from log4py.core.settings import get_settings
from log4py.layouts.pattern_layout import PatternLayout

DEFAULT_NAME = "Default"
DEFAULT_APPENDER_NAME = "Console"
DEFAULT_PATTERN = "{timestamp} [{thread}] {level:5} {logger} - {message}"


class DefaultConfiguration(Configuration):
    """Fallback configuration."""

    def __init__(self, name: str = DEFAULT_NAME):
        super().__init__(name, source="default")

    def setup(self) -> None:
        self.add_appender(
            ConsoleAppender(
                DEFAULT_APPENDER_NAME,
                layout=PatternLayout(DEFAULT_PATTERN, timestamp_format="%H:%M:%S.%f"),
            )
        )

    def configure(self) -> None:
        self.root.set_level(get_settings().default_status_level)
        self.wire(self.root, DEFAULT_APPENDER_NAME)
