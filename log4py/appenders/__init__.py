"""Appenders module - Event output sinks"""

from log4py.appenders.base_appender import Appender
from log4py.appenders.console_appender import ConsoleAppender
from log4py.appenders.file_appender import FileAppender
from log4py.appenders.list_appender import ListAppender

__all__ = ["Appender", "ConsoleAppender", "FileAppender", "ListAppender"]
