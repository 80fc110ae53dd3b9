"""
Log4py - hierarchical logging framework

Named loggers resolve to nodes of a configuration tree that decide the
effective level and the appenders an event reaches, including additive
propagation to ancestor nodes.
"""

__version__ = "1.0.0"

from log4py.core.level import Level
from log4py.core.logger import Logger
from log4py.core.settings import Settings
from log4py.core.message import (
    ObjectMessage,
    SimpleMessage,
    ParameterizedMessage,
    PrintfFormattedMessage,
)
from log4py.config import (
    Configuration,
    ConfigurationBuilder,
    DefaultConfiguration,
    DictConfiguration,
    LoggerConfig,
)
from log4py.context import LoggerContext
from log4py.manager import (
    init,
    get_context,
    get_logger,
    get_root_logger,
    shutdown,
)

# Import submodules (not all classes by default)
from log4py import appenders
from log4py import filters
from log4py import layouts

__all__ = [
    "Level",
    "Logger",
    "Settings",
    "ObjectMessage",
    "SimpleMessage",
    "ParameterizedMessage",
    "PrintfFormattedMessage",
    "Configuration",
    "ConfigurationBuilder",
    "DefaultConfiguration",
    "DictConfiguration",
    "LoggerConfig",
    "LoggerContext",
    "init",
    "get_context",
    "get_logger",
    "get_root_logger",
    "shutdown",
    "appenders",
    "filters",
    "layouts",
]
