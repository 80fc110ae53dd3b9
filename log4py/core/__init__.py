"""
Core module for the logging framework

This module contains the fundamental types:
- Level: Event level enumeration
- LifeCycle / State: Shared life cycle state machine
- Message variants: Object, Simple, Parameterized, PrintfFormatted
- Event / LogEvent: Log event contract and default implementation
- Settings: Process-wide settings
- StatusLogger: Internal self-logger
- Logger: Logger bound to a configuration node
"""

from log4py.core.level import Level
from log4py.core.lifecycle import LifeCycle, State
from log4py.core.errors import (
    Log4pyError,
    ConfigurationError,
    ContractError,
    NotFoundError,
    LifeCycleError,
    AppenderError,
)
from log4py.core.message import (
    Message,
    ObjectMessage,
    SimpleMessage,
    ParameterizedMessage,
    PrintfFormattedMessage,
)
from log4py.core.event import Event, LogEvent
from log4py.core.settings import Settings, get_settings
from log4py.core.status import STATUS_LOGGER, StatusLogger
from log4py.core.logger import Logger

__all__ = [
    "Level",
    "LifeCycle",
    "State",
    "Log4pyError",
    "ConfigurationError",
    "ContractError",
    "NotFoundError",
    "LifeCycleError",
    "AppenderError",
    "Message",
    "ObjectMessage",
    "SimpleMessage",
    "ParameterizedMessage",
    "PrintfFormattedMessage",
    "Event",
    "LogEvent",
    "Settings",
    "get_settings",
    "STATUS_LOGGER",
    "StatusLogger",
    "Logger",
]
