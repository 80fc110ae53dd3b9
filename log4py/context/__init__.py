"""Context module - Logger contexts and context selection"""

from log4py.context.logger_context import LoggerContext
from log4py.context.selector import (
    ContextSelector,
    ModuleContextSelector,
    PackageContextSelector,
    SingletonContextSelector,
    create_selector,
)

__all__ = [
    "LoggerContext",
    "ContextSelector",
    "ModuleContextSelector",
    "PackageContextSelector",
    "SingletonContextSelector",
    "create_selector",
]
