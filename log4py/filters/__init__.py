"""
Event filters module

Provides filter implementations used by appender references and appenders.
"""

from log4py.filters.base_filter import BaseFilter, FilterResult, is_filtered
from log4py.filters.level_filter import LevelFilter
from log4py.filters.pattern_filter import PatternFilter
from log4py.filters.callback_filter import CallbackFilter

__all__ = [
    "BaseFilter",
    "FilterResult",
    "is_filtered",
    "LevelFilter",
    "PatternFilter",
    "CallbackFilter",
]
