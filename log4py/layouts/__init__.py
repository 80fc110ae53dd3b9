"""
Layouts module

Provides layout implementations that turn events into bytes for appenders.
"""

from log4py.layouts.base_layout import Layout, StringLayout
from log4py.layouts.pattern_layout import PatternLayout
from log4py.layouts.json_layout import JSONLayout

__all__ = [
    "Layout",
    "StringLayout",
    "PatternLayout",
    "JSONLayout",
]
