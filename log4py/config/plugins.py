"""
Plugin registry

Maps the type names used in declarative configuration to appender,
layout and filter classes. Appender classes provide
`from_options(name, layout, filter, options)`; layout and filter classes
provide `from_options(options)`.
"""

from typing import Any, Dict, Mapping, Optional

from log4py.appenders.base_appender import Appender
from log4py.appenders.console_appender import ConsoleAppender
from log4py.appenders.file_appender import FileAppender
from log4py.appenders.list_appender import ListAppender
from log4py.core.errors import ConfigurationError, ContractError
from log4py.filters.base_filter import BaseFilter
from log4py.filters.level_filter import LevelFilter
from log4py.filters.pattern_filter import PatternFilter
from log4py.layouts.base_layout import Layout
from log4py.layouts.json_layout import JSONLayout
from log4py.layouts.pattern_layout import PatternLayout

APPENDER_TYPES: Dict[str, type] = {
    "console": ConsoleAppender,
    "file": FileAppender,
    "list": ListAppender,
}

LAYOUT_TYPES: Dict[str, type] = {
    "pattern": PatternLayout,
    "json": JSONLayout,
}

FILTER_TYPES: Dict[str, type] = {
    "level": LevelFilter,
    "pattern": PatternFilter,
    "regex": PatternFilter,
}


def _register(table: Dict[str, type], base: type, type_name: str, cls: type) -> None:
    if not (isinstance(cls, type) and issubclass(cls, base)):
        raise ContractError(f"{cls!r} is not a {base.__name__} subclass")
    if not callable(getattr(cls, "from_options", None)):
        raise ContractError(f"{cls.__name__} must provide a from_options() constructor")
    table[type_name.lower()] = cls


def register_appender(type_name: str, cls: type) -> None:
    """Register an appender class under `type_name`."""
    _register(APPENDER_TYPES, Appender, type_name, cls)


def register_layout(type_name: str, cls: type) -> None:
    """Register a layout class under `type_name`."""
    _register(LAYOUT_TYPES, Layout, type_name, cls)


def register_filter(type_name: str, cls: type) -> None:
    """Register a filter class under `type_name`."""
    _register(FILTER_TYPES, BaseFilter, type_name, cls)


def _lookup(table: Dict[str, type], kind: str, spec: Mapping[str, Any]) -> type:
    if not isinstance(spec, Mapping):
        raise ConfigurationError(f"{kind} definition must be a mapping, got {spec!r}")
    type_name = spec.get("type")
    if not type_name:
        raise ConfigurationError(f"{kind} definition requires a 'type'")
    try:
        return table[str(type_name).lower()]
    except KeyError:
        raise ConfigurationError(f"Unknown {kind.lower()} type '{type_name}'") from None


def create_layout(spec: Mapping[str, Any]) -> Layout:
    """Create a layout from its declarative definition."""
    return _lookup(LAYOUT_TYPES, "Layout", spec).from_options(spec)


def create_filter(spec: Mapping[str, Any]) -> BaseFilter:
    """Create a filter from its declarative definition."""
    return _lookup(FILTER_TYPES, "Filter", spec).from_options(spec)


def create_appender(spec: Mapping[str, Any], name: Optional[str] = None) -> Appender:
    """
    Create an appender from its declarative definition.

    Args:
        spec: Mapping with 'type', 'name' and optional 'layout'/'filter'
        name: Name overriding spec['name']

    Raises:
        ConfigurationError: If the definition is incomplete or unknown
    """
    cls = _lookup(APPENDER_TYPES, "Appender", spec)
    name = name or spec.get("name")
    if not name:
        raise ConfigurationError("Appender definition requires a 'name'")

    layout = create_layout(spec["layout"]) if spec.get("layout") else None
    event_filter = create_filter(spec["filter"]) if spec.get("filter") else None
    return cls.from_options(name, layout, event_filter, spec)
