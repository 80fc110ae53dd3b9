"""
Logger configuration

One node of the configuration tree: level, additivity and appender
references for a logger name. Nodes without a level inherit it from
their parent; events logged at a node propagate to the parent while the
node is additive.
"""

from __future__ import annotations

import weakref
from typing import TYPE_CHECKING, Any, Callable, Dict, Optional

from log4py.appenders.base_appender import Appender
from log4py.config.appender_ref import AppenderReference
from log4py.core.level import Level
from log4py.core.settings import get_settings
from log4py.filters.base_filter import BaseFilter

if TYPE_CHECKING:
    from log4py.core.event import Event
    from log4py.core.message import Message

ROOT_LOGGER_NAME = ""


class LoggerConfig:
    """
    Logger configuration node.

    The parent is held through a weak reference; the owning Configuration
    keeps every node alive through its logger table.
    """

    def __init__(
        self,
        name: str = ROOT_LOGGER_NAME,
        level: Optional[Level] = None,
        additive: bool = True,
        event_factory: Optional[Callable[..., "Event"]] = None,
    ):
        """
        Initialize logger configuration.

        Args:
            name: Dotted logger name ("" for root)
            level: Explicit level; None inherits from the parent
            additive: Propagate events to the parent
            event_factory: Event constructor (default: process setting)
        """
        self._name = name
        self._level = Level.coerce(level) if level is not None else None
        self._additive = additive
        self._appenders: Dict[str, AppenderReference] = {}
        self._parent: Optional[weakref.ReferenceType] = None
        self.event_factory = event_factory

    @property
    def name(self) -> str:
        return self._name

    @property
    def is_root(self) -> bool:
        return self._name == ROOT_LOGGER_NAME

    @property
    def configured_level(self) -> Optional[Level]:
        """Explicit level of this node, None when inherited."""
        return self._level

    def set_level(self, level: Optional[Level]) -> None:
        """Set the explicit level; None makes the node inherit again."""
        self._level = Level.coerce(level) if level is not None else None

    @property
    def level(self) -> Level:
        """
        Effective level.

        The first explicit level found walking up the parent chain; a chain
        without one ends at the process default status level.
        """
        node: Optional[LoggerConfig] = self
        while node is not None:
            if node._level is not None:
                return node._level
            node = node.parent
        return get_settings().default_status_level

    @property
    def additive(self) -> bool:
        return self._additive

    @additive.setter
    def additive(self, value: bool) -> None:
        self._additive = bool(value)

    def is_additive(self) -> bool:
        """Returns the value of the additive flag."""
        return self._additive

    @property
    def parent(self) -> Optional["LoggerConfig"]:
        return self._parent() if self._parent is not None else None

    def set_parent(self, parent: Optional["LoggerConfig"]) -> None:
        """
        Link this node to its parent.

        Raises:
            ValueError: If the link would create a cycle
        """
        if parent is None:
            self._parent = None
            return

        node: Optional[LoggerConfig] = parent
        while node is not None:
            if node is self:
                raise ValueError(
                    f"Parent {parent!r} would make {self!r} its own ancestor"
                )
            node = node.parent
        self._parent = weakref.ref(parent)

    def is_enabled(
        self,
        level: Level,
        marker: Optional[str] = None,
        message: Any = None,
        *params: Any,
    ) -> bool:
        """
        Check if an event at `level` passes this node's threshold.

        Marker and message are accepted for filters by content; only the
        level threshold is evaluated.
        """
        return level >= self.level

    def add_appender_reference(
        self,
        appender: Appender,
        level: Optional[Level] = None,
        filter: Optional[BaseFilter] = None,
    ) -> AppenderReference:
        """
        Add (or replace) the reference to `appender`.

        Args:
            appender: Appender to reference; keyed by its name
            level: Minimum level for this reference (None means ALL)
            filter: Optional filter for this reference

        Returns:
            The stored reference
        """
        ref = AppenderReference(appender, level, filter)
        self._appenders[appender.name] = ref
        return ref

    def remove_appender_reference(self, name: str) -> bool:
        """
        Remove the reference to the appender called `name`.

        Returns:
            True if a reference was removed
        """
        return self._appenders.pop(name, None) is not None

    @property
    def appender_references(self) -> Dict[str, AppenderReference]:
        """Appender references keyed by appender name."""
        return dict(self._appenders)

    def log(self, event: "Event") -> None:
        """
        Log an event.

        The event goes to every reference of this node, then to the parent
        while the node is additive. Children are served before parents.
        """
        node: Optional[LoggerConfig] = self
        while node is not None:
            for ref in list(node._appenders.values()):
                ref.append(event)
            if not node._additive:
                break
            node = node.parent

    def log_message(
        self,
        logger_name: str,
        fqmn: str,
        level: Level,
        marker: Optional[str],
        message: "Message",
    ) -> "Event":
        """Create an event with this node's event factory and log it."""
        factory = self.event_factory or get_settings().event_factory
        event = factory(logger_name, fqmn, marker, level, message)
        self.log(event)
        return event

    def __repr__(self) -> str:
        return f"LoggerConfig({self._name or 'root'}:{self.level!s})"
