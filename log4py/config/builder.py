"""Configuration builder pattern"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Dict, Iterable, List, Optional, Sequence, Tuple, Union

from log4py.appenders.base_appender import Appender
from log4py.config.configuration import Configuration
from log4py.config.logger_config import ROOT_LOGGER_NAME, LoggerConfig
from log4py.core.level import Level
from log4py.filters.base_filter import BaseFilter

# An appender entry is a name or a (name, level[, filter]) tuple
AppenderEntry = Union[str, Tuple]


@dataclass
class AppenderRefSpec:
    """Declared reference from a logger to an appender name."""

    name: str
    level: Optional[Level] = None
    filter: Optional[BaseFilter] = None

    @classmethod
    def of(cls, entry: Union[AppenderEntry, "AppenderRefSpec"]) -> "AppenderRefSpec":
        """Normalize a name, tuple or spec."""
        if isinstance(entry, AppenderRefSpec):
            return entry
        if isinstance(entry, str):
            return cls(entry)
        return cls(*entry)


@dataclass
class LoggerSpec:
    """Declared logger configuration."""

    name: str
    level: Optional[Level] = None
    additive: bool = True
    appender_refs: List[AppenderRefSpec] = field(default_factory=list)
    event_factory: Optional[Callable] = None


def apply_logger_specs(configuration: Configuration, specs: Iterable[LoggerSpec]) -> None:
    """
    Build and wire logger configurations from specs.

    The root spec updates the existing root node; other specs create new
    nodes.

    Raises:
        NotFoundError: If a spec references an unregistered appender
    """
    for spec in specs:
        if spec.name == ROOT_LOGGER_NAME:
            node = configuration.root
            if spec.level is not None:
                node.set_level(spec.level)
            node.additive = spec.additive
            if spec.event_factory is not None:
                node.event_factory = spec.event_factory
        else:
            node = configuration.add_logger(
                LoggerConfig(
                    spec.name,
                    level=spec.level,
                    additive=spec.additive,
                    event_factory=spec.event_factory,
                )
            )

        for ref in spec.appender_refs:
            configuration.wire(node, ref.name, ref.level, ref.filter)


class BuiltConfiguration(Configuration):
    """Configuration assembled by ConfigurationBuilder."""

    def __init__(
        self,
        name: str,
        appenders: Sequence[Appender],
        specs: Sequence[LoggerSpec],
    ):
        super().__init__(name, source="programmatic")
        self._pending_appenders = list(appenders)
        self._specs = list(specs)

    def setup(self) -> None:
        for appender in self._pending_appenders:
            self.add_appender(appender)

    def configure(self) -> None:
        apply_logger_specs(self, self._specs)


class ConfigurationBuilder:
    """
    Builder pattern for programmatic configurations.

    Example:
        config = (ConfigurationBuilder("app")
            .add_appender(ConsoleAppender("STDOUT"))
            .root(level=Level.WARN, appenders=["STDOUT"])
            .logger("app.db", level=Level.DEBUG, appenders=[("STDOUT", Level.INFO)])
            .build())
    """

    def __init__(self, name: str = "programmatic"):
        self._name = name
        self._appenders: List[Appender] = []
        self._specs: Dict[str, LoggerSpec] = {}

    def with_name(self, name: str) -> "ConfigurationBuilder":
        """Set configuration name."""
        self._name = name
        return self

    def add_appender(self, appender: Appender) -> "ConfigurationBuilder":
        """
        Add an appender.

        Args:
            appender: Appender instance; referenced by its name

        Returns:
            Self for method chaining
        """
        self._appenders.append(appender)
        return self

    def root(
        self,
        level: Optional[Level] = None,
        appenders: Sequence[AppenderEntry] = (),
    ) -> "ConfigurationBuilder":
        """Configure the root logger."""
        return self.logger(ROOT_LOGGER_NAME, level=level, appenders=appenders)

    def logger(
        self,
        name: str,
        level: Optional[Level] = None,
        additive: bool = True,
        appenders: Sequence[AppenderEntry] = (),
        event_factory: Optional[Callable] = None,
    ) -> "ConfigurationBuilder":
        """
        Configure a named logger.

        Args:
            name: Dotted logger name
            level: Explicit level (None inherits)
            additive: Propagate events to the parent logger
            appenders: Appender names or (name, level[, filter]) tuples
            event_factory: Event constructor for this logger

        Returns:
            Self for method chaining
        """
        self._specs[name] = LoggerSpec(
            name,
            level=Level.coerce(level) if level is not None else None,
            additive=additive,
            appender_refs=[AppenderRefSpec.of(entry) for entry in appenders],
            event_factory=event_factory,
        )
        return self

    def build(self) -> Configuration:
        """Build and return the configuration (not yet initialized)."""
        return BuiltConfiguration(self._name, self._appenders, self._specs.values())
