"""
Configuration

Owns the logger configuration tree and the appenders it references.
Concrete configurations fill it in two phases, always in this order:
`setup` creates the appenders, `configure` builds the tree and wires it
to appenders by name.
"""

from __future__ import annotations

import threading
from abc import ABC, abstractmethod
from typing import Dict, Optional

from log4py.appenders.base_appender import Appender
from log4py.config.appender_ref import AppenderReference
from log4py.config.logger_config import ROOT_LOGGER_NAME, LoggerConfig
from log4py.core.errors import (
    ConfigurationError,
    ContractError,
    LifeCycleError,
    NotFoundError,
)
from log4py.core.level import Level
from log4py.core.lifecycle import LifeCycle, State
from log4py.core.status import STATUS_LOGGER
from log4py.filters.base_filter import BaseFilter


class Configuration(LifeCycle, ABC):
    """
    Abstract configuration.

    Thread Safety:
        The logger and appender tables are guarded by a lock.
    """

    def __init__(self, name: str = "", source: str = ""):
        super().__init__()
        self._name = name
        self._source = source
        self._root = LoggerConfig(ROOT_LOGGER_NAME)
        self._loggers: Dict[str, LoggerConfig] = {ROOT_LOGGER_NAME: self._root}
        self._appenders: Dict[str, Appender] = {}
        self._initialized = False
        self._lock = threading.RLock()

    @abstractmethod
    def setup(self) -> None:
        """Create appenders (see `add_appender`)."""

    @abstractmethod
    def configure(self) -> None:
        """Build logger configurations (see `add_logger` and `wire`)."""

    @property
    def name(self) -> str:
        return self._name

    @property
    def source(self) -> str:
        return self._source

    @property
    def root(self) -> LoggerConfig:
        return self._root

    @property
    def loggers(self) -> Dict[str, LoggerConfig]:
        """Logger configurations keyed by name; always contains root."""
        with self._lock:
            return dict(self._loggers)

    @property
    def appenders(self) -> Dict[str, Appender]:
        """Appenders keyed by name."""
        with self._lock:
            return dict(self._appenders)

    @property
    def is_initialized(self) -> bool:
        return self._initialized

    def initialize(self) -> None:
        """
        Run `setup` then `configure`, then link every node to its parent.

        Runs once; later calls are no-ops. If a phase raises, appenders
        created so far are stopped, the configuration becomes INVALID and
        the exception propagates.
        """
        with self._lock:
            if self._initialized:
                return
            if self.state not in (State.INITIALIZED, State.STARTING):
                raise LifeCycleError(
                    f"Cannot initialize {self!r} in state {self.state}"
                )

            try:
                self.setup()
                self.configure()
                self._link_parents()
            except Exception:
                self._stop_appenders()
                self.set_state(State.INVALID)
                raise

            self._initialized = True
            STATUS_LOGGER.debug(
                "{} initialized with {} loggers and {} appenders",
                self, len(self._loggers), len(self._appenders),
            )

    def add_appender(self, appender: Appender) -> Appender:
        """
        Register an appender and start it.

        Raises:
            ContractError: If `appender` is not an Appender
            ConfigurationError: If another appender already uses the name
        """
        if not isinstance(appender, Appender):
            raise ContractError(f"Not an appender: {appender!r}")

        with self._lock:
            existing = self._appenders.get(appender.name)
            if existing is not None and existing is not appender:
                raise ConfigurationError(
                    f"Appender '{appender.name}' is already registered"
                )
            appender.start()
            self._appenders[appender.name] = appender
        return appender

    def add_logger(self, logger_config: LoggerConfig) -> LoggerConfig:
        """
        Register a logger configuration.

        A node named "" replaces the root. Parent links of the whole tree
        are refreshed.
        """
        if not isinstance(logger_config, LoggerConfig):
            raise ContractError(f"Not a logger configuration: {logger_config!r}")

        with self._lock:
            if logger_config.is_root:
                self._root = logger_config
            self._loggers[logger_config.name] = logger_config
            self._link_parents()
        return logger_config

    def wire(
        self,
        logger_config: LoggerConfig,
        appender_name: str,
        level: Optional[Level] = None,
        filter: Optional[BaseFilter] = None,
    ) -> AppenderReference:
        """
        Reference a registered appender from a logger configuration.

        Raises:
            NotFoundError: If no appender called `appender_name` exists
        """
        appender = self.appender(appender_name)
        return logger_config.add_appender_reference(appender, level, filter)

    def appender(self, name: str) -> Appender:
        """
        Return the appender called `name`.

        Raises:
            NotFoundError: If the appender is not registered
        """
        with self._lock:
            try:
                return self._appenders[name]
            except KeyError:
                raise NotFoundError("Appender", name) from None

    def resolve(self, name: str) -> LoggerConfig:
        """
        Return the configuration for logger `name`.

        An exact match wins, then the longest dotted prefix present, then
        root. "a.b.c" with {"", "a", "a.b"} resolves to "a.b".
        """
        with self._lock:
            config = self._loggers.get(name)
            if config is not None:
                return config
            return self._nearest_ancestor(name)

    def _nearest_ancestor(self, name: str) -> LoggerConfig:
        while "." in name:
            name = name.rsplit(".", 1)[0]
            config = self._loggers.get(name)
            if config is not None:
                return config
        return self._root

    def _link_parents(self) -> None:
        for name, config in self._loggers.items():
            if config.is_root:
                config.set_parent(None)
            else:
                config.set_parent(self._nearest_ancestor(name))

    def _on_start(self) -> None:
        self.initialize()
        for appender in list(self._appenders.values()):
            appender.start()
        STATUS_LOGGER.debug("{} started", self)

    def _on_stop(self) -> None:
        self._stop_appenders()
        STATUS_LOGGER.debug("{} stopped", self)

    def _stop_appenders(self) -> None:
        # Every appender gets stopped; failures are reported
        for appender in list(self._appenders.values()):
            try:
                appender.stop()
            except Exception as e:
                STATUS_LOGGER.error(
                    "Failed to stop appender {}", appender.name, exc_info=e
                )

    def __repr__(self) -> str:
        source = f"{self._source}, " if self._source else ""
        return f"{type(self).__name__}({self._name}, {source}{self.state})"
