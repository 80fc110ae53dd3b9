"""
Logger context

Runtime container that owns one active configuration and hands out the
loggers bound to it.
"""

from __future__ import annotations

import atexit
import threading
from typing import Callable, Dict, Optional, Tuple, Union

from log4py.config.configuration import Configuration
from log4py.config.loader import load_configuration
from log4py.core.errors import ContractError, LifeCycleError
from log4py.core.lifecycle import LifeCycle, State
from log4py.core.logger import Logger
from log4py.core.settings import get_settings
from log4py.core.status import STATUS_LOGGER

ConfigurationSource = Union[Configuration, Callable[[], Configuration], None]


class LoggerContext(LifeCycle):
    """
    Logger context keyed by caller identity.

    Created INITIALIZED without configuration. `start` installs and starts
    one; starting an already started context is a no-op, so repeated logger
    acquisition never re-runs configuration.
    """

    def __init__(self, name: str, config_location: Optional[str] = None):
        super().__init__()
        self._name = name
        self.config_location = config_location
        self._configuration: Optional[Configuration] = None
        self._loggers: Dict[Tuple[str, type], Logger] = {}
        self._lock = threading.RLock()

    @property
    def name(self) -> str:
        return self._name

    @property
    def configuration(self) -> Optional[Configuration]:
        """Active configuration (None until started)."""
        return self._configuration

    def start(self, configuration: ConfigurationSource = None) -> None:
        """
        Install a configuration and start the context.

        Args:
            configuration: Configuration to install, or a callable producing
                one (only called when the context actually starts). None
                loads from `config_location` or the default locations.

        Raises:
            LifeCycleError: If the context is stopping, stopped or invalid
            ContractError: If the configuration source yields something that
                is not a Configuration
        """
        with self._lock:
            if self.state is State.STARTED:
                STATUS_LOGGER.debug("{} already started", self)
                return
            if self.state is not State.INITIALIZED:
                raise LifeCycleError(f"Cannot start {self!r} in state {self.state}")

            if configuration is None:
                configuration = load_configuration(self.config_location)
            elif not isinstance(configuration, Configuration):
                configuration = configuration()
            if not isinstance(configuration, Configuration):
                raise ContractError(f"Not a configuration: {configuration!r}")

            self._configuration = configuration
            super().start()

    def _on_start(self) -> None:
        self._configuration.start()
        atexit.register(self.stop)
        STATUS_LOGGER.debug("{} started with {}", self, self._configuration)

    def stop(self) -> None:
        """Stop the configuration and the context."""
        with self._lock:
            super().stop()

    def _on_stop(self) -> None:
        atexit.unregister(self.stop)
        if self._configuration is not None:
            self._configuration.stop()
        STATUS_LOGGER.debug("{} stopped", self)

    def get_logger(
        self,
        name: Optional[str] = None,
        message_factory: Optional[type] = None,
        fqmn: Optional[str] = None,
    ) -> Logger:
        """
        Return the logger for `name` (default: the context name).

        Loggers are cached per name and message factory.

        Raises:
            LifeCycleError: If the context is not started
        """
        if self.state is not State.STARTED:
            raise LifeCycleError(f"{self!r} is not started")

        name = self._name if name is None else name
        factory = message_factory or get_settings().message_factory
        key = (name, factory)

        with self._lock:
            logger = self._loggers.get(key)
            if logger is None:
                logger = Logger(
                    self, name, self._configuration.resolve(name), factory, fqmn=fqmn
                )
                self._loggers[key] = logger
            return logger

    def has_logger(self, name: str, message_factory: Optional[type] = None) -> bool:
        factory = message_factory or get_settings().message_factory
        with self._lock:
            return (name, factory) in self._loggers

    @property
    def loggers(self) -> Dict[Tuple[str, type], Logger]:
        with self._lock:
            return dict(self._loggers)

    def __repr__(self) -> str:
        return f"LoggerContext({self._name}, {self.state})"
