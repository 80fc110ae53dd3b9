"""
Context selectors

A selector is the process-wide registry of logger contexts. Subclasses
decide how a caller identity maps to a context key.
"""

from __future__ import annotations

import threading
from abc import ABC, abstractmethod
from typing import Dict, Optional

from log4py.context.logger_context import LoggerContext
from log4py.core.status import STATUS_LOGGER


class ContextSelector(ABC):
    """
    Registry of logger contexts, at most one per key.

    Thread Safety:
        Get-or-create is atomic under an internal lock.
    """

    def __init__(self):
        self._contexts: Dict[str, LoggerContext] = {}
        self._lock = threading.Lock()

    @abstractmethod
    def key_for(self, fqmn: str) -> str:
        """Derive the context key for a caller identity."""

    def context(self, key: str, config_location: Optional[str] = None) -> LoggerContext:
        """
        Return the context for `key`, creating it if needed.

        Args:
            key: Context key
            config_location: Configuration location recorded on a context
                that has not started yet

        Returns:
            The single context registered under `key`
        """
        with self._lock:
            ctx = self._contexts.get(key)
            if ctx is None:
                ctx = LoggerContext(key, config_location)
                self._contexts[key] = ctx
                STATUS_LOGGER.debug("Created {}", ctx)
            elif config_location and ctx.config_location is None and not ctx.is_started:
                ctx.config_location = config_location
            return ctx

    def context_for(self, fqmn: str, config_location: Optional[str] = None) -> LoggerContext:
        """Return the context for a caller identity."""
        return self.context(self.key_for(fqmn), config_location)

    def has_context(self, key: str) -> bool:
        with self._lock:
            return key in self._contexts

    def contexts(self) -> Dict[str, LoggerContext]:
        """Registered contexts keyed by context key."""
        with self._lock:
            return dict(self._contexts)

    def remove_context(self, key: str) -> Optional[LoggerContext]:
        """Unregister and return the context for `key`, if any."""
        with self._lock:
            return self._contexts.pop(key, None)

    def clear(self) -> None:
        """Unregister all contexts."""
        with self._lock:
            self._contexts.clear()


class ModuleContextSelector(ContextSelector):
    """One context per caller module."""

    def key_for(self, fqmn: str) -> str:
        return fqmn


class PackageContextSelector(ContextSelector):
    """One context per top-level package of the caller."""

    def key_for(self, fqmn: str) -> str:
        return fqmn.split(".", 1)[0]


class SingletonContextSelector(ContextSelector):
    """One context for the whole process."""

    KEY = "Default"

    def key_for(self, fqmn: str) -> str:
        return self.KEY


SELECTORS = {
    "module": ModuleContextSelector,
    "package": PackageContextSelector,
    "singleton": SingletonContextSelector,
}


def create_selector(kind: str) -> ContextSelector:
    """
    Create a selector by strategy name.

    Raises:
        ValueError: If `kind` is not a known strategy
    """
    try:
        return SELECTORS[kind]()
    except KeyError:
        raise ValueError(f"Unknown context selector '{kind}'") from None
