"""
Logger acquisition

Entry points application code uses: `get_logger(__name__)` resolves the
caller's context (creating and starting it on first use) and returns a
logger bound to the configuration node for the requested name.
"""

from __future__ import annotations

import threading
from typing import Optional

from log4py.config.loader import evaluate_configuration, load_configuration
from log4py.config.logger_config import ROOT_LOGGER_NAME
from log4py.context.logger_context import ConfigurationSource, LoggerContext
from log4py.context.selector import ContextSelector, create_selector
from log4py.core import settings as settings_module
from log4py.core.lifecycle import State
from log4py.core.logger import Logger
from log4py.core.settings import Settings, get_settings
from log4py.core.status import STATUS_LOGGER

_selector: Optional[ContextSelector] = None
_selector_lock = threading.Lock()


def init(settings: Optional[Settings] = None, **overrides) -> Settings:
    """
    Install process settings and a fresh context selector.

    Running contexts are shut down first.

    Args:
        settings: Settings to install (default: Settings())
        **overrides: Field values replacing those of `settings`

    Returns:
        The installed settings
    """
    global _selector
    shutdown()
    installed = settings_module.init(settings, **overrides)
    with _selector_lock:
        _selector = create_selector(installed.context_selector)
    return installed


def get_selector() -> ContextSelector:
    """Return the process-wide context selector."""
    global _selector
    with _selector_lock:
        if _selector is None:
            _selector = create_selector(get_settings().context_selector)
        return _selector


def get_context(
    fqmn: str,
    config_location: Optional[str] = None,
    config_builder: ConfigurationSource = None,
) -> LoggerContext:
    """
    Return the started context for a caller identity.

    On first use the context is started with, in order of preference, the
    programmatic `config_builder`, the file at `config_location`, or the
    default configuration locations. A context stopped by an earlier
    shutdown, or left invalid by a failed start, is replaced by a fresh one.
    """
    selector = get_selector()
    ctx = selector.context_for(fqmn, config_location)
    if ctx.state in (State.STOPPED, State.INVALID):
        selector.remove_context(ctx.name)
        ctx = selector.context_for(fqmn, config_location)

    if ctx.state is State.INITIALIZED:
        if config_builder is not None:
            STATUS_LOGGER.debug("Evaluating configuration builder for {}", ctx.name)
            ctx.start(lambda: evaluate_configuration(config_builder))
        elif config_location is not None:
            ctx.start(lambda: load_configuration(config_location))
        else:
            ctx.start()
    return ctx


def get_logger(
    fqmn: str,
    name: Optional[str] = None,
    message_factory: Optional[type] = None,
    config_location: Optional[str] = None,
    config_builder: ConfigurationSource = None,
) -> Logger:
    """
    Return a ready-to-use logger.

    Args:
        fqmn: Caller identity, normally the calling module's __name__
        name: Logger name (default: fqmn)
        message_factory: Message type (default: settings.message_factory)
        config_location: Configuration file for a context not yet started
        config_builder: Programmatic configuration for a context not yet
            started (Configuration, ConfigurationBuilder or callable)

    Example:
        logger = get_logger(__name__)
        logger.info("Started {} workers", 4)
    """
    ctx = get_context(fqmn, config_location, config_builder)
    return ctx.get_logger(fqmn if name is None else name, message_factory, fqmn=fqmn)


def get_root_logger(fqmn: str, **kwargs) -> Logger:
    """Return the root logger of the caller's context."""
    return get_logger(fqmn, name=ROOT_LOGGER_NAME, **kwargs)


def shutdown() -> None:
    """Stop every registered context and clear the registry."""
    with _selector_lock:
        selector = _selector
    if selector is None:
        return

    for ctx in selector.contexts().values():
        try:
            ctx.stop()
        except Exception as e:
            STATUS_LOGGER.error("Failed to stop {}", ctx, exc_info=e)
    selector.clear()
