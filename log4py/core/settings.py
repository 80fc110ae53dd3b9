"""
Process-wide settings

One settings object holds the defaults the rest of the framework reads:
the default status level, the event and message factories, the context
selector strategy and the line separator.
"""

from dataclasses import dataclass, replace
from typing import Callable, Mapping, Optional
import os

from log4py.core.event import LogEvent
from log4py.core.level import Level
from log4py.core.message import Message, ParameterizedMessage
from log4py.core.status import STATUS_LOGGER

CONTEXT_SELECTORS = ("module", "package", "singleton")

ENV_PREFIX = "LOG4PY_"


@dataclass
class Settings:
    """
    Framework settings.

    Values are explicit; `from_env` is available for callers that want
    the LOG4PY_* environment variables to be taken into account.
    """

    # Level of a root logger configuration without an explicit level
    default_status_level: Level = Level.ERROR
    # Threshold of the internal status logger
    internal_status_level: Level = Level.WARN

    event_factory: Callable = LogEvent
    message_factory: type = ParameterizedMessage
    context_selector: str = "module"

    line_separator: str = os.linesep
    config_prefix: str = "log4py"
    config_location: Optional[str] = None

    def __post_init__(self):
        """Validate settings after initialization."""
        self.default_status_level = Level.coerce(self.default_status_level)
        self.internal_status_level = Level.coerce(self.internal_status_level)

        if not callable(self.event_factory):
            raise TypeError("event_factory must be callable")
        if not (isinstance(self.message_factory, type)
                and issubclass(self.message_factory, Message)):
            raise TypeError("message_factory must be a Message subclass")
        if self.context_selector not in CONTEXT_SELECTORS:
            raise ValueError(
                f"context_selector must be one of {CONTEXT_SELECTORS}, "
                f"got {self.context_selector!r}"
            )
        if not self.config_prefix:
            raise ValueError("config_prefix cannot be empty")

    @classmethod
    def default(cls) -> "Settings":
        """Create default settings."""
        return cls()

    @classmethod
    def debug_settings(cls) -> "Settings":
        """Create settings that surface the framework's own diagnostics."""
        return cls(
            default_status_level=Level.DEBUG,
            internal_status_level=Level.DEBUG,
        )

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """
        Create settings from LOG4PY_* environment variables.

        Recognized: LOG4PY_DEFAULT_STATUS_LEVEL, LOG4PY_INTERNAL_STATUS_LEVEL,
        LOG4PY_CONTEXT_SELECTOR, LOG4PY_LINE_SEPARATOR,
        LOG4PY_CONFIGURATION_FILE.
        """
        env = os.environ if environ is None else environ
        settings = cls()

        overrides = {}
        if f"{ENV_PREFIX}DEFAULT_STATUS_LEVEL" in env:
            overrides["default_status_level"] = env[f"{ENV_PREFIX}DEFAULT_STATUS_LEVEL"]
        if f"{ENV_PREFIX}INTERNAL_STATUS_LEVEL" in env:
            overrides["internal_status_level"] = env[f"{ENV_PREFIX}INTERNAL_STATUS_LEVEL"]
        if f"{ENV_PREFIX}CONTEXT_SELECTOR" in env:
            overrides["context_selector"] = env[f"{ENV_PREFIX}CONTEXT_SELECTOR"].lower()
        if f"{ENV_PREFIX}LINE_SEPARATOR" in env:
            overrides["line_separator"] = env[f"{ENV_PREFIX}LINE_SEPARATOR"]
        if f"{ENV_PREFIX}CONFIGURATION_FILE" in env:
            overrides["config_location"] = env[f"{ENV_PREFIX}CONFIGURATION_FILE"]

        return replace(settings, **overrides) if overrides else settings


_settings: Optional[Settings] = None


def init(settings: Optional[Settings] = None, **overrides) -> Settings:
    """
    Install the process-wide settings.

    Args:
        settings: Settings to install (default: Settings())
        **overrides: Field values replacing those of `settings`

    Returns:
        The installed settings
    """
    global _settings
    base = settings or Settings()
    _settings = replace(base, **overrides) if overrides else base
    STATUS_LOGGER.level = _settings.internal_status_level
    return _settings


def get_settings() -> Settings:
    """Return the process-wide settings, installing defaults on first use."""
    if _settings is None:
        return init()
    return _settings
