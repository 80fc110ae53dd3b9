"""Exception hierarchy of the logging framework"""


class Log4pyError(Exception):
    """Base class for all framework errors."""


class ConfigurationError(Log4pyError, ValueError):
    """Declarative configuration input could not be turned into a Configuration."""


class ContractError(Log4pyError, TypeError):
    """
    An extension does not satisfy the contract of the type it claims to be.

    This is a programming error in the extension (an appender without a name,
    an object used as a life cycle entity that is not one) and is never
    recovered by the framework.
    """


class NotFoundError(Log4pyError, LookupError):
    """A named appender is not registered in the configuration."""

    def __init__(self, kind: str, name: str):
        super().__init__(f"{kind} '{name}' not found")
        self.kind = kind
        self.name = name


class LifeCycleError(Log4pyError, RuntimeError):
    """Operation is not legal in the entity's current life cycle state."""


class AppenderError(Log4pyError, RuntimeError):
    """An appender that does not ignore exceptions failed to append an event."""

    def __init__(self, appender_name: str, message: str):
        super().__init__(f"Appender '{appender_name}': {message}")
        self.appender_name = appender_name
