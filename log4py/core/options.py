"""Typed access to declarative options"""

from typing import Any, Mapping

from log4py.core.errors import ConfigurationError


def bool_option(options: Mapping[str, Any], key: str, default: bool) -> bool:
    """
    Read a boolean option.

    Args:
        options: Declarative definition
        key: Option name
        default: Value used when the option is absent or None

    Raises:
        ConfigurationError: If the value is not a bool (e.g. the string "false")
    """
    value = options.get(key)
    if value is None:
        return default
    if not isinstance(value, bool):
        raise ConfigurationError(
            f"Option '{key}' must be true or false, got {value!r}"
        )
    return value
