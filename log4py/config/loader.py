"""
Configuration source loader

Turns a location (explicit path, or a search for default file names) or a
programmatic builder into a fully initialized Configuration. Any failure
is reported to the status logger and replaced by an initialized
DefaultConfiguration, so that a broken logging setup never stops the
application; structural contract violations are the exception and
propagate.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable, Dict, Iterable, Mapping, Optional, Union

from log4py.config.builder import ConfigurationBuilder
from log4py.config.configuration import Configuration
from log4py.config.default_configuration import DefaultConfiguration
from log4py.config.dict_configuration import DictConfiguration
from log4py.core.errors import ConfigurationError, ContractError, LifeCycleError
from log4py.core.lifecycle import State
from log4py.core.settings import get_settings
from log4py.core.status import STATUS_LOGGER

Parser = Callable[[Path], Mapping[str, Any]]


def _parse_json(path: Path) -> Mapping[str, Any]:
    return json.loads(path.read_text(encoding="utf-8"))


PARSERS: Dict[str, Parser] = {
    ".json": _parse_json,
}


def register_parser(extension: str, parser: Parser) -> None:
    """
    Register a parser for configuration files with `extension`.

    Args:
        extension: File extension including the dot (e.g. ".yaml")
        parser: Callable reading a path and returning a mapping
    """
    if not extension.startswith("."):
        extension = "." + extension
    PARSERS[extension.lower()] = parser


def find_config_file(
    search_dirs: Optional[Iterable[Union[str, Path]]] = None,
    prefix: Optional[str] = None,
) -> Optional[Path]:
    """
    Probe for `<prefix><ext>` in each search directory.

    Args:
        search_dirs: Directories to search (default: current directory)
        prefix: File name prefix (default: settings.config_prefix)

    Returns:
        First existing file, or None
    """
    prefix = prefix or get_settings().config_prefix
    dirs = list(search_dirs) if search_dirs is not None else [Path.cwd()]
    for directory in dirs:
        for extension in PARSERS:
            candidate = Path(directory) / f"{prefix}{extension}"
            if candidate.is_file():
                return candidate
    return None


def parse_config_file(path: Union[str, Path], name: Optional[str] = None) -> Configuration:
    """
    Parse a configuration file without initializing it.

    Raises:
        ConfigurationError: If no parser handles the extension or the file
            does not hold a mapping
    """
    path = Path(path)
    parser = PARSERS.get(path.suffix.lower())
    if parser is None:
        raise ConfigurationError(f"No parser for configuration file '{path}'")
    return DictConfiguration(parser(path), name=name, source=str(path))


def _default_configuration() -> Configuration:
    config = DefaultConfiguration()
    config.initialize()
    return config


def load_configuration(
    location: Optional[Union[str, Path]] = None,
    name: Optional[str] = None,
    search_dirs: Optional[Iterable[Union[str, Path]]] = None,
) -> Configuration:
    """
    Load and initialize a configuration.

    Args:
        location: Explicit file (default: settings.config_location, then a
            lookup in the search directories)
        name: Configuration name (default: taken from the file)
        search_dirs: Directories searched when no location is given

    Returns:
        The loaded configuration, or DefaultConfiguration on any failure
    """
    location = location or get_settings().config_location
    try:
        if location:
            path = Path(location)
            if not path.is_file():
                raise ConfigurationError(f"Configuration file '{location}' not found")
        else:
            path = find_config_file(search_dirs)
            if path is None:
                STATUS_LOGGER.debug("No configuration file found, using default configuration")
                return _default_configuration()

        config = parse_config_file(path, name)
        config.initialize()
        STATUS_LOGGER.debug("Loaded {} from {}", config, path)
        return config
    except ContractError:
        raise
    except Exception as e:
        STATUS_LOGGER.error(
            "Cannot load configuration from {}, using default configuration",
            location or "default location", exc_info=e,
        )
        return _default_configuration()


def evaluate_configuration(
    source: Union[Configuration, ConfigurationBuilder, Callable[[], Configuration]],
) -> Configuration:
    """
    Evaluate a programmatic configuration and initialize it.

    Args:
        source: A Configuration, a ConfigurationBuilder, or a callable
            returning a Configuration

    Returns:
        The configuration, or DefaultConfiguration on any failure
    """
    try:
        if isinstance(source, Configuration):
            config = source
        elif isinstance(source, ConfigurationBuilder):
            config = source.build()
        else:
            config = source()

        if not isinstance(config, Configuration):
            raise ConfigurationError(
                f"Configuration builder returned {type(config).__name__}"
            )
        if config.state not in (State.INITIALIZED, State.STARTED):
            raise LifeCycleError(f"{config!r} can no longer be started")
        config.initialize()
        return config
    except ContractError:
        raise
    except Exception as e:
        STATUS_LOGGER.error(
            "Configuration evaluation failed, using default configuration", exc_info=e
        )
        return _default_configuration()
