"""
Configuration module

This module contains the configuration hierarchy:
- LoggerConfig: One node of the logger tree
- AppenderReference: Appender binding of a node
- Configuration: Owner of the tree and the appenders
- DefaultConfiguration: Fallback console configuration
- DictConfiguration: Declarative configuration from a mapping
- ConfigurationBuilder: Programmatic configuration
- load_configuration / evaluate_configuration: Source loading
"""

from log4py.config.appender_ref import AppenderReference
from log4py.config.logger_config import LoggerConfig, ROOT_LOGGER_NAME
from log4py.config.configuration import Configuration
from log4py.config.default_configuration import DefaultConfiguration
from log4py.config.builder import ConfigurationBuilder
from log4py.config.dict_configuration import DictConfiguration
from log4py.config.loader import (
    load_configuration,
    evaluate_configuration,
    find_config_file,
    register_parser,
)
from log4py.config.plugins import (
    register_appender,
    register_layout,
    register_filter,
)

__all__ = [
    "AppenderReference",
    "LoggerConfig",
    "ROOT_LOGGER_NAME",
    "Configuration",
    "DefaultConfiguration",
    "ConfigurationBuilder",
    "DictConfiguration",
    "load_configuration",
    "evaluate_configuration",
    "find_config_file",
    "register_parser",
    "register_appender",
    "register_layout",
    "register_filter",
]
