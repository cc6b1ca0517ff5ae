"""
Configuration management package for the power profiling agent.

This package provides `.properties` parsing and loading of the agent's
`config.properties` into an AgentProperties object.
"""

from .parser import (
    CONFIG_FILE_NAME,
    ConfigParser,
    ConfigurationError,
    MissingConfigError,
    UnreadableConfigError,
    load_config,
    load_config_or_exit,
    load_config_from_directory
)
from .properties import PropertiesSyntaxError, parse_properties, load_properties

__all__ = [
    'CONFIG_FILE_NAME',
    'ConfigParser',
    'ConfigurationError',
    'MissingConfigError',
    'UnreadableConfigError',
    'load_config',
    'load_config_or_exit',
    'load_config_from_directory',
    'PropertiesSyntaxError',
    'parse_properties',
    'load_properties'
]
