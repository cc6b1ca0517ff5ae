"""
Configuration loader for the power profiling agent.

This module locates `config.properties` through a filesystem handle, parses it
and converts it to an AgentProperties object. Loading failures are reported
as ConfigurationError; `load_config_or_exit` turns them into the agent's
startup contract of a logged diagnostic followed by exit status 1.
"""

import sys
import logging
from pathlib import Path
from typing import Optional, Union

from .properties import PropertiesSyntaxError, load_properties
from ..models.agent_properties import AgentProperties
from ..tools.filesystem import FileSystem, LocalFileSystem


logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = "config.properties"


class ConfigurationError(Exception):
    """Raised when configuration loading fails."""
    pass


class MissingConfigError(ConfigurationError):
    """Raised when `config.properties` does not exist at the filesystem root."""
    pass


class UnreadableConfigError(ConfigurationError):
    """Raised when `config.properties` cannot be read or parsed."""
    pass


class ConfigParser:
    """
    Loader for the agent's `config.properties` file.

    The parser holds the filesystem handle the file is resolved against. Each
    call to `load_config` reads the file once, closes it and returns a fresh,
    immutable AgentProperties.
    """

    def __init__(self, file_system: Optional[FileSystem] = None, encoding: str = 'utf-8'):
        """
        Initialize the configuration parser.

        Args:
            file_system: Handle the config file is resolved against.
                Defaults to the current working directory.
            encoding: Text encoding of the config file
        """
        self.file_system = file_system if file_system is not None else LocalFileSystem()
        self.encoding = encoding
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    @property
    def config_path(self) -> Path:
        """Location of `config.properties` on the handle."""
        return self.file_system.get_path(CONFIG_FILE_NAME)

    def load_config(self) -> AgentProperties:
        """
        Load and parse `config.properties`.

        Returns:
            AgentProperties built from the file

        Raises:
            MissingConfigError: If the file does not exist
            UnreadableConfigError: If the file cannot be read or parsed
        """
        config_path = self.config_path

        try:
            found = self.file_system.exists(config_path)
        except OSError as e:
            raise UnreadableConfigError(f"Cannot access configuration file {config_path}: {e}") from e

        if not found:
            raise MissingConfigError(f"Configuration file not found: {config_path}")

        try:
            with self.file_system.open_read(config_path) as stream:
                properties = load_properties(stream, self.encoding)
        except PropertiesSyntaxError as e:
            raise UnreadableConfigError(f"Invalid properties syntax in {config_path}: {e}") from e
        except UnicodeDecodeError as e:
            raise UnreadableConfigError(f"Cannot decode configuration file {config_path}: {e}") from e
        except OSError as e:
            raise UnreadableConfigError(f"Cannot read configuration file {config_path}: {e}") from e

        agent_properties = AgentProperties.from_properties(properties)
        self.logger.info(f"Configuration loaded successfully from {config_path}")

        return agent_properties


def load_config(file_system: Optional[FileSystem] = None) -> AgentProperties:
    """
    Convenience function to load configuration.

    Args:
        file_system: Handle the config file is resolved against (optional)

    Returns:
        AgentProperties built from `config.properties`

    Raises:
        ConfigurationError: If the file is missing or unreadable
    """
    parser = ConfigParser(file_system)
    return parser.load_config()


def load_config_or_exit(file_system: Optional[FileSystem] = None) -> AgentProperties:
    """
    Load configuration, terminating the process if it cannot be loaded.

    Args:
        file_system: Handle the config file is resolved against (optional)

    Returns:
        AgentProperties built from `config.properties`
    """
    try:
        return load_config(file_system)
    except ConfigurationError as e:
        logger.error(f"Could not load agent configuration: {e}")
        sys.exit(1)


def load_config_from_directory(directory: Union[str, Path]) -> AgentProperties:
    """
    Convenience function to load `config.properties` from a directory.

    Args:
        directory: Directory containing the config file

    Returns:
        AgentProperties built from the file

    Raises:
        ConfigurationError: If the file is missing or unreadable
    """
    return load_config(LocalFileSystem(directory))
