"""
Agent properties data model for the power profiling agent.

This module defines the typed, read-only view of `config.properties` that the
rest of the agent consumes: method-name filters, the power monitor location,
runtime data output switches, the logger level and consumption evolution
settings.
"""

import logging
from enum import Enum
from typing import Any, Dict, FrozenSet, Mapping, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator


logger = logging.getLogger(__name__)

FILTER_METHOD_NAMES_PROPERTY = "filter-method-names"
POWER_MONITOR_PATH_PROPERTY = "powermonitor-path"
SAVE_RUNTIME_DATA_PROPERTY = "save-runtime-data"
OVERWRITE_RUNTIME_DATA_PROPERTY = "overwrite-runtime-data"
LOGGER_LEVEL_PROPERTY = "logger-level"
TRACK_CONSUMPTION_EVOLUTION_PROPERTY = "track-consumption-evolution"
EVOLUTION_DATA_PATH_PROPERTY = "evolution-data-path"

RECOGNIZED_PROPERTIES = (
    FILTER_METHOD_NAMES_PROPERTY,
    POWER_MONITOR_PATH_PROPERTY,
    SAVE_RUNTIME_DATA_PROPERTY,
    OVERWRITE_RUNTIME_DATA_PROPERTY,
    LOGGER_LEVEL_PROPERTY,
    TRACK_CONSUMPTION_EVOLUTION_PROPERTY,
    EVOLUTION_DATA_PATH_PROPERTY,
)

DEFAULT_EVOLUTION_DATA_PATH = "evolution"


class LoggerLevel(Enum):
    """Verbosity thresholds accepted by the `logger-level` property."""
    OFF = "OFF"
    SEVERE = "SEVERE"
    WARNING = "WARNING"
    INFO = "INFO"

    def to_logging_level(self) -> int:
        """Map to the equivalent standard library logging level."""
        return _LOGGING_LEVELS[self]


_LOGGING_LEVELS = {
    LoggerLevel.OFF: logging.CRITICAL + 10,
    LoggerLevel.SEVERE: logging.ERROR,
    LoggerLevel.WARNING: logging.WARNING,
    LoggerLevel.INFO: logging.INFO,
}


def _coerce_flag(v) -> bool:
    # Only a case-insensitive "true" enables a flag
    if isinstance(v, bool):
        return v
    return isinstance(v, str) and v.lower() == "true"


class AgentProperties(BaseModel):
    """
    Immutable agent configuration loaded from `config.properties`.

    Instances are built once at agent startup and never modified, so they can
    be shared between any number of threads. Unknown keys are ignored and any
    missing or unrecognised value falls back to its default.

    Attributes:
        filter_prefixes: Method name prefixes excluded from profiling
        power_monitor_path: Location of the power monitor binary, if configured
        save_runtime_data: Whether runtime measurements are written to disk
        overwrite_runtime_data: Whether runtime data files are overwritten
        logger_level: Verbosity threshold for the agent's logger
        track_consumption_evolution: Whether per-window energy data is kept
        evolution_data_path: Directory receiving consumption evolution data
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra='ignore')

    filter_prefixes: FrozenSet[str] = Field(
        default_factory=frozenset,
        alias=FILTER_METHOD_NAMES_PROPERTY,
        description="Method name prefixes excluded from profiling"
    )
    power_monitor_path: Optional[str] = Field(
        None,
        alias=POWER_MONITOR_PATH_PROPERTY,
        description="Path to the power monitor binary"
    )
    save_runtime_data: bool = Field(
        False,
        alias=SAVE_RUNTIME_DATA_PROPERTY,
        description="Whether runtime data is saved"
    )
    overwrite_runtime_data: bool = Field(
        False,
        alias=OVERWRITE_RUNTIME_DATA_PROPERTY,
        description="Whether runtime data files are overwritten"
    )
    logger_level: LoggerLevel = Field(
        LoggerLevel.INFO,
        alias=LOGGER_LEVEL_PROPERTY,
        description="Logger verbosity threshold"
    )
    track_consumption_evolution: bool = Field(
        False,
        alias=TRACK_CONSUMPTION_EVOLUTION_PROPERTY,
        description="Whether consumption evolution is tracked"
    )
    evolution_data_path: str = Field(
        DEFAULT_EVOLUTION_DATA_PATH,
        alias=EVOLUTION_DATA_PATH_PROPERTY,
        description="Directory for consumption evolution data"
    )

    @field_validator('filter_prefixes', mode='before')
    @classmethod
    def validate_filter_prefixes(cls, v) -> FrozenSet[str]:
        """Split a comma separated list into a set of prefixes, untrimmed."""
        if v is None or v == "":
            return frozenset()
        if isinstance(v, str):
            return frozenset(v.split(","))
        return frozenset(v)

    @field_validator(
        'save_runtime_data',
        'overwrite_runtime_data',
        'track_consumption_evolution',
        mode='before'
    )
    @classmethod
    def validate_flag(cls, v) -> bool:
        return _coerce_flag(v)

    @field_validator('logger_level', mode='before')
    @classmethod
    def validate_logger_level(cls, v) -> LoggerLevel:
        """Convert a level name to the enum, falling back to INFO."""
        if isinstance(v, LoggerLevel):
            return v
        if isinstance(v, str):
            try:
                return LoggerLevel(v)
            except ValueError:
                logger.debug(f"Unrecognised logger level '{v}', using INFO")
        return LoggerLevel.INFO

    @field_validator('evolution_data_path', mode='before')
    @classmethod
    def validate_evolution_data_path(cls, v) -> str:
        return DEFAULT_EVOLUTION_DATA_PATH if v is None else v

    @classmethod
    def from_properties(cls, properties: Mapping[str, str]) -> 'AgentProperties':
        """
        Build agent properties from a parsed key/value mapping.

        Args:
            properties: Raw properties, keyed by property name

        Returns:
            AgentProperties with every recognised key coerced to its type
        """
        unknown = sorted(set(properties) - set(RECOGNIZED_PROPERTIES))
        if unknown:
            logger.debug(f"Ignoring unknown properties: {', '.join(unknown)}")

        recognized = {k: v for k, v in properties.items() if k in RECOGNIZED_PROPERTIES}
        return cls.model_validate(recognized)

    def filters_method(self, method_name: str) -> bool:
        """Check whether a method name starts with any configured filter prefix."""
        for prefix in self.filter_prefixes:
            if method_name.startswith(prefix):
                return True
        return False

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation keyed by property name."""
        data = self.model_dump(by_alias=True)
        data[FILTER_METHOD_NAMES_PROPERTY] = sorted(self.filter_prefixes)
        data[LOGGER_LEVEL_PROPERTY] = self.logger_level.value
        return data
