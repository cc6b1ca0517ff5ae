"""
Logger configuration driven by the agent's `logger-level` property.
"""

import sys
import logging
from typing import Optional, TextIO

from .models.agent_properties import LoggerLevel


LOGGER_NAME = "poweragent"

LOG_FORMAT = '%(asctime)s | %(name)s | %(levelname)8s | %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def configure_logging(level: LoggerLevel, stream: Optional[TextIO] = None) -> logging.Logger:
    """
    Apply a logger level to the agent's logger hierarchy.

    A stream handler is attached only when the logger has none yet, so
    repeated calls just adjust the threshold.

    Args:
        level: Verbosity threshold from the agent properties
        stream: Destination for log records (defaults to stderr)

    Returns:
        The configured agent logger
    """
    agent_logger = logging.getLogger(LOGGER_NAME)
    agent_logger.setLevel(level.to_logging_level())

    if not agent_logger.handlers:
        handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
        handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
        agent_logger.addHandler(handler)
        agent_logger.propagate = False

    return agent_logger
