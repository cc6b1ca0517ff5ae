"""
Shared fixtures for the power agent test suite.
"""

import logging
import tempfile
import shutil
from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def reset_agent_logger():
    """Restore the agent logger after tests that configure it."""
    agent_logger = logging.getLogger("poweragent")
    level = agent_logger.level
    propagate = agent_logger.propagate
    handlers = list(agent_logger.handlers)
    yield
    agent_logger.setLevel(level)
    agent_logger.propagate = propagate
    for handler in list(agent_logger.handlers):
        if handler not in handlers:
            agent_logger.removeHandler(handler)


@pytest.fixture
def config_dir():
    """Temporary directory that may hold a config.properties file."""
    temp_dir = tempfile.mkdtemp()
    yield Path(temp_dir)
    shutil.rmtree(temp_dir)


@pytest.fixture
def write_config(config_dir):
    """Write config.properties content into the temporary directory."""
    def _write(content, encoding='utf-8'):
        path = config_dir / "config.properties"
        path.write_bytes(content.encode(encoding) if isinstance(content, str) else content)
        return path
    return _write
