"""
Power Agent - Configuration Package

Loads the power profiling agent's `config.properties` and exposes a typed,
read-only view of its settings.
"""

__version__ = "0.1.0"
__author__ = "Power Agent Team"
