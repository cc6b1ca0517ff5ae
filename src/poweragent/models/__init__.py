"""
Data models for the power profiling agent.
"""

from .agent_properties import AgentProperties, LoggerLevel

__all__ = ['AgentProperties', 'LoggerLevel']
