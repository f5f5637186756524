"""
Pydantic models for digestlib.
"""

from .base import ConfigBaseModel, ImmutableModel
from .config import LoggingConfig, LogLevel, ProvidersConfig
from .descriptor import AlgorithmDescriptor

__all__ = [
    "AlgorithmDescriptor",
    "ConfigBaseModel",
    "ImmutableModel",
    "LogLevel",
    "LoggingConfig",
    "ProvidersConfig",
]
