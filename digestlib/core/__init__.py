"""
Core infrastructure for digestlib.

This module provides:
- ServiceContainer: DI container using dependency-injector
- Application bootstrap for initialization
- Settings loaded from TOML and the environment
- Custom exception hierarchy
"""

from .bootstrap import bootstrap, is_initialized, reset
from .container import ServiceContainer, get_container
from .exceptions import (
    AbstractTypeMisuse,
    AlgorithmUnavailable,
    ConfigFileError,
    DigestConfigError,
    DigestException,
    DigestTypeError,
    DuplicationFailure,
    EmptyInput,
    UnimplementedPrimitive,
    UnresolvedDescriptor,
)

__all__ = [
    "AbstractTypeMisuse",
    "AlgorithmUnavailable",
    "ConfigFileError",
    "DigestConfigError",
    "DigestException",
    "DigestTypeError",
    "DuplicationFailure",
    "EmptyInput",
    "ServiceContainer",
    "UnimplementedPrimitive",
    "UnresolvedDescriptor",
    "bootstrap",
    "get_container",
    "is_initialized",
    "reset",
]
