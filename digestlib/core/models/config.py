"""
Configuration models.

Provides Pydantic models for digestlib configuration with validation.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import field_validator

from .base import ConfigBaseModel

LogLevel = Literal["debug", "info", "warning", "error"]


class LoggingConfig(ConfigBaseModel):
    """Logging configuration section."""

    level: LogLevel = "warning"
    console: bool = False
    file: bool = False

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, v: Any) -> Any:
        """Accept level names in any case."""
        if isinstance(v, str):
            return v.strip().lower()
        return v


class ProvidersConfig(ConfigBaseModel):
    """Digest engine provider configuration section."""

    # Consult pycryptodome / blake3 before hashlib
    extended: bool = True
    # Duplicate probed prototypes instead of constructing engines from scratch
    prototype_cache: bool = True
