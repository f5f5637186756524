"""
Pydantic base classes for digestlib.

Two kinds of model exist: frozen values the framework builds itself
(algorithm descriptors) and config sections read from TOML and the
environment.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class ImmutableModel(BaseModel):
    """Frozen value validated without coercion; unknown fields are errors."""

    model_config = ConfigDict(
        frozen=True,
        strict=True,
        extra="forbid",
    )


class ConfigBaseModel(BaseModel):
    """Config section: TOML/env strings are coerced, unknown keys ignored."""

    model_config = ConfigDict(
        strict=False,
        validate_assignment=True,
        extra="ignore",
    )
