"""
Load-time registration of digest types.

Registration fails closed: if no provider can construct the algorithm,
defining the type raises AlgorithmUnavailable instead of deferring the
failure to first use.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeVar

from ..core.di import get_logger
from ..core.exceptions import AlgorithmUnavailable
from ..core.models.descriptor import AlgorithmDescriptor
from ..engines.registry import AlgorithmRegistry, get_registry
from .base import DigestBase
from .metadata import DESCRIPTORS

D = TypeVar("D", bound=type[DigestBase])


def require_algorithm(
    algorithm: str,
    message: str | None = None,
    *,
    requires_extended: bool = False,
    registry: AlgorithmRegistry | None = None,
) -> None:
    """
    Raise unless algorithm can be constructed.

    Args:
        algorithm: Canonical algorithm name to probe
        message: Error message (defaults to "<algorithm> not supported")
        requires_extended: Also require an extended provider that lists algorithm
        registry: Registry to probe (defaults to the shared registry)

    Raises:
        AlgorithmUnavailable: Naming the algorithm
    """
    registry = registry or get_registry()

    if requires_extended and not registry.has_extended_support(algorithm):
        raise AlgorithmUnavailable(
            message or f"{algorithm} not supported without the extended provider",
            algorithm=algorithm,
        )

    try:
        registry.construct(algorithm)
    except AlgorithmUnavailable as e:
        raise AlgorithmUnavailable(
            message or f"{algorithm} not supported",
            algorithm=algorithm,
            cause=e,
        ) from e


def register_digest(
    algorithm: str,
    block_length: int | None = None,
    *,
    requires_extended: bool = False,
    registry: AlgorithmRegistry | None = None,
) -> Callable[[D], D]:
    """
    Class decorator binding a DigestBase subclass to an algorithm.

    Usage:
        @register_digest("SHA-256", block_length=64)
        class SHA256(DigestBase):
            ...

    Raises:
        AlgorithmUnavailable: If the algorithm cannot be constructed
    """
    descriptor = AlgorithmDescriptor(name=algorithm, block_length=block_length)

    def decorator(cls: D) -> D:
        require_algorithm(
            algorithm,
            f"{cls.__qualname__} not supported"
            + (" without the extended provider" if requires_extended else ""),
            requires_extended=requires_extended,
            registry=registry,
        )
        DESCRIPTORS.attach(cls, descriptor)
        get_logger().debug("Registered %s as %s", cls.__qualname__, algorithm)
        return cls

    return decorator
