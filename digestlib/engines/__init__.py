"""
Digest engines, their providers, and the registry that picks between them.
"""

from .engine import Engine
from .prototypes import PROBE_ALGORITHMS, PrototypeCache, get_prototype_cache
from .providers import (
    DigestProvider,
    ExtendedProvider,
    HashlibProvider,
    PseudoDigestProvider,
    canonical_name,
)
from .registry import AlgorithmRegistry, get_registry, reset_registry

__all__ = [
    "PROBE_ALGORITHMS",
    "AlgorithmRegistry",
    "DigestProvider",
    "Engine",
    "ExtendedProvider",
    "HashlibProvider",
    "PrototypeCache",
    "PseudoDigestProvider",
    "canonical_name",
    "get_prototype_cache",
    "get_registry",
    "reset_registry",
]
