"""
Digest protocol, the engine-backed base class, and type registration.
"""

from .base import DigestBase
from .instance import DigestClass, DigestInstance
from .metadata import DESCRIPTORS, DescriptorTable
from .registration import register_digest, require_algorithm

__all__ = [
    "DESCRIPTORS",
    "DescriptorTable",
    "DigestBase",
    "DigestClass",
    "DigestInstance",
    "register_digest",
    "require_algorithm",
]
