"""
RIPEMD-160 message digest.

Requires the extended provider (pycryptodome). Importing this module
without it raises AlgorithmUnavailable, an ImportError.
"""

from .digests import DigestBase, register_digest


@register_digest("RIPEMD160", block_length=64, requires_extended=True)
class RMD160(DigestBase):
    pass


__all__ = ["RMD160"]
