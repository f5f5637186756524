"""
SHA-2 family digests (FIPS 180-4).

The module only loads if SHA-256 can be constructed; the three types
are defined together.
"""

from .digests import DigestBase, register_digest, require_algorithm

require_algorithm("SHA-256", "SHA2 not supported")


@register_digest("SHA-256", block_length=64)
class SHA256(DigestBase):
    pass


@register_digest("SHA-384", block_length=128)
class SHA384(DigestBase):
    pass


@register_digest("SHA-512", block_length=128)
class SHA512(DigestBase):
    pass


__all__ = ["SHA256", "SHA384", "SHA512"]
