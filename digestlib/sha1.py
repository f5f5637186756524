"""SHA-1 message digest (FIPS 180-4)."""

from .digests import DigestBase, register_digest


@register_digest("SHA1", block_length=64)
class SHA1(DigestBase):
    pass


__all__ = ["SHA1"]
