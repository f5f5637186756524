"""BLAKE3 digest with the default 32-byte output (requires the blake3 package)."""

from .digests import DigestBase, register_digest


@register_digest("BLAKE3", block_length=64, requires_extended=True)
class BLAKE3(DigestBase):
    pass


__all__ = ["BLAKE3"]
