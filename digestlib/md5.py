"""MD5 message digest (RFC 1321)."""

from .digests import DigestBase, register_digest


@register_digest("MD5", block_length=64)
class MD5(DigestBase):
    """MD5 digest. Broken for collision resistance; use for checksums only."""


__all__ = ["MD5"]
