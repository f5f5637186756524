"""
Bubble Babble pseudo-digest.

Not a hash: the "digest" is the Bubble Babble rendering of all bytes
fed so far, which lets the encoding be used anywhere a digest type is
expected.

    BubbleBabble.digest(b"")  # b'xexax'
"""

from .digests import DigestBase, register_digest


@register_digest("BubbleBabble", block_length=64)
class BubbleBabble(DigestBase):
    pass


__all__ = ["BubbleBabble"]
