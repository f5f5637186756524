"""
Text encodings for digest output.

hexencode() renders bytes as lowercase hexadecimal. bubblebabble()
implements Antti Huima's Bubble Babble encoding, the pronounceable
fingerprint format used by OpenSSH and Ruby's digest library.
"""

from __future__ import annotations

from typing import Any

_VOWELS = "aeiouy"
_CONSONANTS = "bcdfghklmnprstvzx"


def to_bytes(data: Any) -> bytes:
    """Coerce digest input to bytes.

    str is encoded as UTF-8; any bytes-like object is accepted as-is.

    Raises:
        TypeError: If data is neither str nor bytes-like
    """
    if isinstance(data, bytes):
        return data
    if isinstance(data, str):
        return data.encode("utf-8")
    try:
        return bytes(memoryview(data))
    except TypeError:
        raise TypeError(
            f"digest input must be str or bytes-like, not {type(data).__name__}"
        ) from None


def hexencode(data: Any) -> str:
    """Encode data as a lowercase hexadecimal string."""
    return to_bytes(data).hex()


def bubblebabble(data: Any) -> str:
    """Encode data in Bubble Babble.

    Example:
        >>> bubblebabble(b"")
        'xexax'
        >>> bubblebabble(b"1234567890")
        'xesef-disof-gytuf-katof-movif-baxux'
    """
    raw = to_bytes(data)
    length = len(raw)
    rounds = length // 2 + 1
    seed = 1
    out = ["x"]

    for i in range(rounds):
        if i + 1 < rounds or length % 2:
            byte1 = raw[2 * i]
            out.append(_VOWELS[(((byte1 >> 6) & 3) + seed) % 6])
            out.append(_CONSONANTS[(byte1 >> 2) & 15])
            out.append(_VOWELS[((byte1 & 3) + seed // 6) % 6])
            if i + 1 < rounds:
                byte2 = raw[2 * i + 1]
                out.append(_CONSONANTS[(byte2 >> 4) & 15])
                out.append("-")
                out.append(_CONSONANTS[byte2 & 15])
                seed = (seed * 5 + byte1 * 7 + byte2) % 36
        else:
            # Odd tail marker: consonant index 16 is 'x'
            out.append(_VOWELS[seed % 6])
            out.append(_CONSONANTS[16])
            out.append(_VOWELS[seed // 6])

    out.append("x")
    return "".join(out)
