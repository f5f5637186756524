"""
Digest instance protocol.

DigestInstance declares four primitive operations (update, finish,
reset, block_length) and derives everything else from them: one-shot
digests, hex and Bubble Babble output, equality, representation and
duplication. DigestClass adds the class-level one-shot calls.

A digest implementation only has to supply the primitives:

    class Adler32(DigestClass):
        def __init__(self):
            self._value = 1
        def update(self, data):
            self._value = zlib.adler32(to_bytes(data), self._value)
            return self
        def finish(self):
            return self._value.to_bytes(4, "big")
        def reset(self):
            self._value = 1
            return self

    Adler32.hexdigest(b"abc")  # '024d0127'
"""

from __future__ import annotations

import copy
from pathlib import Path
from typing import Any

from ..core.dispatch import dualmethod
from ..core.exceptions import EmptyInput, UnimplementedPrimitive
from ..encoding import bubblebabble, hexencode

_MISSING: Any = object()

FILE_CHUNK_SIZE = 1024 * 1024


class DigestInstance:
    """Shared digest protocol built on four primitives."""

    # Mutable running state; instances are not usable as dict keys
    __hash__ = None  # type: ignore[assignment]

    def _unimplemented(self, operation: str) -> UnimplementedPrimitive:
        return UnimplementedPrimitive(type(self).__qualname__, operation)

    # -------------------------------------------------------------------------
    # Primitives
    # -------------------------------------------------------------------------

    def update(self, data: Any) -> DigestInstance:
        """Feed data into the running state. Returns self for chaining."""
        raise self._unimplemented("update")

    def finish(self) -> bytes:
        """Digest of all data fed since the last reset. Does not reset."""
        raise self._unimplemented("finish")

    def reset(self) -> DigestInstance:
        """Return the running state to its initial condition."""
        raise self._unimplemented("reset")

    def block_length(self) -> int:
        raise self._unimplemented("block_length")

    # -------------------------------------------------------------------------
    # Derived operations
    # -------------------------------------------------------------------------

    def __lshift__(self, data: Any) -> DigestInstance:
        return self.update(data)

    def digest_length(self) -> int:
        return len(self.digest())

    def length(self) -> int:
        return self.digest_length()

    size = length

    def __len__(self) -> int:
        return self.digest_length()

    def digest(self, data: Any = None) -> bytes:
        """
        Return a digest without disturbing the instance.

        With data, the instance is reset, fed data, finished and reset
        again. Without data, a copy of the instance is finished so the
        accumulated state survives.
        """
        if data is not None:
            self.reset()
            self.update(data)
            value = self.finish()
            self.reset()
            return value

        return self.copy().finish()

    def digest_and_reset(self) -> bytes:
        """Return the digest of the accumulated data and reset."""
        value = self.finish()
        self.reset()
        return value

    def hexdigest(self, data: Any = None) -> str:
        return hexencode(self.digest(data))

    def hexdigest_and_reset(self) -> str:
        return hexencode(self.digest_and_reset())

    def bubblebabble(self, data: Any = None) -> str:
        return bubblebabble(self.digest(data))

    def file(self, path: str | Path) -> DigestInstance:
        """Feed the contents of a file. Returns self."""
        with open(path, "rb") as f:
            for chunk in iter(lambda: f.read(FILE_CHUNK_SIZE), b""):
                self.update(chunk)
        return self

    def copy(self) -> DigestInstance:
        """Return an independent duplicate, running state included.

        Mutable state is deep-copied; engine-backed types clone their
        engine in __deepcopy__.
        """
        return copy.deepcopy(self)

    def new(self) -> DigestInstance:
        """Return a duplicate in its initial state."""
        duplicate = self.copy()
        duplicate.reset()
        return duplicate

    def __eq__(self, other: object) -> bool:
        if other is None:
            return False
        if isinstance(other, DigestInstance):
            mine: bytes | str = self.digest()
            theirs: bytes | str = other.digest()
        else:
            mine = self.hexdigest()
            if isinstance(other, (bytes, bytearray)):
                theirs = bytes(other).decode("latin-1")
            else:
                theirs = str(other)
        return len(mine) == len(theirs) and mine == theirs

    def __str__(self) -> str:
        return self.hexdigest()

    def __repr__(self) -> str:
        return f"<{type(self).__name__}: {self.hexdigest()}>"


class DigestClass(DigestInstance):
    """DigestInstance plus class-level one-shot calls.

    ``SHA256.hexdigest(b"abc")`` constructs a transient instance, feeds
    it and discards it. Extra positional and keyword arguments are
    passed to the constructor.
    """

    digest = dualmethod(DigestInstance.digest)

    @digest.classlevel
    def digest(cls, data: Any = _MISSING, *args: Any, **kwargs: Any) -> bytes:
        if data is _MISSING or data is None:
            raise EmptyInput("no data given", context={"type": cls.__qualname__})
        return cls(*args, **kwargs).digest(data)

    hexdigest = dualmethod(DigestInstance.hexdigest)

    @hexdigest.classlevel
    def hexdigest(cls, data: Any = _MISSING, *args: Any, **kwargs: Any) -> str:
        return hexencode(cls.digest(data, *args, **kwargs))

    bubblebabble = dualmethod(DigestInstance.bubblebabble)

    @bubblebabble.classlevel
    def bubblebabble(cls, data: Any = _MISSING, *args: Any, **kwargs: Any) -> str:
        return bubblebabble(cls.digest(data, *args, **kwargs))

    file = dualmethod(DigestInstance.file)

    @file.classlevel
    def file(cls, path: str | Path, *args: Any, **kwargs: Any) -> DigestInstance:
        return cls(*args, **kwargs).file(path)
