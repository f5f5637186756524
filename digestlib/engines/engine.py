"""
Mutable digest engine.

An Engine wraps one provider hasher object (hashlib, pycryptodome or
blake3) behind the small contract every digest type builds on:
update, digest, reset, digest_length and try_clone.
"""

from __future__ import annotations

import contextlib
from collections.abc import Callable
from typing import Any

from ..core.exceptions import DuplicationFailure


class Engine:
    """
    One running hash computation.

    Attributes:
        algorithm: Canonical algorithm name (e.g. 'SHA-256')
        provider: Name of the provider that furnished the hasher
    """

    __slots__ = ("_factory", "_hasher", "_pristine", "algorithm", "provider")

    def __init__(
        self,
        algorithm: str,
        hasher: Any,
        factory: Callable[[], Any],
        provider: str,
        pristine: Any = None,
    ) -> None:
        """
        Args:
            algorithm: Canonical algorithm name
            hasher: Provider hasher object in its initial state
            factory: Zero-argument callable returning a fresh hasher;
                used by reset() until a pristine copy is held
            provider: Name of the furnishing provider
            pristine: Unfed hasher that reset() copies from; shared by
                clones and never updated
        """
        self.algorithm = algorithm
        self.provider = provider
        self._hasher = hasher
        self._factory = factory
        self._pristine = pristine

    def update(self, data: bytes) -> None:
        self._hasher.update(data)

    def digest(self) -> bytes:
        """Digest of everything fed since the last reset. Does not reset."""
        return self._hasher.digest()

    def reset(self) -> None:
        if self._pristine is not None:
            self._hasher = _copy_hasher(self._pristine)
            return
        fresh = self._factory()
        with contextlib.suppress(DuplicationFailure):
            self._pristine = _copy_hasher(fresh)
        self._hasher = fresh

    def prime(self) -> None:
        """
        Keep a pristine copy of the current (unfed) state for reset().

        Raises:
            DuplicationFailure: If the hasher cannot be copied
        """
        if self._pristine is None:
            self._pristine = self._clone_hasher()

    @property
    def digest_length(self) -> int:
        size = getattr(self._hasher, "digest_size", None)
        if size is None:
            return len(self.digest())
        return size

    @property
    def block_size(self) -> int | None:
        return getattr(self._hasher, "block_size", None)

    def try_clone(self) -> Engine:
        """
        Return an independent copy of this engine, running state included.

        Raises:
            DuplicationFailure: If the underlying hasher cannot be copied
        """
        return Engine(
            self.algorithm, self._clone_hasher(), self._factory, self.provider, self._pristine
        )

    def _clone_hasher(self) -> Any:
        try:
            return _copy_hasher(self._hasher)
        except DuplicationFailure as e:
            raise DuplicationFailure(
                f"Could not initialize copy of digest ({self.algorithm})",
                algorithm=self.algorithm,
                cause=e.__cause__,
            ) from e.__cause__

    def __repr__(self) -> str:
        return f"Engine({self.algorithm!r}, provider={self.provider!r})"


def _copy_hasher(hasher: Any) -> Any:
    copier = getattr(hasher, "copy", None)
    if copier is None:
        raise DuplicationFailure(f"{type(hasher).__name__} has no copy()")
    try:
        return copier()
    except (TypeError, ValueError, NotImplementedError) as e:
        raise DuplicationFailure(f"{type(hasher).__name__}.copy() failed", cause=e) from e
