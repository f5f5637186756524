"""
Engine-backed digest base class.

Every built-in algorithm type is a DigestBase subclass with a descriptor
attached. DigestBase owns one Engine and implements the primitives by
delegating to it.
"""

from __future__ import annotations

from typing import Any

from ..core.exceptions import AbstractTypeMisuse, UnimplementedPrimitive, UnresolvedDescriptor
from ..core.models.descriptor import AlgorithmDescriptor
from ..encoding import to_bytes
from ..engines.registry import AlgorithmRegistry, get_registry
from .instance import DigestClass
from .metadata import DESCRIPTORS


class DigestBase(DigestClass):
    """
    Abstract base for engine-backed digests.

    Subclasses are bound to an algorithm with @register_digest (or by
    inheriting from a bound type) and otherwise need no code.

    Raises on construction:
        AbstractTypeMisuse: DigestBase itself was instantiated
        UnresolvedDescriptor: No descriptor is bound to the type
        AlgorithmUnavailable: No provider can construct the engine
    """

    def __init__(self, *, registry: AlgorithmRegistry | None = None) -> None:
        cls = type(self)
        if cls is DigestBase:
            raise AbstractTypeMisuse(
                "DigestBase is an abstract class", type_name=cls.__qualname__
            )

        descriptor = DESCRIPTORS.resolve(cls)
        if descriptor is None:
            raise UnresolvedDescriptor(
                f"the {cls.__qualname__}() function is unimplemented on this machine",
                type_name=cls.__qualname__,
            )

        self._descriptor: AlgorithmDescriptor = descriptor
        self._engine = (registry or get_registry()).construct(descriptor.name)

    def __copy__(self) -> DigestBase:
        cls = type(self)
        duplicate = cls.__new__(cls)
        duplicate.__dict__.update(self.__dict__)
        duplicate._engine = self._engine.try_clone()
        return duplicate

    def __deepcopy__(self, memo: dict[int, Any]) -> DigestBase:
        return self.__copy__()

    @property
    def algorithm(self) -> str:
        """Canonical name of the backing algorithm."""
        return self._descriptor.name

    def update(self, data: Any) -> DigestBase:
        self._engine.update(to_bytes(data))
        return self

    def finish(self) -> bytes:
        return self._engine.digest()

    def reset(self) -> DigestBase:
        self._engine.reset()
        return self

    def digest_length(self) -> int:
        return self._engine.digest_length

    def block_length(self) -> int:
        if self._descriptor.block_length is None:
            raise UnimplementedPrimitive(type(self).__qualname__, "block_length")
        return self._descriptor.block_length
