"""
Descriptor table.

Each concrete digest type is bound to one AlgorithmDescriptor. A
subclass of a concrete type inherits its parent's binding, so lookups
fall back along the class MRO.
"""

from __future__ import annotations

import threading

from ..core.models.descriptor import AlgorithmDescriptor


class DescriptorTable:
    """Explicit mapping from digest type to its descriptor."""

    def __init__(self) -> None:
        self._descriptors: dict[type, AlgorithmDescriptor] = {}
        self._lock = threading.Lock()

    def attach(self, cls: type, descriptor: AlgorithmDescriptor) -> None:
        """
        Bind a descriptor to a type.

        Raises:
            ValueError: If the type already has its own descriptor
        """
        with self._lock:
            existing = self._descriptors.get(cls)
            if existing is not None and existing != descriptor:
                raise ValueError(f"{cls.__qualname__} is already bound to {existing.name}")
            self._descriptors[cls] = descriptor

    def own(self, cls: type) -> AlgorithmDescriptor | None:
        """Descriptor attached directly to cls, ignoring ancestors."""
        return self._descriptors.get(cls)

    def resolve(self, cls: type) -> AlgorithmDescriptor | None:
        """First descriptor found walking cls.__mro__, or None."""
        for candidate in cls.__mro__:
            descriptor = self._descriptors.get(candidate)
            if descriptor is not None:
                return descriptor
        return None

    def detach(self, cls: type) -> None:
        """Remove cls's own binding, if any."""
        with self._lock:
            self._descriptors.pop(cls, None)

    def __contains__(self, cls: type) -> bool:
        return self.resolve(cls) is not None

    def items(self) -> list[tuple[type, AlgorithmDescriptor]]:
        return list(self._descriptors.items())


DESCRIPTORS = DescriptorTable()
