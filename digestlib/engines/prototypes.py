"""
Engine prototype cache.

Constructing a hasher through hashlib.new() walks OpenSSL's algorithm
lookup every time. For the standard algorithms the cache keeps one
pristine engine per name, proven copyable at probe time, and hands out
copies of it instead.
"""

from __future__ import annotations

import threading
from collections.abc import Iterable, Mapping
from types import MappingProxyType

from ..core.di import get_logger
from ..core.exceptions import DigestException
from .engine import Engine
from .providers import DigestProvider, HashlibProvider

# Closed set probed against the default provider. Anything else is
# never cached.
PROBE_ALGORITHMS = ("MD2", "MD5", "SHA1", "SHA-256", "SHA-384", "SHA-512")


class PrototypeCache:
    """
    Read-only mapping of canonical name to a duplicable prototype engine.

    The probe runs once, on first use, under a lock. Afterwards the
    mapping is immutable, so concurrent lookups need no locking.

    Example:
        cache = PrototypeCache()
        engine = cache.duplicate("SHA-256")  # independent Engine, or None
    """

    def __init__(
        self,
        provider: DigestProvider | None = None,
        algorithms: Iterable[str] = PROBE_ALGORITHMS,
    ) -> None:
        """
        Args:
            provider: Provider to probe (defaults to hashlib)
            algorithms: Canonical names to probe
        """
        self._provider = provider or HashlibProvider()
        self._algorithms = tuple(algorithms)
        self._prototypes: Mapping[str, Engine] | None = None
        self._lock = threading.Lock()

    def _load(self) -> Mapping[str, Engine]:
        if self._prototypes is None:
            with self._lock:
                if self._prototypes is None:
                    self._prototypes = MappingProxyType(self._probe())
        return self._prototypes

    def _probe(self) -> dict[str, Engine]:
        """Keep only the names that can be both constructed and copied."""
        logger = get_logger()
        found: dict[str, Engine] = {}
        for name in self._algorithms:
            try:
                engine = self._provider.create(name)
                engine.prime()
            except DigestException as e:
                logger.debug("%s not clonable: %s", name, e)
                continue
            found[name] = engine
        logger.debug("Prototype cache holds: %s", ", ".join(found) or "(none)")
        return found

    @property
    def loaded(self) -> bool:
        """Whether the probe has already run."""
        return self._prototypes is not None

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(self._load())

    def duplicate(self, algorithm: str) -> Engine | None:
        """
        Return a fresh copy of the prototype for algorithm, or None.

        Raises:
            DuplicationFailure: If copying fails despite a successful probe
        """
        prototype = self._load().get(algorithm)
        if prototype is None:
            return None
        return prototype.try_clone()

    def __contains__(self, algorithm: str) -> bool:
        return algorithm in self._load()

    def __len__(self) -> int:
        return len(self._load())


_shared_cache: PrototypeCache | None = None
_shared_lock = threading.Lock()


def get_prototype_cache() -> PrototypeCache:
    """Return the process-wide prototype cache."""
    global _shared_cache
    if _shared_cache is None:
        with _shared_lock:
            if _shared_cache is None:
                _shared_cache = PrototypeCache()
    return _shared_cache
