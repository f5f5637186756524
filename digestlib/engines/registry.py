"""
Algorithm registry.

Resolves a canonical algorithm name to a live engine, preferring a copy
of a cached prototype and otherwise walking the provider chain.
"""

from __future__ import annotations

import threading

from ..core.di import get_logger, resolve_or_default
from ..core.exceptions import AlgorithmUnavailable, DuplicationFailure
from ..core.models.config import ProvidersConfig
from .engine import Engine
from .prototypes import PrototypeCache, get_prototype_cache
from .providers import (
    DigestProvider,
    ExtendedProvider,
    HashlibProvider,
    PseudoDigestProvider,
    canonical_name,
)


class AlgorithmRegistry:
    """
    Registry of engine providers, queried in registration order.

    Example:
        registry = AlgorithmRegistry()
        engine = registry.construct("SHA-256")

        # Only hashlib, no prototypes
        registry = AlgorithmRegistry(register_defaults=False)
        registry.register(HashlibProvider())
    """

    def __init__(self, register_defaults: bool = True):
        """
        Initialize the registry.

        Args:
            register_defaults: If True, use the shared prototype cache and
                register the extended (when installed), hashlib and
                pseudo-digest providers
        """
        self._providers: list[DigestProvider] = []
        self._prototypes: PrototypeCache | None = None
        if register_defaults:
            self._register_defaults(ProvidersConfig())

    @classmethod
    def from_config(cls, config: ProvidersConfig) -> AlgorithmRegistry:
        """Build a registry honoring the [providers] configuration section."""
        registry = cls(register_defaults=False)
        registry._register_defaults(config)
        return registry

    def _register_defaults(self, config: ProvidersConfig) -> None:
        if config.prototype_cache:
            self.use_prototypes(get_prototype_cache())
        if config.extended:
            extended = ExtendedProvider()
            if extended.installed:
                self.register(extended)
            else:
                get_logger().info("Extended digest provider not installed")
        self.register(HashlibProvider())
        self.register(PseudoDigestProvider())

    def register(self, provider: DigestProvider) -> None:
        """Append a provider to the end of the chain."""
        self._providers.append(provider)

    def use_prototypes(self, cache: PrototypeCache | None) -> None:
        """Set (or with None, disable) the prototype cache consulted first."""
        self._prototypes = cache

    @property
    def providers(self) -> tuple[DigestProvider, ...]:
        return tuple(self._providers)

    @property
    def prototypes(self) -> PrototypeCache | None:
        return self._prototypes

    @property
    def has_extended_provider(self) -> bool:
        return any(p.extended for p in self._providers)

    def has_extended_support(self, algorithm: str) -> bool:
        """Whether an extended provider lists algorithm among its own."""
        name = canonical_name(algorithm)
        return any(p.extended and name in p.algorithms for p in self._providers)

    def construct(self, algorithm: str) -> Engine:
        """
        Construct a fresh engine for the given algorithm.

        Args:
            algorithm: Algorithm name (canonical or alias, e.g. 'sha256')

        Returns:
            Engine in its initial state, owned by the caller

        Raises:
            AlgorithmUnavailable: If no provider furnishes the algorithm
        """
        name = canonical_name(algorithm)
        logger = get_logger()

        if self._prototypes is not None:
            try:
                engine = self._prototypes.duplicate(name)
            except DuplicationFailure as e:
                # Copying was proven at probe time; fall through to providers
                logger.warning("Prototype for %s failed to copy: %s", name, e)
                engine = None
            if engine is not None:
                return engine

        tried = []
        for provider in self._providers:
            try:
                engine = provider.create(name)
            except AlgorithmUnavailable as e:
                logger.debug("Provider %s cannot furnish %s: %s", provider.name, name, e)
                tried.append(provider.name)
                continue
            logger.debug("Constructed %s via %s provider", name, provider.name)
            return engine

        raise AlgorithmUnavailable(
            f"No provider furnishes {name}",
            algorithm=name,
            context={"providers": tried},
        )

    def is_available(self, algorithm: str) -> bool:
        """Check whether construct() would succeed for algorithm."""
        try:
            self.construct(algorithm)
        except AlgorithmUnavailable:
            return False
        return True

    def provider_for(self, algorithm: str) -> str | None:
        """Name of the source construct() uses for algorithm, or None."""
        name = canonical_name(algorithm)
        if self._prototypes is not None and name in self._prototypes:
            return "prototype"
        for provider in self._providers:
            try:
                provider.create(name)
            except AlgorithmUnavailable:
                continue
            return provider.name
        return None

    @property
    def available_algorithms(self) -> list[str]:
        """List canonical names that can currently be constructed."""
        names: list[str] = []
        known = list(self._prototypes.names) if self._prototypes is not None else []
        for provider in self._providers:
            known.extend(provider.algorithms)
        for name in known:
            if name not in names and self.is_available(name):
                names.append(name)
        return names

    def __contains__(self, algorithm: str) -> bool:
        return self.is_available(algorithm)


_default_registry: AlgorithmRegistry | None = None
_registry_lock = threading.Lock()


def _shared_registry() -> AlgorithmRegistry:
    global _default_registry
    if _default_registry is None:
        with _registry_lock:
            if _default_registry is None:
                from ..core.settings import load_settings

                _default_registry = AlgorithmRegistry.from_config(load_settings().providers)
    return _default_registry


def get_registry() -> AlgorithmRegistry:
    """Return the bootstrapped registry, or a shared one built from settings."""
    return resolve_or_default(AlgorithmRegistry, _shared_registry)


def reset_registry() -> None:
    """Drop the shared registry so the next lookup re-reads settings."""
    global _default_registry
    _default_registry = None
