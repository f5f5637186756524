"""
Unit tests for engines, providers, the prototype cache and the registry.

Tests verify:
- Engine clones are independent and reset restores the initial state
- Providers map canonical names and fail with AlgorithmUnavailable
- The prototype cache probes once, drops failures and logs them
- The registry prefers prototypes, then walks the provider chain in order
"""

import hashlib
import threading
import time
import zlib
from typing import Any
from unittest.mock import ANY, MagicMock

import pytest

from digestlib.core.container import get_container
from digestlib.core.exceptions import AlgorithmUnavailable, DuplicationFailure
from digestlib.core.interfaces.logger import ILogger
from digestlib.engines import (
    AlgorithmRegistry,
    DigestProvider,
    Engine,
    ExtendedProvider,
    HashlibProvider,
    PrototypeCache,
    PseudoDigestProvider,
    canonical_name,
    get_registry,
)


class CountingProvider(HashlibProvider):
    """hashlib provider that records every hasher it creates."""

    def __init__(self) -> None:
        self.calls: list[str] = []
        self._lock = threading.Lock()

    def create_hasher(self, algorithm: str) -> Any:
        with self._lock:
            self.calls.append(algorithm)
        return super().create_hasher(algorithm)


class Crc32Hasher:
    """Hasher without copy(), so engines built on it cannot be cloned."""

    digest_size = 4

    def __init__(self) -> None:
        self._value = 0

    def update(self, data: bytes) -> None:
        self._value = zlib.crc32(data, self._value)

    def digest(self) -> bytes:
        return self._value.to_bytes(4, "big")


class Crc32Provider(DigestProvider):
    """Provider that furnishes a non-copyable hasher for every name."""

    @property
    def name(self) -> str:
        return "crc32"

    @property
    def algorithms(self) -> tuple[str, ...]:
        return ("CRC32",)

    def create_hasher(self, algorithm: str) -> Any:
        return Crc32Hasher()


class TestEngine:
    """Tests for the Engine wrapper."""

    def test_digest_does_not_reset(self):
        """digest() can be called repeatedly and updates continue afterwards."""
        engine = HashlibProvider().create("MD5")
        engine.update(b"ab")
        first = engine.digest()
        assert engine.digest() == first
        engine.update(b"c")
        assert engine.digest() == hashlib.md5(b"abc").digest()

    def test_reset_restores_initial_state(self):
        """reset() discards everything fed so far."""
        engine = HashlibProvider().create("SHA1")
        engine.update(b"discarded")
        engine.reset()
        assert engine.digest() == hashlib.sha1(b"").digest()

    def test_reset_copies_pristine_state(self):
        """Only the first reset goes back to the provider."""
        provider = CountingProvider()
        engine = provider.create("MD5")
        for _ in range(3):
            engine.update(b"abc")
            engine.reset()

        assert provider.calls == ["MD5", "MD5"]
        assert engine.digest() == hashlib.md5(b"").digest()

    def test_prototype_duplicates_reset_without_provider(self):
        """Engines copied from a prototype reset from the shared pristine state."""
        provider = CountingProvider()
        cache = PrototypeCache(provider=provider, algorithms=("SHA1",))
        engine = cache.duplicate("SHA1")
        engine.update(b"abc")
        engine.reset()
        engine.reset()

        assert provider.calls == ["SHA1"]
        assert engine.digest() == hashlib.sha1(b"").digest()

    def test_reset_without_copy_uses_factory(self):
        """Non-copyable hashers are rebuilt on every reset."""
        engine = Crc32Provider().create("CRC32")
        engine.update(b"abc")
        engine.reset()
        assert engine.digest() == b"\x00\x00\x00\x00"

    def test_clone_is_independent(self):
        """Updates to a clone never reach the original and vice versa."""
        original = HashlibProvider().create("SHA-256")
        original.update(b"shared")
        clone = original.try_clone()

        original.update(b"-x")
        clone.update(b"-y")

        assert original.digest() == hashlib.sha256(b"shared-x").digest()
        assert clone.digest() == hashlib.sha256(b"shared-y").digest()

    def test_clone_keeps_algorithm_and_provider(self):
        """Clones report the same algorithm and provider."""
        clone = HashlibProvider().create("MD5").try_clone()
        assert clone.algorithm == "MD5"
        assert clone.provider == "hashlib"

    def test_clone_without_copy_raises_duplication_failure(self):
        """A hasher lacking copy() yields DuplicationFailure naming the algorithm."""
        engine = Crc32Provider().create("CRC32")
        with pytest.raises(DuplicationFailure) as exc_info:
            engine.try_clone()
        assert exc_info.value.algorithm == "CRC32"
        assert "CRC32" in str(exc_info.value)

    def test_digest_length_and_block_size(self):
        """Lengths come from the underlying hasher."""
        engine = HashlibProvider().create("SHA-512")
        assert engine.digest_length == 64
        assert engine.block_size == 128

    def test_repr(self):
        """repr names algorithm and provider."""
        assert repr(HashlibProvider().create("MD5")) == "Engine('MD5', provider='hashlib')"


class TestProviders:
    """Tests for the provider implementations."""

    def test_hashlib_unknown_name(self):
        """hashlib provider rejects names it has no mapping for."""
        with pytest.raises(AlgorithmUnavailable) as exc_info:
            HashlibProvider().create("WHIRLPOOL")
        assert exc_info.value.algorithm == "WHIRLPOOL"

    def test_hashlib_known_names(self):
        """hashlib provider constructs the standard algorithms."""
        provider = HashlibProvider()
        for name in ("MD5", "SHA1", "SHA-256", "SHA-384", "SHA-512"):
            assert isinstance(provider.create(name), Engine)

    def test_extended_provider_is_marked(self):
        """Only the extended provider reports extended=True."""
        assert ExtendedProvider.extended is True
        assert HashlibProvider.extended is False

    def test_extended_provider_furnishes_ripemd160(self):
        """pycryptodome supplies RIPEMD-160."""
        pytest.importorskip("Crypto.Hash.RIPEMD160")
        engine = ExtendedProvider().create("RIPEMD160")
        engine.update(b"")
        assert engine.digest().hex() == "9c1185a5c5e9fc54612808977ee8f548b2258d31"

    def test_extended_provider_furnishes_blake3(self):
        """blake3 supplies BLAKE3."""
        pytest.importorskip("blake3")
        engine = ExtendedProvider().create("BLAKE3")
        assert engine.digest_length == 32

    def test_pseudo_provider_bubblebabble(self):
        """The pseudo provider renders buffered input as Bubble Babble."""
        engine = PseudoDigestProvider().create("BubbleBabble")
        assert engine.digest() == b"xexax"
        engine.update(b"1234567890")
        assert engine.digest() == b"xesef-disof-gytuf-katof-movif-baxux"

    def test_pseudo_provider_rejects_real_algorithms(self):
        """The pseudo provider only knows BubbleBabble."""
        with pytest.raises(AlgorithmUnavailable):
            PseudoDigestProvider().create("MD5")

    @pytest.mark.parametrize(
        ("given", "expected"),
        [
            ("md5", "MD5"),
            ("sha-1", "SHA1"),
            ("sha256", "SHA-256"),
            ("SHA-512", "SHA-512"),
            ("rmd160", "RIPEMD160"),
            ("ripemd-160", "RIPEMD160"),
            ("bubblebabble", "BubbleBabble"),
        ],
    )
    def test_canonical_name(self, given, expected):
        """Aliases and case variants normalize to canonical names."""
        assert canonical_name(given) == expected


class TestPrototypeCache:
    """Tests for the engine prototype cache."""

    def test_probe_keeps_clonable_names(self):
        """Constructible, copyable algorithms are cached."""
        cache = PrototypeCache(algorithms=("MD5", "SHA1"))
        assert cache.names == ("MD5", "SHA1")
        assert "MD5" in cache
        assert len(cache) == 2

    def test_probe_drops_and_logs_failures(self):
        """Names the provider cannot furnish are dropped and logged, not raised."""
        logger = MagicMock(spec=ILogger)
        get_container().register_singleton(ILogger, implementation=logger)

        cache = PrototypeCache(algorithms=("NOPE", "MD5"))

        assert cache.names == ("MD5",)
        logger.debug.assert_any_call("%s not clonable: %s", "NOPE", ANY)

    def test_probe_drops_non_copyable_engines(self):
        """An engine that cannot be duplicated is never cached."""
        cache = PrototypeCache(provider=Crc32Provider(), algorithms=("CRC32",))
        assert cache.names == ()
        assert cache.duplicate("CRC32") is None

    def test_probe_is_lazy(self):
        """Nothing is probed until the cache is first consulted."""
        provider = CountingProvider()
        cache = PrototypeCache(provider=provider, algorithms=("MD5",))
        assert not cache.loaded
        assert provider.calls == []

        cache.duplicate("MD5")
        assert cache.loaded
        assert provider.calls == ["MD5"]

    def test_duplicates_never_touch_the_prototype(self):
        """Mutating a duplicate leaves later duplicates pristine."""
        cache = PrototypeCache(algorithms=("SHA-256",))
        first = cache.duplicate("SHA-256")
        first.update(b"dirty")
        second = cache.duplicate("SHA-256")
        assert second.digest() == hashlib.sha256(b"").digest()

    def test_uncached_name_returns_none(self):
        """Names outside the probe set are not served."""
        cache = PrototypeCache(algorithms=("MD5",))
        assert cache.duplicate("SHA1") is None

    def test_concurrent_first_use_probes_once(self):
        """Many threads racing on first use trigger a single probe."""
        provider = CountingProvider()
        cache = PrototypeCache(provider=provider, algorithms=("MD5", "SHA1"))
        barrier = threading.Barrier(8)

        def worker():
            barrier.wait()
            cache.duplicate("MD5")

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert sorted(provider.calls) == ["MD5", "SHA1"]


class TestAlgorithmRegistry:
    """Tests for AlgorithmRegistry.construct and helpers."""

    def test_prefers_prototype_over_provider(self):
        """Cached algorithms are served by copying, not by the provider."""
        probe_provider = CountingProvider()
        fallback = CountingProvider()
        registry = AlgorithmRegistry(register_defaults=False)
        registry.use_prototypes(PrototypeCache(provider=probe_provider, algorithms=("MD5",)))
        registry.register(fallback)

        registry.construct("MD5")
        registry.construct("md5")

        assert probe_provider.calls == ["MD5"]
        assert fallback.calls == []

    def test_uncached_algorithm_uses_provider(self):
        """Names outside the cache go to the provider chain each time."""
        fallback = CountingProvider()
        registry = AlgorithmRegistry(register_defaults=False)
        registry.use_prototypes(PrototypeCache(algorithms=("MD5",)))
        registry.register(fallback)

        registry.construct("SHA1")
        registry.construct("SHA1")

        assert fallback.calls == ["SHA1", "SHA1"]

    def test_provider_chain_order(self):
        """The first provider that can furnish the name wins."""
        registry = AlgorithmRegistry(register_defaults=False)
        registry.register(PseudoDigestProvider())
        registry.register(HashlibProvider())

        assert registry.construct("MD5").provider == "hashlib"
        assert registry.construct("BubbleBabble").provider == "pseudo"

    def test_unavailable_algorithm(self, hashlib_registry):
        """No provider furnishing the name raises AlgorithmUnavailable."""
        with pytest.raises(AlgorithmUnavailable) as exc_info:
            hashlib_registry.construct("WHIRLPOOL")
        assert exc_info.value.algorithm == "WHIRLPOOL"
        assert exc_info.value.context["providers"] == ["hashlib"]

    def test_prototype_copy_failure_falls_back(self):
        """A prototype that fails to copy falls through to the providers."""
        cache = MagicMock(spec=PrototypeCache)
        cache.duplicate.side_effect = DuplicationFailure("boom", algorithm="MD5")
        registry = AlgorithmRegistry(register_defaults=False)
        registry.use_prototypes(cache)
        registry.register(HashlibProvider())

        assert registry.construct("MD5").provider == "hashlib"

    def test_defaults_include_extended_provider(self):
        """The default registry consults the extended provider first."""
        pytest.importorskip("Crypto.Hash.RIPEMD160")
        registry = AlgorithmRegistry()
        assert registry.has_extended_provider
        assert registry.providers[0].name == "extended"
        assert registry.construct("RIPEMD160").provider == "extended"

    def test_provider_for(self):
        """provider_for reports prototypes, providers, or None."""
        registry = AlgorithmRegistry(register_defaults=False)
        registry.use_prototypes(PrototypeCache(algorithms=("MD5",)))
        registry.register(HashlibProvider())

        assert registry.provider_for("MD5") == "prototype"
        assert registry.provider_for("SHA1") == "hashlib"
        assert registry.provider_for("WHIRLPOOL") is None

    def test_shared_registry_built_once_under_contention(self, monkeypatch):
        """Threads racing on get_registry() all receive the same registry."""
        built = []
        original = AlgorithmRegistry.from_config.__func__

        def slow_from_config(cls, config):
            time.sleep(0.05)
            registry = original(cls, config)
            built.append(registry)
            return registry

        monkeypatch.setattr(AlgorithmRegistry, "from_config", classmethod(slow_from_config))
        barrier = threading.Barrier(6)
        seen = []

        def worker():
            barrier.wait()
            seen.append(get_registry())

        threads = [threading.Thread(target=worker) for _ in range(6)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(built) == 1
        assert all(registry is built[0] for registry in seen)

    def test_available_algorithms_and_contains(self, hashlib_registry):
        """Only constructible algorithms are listed."""
        available = hashlib_registry.available_algorithms
        assert "MD5" in available
        assert "SHA-256" in available
        assert "BubbleBabble" not in available
        assert "sha256" in hashlib_registry
        assert "WHIRLPOOL" not in hashlib_registry
